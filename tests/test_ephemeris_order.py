import pytest

from lightlink.propagation import (
    determine_ephemeris_update_order,
    EphemerisUpdateOrderError,
)


def test_simple_chain():

    order = determine_ephemeris_update_order(
        ["A", "B", "C"], ["B", "C", "Sun"], ["B", "C", "Sun"]
    )

    assert order == ["C", "B", "A"]


def test_independent_bodies():

    bodies = ["Mars", "Earth", "Moon", "Phobos"]
    central_bodies = ["Sun", "Sun", "Earth", "Mars"]
    order = determine_ephemeris_update_order(bodies, central_bodies, central_bodies)

    assert sorted(order) == sorted(bodies)
    assert order.index("Earth") < order.index("Moon")
    assert order.index("Mars") < order.index("Phobos")


def test_dependency_through_ephemeris_origin():

    order = determine_ephemeris_update_order(
        ["Spacecraft", "Earth"], ["Sun", "Sun"], ["Earth", "SSB"]
    )

    assert order == ["Earth", "Spacecraft"]


def test_earliest_dependency_is_resolved_first():

    order = determine_ephemeris_update_order(
        ["Spacecraft", "Moon", "Earth"],
        ["Moon", "Earth", "Sun"],
        ["Earth", "Earth", "Sun"],
    )

    assert order == ["Earth", "Moon", "Spacecraft"]


def test_external_references_impose_no_constraint():

    order = determine_ephemeris_update_order(
        ["B", "A"], ["Sun", "SSB"], ["SSB", "Sun"]
    )

    assert order == ["B", "A"]


def test_input_is_not_modified():

    bodies = ["A", "B", "C"]
    central_bodies = ["B", "C", "Sun"]
    ephemeris_origins = ["B", "C", "Sun"]

    determine_ephemeris_update_order(bodies, central_bodies, ephemeris_origins)

    assert bodies == ["A", "B", "C"]
    assert central_bodies == ["B", "C", "Sun"]
    assert ephemeris_origins == ["B", "C", "Sun"]


def test_empty_input():

    assert determine_ephemeris_update_order([], [], []) == []


def test_cycle_detection():

    with pytest.raises(EphemerisUpdateOrderError):
        determine_ephemeris_update_order(["A", "B"], ["B", "A"], ["SSB", "SSB"])


def test_self_reference_is_a_cycle():

    with pytest.raises(EphemerisUpdateOrderError, match="A"):
        determine_ephemeris_update_order(["A"], ["A"], ["SSB"])


def test_cycle_after_resolved_bodies():

    with pytest.raises(EphemerisUpdateOrderError, match="circular"):
        determine_ephemeris_update_order(
            ["Earth", "A", "B"], ["Sun", "B", "A"], ["Sun", "Earth", "Earth"]
        )


def test_inconsistent_input_lengths():

    with pytest.raises(ValueError):
        determine_ephemeris_update_order(["A", "B"], ["Sun"], ["Sun", "Sun"])
