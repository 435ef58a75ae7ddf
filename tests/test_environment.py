import numpy as np
import pytest

from lightlink.environment import (
    Body,
    SystemOfBodies,
    ConstantEphemeris,
    LinearEphemeris,
    CircularEphemeris,
)
from lightlink.propagation import EphemerisUpdateOrderError


def constant(state, origin):
    return ConstantEphemeris(state, frame_origin=origin, frame_orientation="J2000")


@pytest.fixture
def system() -> SystemOfBodies:

    bodies = SystemOfBodies("SSB", "J2000")

    # Added in reverse dependency order on purpose
    bodies.add_body(
        Body("Moon", constant([3.8e8, 0.0, 0.0, 0.0, 1.0e3, 0.0], "Earth"))
    )
    bodies.add_body(
        Body("Earth", constant([1.5e11, 0.0, 0.0, 0.0, 3.0e4, 0.0], "Sun"))
    )
    bodies.add_body(
        Body(
            "Sun",
            constant([1.0e9, 0.0, 0.0, 0.0, 0.0, 0.0], "SSB"),
            gravitational_parameter=1.32712440018e20,
        )
    )

    return bodies


def test_linear_ephemeris():

    ephemeris = LinearEphemeris(
        [1.0, 2.0, 3.0, 0.5, 0.0, -1.0], 10.0, "Earth", "J2000"
    )

    np.testing.assert_allclose(
        ephemeris.cartesian_state(14.0), [3.0, 2.0, -1.0, 0.5, 0.0, -1.0]
    )


def test_circular_ephemeris():

    ephemeris = CircularEphemeris(
        radius=2.0, period=40.0, reference_epoch=0.0,
        frame_origin="Sun", frame_orientation="J2000",
    )
    speed = 2.0 * 2.0 * np.pi / 40.0

    np.testing.assert_allclose(
        ephemeris.cartesian_state(0.0), [2.0, 0.0, 0.0, 0.0, speed, 0.0], atol=1e-12
    )
    np.testing.assert_allclose(
        ephemeris.cartesian_state(10.0), [0.0, 2.0, 0.0, -speed, 0.0, 0.0], atol=1e-12
    )


def test_invalid_ephemerides():

    with pytest.raises(ValueError):
        ConstantEphemeris([0.0, 0.0, 0.0], "SSB", "J2000")
    with pytest.raises(ValueError):
        CircularEphemeris(-1.0, 10.0, 0.0, "SSB", "J2000")


def test_update_order_follows_ephemeris_origins(system):

    assert system.update_order() == ["Sun", "Earth", "Moon"]


def test_global_states(system):

    states = system.global_states(0.0)

    np.testing.assert_allclose(states["Sun"][:3], [1.0e9, 0.0, 0.0])
    np.testing.assert_allclose(states["Earth"][:3], [1.51e11, 0.0, 0.0])
    np.testing.assert_allclose(states["Moon"], [1.5138e11, 0.0, 0.0, 0.0, 3.1e4, 0.0])
    np.testing.assert_allclose(
        system.state_in_global_frame("Moon", 0.0), states["Moon"]
    )
    np.testing.assert_array_equal(system.state_in_global_frame("SSB", 0.0), np.zeros(6))


def test_state_with_respect_to_central_body(system):

    np.testing.assert_allclose(
        system.state_wrt_central_body("Moon", 0.0),
        [3.8e8, 0.0, 0.0, 0.0, 1.0e3, 0.0],
    )
    np.testing.assert_allclose(
        system.state_wrt_central_body("Sun", 0.0), [1.0e9, 0.0, 0.0, 0.0, 0.0, 0.0]
    )


def test_link_end_state_function(system):

    system.get("Earth").add_reference_point("DSS63", [6.371e6, 0.0, 0.0])

    origin = system.link_end_state_function("Earth")
    station = system.link_end_state_function("Earth", "DSS63")

    np.testing.assert_allclose(station(0.0) - origin(0.0), [6.371e6, 0, 0, 0, 0, 0])

    with pytest.raises(KeyError):
        system.link_end_state_function("Earth", "DSS14")
    with pytest.raises(KeyError):
        system.link_end_state_function("Mars")


def test_unknown_ephemeris_origin():

    bodies = SystemOfBodies("SSB", "J2000")
    bodies.add_body(Body("Phobos", constant(np.zeros(6), "Mars")))

    with pytest.raises(KeyError, match="Mars"):
        bodies.global_states(0.0)


def test_cyclic_ephemeris_origins():

    bodies = SystemOfBodies("SSB", "J2000")
    bodies.add_body(Body("A", constant(np.zeros(6), "B")))
    bodies.add_body(Body("B", constant(np.zeros(6), "A")))

    with pytest.raises(EphemerisUpdateOrderError):
        bodies.update_order()


def test_update_order_is_refreshed_when_adding_bodies(system):

    system.update_order()
    system.add_body(Body("Probe", constant(np.zeros(6), "Moon")))

    assert system.update_order()[-1] == "Probe"


def test_invalid_bodies(system):

    with pytest.raises(ValueError):
        system.add_body(Body("Sun", constant(np.zeros(6), "SSB")))

    with pytest.raises(NotImplementedError):
        system.add_body(
            Body("Mars", ConstantEphemeris(np.zeros(6), "Sun", "ECLIPJ2000"))
        )
