import typing
from ..logging import log

MAXIMUM_UPDATE_ORDER_STEPS = 10000


class EphemerisUpdateOrderError(RuntimeError):
    pass


def _first_unresolved_index(
    name: str, bodies: list[str], resolved: list[bool]
) -> int | None:

    for idx, body in enumerate(bodies):
        if not resolved[idx] and body == name:
            return idx

    return None


def determine_ephemeris_update_order(
    integrated_bodies: typing.Sequence[str],
    central_bodies: typing.Sequence[str],
    ephemeris_origins: typing.Sequence[str],
) -> list[str]:
    """Order in which the ephemerides of a set of bodies must be updated.

    Each body is listed after any other body of ``integrated_bodies`` that it
    depends on, either as its central body or as the origin of its
    ephemeris. Central bodies and origins that are not in
    ``integrated_bodies`` impose no constraint.

    :param integrated_bodies: Names of the bodies to order.
    :param central_bodies: Central body of each integrated body.
    :param ephemeris_origins: Ephemeris origin of each integrated body.
    :return: Names of the integrated bodies, dependencies first.
    :raises EphemerisUpdateOrderError: If the dependencies are cyclic.
    """

    if not (len(integrated_bodies) == len(central_bodies) == len(ephemeris_origins)):
        raise ValueError(
            "Inconsistent input for ephemeris update order: "
            f"{len(integrated_bodies)} bodies, {len(central_bodies)} central "
            f"bodies and {len(ephemeris_origins)} ephemeris origins"
        )

    # Private copies of the input, entries are marked instead of erased
    bodies = list(integrated_bodies)
    centers = list(central_bodies)
    origins = list(ephemeris_origins)
    resolved = [False] * len(bodies)

    update_order: list[str] = []
    current_index = 0
    counter = 0

    while len(update_order) < len(bodies):

        # Look for dependencies among the bodies that are still unresolved
        center_index = _first_unresolved_index(
            centers[current_index], bodies, resolved
        )
        origin_index = _first_unresolved_index(
            origins[current_index], bodies, resolved
        )

        if center_index is None and origin_index is None:

            # No dependency left: body can be updated
            update_order.append(bodies[current_index])
            resolved[current_index] = True

            # Continue from the first unresolved body
            if len(update_order) < len(bodies):
                current_index = resolved.index(False)

        else:

            # Continue with the dependency that appears first
            current_index = min(
                idx for idx in (center_index, origin_index) if idx is not None
            )

        # Break circular dependencies caused by inconsistent input
        counter += 1
        if counter > MAXIMUM_UPDATE_ORDER_STEPS:

            unresolved = [
                body for body, is_resolved in zip(bodies, resolved) if not is_resolved
            ]
            raise EphemerisUpdateOrderError(
                "Ephemeris update order determination now at iteration "
                f"{counter}; circular dependency between {unresolved}"
            )

    log.debug(f"Ephemeris update order: {update_order}")

    return update_order
