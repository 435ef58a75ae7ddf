import typing
import numpy as np
from scipy import constants

SPEED_OF_LIGHT: float = constants.speed_of_light

# Acceptable light-time disagreement [s] between two iterations
SINGLE_PRECISION_LIGHT_TIME_TOLERANCE = 1.0e-6
DOUBLE_PRECISION_LIGHT_TIME_TOLERANCE = 1.0e-12
EXTENDED_PRECISION_LIGHT_TIME_TOLERANCE = 1.0e-15


O = typing.TypeVar("O", bound=np.floating)


def speed_of_light(scalar_type: type[O]) -> O:

    return scalar_type(SPEED_OF_LIGHT)


def default_light_time_tolerance(
    observation_type: type[np.floating],
    state_type: type[np.floating] | None = None,
) -> float:

    if state_type is None:
        state_type = observation_type

    # The least precise of both types sets the tolerance
    resolution = max(
        np.finfo(observation_type).resolution,
        np.finfo(state_type).resolution,
    )

    if resolution > np.finfo(np.float64).resolution:
        return SINGLE_PRECISION_LIGHT_TIME_TOLERANCE
    if resolution < np.finfo(np.float64).resolution:
        return EXTENDED_PRECISION_LIGHT_TIME_TOLERANCE

    return DOUBLE_PRECISION_LIGHT_TIME_TOLERANCE
