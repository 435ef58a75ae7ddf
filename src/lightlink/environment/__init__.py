from .interface import system_of_bodies_from_config, BodySettings
from .bodies import Body, SystemOfBodies
from .ephemerides import (
    Ephemeris,
    ConstantEphemeris,
    LinearEphemeris,
    CircularEphemeris,
)

__all__ = [
    "system_of_bodies_from_config",
    "BodySettings",
    "Body",
    "SystemOfBodies",
    "Ephemeris",
    "ConstantEphemeris",
    "LinearEphemeris",
    "CircularEphemeris",
]
