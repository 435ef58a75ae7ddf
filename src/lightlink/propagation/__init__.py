from .ephemeris_order import (
    determine_ephemeris_update_order,
    EphemerisUpdateOrderError,
)

__all__ = [
    "determine_ephemeris_update_order",
    "EphemerisUpdateOrderError",
]
