from astropy.time import Time, TimeDelta

# Reference epoch of the time scale used by all ephemerides
J2000 = Time("J2000", scale="tdb")


class Epoch(float):
    """Seconds since J2000 in the TDB scale."""

    @classmethod
    def from_iso_string(cls, iso_string: str) -> "Epoch":

        epoch = Time(iso_string, scale="tdb")

        return cls((epoch - J2000).to_value("s"))

    def to_iso_string(self) -> str:

        return (J2000 + TimeDelta(float(self), format="sec", scale="tdb")).isot
