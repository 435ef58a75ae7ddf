import abc
import numpy as np


class Ephemeris(metaclass=abc.ABCMeta):
    """Cartesian state of a body with respect to the origin of its frame."""

    def __init__(self, frame_origin: str, frame_orientation: str) -> None:

        self.frame_origin = frame_origin
        self.frame_orientation = frame_orientation

        return None

    @abc.abstractmethod
    def cartesian_state(self, epoch: float) -> np.ndarray:
        pass


class ConstantEphemeris(Ephemeris):

    def __init__(
        self, state: np.ndarray, frame_origin: str, frame_orientation: str
    ) -> None:

        super().__init__(frame_origin, frame_orientation)

        self.state = np.asarray(state, dtype=np.float64)
        if self.state.shape != (6,):
            raise ValueError(f"Invalid shape for Cartesian state: {self.state.shape}")

        return None

    def cartesian_state(self, epoch: float) -> np.ndarray:
        return self.state.copy()


class LinearEphemeris(Ephemeris):

    def __init__(
        self,
        reference_state: np.ndarray,
        reference_epoch: float,
        frame_origin: str,
        frame_orientation: str,
    ) -> None:

        super().__init__(frame_origin, frame_orientation)

        self.reference_state = np.asarray(reference_state, dtype=np.float64)
        if self.reference_state.shape != (6,):
            raise ValueError(
                f"Invalid shape for Cartesian state: {self.reference_state.shape}"
            )
        self.reference_epoch = float(reference_epoch)

        return None

    def cartesian_state(self, epoch: float) -> np.ndarray:

        dt = float(epoch) - self.reference_epoch
        position = self.reference_state[:3] + self.reference_state[3:] * dt

        return np.concatenate([position, self.reference_state[3:]])


class CircularEphemeris(Ephemeris):
    """Uniform circular motion in the x-y plane of the ephemeris frame."""

    def __init__(
        self,
        radius: float,
        period: float,
        reference_epoch: float,
        frame_origin: str,
        frame_orientation: str,
        phase: float = 0.0,
    ) -> None:

        super().__init__(frame_origin, frame_orientation)

        if radius <= 0.0 or period == 0.0:
            raise ValueError(
                f"Invalid circular orbit: radius {radius} m, period {period} s"
            )

        self.radius = float(radius)
        self.period = float(period)
        self.reference_epoch = float(reference_epoch)
        self.phase = float(phase)

        return None

    @property
    def angular_rate(self) -> float:
        return 2.0 * np.pi / self.period

    def cartesian_state(self, epoch: float) -> np.ndarray:

        angle = self.phase + self.angular_rate * (float(epoch) - self.reference_epoch)
        speed = self.radius * self.angular_rate

        return np.array(
            [
                self.radius * np.cos(angle),
                self.radius * np.sin(angle),
                0.0,
                -speed * np.sin(angle),
                speed * np.cos(angle),
                0.0,
            ]
        )
