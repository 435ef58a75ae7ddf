import typing
from dataclasses import dataclass
import numpy as np
from ..constants import speed_of_light, default_light_time_tolerance
from ..logging import log
from .corrections import (
    LightTimeCorrection,
    LightTimeCorrectionFunction,
    LightTimeCorrectionList,
)


StateFunction: typing.TypeAlias = typing.Callable[[typing.Any], np.ndarray]

DEFAULT_MAXIMUM_ITERATIONS = 20


class LightTimeConvergenceError(RuntimeError):

    def __init__(
        self, residual: float, correction: float, epoch: float, iterations: int
    ) -> None:

        self.residual = residual
        self.correction = correction
        self.epoch = epoch
        self.iterations = iterations

        super().__init__(
            f"Light time unconverged after {iterations} iterations at level "
            f"{residual}; current light-time corrections are: {correction} "
            f"and input time was {epoch}"
        )

        return None


@dataclass
class LightTimeSolution:

    light_time: np.floating
    transmitter_state: np.ndarray
    receiver_state: np.ndarray
    transmission_time: np.floating
    reception_time: np.floating
    correction: np.floating
    iterations: int

    def __iter__(self):

        # Unpacks as (light time, transmitter state, receiver state)
        return iter((self.light_time, self.transmitter_state, self.receiver_state))

    @property
    def relative_range_vector(self) -> np.ndarray:

        return self.receiver_state[:3] - self.transmitter_state[:3]


O = typing.TypeVar("O", bound=np.floating)
T = typing.TypeVar("T", bound=np.floating)
S = typing.TypeVar("S", bound=np.floating)


class LightTimeCalculator(typing.Generic[O, T, S]):
    """Light time between two moving link ends.

    The motion of the link ends during the propagation of the signal is taken
    into account by iterating on the light time until two subsequent
    estimates agree within a tolerance. Corrections (relativistic,
    tropospheric, ...) are added to the Euclidean light time, either once per
    solution or at every iteration depending on ``iterate_corrections``.

    Observation, time and state precision are set independently through
    ``observation_type``, ``time_type`` and ``state_type``. Corrections are
    evaluated in double precision and cast to the observation type.

    The calculator keeps no state between calls: it can be reused for many
    epochs, and concurrent calls are safe as long as the state functions and
    corrections are.
    """

    def __init__(
        self,
        transmitter_state_function: StateFunction,
        receiver_state_function: StateFunction,
        corrections: typing.Iterable[
            LightTimeCorrection | LightTimeCorrectionFunction
        ] = (),
        iterate_corrections: bool = False,
        observation_type: type[O] = np.float64,
        time_type: type[T] = np.float64,
        state_type: type[S] | None = None,
        max_iterations: int = DEFAULT_MAXIMUM_ITERATIONS,
    ) -> None:

        if max_iterations < 1:
            raise ValueError(
                f"Maximum number of iterations must be positive: {max_iterations}"
            )

        self.transmitter_state_function = transmitter_state_function
        self.receiver_state_function = receiver_state_function
        self.corrections = LightTimeCorrectionList(corrections)
        self.iterate_corrections = iterate_corrections
        self.max_iterations = max_iterations

        # Numerical types
        self.observation_type = observation_type
        self.time_type = time_type
        self.state_type = observation_type if state_type is None else state_type
        self.speed_of_light = speed_of_light(self.observation_type)

        return None

    @property
    def default_tolerance(self) -> O:

        return self.observation_type(
            default_light_time_tolerance(self.observation_type, self.state_type)
        )

    def transmitter_state(self, epoch: T) -> np.ndarray:
        return np.asarray(
            self.transmitter_state_function(epoch), dtype=self.state_type
        )

    def receiver_state(self, epoch: T) -> np.ndarray:
        return np.asarray(self.receiver_state_function(epoch), dtype=self.state_type)

    def total_correction(
        self,
        transmitter_state: np.ndarray,
        receiver_state: np.ndarray,
        transmission_time: T,
        reception_time: T,
    ) -> O:

        return self.observation_type(
            self.corrections.evaluate(
                transmitter_state, receiver_state, transmission_time, reception_time
            )
        )

    def light_time_estimate(
        self, transmitter_state: np.ndarray, receiver_state: np.ndarray, correction: O
    ) -> O:

        distance = np.linalg.norm(
            (receiver_state[:3] - transmitter_state[:3]).astype(self.observation_type)
        )

        return distance / self.speed_of_light + correction

    def solve(
        self,
        epoch: typing.Any,
        is_epoch_at_reception: bool = True,
        tolerance: typing.Any = None,
    ) -> LightTimeSolution:

        # Use default tolerance if not specified
        if tolerance is None:
            tolerance = self.default_tolerance
        tolerance = self.observation_type(tolerance)
        epoch = self.time_type(epoch)

        # Initialize link ends at input epoch (zero light-time guess)
        reception_time = epoch
        transmission_time = epoch
        receiver_state = self.receiver_state(reception_time)
        transmitter_state = self.transmitter_state(transmission_time)

        # Initial correction and light-time estimate
        correction = self.total_correction(
            transmitter_state, receiver_state, transmission_time, reception_time
        )
        previous_estimate = self.light_time_estimate(
            transmitter_state, receiver_state, correction
        )

        # Without corrections there is nothing to settle after convergence
        update_corrections = self.iterate_corrections or len(self.corrections) == 0

        residual = self.observation_type(np.inf)
        for iteration in range(1, self.max_iterations + 1):

            # Update light-time corrections, if necessary
            if update_corrections:
                correction = self.total_correction(
                    transmitter_state, receiver_state, transmission_time, reception_time
                )

            # Re-evaluate free link end with current light-time estimate
            if is_epoch_at_reception:
                transmission_time = epoch - self.time_type(previous_estimate)
                transmitter_state = self.transmitter_state(transmission_time)
            else:
                reception_time = epoch + self.time_type(previous_estimate)
                receiver_state = self.receiver_state(reception_time)

            new_estimate = self.light_time_estimate(
                transmitter_state, receiver_state, correction
            )
            residual = abs(new_estimate - previous_estimate)

            if residual < tolerance:

                if update_corrections:
                    log.debug(
                        f"Light time converged after {iteration} iterations: "
                        f"{new_estimate} s"
                    )
                    return LightTimeSolution(
                        light_time=new_estimate,
                        transmitter_state=transmitter_state,
                        receiver_state=receiver_state,
                        transmission_time=transmission_time,
                        reception_time=reception_time,
                        correction=correction,
                        iterations=iteration,
                    )

                # Converged with outdated corrections: update them and check
                # that the solution still holds in the next iteration
                update_corrections = True
                continue

            previous_estimate = new_estimate

        raise LightTimeConvergenceError(
            residual=float(residual),
            correction=float(correction),
            epoch=float(epoch),
            iterations=self.max_iterations,
        )

    def light_time(
        self,
        epoch: typing.Any,
        is_epoch_at_reception: bool = True,
        tolerance: typing.Any = None,
    ) -> O:

        return self.solve(epoch, is_epoch_at_reception, tolerance).light_time

    def relative_range_vector(
        self,
        epoch: typing.Any,
        is_epoch_at_reception: bool = True,
        tolerance: typing.Any = None,
    ) -> np.ndarray:

        return self.solve(
            epoch, is_epoch_at_reception, tolerance
        ).relative_range_vector
