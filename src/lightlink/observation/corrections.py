import abc
import enum
import typing
import numpy as np
from ..constants import SPEED_OF_LIGHT


LightTimeCorrectionFunction: typing.TypeAlias = typing.Callable[
    [np.ndarray, np.ndarray, float, float], float
]


class LightTimeCorrectionType(enum.Enum):

    function_wrapper = enum.auto()
    correction_list = enum.auto()
    first_order_relativistic = enum.auto()
    constant = enum.auto()


class LightTimeCorrection(metaclass=abc.ABCMeta):
    """Signed delay [s] added to the Euclidean light time by a physical effect.

    Corrections are always evaluated in double precision: states are passed
    as float64 arrays and times as floats, whatever the precision of the
    light-time calculation that uses them.
    """

    correction_type: LightTimeCorrectionType

    @abc.abstractmethod
    def evaluate(
        self,
        transmitter_state: np.ndarray,
        receiver_state: np.ndarray,
        transmission_time: float,
        reception_time: float,
    ) -> float:
        pass

    def __call__(
        self,
        transmitter_state: np.ndarray,
        receiver_state: np.ndarray,
        transmission_time: float,
        reception_time: float,
    ) -> float:

        return self.evaluate(
            transmitter_state, receiver_state, transmission_time, reception_time
        )


class LightTimeCorrectionFunctionWrapper(LightTimeCorrection):

    correction_type = LightTimeCorrectionType.function_wrapper

    def __init__(self, function: LightTimeCorrectionFunction) -> None:

        self.function = function

        return None

    def evaluate(
        self,
        transmitter_state: np.ndarray,
        receiver_state: np.ndarray,
        transmission_time: float,
        reception_time: float,
    ) -> float:

        return self.function(
            transmitter_state, receiver_state, transmission_time, reception_time
        )


class LightTimeCorrectionList(LightTimeCorrection):

    correction_type = LightTimeCorrectionType.correction_list

    def __init__(
        self,
        corrections: typing.Iterable[
            LightTimeCorrection | LightTimeCorrectionFunction
        ] = (),
    ) -> None:

        self.corrections: list[LightTimeCorrection] = []
        for correction in corrections:
            self.append(correction)

        return None

    def append(
        self, correction: LightTimeCorrection | LightTimeCorrectionFunction
    ) -> None:

        # Wrap plain callables so that all members share the same interface
        if not isinstance(correction, LightTimeCorrection):
            correction = LightTimeCorrectionFunctionWrapper(correction)

        self.corrections.append(correction)

        return None

    def __len__(self) -> int:
        return len(self.corrections)

    def __iter__(self) -> typing.Iterator[LightTimeCorrection]:
        return iter(self.corrections)

    def evaluate(
        self,
        transmitter_state: np.ndarray,
        receiver_state: np.ndarray,
        transmission_time: float,
        reception_time: float,
    ) -> float:

        # Cast input to the working precision of the corrections
        transmitter_state = np.asarray(transmitter_state, dtype=np.float64)
        receiver_state = np.asarray(receiver_state, dtype=np.float64)
        transmission_time = float(transmission_time)
        reception_time = float(reception_time)

        total = 0.0
        for correction in self.corrections:
            total += float(
                correction.evaluate(
                    transmitter_state,
                    receiver_state,
                    transmission_time,
                    reception_time,
                )
            )

        return total


class ConstantLightTimeCorrection(LightTimeCorrection):

    correction_type = LightTimeCorrectionType.constant

    def __init__(self, delay: float) -> None:

        self.delay = float(delay)

        return None

    def evaluate(
        self,
        transmitter_state: np.ndarray,
        receiver_state: np.ndarray,
        transmission_time: float,
        reception_time: float,
    ) -> float:

        return self.delay


class FirstOrderRelativisticCorrection(LightTimeCorrection):
    """Shapiro delay of the signal in the field of one or more point masses.

    Each perturber is given by its gravitational parameter [m^3/s^2] and a
    function returning its position (or full state) at an epoch. Perturbers
    are evaluated at the mid-point between transmission and reception.
    """

    correction_type = LightTimeCorrectionType.first_order_relativistic

    def __init__(
        self,
        perturbers: typing.Sequence[
            tuple[float, typing.Callable[[float], np.ndarray]]
        ],
        ppn_gamma: float = 1.0,
    ) -> None:

        self.perturbers = list(perturbers)
        self.ppn_gamma = ppn_gamma

        return None

    def single_body_delay(
        self,
        gravitational_parameter: float,
        transmitter_position: np.ndarray,
        receiver_position: np.ndarray,
    ) -> float:

        # Distances of link ends to perturber and between link ends
        transmitter_distance = np.linalg.norm(transmitter_position)
        receiver_distance = np.linalg.norm(receiver_position)
        link_distance = np.linalg.norm(receiver_position - transmitter_position)

        denominator = transmitter_distance + receiver_distance - link_distance
        if denominator <= 0.0:
            raise ValueError(
                "Degenerate geometry for relativistic correction: signal "
                "path crosses the center of the perturbing body"
            )

        return float(
            (1.0 + self.ppn_gamma)
            * gravitational_parameter
            / SPEED_OF_LIGHT**3
            * np.log(
                (transmitter_distance + receiver_distance + link_distance)
                / denominator
            )
        )

    def evaluate(
        self,
        transmitter_state: np.ndarray,
        receiver_state: np.ndarray,
        transmission_time: float,
        reception_time: float,
    ) -> float:

        evaluation_time = 0.5 * (transmission_time + reception_time)

        total = 0.0
        for gravitational_parameter, position_function in self.perturbers:

            perturber_position = np.asarray(
                position_function(evaluation_time), dtype=np.float64
            )[:3]
            total += self.single_body_delay(
                gravitational_parameter,
                transmitter_state[:3] - perturber_position,
                receiver_state[:3] - perturber_position,
            )

        return total
