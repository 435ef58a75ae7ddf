import typing
import numpy as np
from dataclasses import dataclass
import pickle
from pathlib import Path
from ..logging import log

if typing.TYPE_CHECKING:
    from ..observation import LightTimeCalculator


@dataclass
class LightTimeOutput:

    link_id: str
    epochs_at_reception: bool
    epochs: np.ndarray
    light_times: np.ndarray
    transmission_times: np.ndarray
    reception_times: np.ndarray
    transmitter_states: np.ndarray
    receiver_states: np.ndarray
    iterations: np.ndarray
    update_order: list[str]

    def save_to_file(self, file: Path) -> None:

        with file.open("wb") as buffer:
            pickle.dump(self, buffer)

        return None

    @property
    def range_vectors(self) -> np.ndarray:

        return self.receiver_states[:, :3] - self.transmitter_states[:, :3]

    @property
    def light_time_history(self) -> dict[float, float]:

        return {
            float(epoch): float(light_time)
            for (epoch, light_time) in zip(self.epochs, self.light_times)
        }

    @staticmethod
    def from_file(file: Path) -> "LightTimeOutput":

        with file.open("rb") as buffer:
            _self = pickle.load(buffer)

        return _self

    @staticmethod
    def from_calculator(
        calculator: "LightTimeCalculator",
        epochs: typing.Iterable[float],
        link_id: str = "",
        epochs_at_reception: bool = True,
        tolerance: float | None = None,
        update_order: list[str] | None = None,
    ) -> "LightTimeOutput":

        log.info(f"Computing light time for link: {link_id}")

        solutions = [
            calculator.solve(epoch, epochs_at_reception, tolerance)
            for epoch in epochs
        ]
        log.debug(f"Solved light time at {len(solutions)} epochs")

        return LightTimeOutput(
            link_id=link_id,
            epochs_at_reception=epochs_at_reception,
            epochs=np.array(
                [
                    item.reception_time if epochs_at_reception else item.transmission_time
                    for item in solutions
                ],
                dtype=calculator.time_type,
            ),
            light_times=np.array(
                [item.light_time for item in solutions],
                dtype=calculator.observation_type,
            ),
            transmission_times=np.array(
                [item.transmission_time for item in solutions],
                dtype=calculator.time_type,
            ),
            reception_times=np.array(
                [item.reception_time for item in solutions],
                dtype=calculator.time_type,
            ),
            transmitter_states=np.array(
                [item.transmitter_state for item in solutions],
                dtype=calculator.state_type,
            ).reshape(-1, 6),
            receiver_states=np.array(
                [item.receiver_state for item in solutions],
                dtype=calculator.state_type,
            ).reshape(-1, 6),
            iterations=np.array([item.iterations for item in solutions], dtype=int),
            update_order=[] if update_order is None else list(update_order),
        )
