import typing
import numpy as np
from .ephemerides import Ephemeris
from ..propagation.ephemeris_order import determine_ephemeris_update_order
from ..logging import log


class Body:

    def __init__(
        self,
        name: str,
        ephemeris: Ephemeris,
        central_body: str | None = None,
        gravitational_parameter: float | None = None,
    ) -> None:

        self.name = name
        self.ephemeris = ephemeris
        self.central_body = (
            ephemeris.frame_origin if central_body is None else central_body
        )
        self.gravitational_parameter = gravitational_parameter
        self.reference_points: dict[str, np.ndarray] = {}

        return None

    @property
    def ephemeris_origin(self) -> str:
        return self.ephemeris.frame_origin

    def add_reference_point(self, name: str, position: np.ndarray) -> None:

        position = np.asarray(position, dtype=np.float64)
        if position.shape != (3,):
            raise ValueError(
                f"Invalid position for reference point {name} of {self.name}: "
                f"{position}"
            )
        self.reference_points[name] = position

        return None

    def reference_point_offset(self, reference_point: str) -> np.ndarray:

        if reference_point == "origin":
            return np.zeros(6)

        if reference_point not in self.reference_points:
            raise KeyError(
                f"Reference point {reference_point} not defined for {self.name}"
            )

        return np.concatenate([self.reference_points[reference_point], np.zeros(3)])


class SystemOfBodies:

    def __init__(self, global_frame_origin: str, global_frame_orientation: str) -> None:

        self.global_frame_origin = global_frame_origin
        self.global_frame_orientation = global_frame_orientation
        self.bodies: dict[str, Body] = {}
        self._update_order: list[str] | None = None

        return None

    def add_body(self, body: Body) -> None:

        if body.name in self.bodies:
            raise ValueError(f"Body {body.name} already exists")

        if body.ephemeris.frame_orientation != self.global_frame_orientation:
            raise NotImplementedError(
                f"Ephemeris of {body.name} is expressed in "
                f"{body.ephemeris.frame_orientation}; only the global frame "
                f"orientation ({self.global_frame_orientation}) is supported"
            )

        self.bodies[body.name] = body

        # Dependencies changed
        self._update_order = None

        return None

    def get(self, name: str) -> Body:

        if name not in self.bodies:
            raise KeyError(f"Body {name} not found in system of bodies")

        return self.bodies[name]

    def update_order(self) -> list[str]:

        if self._update_order is None:

            names = list(self.bodies.keys())
            self._update_order = determine_ephemeris_update_order(
                integrated_bodies=names,
                central_bodies=[self.bodies[name].central_body for name in names],
                ephemeris_origins=[
                    self.bodies[name].ephemeris_origin for name in names
                ],
            )
            log.info(f"Ephemeris update order: {self._update_order}")

        return self._update_order

    def global_states(self, epoch: float) -> dict[str, np.ndarray]:

        states: dict[str, np.ndarray] = {}

        for name in self.update_order():

            body = self.bodies[name]
            origin = body.ephemeris_origin

            # Origin of body must have been updated before
            if origin in states:
                origin_state = states[origin]
            elif origin == self.global_frame_origin:
                origin_state = np.zeros(6)
            else:
                raise KeyError(
                    f"Ephemeris origin {origin} of {name} is neither a body "
                    f"nor the global frame origin ({self.global_frame_origin})"
                )

            states[name] = body.ephemeris.cartesian_state(epoch) + origin_state

        return states

    def state_in_global_frame(self, name: str, epoch: float) -> np.ndarray:

        if name == self.global_frame_origin and name not in self.bodies:
            return np.zeros(6)

        self.get(name)

        return self.global_states(epoch)[name]

    def state_wrt_central_body(self, name: str, epoch: float) -> np.ndarray:

        central_body = self.get(name).central_body
        states = self.global_states(epoch)

        if central_body in states:
            return states[name] - states[central_body]
        if central_body == self.global_frame_origin:
            return states[name]

        raise KeyError(f"Central body {central_body} of {name} not found")

    def link_end_state_function(
        self, name: str, reference_point: str = "origin"
    ) -> typing.Callable[[float], np.ndarray]:

        # Fail early for unknown bodies and reference points
        offset = self.get(name).reference_point_offset(reference_point)

        def state_function(epoch: float) -> np.ndarray:
            return self.state_in_global_frame(name, float(epoch)) + offset

        return state_function
