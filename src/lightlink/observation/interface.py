import numpy as np
from ..config import CaseSetup
from ..config.light_propagation import LightTimeSetup
from ..core import SettingsGenerator
from ..environment import SystemOfBodies
from ..logging import log
from .corrections import (
    LightTimeCorrection,
    ConstantLightTimeCorrection,
    FirstOrderRelativisticCorrection,
)
from .light_time import LightTimeCalculator


class LightTimeSettingsGenerator(SettingsGenerator[LightTimeSetup]):

    def light_time_corrections(
        self, bodies: SystemOfBodies
    ) -> list[LightTimeCorrection]:

        # Initialize container for light-time corrections
        light_time_corrections: list[LightTimeCorrection] = []
        corrections_setup = self.local.corrections

        # Data for tropospheric correction
        if corrections_setup.tropospheric.present:

            match corrections_setup.tropospheric.model:

                case "constant":

                    log.debug("Constant tropospheric correction")

                    light_time_corrections.append(
                        ConstantLightTimeCorrection(
                            corrections_setup.tropospheric.delay
                        )
                    )

                case _:
                    raise NotImplementedError(
                        "Invalid tropospheric"
                        f" model: {corrections_setup.tropospheric.model}"
                    )

        # Data for relativistic correction
        if corrections_setup.relativistic.present:

            match corrections_setup.relativistic.model:

                case "first_order":

                    log.debug("First order relativistic correction")

                    perturbers = []
                    for name in corrections_setup.relativistic.bodies:

                        body = bodies.get(name)
                        if body.gravitational_parameter is None:
                            raise ValueError(
                                "Gravitational parameter required for "
                                f"relativistic correction: {name}"
                            )
                        perturbers.append(
                            (
                                body.gravitational_parameter,
                                bodies.link_end_state_function(name),
                            )
                        )

                    light_time_corrections.append(
                        FirstOrderRelativisticCorrection(
                            perturbers,
                            ppn_gamma=corrections_setup.relativistic.ppn_gamma,
                        )
                    )

                case _:
                    raise NotImplementedError(
                        "Invalid relativistic"
                        f" model: {corrections_setup.relativistic.model}"
                    )

        return light_time_corrections

    def numerical_types(
        self,
    ) -> tuple[type[np.floating], type[np.floating], type[np.floating]]:

        # Double precision for everything unless specified
        if not self.local.precision.present:
            return np.float64, np.float64, np.float64

        precision = self.local.precision
        types = (precision.observation.type, precision.time.type, precision.state.type)
        for _type in types:
            if not issubclass(_type, np.floating):
                raise ValueError(f"Invalid numerical type for light time: {_type}")

        return types

    def tolerance(self) -> float | None:

        # Zero selects the default tolerance of the observation precision
        tolerance = self.local.convergence.tolerance
        if tolerance == 0.0:
            return None
        if tolerance < 0.0:
            raise ValueError(f"Invalid light-time tolerance: {tolerance}")

        return tolerance


def light_time_calculator_from_config(
    config: CaseSetup, bodies: SystemOfBodies, link_id: str
) -> LightTimeCalculator:

    log.info(f"Creating light-time calculator for link: {link_id}")

    if link_id not in config.links:
        raise KeyError(f"Link {link_id} not defined in configuration")
    link = config.links[link_id]

    generator = LightTimeSettingsGenerator(link_id, config.light_propagation, config)
    observation_type, time_type, state_type = generator.numerical_types()

    return LightTimeCalculator(
        transmitter_state_function=bodies.link_end_state_function(
            link.transmitter.body, link.transmitter.reference_point
        ),
        receiver_state_function=bodies.link_end_state_function(
            link.receiver.body, link.receiver.reference_point
        ),
        corrections=generator.light_time_corrections(bodies),
        iterate_corrections=config.light_propagation.convergence.iterate_corrections,
        observation_type=observation_type,
        time_type=time_type,
        state_type=state_type,
        max_iterations=config.light_propagation.convergence.max_iterations,
    )
