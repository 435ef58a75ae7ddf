from ..config import CaseSetup
from ..config.environment import BodySetup
from ..core import SettingsGenerator
from ..logging import log
from .bodies import Body, SystemOfBodies
from .ephemerides import (
    Ephemeris,
    ConstantEphemeris,
    LinearEphemeris,
    CircularEphemeris,
)


class BodySettings(SettingsGenerator[BodySetup]):

    def ephemeris(self) -> Ephemeris:

        ephemerides = self.local.ephemerides

        # Define frame origin
        frame_origin = ephemerides.ephemeris_frame_origin
        if frame_origin == "global":
            frame_origin = self.config.environment.general.global_frame_origin

        # Define frame orientation
        frame_orientation = ephemerides.ephemeris_frame_orientation
        if frame_orientation == "global":
            frame_orientation = (
                self.config.environment.general.global_frame_orientation
            )

        match ephemerides.model:

            case "constant":

                log.debug("Constant ephemerides")
                return ConstantEphemeris(
                    state=ephemerides.state,
                    frame_origin=frame_origin,
                    frame_orientation=frame_orientation,
                )

            case "linear":

                log.debug("Linear ephemerides")
                return LinearEphemeris(
                    reference_state=ephemerides.state,
                    reference_epoch=ephemerides.reference_epoch,
                    frame_origin=frame_origin,
                    frame_orientation=frame_orientation,
                )

            case "circular":

                log.debug("Circular ephemerides")
                return CircularEphemeris(
                    radius=ephemerides.radius,
                    period=ephemerides.period,
                    reference_epoch=ephemerides.reference_epoch,
                    frame_origin=frame_origin,
                    frame_orientation=frame_orientation,
                    phase=ephemerides.phase,
                )

            case _:

                raise ValueError(f"Invalid ephemerides model: {ephemerides.model}")

    def body(self) -> Body:

        if not self.local.ephemerides.present:
            raise ValueError(f"Missing ephemerides for body: {self.name}")

        ephemeris = self.ephemeris()

        # Define central body
        central_body = self.local.central_body
        if central_body == "global":
            central_body = self.config.environment.general.global_frame_origin

        # Gravitational parameter
        gravitational_parameter = None
        if self.local.gravity.present:
            gravitational_parameter = self.local.gravity.gravitational_parameter

        body = Body(
            name=self.name,
            ephemeris=ephemeris,
            central_body=central_body,
            gravitational_parameter=gravitational_parameter,
        )

        # Reference points
        if self.local.reference_points.present:
            for point, position in self.local.reference_points.positions.items():
                log.debug(f"Reference point {point} of {self.name}")
                body.add_reference_point(point, position)

        return body


def system_of_bodies_from_config(config: CaseSetup) -> SystemOfBodies:

    bodies = SystemOfBodies(
        global_frame_origin=config.environment.general.global_frame_origin,
        global_frame_orientation=config.environment.general.global_frame_orientation,
    )

    for name, body_setup in config.environment.bodies.items():

        if not body_setup.present:
            continue

        log.info(f"Generating body settings for: {name}")

        generator = BodySettings(name, body_setup, config)
        bodies.add_body(generator.body())

    return bodies
