from pathlib import Path
import typing
import numpy as np
from . import (
    config as ncon,
    environment as nenv,
    io as nio,
    observation as nobs,
)
from .io.command_line.runner import CommandLineInputRunner
from .logging import log


def simulation_epochs(config: "ncon.CaseSetup") -> np.ndarray:

    initial_epoch = float(config.time.initial_epoch)
    final_epoch = float(config.time.final_epoch)
    step = config.time.step

    if step <= 0.0 or final_epoch < initial_epoch:
        raise ncon.ConfigurationError(
            f"Invalid simulation interval: [{initial_epoch}, {final_epoch}] "
            f"with step {step}"
        )

    # Include final epoch when it lies on the grid
    number_of_steps = int(np.floor((final_epoch - initial_epoch) / step + 1e-9))

    return initial_epoch + step * np.arange(number_of_steps + 1)


def compute_light_time(
    config: "ncon.CaseSetup", bodies: "nenv.SystemOfBodies", link_id: str
) -> "nio.LightTimeOutput":

    calculator = nobs.light_time_calculator_from_config(config, bodies, link_id)
    tolerance = nobs.LightTimeSettingsGenerator(
        link_id, config.light_propagation, config
    ).tolerance()

    return nio.LightTimeOutput.from_calculator(
        calculator=calculator,
        epochs=simulation_epochs(config),
        link_id=link_id,
        epochs_at_reception=config.epochs_at_reception,
        tolerance=tolerance,
        update_order=bodies.update_order(),
    )


def runner_single(
    source_dir: Path, at_transmission: bool = False, only_update_order: bool = False
) -> dict[str, Path]:

    # Load configuration
    config = ncon.CaseSetup.from_config_file(source_dir / "configuration.yaml")
    config.epochs_at_reception = not at_transmission
    config.only_update_order = only_update_order

    # Create system of bodies from configuration
    bodies = nenv.system_of_bodies_from_config(config)
    bodies.update_order()

    if config.only_update_order:
        return {}

    # Compute light time for all links
    output_files: dict[str, Path] = {}
    for link_id, link_setup in config.links.items():

        if not link_setup.present:
            continue

        results = compute_light_time(config, bodies, link_id)

        log.info(f"Saving light-time results for link: {link_id}")
        output_files[link_id] = source_dir / f"light_time_{link_id}.pkl"
        results.save_to_file(output_files[link_id])

    return output_files


def main(args: typing.Sequence[str] | None = None) -> None:

    user_input: CommandLineInputRunner = nio.CommandLineParserRunner().parse_args(
        args
    )

    # Adjust verbosity based on user input
    if not user_input.verbose:
        log.setLevel("INFO")

    for source_dir in user_input.source_dirs:

        log.info(f"Processing: {source_dir}")
        runner_single(
            source_dir,
            at_transmission=user_input.at_transmission,
            only_update_order=user_input.only_update_order,
        )

    return None


if __name__ == "__main__":
    main()
