import numpy as np
import pytest
from scipy import constants

from lightlink import runner
from lightlink.config import CaseSetup, ConfigurationError
from lightlink.environment import system_of_bodies_from_config
from lightlink.io import LightTimeOutput
from lightlink.observation import (
    LightTimeSettingsGenerator,
    light_time_calculator_from_config,
    ConstantLightTimeCorrection,
    FirstOrderRelativisticCorrection,
)

C = constants.speed_of_light


@pytest.fixture
def config(configuration_dir) -> CaseSetup:
    return CaseSetup.from_config_file(configuration_dir / "configuration.yaml")


def test_system_of_bodies_from_config(config):

    bodies = system_of_bodies_from_config(config)

    assert bodies.update_order()[0] == "Sun"
    assert set(bodies.update_order()) == {"Sun", "Earth", "Mars"}
    assert bodies.get("Sun").gravitational_parameter == pytest.approx(
        1.32712440018e20
    )
    assert "DSS63" in bodies.get("Earth").reference_points


def test_corrections_from_config(config):

    bodies = system_of_bodies_from_config(config)
    generator = LightTimeSettingsGenerator("downlink", config.light_propagation, config)

    corrections = generator.light_time_corrections(bodies)

    assert [type(item) for item in corrections] == [
        ConstantLightTimeCorrection,
        FirstOrderRelativisticCorrection,
    ]
    assert generator.numerical_types() == (np.float64, np.float64, np.float64)
    assert generator.tolerance() is None


def test_unsupported_correction_model(config):

    config.light_propagation.corrections.tropospheric.model = "vmf3"
    bodies = system_of_bodies_from_config(config)
    generator = LightTimeSettingsGenerator("downlink", config.light_propagation, config)

    with pytest.raises(NotImplementedError):
        generator.light_time_corrections(bodies)


def test_calculator_from_config(config):

    bodies = system_of_bodies_from_config(config)
    calculator = light_time_calculator_from_config(config, bodies, "downlink")

    epoch = float(config.time.initial_epoch)
    solution = calculator.solve(epoch)

    # Receiver is the ground station at reception, transmitter is Mars
    np.testing.assert_allclose(
        solution.receiver_state,
        bodies.link_end_state_function("Earth", "DSS63")(epoch),
    )
    np.testing.assert_allclose(
        solution.transmitter_state,
        bodies.state_in_global_frame("Mars", float(solution.transmission_time)),
    )

    # Euclidean light time plus tropospheric and relativistic delays
    euclidean = np.linalg.norm(solution.relative_range_vector) / C
    assert 8.0e-9 < solution.light_time - euclidean < 1.0e-3
    assert solution.iterations >= 2

    with pytest.raises(KeyError):
        light_time_calculator_from_config(config, bodies, "uplink")


def test_runner_single(configuration_dir):

    output_files = runner.runner_single(configuration_dir)

    assert list(output_files) == ["downlink"]
    assert output_files["downlink"].exists()

    results = LightTimeOutput.from_file(output_files["downlink"])

    assert results.link_id == "downlink"
    assert results.epochs_at_reception
    assert results.update_order[0] == "Sun"
    assert results.epochs.shape == (3,)
    np.testing.assert_allclose(np.diff(results.epochs), 300.0)
    np.testing.assert_allclose(results.reception_times, results.epochs)
    np.testing.assert_allclose(
        results.reception_times - results.transmission_times,
        results.light_times,
        rtol=1e-12,
    )
    assert np.all((results.light_times > 100.0) & (results.light_times < 2000.0))
    assert results.range_vectors.shape == (3, 3)
    assert len(results.light_time_history) == 3


def test_runner_at_transmission(configuration_dir):

    output_files = runner.runner_single(configuration_dir, at_transmission=True)
    results = LightTimeOutput.from_file(output_files["downlink"])

    assert not results.epochs_at_reception
    np.testing.assert_allclose(results.transmission_times, results.epochs)


def test_main_only_update_order(configuration_dir):

    runner.main([str(configuration_dir), "-o"])

    assert not list(configuration_dir.glob("light_time_*.pkl"))


def test_main(configuration_dir):

    runner.main([str(configuration_dir), "-v"])

    assert (configuration_dir / "light_time_downlink.pkl").exists()


def test_main_missing_configuration(tmp_path):

    with pytest.raises(SystemExit):
        runner.main([str(tmp_path)])


def test_invalid_simulation_interval(config):

    config.time.step = -1.0

    with pytest.raises(ConfigurationError):
        runner.simulation_epochs(config)
