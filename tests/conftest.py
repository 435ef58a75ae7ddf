import numpy as np
import pytest
from pathlib import Path


CONFIGURATION = """
time:
  initial_epoch: "2025-01-01T00:00:00"
  final_epoch: "2025-01-01T00:10:00"
  step: 300.0

environment:
  general:
    global_frame_origin: SSB
    global_frame_orientation: ECLIPJ2000
  bodies:
    Sun:
      central_body: SSB
      ephemerides:
        model: constant
        ephemeris_frame_origin: global
        ephemeris_frame_orientation: global
        state: [0.0, 0.0, 0.0, 0.0, 0.0, 0.0]
      gravity:
        gravitational_parameter: 1.32712440018e+20
    Earth:
      central_body: Sun
      ephemerides:
        model: circular
        ephemeris_frame_origin: Sun
        ephemeris_frame_orientation: global
        radius: 1.496e+11
        period: 31557600.0
        reference_epoch: 0.0
      reference_points:
        positions:
          DSS63: [6.371e+6, 0.0, 0.0]
    Mars:
      central_body: Sun
      ephemerides:
        model: circular
        ephemeris_frame_origin: Sun
        ephemeris_frame_orientation: global
        radius: 2.279e+11
        period: 59355072.0
        reference_epoch: 0.0
        phase: 1.0

light_propagation:
  corrections:
    tropospheric:
      model: constant
      delay: 8.0e-9
    relativistic:
      model: first_order
      bodies: [Sun]
  convergence:
    iterate_corrections: false
    max_iterations: 20

links:
  downlink:
    transmitter:
      body: Mars
    receiver:
      body: Earth
      reference_point: DSS63
"""


def constant_state_function(position, velocity=(0.0, 0.0, 0.0)):

    state = np.concatenate(
        [np.asarray(position, dtype=np.float64), np.asarray(velocity, dtype=np.float64)]
    )

    def state_function(epoch):
        return state.copy()

    return state_function


def linear_state_function(position, velocity):

    position = np.asarray(position, dtype=np.float64)
    velocity = np.asarray(velocity, dtype=np.float64)

    def state_function(epoch):
        return np.concatenate([position + velocity * float(epoch), velocity])

    return state_function


@pytest.fixture
def configuration_dir(tmp_path: Path) -> Path:

    (tmp_path / "configuration.yaml").write_text(CONFIGURATION)

    return tmp_path
