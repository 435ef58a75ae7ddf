from .core import SetupBase

from .environment import EnvironmentSetup
from .light_propagation import LightTimeSetup
from .links import LinkSetup
from ..epochs import Epoch
from pathlib import Path
import yaml
from ..logging import log


class SimulationIntervalSetup(SetupBase):

    initial_epoch: Epoch
    final_epoch: Epoch
    step: float


class CaseSetup(SetupBase):

    time: SimulationIntervalSetup
    environment: EnvironmentSetup
    light_propagation: LightTimeSetup
    links: dict[str, LinkSetup]

    epochs_at_reception: bool = True
    only_update_order: bool = False

    @classmethod
    def from_config_file(cls, config_path: Path) -> "CaseSetup":

        log.info(f"Loading configuration from {config_path}")

        with config_path.open("r") as buffer:
            raw_config = yaml.safe_load(buffer)
        output = cls.from_raw(raw_config)

        log.info(f"Finished loading configuration")

        return output
