from dataclasses import dataclass

from .constants import Gain, IntegrationTime
from .lux import lux as estimate_lux


@dataclass(frozen=True)
class DeviceConfiguration:
    integration_time: IntegrationTime = IntegrationTime.MS_402
    gain: Gain = Gain.GAIN_1X

    @property
    def timing_value(self) -> int:
        return int(self.integration_time) | int(self.gain)


@dataclass(frozen=True)
class RawReading:
    # ch0: visible & infrared light, ch1: infrared light
    ch0: int
    ch1: int

    @property
    def lux(self) -> float:
        return estimate_lux(self.ch0, self.ch1)
