import logging
from dataclasses import dataclass

from .config import Settings, load_settings, setup_logging
from .constants import Gain, IntegrationTime
from .driver import TSL2561


@dataclass
class TSL2561Sample:
    ch0: int
    ch1: int
    ambient_lux: float


class TSL2561Reader:
    def __init__(
        self,
        i2c_bus: int,
        i2c_address: int,
        integration_time: IntegrationTime | None = None,
        gain: Gain | None = None,
    ) -> None:
        self._sensor = TSL2561.open(i2c_bus, i2c_address)
        try:
            # only reprogram the timing register for settings that differ from startup
            if integration_time is not None and integration_time != self._sensor.integration_time:
                self._sensor.set_integration_time(integration_time)
            if gain is not None and gain != self._sensor.gain:
                self._sensor.set_gain(gain)
        except Exception:
            self._sensor.close()
            raise
        logging.info(
            "TSL2561 ready (bus=%s, addr=0x%02X, integration=%s, gain=%s)",
            i2c_bus,
            i2c_address,
            self._sensor.integration_time.name,
            self._sensor.gain.name,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "TSL2561Reader":
        return cls(
            settings.i2c_bus,
            settings.tsl2561_i2c_address,
            integration_time=settings.integration_time,
            gain=settings.gain_setting,
        )

    @classmethod
    def from_env(cls) -> "TSL2561Reader":
        """Build a reader from environment/.env settings, configuring logging first."""
        settings = load_settings()
        setup_logging(settings.log_level)
        return cls.from_settings(settings)

    @property
    def sensor(self) -> TSL2561:
        return self._sensor

    def read(self) -> TSL2561Sample:
        raw = self._sensor.all()
        return TSL2561Sample(ch0=raw.ch0, ch1=raw.ch1, ambient_lux=raw.lux)

    def close(self) -> None:
        self._sensor.close()

    def __enter__(self) -> "TSL2561Reader":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()
