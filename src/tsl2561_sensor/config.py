import contextlib
import logging
import os
from enum import StrEnum
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_ADDRESS, Gain, IntegrationTime


class LogLevel(StrEnum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class Settings(BaseModel):
    i2c_bus: int = Field(default=1, validation_alias="I2C_BUS")
    tsl2561_i2c_address: int = Field(default=DEFAULT_ADDRESS, validation_alias="TSL2561_I2C_ADDRESS")
    integration_ms: int = Field(default=402, validation_alias="TSL2561_INTEGRATION_MS")
    gain: int = Field(default=16, validation_alias="TSL2561_GAIN")

    log_level: LogLevel = Field(default=LogLevel.INFO, validation_alias="LOG_LEVEL")

    @field_validator("tsl2561_i2c_address")
    @classmethod
    def _check_address(cls, value: int) -> int:
        if not 0x00 <= value <= 0x7F:
            raise ValueError(f"I2C address must be 7-bit (0x00-0x7F), got 0x{value:X}")
        return value

    @field_validator("integration_ms")
    @classmethod
    def _check_integration(cls, value: int) -> int:
        IntegrationTime.from_millis(value)
        return value

    @field_validator("gain")
    @classmethod
    def _check_gain(cls, value: int) -> int:
        Gain.from_factor(value)
        return value

    @property
    def integration_time(self) -> IntegrationTime:
        return IntegrationTime.from_millis(self.integration_ms)

    @property
    def gain_setting(self) -> Gain:
        return Gain.from_factor(self.gain)


ENV_KEYS: Final[tuple[str, ...]] = (
    "I2C_BUS",
    "TSL2561_I2C_ADDRESS",
    "TSL2561_INTEGRATION_MS",
    "TSL2561_GAIN",
    "LOG_LEVEL",
)


def load_settings() -> Settings:
    # Load .env if present (does nothing if file missing)
    load_dotenv()
    data: dict[str, str] = {}
    for key in ENV_KEYS:
        if key in os.environ:
            data[key] = os.environ[key]

    # Handle hex I2C address if provided
    if "TSL2561_I2C_ADDRESS" in data:
        with contextlib.suppress(ValueError):
            data["TSL2561_I2C_ADDRESS"] = str(int(data["TSL2561_I2C_ADDRESS"], 0))

    return Settings.model_validate(data)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )
