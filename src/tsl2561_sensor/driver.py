import logging
import time
from collections.abc import Callable

import smbus2

from .constants import (
    CONTROL_POWEROFF,
    CONTROL_POWERON,
    DEFAULT_ADDRESS,
    REGISTER_CHAN0_LOW,
    REGISTER_CHAN1_LOW,
    REGISTER_CONTROL,
    REGISTER_TIMING,
    Gain,
    IntegrationTime,
)
from .errors import TransportTypeError
from .models import DeviceConfiguration, RawReading
from .protocol import RegisterProtocol
from .transport import AddressedBusTransport, open_transport

# Conversion waits in seconds, each a millisecond past the nominal integration time
_CONVERSION_WAIT_SECS: dict[IntegrationTime, float] = {
    IntegrationTime.MS_13: 0.014,
    IntegrationTime.MS_101: 0.102,
    IntegrationTime.MS_402: 0.403,
}
_FALLBACK_WAIT_SECS = 0.403


def conversion_wait(integration_time: int) -> float:
    """Seconds to wait after power-on before the channel registers are valid."""
    if integration_time in _CONVERSION_WAIT_SECS:
        return _CONVERSION_WAIT_SECS[IntegrationTime(integration_time)]
    # unrecognized setting: wait for the longest conversion
    return _FALLBACK_WAIT_SECS


class TSL2561:
    """Polled driver for the TSL2561 light-to-digital converter.

    The timing register is programmed once at construction (402ms, then 16x gain)
    and again on every ``set_integration_time``/``set_gain`` call. Each reading
    powers the ADC on, waits out one integration cycle and powers it back off.

    Not thread-safe: callers sharing an instance must serialize access.
    """

    def __init__(
        self,
        transport: AddressedBusTransport,
        address: int = DEFAULT_ADDRESS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not isinstance(transport, AddressedBusTransport):
            raise TransportTypeError(
                f"{type(transport).__name__} does not support addressed register reads and writes"
            )
        self._protocol = RegisterProtocol(transport, address)
        self._sleep = sleep
        self._config = DeviceConfiguration(IntegrationTime.MS_402, Gain.GAIN_1X)

        # Startup calibration: the default above is overridden to maximum gain
        self.set_gain(Gain.GAIN_16X)

    @classmethod
    def open(
        cls,
        device: int | str | smbus2.SMBus | AddressedBusTransport,
        address: int = DEFAULT_ADDRESS,
    ) -> "TSL2561":
        transport = open_transport(device)
        try:
            return cls(transport, address)
        except Exception:
            # release a device file opened here; caller-owned handles stay open
            if isinstance(device, (int, str)):
                _close_transport(transport)
            raise

    def close(self) -> None:
        _close_transport(self._protocol.transport)

    def __enter__(self) -> "TSL2561":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    @property
    def address(self) -> int:
        return self._protocol.address

    @property
    def configuration(self) -> DeviceConfiguration:
        return self._config

    @property
    def integration_time(self) -> IntegrationTime:
        return self._config.integration_time

    @property
    def gain(self) -> Gain:
        return self._config.gain

    def all(self) -> RawReading:
        return self.acquire()

    def lux(self) -> float:
        return self.acquire().lux

    def set_integration_time(self, integration_time: IntegrationTime | int) -> None:
        self._program_timing(DeviceConfiguration(IntegrationTime(integration_time), self._config.gain))

    def set_gain(self, gain: Gain | int) -> None:
        self._program_timing(DeviceConfiguration(self._config.integration_time, Gain(gain)))

    def acquire(self) -> RawReading:
        self._power_on()

        wait = conversion_wait(self._config.integration_time)
        self._sleep(wait)

        ch0 = self._protocol.read_word(REGISTER_CHAN0_LOW)
        ch1 = self._protocol.read_word(REGISTER_CHAN1_LOW)

        # TODO: scale counts by integration time; lux math currently assumes 402ms
        if self._config.gain == Gain.GAIN_1X:
            ch0 <<= 4
            ch1 <<= 4

        self._power_off()
        logging.debug("TSL2561 0x%02X raw ch0=%s ch1=%s (waited %.3fs)", self.address, ch0, ch1, wait)
        return RawReading(ch0=ch0, ch1=ch1)

    def _program_timing(self, config: DeviceConfiguration) -> None:
        # the timing register is only written with the device powered on
        self._power_on()
        self._protocol.write(REGISTER_TIMING, config.timing_value)
        self._power_off()
        self._config = config
        logging.debug(
            "TSL2561 0x%02X timing set: integration=%s gain=%s",
            self.address,
            config.integration_time.name,
            config.gain.name,
        )

    def _power_on(self) -> None:
        self._protocol.write(REGISTER_CONTROL, CONTROL_POWERON)

    def _power_off(self) -> None:
        self._protocol.write(REGISTER_CONTROL, CONTROL_POWEROFF)


def _close_transport(transport: AddressedBusTransport) -> None:
    close = getattr(transport, "close", None)
    if callable(close):
        close()
