from .config import LogLevel, Settings, load_settings, setup_logging
from .constants import ADDRESS_FLOAT, ADDRESS_HIGH, ADDRESS_LOW, DEFAULT_ADDRESS, Gain, IntegrationTime
from .driver import TSL2561, conversion_wait
from .errors import DeviceNotFoundError, TransportTypeError, TSL2561Error
from .helpers import make_tsl2561_read_sample
from .lux import lux
from .models import DeviceConfiguration, RawReading
from .reader import TSL2561Reader, TSL2561Sample
from .transport import AddressedBusTransport, SMBusTransport, open_transport

__all__ = [
    "ADDRESS_FLOAT",
    "ADDRESS_HIGH",
    "ADDRESS_LOW",
    "DEFAULT_ADDRESS",
    "AddressedBusTransport",
    "DeviceConfiguration",
    "DeviceNotFoundError",
    "Gain",
    "IntegrationTime",
    "LogLevel",
    "RawReading",
    "SMBusTransport",
    "Settings",
    "TSL2561",
    "TSL2561Error",
    "TSL2561Reader",
    "TSL2561Sample",
    "TransportTypeError",
    "conversion_wait",
    "load_settings",
    "lux",
    "make_tsl2561_read_sample",
    "open_transport",
    "setup_logging",
]
