class TSL2561Error(Exception):
    """Base class for driver errors."""


class DeviceNotFoundError(TSL2561Error, FileNotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(f"I2C device {path} not found. Is the I2C kernel module enabled?")
        self.path = path


class TransportTypeError(TSL2561Error, TypeError):
    """Raised when a bus handle cannot perform addressed reads and writes."""
