from tsl2561_sensor.constants import COMMAND_BIT, REGISTER_CHAN0_LOW, REGISTER_CHAN1_LOW, REGISTER_CONTROL, WORD_BIT

CONTROL_SELECT = COMMAND_BIT | REGISTER_CONTROL
CHAN0_SELECT = COMMAND_BIT | WORD_BIT | REGISTER_CHAN0_LOW
CHAN1_SELECT = COMMAND_BIT | WORD_BIT | REGISTER_CHAN1_LOW


class FakeBus:
    """In-memory AddressedBusTransport recording every transaction."""

    def __init__(self, words: dict[int, int] | None = None) -> None:
        self.words = dict(words or {})
        self.calls: list[tuple] = []
        self.fail_on: tuple[str, int] | None = None

    def read(self, address: int, register: int, size: int) -> bytes:
        self.calls.append(("read", address, register, size))
        if self.fail_on == ("read", register):
            raise OSError(121, "Remote I/O error")
        value = self.words.get(register & 0x0F, 0)
        return value.to_bytes(2, "little")[:size]

    def write(self, address: int, register: int, data: int | bytes) -> None:
        self.calls.append(("write", address, register, data))
        if self.fail_on == ("write", register):
            raise OSError(121, "Remote I/O error")

    def writes(self) -> list[tuple[int, int | bytes]]:
        return [(c[2], c[3]) for c in self.calls if c[0] == "write"]


class SleepRecorder:
    """Injected sleep that records each wait and how many bus calls preceded it."""

    def __init__(self, bus: FakeBus | None = None) -> None:
        self.waits: list[float] = []
        self.calls_before_wait: list[int] = []
        self._bus = bus

    def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)
        if self._bus is not None:
            self.calls_before_wait.append(len(self._bus.calls))


class FakeSMBus:
    """Stand-in for smbus2.SMBus recording the SMBus calls made on it."""

    def __init__(self, bus: int | str | None = None) -> None:
        self.bus = bus
        self.calls: list[tuple] = []
        self.closed = False

    def read_byte_data(self, address: int, register: int) -> int:
        self.calls.append(("read_byte_data", address, register))
        return 0x50

    def read_i2c_block_data(self, address: int, register: int, length: int) -> list[int]:
        self.calls.append(("read_i2c_block_data", address, register, length))
        return [0x34, 0x12][:length]

    def write_byte_data(self, address: int, register: int, value: int) -> None:
        self.calls.append(("write_byte_data", address, register, value))

    def write_i2c_block_data(self, address: int, register: int, data: list[int]) -> None:
        self.calls.append(("write_i2c_block_data", address, register, data))

    def close(self) -> None:
        self.closed = True
