from enum import IntEnum
from typing import Final

# I2C bus addresses, selected by the ADDR SEL pin strapping
ADDRESS_LOW: Final[int] = 0x29
ADDRESS_FLOAT: Final[int] = 0x39
ADDRESS_HIGH: Final[int] = 0x49
DEFAULT_ADDRESS: Final[int] = ADDRESS_FLOAT

# Command register flags
READ_BIT: Final[int] = 0x01
COMMAND_BIT: Final[int] = 0x80  # must be 1
CLEAR_BIT: Final[int] = 0x40  # clears any pending interrupt
WORD_BIT: Final[int] = 0x20  # read/write a word rather than a byte
BLOCK_BIT: Final[int] = 0x10  # block read/write

CONTROL_POWERON: Final[int] = 0x03
CONTROL_POWEROFF: Final[int] = 0x00

# Registers
REGISTER_CONTROL: Final[int] = 0x00
REGISTER_TIMING: Final[int] = 0x01
REGISTER_THRESHHOLDL_LOW: Final[int] = 0x02
REGISTER_THRESHHOLDL_HIGH: Final[int] = 0x03
REGISTER_THRESHHOLDH_LOW: Final[int] = 0x04
REGISTER_THRESHHOLDH_HIGH: Final[int] = 0x05
REGISTER_INTERRUPT: Final[int] = 0x06
REGISTER_CRC: Final[int] = 0x08
REGISTER_ID: Final[int] = 0x0A
REGISTER_CHAN0_LOW: Final[int] = 0x0C
REGISTER_CHAN0_HIGH: Final[int] = 0x0D
REGISTER_CHAN1_LOW: Final[int] = 0x0E
REGISTER_CHAN1_HIGH: Final[int] = 0x0F


class IntegrationTime(IntEnum):
    MS_13 = 0x00  # 13.7ms
    MS_101 = 0x01
    MS_402 = 0x02

    @classmethod
    def from_millis(cls, millis: int) -> "IntegrationTime":
        try:
            return _INTEGRATION_BY_MILLIS[millis]
        except KeyError:
            raise ValueError(f"Unsupported integration time: {millis} ms (expected 13, 101 or 402)") from None


class Gain(IntEnum):
    GAIN_1X = 0x00  # no gain
    GAIN_16X = 0x10

    @classmethod
    def from_factor(cls, factor: int) -> "Gain":
        if factor == 1:
            return cls.GAIN_1X
        if factor == 16:
            return cls.GAIN_16X
        raise ValueError(f"Unsupported gain: {factor}x (expected 1 or 16)")


_INTEGRATION_BY_MILLIS: Final[dict[int, IntegrationTime]] = {
    13: IntegrationTime.MS_13,
    101: IntegrationTime.MS_101,
    402: IntegrationTime.MS_402,
}
