from .constants import COMMAND_BIT, WORD_BIT
from .transport import AddressedBusTransport


class RegisterProtocol:
    """Command-byte encoding for register access at a fixed bus address."""

    def __init__(self, transport: AddressedBusTransport, address: int) -> None:
        self._transport = transport
        self._address = address

    @property
    def address(self) -> int:
        return self._address

    @property
    def transport(self) -> AddressedBusTransport:
        return self._transport

    def write(self, register: int, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value out of range for register 0x{register:02X}: {value}")
        self._transport.write(self._address, COMMAND_BIT | register, value)

    def read(self, register: int, size: int = 1) -> bytes:
        select = COMMAND_BIT | register
        if size == 2:
            select |= WORD_BIT
        return self._transport.read(self._address, select, size)

    def read_word(self, register: int) -> int:
        data = self.read(register, 2)
        if len(data) != 2:
            raise ValueError(f"Expected 2 bytes from register 0x{register:02X}, got {len(data)}")
        return int.from_bytes(data, "little")
