import logging
import os
from typing import Protocol, runtime_checkable

import smbus2

from .errors import DeviceNotFoundError, TransportTypeError


@runtime_checkable
class AddressedBusTransport(Protocol):
    """Addressed register access over a two-wire bus."""

    def read(self, address: int, register: int, size: int) -> bytes:
        ...

    def write(self, address: int, register: int, data: int | bytes) -> None:
        ...


class SMBusTransport:
    """AddressedBusTransport backed by an smbus2.SMBus handle."""

    def __init__(self, bus: smbus2.SMBus) -> None:
        self._bus = bus

    @property
    def bus(self) -> smbus2.SMBus:
        return self._bus

    def read(self, address: int, register: int, size: int) -> bytes:
        if size == 1:
            return bytes([self._bus.read_byte_data(address, register)])
        return bytes(self._bus.read_i2c_block_data(address, register, size))

    def write(self, address: int, register: int, data: int | bytes) -> None:
        if isinstance(data, int):
            if not 0 <= data <= 0xFF:
                raise ValueError(f"Byte value out of range: {data}")
            self._bus.write_byte_data(address, register, data)
        else:
            self._bus.write_i2c_block_data(address, register, list(data))

    def close(self) -> None:
        self._bus.close()

    def __enter__(self) -> "SMBusTransport":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


def device_path(bus_index: int) -> str:
    return f"/dev/i2c-{bus_index}"


def open_transport(device: int | str | smbus2.SMBus | AddressedBusTransport) -> AddressedBusTransport:
    """Open a transport from a bus index, a device path, or an already-open handle."""
    if isinstance(device, int) and not isinstance(device, bool):
        device = device_path(device)

    if isinstance(device, str):
        if not os.path.exists(device):
            raise DeviceNotFoundError(device)
        logging.debug("Opening I2C device %s", device)
        return SMBusTransport(smbus2.SMBus(device))

    if isinstance(device, smbus2.SMBus):
        return SMBusTransport(device)

    if isinstance(device, AddressedBusTransport):
        return device

    raise TransportTypeError(f"Unsupported I2C device handle: {type(device).__name__}")
