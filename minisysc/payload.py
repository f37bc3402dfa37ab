"""Generic transaction payload for blocking transport calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Command(IntEnum):
    READ = 0
    WRITE = 1
    IGNORE = 2


class ResponseStatus(IntEnum):
    OK = 1
    INCOMPLETE = 0
    GENERIC_ERROR = -1
    ADDRESS_ERROR = -2
    COMMAND_ERROR = -3
    BURST_ERROR = -4
    BYTE_ENABLE_ERROR = -5


@dataclass
class GenericPayload:
    """A bus transaction: command, address, data buffer and length."""

    address: int = 0
    command: Command = Command.IGNORE
    data: bytearray = field(default_factory=bytearray)
    data_length: int = 0

    def __post_init__(self) -> None:
        self.command = Command(self.command)
        if not 0 <= self.address < (1 << 64):
            raise ValueError(f"address {self.address} out of range")
        if self.data_length < 0:
            raise ValueError("data length must not be negative")

    def is_read(self) -> bool:
        return self.command == Command.READ

    def set_read(self) -> None:
        self.command = Command.READ

    def is_write(self) -> bool:
        return self.command == Command.WRITE

    def set_write(self) -> None:
        self.command = Command.WRITE