"""Semihosting operation codes and parameter blocks for host calls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

O_RDONLY = 0
O_WRONLY = 1
O_RDWR = 2
O_TRUNC = 0x0800


class SemihostOp(IntEnum):
    """Semihosting operation numbers."""

    CLOCK = 0x10
    CLOSE = 0x02
    ELAPSED = 0x30
    ERRNO = 0x13
    EXIT = 0x18
    EXIT_EXTENDED = 0x20
    FLEN = 0x0C
    GET_CMDLINE = 0x15
    HEAPINFO = 0x16
    ISERROR = 0x08
    ISTTY = 0x09
    OPEN = 0x01
    READ = 0x06
    READC = 0x07
    REMOVE = 0x0E
    RENAME = 0x0F
    SEEK = 0x0A
    SYSTEM = 0x12
    TICKFREQ = 0x31
    TIME = 0x11
    TMPNAM = 0x0D
    WRITE = 0x05
    WRITEC = 0x03
    WRITE0 = 0x04


class AdpCode(IntEnum):
    """Stop reasons reported to the host."""

    STOPPED_BRANCH_THROUGH_ZERO = 0x20000
    STOPPED_UNDEFINED_INSTR = 0x20001
    STOPPED_SOFTWARE_INTERRUPT = 0x20002
    STOPPED_PREFETCH_ABORT = 0x20003
    STOPPED_DATA_ABORT = 0x20004
    STOPPED_ADDRESS_EXCEPTION = 0x20005
    STOPPED_IRQ = 0x20006
    STOPPED_FIQ = 0x20007
    STOPPED_BREAK_POINT = 0x20020
    STOPPED_WATCH_POINT = 0x20021
    STOPPED_STEP_COMPLETE = 0x20022
    STOPPED_RUN_TIME_ERROR_UNKNOWN = 0x20023
    STOPPED_INTERNAL_ERROR = 0x20024
    STOPPED_USER_INTERRUPTION = 0x20025
    STOPPED_APPLICATION_EXIT = 0x20026
    STOPPED_STACK_OVERFLOW = 0x20027
    STOPPED_DIVISION_BY_ZERO = 0x20028
    STOPPED_OS_SPECIFIC = 0x20029


@dataclass(frozen=True)
class SemihostParams:
    """The three-word parameter block handed to the host."""

    param1: int
    param2: int
    param3: int


def open_mode(flags: int) -> int:
    """Translate POSIX-style open flags into a semihosting open mode."""
    access = flags & (O_RDONLY | O_WRONLY | O_RDWR)
    truncate = bool(flags & O_TRUNC)
    if access == O_RDONLY:
        return 0  # 'r'
    if access == O_WRONLY:
        return 4 if truncate else 8  # 'w' / 'a'
    return 6 if truncate else 10  # 'w+' / 'a+'


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def open_params(name: str | bytes, flags: int, address: int) -> SemihostParams:
    """Build the parameter block for an open call.

    ``address`` is where the file name lives in target memory.
    """
    if name is None:
        raise ValueError("a file name is required")
    _check_non_negative("address", address)
    encoded = name.encode("utf-8") if isinstance(name, str) else bytes(name)
    return SemihostParams(address, open_mode(flags), len(encoded))


def write_params(fd: int, address: int, length: int) -> SemihostParams:
    """Build the parameter block for a write call."""
    _check_non_negative("fd", fd)
    _check_non_negative("address", address)
    _check_non_negative("length", length)
    return SemihostParams(fd, address, length)