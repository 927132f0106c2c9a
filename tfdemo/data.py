"""Basic demo data types: possibly malformed strings and tick counters."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeVar

from tfdemo.bitstream import BitReader, BitWriter

MALFORMED_UTF8 = "-- Malformed utf8 --"

_U32_LIMIT = 1 << 32


@dataclass(frozen=True)
class MaybeUtf8String:
    """A null terminated string that may hold bytes which are not valid UTF-8."""

    value: str | bytes = ""

    @property
    def is_valid(self) -> bool:
        return isinstance(self.value, str)

    def __str__(self) -> str:
        return self.value if isinstance(self.value, str) else MALFORMED_UTF8

    @classmethod
    def read(cls, reader: BitReader) -> MaybeUtf8String:
        """Read a null terminated string, keeping the raw bytes if they are not UTF-8."""
        raw = bytearray()
        while (byte := reader.read_u8()) != 0:
            raw.append(byte)
        try:
            return cls(bytes(raw).decode("utf-8"))
        except UnicodeDecodeError:
            return cls(bytes(raw))

    def write(self, writer: BitWriter) -> None:
        """Write the raw bytes followed by a null terminator."""
        writer.write_bytes(self.as_bytes())
        writer.write_u8(0)

    def as_bytes(self) -> bytes:
        if isinstance(self.value, str):
            return self.value.encode("utf-8")
        return self.value


_T = TypeVar("_T", bound="_Tick")


class _Tick(int):
    """An unsigned 32 bit tick counter."""

    def __new__(cls: type[_T], value: int = 0) -> _T:
        value = int(value)
        if not 0 <= value < _U32_LIMIT:
            raise ValueError(f"{cls.__name__} out of range: {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)

    def _operand(self, other: object) -> int:
        if isinstance(other, _Tick) and type(other) is not type(self):
            raise TypeError(f"cannot combine {type(self).__name__} with {type(other).__name__}")
        if not isinstance(other, int) or isinstance(other, bool):
            raise TypeError(f"unsupported operand: {other!r}")
        return int(other)

    def __add__(self: _T, other: object) -> _T:
        return type(self)(int(self) + self._operand(other))

    def __sub__(self: _T, other: object) -> _T:
        return type(self)(int(self) - self._operand(other))

    def _ticks_until(self: _T, till: int) -> Iterator[_T]:
        return (type(self)(tick) for tick in range(int(self), int(till) + 1))


class ServerTick(_Tick):
    """Tick relative to the start of the game on the server."""

    def range_inclusive(self, till: ServerTick) -> Iterator[ServerTick]:
        """Yield every tick from this one up to and including ``till``."""
        return self._ticks_until(till)


class DemoTick(_Tick):
    """Tick relative to the start of the demo."""

    def range_inclusive(self, till: DemoTick) -> Iterator[DemoTick]:
        """Yield every tick from this one up to and including ``till``."""
        return self._ticks_until(till)