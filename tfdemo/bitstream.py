"""Little endian bit streams: bits are consumed least significant first."""

from __future__ import annotations

import struct


class StreamError(Exception):
    """Raised when a stream cannot be read or written as requested."""


class BitReader:
    """Reads values bit by bit from a byte string."""

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self._data = bytes(data)
        self._bit_len = len(self._data) * 8
        self._pos = 0
        self.set_pos(pos)

    @property
    def pos(self) -> int:
        """Current position in bits."""
        return self._pos

    def set_pos(self, pos: int) -> None:
        """Move to an absolute bit position."""
        if not 0 <= pos <= self._bit_len:
            raise StreamError(f"position {pos} is outside the stream of {self._bit_len} bits")
        self._pos = pos

    def bits_left(self) -> int:
        """Number of bits not yet read."""
        return self._bit_len - self._pos

    def read_bits(self, count: int) -> int:
        """Read ``count`` bits as an unsigned integer."""
        if count < 0:
            raise ValueError("bit count must not be negative")
        left = self.bits_left()
        if count > left:
            raise StreamError(f"not enough data: {count} bits requested, {left} left")
        if count == 0:
            return 0
        start = self._pos >> 3
        end = (self._pos + count + 7) >> 3
        chunk = int.from_bytes(self._data[start:end], "little")
        value = (chunk >> (self._pos & 7)) & ((1 << count) - 1)
        self._pos += count
        return value

    def read_bool(self) -> bool:
        return self.read_bits(1) == 1

    def read_u8(self) -> int:
        return self.read_bits(8)

    def read_u16(self) -> int:
        return self.read_bits(16)

    def read_u32(self) -> int:
        return self.read_bits(32)

    def read_f32(self) -> float:
        return struct.unpack("<f", self.read_bits(32).to_bytes(4, "little"))[0]

    def read_bytes(self, count: int) -> bytes:
        """Read ``count`` whole bytes, aligned or not."""
        if count < 0:
            raise ValueError("byte count must not be negative")
        return self.read_bits(count * 8).to_bytes(count, "little")

    def read_string(self) -> str:
        """Read a null terminated UTF-8 string."""
        raw = bytearray()
        while (byte := self.read_u8()) != 0:
            raw.append(byte)
        return _decode(bytes(raw))

    def read_sized_string(self, size: int) -> str:
        """Read a fixed size field of ``size`` bytes holding a null padded string."""
        raw = self.read_bytes(size)
        return _decode(raw.split(b"\x00", 1)[0])


def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StreamError(f"invalid utf-8 in string: {exc}") from exc


class BitWriter:
    """Accumulates bits least significant first and yields the packed bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._bit_len = 0

    def write_bits(self, value: int, count: int) -> None:
        """Append the low ``count`` bits of an unsigned ``value``."""
        if count < 0:
            raise ValueError("bit count must not be negative")
        if not 0 <= value < (1 << count):
            raise StreamError(f"value {value} does not fit in {count} bits")
        self._value |= value << self._bit_len
        self._bit_len += count

    def write_bool(self, value: bool) -> None:
        self.write_bits(1 if value else 0, 1)

    def write_u8(self, value: int) -> None:
        self.write_bits(value, 8)

    def write_u16(self, value: int) -> None:
        self.write_bits(value, 16)

    def write_u32(self, value: int) -> None:
        self.write_bits(value, 32)

    def write_f32(self, value: float) -> None:
        self.write_bytes(struct.pack("<f", value))

    def write_bytes(self, data: bytes) -> None:
        self.write_bits(int.from_bytes(data, "little"), len(data) * 8)

    def write_string(self, text: str) -> None:
        """Write ``text`` as UTF-8 followed by a null byte."""
        self.write_bytes(text.encode("utf-8"))
        self.write_u8(0)

    def write_sized_string(self, text: str, size: int) -> None:
        """Write ``text`` into a field of exactly ``size`` bytes, null padded."""
        raw = text.encode("utf-8")
        if len(raw) > size:
            raise StreamError(f"string of {len(raw)} bytes does not fit in {size} bytes")
        self.write_bytes(raw.ljust(size, b"\x00"))

    def bit_len(self) -> int:
        """Number of bits written so far."""
        return self._bit_len

    def to_bytes(self) -> bytes:
        """The written bits, zero padded to a whole number of bytes."""
        return self._value.to_bytes((self._bit_len + 7) // 8, "little")