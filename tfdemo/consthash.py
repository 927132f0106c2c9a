"""FNV-1a 64 bit hashing over byte strings and string sequences."""

from __future__ import annotations

from dataclasses import dataclass

_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK_64 = (1 << 64) - 1


@dataclass(frozen=True)
class ConstFnvHash:
    """Immutable FNV-1a hasher; every update returns a new hasher."""

    state: int = _FNV_OFFSET_BASIS

    def push_string(self, text: str) -> ConstFnvHash:
        """Hash a string the way a hashed `str` is fed: its bytes, then 0xff."""
        return self.update(text.encode("utf-8")).update(b"\xff")

    def update(self, data: bytes) -> ConstFnvHash:
        """Return a hasher that has additionally consumed ``data``."""
        state = self.state
        for byte in data:
            state = ((state ^ byte) * _FNV_PRIME) & _MASK_64
        return ConstFnvHash(state)

    def finish(self) -> int:
        """Return the 64 bit hash value."""
        return self.state