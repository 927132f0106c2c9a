"""Game event definitions and the generic, definition driven event reader."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from tfdemo.bitstream import BitReader, BitWriter
from tfdemo.data import MaybeUtf8String


class GameEventError(Exception):
    """Raised when a game event cannot be read or built."""


class GameEventValueType(IntEnum):
    """Type of a game event entry, stored on the wire in 3 bits."""

    NONE = 0
    STRING = 1
    FLOAT = 2
    LONG = 3
    SHORT = 4
    BYTE = 5
    BOOLEAN = 6
    LOCAL = 7


@dataclass(frozen=True)
class GameEventEntry:
    """One named, typed field of a game event definition."""

    name: str
    kind: GameEventValueType


@functools.total_ordering
@dataclass(eq=False)
class GameEventDefinition:
    """Layout of one event type; definitions compare and sort by id alone."""

    id: int
    event_type: str
    entries: list[GameEventEntry] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameEventDefinition):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GameEventDefinition):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)


EventPayload = Union[MaybeUtf8String, float, int, bool, None]


@dataclass(frozen=True)
class GameEventValue:
    """A single value of a game event, tagged with its type."""

    kind: GameEventValueType
    value: EventPayload = None

    def __post_init__(self) -> None:
        if self.kind is GameEventValueType.NONE:
            raise GameEventError("a game event value cannot have type None")

    def write(self, writer: BitWriter) -> None:
        """Write the value in its wire format; local values take no space."""
        kind = self.kind
        if kind is GameEventValueType.STRING:
            text = self.value
            if not isinstance(text, MaybeUtf8String):
                text = MaybeUtf8String(text if text is not None else "")
            text.write(writer)
        elif kind is GameEventValueType.FLOAT:
            writer.write_f32(float(self.value))
        elif kind is GameEventValueType.LONG:
            writer.write_u32(int(self.value))
        elif kind is GameEventValueType.SHORT:
            writer.write_u16(int(self.value))
        elif kind is GameEventValueType.BYTE:
            writer.write_u8(int(self.value))
        elif kind is GameEventValueType.BOOLEAN:
            writer.write_bool(bool(self.value))


def read_event_value(reader: BitReader, entry: GameEventEntry) -> GameEventValue:
    """Read one value of the type that ``entry`` declares."""
    kind = entry.kind
    if kind is GameEventValueType.STRING:
        return GameEventValue(kind, MaybeUtf8String.read(reader))
    if kind is GameEventValueType.FLOAT:
        return GameEventValue(kind, reader.read_f32())
    if kind is GameEventValueType.LONG:
        return GameEventValue(kind, reader.read_u32())
    if kind is GameEventValueType.SHORT:
        return GameEventValue(kind, reader.read_u16())
    if kind is GameEventValueType.BYTE:
        return GameEventValue(kind, reader.read_u8())
    if kind is GameEventValueType.BOOLEAN:
        return GameEventValue(kind, reader.read_bool())
    if kind is GameEventValueType.LOCAL:
        return GameEventValue(kind)
    raise GameEventError(f"entry {entry.name!r} has type None and holds no value")


@dataclass
class RawGameEvent:
    """An event read generically: its type and one value per definition entry."""

    event_type: str
    values: list[GameEventValue] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BitReader, definition: GameEventDefinition) -> RawGameEvent:
        values = [read_event_value(reader, entry) for entry in definition.entries]
        return cls(definition.event_type, values)

    def write(self, writer: BitWriter) -> None:
        for value in self.values:
            value.write(writer)