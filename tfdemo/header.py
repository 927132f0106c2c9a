"""The fixed size header at the start of every demo file."""

from __future__ import annotations

from dataclasses import dataclass

from tfdemo.bitstream import BitReader, BitWriter

_DEMO_TYPE_SIZE = 8
_TEXT_FIELD_SIZE = 260


@dataclass
class Header:
    """Demo header: identification, server details and recording length."""

    demo_type: str
    version: int
    protocol: int
    server: str
    nick: str
    map: str
    game: str
    duration: float
    ticks: int
    frames: int
    signon: int

    @classmethod
    def read(cls, reader: BitReader) -> Header:
        return cls(
            demo_type=reader.read_sized_string(_DEMO_TYPE_SIZE),
            version=reader.read_u32(),
            protocol=reader.read_u32(),
            server=reader.read_sized_string(_TEXT_FIELD_SIZE),
            nick=reader.read_sized_string(_TEXT_FIELD_SIZE),
            map=reader.read_sized_string(_TEXT_FIELD_SIZE),
            game=reader.read_sized_string(_TEXT_FIELD_SIZE),
            duration=reader.read_f32(),
            ticks=reader.read_u32(),
            frames=reader.read_u32(),
            signon=reader.read_u32(),
        )

    def write(self, writer: BitWriter) -> None:
        writer.write_sized_string(self.demo_type, _DEMO_TYPE_SIZE)
        writer.write_u32(self.version)
        writer.write_u32(self.protocol)
        writer.write_sized_string(self.server, _TEXT_FIELD_SIZE)
        writer.write_sized_string(self.nick, _TEXT_FIELD_SIZE)
        writer.write_sized_string(self.map, _TEXT_FIELD_SIZE)
        writer.write_sized_string(self.game, _TEXT_FIELD_SIZE)
        writer.write_f32(self.duration)
        writer.write_u32(self.ticks)
        writer.write_u32(self.frames)
        writer.write_u32(self.signon)