"""Player information as stored in the userinfo string table."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from tfdemo.bitstream import BitReader, BitWriter

_NAME_SIZE = 32
_STEAM_ID_SIZE = 32
_FRIENDS_NAME_SIZE = 32
_CUSTOM_FILE_COUNT = 4
_RECORD_SIZE = 132
_U32_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class PlayerInfo:
    """The fixed size player record carried as string table extra data."""

    name: str = ""
    user_id: int = 0
    steam_id: str = ""
    extra: int = 0
    friends_id: int = 0
    friends_name_bytes: bytes = bytes(_FRIENDS_NAME_SIZE)
    is_fake_player: int = 0
    is_hl_tv: int = 0
    is_replay: int = 0
    custom_file: tuple[int, int, int, int] = (0, 0, 0, 0)
    files_downloaded: int = 0
    more_extra: int = 0

    @classmethod
    def read(cls, reader: BitReader) -> PlayerInfo:
        """Read a record; a malformed name is decoded with replacement characters."""
        name_bytes = reader.read_bytes(_NAME_SIZE)
        return cls(
            name=name_bytes.decode("utf-8", errors="replace").rstrip("\0"),
            user_id=reader.read_u32(),
            steam_id=reader.read_sized_string(_STEAM_ID_SIZE),
            extra=reader.read_u32(),
            friends_id=reader.read_u32(),
            friends_name_bytes=reader.read_bytes(_FRIENDS_NAME_SIZE),
            is_fake_player=reader.read_u8(),
            is_hl_tv=reader.read_u8(),
            is_replay=reader.read_u8(),
            custom_file=tuple(reader.read_u32() for _ in range(_CUSTOM_FILE_COUNT)),
            files_downloaded=reader.read_u32(),
            more_extra=reader.read_u8(),
        )

    def write(self, writer: BitWriter) -> None:
        writer.write_sized_string(self.name, _NAME_SIZE)
        writer.write_u32(self.user_id)
        writer.write_sized_string(self.steam_id, _STEAM_ID_SIZE)
        writer.write_u32(self.extra)
        writer.write_u32(self.friends_id)
        writer.write_bytes(bytes(self.friends_name_bytes).ljust(_FRIENDS_NAME_SIZE, b"\x00")[:_FRIENDS_NAME_SIZE])
        writer.write_u8(self.is_fake_player)
        writer.write_u8(self.is_hl_tv)
        writer.write_u8(self.is_replay)
        if len(self.custom_file) != _CUSTOM_FILE_COUNT:
            raise ValueError(f"custom_file must hold {_CUSTOM_FILE_COUNT} values")
        for value in self.custom_file:
            writer.write_u32(value)
        writer.write_u32(self.files_downloaded)
        writer.write_u8(self.more_extra)


def _parse_u32(text: str) -> int | None:
    if not _U32_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value < (1 << 32) else None


@dataclass
class UserInfo:
    """A player together with the entity that represents it."""

    entity_id: int = 0
    player_info: PlayerInfo = field(default_factory=PlayerInfo)

    @classmethod
    def parse_from_string_table(
        cls, index: int, text: str | None, data: BitReader | None
    ) -> UserInfo | None:
        """Build a user from a string table entry, or None for bots and empty entries."""
        if data is None:
            return None
        info = PlayerInfo.read(data)
        if info.steam_id.strip() == "BOT":
            return None
        if text is None:
            entity_id = index + 1
        else:
            parsed = _parse_u32(text)
            if parsed is None:
                return None
            entity_id = parsed + 1
        if not info.steam_id:
            return None
        return cls(entity_id=entity_id, player_info=info)

    def encode_to_string_table(self) -> tuple[str, bytes]:
        """Return the entry text and the encoded player record."""
        writer = BitWriter()
        self.player_info.write(writer)
        data = writer.to_bytes()
        assert len(data) == _RECORD_SIZE
        return str(self.entity_id), data