import pytest

from tfdemo.bitstream import BitReader, BitWriter, StreamError
from tfdemo.userinfo import PlayerInfo, UserInfo


def _record(name=b"Scout", steam_id="[U:1:1234]", user_id=7):
    info = PlayerInfo(name="x", user_id=user_id, steam_id=steam_id, friends_id=9, custom_file=(1, 2, 3, 4))
    writer = BitWriter()
    info.write(writer)
    data = bytearray(writer.to_bytes())
    data[0:32] = name.ljust(32, b"\x00")
    return bytes(data)


def test_record_is_132_bytes():
    _, data = UserInfo(entity_id=3, player_info=PlayerInfo(name="Heavy", steam_id="[U:1:1]")).encode_to_string_table()
    assert len(data) == 132


def test_player_info_round_trip():
    info = PlayerInfo(
        name="Medic",
        user_id=42,
        steam_id="[U:1:5555]",
        extra=1,
        friends_id=5555,
        is_fake_player=0,
        is_hl_tv=1,
        is_replay=0,
        custom_file=(10, 20, 30, 40),
        files_downloaded=2,
        more_extra=1,
    )
    writer = BitWriter()
    info.write(writer)
    assert PlayerInfo.read(BitReader(writer.to_bytes())) == info


def test_parse_uses_text_as_entity_index():
    user = UserInfo.parse_from_string_table(0, "5", BitReader(_record()))
    assert user.entity_id == 6
    assert user.player_info.name == "Scout"
    assert user.player_info.steam_id == "[U:1:1234]"
    assert user.player_info.user_id == 7


def test_parse_without_text_uses_index():
    user = UserInfo.parse_from_string_table(4, None, BitReader(_record()))
    assert user.entity_id == 5


def test_bots_are_skipped():
    assert UserInfo.parse_from_string_table(0, "1", BitReader(_record(steam_id="BOT"))) is None


def test_empty_steam_id_is_skipped():
    assert UserInfo.parse_from_string_table(0, "1", BitReader(_record(steam_id=""))) is None


def test_invalid_text_is_skipped():
    assert UserInfo.parse_from_string_table(0, "abc", BitReader(_record())) is None


def test_missing_data_gives_none():
    assert UserInfo.parse_from_string_table(0, "1", None) is None


def test_malformed_name_is_replaced():
    user = UserInfo.parse_from_string_table(0, "1", BitReader(_record(name=b"\xffab")))
    assert user.player_info.name == "\ufffdab"


def test_encode_round_trip():
    original = UserInfo(entity_id=12, player_info=PlayerInfo(name="Pyro", user_id=3, steam_id="[U:1:77]"))
    text, data = original.encode_to_string_table()
    assert text == "12"
    decoded = UserInfo.parse_from_string_table(0, text, BitReader(data))
    assert decoded.player_info == original.player_info


def test_truncated_record_raises():
    with pytest.raises(StreamError):
        UserInfo.parse_from_string_table(0, "1", BitReader(_record()[:50]))