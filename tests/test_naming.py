import pytest

from tfdemo.gameevent import GameEventValueType
from tfdemo.naming import (
    get_entry_name,
    get_event_name,
    get_type_name,
    to_pascal_case,
    to_snake_case,
)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (GameEventValueType.STRING, "MaybeUtf8String"),
        (GameEventValueType.FLOAT, "f32"),
        (GameEventValueType.BOOLEAN, "bool"),
        (GameEventValueType.BYTE, "u8"),
        (GameEventValueType.LOCAL, "()"),
        (GameEventValueType.LONG, "u32"),
        (GameEventValueType.SHORT, "u16"),
        (GameEventValueType.NONE, "()"),
    ],
)
def test_type_names(kind, expected):
    assert get_type_name(kind) == expected


def test_type_name_rejects_unknown_kind():
    with pytest.raises(ValueError):
        get_type_name(9)


def test_type_entry_becomes_kind():
    assert get_entry_name("type") == "kind"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("userid", "user_id"),
        ("defindex", "definition_index"),
        ("maxplayers", "max_players"),
        ("entindex", "ent_index"),
        ("killstreak", "kill_stream"),
    ],
)
def test_entry_replacements(name, expected):
    assert get_entry_name(name) == expected


def test_entry_already_snake_is_unchanged():
    assert get_entry_name("health_after") == "health_after"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("replay_replaysavailable", "ReplayReplaysAvailable"),
        ("server_addban", "ServerAddBan"),
        ("player_changename", "PlayerChangeName"),
        ("localplayer_changeteam", "LocalPlayerChangeTeam"),
        ("client_fullconnect", "ClientFullConnect"),
    ],
)
def test_event_names(name, expected):
    assert get_event_name(name) == expected


@pytest.mark.parametrize("name", ["player_hurt", "round_start", "abc_def_ghi"])
def test_snake_pascal_round_trip(name):
    assert to_snake_case(to_pascal_case(name)) == name


@pytest.mark.parametrize("name", ["player_hurt", "PlayerHurt", "player-hurt", "playerHurt"])
def test_case_forms_agree(name):
    assert to_snake_case(name) == to_snake_case("player_hurt")
    assert to_pascal_case(name) == to_pascal_case("PlayerHurt")


def test_pascal_has_no_separators():
    result = to_pascal_case("some_long__event name")
    assert "_" not in result and " " not in result
    assert result[0].isupper()