import pytest

from tfdemo.bitstream import BitReader, BitWriter, StreamError
from tfdemo.data import MaybeUtf8String
from tfdemo.gameevent import (
    GameEventDefinition,
    GameEventEntry,
    GameEventError,
    GameEventValue,
    GameEventValueType,
    RawGameEvent,
    read_event_value,
)


def _definition():
    return GameEventDefinition(
        id=23,
        event_type="player_death",
        entries=[
            GameEventEntry("weapon", GameEventValueType.STRING),
            GameEventEntry("damage", GameEventValueType.FLOAT),
            GameEventEntry("userid", GameEventValueType.SHORT),
            GameEventEntry("bits", GameEventValueType.LONG),
            GameEventEntry("team", GameEventValueType.BYTE),
            GameEventEntry("crit", GameEventValueType.BOOLEAN),
            GameEventEntry("local", GameEventValueType.LOCAL),
        ],
    )


def test_value_type_from_discriminant():
    assert [GameEventValueType(n) for n in range(8)] == [
        GameEventValueType.NONE,
        GameEventValueType.STRING,
        GameEventValueType.FLOAT,
        GameEventValueType.LONG,
        GameEventValueType.SHORT,
        GameEventValueType.BYTE,
        GameEventValueType.BOOLEAN,
        GameEventValueType.LOCAL,
    ]
    with pytest.raises(ValueError):
        GameEventValueType(8)


def test_raw_event_round_trip():
    event = RawGameEvent(
        "player_death",
        [
            GameEventValue(GameEventValueType.STRING, MaybeUtf8String("scattergun")),
            GameEventValue(GameEventValueType.FLOAT, 1.5),
            GameEventValue(GameEventValueType.SHORT, 513),
            GameEventValue(GameEventValueType.LONG, 70000),
            GameEventValue(GameEventValueType.BYTE, 3),
            GameEventValue(GameEventValueType.BOOLEAN, True),
            GameEventValue(GameEventValueType.LOCAL),
        ],
    )
    writer = BitWriter()
    event.write(writer)
    reader = BitReader(writer.to_bytes())
    decoded = RawGameEvent.read(reader, _definition())
    assert decoded == event
    assert reader.pos == writer.bit_len()


def test_read_short_value():
    writer = BitWriter()
    writer.write_u16(513)
    value = read_event_value(BitReader(writer.to_bytes()), GameEventEntry("x", GameEventValueType.SHORT))
    assert value == GameEventValue(GameEventValueType.SHORT, 513)


def test_local_value_takes_no_bits():
    writer = BitWriter()
    GameEventValue(GameEventValueType.LOCAL).write(writer)
    assert writer.bit_len() == 0


def test_none_entry_raises():
    with pytest.raises(GameEventError):
        read_event_value(BitReader(b"\x00"), GameEventEntry("x", GameEventValueType.NONE))


def test_none_value_cannot_be_built():
    with pytest.raises(GameEventError):
        GameEventValue(GameEventValueType.NONE)


def test_read_past_end_raises():
    with pytest.raises(StreamError):
        read_event_value(BitReader(b"\x01"), GameEventEntry("x", GameEventValueType.LONG))


def test_definitions_compare_by_id():
    a = GameEventDefinition(5, "a", [])
    b = GameEventDefinition(5, "b", [GameEventEntry("x", GameEventValueType.BYTE)])
    c = GameEventDefinition(2, "c", [])
    assert a == b
    assert sorted([a, c]) == [c, a]
    assert [d.event_type for d in sorted([a, c])] == ["c", "a"]