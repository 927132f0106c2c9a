# tfdemo

Building blocks for working with Team Fortress 2 demo (`.dem`) files.
The package provides the following:

- little endian bit readers and writers
- the fixed size demo header
- strings that may hold invalid UTF-8, and tick counters
- game event definitions and values
- player records from the `userinfo` string table
- LZSS decompression
- FNV-1a hashing
- helpers for naming game events and send props
- a helper that collects demo files on disk

It has no dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Bit streams

`tfdemo.bitstream` reads and writes bits least significant first:

```python
from tfdemo.bitstream import BitReader, BitWriter

writer = BitWriter()
writer.write_bits(5, 3)
writer.write_string("hello")
writer.write_f32(1.5)
data = writer.to_bytes()        # zero padded to whole bytes
writer.bit_len()                # bits written so far

reader = BitReader(data)
reader.read_bits(3)             # 5
reader.read_string()            # "hello"
reader.read_f32()               # 1.5
reader.bits_left()
reader.pos                      # current position in bits
reader.set_pos(0)
```

Each of the following has a matching method on the other class:

| `BitReader`                  | `BitWriter`                             |
| ---------------------------- | --------------------------------------- |
| `read_bool`                  | `write_bool`                            |
| `read_u8`                    | `write_u8`                              |
| `read_u16`                   | `write_u16`                             |
| `read_u32`                   | `write_u32`                             |
| `read_bytes(count)`          | `write_bytes(data)`                     |
| `read_sized_string(size)`    | `write_sized_string(text, size)`        |

`read_sized_string` and `write_sized_string` handle strings in a field of
a fixed number of bytes, padded with nulls.

`StreamError` is raised in these cases:

- reading past the end of the data
- setting a position outside the stream
- decoding a string that is not valid UTF-8
- writing a value that does not fit its bit width
- writing a sized string that is too long for its field

## Demo header

`tfdemo.header.Header` holds these fields:

- `demo_type`
- `version`
- `protocol`
- `server`
- `nick`
- `map`
- `game`
- `duration`
- `ticks`
- `frames`
- `signon`

```python
from pathlib import Path

from tfdemo.bitstream import BitReader, BitWriter
from tfdemo.header import Header

reader = BitReader(Path("match.dem").read_bytes())
header = Header.read(reader)
print(header.map, header.ticks, header.duration)

writer = BitWriter()
header.write(writer)
assert len(writer.to_bytes()) == 1072
```

## Data types

`tfdemo.data.MaybeUtf8String` holds a null terminated string:

- `MaybeUtf8String.read(reader)` keeps the raw bytes when they are not
  valid UTF-8. `is_valid` tells the two cases apart.
- `str()` gives the text, or `"-- Malformed utf8 --"` when the bytes are
  not valid UTF-8.
- `as_bytes()` returns the raw bytes.
- `write(writer)` writes the bytes followed by a null byte.

`ServerTick` and `DemoTick` are unsigned 32 bit integers:

- Adding or subtracting a plain `int` gives the same tick type.
- Mixing the two tick types raises `TypeError`.
- A value outside the 32 bit range raises `ValueError`.
- `range_inclusive(till)` yields every tick up to and including `till`.

## Game events

`tfdemo.gameevent` provides these classes:

- `GameEventValueType` lists the value types of event entries.
- `GameEventEntry` is one named, typed entry.
- `GameEventDefinition` describes an event: an `id`, an `event_type` name
  and a list of entries. Definitions compare and sort by `id` alone.
- `GameEventValue` is one typed value, written with `write(writer)`.
- `RawGameEvent` is a whole event, with one value per entry.

```python
from tfdemo.gameevent import (
    GameEventDefinition, GameEventEntry, GameEventValueType, RawGameEvent,
)

definition = GameEventDefinition(
    id=23,
    event_type="player_death",
    entries=[GameEventEntry("userid", GameEventValueType.SHORT)],
)
event = RawGameEvent.read(reader, definition)
event.write(writer)
```

`read_event_value(reader, entry)` reads a single value.

`GameEventError` is raised in two cases: when an entry has the type
`NONE`, and when a `GameEventValue` is built with that type.

## Player info

In `tfdemo.userinfo`, `PlayerInfo` is the 132 byte player record, with
`read(reader)` and `write(writer)`.

`UserInfo.parse_from_string_table(index, text, data)` builds a user from
a string table entry. `data` is a `BitReader` over the entry's extra data.

- The entity id is the entry text plus one. When the entry has no text,
  it is the index plus one.
- `None` is returned for:
  - bots
  - entries without data
  - entries whose text is not a number
  - entries with an empty steam id

`encode_to_string_table()` returns the entry text and the encoded record
as a `(str, bytes)` pair.

## LZSS

```python
from tfdemo.lzss import decompress

plain = decompress(compressed_block)
```

The input starts with a little endian u32 target length.

- Decoding stops when the input runs out, or at an invalid or oversized
  back reference.
- `ValueError` is raised when the input is shorter than 4 bytes.
- `ValueError` is also raised when a back reference points before the
  start of the output.

## Hashing

`tfdemo.consthash.ConstFnvHash` is an immutable 64 bit FNV-1a hasher:

- `update(data)` consumes bytes and returns a new hasher.
- `push_string(text)` consumes the UTF-8 bytes of `text` followed by
  `0xff`.
- `finish()` returns the hash value.

```python
from tfdemo.consthash import ConstFnvHash

value = ConstFnvHash().push_string("foobar").push_string("another input").finish()
```

## Naming helpers

`tfdemo.naming` turns raw event and entry names into readable identifiers:

```python
from tfdemo.naming import get_entry_name, get_event_name, get_type_name
from tfdemo.gameevent import GameEventValueType

get_event_name("player_changename")        # "PlayerChangeName"
get_entry_name("userid")                   # "user_id"
get_entry_name("type")                     # "kind"
get_type_name(GameEventValueType.SHORT)    # "u16"
```

`to_snake_case` and `to_pascal_case` are available on their own.

## Send prop names

In `tfdemo.propnames`, `collect_prop_names(tables)` takes
`(table_name, prop_names)` pairs. It returns every `(table, prop)` pair,
sorted.

- Tables that hold `lengthproxy` or `lengthprop*` props are skipped.
- Some tables have props named as three digit array indices. These tables
  are filled out to every index from `000` up to their size.
- `numeric_table_size(table_name)` gives that size. Tables it does not
  know get 65.

## Finding demo files

```python
from tfdemo.files import gather_dir

for path in gather_dir("demos"):
    print(path)
```

`gather_dir` treats its argument in one of two ways:

- For a directory, it searches recursively for `.dem` files, in name
  order.
- For a file, it reads one path per line.

## What this package does not do

This package covers the header and several data structures. It does not
parse a whole demo: there is no packet or message parser, no entity or
send table decoding, and no game state analysis.

It has no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```