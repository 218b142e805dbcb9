# codelessons

A set of small worked examples. Each one fits in a single module:

| Module | What it does |
| --- | --- |
| `codelessons.linked_list` | A doubly linked list (`LinkedList`) that you can also walk with a `Cursor` |
| `codelessons.bitgrid` | A packed bit grid (`BitGrid`) with a four-way flood fill |
| `codelessons.datepack` | `pack_date_time` packs a date and time into five bytes; `unpack_date_time` reads them back as a `DateTime` |
| `codelessons.numfmt` | `format_integer`, which groups digits in threes with commas |
| `codelessons.comments` | `comment_offsets` and `strip_line_comments` for `//` line comments |
| `codelessons.monthhash` | `MonthHasher`, which hashes three-letter month abbreviations and maps the hashes to 0-based month indexes |
| `codelessons.dps` | Reads a combat log and reports damage per second for each fight |
| `codelessons.database` | SQLite helpers: `Database`, `Statement`, `update`, `insert` and `DatabaseError` |
| `codelessons.dbquery` | `select`, which returns the first row of a query converted to `ColumnType`s, and `convert_value` |
| `codelessons.keyvalue` | `parse_pairs`, `parse_config` and `load_pairs` for `key=value` lines |
| `codelessons.brackets` | `find_bracket_groups`, which finds two bracketed words on one line with a regular expression |
| `codelessons.records` | `Record` (contact details), `Date` (bit-width-limited date) and `shift_characters` |

The package needs only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from codelessons.linked_list import LinkedList
from codelessons.numfmt import format_integer
from codelessons.datepack import pack_date_time, unpack_date_time

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
print(list(items))            # [0, 1, 2, 3, 4]
print(list(reversed(items)))  # [4, 3, 2, 1, 0]

print(format_integer(-123456789777666555))  # -123,456,789,777,666,555

packed = pack_date_time(2024, 8, 19, 18, 38, 13)
print(len(packed))                  # 5
print(unpack_date_time(packed))     # 2024-08-19 18:38:13
```

A flood fill on a small picture:

```python
from codelessons.bitgrid import BitGrid

grid = BitGrid.from_rows([0x00, 0x3C, 0x44, 0x42, 0x24, 0x18], 8)
print(grid.render())
grid.flood_fill(2, 2, 1)
print(grid.render())
```

Running statements against SQLite:

```python
from codelessons.database import Database, Statement, update, insert

with Database(":memory:") as db:
    update(db, "create table users (name text, age integer, height real)")
    row_id = insert(db, "insert into users values (?, ?, ?)", "NewCoder", 111, 77.7)
    with Statement(db, "select * from users where name = ?") as select_user:
        select_user.bind("NewCoder")
        select_user.foreach_row(lambda name, age, height: print(name, age, height) or True,
                                str, int, float)
```

## Command-line tools

Damage per second for each fight in a combat log:

```
codelessons-dps path/to/combat_log.txt
```

A fight starts at the first damage line and ends when something is slain or
the logger changes zone. For each fight the tool prints the elapsed seconds
and, for each actor and each way of dealing damage, the total damage and the
damage per second.

Print the pairs in a `key=value` file:

```
codelessons-keyvalue [path]
```

Without a path it reads `load_me.txt` in the current directory. It prints the
file's contents and then each pair as `"key" => "value"`; a line without `=`
stops it with an error.

## What it does not do

The combat-log tool only reads damage, kill and zone-change lines; every other
line is ignored, and nothing is stored between runs.