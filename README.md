# dequemu

An interactive emulator of a double-ended queue of strings with a cursor.
The cursor moves over the items the way an iterator does. It can also rest on
a final `end` position, one past the last item. The emulator offers the basic
deque operations and a set of standard algorithms: find, count, min/max
element, a stable merge sort (case-sensitive or case-insensitive), unique,
lower bound and upper bound.

## Installation

```
pip install .
```

## Command line

Start a session:

```
dequemu [--seed N]
```

`--seed` seeds the random generator that `shuffle` uses.

The program reads one command per line from standard input. Blank lines are
skipped, and `quit` or `exit` ends the session. After each command it prints
the rows. Each row is numbered, the final row is `end`, and the row under the
cursor is marked with `>`. It then prints the size and the current item. An
unknown command, or `select` without a number, prints an error to standard
error, and the session goes on.

| Command | Effect |
| --- | --- |
| `push_front TEXT`, `push_back TEXT` | add an item at either end |
| `pop_front`, `pop_back` | remove an item from either end |
| `insert TEXT` | insert before the cursor, or append when the cursor is at `end` |
| `erase` | remove the item under the cursor |
| `edit TEXT` | replace the item under the cursor |
| `clear` | remove all items |
| `prev`, `next`, `begin`, `end` | move the cursor |
| `select ROW` | put the cursor on a row (clamped to `0..size`) |
| `resize N` | resize to `N` items, from 0 to 1000 |
| `reverse`, `shuffle` | reorder the items |
| `find TEXT` | cursor to the first equal item, or to `end` if there is none |
| `count TEXT` | print how many items equal `TEXT` |
| `min_element`, `max_element` | cursor to the smallest or largest item |
| `merge_sort` | stable case-sensitive sort |
| `merge_sort_ci` | stable case-insensitive sort |
| `unique` | drop consecutive equivalent items |
| `lower_bound TEXT`, `upper_bound TEXT` | binary search for the bound |
| `tea`, `cakes` | load a sample set of ten items |

Rules:

- Text arguments are stripped. An empty text makes the command do nothing.
- Any change to the contents puts the cursor back at the beginning, except
  `edit`, which leaves the cursor where it is. `reverse` and `shuffle` also
  keep the cursor's index.
- `unique`, `lower_bound` and `upper_bound` do nothing until the deque has
  been sorted. Any change to the contents discards the sort order.
  `min_element`, `max_element`, `unique` and the bounds compare case-
  insensitively after `merge_sort_ci`. In every other case they compare
  case-sensitively.
- `resize` ignores anything that is not a whole number from 0 to 1000. A
  deque that grows is padded with empty strings.

## Library use

```python
import random

from dequemu.algo import merge_sort
from dequemu.emulator import DequeEmulator

emu = DequeEmulator(random.Random(42))
emu.load_tea()
emu.merge_sort_case_insensitive()
emu.lower_bound("Пуэр")
print(emu.current(), emu.rows())
print(emu.controls())

print(merge_sort(["b", "A", "a"], lambda x, y: x.lower() < y.lower()))
# ['A', 'a', 'b']
```

`DequeEmulator` keeps its state in `items`, `pos` and `sort_mode` (a
`SortMode`). `controls()` returns a `Controls` record. It tells which
actions are available in the current state. `merge` and `merge_sort` in
`dequemu.algo` take any "less than" callable, and both are stable.
`dequemu.cli` provides `execute(emulator, line)` and `render(emulator)` for
driving an emulator from text.

## Limitations

There is no graphical window. The only front end is the line-oriented
session on standard input and output. The contents are not saved between
sessions.

## Running the tests

```
pip install .[test]
pytest
```