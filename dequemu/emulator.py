"""A deque with a cursor, driven by the operations of the emulator's buttons."""

from __future__ import annotations

import bisect
import enum
import functools
import random
import re
from collections.abc import Callable
from dataclasses import dataclass

from dequemu.algo import merge_sort

MAX_DEQUE_SIZE = 1000

TEA = (
    "Чай Лунцзин", "Эрл Грей", "Сенча", "Пуэр", "Дарджилинг",
    "Ассам", "Матча", "Ганпаудер", "Оолонг", "Лапсанг Сушонг",
)

CAKES = (
    "Красный бархат", "Наполеон", "Медовик", "Тирамису", "Прага",
    "Чизкейк", "Захер", "Эстерхази", "Морковный торт", "Чёрный лес",
)

_INTEGER = re.compile(r"[+-]?\d+")

Less = Callable[[str, str], bool]


class SortMode(enum.Enum):
    """How the items were last sorted, if at all."""

    NONE = "none"
    CASE_SENSITIVE = "case_sensitive"
    CASE_INSENSITIVE = "case_insensitive"


@dataclass(frozen=True)
class Controls:
    """Which actions are currently available."""

    prev: bool
    next: bool
    edit: bool
    erase: bool
    pop_front: bool
    pop_back: bool
    lower_bound: bool = True
    upper_bound: bool = True
    unique: bool = True


def _case_sensitive_less(a: str, b: str) -> bool:
    return a < b


def _case_insensitive_less(a: str, b: str) -> bool:
    return a.casefold() < b.casefold()


class DequeEmulator:
    """A sequence of strings with a cursor that may point one past the end."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.items: list[str] = []
        self.pos = 0
        self.sort_mode = SortMode.NONE
        self.rng = rng if rng is not None else random.Random()

    # --- state -------------------------------------------------------------

    def at_end(self) -> bool:
        """True when the cursor is on the past-the-end position."""
        return self.pos >= len(self.items)

    def current(self) -> str:
        """The item under the cursor, or an empty string at the end."""
        return "" if self.at_end() else self.items[self.pos]

    def rows(self) -> list[str]:
        """Numbered item rows followed by the trailing ``end`` row."""
        return [f"{i}: {item}" for i, item in enumerate(self.items)] + ["end"]

    def controls(self) -> Controls:
        """Availability of each action in the current state."""
        empty = not self.items
        at_end = self.at_end()
        at_begin = not at_end and self.pos == 0
        return Controls(
            prev=not empty and not at_begin,
            next=not at_end,
            edit=not at_end,
            erase=not at_end,
            pop_front=not empty,
            pop_back=not empty,
        )

    def comparator(self) -> Less:
        """The ordering predicate that matches the current sort mode."""
        if self.sort_mode is SortMode.CASE_INSENSITIVE:
            return _case_insensitive_less
        return _case_sensitive_less

    # --- internal helpers --------------------------------------------------

    def _modified(self) -> None:
        self.sort_mode = SortMode.NONE
        self.pos = 0

    def _clamp(self) -> None:
        self.pos = min(self.pos, len(self.items))

    def _key(self) -> Callable[[str], object]:
        less = self.comparator()

        def compare(a: str, b: str) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        return functools.cmp_to_key(compare)

    # --- basic operations --------------------------------------------------

    def push_front(self, text: str) -> None:
        text = text.strip()
        if not text:
            return
        self.items.insert(0, text)
        self._modified()

    def push_back(self, text: str) -> None:
        text = text.strip()
        if not text:
            return
        self.items.append(text)
        self._modified()

    def pop_front(self) -> None:
        if not self.items:
            return
        del self.items[0]
        self._modified()

    def pop_back(self) -> None:
        if not self.items:
            return
        self.items.pop()
        self._modified()

    def clear(self) -> None:
        self.items.clear()
        self._modified()

    def insert(self, text: str) -> None:
        """Insert before the cursor (or append when at the end)."""
        text = text.strip()
        if not text:
            return
        index = len(self.items) if self.at_end() else self.pos
        self.items.insert(index, text)
        self._modified()

    def erase(self) -> None:
        if self.at_end():
            return
        del self.items[self.pos]
        self._modified()

    def edit(self, text: str) -> None:
        """Replace the item under the cursor; the cursor stays put."""
        if self.at_end():
            return
        text = text.strip()
        if not text:
            return
        self.items[self.pos] = text
        self.sort_mode = SortMode.NONE

    # --- navigation --------------------------------------------------------

    def prev(self) -> None:
        if not self.items:
            return
        if self.at_end():
            self.pos = len(self.items) - 1
        elif self.pos > 0:
            self.pos -= 1

    def next(self) -> None:
        if not self.at_end():
            self.pos += 1

    def begin(self) -> None:
        self.pos = 0

    def end(self) -> None:
        self.pos = len(self.items)

    def select_row(self, row: int) -> None:
        self.pos = max(0, min(row, len(self.items)))

    # --- size and permutations ---------------------------------------------

    def resize(self, size_text: str) -> None:
        """Resize to the integer in ``size_text``; invalid sizes are ignored."""
        size_text = size_text.strip()
        if not _INTEGER.fullmatch(size_text):
            return
        new_size = int(size_text)
        if not 0 <= new_size <= MAX_DEQUE_SIZE:
            return
        if new_size < len(self.items):
            del self.items[new_size:]
        else:
            self.items.extend([""] * (new_size - len(self.items)))
        self._modified()

    def reverse(self) -> None:
        if not self.items:
            return
        saved = self.pos
        self.items.reverse()
        self.sort_mode = SortMode.NONE
        self.pos = min(saved, len(self.items))

    def shuffle(self) -> None:
        if not self.items:
            return
        saved = self.pos
        self.rng.shuffle(self.items)
        self.sort_mode = SortMode.NONE
        self.pos = min(saved, len(self.items))

    # --- search, count, extremes ---------------------------------------------

    def find(self, text: str) -> None:
        """Move the cursor to the first match, or to the end if none."""
        key = text.strip()
        if not key:
            return
        try:
            self.pos = self.items.index(key)
        except ValueError:
            self.pos = len(self.items)

    def count(self, text: str) -> int:
        key = text.strip()
        if not key:
            return 0
        return self.items.count(key)

    def min_element(self) -> None:
        if not self.items:
            return
        less = self.comparator()
        best = 0
        for index, item in enumerate(self.items):
            if less(item, self.items[best]):
                best = index
        self.pos = best

    def max_element(self) -> None:
        if not self.items:
            return
        less = self.comparator()
        best = 0
        for index, item in enumerate(self.items):
            if less(self.items[best], item):
                best = index
        self.pos = best

    # --- sorting and what depends on it ------------------------------------

    def merge_sort(self) -> None:
        self.sort_mode = SortMode.CASE_SENSITIVE
        self.items = merge_sort(self.items, self.comparator())
        self.pos = 0

    def merge_sort_case_insensitive(self) -> None:
        self.sort_mode = SortMode.CASE_INSENSITIVE
        self.items = merge_sort(self.items, self.comparator())
        self.pos = 0

    def unique(self) -> None:
        """Drop consecutive equivalent items; only after a sort."""
        if not self.items or self.sort_mode is SortMode.NONE:
            return
        less = self.comparator()
        kept: list[str] = []
        for item in self.items:
            if kept and not less(kept[-1], item) and not less(item, kept[-1]):
                continue
            kept.append(item)
        self.items = kept
        self.pos = 0

    def lower_bound(self, text: str) -> None:
        key = text.strip()
        if not key or self.sort_mode is SortMode.NONE:
            return
        to_key = self._key()
        self.pos = bisect.bisect_left(self.items, to_key(key), key=to_key)
        self._clamp()

    def upper_bound(self, text: str) -> None:
        key = text.strip()
        if not key or self.sort_mode is SortMode.NONE:
            return
        to_key = self._key()
        self.pos = bisect.bisect_right(self.items, to_key(key), key=to_key)
        self._clamp()

    # --- presets -----------------------------------------------------------

    def load_tea(self) -> None:
        self.items = list(TEA)
        self.pos = 0
        self.sort_mode = SortMode.NONE

    def load_cakes(self) -> None:
        self.items = list(CAKES)
        self.pos = 0
        self.sort_mode = SortMode.NONE