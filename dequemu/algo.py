"""Stable merge and merge sort driven by a strict "less than" predicate."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]

_END = object()


def merge(half1: Iterable[T], half2: Iterable[T], less: Less) -> list[T]:
    """Merge two sorted sequences into one sorted list.

    The merge is stable: when elements are equivalent, those from
    ``half1`` come first.
    """
    result: list[T] = []
    left, right = iter(half1), iter(half2)
    a = next(left, _END)
    b = next(right, _END)
    while a is not _END and b is not _END:
        if less(b, a):
            result.append(b)
            b = next(right, _END)
        else:
            result.append(a)
            a = next(left, _END)
    if a is not _END:
        result.append(a)
        result.extend(left)
    if b is not _END:
        result.append(b)
        result.extend(right)
    return result


def merge_sort(items: Sequence[T], less: Less) -> list[T]:
    """Return a new list with ``items`` stably sorted by ``less``."""
    if len(items) <= 1:
        return list(items)
    mid = len(items) // 2
    return merge(merge_sort(items[:mid], less), merge_sort(items[mid:], less), less)