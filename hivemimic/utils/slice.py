"""List helpers: folding, mapping, searching and sorting."""

from __future__ import annotations

import heapq
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def reduce(items: Iterable[T], reducer: Callable[[R, T], R], initial: R) -> R:
    """Fold ``items`` from the left with ``reducer``, starting at ``initial``."""
    result = initial
    for item in items:
        result = reducer(result, item)
    return result


def sum_of(items: Iterable[T]) -> T:
    """Return the sum of numeric ``items``; zero for an empty sequence."""
    return reduce(items, lambda acc, value: acc + value, 0)


def map_list(items: Iterable[T], mapper: Callable[[T], R]) -> List[R]:
    """Return a new list with ``mapper`` applied to every item."""
    return [mapper(item) for item in items]


def index_of(items: List[T], value: T) -> int:
    """Return the position of the first item equal to ``value``, or -1."""
    return next((i for i, item in enumerate(items) if item == value), -1)


def concat(first: List[T], second: List[T]) -> List[T]:
    """Return a new list holding ``first`` followed by ``second``."""
    return [*first, *second]


def remove(items: List[T], value: T) -> List[T]:
    """Return a new list without the first occurrence of ``value``.

    If ``value`` is absent, ``items`` itself is returned.
    """
    index = index_of(items, value)
    if index == -1:
        return items
    return concat(items[:index], items[index + 1:])


def merge_sort(items: List[T]) -> None:
    """Sort ``items`` in place, ascending, with a stable merge sort."""
    if len(items) <= 1:
        return
    middle = len(items) // 2
    left = items[:middle]
    right = items[middle:]
    merge_sort(left)
    merge_sort(right)
    items[:] = heapq.merge(left, right)