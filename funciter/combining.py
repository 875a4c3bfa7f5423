"""Iterators that repeat items or combine two iterators into pairs."""

from __future__ import annotations

import itertools
from typing import Generic, Iterator as _PyIterator, TypeVar

from .iterators import Iterator, Pair
from .option import Option, none, some

T = TypeVar("T")
U = TypeVar("U")


class CycleIter(Iterator[T]):
    """Yields every item of its delegate, then replays them all on repeat.

    Items are stored as they are yielded, so memory grows until the delegate
    is exhausted. If the delegate yields nothing, this iterator yields nothing.
    """

    _name = "Cycle"

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iterator: Iterator[T] | None = iterator
        self._items: list[T] = []
        self._replay: _PyIterator[T] | None = None

    def next(self) -> Option[T]:
        if self._iterator is not None:
            value, present = self._iterator.next().value()
            if present:
                self._items.append(value)  # type: ignore[arg-type]
                return some(value)  # type: ignore[arg-type]
            self._iterator = None

        if not self._items:
            return none()

        if self._replay is None:
            self._replay = itertools.cycle(self._items)
        return some(next(self._replay))


class RepeatIter(Iterator[T]):
    """Yields the same item forever."""

    _name = "Repeat"

    def __init__(self, item: T) -> None:
        self._item = item

    def next(self) -> Option[T]:
        return some(self._item)


class ZipIter(Iterator[Pair[T, U]], Generic[T, U]):
    """Yields pairs of items from two iterators until either is exhausted."""

    _name = "Zip"

    def __init__(self, first: Iterator[T], second: Iterator[U]) -> None:
        self._first = first
        self._second = second
        self._exhausted = False

    def next(self) -> Option[Pair[T, U]]:
        if self._exhausted:
            return none()

        one, one_present = self._first.next().value()
        two, two_present = self._second.next().value()

        if not (one_present and two_present):
            self._exhausted = True
            return none()

        return some(Pair(one, two))  # type: ignore[arg-type]


def cycle(iterator: Iterator[T]) -> CycleIter[T]:
    """Yield the items of ``iterator``, then repeat them endlessly."""
    return CycleIter(iterator)


def repeat(item: T) -> RepeatIter[T]:
    """Yield ``item`` forever."""
    return RepeatIter(item)


def zip_pairs(first: Iterator[T], second: Iterator[U]) -> ZipIter[T, U]:
    """Yield a Pair of the next items of ``first`` and ``second`` until either runs out."""
    return ZipIter(first, second)