"""Lazy iterators that yield Option values and chain through methods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator as _PyIterator, TypeVar

from .option import Option, none, some

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

_MISSING = object()


@dataclass(frozen=True, order=True)
class Pair(Generic[T, U]):
    """Two values held together."""

    one: T
    two: U

    def __str__(self) -> str:
        return f"({self.one}, {self.two})"

    def __iter__(self) -> _PyIterator[Any]:
        yield self.one
        yield self.two


class Iterator(ABC, Generic[T]):
    """Base of every iterator here: ``next`` yields Some(value) until exhausted, then None."""

    _name = "Iterator"

    @abstractmethod
    def next(self) -> Option[T]:
        """Return the next item as Some, or None once exhausted."""

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value, present = self.next().value()
        if not present:
            raise StopIteration
        return value  # type: ignore[return-value]

    def __str__(self) -> str:
        return f"Iterator<{self._name}>"

    __repr__ = __str__

    def collect(self) -> list[T]:
        return collect(self)

    def for_each(self, callback: Callable[[T], Any]) -> None:
        for_each(self, callback)

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        return find(self, predicate)

    def drop(self, count: int) -> DropIter[T]:
        return DropIter(self, count)

    def take(self, limit: int) -> TakeIter[T]:
        return TakeIter(self, limit)

    def filter(self, predicate: Callable[[T], bool]) -> FilterIter[T]:
        return FilterIter(self, predicate)

    def exclude(self, predicate: Callable[[T], bool]) -> FilterIter[T]:
        return exclude(self, predicate)

    def chain(self, *args: Iterator[T]) -> ChainIter[T]:
        return ChainIter(self, *args)

    def to_channel(self) -> Any:
        """Feed this iterator's items into a channel that closes once it is exhausted."""
        from .channel import to_channel

        return to_channel(self)

    def enumerate(self) -> EnumerateIter[T]:
        return EnumerateIter(self)

    def transform(self, op: Callable[[T], T]) -> MapIter[T, T]:
        return MapIter(self, op)

    def filter_map(self, fn: Callable[[T], Option[T]]) -> FilterMapIter[T, T]:
        return FilterMapIter(self, fn)


def _values(iterator: Iterator[T]) -> _PyIterator[T]:
    while True:
        value, present = iterator.next().value()
        if not present:
            return
        yield value  # type: ignore[misc]


def _check_count(count: int, what: str) -> int:
    if count < 0:
        raise ValueError(f"{what} must not be negative, got {count}")
    return count


class ChainIter(Iterator[T]):
    """Yields every item of each iterator in turn, first to last."""

    _name = "Chain"

    def __init__(self, *iterators: Iterator[T]) -> None:
        self._iterators = list(iterators)
        self._index = 0

    def next(self) -> Option[T]:
        while self._index < len(self._iterators):
            item = self._iterators[self._index].next()
            if item.is_some():
                return item
            self._index += 1
        return none()


class CountIter(Iterator[int]):
    """Yields 0 and the natural numbers without end."""

    _name = "Count"

    def __init__(self) -> None:
        self._index = 0

    def next(self) -> Option[int]:
        self._index += 1
        return some(self._index - 1)


class DropIter(Iterator[T]):
    """Skips the first ``count`` items of its delegate."""

    _name = "Drop"

    def __init__(self, iterator: Iterator[T], count: int) -> None:
        self._iterator = iterator
        self._count = _check_count(count, "drop count")
        self._dropped = False
        self._exhausted = False

    def _delegate_next(self) -> Option[T]:
        item = self._iterator.next()
        if item.is_none():
            self._exhausted = True
        return item

    def next(self) -> Option[T]:
        if self._exhausted:
            return none()
        if not self._dropped:
            self._dropped = True
            for _ in range(self._count):
                if self._delegate_next().is_none():
                    return none()
        return self._delegate_next()


class EnumerateIter(Iterator[Pair[int, T]]):
    """Yields pairs of the iteration index and each item of its delegate."""

    _name = "Enumerate"

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iterator = iterator
        self._counter = 0
        self._exhausted = False

    def next(self) -> Option[Pair[int, T]]:
        if self._exhausted:
            return none()
        value, present = self._iterator.next().value()
        if not present:
            self._exhausted = True
            return none()
        pair = Pair(self._counter, value)
        self._counter += 1
        return some(pair)


class ExhaustedIter(Iterator[T]):
    """An iterator that never yields anything."""

    _name = "Exhausted"

    def next(self) -> Option[T]:
        return none()


class FilterIter(Iterator[T]):
    """Yields only the items for which the predicate is true."""

    _name = "Filter"

    def __init__(self, iterator: Iterator[T], predicate: Callable[[T], bool]) -> None:
        self._iterator = iterator
        self._predicate = predicate
        self._exhausted = False

    def next(self) -> Option[T]:
        if self._exhausted:
            return none()
        while True:
            value, present = self._iterator.next().value()
            if not present:
                self._exhausted = True
                return none()
            if self._predicate(value):  # type: ignore[arg-type]
                return some(value)  # type: ignore[arg-type]


class FilterMapIter(Iterator[U], Generic[T, U]):
    """Yields the Some results of applying ``fn`` to each item, skipping the None ones."""

    _name = "FilterMap"

    def __init__(self, iterator: Iterator[T], fn: Callable[[T], Option[U]]) -> None:
        self._iterator = iterator
        self._fn = fn
        self._exhausted = False

    def next(self) -> Option[U]:
        if self._exhausted:
            return none()
        while True:
            value, present = self._iterator.next().value()
            if not present:
                self._exhausted = True
                return none()
            result = self._fn(value)  # type: ignore[arg-type]
            if result.is_some():
                return result


class MapIter(Iterator[U], Generic[T, U]):
    """Yields the result of applying a function to each item of its delegate."""

    _name = "Map"

    def __init__(self, iterator: Iterator[T], fn: Callable[[T], U]) -> None:
        self._iterator = iterator
        self._fn = fn
        self._exhausted = False

    def next(self) -> Option[U]:
        if self._exhausted:
            return none()
        value, present = self._iterator.next().value()
        if not present:
            self._exhausted = True
            return none()
        return some(self._fn(value))  # type: ignore[arg-type]


class TakeIter(Iterator[T]):
    """Yields at most ``limit`` items of its delegate."""

    _name = "Take"

    def __init__(self, iterator: Iterator[T], limit: int) -> None:
        self._iterator = iterator
        self._limit = _check_count(limit, "take limit")

    def next(self) -> Option[T]:
        if self._limit == 0:
            return none()
        item = self._iterator.next()
        if item.is_none():
            self._limit = 0
        else:
            self._limit -= 1
        return item


class LiftIter(Iterator[T]):
    """Yields every item of a Python iterable."""

    _name = "Lift"

    def __init__(self, items: Iterable[T]) -> None:
        self._items = iter(items)
        self._exhausted = False

    def next(self) -> Option[T]:
        if self._exhausted:
            return none()
        item = next(self._items, _MISSING)
        if item is _MISSING:
            self._exhausted = True
            return none()
        return some(item)  # type: ignore[arg-type]


def collect(iterator: Iterator[T]) -> list[T]:
    """Consume ``iterator`` and return its items as a list."""
    return list(_values(iterator))


def fold(iterator: Iterator[T], initial: U, biop: Callable[[U, T], U]) -> U:
    """Consume ``iterator``, accumulating each item into ``initial`` with ``biop``."""
    accumulator = initial
    for value in _values(iterator):
        accumulator = biop(accumulator, value)
    return accumulator


def for_each(iterator: Iterator[T], callback: Callable[[T], Any]) -> None:
    """Consume ``iterator``, calling ``callback`` on each item."""
    for value in _values(iterator):
        callback(value)


def find(iterator: Iterator[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Return Some of the first item satisfying ``predicate``, or None."""
    for value in _values(iterator):
        if predicate(value):
            return some(value)
    return none()


def chain(*args: Iterator[T]) -> ChainIter[T]:
    return ChainIter(*args)


def count() -> CountIter:
    return CountIter()


def drop(iterator: Iterator[T], count: int) -> DropIter[T]:
    return DropIter(iterator, count)


def enumerated(iterator: Iterator[T]) -> EnumerateIter[T]:
    return EnumerateIter(iterator)


def exhausted() -> ExhaustedIter[Any]:
    return ExhaustedIter()


def select(iterator: Iterator[T], predicate: Callable[[T], bool]) -> FilterIter[T]:
    """Keep only the items for which ``predicate`` is true."""
    return FilterIter(iterator, predicate)


def exclude(iterator: Iterator[T], predicate: Callable[[T], bool]) -> FilterIter[T]:
    """Keep only the items for which ``predicate`` is false."""
    return FilterIter(iterator, lambda value: not predicate(value))


def filter_map(iterator: Iterator[T], fn: Callable[[T], Option[U]]) -> FilterMapIter[T, U]:
    return FilterMapIter(iterator, fn)


def mapped(iterator: Iterator[T], fn: Callable[[T], U]) -> MapIter[T, U]:
    return MapIter(iterator, fn)


def transform(iterator: Iterator[T], op: Callable[[T], T]) -> MapIter[T, T]:
    return MapIter(iterator, op)


def take(iterator: Iterator[T], limit: int) -> TakeIter[T]:
    return TakeIter(iterator, limit)


def lift(items: Iterable[T]) -> LiftIter[T]:
    return LiftIter(items)