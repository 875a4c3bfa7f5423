"""Re-iterable lazy sequences built from generator factories, chained through methods."""

from __future__ import annotations

import itertools
from typing import Any, Callable, Generic, Iterable, Iterator as _PyIterator, Mapping, TypeVar

from .channel import Channel
from .iterators import Pair
from .runes import _characters

V = TypeVar("V")
W = TypeVar("W")
K = TypeVar("K")

__all__ = [
    "Pair",
    "Seq",
    "chain",
    "collect",
    "count",
    "cycle",
    "drop",
    "exclude",
    "exhausted",
    "identity",
    "lift",
    "lift_channel",
    "lift_hash_map",
    "mapped",
    "repeat",
    "runes",
    "select",
    "take",
    "zip_pairs",
]


class Seq(Generic[V]):
    """A lazy sequence; every iteration starts afresh from its source factory."""

    __slots__ = ("_source",)

    def __init__(self, source: Callable[[], Iterable[V]]) -> None:
        self._source = source

    def __iter__(self) -> _PyIterator[V]:
        return iter(self._source())

    def __repr__(self) -> str:
        return "Seq()"

    def collect(self) -> list[V]:
        return collect(self)

    def chain(self, *args: Iterable[V]) -> Seq[V]:
        return chain(self, *args)

    def cycle(self) -> Seq[V]:
        return cycle(self)

    def drop(self, count: int) -> Seq[V]:
        return drop(self, count)

    def filter(self, predicate: Callable[[V], bool]) -> Seq[V]:
        return select(self, predicate)

    def exclude(self, predicate: Callable[[V], bool]) -> Seq[V]:
        return exclude(self, predicate)

    def take(self, limit: int) -> Seq[V]:
        return take(self, limit)

    def transform(self, fn: Callable[[V], V]) -> Seq[V]:
        return mapped(self, fn)


def collect(seq: Iterable[V]) -> list[V]:
    """Consume ``seq`` and return every item as a list."""
    return list(seq)


def chain(*args: Iterable[V]) -> Seq[V]:
    """Yield the items of each sequence in turn."""
    sequences = tuple(args)

    def generate() -> _PyIterator[V]:
        for sequence in sequences:
            yield from sequence

    return Seq(generate)


def count() -> Seq[int]:
    """Yield 0, 1, 2, ... without end."""
    return Seq(lambda: itertools.count())


def cycle(delegate: Iterable[V]) -> Seq[V]:
    """Yield the items of ``delegate``, then repeat them endlessly.

    Items are stored as they are first yielded. An empty delegate gives an
    empty sequence.
    """

    def generate() -> _PyIterator[V]:
        items: list[V] = []
        for item in delegate:
            yield item
            items.append(item)
        if not items:
            return
        while True:
            yield from items

    return Seq(generate)


def drop(delegate: Iterable[V], count: int) -> Seq[V]:
    """Skip the first ``count`` items of ``delegate``; a count below one skips nothing."""
    return Seq(lambda: itertools.islice(delegate, max(count, 0), None))


def exhausted() -> Seq[Any]:
    """Yield nothing."""
    return Seq(lambda: ())


def select(delegate: Iterable[V], predicate: Callable[[V], bool]) -> Seq[V]:
    """Yield the items of ``delegate`` for which ``predicate`` is true."""
    return Seq(lambda: (item for item in delegate if predicate(item)))


def exclude(delegate: Iterable[V], predicate: Callable[[V], bool]) -> Seq[V]:
    """Yield the items of ``delegate`` for which ``predicate`` is false."""
    return Seq(lambda: (item for item in delegate if not predicate(item)))


def lift(items: Iterable[V]) -> Seq[V]:
    """Yield every item of ``items``."""
    return Seq(lambda: iter(items))


def lift_hash_map(mapping: Mapping[K, V]) -> Seq[Pair[K, V]]:
    """Yield each entry of ``mapping`` as a Pair of key and value."""
    return Seq(lambda: (Pair(key, value) for key, value in mapping.items()))


def lift_channel(channel: Channel[V]) -> Seq[V]:
    """Yield every value received from ``channel`` until it is closed and drained."""
    return Seq(lambda: iter(channel))


def mapped(delegate: Iterable[V], fn: Callable[[V], W]) -> Seq[W]:
    """Yield ``fn`` applied to each item of ``delegate``."""
    return Seq(lambda: (fn(item) for item in delegate))


def repeat(value: V) -> Seq[V]:
    """Yield ``value`` forever."""
    return Seq(lambda: itertools.repeat(value))


def runes(text: str | Iterable[str]) -> Seq[str]:
    """Yield each character of ``text``, a string or a sequence of characters."""
    characters = _characters(text)
    return Seq(lambda: iter(characters))


def take(delegate: Iterable[V], limit: int) -> Seq[V]:
    """Yield at most ``limit`` items of ``delegate``; a limit below one yields nothing."""
    return Seq(lambda: itertools.islice(delegate, max(limit, 0)))


def zip_pairs(one: Iterable[V], two: Iterable[W]) -> Seq[Pair[V, W]]:
    """Yield Pairs of items from ``one`` and ``two`` until either runs out."""
    return Seq(lambda: (Pair(first, second) for first, second in zip(one, two)))


def identity(value: V) -> V:
    """Return ``value`` unchanged."""
    return value