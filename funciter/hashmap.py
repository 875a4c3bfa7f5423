"""Iterators over the items, keys or values of a mapping."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Mapping, TypeVar

from .iterators import Iterator, MapIter, Pair
from .option import Option, none, some

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")


class LiftHashMapIter(Iterator[Pair[K, V]], Generic[K, V]):
    """Yields each entry of a mapping as a Pair of key and value.

    The iterator can be closed early with :meth:`close`, or used as a context
    manager; once closed or exhausted it yields nothing more. Closing more than
    once is safe.
    """

    _name = "LiftHashMap"

    def __init__(self, mapping: Mapping[K, V]) -> None:
        self._entries = iter(list(mapping.items()))
        self._closed = False

    def next(self) -> Option[Pair[K, V]]:
        if self._closed:
            return none()
        entry = next(self._entries, None)
        if entry is None:
            self.close()
            return none()
        key, value = entry
        return some(Pair(key, value))

    def close(self) -> None:
        """Stop the iteration; later calls to ``next`` yield None."""
        self._closed = True
        self._entries = iter(())

    def __enter__(self) -> LiftHashMapIter[K, V]:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class _ProjectedHashMapIter(Iterator[T]):
    """Yields one side of each entry of a mapping."""

    def __init__(self, mapping: Mapping[Any, Any], side: str) -> None:
        self._delegate: LiftHashMapIter[Any, Any] = LiftHashMapIter(mapping)
        self._projected: MapIter[Pair[Any, Any], T] = MapIter(
            self._delegate, lambda pair: getattr(pair, side)
        )
        self._exhausted = False

    def next(self) -> Option[T]:
        if self._exhausted:
            return none()
        item = self._projected.next()
        if item.is_none():
            self._exhausted = True
        return item

    def close(self) -> None:
        """Stop the iteration; later calls to ``next`` yield None."""
        self._delegate.close()

    def __enter__(self) -> _ProjectedHashMapIter[T]:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class LiftHashMapKeysIter(_ProjectedHashMapIter[K]):
    """Yields each key of a mapping; see :class:`LiftHashMapIter` on closing."""

    _name = "LiftHashMapKeys"

    def __init__(self, mapping: Mapping[K, Any]) -> None:
        super().__init__(mapping, "one")

    def next(self) -> Option[K]:
        return super().next()

    def close(self) -> None:
        """Stop the iteration; later calls to ``next`` yield None."""
        super().close()


class LiftHashMapValuesIter(_ProjectedHashMapIter[V]):
    """Yields each value of a mapping; see :class:`LiftHashMapIter` on closing."""

    _name = "LiftHashMapValues"

    def __init__(self, mapping: Mapping[Any, V]) -> None:
        super().__init__(mapping, "two")

    def next(self) -> Option[V]:
        return super().next()

    def close(self) -> None:
        """Stop the iteration; later calls to ``next`` yield None."""
        super().close()


def lift_hash_map(mapping: Mapping[K, V]) -> LiftHashMapIter[K, V]:
    """Yield each entry of ``mapping`` as a Pair."""
    return LiftHashMapIter(mapping)


def lift_hash_map_keys(mapping: Mapping[K, Any]) -> LiftHashMapKeysIter[K]:
    """Yield each key of ``mapping``."""
    return LiftHashMapKeysIter(mapping)


def lift_hash_map_values(mapping: Mapping[Any, V]) -> LiftHashMapValuesIter[V]:
    """Yield each value of ``mapping``."""
    return LiftHashMapValuesIter(mapping)