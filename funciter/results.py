"""Collecting iterators of Result values."""

from __future__ import annotations

from typing import Any, TypeVar

from .iterators import Iterator
from .result import Result, err, ok

T = TypeVar("T")


def collect_results(iterator: Iterator[Result[T]]) -> Result[list[T]]:
    """Collect the values of Ok items into a list wrapped in Ok.

    At the first Err, collection stops and that error is returned as an Err;
    the rest of the iterator is left unconsumed.
    """
    values: list[Any] = []
    for item in iterator:
        if item.is_err():
            return err(item.unwrap_err())
        values.append(item.unwrap())
    return ok(values)