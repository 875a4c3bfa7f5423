"""Predicates for use when filtering iterators."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")


def is_zero(value: Any) -> bool:
    """Return True when ``value`` equals the zero value of its type."""
    try:
        zero = type(value)()
    except TypeError:
        return False
    return value == zero


def _check_integer(integer: Any) -> None:
    if not isinstance(integer, int):
        raise TypeError(f"expected an integer, got {type(integer).__name__}")


def is_even(integer: int) -> bool:
    """Return True when ``integer`` is even."""
    _check_integer(integer)
    return integer % 2 == 0


def is_odd(integer: int) -> bool:
    """Return True when ``integer`` is odd."""
    _check_integer(integer)
    return integer % 2 != 0


def greater_than(threshold: Any) -> Callable[[Any], bool]:
    """Return a predicate true for values greater than ``threshold``."""
    return lambda value: value > threshold


def greater_than_equal(threshold: Any) -> Callable[[Any], bool]:
    """Return a predicate true for values greater than or equal to ``threshold``."""
    return lambda value: value >= threshold


def less_than(threshold: Any) -> Callable[[Any], bool]:
    """Return a predicate true for values less than ``threshold``."""
    return lambda value: value < threshold


def less_than_equal(threshold: Any) -> Callable[[Any], bool]:
    """Return a predicate true for values less than or equal to ``threshold``."""
    return lambda value: value <= threshold


def all_of(*args: Callable[[T], bool]) -> Callable[[T], bool]:
    """Return a predicate true when every given predicate is true; always true for none."""
    predicates = tuple(args)
    return lambda value: all(predicate(value) for predicate in predicates)


def any_of(*args: Callable[[T], bool]) -> Callable[[T], bool]:
    """Return a predicate true when any given predicate is true; always true for none."""
    predicates = tuple(args)

    def check(value: T) -> bool:
        if not predicates:
            return True
        return any(predicate(value) for predicate in predicates)

    return check