"""Predicates for use when filtering sequences."""

from __future__ import annotations

from typing import Any, Callable


def is_zero(value: Any) -> bool:
    """Return True when ``value`` equals the zero value of its type."""
    try:
        zero = type(value)()
    except TypeError:
        return False
    return value == zero


def is_even(integer: int) -> bool:
    """Return True when ``integer`` is even."""
    return integer % 2 == 0


def is_odd(integer: int) -> bool:
    """Return True when ``integer`` is odd."""
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