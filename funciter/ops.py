"""Binary and unary operations for folding and mapping iterators."""

from __future__ import annotations

from typing import Any, TypeVar

from .option import Option
from .result import Result

T = TypeVar("T")


def add(a: Any, b: Any) -> Any:
    """Return ``a + b``."""
    return a + b


def multiply(a: Any, b: Any) -> Any:
    """Return ``a * b``."""
    return a * b


def bitwise_and(a: int, b: int) -> int:
    """Return ``a & b``."""
    return a & b


def bitwise_or(a: int, b: int) -> int:
    """Return ``a | b``."""
    return a | b


def bitwise_xor(a: int, b: int) -> int:
    """Return ``a ^ b``."""
    return a ^ b


def unwrap_option(option: Option[T]) -> T:
    """Unwrap an Option, raising UnwrapError for None."""
    return option.unwrap()


def unwrap_result(result: Result[T]) -> T:
    """Unwrap a Result, raising UnwrapError for Err."""
    return result.unwrap()


def passthrough(value: T) -> T:
    """Return ``value`` unchanged."""
    return value