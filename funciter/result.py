"""Success or failure: an Ok variant holding a value, or an Err variant holding an exception."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from .option import UnwrapError, _decode_as

T = TypeVar("T")


class Result(Generic[T]):
    """The outcome of an operation; build one with :func:`ok` or :func:`err`."""

    __slots__ = ("_value", "_error")

    def __init__(self, value: T | None = None, error: BaseException | None = None) -> None:
        self._value = value if error is None else None
        self._error = error

    def __str__(self) -> str:
        if self._error is None:
            return f"Ok({self._value})"
        return f"Err({self._error})"

    def __repr__(self) -> str:
        if self._error is None:
            return f"Ok({self._value!r})"
        return f"Err({self._error!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._value == other._value and self._error is other._error

    def __hash__(self) -> int:
        return hash((Result, self._value, id(self._error)))

    def unwrap(self) -> T:
        """Return the held value, or raise UnwrapError for Err."""
        if self._error is None:
            return self._value  # type: ignore[return-value]
        raise UnwrapError("called `Result.unwrap()` on an `Err` value") from self._error

    def unwrap_or(self, default: T) -> T:
        """Return the held value, or ``default`` for Err."""
        return self._value if self._error is None else default  # type: ignore[return-value]

    def unwrap_or_else(self, factory: Callable[[], T]) -> T:
        """Return the held value, or the result of ``factory()`` for Err."""
        return self._value if self._error is None else factory()  # type: ignore[return-value]

    def unwrap_or_zero(self, kind: Callable[[], T]) -> T:
        """Return the held value, or the zero value ``kind()`` for Err."""
        return self._value if self._error is None else kind()  # type: ignore[return-value]

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    def value(self) -> tuple[T | None, BaseException | None]:
        """Return the held value (None for Err) and the held exception (None for Ok)."""
        return self._value, self._error

    def unwrap_err(self) -> BaseException:
        """Return the held exception, or raise UnwrapError for Ok."""
        if self._error is None:
            raise UnwrapError("called `Result.unwrap_err()` on an `Ok` value")
        return self._error

    def expect(self, message: str) -> T:
        """Return the held value, or raise UnwrapError with ``message`` for Err."""
        if self._error is None:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(message) from self._error


def ok(value: T) -> Result[T]:
    """Return a successful Result holding ``value``."""
    return Result(value)


def err(error: BaseException) -> Result[Any]:
    """Return a failed Result holding ``error``."""
    if not isinstance(error, BaseException):
        raise TypeError(f"err() needs an exception, got {type(error).__name__}")
    return Result(error=error)


def result_from_json(data: str | bytes, kind: Any) -> Result[Any]:
    """Decode JSON holding a value of ``kind`` into an Ok; raise ValueError if it does not fit."""
    return ok(_decode_as(data, kind))