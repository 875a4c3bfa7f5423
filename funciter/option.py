"""Optional values: a Some variant holding a value, or a None variant holding nothing."""

from __future__ import annotations

import json
import types
import typing
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")


class UnwrapError(Exception):
    """Raised when a value is demanded from a variant that does not hold one."""


class Option(Generic[T]):
    """An optional value; build one with :func:`some` or :func:`none`."""

    __slots__ = ("_value", "_present")

    def __init__(self, value: T | None = None, present: bool = False) -> None:
        self._value = value if present else None
        self._present = present

    def __str__(self) -> str:
        return f"Some({self._value})" if self._present else "None"

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._present else "None"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return (self._present, self._value) == (other._present, other._value)

    def __hash__(self) -> int:
        return hash((Option, self._present, self._value))

    def unwrap(self) -> T:
        """Return the held value, or raise UnwrapError for None."""
        if self._present:
            return self._value  # type: ignore[return-value]
        raise UnwrapError("called `Option.unwrap()` on a `None` value")

    def unwrap_or(self, default: T) -> T:
        """Return the held value, or ``default`` for None."""
        return self._value if self._present else default  # type: ignore[return-value]

    def unwrap_or_else(self, factory: Callable[[], T]) -> T:
        """Return the held value, or the result of ``factory()`` for None."""
        return self._value if self._present else factory()  # type: ignore[return-value]

    def unwrap_or_zero(self, kind: Callable[[], T]) -> T:
        """Return the held value, or the zero value ``kind()`` for None."""
        return self._value if self._present else kind()  # type: ignore[return-value]

    def is_some(self) -> bool:
        return self._present

    def is_none(self) -> bool:
        return not self._present

    def value(self) -> tuple[T | None, bool]:
        """Return the held value (None when absent) and whether it is present."""
        return self._value, self._present

    def expect(self, message: str) -> T:
        """Return the held value, or raise UnwrapError with ``message`` for None."""
        if self._present:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(message)


def some(value: T) -> Option[T]:
    """Return an Option holding ``value``."""
    return Option(value, True)


def none() -> Option[Any]:
    """Return an Option holding nothing."""
    return Option()


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Option):
        return obj.unwrap_or(None)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def option_to_json(option: Any) -> str:
    """Serialise a value to compact JSON; Some becomes its value, None becomes null."""
    return json.dumps(option, default=_json_default, separators=(",", ":"), ensure_ascii=False)


def _conforms(value: Any, kind: Any) -> bool:
    if kind is Any or kind is object:
        return True
    origin = typing.get_origin(kind)
    if origin is None:
        if kind is None or kind is type(None):
            return value is None
        if kind is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if kind is int:
            return isinstance(value, int) and not isinstance(value, bool)
        return isinstance(value, kind)
    args = typing.get_args(kind)
    if origin is Union or origin is types.UnionType:
        return any(_conforms(value, arg) for arg in args)
    if origin is list:
        if not isinstance(value, list):
            return False
        return not args or all(_conforms(item, args[0]) for item in value)
    if origin is dict:
        if not isinstance(value, dict):
            return False
        if not args:
            return True
        key_kind, value_kind = args
        return all(_conforms(k, key_kind) and _conforms(v, value_kind) for k, v in value.items())
    return isinstance(value, origin)


def _decode_as(data: str | bytes, kind: Any) -> Any:
    """Parse JSON ``data`` and check that it fits ``kind``; raise ValueError otherwise."""
    value = json.loads(data)
    if not _conforms(value, kind):
        raise ValueError(f"cannot decode JSON value {value!r} as {kind!r}")
    return value


def option_from_json(data: str | bytes, kind: Any) -> Option[Any]:
    """Decode JSON into an Option: null gives None, any other value of ``kind`` gives Some."""
    value = json.loads(data)
    if value is None:
        return none()
    if not _conforms(value, kind):
        raise ValueError(f"cannot decode JSON value {value!r} as {kind!r}")
    return some(value)