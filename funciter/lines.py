"""Iterators over the lines of a readable stream."""

from __future__ import annotations

from typing import IO, Any

from .iterators import Iterator
from .option import Option, none, some
from .result import Result, err, ok
from .results import collect_results


def _read_error(cause: BaseException) -> OSError:
    error = OSError(f"read line: {cause}")
    error.__cause__ = cause
    return error


class LinesIter(Iterator[Result[bytes]]):
    """Yields each line of a stream as bytes, wrapped in a Result.

    Line endings are trimmed. The final piece after the last newline is
    always yielded, so input ending in a newline gives a last, empty line.
    A read error is yielded once as an Err, after which nothing follows.
    """

    _name = "Lines"

    def __init__(self, reader: IO[Any]) -> None:
        self._reader = reader
        self._finished = False

    def next(self) -> Option[Result[bytes]]:
        if self._finished:
            return none()

        try:
            line = self._reader.readline()
        except OSError as exc:
            self._finished = True
            return some(err(_read_error(exc)))

        if isinstance(line, str):
            line = line.encode("utf-8")

        if not line.endswith(b"\n"):
            self._finished = True
            return some(ok(line))

        return some(ok(line.rstrip(b"\r\n")))

    def collect_results(self) -> Result[list[bytes]]:
        return collect_results(self)


class LinesStringIter(Iterator[Result[str]]):
    """Like :class:`LinesIter`, but yields each line decoded as UTF-8 text."""

    _name = "LinesString"

    def __init__(self, reader: IO[Any]) -> None:
        self._lines = LinesIter(reader)

    def next(self) -> Option[Result[str]]:
        item, present = self._lines.next().value()
        if not present:
            return none()
        content, error = item.value()  # type: ignore[union-attr]
        if error is not None:
            return some(err(error))
        return some(ok(content.decode("utf-8", errors="replace")))  # type: ignore[union-attr]

    def collect_results(self) -> Result[list[str]]:
        return collect_results(self)


def lines(reader: IO[Any]) -> LinesIter:
    """Yield each line of ``reader`` as a Result holding bytes."""
    return LinesIter(reader)


def lines_string(reader: IO[Any]) -> LinesStringIter:
    """Yield each line of ``reader`` as a Result holding text."""
    return LinesStringIter(reader)