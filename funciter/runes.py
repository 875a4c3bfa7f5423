"""An iterator over the characters of a string."""

from __future__ import annotations

from typing import Iterable

from .iterators import Iterator
from .option import Option, none, some


def _characters(text: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(text, str):
        return tuple(text)
    characters = tuple(text)
    for character in characters:
        if not isinstance(character, str) or len(character) != 1:
            raise TypeError(f"expected single characters, got {character!r}")
    return characters


class RunesIter(Iterator[str]):
    """Yields each character of a string or a sequence of characters."""

    _name = "Runes"

    def __init__(self, text: str | Iterable[str]) -> None:
        self._characters = iter(_characters(text))

    def next(self) -> Option[str]:
        character = next(self._characters, None)
        if character is None:
            return none()
        return some(character)


def runes(text: str | Iterable[str]) -> RunesIter:
    """Yield each character of ``text``, a string or a sequence of characters."""
    return RunesIter(text)