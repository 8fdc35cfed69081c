"""Symbol table mapping identifier names to entries."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Symbols(Generic[T]):
    """A table of symbols keyed by lexeme; later inserts replace earlier ones."""

    def __init__(self) -> None:
        self._symbols: dict[str, T] = {}

    def insert(self, lexeme: str, entry: T) -> None:
        self._symbols[lexeme] = entry

    def find(self, lexeme: str) -> T | None:
        """Return the entry for lexeme, or None when it is not declared."""
        return self._symbols.get(lexeme)

    def __contains__(self, lexeme: object) -> bool:
        return lexeme in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)