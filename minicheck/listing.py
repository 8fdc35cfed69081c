"""Compilation listing: numbered source lines interleaved with queued errors."""

from __future__ import annotations

import sys
from collections import deque
from enum import Enum
from typing import TextIO


class ErrorCategory(Enum):
    """Kinds of compilation errors, each carrying the prefix of its message."""

    LEXICAL = "Lexical Error, Invalid Character "
    SYNTAX = ""
    GENERAL_SEMANTIC = "Semantic Error, "
    DUPLICATE_IDENTIFIER = "Semantic Error, Duplicate "
    UNDECLARED = "Semantic Error, Undeclared "

    @property
    def prefix(self) -> str:
        return self.value


class Listing:
    """Writes a numbered listing and reports errors after the line they occur on."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._errors: deque[str] = deque()
        self.line_number = 0
        self.lexical_errors = 0
        self.syntax_errors = 0
        self.semantic_errors = 0

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def first_line(self) -> None:
        """Start the listing with line number one."""
        self.line_number = 1
        self._write(f"\n{self.line_number:4d}  ")

    def next_line(self) -> None:
        """Report errors of the current line and start the next one."""
        self.display_errors()
        self.line_number += 1
        self._write(f"{self.line_number:4d}  ")

    def last_line(self) -> int:
        """Finish the listing, print a summary and return the error count."""
        self._write("\r")
        self.display_errors()
        self._write("     \n")
        total = self.total_errors()
        if total == 0:
            self._write("Compiled Successfully\n\n")
        else:
            self._write(f"Lexical Errors {self.lexical_errors}\n")
            self._write(f"Syntax Errors {self.syntax_errors}\n")
            self._write(f"Semantic Errors {self.semantic_errors}\n\n")
        return total

    def append_error(self, category: ErrorCategory, message: str) -> None:
        """Queue an error to be shown after the current line."""
        self._errors.append(category.prefix + message)
        if category is ErrorCategory.LEXICAL:
            self.lexical_errors += 1
        elif category is ErrorCategory.SYNTAX:
            self.syntax_errors += 1
        elif category is ErrorCategory.GENERAL_SEMANTIC:
            self.semantic_errors += 1

    def display_errors(self) -> None:
        """Print and discard all queued errors, oldest first."""
        while self._errors:
            self._write(self._errors.popleft() + "\n")

    def total_errors(self) -> int:
        """Number of lexical, syntax and general semantic errors so far."""
        return self.lexical_errors + self.syntax_errors + self.semantic_errors