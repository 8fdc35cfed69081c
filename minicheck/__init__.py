"""Listing, symbol table, token kinds and type checks for a small compiler."""

__version__ = "0.1.0"
__all__ = ["listing", "symbols", "tokens", "typecheck"]