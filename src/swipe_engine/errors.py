# src/swipe_engine/errors.py
from __future__ import annotations


class LoadError(Exception):
    """
    A dictionary load that published nothing.

    `code` is the integer handed across the call boundary in place of an entry
    count: zero or negative, one value per failure kind.
    """
    code: int = -1

    def __init__(self, source: str, message: str | None = None) -> None:
        self.source = source
        super().__init__(message or f"{type(self).__name__}: {source}")


class DictionaryNotFound(LoadError):
    """The source could not be opened."""
    code = -1


class DictionaryEmpty(LoadError):
    """The source had lines, but none of them was a valid entry."""
    code = -2


class DictionaryParseFailure(LoadError):
    """The source could not be read as text."""
    code = -3


class EmptyInput(DictionaryEmpty):
    """The source contained no data lines at all."""
    code = 0
