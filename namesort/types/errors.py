"""
Exception types raised while parsing and sorting names.

All of them derive from ValueError so callers that only care about
"bad name input" can catch that.
"""
from __future__ import annotations


class NameSorterError(ValueError):
    """Base class for name validation failures."""


class EmptyInputError(NameSorterError):
    """Raw name is empty or whitespace only."""


class MissingGivenNameError(NameSorterError):
    """Only a surname was found."""


class TooManyGivenNamesError(NameSorterError):
    """More given names than a record can hold."""

    def __init__(self, message: str, raw_name: str):
        super().__init__(message)
        self.raw_name = raw_name


class NullCollectionError(NameSorterError):
    """The collection handed to the sorter was None rather than empty."""
