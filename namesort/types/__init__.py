"""
Types package for name sorting.

This package contains the name record, configuration class and the
exception taxonomy used throughout the name sorting system.
"""

from namesort.types.config import NameSorterConfig
from namesort.types.errors import (
    EmptyInputError,
    MissingGivenNameError,
    NameSorterError,
    NullCollectionError,
    TooManyGivenNamesError,
)
from namesort.types.results import MAX_GIVEN_NAMES, MIN_GIVEN_NAMES, NameRecord

__all__ = [
    "MAX_GIVEN_NAMES",
    "MIN_GIVEN_NAMES",
    "EmptyInputError",
    "MissingGivenNameError",
    "NameRecord",
    "NameSorterConfig",
    "NameSorterError",
    "NullCollectionError",
    "TooManyGivenNamesError",
]
