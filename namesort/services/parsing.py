"""
Name parsing service.

Turns one raw line of text into a NameRecord: the last whitespace-delimited
token is the surname, the one to three tokens before it are the given names.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from namesort.types import (
    MAX_GIVEN_NAMES,
    MIN_GIVEN_NAMES,
    EmptyInputError,
    MissingGivenNameError,
    NameRecord,
    TooManyGivenNamesError,
)

if TYPE_CHECKING:
    from namesort.text_processing.text_preprocessor import TextPreprocessor
    from namesort.types import NameSorterConfig


class NameParsingService:
    """Service for splitting a raw name into surname and given names."""

    def __init__(self, config: NameSorterConfig, preprocessor: TextPreprocessor):
        self._config = config
        self._preprocessor = preprocessor

    def parse_name(self, raw_name: str) -> NameRecord:
        """
        Parse a raw name into a NameRecord.

        Raises:
            EmptyInputError: raw_name is None, empty or whitespace only
            MissingGivenNameError: only one token was found
            TooManyGivenNamesError: more than three given names were found
        """
        if self._preprocessor.is_blank(raw_name):
            raise EmptyInputError("Full name cannot be null or empty")

        tokens = self._preprocessor.tokenize(raw_name)

        if len(tokens) <= MIN_GIVEN_NAMES:
            raise MissingGivenNameError(
                f"Given name(s) not provided, a name must have between "
                f"{MIN_GIVEN_NAMES} and {MAX_GIVEN_NAMES} given names",
            )
        if len(tokens) > MAX_GIVEN_NAMES + 1:
            raise TooManyGivenNamesError(
                f"Given names more than {MAX_GIVEN_NAMES} for '{raw_name}'",
                raw_name,
            )

        *given_names, surname = tokens
        return NameRecord(surname=surname, given_names=tuple(given_names))
