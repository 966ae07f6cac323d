"""
Name sorting service.

Orders names by surname, then by each given name in position order. A name
without a second (or third) given name sorts before one that has it.
Comparison is ordinal: Python compares str by code point, so "F" (U+0046)
sorts before "f" (U+0066) and accented letters sort after all ASCII letters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from namesort.paths import logger
from namesort.types import NullCollectionError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from namesort.services.parsing import NameParsingService
    from namesort.types import NameRecord


class NameSortingService:
    """Service for sorting raw names into their canonical display order."""

    def __init__(self, parsing_service: NameParsingService):
        if parsing_service is None:
            raise ValueError("parsing_service is required")
        self._parsing_service = parsing_service

    def sort_names(self, raw_names: Iterable[str]) -> list[str]:
        """
        Parse, order and re-format a collection of raw names.

        The first name that fails to parse aborts the whole call with its
        parser error; nothing after it is parsed.
        """
        if raw_names is None:
            raise NullCollectionError("Names collection cannot be None")
        if isinstance(raw_names, str):
            raise TypeError("Names must be a collection of strings, not a single string")

        records = [self._parsing_service.parse_name(raw_name) for raw_name in raw_names]
        ordered = self.sort_records(records)
        logger.debug(f"Sorted {len(ordered)} names")
        return [record.full_name for record in ordered]

    def sort_records(self, records: Iterable[NameRecord]) -> list[NameRecord]:
        """Stable sort of already parsed records."""
        if records is None:
            raise NullCollectionError("Records collection cannot be None")
        return sorted(records, key=lambda record: record.sort_key)
