"""
Name Sorting Module

This module parses personal names and sorts them by surname, then by each
given name in the order the given names appear.

## Overview

The `NameSorter` class wires together a small set of services:

1. **TextPreprocessor**: blank detection and whitespace tokenization
2. **NameParsingService**: raw line -> `NameRecord` (surname + 1 to 3 given names)
3. **NameSortingService**: ordering by the four-level key and projection back to text
4. **FileService / NameSortProcessor**: read a name file, sort, write the result

## Ordering

Names are compared most significant key first:

1. surname
2. first given name
3. second given name, a missing one sorting first
4. third given name, a missing one sorting first

All comparisons are ordinal (code point), case-sensitive and stable.

## Usage Examples

```python
sorter = NameSorter()

sorter.sort_names(["Janet Parsons", "Adonis Julius Archer", "Marin Alvarez"])
# Returns: ["Marin Alvarez", "Adonis Julius Archer", "Janet Parsons"]

record = sorter.parse("  John   Michael  Doe ")
# record.surname == "Doe"
# record.given_names == ("John", "Michael")
# record.full_name == "John Michael Doe"

sorter.parse("John")
# Raises: MissingGivenNameError("Given name(s) not provided, ...")

sorter.sort_file("unsorted-names-list.txt", "sorted-names-list.txt")
```

## Error Handling

Invalid names raise subclasses of `NameSorterError` (itself a `ValueError`):
- `EmptyInputError`: empty or whitespace-only name
- `MissingGivenNameError`: surname only
- `TooManyGivenNamesError`: more than three given names
- `NullCollectionError`: `None` passed instead of a collection

Sorting stops at the first invalid name; there are no partial results.

## Thread Safety

Every service is stateless after construction, so one `NameSorter` can be
shared between threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from namesort.services import (
    FileService,
    NameParsingService,
    NameRecord,
    NameSorterConfig,
    NameSortingService,
    NameSortProcessor,
)
from namesort.text_processing.text_preprocessor import TextPreprocessor

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class NameSorter:
    """Main name parsing and sorting entry point."""

    def __init__(self, config: NameSorterConfig | None = None):
        self._config = config or NameSorterConfig.create_default()
        self._preprocessor = TextPreprocessor(self._config)
        self._parsing_service = NameParsingService(self._config, self._preprocessor)
        self._sorting_service = NameSortingService(self._parsing_service)
        self._file_service = FileService(self._config, self._preprocessor)
        self._processor = NameSortProcessor(self._file_service, self._sorting_service)

    @property
    def config(self) -> NameSorterConfig:
        """Settings shared by all services."""
        return self._config

    def parse(self, raw_name: str) -> NameRecord:
        """Parse one raw name. Raises a NameSorterError subclass when invalid."""
        return self._parsing_service.parse_name(raw_name)

    def sort_names(self, raw_names: Iterable[str]) -> list[str]:
        """Sort raw names and return them in canonical "Given Names Surname" form."""
        return self._sorting_service.sort_names(raw_names)

    def sort_records(self, records: Iterable[NameRecord]) -> list[NameRecord]:
        """Order already parsed records by surname, then given names."""
        return self._sorting_service.sort_records(records)

    def sort_file(self, input_path: str | Path, output_path: str | Path | None = None) -> list[str]:
        """Sort a name file; output defaults to config.default_output_path."""
        if output_path is None:
            output_path = self._config.default_output_path
        return self._processor.sort_file(input_path, output_path)
