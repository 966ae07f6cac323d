"""
Configuration for name parsing and sorting.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from namesort.paths import DEFAULT_OUTPUT_PATH


@dataclass(frozen=True)
class NameSorterConfig:
    """Immutable settings shared by all services."""

    whitespace_pattern: re.Pattern[str]
    default_output_path: str
    encoding: str
    # utf-8-sig drops a leading byte order mark so it never ends up inside the first name
    input_encoding: str

    @classmethod
    def create_default(cls) -> NameSorterConfig:
        return cls(
            whitespace_pattern=re.compile(r"\s+"),
            default_output_path=DEFAULT_OUTPUT_PATH,
            encoding="utf-8",
            input_encoding="utf-8-sig",
        )
