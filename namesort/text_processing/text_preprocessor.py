"""
Text preprocessing utilities for name input.

RESPONSIBILITIES:
- Blank detection: empty and whitespace-only strings
- Tokenization: split on whitespace runs, dropping empty tokens
- Line cleanup for file input: strip and drop blank lines

Nothing here changes the content of a token. Case, diacritics, hyphens,
apostrophes and digits pass through untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from namesort.types import NameSorterConfig


class TextPreprocessor:
    """Whitespace handling shared by the parser and the file reader."""

    def __init__(self, config: NameSorterConfig):
        self._config = config

    def is_blank(self, raw: str | None) -> bool:
        return raw is None or not raw.strip()

    def tokenize(self, raw: str) -> list[str]:
        """Split a trimmed string on whitespace runs."""
        stripped = raw.strip()
        if not stripped:
            return []
        return self._config.whitespace_pattern.split(stripped)

    def clean_lines(self, lines: Iterable[str]) -> list[str]:
        """Strip every line and drop the ones left empty, keeping order."""
        return [stripped for stripped in (line.strip() for line in lines) if stripped]
