"""
Line-oriented file access for name lists.

Reads a text file into a list of trimmed, non-blank lines and writes a list
of lines back out as newline-terminated UTF-8 text.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from namesort.text_processing.text_preprocessor import TextPreprocessor
    from namesort.types import NameSorterConfig


class FileService:
    """Reads and writes one name per line."""

    def __init__(self, config: NameSorterConfig, preprocessor: TextPreprocessor):
        self._config = config
        self._preprocessor = preprocessor

    def read_lines(self, path: str | Path) -> list[str]:
        """Return the stripped, non-blank lines of a file in order."""
        file_path = self._validate_path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"File does not exist: {file_path}")

        with file_path.open(encoding=self._config.input_encoding) as f:
            return self._preprocessor.clean_lines(f)

    def write_lines(self, path: str | Path, lines: Iterable[str]) -> None:
        """Write each line followed by a newline; no lines gives an empty file."""
        file_path = self._validate_path(path)
        with file_path.open("w", encoding=self._config.encoding, newline="\n") as f:
            for line in lines:
                f.write(f"{line}\n")

    def _validate_path(self, path: str | Path) -> Path:
        if path is None or not str(path).strip():
            raise ValueError("Path cannot be null or empty")
        return Path(str(path).strip())
