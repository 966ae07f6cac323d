"""
File processing pipeline: read names, sort them, write them.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from namesort.paths import logger

if TYPE_CHECKING:
    from pathlib import Path

    from namesort.services.file_io import FileService
    from namesort.services.sorting import NameSortingService


class NameSortProcessor:
    """Runs a name file through the sorter and writes the result."""

    def __init__(self, file_service: FileService, sorting_service: NameSortingService):
        if file_service is None:
            raise ValueError("file_service is required")
        if sorting_service is None:
            raise ValueError("sorting_service is required")
        self._file_service = file_service
        self._sorting_service = sorting_service

    def sort_file(self, input_path: str | Path, output_path: str | Path) -> list[str]:
        """
        Sort the names in input_path into output_path.

        Nothing is written when reading or sorting fails. Errors are logged
        and re-raised unchanged.

        Returns:
            The sorted names as written.
        """
        if input_path is None or not str(input_path).strip():
            raise ValueError("Input file path cannot be null or empty")
        if output_path is None or not str(output_path).strip():
            raise ValueError("Output file path cannot be null or empty")

        try:
            names = self._file_service.read_lines(input_path)
            sorted_names = self._sorting_service.sort_names(names)
            self._file_service.write_lines(output_path, sorted_names)
        except Exception as e:
            logger.error(f"Error processing names: {e}")
            raise

        logger.info(f"Successfully processed {len(names)} names. Sorted names written to: {output_path}")
        return sorted_names
