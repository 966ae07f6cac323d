"""
Services package for name sorting.

This package contains all service classes used by the name sorter,
organized by domain responsibility.
"""

from namesort.services.file_io import FileService
from namesort.services.parsing import NameParsingService
from namesort.services.processor import NameSortProcessor
from namesort.services.sorting import NameSortingService
from namesort.types import NameRecord, NameSorterConfig

__all__ = [
    # I/O
    "FileService",
    # Types
    "NameRecord",
    "NameSorterConfig",
    # Services
    "NameParsingService",
    "NameSortProcessor",
    "NameSortingService",
]
