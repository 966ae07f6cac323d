"""
namesort: Personal Name Parsing and Sorting Library

Parses free-text personal names into surname and given names and sorts
collections of them by surname, then by given names in order.
"""

__version__ = "0.1.0"

__all__ = ["NameSorter"]

def __getattr__(name):
    """Lazy import to avoid loading the services until they are used."""
    if name == "NameSorter":
        from .sorter import NameSorter
        return NameSorter
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
