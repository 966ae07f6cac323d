"""
Result types for name parsing.

This module contains the immutable record produced for every parsed name.
"""
from __future__ import annotations

from dataclasses import dataclass

MIN_GIVEN_NAMES = 1
MAX_GIVEN_NAMES = 3


@dataclass(frozen=True)
class NameRecord:
    """A parsed name: one surname and one to three given names in input order."""

    surname: str
    given_names: tuple[str, ...]

    def __post_init__(self):
        if not self.surname:
            raise ValueError("surname must not be empty")
        if not MIN_GIVEN_NAMES <= len(self.given_names) <= MAX_GIVEN_NAMES:
            raise ValueError(
                f"a name must have between {MIN_GIVEN_NAMES} and {MAX_GIVEN_NAMES} given names, "
                f"got {len(self.given_names)}",
            )
        # accept lists from callers but store a tuple so the record stays hashable
        object.__setattr__(self, "given_names", tuple(self.given_names))

    @property
    def full_name(self) -> str:
        """Given names then surname, single spaced."""
        return " ".join((*self.given_names, self.surname))

    @property
    def sort_key(self) -> tuple[str, tuple[str, ...]]:
        """
        Ordering key: surname, then given names position by position.

        Tuples compare element-wise and a shorter tuple that is a prefix of a
        longer one sorts first, so a missing second or third given name sorts
        before any present one ("John Doe" < "John Michael Doe").
        """
        return (self.surname, self.given_names)

    def __str__(self) -> str:
        return self.full_name
