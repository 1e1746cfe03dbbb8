"""Protocol for markup-to-text extractors."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextExtractor(Protocol):
    """Protocol for text extractors.

    Extraction must be a pure function of the markup: no I/O, no shared state,
    and no exceptions for malformed input.
    """

    def extract(self, markup: str) -> str:
        """Return normalized plain text (possibly empty)."""
        ...
