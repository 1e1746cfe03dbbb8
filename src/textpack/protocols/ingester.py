"""Protocol for input file discovery."""

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from textpack.models import FileTask


@runtime_checkable
class Ingester(Protocol):
    """Protocol for input discovery.

    Implementations turn a source root into a deduplicated, ordered list of
    FileTasks. Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def discover(self, source: Path, patterns: Sequence[str]) -> list[FileTask]:
        """Return one FileTask per unique file matching any of the patterns."""
        ...
