"""Core data models for extraction tasks and their results."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class FileTask:
    """A discovered input file awaiting processing.

    Identity is the resolved absolute path.
    """

    path: Path

    def relative_to(self, root: Path) -> str:
        """Return the POSIX-style path of this file relative to root."""
        return relative_path(self.path, root)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of processing one FileTask.

    ``error`` is set only when the file could not be read or decoded. An empty
    page that was read fine has ``error=None`` and ``text=""``.
    """

    path: Path
    text: str
    size: int
    text_length: int
    content_hash: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RunMetadata:
    """Batch-level metadata written into every artifact."""

    generated_at: str
    source: Path


@dataclass(frozen=True)
class AggregatedBatch:
    """All results for one run, sorted by path relative to ``root``."""

    root: Path
    all: tuple[ExtractionResult, ...] = field(default_factory=tuple)

    @property
    def successful(self) -> tuple[ExtractionResult, ...]:
        return tuple(r for r in self.all if r.ok)

    @property
    def failed(self) -> tuple[ExtractionResult, ...]:
        return tuple(r for r in self.all if not r.ok)

    def relative(self, result: ExtractionResult) -> str:
        return relative_path(result.path, self.root)


def relative_path(path: Path, root: Path) -> str:
    """Render path relative to root, falling back to the absolute path."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
