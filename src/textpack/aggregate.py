"""Deterministic ordering of extraction results."""

from pathlib import Path
from typing import Iterable

from textpack.models import AggregatedBatch, ExtractionResult, relative_path


def aggregate(results: Iterable[ExtractionResult], root: Path) -> AggregatedBatch:
    """Sort results by their POSIX path relative to root (code-point order)."""
    ordered = sorted(results, key=lambda r: relative_path(r.path, root))
    return AggregatedBatch(root=root, all=tuple(ordered))
