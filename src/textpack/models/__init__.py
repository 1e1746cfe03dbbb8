"""Data models for textpack."""

from textpack.models.result import (
    AggregatedBatch,
    ExtractionResult,
    FileTask,
    RunMetadata,
    relative_path,
)

__all__ = ["FileTask", "ExtractionResult", "AggregatedBatch", "RunMetadata", "relative_path"]
