"""Streaming writer for the llm.txt corpus."""

from pathlib import Path
from typing import Sequence, TextIO

from textpack.models import ExtractionResult, RunMetadata, relative_path
from textpack.writers.toc import make_toc

DELIMITER = "═" * 80
NO_TEXT = "[No extractable text]"


def make_file_header(rel_path: str) -> str:
    """Return the delimiter block that opens one file's section."""
    return f"\n{DELIMITER}\n 📄 FILE: {rel_path}\n{DELIMITER}\n"


def write_corpus(
    items: Sequence[ExtractionResult],
    out_path: Path,
    meta: RunMetadata,
) -> Path:
    """Write the corpus section by section into a single stream.

    The file is complete only once this returns.

    Args:
        items: Successful results in batch order
        out_path: Destination file, overwritten if present
        meta: Generation time and source root

    Returns:
        The path written
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with open(out_path, "w", encoding="utf-8", newline="\n") as stream:
        _write_header(stream, items, meta)
        for item in items:
            stream.write(make_file_header(relative_path(item.path, meta.source)) + "\n")
            stream.write(f"{item.text}\n\n" if item.text else f"{NO_TEXT}\n\n")

    return out_path


def _write_header(stream: TextIO, items: Sequence[ExtractionResult], meta: RunMetadata) -> None:
    stream.write(f"Generated: {meta.generated_at}\n")
    stream.write(f"Source directory: {meta.source}\n")
    stream.write(f"Files processed: {len(items)}\n\n")
    stream.write(make_toc(items, meta.source) + "\n")
