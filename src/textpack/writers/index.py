"""JSON index of every processed page, failures included."""

import json
from pathlib import Path
from typing import Any, Sequence

from textpack.models import ExtractionResult, RunMetadata, relative_path


def page_record(result: ExtractionResult, root: Path) -> dict[str, Any]:
    """Build the index record for one result."""
    return {
        "path": relative_path(result.path, root),
        "size": result.size,
        "textLength": result.text_length,
        "hash": result.content_hash,
        "error": result.error,
    }


def write_index(results: Sequence[ExtractionResult], out_path: Path, meta: RunMetadata) -> Path:
    """Serialize all results plus run metadata, replacing any previous index.

    Args:
        results: Every result in batch order
        out_path: Destination JSON file
        meta: Generation time and source root

    Returns:
        The path written
    """
    payload = {
        "generatedAt": meta.generated_at,
        "source": str(meta.source),
        "pages": [page_record(r, meta.source) for r in results],
    }

    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write("\n")

    return out_path


def read_index(path: Path) -> dict[str, Any]:
    """Load a previously written index."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)
