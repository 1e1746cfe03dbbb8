"""Aligned table-of-contents rendering for the corpus."""

from pathlib import Path
from typing import Sequence

from textpack.models import ExtractionResult, relative_path

NO_FILES = "No files were processed."

HEADERS = ("File Path", "Size", "Chars")


def make_toc(items: Sequence[ExtractionResult], root: Path) -> str:
    """Render a box-drawn table of path, size and character count.

    Args:
        items: Successful results in batch order
        root: Source root that paths are shown relative to

    Returns:
        The table followed by a totals summary, or NO_FILES for no items
    """
    if not items:
        return NO_FILES

    rows = [
        (relative_path(item.path, root), str(item.size), str(item.text_length))
        for item in items
    ]
    path_w, size_w, chars_w = (
        max(len(HEADERS[col]), *(len(r[col]) for r in rows)) for col in range(3)
    )

    def divider(left: str, mid: str, right: str) -> str:
        return (
            left
            + "═" * (path_w + 2)
            + mid
            + "═" * (size_w + 2)
            + mid
            + "═" * (chars_w + 2)
            + right
        )

    def row(path: str, size: str, chars: str) -> str:
        return f"║ {path.ljust(path_w)} │ {size.rjust(size_w)} │ {chars.rjust(chars_w)} ║"

    total_chars = sum(item.text_length for item in items)
    lines = [
        divider("╔", "╤", "╗"),
        row(*HEADERS),
        divider("╟", "┼", "╢"),
        *(row(*r) for r in rows),
        divider("╚", "╧", "╝"),
        f"Total files: {len(items)}",
        f"Total characters: {total_chars:,}",
        "",
    ]
    return "\n".join(lines)
