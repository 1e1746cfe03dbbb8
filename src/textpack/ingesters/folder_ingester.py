"""Ingester for local folders of HTML files."""

import logging
from pathlib import Path
from typing import Sequence

from textpack.models import FileTask

logger = logging.getLogger(__name__)


class FolderIngester:
    """Discover files under a local directory by glob pattern."""

    source_type = "folder"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def discover(self, source: Path, patterns: Sequence[str]) -> list[FileTask]:
        """Find files under a folder matching any of the glob patterns.

        Args:
            source: Root directory to search
            patterns: Glob patterns relative to the root (e.g. "**/*.html")

        Returns:
            FileTasks sorted by absolute path, one per resolved file
        """
        root = source.resolve()
        seen: set[Path] = set()

        for pattern in patterns:
            for match in root.glob(pattern):
                if not match.is_file() or self._should_skip(match.relative_to(root)):
                    continue
                # Symlinks and overlapping patterns collapse onto one task
                seen.add(match.resolve())

        logger.debug(f"Matched {len(seen)} files under {root}")
        return [FileTask(path=p) for p in sorted(seen)]

    def _should_skip(self, path: Path) -> bool:
        """Check if a file should be skipped.

        Skips hidden files and anything under a hidden folder
        (.git, .next, .cache, ...).
        """
        return any(part.startswith(".") for part in path.parts)
