"""Bounded-concurrency extraction over a batch of files.

Each task is read, extracted, hashed and sized inside one worker. Workers
share nothing but the semaphore, and every per-file problem is turned into a
failed ExtractionResult, so the fan-in is a plain gather that always yields
exactly one result per task.
"""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional, Sequence

import aiofiles
import aiofiles.os
from tqdm.asyncio import tqdm

from textpack.errors import ConfigurationError
from textpack.extractors import HtmlTextExtractor
from textpack.models import ExtractionResult, FileTask
from textpack.protocols import TextExtractor
from textpack.utils import digest

logger = logging.getLogger(__name__)

Reader = Callable[[Path], Awaitable[str]]
Sizer = Callable[[Path], Awaitable[int]]


async def read_text(path: Path) -> str:
    """Read a file as strict UTF-8, dropping a leading BOM."""
    async with aiofiles.open(path, "r", encoding="utf-8-sig") as f:
        return await f.read()


async def file_size(path: Path) -> int:
    """Return the on-disk size of a file in bytes."""
    stat = await aiofiles.os.stat(path)
    return stat.st_size


class BoundedExecutor:
    """Run extraction over many files with at most ``concurrency`` in flight."""

    def __init__(
        self,
        concurrency: int,
        extractor: Optional[TextExtractor] = None,
        reader: Reader = read_text,
        sizer: Sizer = file_size,
        timeout: Optional[float] = None,
        progress: bool = False,
    ):
        if concurrency < 1:
            raise ConfigurationError(
                f"Concurrency must be a positive integer, got {concurrency}"
            )
        self.concurrency = concurrency
        self.extractor = extractor or HtmlTextExtractor()
        self.reader = reader
        self.sizer = sizer
        self.timeout = timeout
        self.progress = progress

    async def run(self, tasks: Sequence[FileTask]) -> list[ExtractionResult]:
        """Process every task exactly once.

        Args:
            tasks: Files to process; order only affects scheduling

        Returns:
            One ExtractionResult per task, in task order
        """
        semaphore = asyncio.Semaphore(self.concurrency)

        async def with_concurrency_limit(task: FileTask) -> ExtractionResult:
            async with semaphore:
                return await self.process(task)

        return await tqdm.gather(
            *(with_concurrency_limit(task) for task in tasks),
            total=len(tasks),
            desc="Extracting",
            unit="file",
            disable=not self.progress,
        )

    async def process(self, task: FileTask) -> ExtractionResult:
        """Read, extract, hash and size a single file without raising."""
        try:
            markup = await self._read(task.path)
        except (OSError, UnicodeDecodeError) as e:
            return self._failed(task, self._describe(e))

        try:
            text = self.extractor.extract(markup)
        except Exception as e:
            # Pluggable extractors may raise; that file fails, the batch goes on
            return self._failed(task, f"extraction failed: {type(e).__name__}: {e}")

        try:
            size = await self.sizer(task.path)
        except OSError as e:
            # File vanished after the read; keep the content we have
            logger.debug(f"Could not stat {task.path}: {e}")
            size = 0

        return ExtractionResult(
            path=task.path,
            text=text,
            size=size,
            text_length=len(text),
            content_hash=digest(text),
        )

    def _failed(self, task: FileTask, reason: str) -> ExtractionResult:
        logger.warning(f"Error processing file {task.path}: {reason}")
        return ExtractionResult(
            path=task.path,
            text="",
            size=0,
            text_length=0,
            content_hash=digest(""),
            error=reason,
        )

    async def _read(self, path: Path) -> str:
        if self.timeout is None:
            return await self.reader(path)
        return await asyncio.wait_for(self.reader(path), timeout=self.timeout)

    def _describe(self, error: Exception) -> str:
        if isinstance(error, TimeoutError):
            return f"timed out after {self.timeout:g}s"
        if isinstance(error, UnicodeDecodeError):
            return f"cannot decode as UTF-8: {error.reason} at byte {error.start}"
        return str(error)
