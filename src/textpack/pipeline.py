"""End-to-end extraction run: discover, extract, aggregate, write."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from textpack.aggregate import aggregate
from textpack.config import ExtractConfig
from textpack.errors import ConfigurationError, DiscoveryEmptyError
from textpack.executor import BoundedExecutor
from textpack.ingesters import get_ingester
from textpack.models import AggregatedBatch, RunMetadata
from textpack.writers import write_corpus, write_index, write_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """What a finished run produced."""

    batch: AggregatedBatch
    meta: RunMetadata
    corpus_path: Path
    index_path: Path
    report_path: Optional[Path] = None


def now_iso() -> str:
    """Current UTC time as ISO 8601 with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def run_pipeline(
    config: ExtractConfig,
    executor: Optional[BoundedExecutor] = None,
) -> RunSummary:
    """Run one extraction batch and write its artifacts.

    Fatal problems are raised before anything is written; per-file failures
    only show up in the index.

    Args:
        config: Settings for this run
        executor: Executor to use instead of one built from config

    Returns:
        Summary with the aggregated batch and artifact locations

    Raises:
        ConfigurationError: Invalid settings or missing source directory
        DiscoveryEmptyError: No files matched the patterns
    """
    config.validate()

    ingester = get_ingester(config.source)
    if ingester is None:
        raise ConfigurationError(f"Cannot process source: {config.source}")

    logger.debug("Scanning for HTML files...")
    tasks = ingester.discover(config.source, config.patterns)
    if not tasks:
        raise DiscoveryEmptyError(
            f"No HTML files found in {config.source} (patterns: {', '.join(config.patterns)})"
        )
    logger.debug(f"Found {len(tasks)} files")

    config.public_dir.mkdir(parents=True, exist_ok=True)

    if executor is None:
        executor = BoundedExecutor(
            concurrency=config.concurrency,
            timeout=config.timeout,
            progress=config.progress,
        )
    results = await executor.run(tasks)

    batch = aggregate(results, config.source)
    meta = RunMetadata(generated_at=now_iso(), source=config.source)
    if batch.failed:
        logger.warning(f"{len(batch.failed)} of {len(batch.all)} files failed to extract")

    index_path = write_index(batch.all, config.index_path, meta)
    logger.debug(f"Wrote pages metadata to {index_path}")

    corpus_path = write_corpus(batch.successful, config.corpus_path, meta)
    logger.debug(f"Wrote llm text to {corpus_path}")

    report_path = None
    if config.ui:
        report_path = write_report(batch.successful, config.report_path, meta)
        logger.debug(f"Wrote UI to {report_path}")

    return RunSummary(
        batch=batch,
        meta=meta,
        corpus_path=corpus_path,
        index_path=index_path,
        report_path=report_path,
    )
