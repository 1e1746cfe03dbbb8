"""CLI entry point for textpack."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from textpack.config import CORPUS_NAME, DEFAULT_PATTERNS, ExtractConfig
from textpack.errors import TextpackError
from textpack.pipeline import run_pipeline
from textpack.writers import read_index

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def extract(
    source: str,
    public: Optional[str] = None,
    out: str = CORPUS_NAME,
    ui: bool = False,
    concurrency: Optional[int] = None,
    patterns: Optional[Sequence[str]] = None,
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> int:
    """Extract text from every HTML file under source.

    Args:
        source: Directory containing HTML files
        public: Directory that receives llm.txt and pages.json
        out: Corpus filename, relative to public
        ui: Also write llm_ui.html
        concurrency: Maximum files processed at once
        patterns: Glob patterns relative to source
        timeout: Per-file read timeout in seconds
        verbose: Log progress details

    Returns:
        Process exit status
    """
    try:
        config = ExtractConfig.from_env(
            source,
            public_dir=public,
            out_name=out,
            ui=ui,
            concurrency=concurrency,
            patterns=tuple(patterns) if patterns else None,
            timeout=timeout,
            verbose=verbose,
            progress=verbose and sys.stderr.isatty(),
        )
        summary = asyncio.run(run_pipeline(config))
    except TextpackError as e:
        logger.error(f"[FATAL] {e}")
        return 1

    batch = summary.batch
    logger.info(
        f"Extracted {len(batch.successful)} of {len(batch.all)} files "
        f"({sum(r.text_length for r in batch.successful):,} chars)"
    )
    logger.info(f"Done. Files written to: {config.public_dir}")
    return 0


def info(index: str) -> int:
    """Show information about a pages.json index.

    Args:
        index: Path to the index file

    Returns:
        Process exit status
    """
    index_path = Path(index)
    if not index_path.exists():
        logger.error(f"Index not found: {index}")
        return 1

    data = read_index(index_path)
    pages = data.get("pages", [])
    failed = [p for p in pages if p.get("error")]

    print(f"Index: {index_path.name}")
    print(f"  Source: {data.get('source')}")
    print(f"  Generated: {data.get('generatedAt')}")
    print(f"")
    print(f"Pages:")
    print(f"  Extracted: {len(pages) - len(failed)}")
    print(f"  Failed: {len(failed)}")
    print(f"  Total: {len(pages)}")
    print(f"  Characters: {sum(p.get('textLength', 0) for p in pages):,}")

    if failed:
        print(f"")
        print(f"Failures:")
        for page in failed:
            print(f"  {page['path']}: {page['error']}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="textpack",
        description="textpack - HTML to plain-text corpus builder",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract readable text from a folder of HTML files",
    )
    extract_parser.add_argument("source", help="Source directory containing HTML files")
    extract_parser.add_argument(
        "--public",
        default=None,
        help="Directory for llm.txt and pages.json (default: current directory)",
    )
    extract_parser.add_argument(
        "--out",
        default=CORPUS_NAME,
        help=f"Corpus filename relative to --public (default: {CORPUS_NAME})",
    )
    extract_parser.add_argument(
        "--ui",
        action="store_true",
        help="Also write llm_ui.html for a quick overview",
    )
    extract_parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="Maximum number of files processed at once (default: 10)",
    )
    extract_parser.add_argument(
        "--pattern",
        action="append",
        dest="patterns",
        help=f"Glob pattern relative to source; repeatable (default: {' '.join(DEFAULT_PATTERNS)})",
    )
    extract_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-file read timeout in seconds",
    )
    extract_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed progress",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Summarize a pages.json index",
    )
    info_parser.add_argument("index", help="Path to pages.json")

    args = parser.parse_args(argv)

    if args.command == "extract":
        if args.verbose:
            logging.getLogger("textpack").setLevel(logging.DEBUG)
        status = extract(
            args.source,
            public=args.public,
            out=args.out,
            ui=args.ui,
            concurrency=args.concurrency,
            patterns=args.patterns,
            timeout=args.timeout,
            verbose=args.verbose,
        )
    elif args.command == "info":
        status = info(args.index)

    sys.exit(status)


if __name__ == "__main__":
    main()
