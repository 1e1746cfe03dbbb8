"""textpack - turn a tree of HTML pages into an LLM-ready text corpus."""

from textpack.config import ExtractConfig
from textpack.errors import ConfigurationError, DiscoveryEmptyError, TextpackError
from textpack.pipeline import RunSummary, run_pipeline

__version__ = "0.1.0"

__all__ = [
    "ExtractConfig",
    "run_pipeline",
    "RunSummary",
    "TextpackError",
    "ConfigurationError",
    "DiscoveryEmptyError",
]
