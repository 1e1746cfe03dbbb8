"""
Run configuration for textpack.

One ExtractConfig is built per run and passed explicitly through the
pipeline. Defaults can be overridden from the environment (or a .env file);
explicit arguments win over both.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from textpack.errors import ConfigurationError

DEFAULT_PATTERNS = ("**/*.html", "**/*.htm")
DEFAULT_CONCURRENCY = 10
CORPUS_NAME = "llm.txt"
INDEX_NAME = "pages.json"
REPORT_NAME = "llm_ui.html"


@dataclass(frozen=True)
class ExtractConfig:
    """Settings for one extraction run."""

    source: Path
    public_dir: Path = Path(".")
    out_name: str = CORPUS_NAME
    index_name: str = INDEX_NAME
    ui: bool = False
    concurrency: int = DEFAULT_CONCURRENCY
    patterns: tuple[str, ...] = field(default=DEFAULT_PATTERNS)
    timeout: Optional[float] = None
    verbose: bool = False
    progress: bool = False

    @property
    def corpus_path(self) -> Path:
        return self.public_dir / self.out_name

    @property
    def index_path(self) -> Path:
        return self.public_dir / self.index_name

    @property
    def report_path(self) -> Path:
        return self.public_dir / REPORT_NAME

    def validate(self) -> "ExtractConfig":
        """Check run preconditions before any processing starts.

        Raises:
            ConfigurationError: On a bad concurrency ceiling, timeout or
                pattern (empty or absolute), or when the source directory
                is missing
        """
        if self.concurrency < 1:
            raise ConfigurationError(
                f"Concurrency must be a positive integer, got {self.concurrency}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")
        if not self.patterns:
            raise ConfigurationError("At least one discovery pattern is required")
        for pattern in self.patterns:
            if not pattern or Path(pattern).is_absolute():
                raise ConfigurationError(
                    f"Discovery patterns must be non-empty and relative to the source, got {pattern!r}"
                )
        if not self.source.is_dir():
            raise ConfigurationError(f"Source directory does not exist: {self.source}")
        return self

    @classmethod
    def from_env(cls, source: Path | str, **overrides: Any) -> "ExtractConfig":
        """Build a config, filling unset values from TEXTPACK_* variables.

        Args:
            source: Directory containing the HTML files
            **overrides: Explicit settings; None values are ignored

        Returns:
            A config with absolute source and output paths
        """
        load_dotenv()

        settings: dict[str, Any] = {}
        if "TEXTPACK_CONCURRENCY" in os.environ:
            settings["concurrency"] = _env_number("TEXTPACK_CONCURRENCY", int)
        if "TEXTPACK_TIMEOUT" in os.environ:
            settings["timeout"] = _env_number("TEXTPACK_TIMEOUT", float)
        if "TEXTPACK_PUBLIC_DIR" in os.environ:
            settings["public_dir"] = Path(os.environ["TEXTPACK_PUBLIC_DIR"])

        settings.update({k: v for k, v in overrides.items() if v is not None})

        public_dir = Path(settings.pop("public_dir", Path("."))).resolve()
        patterns = tuple(settings.pop("patterns", DEFAULT_PATTERNS))

        return cls(
            source=Path(source).resolve(),
            public_dir=public_dir,
            patterns=patterns,
            **settings,
        )


def _env_number(name: str, kind: type) -> Any:
    raw = os.environ[name]
    try:
        return kind(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
