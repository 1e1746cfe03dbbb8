"""Exceptions for batch-level failures.

Per-file problems never surface here; they are recorded on the
ExtractionResult instead.
"""


class TextpackError(Exception):
    """Base class for fatal run errors."""


class ConfigurationError(TextpackError):
    """Invalid settings or an unusable source directory."""


class DiscoveryEmptyError(TextpackError):
    """No input files matched the discovery patterns."""
