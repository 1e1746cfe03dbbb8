"""Protocol definitions for extensible components."""

from textpack.protocols.extractor import TextExtractor
from textpack.protocols.ingester import Ingester

__all__ = ["Ingester", "TextExtractor"]
