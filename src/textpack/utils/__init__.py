"""Utility functions for textpack."""

from textpack.utils.digest import EMPTY_DIGEST, digest

__all__ = ["digest", "EMPTY_DIGEST"]
