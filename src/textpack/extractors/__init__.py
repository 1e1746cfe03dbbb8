"""Markup-to-text extractors."""

from textpack.extractors.html_extractor import HtmlTextExtractor

__all__ = ["HtmlTextExtractor"]
