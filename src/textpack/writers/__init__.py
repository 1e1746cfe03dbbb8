"""Artifact writers for textpack."""

from textpack.writers.corpus import make_file_header, write_corpus
from textpack.writers.index import page_record, read_index, write_index
from textpack.writers.report import render_report, write_report
from textpack.writers.toc import NO_FILES, make_toc

__all__ = [
    "make_toc",
    "NO_FILES",
    "make_file_header",
    "write_corpus",
    "page_record",
    "write_index",
    "read_index",
    "render_report",
    "write_report",
]
