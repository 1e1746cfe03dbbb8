"""Shared fixtures for textpack tests."""

from pathlib import Path

import pytest

from helpers import LONG_TEXT, write_file


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A source tree with the two-page example from the docs."""
    root = tmp_path / "site"
    write_file(root, "a.html", f"<body><main>{LONG_TEXT}</main></body>")
    write_file(root, "b.html", "<body></body>")
    return root


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TEXTPACK_* settings from the host environment out of tests."""
    for name in ("TEXTPACK_CONCURRENCY", "TEXTPACK_TIMEOUT", "TEXTPACK_PUBLIC_DIR"):
        monkeypatch.delenv(name, raising=False)
