"""Test helpers shared across test modules."""

import asyncio
from pathlib import Path

LONG_TEXT = "Hello world, this is a sufficiently long piece of text."


def write_file(root: Path, rel: str, content: str | bytes) -> Path:
    """Create a file under root, making parent directories as needed."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


class FakeFiles:
    """In-memory reader/sizer pair that records how many reads overlap."""

    def __init__(self, contents: dict[Path, str], delay: float = 0.0, delays=None):
        self.contents = contents
        self.delay = delay
        self.delays = delays or {}
        self.failures: dict[Path, Exception] = {}
        self.stat_failures: set[Path] = set()
        self.in_flight = 0
        self.max_in_flight = 0
        self.reads: list[Path] = []

    async def read(self, path: Path) -> str:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(path, self.delay))
            self.reads.append(path)
            if path in self.failures:
                raise self.failures[path]
            return self.contents[path]
        finally:
            self.in_flight -= 1

    async def size(self, path: Path) -> int:
        if path in self.stat_failures:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        return len(self.contents[path].encode("utf-8"))
