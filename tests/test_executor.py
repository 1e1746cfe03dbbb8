"""Tests for the bounded-concurrency executor."""

import logging
from pathlib import Path

import pytest

from helpers import LONG_TEXT, FakeFiles, write_file
from textpack.errors import ConfigurationError
from textpack.executor import BoundedExecutor
from textpack.models import FileTask
from textpack.utils import EMPTY_DIGEST, digest


def make_pages(count: int) -> dict[Path, str]:
    return {
        Path(f"/site/page{i}.html"): f"<body><main>{LONG_TEXT} #{i}</main></body>"
        for i in range(count)
    }


def tasks_for(contents: dict[Path, str]) -> list[FileTask]:
    return [FileTask(path=p) for p in contents]


@pytest.mark.parametrize("concurrency", [0, -3])
def test_rejects_non_positive_concurrency(concurrency):
    with pytest.raises(ConfigurationError):
        BoundedExecutor(concurrency=concurrency)


@pytest.mark.asyncio
async def test_every_task_produces_one_result():
    pages = make_pages(7)
    files = FakeFiles(pages)
    executor = BoundedExecutor(concurrency=3, reader=files.read, sizer=files.size)

    results = await executor.run(tasks_for(pages))

    assert len(results) == 7
    assert [r.path for r in results] == list(pages)
    assert sorted(files.reads) == sorted(pages)
    assert all(r.ok for r in results)


@pytest.mark.asyncio
async def test_ceiling_of_one_serializes_work():
    pages = make_pages(5)
    files = FakeFiles(pages, delay=0.01)
    executor = BoundedExecutor(concurrency=1, reader=files.read, sizer=files.size)

    await executor.run(tasks_for(pages))

    assert files.max_in_flight == 1


@pytest.mark.asyncio
async def test_ceiling_is_never_exceeded():
    pages = make_pages(10)
    files = FakeFiles(pages, delay=0.01)
    executor = BoundedExecutor(concurrency=3, reader=files.read, sizer=files.size)

    await executor.run(tasks_for(pages))

    assert files.max_in_flight == 3


@pytest.mark.asyncio
async def test_ceiling_of_n_allows_full_overlap():
    pages = make_pages(4)
    files = FakeFiles(pages, delay=0.01)
    executor = BoundedExecutor(concurrency=4, reader=files.read, sizer=files.size)

    await executor.run(tasks_for(pages))

    assert files.max_in_flight == 4


@pytest.mark.asyncio
async def test_read_failure_is_isolated(caplog):
    pages = make_pages(4)
    broken = Path("/site/page2.html")
    files = FakeFiles(pages)
    files.failures[broken] = PermissionError(13, "Permission denied", str(broken))
    executor = BoundedExecutor(concurrency=2, reader=files.read, sizer=files.size)

    with caplog.at_level(logging.WARNING, logger="textpack"):
        results = await executor.run(tasks_for(pages))

    by_path = {r.path: r for r in results}
    failed = by_path[broken]
    assert not failed.ok
    assert "Permission denied" in failed.error
    assert failed.text == ""
    assert failed.size == 0
    assert failed.text_length == 0
    assert failed.content_hash == EMPTY_DIGEST

    assert sum(r.ok for r in results) == 3
    assert f"Error processing file {broken}" in caplog.text


@pytest.mark.asyncio
async def test_stat_failure_keeps_extraction():
    pages = make_pages(1)
    path = next(iter(pages))
    files = FakeFiles(pages)
    files.stat_failures.add(path)
    executor = BoundedExecutor(concurrency=1, reader=files.read, sizer=files.size)

    [result] = await executor.run(tasks_for(pages))

    assert result.ok
    assert result.size == 0
    assert result.text == f"{LONG_TEXT} #0"
    assert result.content_hash == digest(result.text)


@pytest.mark.asyncio
async def test_timeout_is_recorded_as_failure():
    pages = make_pages(2)
    slow = Path("/site/page0.html")
    files = FakeFiles(pages, delays={slow: 1.0})
    executor = BoundedExecutor(
        concurrency=2, reader=files.read, sizer=files.size, timeout=0.05
    )

    results = await executor.run(tasks_for(pages))

    by_path = {r.path: r for r in results}
    assert by_path[slow].error == "timed out after 0.05s"
    assert by_path[Path("/site/page1.html")].ok


@pytest.mark.asyncio
async def test_reads_real_files(tmp_path):
    good = write_file(tmp_path, "good.html", f"<body><main>{LONG_TEXT}</main></body>")
    bad = write_file(tmp_path, "bad.html", b"<body>\xff\xfe\xfa</body>")
    missing = tmp_path / "missing.html"
    executor = BoundedExecutor(concurrency=2)

    results = await executor.run([FileTask(good), FileTask(bad), FileTask(missing)])
    by_path = {r.path: r for r in results}

    assert by_path[good].ok
    assert by_path[good].text == LONG_TEXT
    assert by_path[good].size == good.stat().st_size
    assert by_path[good].text_length == len(LONG_TEXT)

    assert by_path[bad].error.startswith("cannot decode as UTF-8")
    assert "No such file" in by_path[missing].error


@pytest.mark.asyncio
async def test_leading_bom_is_dropped(tmp_path):
    path = write_file(tmp_path, "bom.html", b"\xef\xbb\xbf<body><p>Hi</p></body>")

    [result] = await BoundedExecutor(concurrency=1).run([FileTask(path)])

    assert result.text == "Hi"


@pytest.mark.asyncio
async def test_empty_task_list():
    assert await BoundedExecutor(concurrency=2).run([]) == []


class ExplodingExtractor:
    """Extractor that fails on one chosen page."""

    def __init__(self, marker: str):
        self.marker = marker

    def extract(self, markup: str) -> str:
        if self.marker in markup:
            raise RuntimeError("parser blew up")
        return "fine"


@pytest.mark.asyncio
async def test_extractor_failure_is_isolated(caplog):
    pages = make_pages(3)
    broken = Path("/site/page1.html")
    files = FakeFiles(pages)
    executor = BoundedExecutor(
        concurrency=2,
        extractor=ExplodingExtractor(marker="#1"),
        reader=files.read,
        sizer=files.size,
    )

    with caplog.at_level(logging.WARNING, logger="textpack"):
        results = await executor.run(tasks_for(pages))

    by_path = {r.path: r for r in results}
    failed = by_path[broken]
    assert not failed.ok
    assert failed.error == "extraction failed: RuntimeError: parser blew up"
    assert failed.text == ""
    assert failed.content_hash == EMPTY_DIGEST

    assert [r.text for r in results if r.ok] == ["fine", "fine"]
    assert f"Error processing file {broken}" in caplog.text
