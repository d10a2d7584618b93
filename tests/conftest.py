from datetime import datetime
from pathlib import Path

import pytest

from fetchlist.models.config import DownloaderConfig
from fetchlist.net.fetcher import FetchResult

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 0)
LOG_NAME = "download_log_2024-05-01_12-30-00.txt"
LINE_PREFIX = "[2024-05-01 12:30:00] "


def fixed_clock() -> datetime:
    return FIXED_NOW


class FakeFetcher:
    """Stands in for HttpFetcher, answering from a URL -> result mapping."""

    def __init__(self, responses: dict[str, FetchResult | None] | None = None):
        self.responses = responses or {}
        self.calls: list[str] = []

    async def fetch(self, url: str) -> FetchResult | None:
        self.calls.append(url)
        if url not in self.responses:
            raise AssertionError(f"Unexpected fetch {url}")
        return self.responses[url]


def read_log_messages(log_file: Path) -> list[str]:
    """Returns the log file's messages without their timestamp prefix."""
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert all(line.startswith(LINE_PREFIX) for line in lines)
    return [line[len(LINE_PREFIX) :] for line in lines]


@pytest.fixture
def links_file(tmp_path):
    def _write(*lines: str) -> Path:
        path = tmp_path / "links.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_config(tmp_path):
    def _make(links: Path, log_level: int = 3, **overrides) -> DownloaderConfig:
        values = {
            "links_file": links,
            "save_directory": str(tmp_path / "out"),
            "log_level": log_level,
            "log_dir": tmp_path / "logs",
        }
        values.update(overrides)
        return DownloaderConfig(**values)

    return _make
