# tests/conftest.py
from __future__ import annotations

import pytest

from blockforge import BlockPageConfig


FIXED_TIMESTAMP = "2026-10-19T14:30:05Z"


@pytest.fixture
def timestamp() -> str:
    return FIXED_TIMESTAMP


@pytest.fixture
def config() -> BlockPageConfig:
    """Code defaults with a fixed timestamp (renders are deterministic)."""
    return BlockPageConfig(timestamp=FIXED_TIMESTAMP)


@pytest.fixture
def make_config():
    def _make(**changes) -> BlockPageConfig:
        return BlockPageConfig(timestamp=FIXED_TIMESTAMP).with_updates(**changes)
    return _make


@pytest.fixture
def lines_of():
    """Stripped, non-blank lines of a document."""
    def _lines(html: str) -> list[str]:
        return [line.strip() for line in html.splitlines() if line.strip()]
    return _lines


@pytest.fixture
def is_subsequence():
    def _check(needle: list[str], haystack: list[str]) -> bool:
        it = iter(haystack)
        return all(any(line == candidate for candidate in it) for line in needle)
    return _check
