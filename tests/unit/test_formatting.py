# tests/unit/test_formatting.py
from __future__ import annotations

import pytest

from blockforge.utils import (
    TIMESTAMP_FALLBACK,
    format_timestamp,
    parse_timestamp,
    timestamp_year,
    truncate_text,
)


class TestFormatTimestamp:

    def test_english(self):
        assert format_timestamp("2026-10-19T14:30:05Z", "en") == "Oct 19, 2026, 02:30:05 PM UTC"

    def test_english_morning(self):
        assert format_timestamp("2026-01-05T00:07:09Z", "en") == "Jan 05, 2026, 12:07:09 AM UTC"

    def test_french(self):
        assert format_timestamp("2026-10-19T14:30:05Z", "fr") == "19 oct. 2026, 14:30:05 UTC"

    def test_spanish(self):
        assert format_timestamp("2026-08-03T09:00:00Z", "es") == "03 ago 2026, 09:00:00 UTC"

    def test_unknown_language_uses_english(self):
        assert format_timestamp("2026-10-19T14:30:05Z", "de") == format_timestamp("2026-10-19T14:30:05Z", "en")

    def test_offset_is_kept(self):
        assert format_timestamp("2026-10-19T14:30:05+02:00", "fr") == "19 oct. 2026, 14:30:05 UTC+02:00"

    def test_naive_is_utc(self):
        assert format_timestamp("2026-10-19T14:30:05", "fr").endswith(" UTC")

    @pytest.mark.parametrize("value", ["", "   ", "not a date", "2026-13-45", None, 12345])
    def test_unparseable_falls_back(self, value):
        assert format_timestamp(value, "en") == TIMESTAMP_FALLBACK


def test_parse_timestamp_z_suffix():
    dt = parse_timestamp("2026-10-19T14:30:05Z")
    assert dt is not None
    assert dt.utcoffset().total_seconds() == 0


def test_timestamp_year():
    assert timestamp_year("2031-02-01T00:00:00Z") == 2031
    assert timestamp_year("garbage") is None


class TestTruncateText:

    def test_short_text_untouched(self):
        assert truncate_text("https://a.test", 60) == "https://a.test"

    def test_long_text_gets_suffix(self):
        result = truncate_text("x" * 100, 20)
        assert result.endswith("...")
        assert len(result) == 20

    def test_exact_length_untouched(self):
        assert truncate_text("abcde", 5) == "abcde"

    def test_tiny_limit(self):
        assert truncate_text("abcdef", 2) == "ab"
