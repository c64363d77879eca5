# tests/export/test_bundle.py
from __future__ import annotations

import io
import json
import zipfile

import pytest

from blockforge import BlockPageConfig, generate_document, load_config
from blockforge.core.errors import codes
from blockforge.export import bundle
from blockforge.export import (
    build_bundle,
    build_readme,
    bundle_filename,
    export_json,
    html_filename,
    json_filename,
    write_bundle,
    write_html,
    write_json,
)


GENERATED_AT = "2026-10-19T15:00:00Z"


class TestFilenames:

    def test_use_error_code(self, config):
        assert html_filename(config) == "firewall-block-FG-1005.html"
        assert json_filename(config) == "firewall-config-FG-1005.json"
        assert bundle_filename(config) == "firewall-block-package-FG-1005.zip"

    def test_custom_code_is_sanitized(self, make_config):
        config = make_config(error_code="custom", custom_error_code="../ZZ 7/<x>")
        assert html_filename(config) == "firewall-block-ZZ-7-x.html"

    def test_empty_custom_code(self, make_config):
        config = make_config(error_code="custom", custom_error_code="")
        assert html_filename(config) == "firewall-block-page.html"


def test_export_json_is_camel_case(config):
    data = json.loads(export_json(config))
    assert data["firewallMode"] == "fortinet"
    assert data["timestamp"] == config.timestamp
    assert "firewall_mode" not in data


def test_readme(make_config):
    readme = build_readme(make_config(firewall_mode="isp", error_code="ISP-001"), GENERATED_AT)
    assert readme.startswith("# Firewall Block Page - ISP Mode")
    assert f"Generated: {GENERATED_AT}" in readme
    assert "Error Code: ISP-001" in readme
    assert "Category: Malware" in readme


class TestBundle:

    def test_contents(self, config):
        with zipfile.ZipFile(io.BytesIO(build_bundle(config, GENERATED_AT))) as zf:
            assert zf.namelist() == ["index.html", "README.txt"]
            assert zf.read("index.html").decode("utf-8") == generate_document(config)
            assert zf.read("README.txt").decode("utf-8") == build_readme(config, GENERATED_AT)
            assert zf.getinfo("index.html").date_time == (2026, 10, 19, 15, 0, 0)

    def test_deterministic(self, config):
        assert build_bundle(config, GENERATED_AT) == build_bundle(config, GENERATED_AT)

    def test_unparseable_generated_at_uses_zip_epoch(self, config):
        with zipfile.ZipFile(io.BytesIO(build_bundle(config, "whenever"))) as zf:
            assert zf.getinfo("README.txt").date_time == (1980, 1, 1, 0, 0, 0)


class TestWriters:

    def test_write_html(self, config, tmp_path):
        result = write_html(config, tmp_path / "out")
        assert result.ok
        assert result.error is None
        assert result.path == tmp_path / "out" / "firewall-block-FG-1005.html"
        assert result.path.read_text(encoding="utf-8") == generate_document(config)

    def test_write_json_loads_back(self, config, tmp_path):
        result = write_json(config, tmp_path)
        assert result.ok
        assert load_config(result.path) == config

    def test_write_bundle_custom_name(self, config, tmp_path):
        result = write_bundle(config, tmp_path, GENERATED_AT, filename="drill.zip")
        assert result.ok
        assert result.path.name == "drill.zip"
        assert zipfile.is_zipfile(result.path)

    @pytest.mark.parametrize("writer", ["html", "json", "bundle"])
    def test_failure_is_reported(self, config, tmp_path, caplog, writer):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x", encoding="utf-8")
        with caplog.at_level("ERROR"):
            if writer == "html":
                result = write_html(config, blocker)
            elif writer == "json":
                result = write_json(config, blocker)
            else:
                result = write_bundle(config, blocker, GENERATED_AT)
        assert not result.ok
        assert result.error.error_code == codes.EXPORT_FAILED
        assert result.error.details["kind"] == writer
        assert "Failed to write" in caplog.text


def test_exports_do_not_touch_config(tmp_path):
    config = BlockPageConfig(timestamp=GENERATED_AT)
    before = config.model_dump()
    write_bundle(config, tmp_path, GENERATED_AT)
    assert config.model_dump() == before


@pytest.mark.parametrize("generated_at,expected", [
    ("2200-01-01T00:00:00Z", (2107, 12, 31, 23, 59, 58)),
    ("2107-06-30T08:00:00Z", (2107, 6, 30, 8, 0, 0)),
    ("1970-01-01T00:00:00Z", (1980, 1, 1, 0, 0, 0)),
])
def test_bundle_dates_stay_in_zip_range(config, generated_at, expected):
    with zipfile.ZipFile(io.BytesIO(build_bundle(config, generated_at))) as zf:
        assert zf.getinfo("index.html").date_time == expected


def test_write_bundle_far_future_date(config, tmp_path):
    result = write_bundle(config, tmp_path, "2200-01-01T00:00:00Z")
    assert result.ok
    assert zipfile.is_zipfile(result.path)


def test_build_failure_is_reported(config, tmp_path, monkeypatch, caplog):
    def broken(_config):
        raise RuntimeError("renderer exploded")

    monkeypatch.setattr(bundle, "generate_document", broken)
    with caplog.at_level("ERROR"):
        result = write_bundle(config, tmp_path, GENERATED_AT)
    assert not result.ok
    assert result.error.error_code == codes.EXPORT_FAILED
    assert isinstance(result.error.cause, RuntimeError)
    assert not result.path.exists()
    assert "Failed to write bundle export" in caplog.text
