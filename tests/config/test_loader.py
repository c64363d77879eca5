# tests/config/test_loader.py
from __future__ import annotations

import json

import pytest

from blockforge import BlockForgeError, BlockPageConfig, default_config, load_config
from blockforge.config import loader
from blockforge.core.errors import codes
from blockforge.utils.formatting import format_timestamp


def test_default_config_is_code_defaults():
    assert default_config() == BlockPageConfig()


def test_default_config_overrides():
    config = default_config(firewall_mode="school", technical_details={"protocol": "HTTP"})
    assert config.firewall_mode == "school"
    assert config.technical_details.protocol == "HTTP"


def test_yaml_partial_merges_over_defaults(tmp_path):
    path = tmp_path / "page.yml"
    path.write_text(
        "firewallMode: corporate\n"
        "organization: Acme\n"
        "show_technical_details: true\n"
        "technicalDetails:\n"
        "  sessionId: sess_YAML\n"
        "  destinationPort: 8080\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.firewall_mode == "corporate"
    assert config.organization == "Acme"
    assert config.show_technical_details is True
    assert config.technical_details.session_id == "sess_YAML"
    assert config.technical_details.destination_port == "8080"
    assert config.technical_details.policy_id == "malware-block-001"
    assert config.category == "malware"


def test_json_with_config_wrapper(tmp_path):
    path = tmp_path / "export.json"
    path.write_text(json.dumps({"config": {"firewallMode": "isp", "errorCode": "ISP-002"}}), encoding="utf-8")
    config = load_config(str(path))
    assert config.firewall_mode == "isp"
    assert config.error_code == "ISP-002"


def test_exported_json_loads_back(tmp_path):
    original = BlockPageConfig(firewall_mode="school", category="games", timestamp="2026-10-19T14:30:05Z")
    path = tmp_path / "firewall-config.json"
    path.write_text(original.to_json(), encoding="utf-8")
    assert load_config(path) == original


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == BlockPageConfig()


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "page.yml"
    path.write_text("color_scheme: purple\ncategory: phishing\n", encoding="utf-8")
    assert load_config(path).category == "phishing"


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(BlockForgeError) as exc_info:
        load_config(tmp_path / "nope.yml")
    assert exc_info.value.error_code == codes.CONFIG_NOT_FOUND


def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("firewallMode: [unclosed\n", encoding="utf-8")
    with pytest.raises(BlockForgeError) as exc_info:
        load_config(path)
    assert exc_info.value.error_code == codes.INVALID_CONFIG
    assert exc_info.value.cause is not None


def test_non_mapping_root_raises(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(BlockForgeError) as exc_info:
        load_config(path)
    assert exc_info.value.error_code == codes.INVALID_CONFIG


def test_invalid_value_type_raises(tmp_path):
    path = tmp_path / "bad-type.yml"
    path.write_text("technicalDetails:\n  sessionId: [1, 2]\n", encoding="utf-8")
    with pytest.raises(BlockForgeError) as exc_info:
        load_config(path)
    assert exc_info.value.error_code == codes.INVALID_CONFIG


def test_no_path_without_home_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", tmp_path / "missing.yml")
    assert load_config() == BlockPageConfig()


def test_no_path_reads_home_file(tmp_path, monkeypatch):
    home_file = tmp_path / "config.yml"
    home_file.write_text("theme: dark\n", encoding="utf-8")
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", home_file)
    assert load_config().theme == "dark"


def test_broken_home_file_is_ignored(tmp_path, monkeypatch):
    home_file = tmp_path / "config.yml"
    home_file.write_text("theme: [broken\n", encoding="utf-8")
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", home_file)
    assert load_config() == BlockPageConfig()


def test_unquoted_yaml_timestamp(tmp_path):
    path = tmp_path / "page.yml"
    path.write_text("timestamp: 2026-10-19T14:30:05Z\n", encoding="utf-8")
    config = load_config(path)
    assert isinstance(config.timestamp, str)
    assert format_timestamp(config.timestamp) == "Oct 19, 2026, 02:30:05 PM UTC"


def test_unquoted_yaml_date(tmp_path):
    path = tmp_path / "page.yml"
    path.write_text("timestamp: 2026-10-19\n", encoding="utf-8")
    assert load_config(path).timestamp == "2026-10-19"
