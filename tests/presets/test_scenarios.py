# tests/presets/test_scenarios.py
from __future__ import annotations

import random

import pytest

from blockforge import BlockForgeError, BlockPageConfig, generate_document
from blockforge.config import validate_config
from blockforge.core.errors import codes
from blockforge.presets import (
    SCENARIO_PRESETS,
    apply_preset,
    generate_technical_details,
    get_preset,
    list_presets,
)


EXPECTED_IDS = [
    "malware",
    "phishing",
    "adult-content",
    "gaming",
    "geo-block",
    "social-media",
    "streaming",
]


def test_list_presets():
    assert [preset.id for preset in list_presets()] == EXPECTED_IDS
    for preset in list_presets():
        assert preset.name
        assert preset.description


def test_get_preset():
    preset = get_preset("phishing")
    assert preset.overrides["block_type"] == "web-filter"


def test_unknown_preset_raises():
    with pytest.raises(BlockForgeError) as exc_info:
        get_preset("ransomware")
    assert exc_info.value.error_code == codes.PRESET_NOT_FOUND
    assert "malware" in exc_info.value.details["available"]


def test_presets_are_read_only():
    with pytest.raises(TypeError):
        SCENARIO_PRESETS["new"] = get_preset("malware")
    with pytest.raises(TypeError):
        get_preset("malware").overrides["category"] = "games"


@pytest.mark.parametrize("preset_id", EXPECTED_IDS)
def test_every_preset_validates_and_renders(config, preset_id):
    applied = apply_preset(config, preset_id)
    assert validate_config(applied) == []
    html = generate_document(applied)
    assert applied.blocked_url in html


def test_apply_keeps_unlisted_fields(make_config):
    base = make_config(organization="Acme", admin_email="it@acme.test")
    applied = apply_preset(base, "social-media")
    assert applied.firewall_mode == "corporate"
    assert applied.organization == "Acme"
    assert applied.admin_email == "it@acme.test"
    assert base.firewall_mode == "fortinet"


def test_apply_merges_technical_details(make_config):
    base = make_config(technical_details={"session_id": "sess_KEEP"})
    applied = apply_preset(base, "phishing")
    assert applied.technical_details.policy_id == "phish-detect-001"
    assert applied.technical_details.session_id == "sess_KEEP"


def test_apply_geo_block_custom_category(config):
    applied = apply_preset(config, "geo-block")
    assert applied.category_label() == "Geographic Restriction"


def test_apply_timestamp():
    applied = apply_preset(BlockPageConfig(), "gaming", timestamp="2026-01-02T03:04:05Z")
    assert applied.timestamp == "2026-01-02T03:04:05Z"
    assert apply_preset(BlockPageConfig(), "gaming").timestamp == ""


def test_apply_is_repeatable(config):
    assert apply_preset(config, "streaming") == apply_preset(config, "streaming")


class TestGenerateTechnicalDetails:

    def test_seeded_is_reproducible(self):
        first = generate_technical_details("malware", random.Random(7))
        second = generate_technical_details("malware", random.Random(7))
        assert first == second

    def test_fields_follow_category(self):
        details = generate_technical_details("phishing", random.Random(1))
        assert details.session_id.startswith("sess_")
        assert details.protocol == "HTTPS"
        assert validate_config(BlockPageConfig(technical_details=details)) == []

    def test_usable_with_config(self, config):
        details = generate_technical_details("gaming", random.Random(3))
        updated = config.with_updates(technical_details=details.model_dump())
        assert updated.technical_details == details


def test_nested_overrides_are_read_only():
    details = get_preset("phishing").overrides["technical_details"]
    with pytest.raises(TypeError):
        details["policy_id"] = "tampered"
    assert apply_preset(BlockPageConfig(), "phishing").technical_details.policy_id == "phish-detect-001"
