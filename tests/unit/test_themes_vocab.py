# tests/unit/test_themes_vocab.py
from __future__ import annotations

import pytest

from blockforge.core.themes import THEMES, list_themes, resolve_theme
from blockforge.core.vocab import (
    CATEGORIES,
    DEFAULT_FIREWALL_MODE,
    FIREWALL_MODES,
    block_type_label,
    category_label,
    default_error_codes,
    list_firewall_modes,
)


def test_registry_has_five_themes():
    assert list_themes() == ["light", "dark", "legacy", "minimal", "alert"]


@pytest.mark.parametrize("theme_id", ["light", "dark", "legacy", "minimal", "alert"])
def test_every_theme_is_complete(theme_id):
    theme = resolve_theme(theme_id)
    assert theme.id == theme_id
    for name in ("primary", "secondary", "accent", "background", "surface",
                 "text", "text_muted", "border", "warning", "error", "success"):
        assert getattr(theme.colors, name)
    assert theme.header.height
    assert theme.font.family
    assert theme.font.size.title


def test_unknown_theme_falls_back_to_light(caplog):
    with caplog.at_level("WARNING"):
        theme = resolve_theme("neon")
    assert theme is THEMES["light"]
    assert "neon" in caplog.text


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        THEMES["new"] = THEMES["light"]
    with pytest.raises(TypeError):
        CATEGORIES["new"] = CATEGORIES["malware"]


def test_themes_are_frozen():
    with pytest.raises(Exception):
        THEMES["light"].colors.primary = "#000"


def test_category_label_lookup():
    assert category_label("games") == "Games"
    assert category_label("streaming") == "Streaming Media"
    assert category_label("something-new") == "something-new"


def test_block_type_label():
    assert block_type_label("dns-filter") == "DNS Filtering"
    assert block_type_label("bogus") == "bogus"


def test_firewall_modes():
    assert list_firewall_modes() == ["fortinet", "corporate", "school", "isp", "custom"]
    assert DEFAULT_FIREWALL_MODE in FIREWALL_MODES


def test_default_error_codes_per_mode():
    assert [code for code, _ in default_error_codes("school")] == ["EDU-001", "EDU-002", "EDU-003"]
    assert default_error_codes("custom") == (("CUSTOM-001", "CUSTOM-001 - Access Blocked"),)


def test_default_error_codes_unknown_mode_uses_vendor_list():
    assert default_error_codes("bogus") == default_error_codes("fortinet")
