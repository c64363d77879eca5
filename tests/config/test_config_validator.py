# tests/config/test_config_validator.py
"""
validate_config(): structured issues, never exceptions.
"""

from __future__ import annotations

import pytest

from blockforge import BlockPageConfig
from blockforge.config import ConfigIssue, validate_config


def paths(issues):
    return {issue.path for issue in issues}


def test_default_config_is_clean():
    assert validate_config(BlockPageConfig()) == []


@pytest.mark.parametrize("mode,code", [
    ("fortinet", "FG-1001"),
    ("corporate", "CORP-002"),
    ("school", "EDU-002"),
    ("isp", "ISP-003"),
])
def test_mode_codes_are_clean(make_config, mode, code):
    assert validate_config(make_config(firewall_mode=mode, error_code=code)) == []


@pytest.mark.parametrize("field,value,path", [
    ("firewall_mode", "palo-alto", "firewallMode"),
    ("theme", "neon", "theme"),
    ("language", "de", "language"),
    ("block_type", "sandbox", "blockType"),
])
def test_unknown_closed_values_are_errors(make_config, field, value, path):
    issues = validate_config(make_config(**{field: value}))
    matching = [issue for issue in issues if issue.path == path]
    assert len(matching) == 1
    assert matching[0].level == "error"
    assert matching[0].hint


def test_empty_custom_category_warns(make_config):
    issues = validate_config(make_config(category="custom", custom_category="  "))
    assert paths(issues) == {"customCategory"}
    assert issues[0].level == "warn"


def test_empty_custom_error_code_warns(make_config):
    issues = validate_config(make_config(error_code="custom", custom_error_code=""))
    assert paths(issues) == {"customErrorCode"}


def test_filled_custom_values_are_clean(make_config):
    config = make_config(category="custom", custom_category="Crypto",
                         error_code="custom", custom_error_code="C-1")
    assert validate_config(config) == []


def test_error_code_from_other_mode_warns(make_config):
    issues = validate_config(make_config(firewall_mode="school", error_code="FG-1005"))
    assert paths(issues) == {"errorCode"}


@pytest.mark.parametrize("field,value,path", [
    ("blocked_url", "not a url", "blockedUrl"),
    ("admin_email", "nobody", "adminEmail"),
    ("admin_portal", "firewall.company", "adminPortal"),
    ("ip_address", "999.1.1.1", "ipAddress"),
    ("timestamp", "yesterday", "timestamp"),
])
def test_format_warnings(make_config, field, value, path):
    issues = validate_config(make_config(**{field: value}))
    assert paths(issues) == {path}
    assert issues[0].level == "warn"


def test_empty_optional_fields_are_clean(make_config):
    config = make_config(blocked_url="", admin_email="", admin_portal="", ip_address="", timestamp="")
    assert validate_config(config) == []


def test_technical_option_warnings(make_config):
    issues = validate_config(make_config(
        technical_details={"ssl_inspection": "partial", "action_taken": "dropped"},
    ))
    assert paths(issues) == {"technicalDetails.sslInspection", "technicalDetails.actionTaken"}


def test_custom_colors(make_config):
    issues = validate_config(make_config(
        custom_colors={"primary": "#112233", "secondary": "url(x)", "accent": ""},
    ))
    assert paths(issues) == {"customColors.secondary"}


def test_issue_str():
    issue = ConfigIssue(level="warn", path="adminEmail", message="Invalid email", hint="Fix it")
    assert str(issue) == "WARN [adminEmail] Invalid email\n   Hint: Fix it"
    assert str(ConfigIssue(level="error", path="theme", message="Bad")) == "ERROR [theme] Bad"
