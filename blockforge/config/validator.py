# blockforge/config/validator.py
"""
Configuration Validator

Editor-boundary checks for a BlockPageConfig. The renderer tolerates every
value these checks flag (it falls back or prints the text as given); the
issues exist so a UI or CLI can tell the user before they export.

Returns structured issues with level (warn/error), path, message, hint.
"""

from dataclasses import dataclass
from typing import List, Literal

from blockforge.core.themes import THEMES
from blockforge.core.vocab import (
    ACTION_TAKEN_OPTIONS,
    BLOCK_TYPES,
    CUSTOM,
    FIREWALL_MODES,
    LANGUAGES,
    SSL_INSPECTION_OPTIONS,
    default_error_codes,
)
from blockforge.utils.formatting import parse_timestamp
from blockforge.utils.validators import is_valid_email, is_valid_ip, is_valid_url

from .models import BlockPageConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/UI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "technicalDetails.sslInspection"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def _one_of(options) -> str:
    return ", ".join(options)


def validate_config(config: BlockPageConfig) -> List[ConfigIssue]:
    """
    Validate configuration values against the known option sets.

    Returns:
        List of issues (warn/error level); never raises
    """
    issues: List[ConfigIssue] = []

    # Value domain validation (errors)
    if config.firewall_mode not in FIREWALL_MODES:
        issues.append(ConfigIssue(
            level="error",
            path="firewallMode",
            message=f"Unknown firewall mode: '{config.firewall_mode}' (vendor-style page will be used)",
            hint=f"Set firewallMode to one of: {_one_of(FIREWALL_MODES)}",
        ))

    if config.theme not in THEMES:
        issues.append(ConfigIssue(
            level="error",
            path="theme",
            message=f"Unknown theme: '{config.theme}' (light theme will be used)",
            hint=f"Set theme to one of: {_one_of(THEMES)}",
        ))

    if config.language not in LANGUAGES:
        issues.append(ConfigIssue(
            level="error",
            path="language",
            message=f"Unknown language: '{config.language}'",
            hint=f"Set language to one of: {_one_of(LANGUAGES)}",
        ))

    if config.block_type not in BLOCK_TYPES:
        issues.append(ConfigIssue(
            level="error",
            path="blockType",
            message=f"Unknown block type: '{config.block_type}' (intrusion-prevention wording will be used)",
            hint=f"Set blockType to one of: {_one_of(BLOCK_TYPES)}",
        ))

    # Custom free-text values
    if config.category == CUSTOM and not config.custom_category.strip():
        issues.append(ConfigIssue(
            level="warn",
            path="customCategory",
            message="category='custom' but customCategory is empty (category will render blank)",
            hint="Fill in customCategory or pick a predefined category",
        ))

    if config.error_code == CUSTOM:
        if not config.custom_error_code.strip():
            issues.append(ConfigIssue(
                level="warn",
                path="customErrorCode",
                message="errorCode='custom' but customErrorCode is empty (error code will render blank)",
                hint="Fill in customErrorCode or pick a code from the mode's list",
            ))
    else:
        known_codes = [value for value, _ in default_error_codes(config.firewall_mode)]
        if config.error_code not in known_codes:
            issues.append(ConfigIssue(
                level="warn",
                path="errorCode",
                message=f"Error code '{config.error_code}' is not a {config.firewall_mode} code",
                hint=f"Use one of: {_one_of(known_codes)}, or errorCode='custom'",
            ))

    # Field formats
    if config.blocked_url and not is_valid_url(config.blocked_url):
        issues.append(ConfigIssue(
            level="warn",
            path="blockedUrl",
            message=f"Blocked URL does not look like a URL: '{config.blocked_url}'",
            hint="Use a full URL such as https://example.com/path",
        ))

    if config.admin_email and not is_valid_email(config.admin_email):
        issues.append(ConfigIssue(
            level="warn",
            path="adminEmail",
            message=f"Invalid email address: '{config.admin_email}'",
        ))

    if config.admin_portal and not is_valid_url(config.admin_portal):
        issues.append(ConfigIssue(
            level="warn",
            path="adminPortal",
            message=f"Admin portal is not a valid URL: '{config.admin_portal}'",
            hint="Only http(s) portals are rendered as links",
        ))

    if config.ip_address and not is_valid_ip(config.ip_address):
        issues.append(ConfigIssue(
            level="warn",
            path="ipAddress",
            message=f"Invalid IPv4 address: '{config.ip_address}'",
        ))

    if config.timestamp and parse_timestamp(config.timestamp) is None:
        issues.append(ConfigIssue(
            level="warn",
            path="timestamp",
            message=f"Unparseable timestamp: '{config.timestamp}' (renders as N/A)",
            hint="Use ISO-8601, e.g. 2026-10-19T14:30:05Z",
        ))

    details = config.technical_details
    if details.ssl_inspection not in SSL_INSPECTION_OPTIONS:
        issues.append(ConfigIssue(
            level="warn",
            path="technicalDetails.sslInspection",
            message=f"Unusual SSL inspection value: '{details.ssl_inspection}'",
            hint=f"Expected one of: {_one_of(SSL_INSPECTION_OPTIONS)}",
        ))

    if details.action_taken not in ACTION_TAKEN_OPTIONS:
        issues.append(ConfigIssue(
            level="warn",
            path="technicalDetails.actionTaken",
            message=f"Unusual action taken value: '{details.action_taken}'",
            hint=f"Expected one of: {_one_of(ACTION_TAKEN_OPTIONS)}",
        ))

    # Branding
    if config.custom_colors is not None:
        for name in ("primary", "secondary", "accent"):
            value = getattr(config.custom_colors, name)
            if value and not _is_css_color(value):
                issues.append(ConfigIssue(
                    level="warn",
                    path=f"customColors.{name}",
                    message=f"Not a CSS color: '{value}' (theme color will be used)",
                    hint="Use a hex color such as #112233",
                ))

    return issues


def _is_css_color(value: str) -> bool:
    # deferred: blockforge.renderers.html imports blockforge.config
    from blockforge.renderers.html.utils import safe_css_color

    return safe_css_color(value, "") == value.strip()


__all__ = [
    "ConfigIssue",
    "validate_config",
]
