# blockforge/config/models.py
"""
BlockPageConfig: the single configuration entity handed to the renderer.

Design principles:
- Immutable per render call (frozen models)
- Serializable in the editor's camelCase JSON shape (aliases)
- Enum-like fields stay plain strings; closed-set checks belong to
  validate_config(), and the renderer falls back on unknown values
- Code has defaults for every field; no clock is read here
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional
import json

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from blockforge.core.vocab import (
    CUSTOM,
    DEFAULT_BLOCK_TYPE,
    DEFAULT_FIREWALL_MODE,
    DEFAULT_LANGUAGE,
    DEFAULT_THEME,
    category_label,
)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class TechnicalDetails(_FrozenModel):
    """Extended diagnostic fields, rendered verbatim when toggled on."""

    policy_id: str = "malware-block-001"
    firewall_serial: str = "FGT60FTK21012345"
    threat_id: str = "W32/Malware.Generic"
    web_filter_profile: str = "strict-security"
    security_profile: str = "antivirus-strict"
    ssl_inspection: str = Field(default="enabled", description="enabled / disabled / bypassed")
    action_taken: str = Field(default="blocked", description="blocked / logged / quarantined")
    source_ip: str = "192.168.1.100"
    destination_ip: str = "185.220.101.42"
    destination_port: str = "443"
    protocol: str = "HTTPS"
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    session_id: str = "sess_DEMO00001"
    referrer: str = "https://search-engine.example.com"


class CustomColors(_FrozenModel):
    """Branding overrides, read only by the custom-mode template."""

    primary: str = ""
    secondary: str = ""
    accent: str = ""


class BlockPageConfig(_FrozenModel):
    # Basic info
    blocked_url: str = "https://malicious-site.example.com/payload"
    category: str = "malware"
    custom_category: str = ""

    # Network details
    firewall_name: str = "FortiGate-01"
    firewall_mode: str = DEFAULT_FIREWALL_MODE
    organization: str = "Corporate Network"

    # Client info
    timestamp: str = Field(default="", description="ISO-8601, supplied by the caller")
    ip_address: str = "192.168.1.100"
    user_name: str = ""

    # Error info
    error_code: str = "FG-1005"
    custom_error_code: str = ""
    block_type: str = DEFAULT_BLOCK_TYPE

    # Admin contact
    admin_email: str = "security@company.com"
    admin_phone: str = "+1 (555) 123-4567"
    admin_portal: str = "https://firewall.company.com"

    # Display options (absent toggle = section off)
    show_disclaimer: bool = False
    show_technical_details: bool = False
    show_request_access: bool = False
    theme: str = DEFAULT_THEME
    language: str = DEFAULT_LANGUAGE

    technical_details: TechnicalDetails = Field(default_factory=TechnicalDetails)

    # Custom branding (custom mode only)
    custom_logo: Optional[str] = None
    custom_colors: Optional[CustomColors] = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp_text(cls, value: Any) -> Any:
        # YAML loads unquoted ISO timestamps as datetime/date
        if isinstance(value, date):
            return value.isoformat()
        return value

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]] = None) -> "BlockPageConfig":
        """Build from a mapping with camelCase or snake_case keys."""
        return cls.model_validate(normalize_keys(dict(data or {})))

    def category_label(self) -> str:
        if self.category == CUSTOM:
            return self.custom_category
        return category_label(self.category)

    def error_code_label(self) -> str:
        if self.error_code == CUSTOM:
            return self.custom_error_code
        return self.error_code

    def with_updates(self, **changes: Any) -> "BlockPageConfig":
        """
        Return a validated copy with ``changes`` applied.

        Nested ``technical_details`` / ``custom_colors`` given as dicts are
        merged key by key into the current values.
        """
        data = self.to_dict()
        for key, value in changes.items():
            field_name = _field_name(key)
            if field_name in _NESTED_FIELDS and isinstance(value, dict):
                current = data.get(field_name) or {}
                data[field_name] = {**current, **{_nested_key(k): v for k, v in value.items()}}
            else:
                data[field_name] = value
        return BlockPageConfig.model_validate(data)

    def to_dict(self, by_alias: bool = False) -> Dict[str, Any]:
        return self.model_dump(by_alias=by_alias)

    def to_json(self) -> str:
        """Pretty-printed camelCase JSON, the editor's export format."""
        return json.dumps(
            self.model_dump(by_alias=True, exclude_none=True),
            indent=2,
            ensure_ascii=False,
        )


_NESTED_FIELDS = {"technical_details", "custom_colors"}

_ALIASES = {to_camel(name): name for name in BlockPageConfig.model_fields}
_NESTED_ALIASES = {
    to_camel(name): name
    for model in (TechnicalDetails, CustomColors)
    for name in model.model_fields
}


def _field_name(key: str) -> str:
    return _ALIASES.get(key, key)


def _nested_key(key: str) -> str:
    return _NESTED_ALIASES.get(key, key)


def normalize_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase keys (top level and nested) to field names."""
    result: Dict[str, Any] = {}
    for key, value in data.items():
        name = _field_name(key)
        if name in _NESTED_FIELDS and isinstance(value, dict):
            value = {_nested_key(k): v for k, v in value.items()}
        result[name] = value
    return result
