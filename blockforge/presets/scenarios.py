# blockforge/presets/scenarios.py
"""
Scenario presets

Named partial configurations for common training exercises. A preset
only lists the fields it changes; everything else keeps the caller's
current values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional
import logging

from blockforge.config.models import BlockPageConfig
from blockforge.core.errors import BlockForgeError, codes


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioPreset:
    id: str
    name: str
    description: str
    overrides: Mapping[str, Any] = field(default_factory=dict)


def _preset(id: str, name: str, description: str, **overrides: Any) -> ScenarioPreset:
    frozen = {
        key: MappingProxyType(dict(value)) if isinstance(value, dict) else value
        for key, value in overrides.items()
    }
    return ScenarioPreset(id=id, name=name, description=description, overrides=MappingProxyType(frozen))


SCENARIO_PRESETS: Mapping[str, ScenarioPreset] = MappingProxyType({
    preset.id: preset
    for preset in (
        _preset(
            "malware",
            "Malware Download",
            "Vendor-style IPS block of a malware payload",
            firewall_mode="fortinet",
            block_type="intrusion-prevention",
            category="malware",
            error_code="FG-1005",
            blocked_url="https://malicious-site.example.com/payload.exe",
            technical_details={
                "policy_id": "malware-block-001",
                "threat_id": "W32/Malware.Generic",
                "security_profile": "antivirus-strict",
                "action_taken": "blocked",
            },
        ),
        _preset(
            "phishing",
            "Phishing Attempt",
            "Credential-harvesting page caught by web filtering",
            firewall_mode="fortinet",
            block_type="web-filter",
            category="phishing",
            error_code="FG-1006",
            blocked_url="https://secure-login.example-bank.test/verify",
            technical_details={
                "policy_id": "phish-detect-001",
                "threat_id": "Phishing/Credential.Harvest",
                "web_filter_profile": "anti-phishing",
            },
        ),
        _preset(
            "adult-content",
            "Adult Content",
            "Corporate policy block of an adult site",
            firewall_mode="corporate",
            category="adult-content",
            error_code="CORP-002",
            blocked_url="https://adult-site.example.com",
        ),
        _preset(
            "gaming",
            "Online Gaming",
            "School network block of a games site",
            firewall_mode="school",
            category="games",
            error_code="EDU-002",
            blocked_url="https://online-games.example.com",
            show_technical_details=False,
        ),
        _preset(
            "geo-block",
            "Geographic Restriction",
            "ISP-level restriction for a region-locked service",
            firewall_mode="isp",
            category="custom",
            custom_category="Geographic Restriction",
            error_code="ISP-003",
            blocked_url="https://region-locked.example.com",
        ),
        _preset(
            "social-media",
            "Social Media",
            "Corporate block of social networking during work hours",
            firewall_mode="corporate",
            category="social-media",
            error_code="CORP-001",
            blocked_url="https://social-network.example.com",
            show_technical_details=False,
        ),
        _preset(
            "streaming",
            "Streaming Media",
            "Bandwidth policy block of a video streaming service",
            firewall_mode="fortinet",
            block_type="application-control",
            category="streaming",
            error_code="FG-1002",
            blocked_url="https://video-stream.example.com/watch",
            technical_details={
                "policy_id": "stream-ctrl-001",
                "security_profile": "app-control-bandwidth",
                "action_taken": "blocked",
            },
        ),
    )
})


def get_preset(preset_id: str) -> ScenarioPreset:
    """
    Get scenario preset by id.

    Raises:
        BlockForgeError: PRESET_NOT_FOUND for an unknown id
    """
    preset = SCENARIO_PRESETS.get(preset_id)
    if preset is None:
        raise BlockForgeError.config(
            f"Unknown scenario preset: {preset_id!r}",
            error_code=codes.PRESET_NOT_FOUND,
            details={"preset": preset_id, "available": list(SCENARIO_PRESETS)},
        )
    return preset


def list_presets() -> List[ScenarioPreset]:
    return list(SCENARIO_PRESETS.values())


def apply_preset(config: BlockPageConfig, preset_id: str, timestamp: Optional[str] = None) -> BlockPageConfig:
    """
    Return ``config`` with the preset's fields applied.

    Technical details merge key by key. ``timestamp`` replaces the config
    timestamp when given; the caller owns the clock.
    """
    preset = get_preset(preset_id)
    changes: Dict[str, Any] = {
        key: dict(value) if isinstance(value, Mapping) else value
        for key, value in preset.overrides.items()
    }
    if timestamp is not None:
        changes["timestamp"] = timestamp
    logger.debug("Applying scenario preset %r (%d fields)", preset.id, len(changes))
    return config.with_updates(**changes)


__all__ = [
    "ScenarioPreset",
    "SCENARIO_PRESETS",
    "get_preset",
    "list_presets",
    "apply_preset",
]
