# blockforge/core/vocab.py
"""
Lookup tables: display labels for the configuration vocabulary.

Ordering inside each table is significant (editor selectors list entries
in this order), so every table is built from an ordered literal and
exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


DEFAULT_FIREWALL_MODE = "fortinet"
DEFAULT_THEME = "light"
DEFAULT_LANGUAGE = "en"
DEFAULT_BLOCK_TYPE = "intrusion-prevention"

CUSTOM = "custom"


@dataclass(frozen=True)
class CategoryInfo:
    label: str
    color: str


CATEGORIES: Mapping[str, CategoryInfo] = MappingProxyType({
    "malware": CategoryInfo("Malware", "#dc2626"),
    "phishing": CategoryInfo("Phishing", "#ea580c"),
    "adult-content": CategoryInfo("Adult Content", "#be185d"),
    "gambling": CategoryInfo("Gambling", "#7c3aed"),
    "social-media": CategoryInfo("Social Media", "#0891b2"),
    "streaming": CategoryInfo("Streaming Media", "#059669"),
    "games": CategoryInfo("Games", "#2563eb"),
    "proxy": CategoryInfo("Proxy/Anonymizer", "#4b5563"),
    "hacking": CategoryInfo("Hacking", "#7f1d1d"),
    "warez": CategoryInfo("Warez/Piracy", "#854d0e"),
    "weapons": CategoryInfo("Weapons", "#991b1b"),
    "drugs": CategoryInfo("Drugs", "#065f46"),
    "violence": CategoryInfo("Violence/Hate", "#7c2d12"),
    CUSTOM: CategoryInfo("Custom Category", "#525252"),
})

BLOCK_TYPES: Mapping[str, str] = MappingProxyType({
    "intrusion-prevention": "Intrusion Prevention",
    "web-filter": "Web Filtering",
    "application-control": "Application Control",
    "dns-filter": "DNS Filtering",
})

SSL_INSPECTION_OPTIONS: Mapping[str, str] = MappingProxyType({
    "enabled": "Enabled",
    "disabled": "Disabled",
    "bypassed": "Bypassed",
})

ACTION_TAKEN_OPTIONS: Mapping[str, str] = MappingProxyType({
    "blocked": "Blocked",
    "logged": "Logged Only",
    "quarantined": "Quarantined",
})

LANGUAGES: Mapping[str, str] = MappingProxyType({
    "en": "English",
    "fr": "Français",
    "es": "Español",
})


ErrorCodeOption = Tuple[str, str]


@dataclass(frozen=True)
class FirewallModeInfo:
    name: str
    primary_color: str
    header_style: str
    show_serial_number: bool
    show_threat_id: bool
    default_error_codes: Tuple[ErrorCodeOption, ...]


FIREWALL_MODES: Mapping[str, FirewallModeInfo] = MappingProxyType({
    "fortinet": FirewallModeInfo(
        name="Fortinet FortiGate",
        primary_color="#da291c",
        header_style="geometric",
        show_serial_number=True,
        show_threat_id=True,
        default_error_codes=(
            ("FG-1001", "FG-1001 - Content Blocked"),
            ("FG-1002", "FG-1002 - Category Blocked"),
            ("FG-1003", "FG-1003 - Security Risk"),
            ("FG-1004", "FG-1004 - Policy Violation"),
            ("FG-1005", "FG-1005 - Malware Detected"),
            ("FG-1006", "FG-1006 - Phishing Attempt"),
        ),
    ),
    "corporate": FirewallModeInfo(
        name="Corporate Firewall",
        primary_color="#003366",
        header_style="simple",
        show_serial_number=False,
        show_threat_id=False,
        default_error_codes=(
            ("CORP-001", "CORP-001 - Access Denied"),
            ("CORP-002", "CORP-002 - Policy Violation"),
            ("CORP-003", "CORP-003 - Security Block"),
        ),
    ),
    "school": FirewallModeInfo(
        name="School Network Filter",
        primary_color="#0066cc",
        header_style="friendly",
        show_serial_number=False,
        show_threat_id=False,
        default_error_codes=(
            ("EDU-001", "EDU-001 - Content Filtered"),
            ("EDU-002", "EDU-002 - Not Educational"),
            ("EDU-003", "EDU-003 - Against School Policy"),
        ),
    ),
    "isp": FirewallModeInfo(
        name="ISP Level Block",
        primary_color="#663399",
        header_style="official",
        show_serial_number=True,
        show_threat_id=True,
        default_error_codes=(
            ("ISP-001", "ISP-001 - Legal Compliance"),
            ("ISP-002", "ISP-002 - Court Order"),
            ("ISP-003", "ISP-003 - Geographic Restriction"),
        ),
    ),
    # no fixed primary color: comes from custom_colors or the theme
    CUSTOM: FirewallModeInfo(
        name="Custom Branded",
        primary_color="",
        header_style="customizable",
        show_serial_number=True,
        show_threat_id=True,
        default_error_codes=(
            ("CUSTOM-001", "CUSTOM-001 - Access Blocked"),
        ),
    ),
})


def category_label(category: str) -> str:
    """Display label for a category id; unknown ids are shown as given."""
    info = CATEGORIES.get(category)
    return info.label if info else category


def block_type_label(block_type: str) -> str:
    return BLOCK_TYPES.get(block_type, block_type)


def default_error_codes(mode: str) -> Tuple[ErrorCodeOption, ...]:
    info = FIREWALL_MODES.get(mode) or FIREWALL_MODES[DEFAULT_FIREWALL_MODE]
    return info.default_error_codes


def list_firewall_modes() -> list[str]:
    return list(FIREWALL_MODES)
