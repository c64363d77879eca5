# blockforge/__init__.py
"""
BlockForge - Simulated firewall block pages for security awareness training

User-facing API:
- generate_document(): BlockPageConfig -> standalone HTML document
- BlockPageConfig: the page configuration (frozen, camelCase JSON aliases)
- load_config() / validate_config(): file input and editor-boundary checks
- presets: named training scenarios
- export: HTML / JSON / zip bundle writers

Basic usage:
    >>> from blockforge import BlockPageConfig, generate_document
    >>> config = BlockPageConfig(firewall_mode="school", category="games",
    ...                          timestamp="2026-10-19T14:30:05Z")
    >>> html = generate_document(config)

Presets:
    >>> from blockforge import apply_preset, default_config
    >>> config = apply_preset(default_config(), "phishing",
    ...                       timestamp="2026-10-19T14:30:05Z")
"""

__version__ = "0.1.0"

from .config import (
    BlockPageConfig,
    TechnicalDetails,
    CustomColors,
    ConfigIssue,
    default_config,
    load_config,
    validate_config,
)
from .core.errors import BlockForgeError
from .core.themes import THEMES, ThemeConfig, resolve_theme
from .renderers.html import HtmlRenderer, generate_document, get_renderer
from .presets import ScenarioPreset, apply_preset, get_preset, list_presets
from . import export

__all__ = [
    # Rendering
    "generate_document",
    "get_renderer",
    "HtmlRenderer",

    # Config
    "BlockPageConfig",
    "TechnicalDetails",
    "CustomColors",
    "ConfigIssue",
    "default_config",
    "load_config",
    "validate_config",

    # Themes
    "THEMES",
    "ThemeConfig",
    "resolve_theme",

    # Presets
    "ScenarioPreset",
    "apply_preset",
    "get_preset",
    "list_presets",

    # Errors
    "BlockForgeError",

    # Modules
    "export",
]
