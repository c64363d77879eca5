# blockforge/config/__init__.py
"""
BlockForge Configuration

Design principles:
1. Code has defaults for every field (a file can be deleted)
2. Files are partial input: YAML or JSON, camelCase or snake_case keys
3. Validation reports issues; rendering tolerates every value
"""

from .models import BlockPageConfig, TechnicalDetails, CustomColors, normalize_keys
from .loader import DEFAULT_CONFIG_PATH, default_config, load_config
from .validator import ConfigIssue, validate_config

__all__ = [
    "BlockPageConfig",
    "TechnicalDetails",
    "CustomColors",
    "normalize_keys",
    "DEFAULT_CONFIG_PATH",
    "default_config",
    "load_config",
    "ConfigIssue",
    "validate_config",
]
