# blockforge/config/loader.py
"""
Configuration Loader

Loads a BlockPageConfig from YAML or JSON with code defaults as fallback.

Design principle:
- Code = truth (BlockPageConfig has every default)
- File = input parameters (optional, partial)
- System works without a file
- Result is immutable (frozen model)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging

import yaml
from pydantic import ValidationError

from blockforge.core.errors import BlockForgeError, codes

from .models import BlockPageConfig, normalize_keys


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".blockforge" / "config.yml"

PathLike = Union[str, Path]


def default_config(**overrides: Any) -> BlockPageConfig:
    """Code-default configuration, optionally with ``overrides`` applied."""
    config = BlockPageConfig()
    if overrides:
        config = config.with_updates(**overrides)
    return config


def _parse_document(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def _load_document(config_path: Optional[PathLike]) -> Optional[Dict[str, Any]]:
    """
    Read the raw mapping.

    An explicit path must exist and parse; the implicit home-directory file
    is optional and a broken one is ignored with a warning.
    """
    explicit = config_path is not None
    path = Path(config_path) if explicit else DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit:
            raise BlockForgeError.config(
                f"Config file not found: {path}",
                error_code=codes.CONFIG_NOT_FOUND,
                details={"path": str(path)},
            )
        return None

    try:
        data = _parse_document(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        if not explicit:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return None
        raise BlockForgeError.config(
            f"Cannot parse config file: {path}",
            details={"path": str(path)},
            cause=e,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BlockForgeError.config(
            f"Config root must be a mapping, got {type(data).__name__}",
            details={"path": str(path)},
        )

    # editor exports sometimes wrap the payload
    if isinstance(data.get("config"), dict):
        data = data["config"]
    return data


def _merge_config(defaults: BlockPageConfig, data: Dict[str, Any]) -> BlockPageConfig:
    """Merge file values over defaults; nested sections merge key by key."""
    known = set(BlockPageConfig.model_fields)
    changes = {}
    for key, value in normalize_keys(data).items():
        if key not in known:
            logger.debug("Ignoring unknown config key %r", key)
            continue
        changes[key] = value
    logger.debug("Merging %d config keys over defaults", len(changes))
    return defaults.with_updates(**changes)


def load_config(config_path: Optional[PathLike] = None) -> BlockPageConfig:
    """
    Load block page configuration.

    Args:
        config_path: YAML (.yml/.yaml) or JSON (.json) file. If None, tries
            ~/.blockforge/config.yml and falls back to code defaults.

    Returns:
        BlockPageConfig (frozen)

    Raises:
        BlockForgeError: CONFIG_NOT_FOUND for a missing explicit path,
            INVALID_CONFIG for a document that does not parse or validate.
    """
    defaults = default_config()
    data = _load_document(config_path)
    if not data:
        return defaults

    try:
        return _merge_config(defaults, data)
    except ValidationError as e:
        raise BlockForgeError.config(
            "Config values failed validation",
            details={"errors": [err.get("msg", "") for err in e.errors()]},
            cause=e,
        ) from e


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "default_config",
    "load_config",
]
