# blockforge/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INTERNAL_ERROR: Final[str] = "INTERNAL_ERROR"

# configuration
INVALID_CONFIG: Final[str] = "INVALID_CONFIG"
CONFIG_NOT_FOUND: Final[str] = "CONFIG_NOT_FOUND"
PRESET_NOT_FOUND: Final[str] = "PRESET_NOT_FOUND"

# export
EXPORT_FAILED: Final[str] = "EXPORT_FAILED"


# ---- semantic groups (internal helpers) ----

CONFIG_CODES: Final[set[str]] = {
    INVALID_CONFIG,
    CONFIG_NOT_FOUND,
    PRESET_NOT_FOUND,
}

EXPORT_CODES: Final[set[str]] = {
    EXPORT_FAILED,
}

DEFAULT_FALLBACK_CODES: Final[set[str]] = {
    UNKNOWN,
    INTERNAL_ERROR,
}

KNOWN_CODES: Final[set[str]] = CONFIG_CODES | EXPORT_CODES | DEFAULT_FALLBACK_CODES
