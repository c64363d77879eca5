# blockforge/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded to UNKNOWN.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class BlockForgeError(Exception):
    """
    The one public exception type for blockforge.

    Rendering never raises it; configuration loading and preset lookup do,
    and exporters attach it to a failed ExportResult.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "BLOCKFORGE_ERROR"  # e.g. CONFIG_ERROR / EXPORT_ERROR
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_config(self) -> bool:
        return self.error_code in codes.CONFIG_CODES

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
        if self.cause is not None:
            result["cause"] = _safe_str(self.cause)
        return result

    # -------- factories --------

    @classmethod
    def config(
        cls,
        message: str,
        *,
        error_code: str = codes.INVALID_CONFIG,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "BlockForgeError":
        return cls(
            message=message,
            error_code=error_code,
            error_type="CONFIG_ERROR",
            details=details or {},
            cause=cause,
        )

    @classmethod
    def export_failed(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "BlockForgeError":
        return cls(
            message=message,
            error_code=codes.EXPORT_FAILED,
            error_type="EXPORT_ERROR",
            details=details or {},
            cause=cause,
        )
