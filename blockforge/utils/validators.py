# blockforge/utils/validators.py
"""
Input checks used by the editor boundary (config validation).

The renderer never calls these to reject input.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit


_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_IPV4_RE = re.compile(
    r"^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$"
)
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def is_valid_url(url: str) -> bool:
    """Absolute URL with a scheme and, for hierarchical schemes, a host."""
    if not isinstance(url, str) or not url or any(c.isspace() for c in url):
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False
    if parts.scheme.lower() in ("http", "https", "ftp", "ws", "wss"):
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def is_valid_email(email: str) -> bool:
    return isinstance(email, str) and bool(_EMAIL_RE.match(email))


def is_valid_ip(ip: str) -> bool:
    return isinstance(ip, str) and bool(_IPV4_RE.match(ip))
