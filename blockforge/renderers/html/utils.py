# blockforge/renderers/html/utils.py
"""
Escaping helpers shared by every template.

Every config value is untrusted text. Templates never interpolate a raw
field: text nodes go through esc(), attributes through esc_attr(),
link/image targets through safe_href()/safe_image_src(), and values that
land inside the <style> block through safe_css_color().
"""

from __future__ import annotations

from typing import Any, Iterable, Optional
from urllib.parse import quote, urlsplit
import html as html_lib
import logging
import re


logger = logging.getLogger(__name__)

DEFAULT_LINK_SCHEMES = ("http", "https", "mailto")

_DATA_IMAGE_RE = re.compile(
    r"^data:image/(png|jpeg|jpg|gif|webp|svg\+xml);base64,[A-Za-z0-9+/=\s]+$",
    re.IGNORECASE,
)
_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_COLOR_KEYWORD_RE = re.compile(r"^[a-zA-Z]{3,20}$")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")


def esc(value: Any) -> str:
    """HTML-entity encode a value for a text node. None renders empty."""
    if value is None:
        return ""
    return html_lib.escape(str(value), quote=True)


def esc_attr(value: Any) -> str:
    """Encode a value for a double- or single-quoted attribute."""
    if value is None:
        return ""
    return html_lib.escape(str(value), quote=True)


def _scheme_of(value: str) -> Optional[str]:
    try:
        scheme = urlsplit(value).scheme
    except ValueError:
        return None
    return scheme.lower() or None


def safe_href(value: Any, schemes: Iterable[str] = DEFAULT_LINK_SCHEMES) -> Optional[str]:
    """
    Attribute-ready URL if its scheme is allowed, else None.

    Callers render the value as plain text when this returns None.
    """
    if not isinstance(value, str):
        return None
    candidate = _CONTROL_CHARS_RE.sub("", value).strip()
    if not candidate:
        return None
    scheme = _scheme_of(candidate)
    if scheme is None or scheme not in set(schemes):
        logger.warning("Dropping link with disallowed scheme: %r", scheme)
        return None
    return esc_attr(candidate)


def safe_image_src(value: Any) -> Optional[str]:
    """http(s) URL or base64 data:image URI, attribute-ready; else None."""
    if not isinstance(value, str):
        return None
    candidate = value.strip()
    if not candidate:
        return None
    if _DATA_IMAGE_RE.match(candidate):
        return esc_attr(candidate)
    return safe_href(candidate, schemes=("http", "https"))


def mailto_href(email: Any) -> Optional[str]:
    """mailto: link for an address, percent-encoded; None for empty input."""
    if not isinstance(email, str) or not email.strip():
        return None
    return esc_attr("mailto:" + quote(email.strip(), safe="@.+-_"))


def safe_css_color(value: Any, fallback: str) -> str:
    """
    Color usable inside the <style> block.

    Only hex colors and bare keywords pass; anything else (including
    values carrying ';', '}' or '<') yields ``fallback``.
    """
    if isinstance(value, str):
        candidate = value.strip()
        if _HEX_COLOR_RE.match(candidate) or _COLOR_KEYWORD_RE.match(candidate):
            return candidate
    return fallback


def or_na(value: Any) -> str:
    """Escaped value, or the literal N/A when empty."""
    text = esc(value).strip()
    return text if text else "N/A"
