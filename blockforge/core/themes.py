# blockforge/core/themes.py
"""
Theme Registry

Static mapping from theme id to a color/typography/layout token set.
Themes are orthogonal to the firewall mode: most templates read them,
the school template deliberately does not.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
import logging

from .vocab import DEFAULT_THEME


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeColors:
    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    text: str
    text_muted: str
    border: str
    warning: str
    error: str
    success: str


@dataclass(frozen=True)
class ThemeHeader:
    height: str
    gradient: str


@dataclass(frozen=True)
class ThemeFontSizes:
    title: str
    subtitle: str
    body: str
    small: str


@dataclass(frozen=True)
class ThemeFont:
    family: str
    size: ThemeFontSizes


@dataclass(frozen=True)
class ThemeConfig:
    """One registry entry. Defined once at import, never mutated."""
    id: str
    name: str
    colors: ThemeColors
    header: ThemeHeader
    font: ThemeFont


_STANDARD_SIZES = ThemeFontSizes(title="32px", subtitle="32px", body="16px", small="14px")


THEMES: Mapping[str, ThemeConfig] = MappingProxyType({
    "light": ThemeConfig(
        id="light",
        name="Light Mode",
        colors=ThemeColors(
            primary="#da291c",
            secondary="#00b4b4",
            accent="#0066cc",
            background="#ffffff",
            surface="#f8f9fa",
            text="#333333",
            text_muted="#666666",
            border="#e0e0e0",
            warning="#ffc107",
            error="#dc2626",
            success="#059669",
        ),
        header=ThemeHeader(
            height="120px",
            gradient="linear-gradient(135deg, #f5f5f5 0%, #e8e8e8 100%)",
        ),
        font=ThemeFont(family="Arial, Helvetica, sans-serif", size=_STANDARD_SIZES),
    ),
    "dark": ThemeConfig(
        id="dark",
        name="Dark Mode",
        colors=ThemeColors(
            primary="#ff4444",
            secondary="#00dddd",
            accent="#4488ff",
            background="#1a1a2e",
            surface="#16213e",
            text="#e94560",
            text_muted="#a0a0a0",
            border="#0f3460",
            warning="#ffaa00",
            error="#ff4444",
            success="#00cc88",
        ),
        header=ThemeHeader(
            height="120px",
            gradient="linear-gradient(135deg, #0f0f23 0%, #1a1a3e 100%)",
        ),
        font=ThemeFont(family="Arial, Helvetica, sans-serif", size=_STANDARD_SIZES),
    ),
    "legacy": ThemeConfig(
        id="legacy",
        name="Legacy Style",
        colors=ThemeColors(
            primary="#003366",
            secondary="#006699",
            accent="#6699cc",
            background="#f0f0f0",
            surface="#ffffff",
            text="#000000",
            text_muted="#666666",
            border="#999999",
            warning="#ffcc00",
            error="#cc0000",
            success="#006600",
        ),
        header=ThemeHeader(
            height="80px",
            gradient="linear-gradient(180deg, #003366 0%, #002244 100%)",
        ),
        font=ThemeFont(
            family="Verdana, Arial, sans-serif",
            size=ThemeFontSizes(title="24px", subtitle="20px", body="14px", small="12px"),
        ),
    ),
    "minimal": ThemeConfig(
        id="minimal",
        name="Minimal UI",
        colors=ThemeColors(
            primary="#000000",
            secondary="#666666",
            accent="#999999",
            background="#ffffff",
            surface="#fafafa",
            text="#222222",
            text_muted="#888888",
            border="#dddddd",
            warning="#ff9500",
            error="#ff3b30",
            success="#34c759",
        ),
        header=ThemeHeader(height="60px", gradient="none"),
        font=ThemeFont(
            family='-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif',
            size=ThemeFontSizes(title="28px", subtitle="22px", body="15px", small="13px"),
        ),
    ),
    "alert": ThemeConfig(
        id="alert",
        name="High Alert Mode",
        colors=ThemeColors(
            primary="#ff0000",
            secondary="#ff6600",
            accent="#ffff00",
            background="#fff5f5",
            surface="#ffe0e0",
            text="#660000",
            text_muted="#993333",
            border="#ff6666",
            warning="#ff0000",
            error="#cc0000",
            success="#00aa00",
        ),
        header=ThemeHeader(
            height="140px",
            gradient="linear-gradient(135deg, #ff0000 0%, #cc0000 50%, #990000 100%)",
        ),
        font=ThemeFont(
            family="Arial Black, Arial, sans-serif",
            size=ThemeFontSizes(title="36px", subtitle="28px", body="16px", small="14px"),
        ),
    ),
})


def resolve_theme(theme_id: str) -> ThemeConfig:
    """
    Look up a theme by id.

    Unknown ids fall back to the default theme; the editor is expected to
    reject them before they get here, so this only logs.
    """
    theme = THEMES.get(theme_id)
    if theme is None:
        logger.warning("Unknown theme %r, falling back to %r", theme_id, DEFAULT_THEME)
        return THEMES[DEFAULT_THEME]
    return theme


def list_themes() -> list[str]:
    return list(THEMES)
