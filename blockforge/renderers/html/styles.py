# blockforge/renderers/html/styles.py
"""
CSS fragments shared across templates.

Only theme tokens and sanitized colors are interpolated here; config text
never reaches the style block.
"""

from __future__ import annotations

from ...core.themes import ThemeConfig


RESET_CSS = """        * { margin: 0; padding: 0; box-sizing: border-box; }"""


def themed_body_css(theme: ThemeConfig, *, extra: str = "") -> str:
    """Body rule driven by the theme palette and font family."""
    return f"""        body {{
            font-family: {theme.font.family};
            background: {theme.colors.background};
            color: {theme.colors.text};
            min-height: 100vh;{extra}
        }}"""


def disclaimer_css(*, background: str, border: str, text: str, radius: str = "8px") -> str:
    """Amber training-notice box; every template renders one."""
    return f"""        .disclaimer {{
            background: {background};
            border: 2px solid {border};
            border-radius: {radius};
            padding: 20px;
            margin-top: 30px;
            text-align: left;
        }}
        .disclaimer-title {{
            font-weight: bold;
            color: {text};
            margin-bottom: 10px;
        }}
        .disclaimer-text {{
            color: {text};
            font-size: 14px;
            line-height: 1.5;
        }}"""


def request_button_css(*, background: str, radius: str = "4px") -> str:
    return f"""        .request-access-btn {{
            display: inline-block;
            background: {background};
            color: white;
            padding: 12px 24px;
            border-radius: {radius};
            font-weight: bold;
            font-size: 14px;
            border: none;
            cursor: pointer;
        }}
        .request-access-btn:hover {{
            opacity: 0.9;
        }}"""


def technical_details_css(theme: ThemeConfig) -> str:
    return f"""        .technical-details {{
            background: {theme.colors.surface};
            border: 1px solid {theme.colors.border};
            border-radius: 4px;
            padding: 20px;
            margin-top: 20px;
        }}
        .technical-details summary {{
            font-weight: bold;
            color: {theme.colors.text_muted};
            cursor: pointer;
            outline: none;
        }}
        .technical-details summary:hover {{
            color: {theme.colors.text};
        }}"""


def join_css(*blocks: str) -> str:
    return "\n".join(block for block in blocks if block)
