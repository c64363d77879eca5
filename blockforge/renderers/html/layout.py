# blockforge/renderers/html/layout.py
"""
HTML document shell shared by every template.

The output is self-contained: one embedded <style> block, no external
stylesheet, script, font or image reference added here.
"""

from .utils import esc, esc_attr


def render_html_document(*, lang: str, title: str, css: str, body: str) -> str:
    """
    Wrap a rendered body into a complete document.

    ``title`` is raw text (escaped here); ``css`` and ``body`` are already
    rendered markup.
    """
    return f"""<!DOCTYPE html>
<html lang="{esc_attr(lang)}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{esc(title)}</title>
    <style>
{css}
    </style>
</head>
<body>
{body}
</body>
</html>
"""
