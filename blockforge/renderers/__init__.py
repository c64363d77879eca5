# blockforge/renderers/__init__.py
"""
Renderers for block pages

- Html: standalone HTML document per firewall mode (the only output format)
"""

from .html import HtmlRenderer, generate_document, get_renderer

__all__ = [
    "HtmlRenderer",
    "generate_document",
    "get_renderer",
]
