# blockforge/renderers/html/__init__.py
"""
HTML block page rendering

generate_document() is the single entry point: it resolves the theme,
picks the renderer for the firewall mode and returns one self-contained
HTML document. Unknown modes render with the vendor-style template.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping
import logging

from ...config.models import BlockPageConfig
from ...core.themes import resolve_theme
from ...core.vocab import DEFAULT_FIREWALL_MODE
from .templates import (
    TemplateRenderer,
    VendorRenderer,
    CorporateRenderer,
    SchoolRenderer,
    IspRenderer,
    CustomRenderer,
)


logger = logging.getLogger(__name__)

RENDERERS: Mapping[str, TemplateRenderer] = MappingProxyType({
    renderer.mode: renderer
    for renderer in (
        VendorRenderer(),
        CorporateRenderer(),
        SchoolRenderer(),
        IspRenderer(),
        CustomRenderer(),
    )
})


def get_renderer(mode: str) -> TemplateRenderer:
    renderer = RENDERERS.get(mode)
    if renderer is None:
        logger.warning("Unknown firewall mode %r, using %r", mode, DEFAULT_FIREWALL_MODE)
        return RENDERERS[DEFAULT_FIREWALL_MODE]
    return renderer


def generate_document(config: BlockPageConfig) -> str:
    """
    Render the block page for ``config``.

    Pure: no clock, no randomness, no I/O. Identical configs produce
    identical documents.
    """
    renderer = get_renderer(config.firewall_mode)
    theme = resolve_theme(config.theme)
    logger.debug("Rendering %r with theme %r", renderer, theme.id)
    return renderer.render(config, theme)


class HtmlRenderer:
    """
    Object-style entry point; renders BlockPageConfig into HTML.

    Accepts a plain mapping as well (camelCase or snake_case keys).
    """

    def render(self, config) -> str:
        if not isinstance(config, BlockPageConfig):
            config = BlockPageConfig.from_mapping(config)
        return generate_document(config)


__all__ = [
    'RENDERERS',
    'get_renderer',
    'generate_document',
    'HtmlRenderer',
    'TemplateRenderer',
]
