# blockforge/renderers/html/templates/base.py
"""
Template renderer contract: (BlockPageConfig, ThemeConfig) -> HTML document.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ....config.models import BlockPageConfig
from ....core.themes import ThemeConfig
from ....utils.formatting import timestamp_year
from ..utils import esc


class TemplateRenderer(ABC):
    """
    One implementation per firewall mode.

    Renderers are stateless and pure: same config and theme in, same bytes
    out. They never read the clock and never mutate the config.
    """

    mode: str = ""
    title: str = ""

    @abstractmethod
    def render(self, config: BlockPageConfig, theme: ThemeConfig) -> str:
        """Render a complete, self-contained HTML document."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mode={self.mode!r})"


def org_or(config: BlockPageConfig, default: str) -> str:
    """Organization name, or ``default`` when empty (raw text)."""
    return config.organization.strip() or default


def copyright_line(config: BlockPageConfig, owner: str) -> str:
    """Escaped copyright notice; the year comes from the config timestamp."""
    year: Optional[int] = timestamp_year(config.timestamp)
    if year is None:
        return f"&copy; {esc(owner)}. All rights reserved."
    return f"&copy; {year} {esc(owner)}. All rights reserved."
