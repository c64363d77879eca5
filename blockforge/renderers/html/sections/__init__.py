# blockforge/renderers/html/sections/__init__.py
"""
Section renderers for block pages
"""

from .common import (
    Row,
    TECHNICAL_DETAILS_TITLE,
    core_info_rows,
    technical_rows,
    render_rows,
    render_request_access,
    contact_items,
    render_contact_lines,
    render_disclaimer,
    render_alternatives,
)

__all__ = [
    'Row',
    'TECHNICAL_DETAILS_TITLE',
    'core_info_rows',
    'technical_rows',
    'render_rows',
    'render_request_access',
    'contact_items',
    'render_contact_lines',
    'render_disclaimer',
    'render_alternatives',
]
