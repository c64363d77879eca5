# blockforge/renderers/html/templates/__init__.py
"""
Block page templates, one per firewall mode
"""

from .base import TemplateRenderer, copyright_line, org_or
from .vendor import VendorRenderer, BLOCK_TITLES, block_titles
from .corporate import CorporateRenderer
from .school import SchoolRenderer
from .isp import IspRenderer, legal_email
from .custom import CustomRenderer

__all__ = [
    'TemplateRenderer',
    'copyright_line',
    'org_or',
    'VendorRenderer',
    'BLOCK_TITLES',
    'block_titles',
    'CorporateRenderer',
    'SchoolRenderer',
    'IspRenderer',
    'legal_email',
    'CustomRenderer',
]
