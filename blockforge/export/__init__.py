# blockforge/export/__init__.py
"""
Export block pages as HTML, JSON or a zip bundle
"""

from .bundle import (
    ExportResult,
    html_filename,
    json_filename,
    bundle_filename,
    export_json,
    build_readme,
    build_bundle,
    write_html,
    write_json,
    write_bundle,
)

__all__ = [
    "ExportResult",
    "html_filename",
    "json_filename",
    "bundle_filename",
    "export_json",
    "build_readme",
    "build_bundle",
    "write_html",
    "write_json",
    "write_bundle",
]
