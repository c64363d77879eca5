# blockforge/export/bundle.py
"""
Export adapter

Turns a config into files: the standalone HTML page, the camelCase JSON
config, or a zip bundle (index.html + README.txt). Rendering always goes
through generate_document(); this module only names, packs and writes.

write_* functions never raise: failures come back as ExportResult(ok=False)
carrying a BlockForgeError, and are logged.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union
import io
import logging
import re
import zipfile

from blockforge.config.models import BlockPageConfig
from blockforge.core.errors import BlockForgeError
from blockforge.renderers.html import generate_document
from blockforge.utils.formatting import parse_timestamp


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9._-]+")

# zip (DOS) timestamps cover 1980..2107
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
_ZIP_LAST = (2107, 12, 31, 23, 59, 58)

README_TEMPLATE = """# Firewall Block Page - {mode_upper} Mode

Generated: {generated_at}
Mode: {mode}
Category: {category}
Error Code: {error_code}

## Files
- index.html - The blocked page

## Usage
Open index.html in any web browser to view the blocked page.

## Disclaimer
This is a simulated page for training purposes only.
"""


@dataclass(frozen=True)
class ExportResult:
    ok: bool
    path: Optional[Path] = None
    error: Optional[BlockForgeError] = None


def _file_token(config: BlockPageConfig) -> str:
    token = _UNSAFE_FILENAME_RE.sub("-", config.error_code_label().strip()).strip(".-")
    return token or "page"


def html_filename(config: BlockPageConfig) -> str:
    return f"firewall-block-{_file_token(config)}.html"


def json_filename(config: BlockPageConfig) -> str:
    return f"firewall-config-{_file_token(config)}.json"


def bundle_filename(config: BlockPageConfig) -> str:
    return f"firewall-block-package-{_file_token(config)}.zip"


def export_json(config: BlockPageConfig) -> str:
    return config.to_json()


def build_readme(config: BlockPageConfig, generated_at: str) -> str:
    return README_TEMPLATE.format(
        mode_upper=config.firewall_mode.upper(),
        mode=config.firewall_mode,
        category=config.category_label(),
        error_code=config.error_code_label(),
        generated_at=generated_at,
    )


def _zip_date_time(generated_at: str):
    dt = parse_timestamp(generated_at)
    if dt is None or dt.year < 1980:
        return _ZIP_EPOCH
    if dt.year > 2107:
        return _ZIP_LAST
    return (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)


def build_bundle(config: BlockPageConfig, generated_at: str) -> bytes:
    """
    Zip archive with index.html and README.txt.

    Entry timestamps come from ``generated_at`` so equal inputs give equal
    bytes.
    """
    date_time = _zip_date_time(generated_at)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, content in (
            ("index.html", generate_document(config)),
            ("README.txt", build_readme(config, generated_at)),
        ):
            info = zipfile.ZipInfo(name, date_time=date_time)
            info.compress_type = zipfile.ZIP_DEFLATED
            zf.writestr(info, content.encode("utf-8"))
    return buffer.getvalue()


def _failed(target: Path, kind: str, message: str, cause: BaseException) -> ExportResult:
    logger.error("Failed to write %s export to %s", kind, target, exc_info=cause)
    return ExportResult(
        ok=False,
        path=target,
        error=BlockForgeError.export_failed(
            message,
            details={"path": str(target), "kind": kind},
            cause=cause,
        ),
    )


def _write(target: Path, build: Callable[[], Union[str, bytes]], kind: str) -> ExportResult:
    """Build the payload and write it; any failure comes back as ok=False."""
    try:
        payload = build()
    except Exception as e:
        return _failed(target, kind, f"Cannot build {kind} export: {e}", e)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(payload, bytes):
            target.write_bytes(payload)
        else:
            target.write_text(payload, encoding="utf-8")
    except OSError as e:
        return _failed(target, kind, f"Cannot write {kind} export: {target}", e)
    logger.info("Wrote %s export to %s", kind, target)
    return ExportResult(ok=True, path=target)


def write_html(config: BlockPageConfig, directory: PathLike, filename: Optional[str] = None) -> ExportResult:
    target = Path(directory) / (filename or html_filename(config))
    return _write(target, lambda: generate_document(config), "html")


def write_json(config: BlockPageConfig, directory: PathLike, filename: Optional[str] = None) -> ExportResult:
    target = Path(directory) / (filename or json_filename(config))
    return _write(target, lambda: export_json(config), "json")


def write_bundle(
    config: BlockPageConfig,
    directory: PathLike,
    generated_at: str,
    filename: Optional[str] = None,
) -> ExportResult:
    target = Path(directory) / (filename or bundle_filename(config))
    return _write(target, lambda: build_bundle(config, generated_at), "bundle")


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
