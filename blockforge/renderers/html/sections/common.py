# blockforge/renderers/html/sections/common.py
"""
Common section renderers

Every template lays fields out differently (flex rows, a label/value
grid, a table, kid-friendly detail rows) but the *content* of each block
is decided here once, so escaping and the conditional-inclusion rules
cannot drift between templates.

Toggled sections return "" when off and a block whose lines stand on
their own when on; templates place them on a line of their own.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

from ....config.models import BlockPageConfig
from ....utils.formatting import format_timestamp
from ..utils import esc, esc_attr, mailto_href, or_na, safe_href


# (label, already-escaped value)
Row = Tuple[str, str]

DEFAULT_CORE_LABELS: Mapping[str, str] = {
    "url": "URL:",
    "category": "Category:",
    "error_code": "Error Code:",
    "timestamp": "Timestamp:",
    "ip": "Client IP:",
    "user": "User:",
}

TECHNICAL_DETAILS_TITLE = "Technical Details"


def core_info_rows(config: BlockPageConfig, labels: Optional[Mapping[str, str]] = None) -> List[Row]:
    """Blocked URL, category, error code, timestamp, client IP, optional user."""
    names = {**DEFAULT_CORE_LABELS, **(labels or {})}
    rows: List[Row] = [
        (names["url"], esc(config.blocked_url)),
        (names["category"], esc(config.category_label())),
        (names["error_code"], esc(config.error_code_label())),
        (names["timestamp"], esc(format_timestamp(config.timestamp, config.language))),
        (names["ip"], esc(config.ip_address)),
    ]
    if config.user_name.strip():
        rows.append((names["user"], esc(config.user_name)))
    return rows


def technical_rows(config: BlockPageConfig) -> List[Row]:
    """Every TechnicalDetails field, verbatim; action taken upper-cased."""
    details = config.technical_details
    return [
        ("Policy ID:", or_na(details.policy_id)),
        ("Serial Number:", or_na(details.firewall_serial)),
        ("Threat ID:", or_na(details.threat_id)),
        ("Web Filter Profile:", or_na(details.web_filter_profile)),
        ("Security Profile:", or_na(details.security_profile)),
        ("SSL Inspection:", or_na(details.ssl_inspection)),
        ("Action Taken:", or_na(details.action_taken.upper())),
        ("Source IP:", or_na(details.source_ip)),
        ("Destination IP:", or_na(details.destination_ip)),
        ("Destination Port:", or_na(details.destination_port)),
        ("Protocol:", or_na(details.protocol)),
        ("User Agent:", or_na(details.user_agent)),
        ("Session ID:", or_na(details.session_id)),
        ("Referrer:", or_na(details.referrer)),
    ]


def render_rows(rows: Sequence[Row], style: str, indent: int = 16) -> str:
    """
    Lay out label/value rows.

    flex   -> <div class="info-row"> with label/value spans
    grid   -> bare label/value spans for a two-column CSS grid
    table  -> <tr><td>label</td><td>value</td></tr>
    detail -> <div class="detail-row"> (school layout)
    """
    pad = " " * indent
    lines: List[str] = []
    for label, value in rows:
        if style == "grid":
            lines.append(f'{pad}<span class="info-label">{esc(label)}</span>')
            lines.append(f'{pad}<span class="info-value">{value}</span>')
        elif style == "table":
            lines.append(f"{pad}<tr><td>{esc(label)}</td><td>{value}</td></tr>")
        elif style == "detail":
            lines.append(f'{pad}<div class="detail-row">')
            lines.append(f'{pad}    <span class="detail-label">{esc(label)}</span>')
            lines.append(f'{pad}    <span class="detail-value">{value}</span>')
            lines.append(f"{pad}</div>")
        else:
            lines.append(f'{pad}<div class="info-row">')
            lines.append(f'{pad}    <span class="info-label">{esc(label)}</span>')
            lines.append(f'{pad}    <span class="info-value">{value}</span>')
            lines.append(f"{pad}</div>")
    return "\n".join(lines)


def render_request_access(*, label: str = "Request Access", css_class: str = "request-access-btn", indent: int = 8) -> str:
    """
    Inert request-access control.

    No script: the live editor intercepts clicks via data-action, the
    exported page does nothing.
    """
    pad = " " * indent
    return (
        f'{pad}<button type="button" class="{esc_attr(css_class)}" data-action="request-access">'
        f"{esc(label)}</button>"
    )


def contact_items(config: BlockPageConfig) -> List[Tuple[str, str]]:
    """
    (label, markup) for each non-empty contact field, in email/phone/portal order.

    The portal is a link only when its scheme is safe.
    """
    items: List[Tuple[str, str]] = []
    if config.admin_email.strip():
        href = mailto_href(config.admin_email)
        items.append(("Email", f'<a href="{href}">{esc(config.admin_email)}</a>'))
    if config.admin_phone.strip():
        items.append(("Phone", esc(config.admin_phone)))
    if config.admin_portal.strip():
        href = safe_href(config.admin_portal, schemes=("http", "https"))
        if href:
            items.append(("Portal", f'<a href="{href}">{esc(config.admin_portal)}</a>'))
        else:
            items.append(("Portal", esc(config.admin_portal)))
    return items


def render_contact_lines(config: BlockPageConfig, *, tag: str = "div", css_class: str = "contact-item", indent: int = 12) -> str:
    pad = " " * indent
    return "\n".join(
        f'{pad}<{tag} class="{css_class}">{label}: {markup}</{tag}>'
        for label, markup in contact_items(config)
    )


def render_disclaimer(*, title: str, text: str, indent: int = 8) -> str:
    """Training notice box; ``text`` may contain trusted inline markup."""
    pad = " " * indent
    return f"""{pad}<div class="disclaimer" role="note">
{pad}    <div class="disclaimer-title">{esc(title)}</div>
{pad}    <div class="disclaimer-text">{text}</div>
{pad}</div>"""

def render_alternatives(items: Sequence[str], *, title: str = "Try these instead:", indent: int = 8) -> str:
    """Suggestion list shown instead of the blocked site."""
    pad = " " * indent
    lines = [
        f'{pad}<div class="alternatives">',
        f'{pad}    <div class="alternatives-title">{esc(title)}</div>',
        f'{pad}    <ul class="alternatives-list">',
    ]
    lines.extend(f"{pad}        <li>{esc(item)}</li>" for item in items)
    lines.append(f"{pad}    </ul>")
    lines.append(f"{pad}</div>")
    return "\n".join(lines)
