# blockforge/renderers/html/templates/isp.py
"""
ISP / legal-notice block page: official reference banner, restriction
details table, legal explanation, support and legal contact cards.
"""

from __future__ import annotations

import re

from ....config.models import BlockPageConfig
from ....core.themes import ThemeConfig
from ....utils.formatting import format_timestamp
from ..layout import render_html_document
from ..sections import (
    TECHNICAL_DETAILS_TITLE,
    render_contact_lines,
    render_disclaimer,
    render_request_access,
    render_rows,
    technical_rows,
)
from ..styles import RESET_CSS, disclaimer_css, join_css, request_button_css, themed_body_css
from ..utils import esc
from .base import TemplateRenderer, copyright_line, org_or


DEFAULT_ISP_NAME = "Internet Service Provider"

FOOTER_LINKS = ("Terms of Service", "Privacy Policy", "Acceptable Use Policy", "Contact Us")

_WHITESPACE_RE = re.compile(r"\s+")


def legal_email(organization: str) -> str:
    """legal@<organization, lower-cased, whitespace removed>.com (raw text)."""
    domain = _WHITESPACE_RE.sub("", organization.lower()) or "isp"
    return f"legal@{domain}.com"


def _css(theme: ThemeConfig) -> str:
    c = theme.colors
    return join_css(
        RESET_CSS,
        themed_body_css(theme),
        f"""        .official-header {{
            background: {c.primary};
            color: white;
            padding: 15px 40px;
            font-size: 14px;
        }}
        .official-header-content {{
            max-width: 1000px;
            margin: 0 auto;
            display: flex;
            justify-content: space-between;
            align-items: center;
        }}
        .main-header {{
            background: white;
            border-bottom: 1px solid {c.border};
            padding: 30px 40px;
        }}
        .main-header-content {{
            max-width: 1000px;
            margin: 0 auto;
        }}
        .isp-logo {{
            font-size: 24px;
            font-weight: bold;
            color: {c.primary};
        }}
        .content {{
            padding: 40px;
            max-width: 1000px;
            margin: 0 auto;
        }}
        .notice-box {{
            background: #fef2f2;
            border: 1px solid #fecaca;
            border-radius: 4px;
            padding: 25px;
            margin-bottom: 30px;
        }}
        .notice-title {{
            font-size: 20px;
            font-weight: bold;
            color: #991b1b;
            margin-bottom: 15px;
            display: flex;
            align-items: center;
            gap: 10px;
        }}
        .notice-text {{
            color: #7f1d1d;
            font-size: 14px;
            line-height: 1.6;
        }}
        .details-section {{
            margin-bottom: 30px;
        }}
        .section-title {{
            font-size: 16px;
            font-weight: bold;
            color: {c.text};
            margin-bottom: 15px;
            padding-bottom: 10px;
            border-bottom: 2px solid {c.border};
        }}
        .details-table {{
            width: 100%;
            border-collapse: collapse;
        }}
        .details-table td {{
            padding: 12px 15px;
            border-bottom: 1px solid {c.border};
        }}
        .details-table td:first-child {{
            width: 200px;
            color: {c.text_muted};
            font-weight: 500;
        }}
        .details-table td:last-child {{
            font-family: monospace;
            color: {c.text};
            word-break: break-all;
        }}
        .legal-section {{
            background: {c.surface};
            border: 1px solid {c.border};
            border-radius: 4px;
            padding: 25px;
            margin-bottom: 30px;
        }}
        .legal-title {{
            font-size: 14px;
            font-weight: bold;
            color: {c.text_muted};
            margin-bottom: 15px;
            text-transform: uppercase;
        }}
        .legal-text {{
            font-size: 13px;
            color: {c.text_muted};
            line-height: 1.8;
        }}
        .appeal-section {{
            margin-bottom: 30px;
        }}
        .contact-section {{
            margin-top: 30px;
            padding-top: 30px;
            border-top: 1px solid {c.border};
        }}
        .contact-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
            gap: 20px;
        }}
        .contact-card {{
            background: {c.surface};
            border: 1px solid {c.border};
            border-radius: 4px;
            padding: 20px;
        }}
        .contact-card-title {{
            font-size: 14px;
            font-weight: bold;
            color: {c.text_muted};
            margin-bottom: 10px;
        }}
        .contact-card-info {{
            font-size: 14px;
            color: {c.text};
        }}
        .footer {{
            background: {c.surface};
            border-top: 1px solid {c.border};
            padding: 30px 40px;
            text-align: center;
        }}
        .footer-content {{
            max-width: 1000px;
            margin: 0 auto;
        }}
        .footer-links {{
            display: flex;
            justify-content: center;
            gap: 30px;
            margin-bottom: 20px;
            flex-wrap: wrap;
        }}
        .footer-links a {{
            color: {c.primary};
            text-decoration: none;
            font-size: 14px;
        }}
        .footer-links a:hover {{
            text-decoration: underline;
        }}
        .footer-copyright {{
            font-size: 12px;
            color: {c.text_muted};
        }}""",
        request_button_css(background=c.primary),
        disclaimer_css(background="#fffbeb", border="#f59e0b", text="#92400e", radius="4px"),
        """        @media (max-width: 600px) {
            .content { padding: 20px; }
            .official-header-content { flex-direction: column; gap: 10px; }
        }""",
    )


class IspRenderer(TemplateRenderer):
    mode = "isp"

    def render(self, config: BlockPageConfig, theme: ThemeConfig) -> str:
        organization = org_or(config, DEFAULT_ISP_NAME)
        error_code = esc(config.error_code_label())
        timestamp = esc(format_timestamp(config.timestamp, config.language))

        rows = [
            ("Requested URL:", esc(config.blocked_url)),
            ("Restriction Type:", esc(config.category_label())),
            ("Reference Number:", error_code),
            ("Date and Time:", timestamp),
            ("Your IP Address:", esc(config.ip_address)),
        ]
        if config.user_name.strip():
            rows.append(("Username:", esc(config.user_name)))
        details_html = render_rows(rows, "table")

        technical_html = ""
        if config.show_technical_details:
            rows_html = render_rows(technical_rows(config), "table")
            technical_html = f"""        <div class="details-section technical-details">
            <div class="section-title">{TECHNICAL_DETAILS_TITLE}</div>
            <table class="details-table">
{rows_html}
            </table>
        </div>"""

        request_html = ""
        if config.show_request_access:
            request_html = render_request_access(label="Submit an Appeal")

        support_html = render_contact_lines(config, tag="p", css_class="contact-line", indent=24)

        footer_links_html = "\n".join(
            f'                <a href="#">{esc(label)}</a>' for label in FOOTER_LINKS
        )

        disclaimer_html = ""
        if config.show_disclaimer:
            disclaimer_html = render_disclaimer(
                title="Training Simulation Notice",
                text=(
                    "This page is part of a cybersecurity training exercise. "
                    "No actual access restriction has been applied."
                ),
            )

        body = f"""    <div class="official-header">
        <div class="official-header-content">
            <span>Official Notice - Reference: {error_code}</span>
            <span>{timestamp}</span>
        </div>
    </div>

    <div class="main-header">
        <div class="main-header-content">
            <div class="isp-logo">{esc(organization)}</div>
        </div>
    </div>

    <div class="content">
        <div class="notice-box" role="alert">
            <div class="notice-title">
                <svg width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
                    <path d="M10.29 3.86L1.82 18a2 2 0 0 0 1.71 3h16.94a2 2 0 0 0 1.71-3L13.71 3.86a2 2 0 0 0-3.42 0z"/>
                    <line x1="12" y1="9" x2="12" y2="13"/>
                    <line x1="12" y1="17" x2="12.01" y2="17"/>
                </svg>
                Access to This Resource Has Been Restricted
            </div>
            <div class="notice-text">
                In compliance with legal requirements and our Terms of Service, access to the requested website
                has been restricted. This action may be due to a court order, regulatory requirement, or
                violation of acceptable use policies.
            </div>
        </div>

        <div class="details-section">
            <div class="section-title">Restriction Details</div>
            <table class="details-table">
{details_html}
            </table>
        </div>

{technical_html}

        <div class="legal-section">
            <div class="legal-title">Legal Information</div>
            <div class="legal-text">
                <p><strong>Why is this site blocked?</strong></p>
                <p style="margin-top: 10px;">
                    Internet service providers may be required to restrict access to certain websites in compliance
                    with local laws, court orders, or to protect network integrity and user safety.
                </p>
                <p style="margin-top: 15px;">
                    <strong>Your rights:</strong> If you believe this restriction has been applied in error,
                    you have the right to appeal this decision through the appropriate legal channels or
                    contact our support team for clarification.
                </p>
            </div>
        </div>

        <div class="appeal-section">
{request_html}
        </div>

        <div class="contact-section">
            <div class="section-title">Contact Information</div>
            <div class="contact-grid">
                <div class="contact-card">
                    <div class="contact-card-title">Customer Support</div>
                    <div class="contact-card-info">
{support_html}
                    </div>
                </div>
                <div class="contact-card">
                    <div class="contact-card-title">Legal Department</div>
                    <div class="contact-card-info">
                        <p>For appeals and legal inquiries</p>
                        <p>{esc(legal_email(config.organization.strip()))}</p>
                    </div>
                </div>
            </div>
        </div>

{disclaimer_html}
    </div>

    <div class="footer">
        <div class="footer-content">
            <div class="footer-links">
{footer_links_html}
            </div>
            <div class="footer-copyright">{copyright_line(config, organization)}</div>
        </div>
    </div>"""

        return render_html_document(
            lang=config.language,
            title=f"Access Restricted - {organization}",
            css=_css(theme),
            body=body,
        )
