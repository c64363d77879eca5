# blockforge/renderers/html/templates/vendor.py
"""
Vendor-style (FortiGate-like) block page.

Fixed decorative header graphic; the block type picks the title/subtitle
pair, falling back to the intrusion-prevention wording.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from ....config.models import BlockPageConfig
from ....core.themes import ThemeConfig
from ....core.vocab import DEFAULT_BLOCK_TYPE
from ..layout import render_html_document
from ..sections import (
    TECHNICAL_DETAILS_TITLE,
    core_info_rows,
    render_contact_lines,
    render_disclaimer,
    render_request_access,
    render_rows,
    technical_rows,
)
from ..styles import (
    RESET_CSS,
    disclaimer_css,
    join_css,
    request_button_css,
    technical_details_css,
    themed_body_css,
)
from ..utils import esc
from .base import TemplateRenderer


BLOCK_TITLES: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "intrusion-prevention": ("FortiGuard Intrusion Prevention", "Access Blocked"),
    "web-filter": ("FortiGuard Web Filtering", "Access Restricted"),
    "application-control": ("FortiGate Application Control", "Application Blocked"),
    "dns-filter": ("FortiGuard DNS Filtering", "DNS Request Blocked"),
})

_DOTS = "".join('<span class="dot"></span>' for _ in range(24))


def block_titles(block_type: str) -> Tuple[str, str]:
    return BLOCK_TITLES.get(block_type) or BLOCK_TITLES[DEFAULT_BLOCK_TYPE]


def _css(theme: ThemeConfig) -> str:
    c = theme.colors
    return join_css(
        RESET_CSS,
        themed_body_css(theme, extra="\n            line-height: 1.6;"),
        f"""        .header {{
            background: {c.background};
            border-bottom: 3px solid {c.primary};
        }}
        .logo-container {{
            padding: 20px 40px;
        }}
        .logo {{
            display: flex;
            align-items: center;
            gap: 2px;
        }}
        .logo-f, .logo-text {{
            font-size: 28px;
            font-weight: bold;
            color: {c.primary};
            letter-spacing: 2px;
        }}
        .logo-bars {{
            display: flex;
            gap: 2px;
            margin: 0 2px;
        }}
        .logo-bar {{
            width: 4px;
            height: 20px;
            background: {c.primary};
        }}
        .geometric-header {{
            position: relative;
            height: {theme.header.height};
            overflow: hidden;
            background: {theme.header.gradient};
        }}
        .geo-bar {{
            position: absolute;
        }}
        .geo-red-left {{ left: 0; top: 60px; width: 80px; height: 12px; background: {c.primary}; }}
        .geo-teal {{ left: 120px; top: 30px; width: 40px; height: 80px; background: {c.secondary}; }}
        .geo-dark {{ left: 170px; top: 0; width: 20px; height: 120px; background: #4a4a4a; }}
        .geo-gray {{ left: 200px; top: 0; width: 35px; height: 70px; background: #b8b8b8; }}
        .geo-red-right {{ right: 50px; top: 45px; width: 70px; height: 15px; background: {c.primary}; }}
        .geo-blue {{ right: 0; top: 60px; width: 30px; height: 50px; background: {c.accent}; }}
        .dots {{
            position: absolute;
            right: 80px;
            top: 70px;
            width: 100px;
            height: 50px;
        }}
        .dot {{
            width: 4px;
            height: 4px;
            background: #999;
            border-radius: 50%;
            display: inline-block;
            margin: 3px;
            opacity: 0.4;
        }}
        .content {{
            padding: 40px;
            max-width: 900px;
            margin: 0 auto;
        }}
        .title {{
            font-size: {theme.font.size.title};
            font-weight: bold;
            color: {c.text};
            margin-bottom: 8px;
        }}
        .subtitle {{
            font-size: {theme.font.size.subtitle};
            font-weight: bold;
            color: {c.text};
            margin-bottom: 30px;
        }}
        .section-title {{
            font-size: 20px;
            font-weight: bold;
            color: {c.text_muted};
            margin-bottom: 15px;
        }}
        .description {{
            font-size: {theme.font.size.body};
            color: {c.text_muted};
            margin-bottom: 25px;
        }}
        .info-table {{
            margin-bottom: 25px;
        }}
        .info-row {{
            display: flex;
            margin-bottom: 10px;
            flex-wrap: wrap;
        }}
        .info-label {{
            width: 160px;
            color: {c.text_muted};
            font-size: 15px;
            flex-shrink: 0;
        }}
        .info-value {{
            color: {c.text};
            font-size: 15px;
            font-family: monospace;
            word-break: break-all;
        }}
        .re-eval {{
            font-size: 15px;
            color: {c.text_muted};
            margin-bottom: 30px;
        }}
        .re-eval a {{
            color: #0000ee;
            text-decoration: underline;
        }}
        .details-box {{
            background: {c.surface};
            border: 1px solid {c.border};
            border-radius: 4px;
            padding: 20px;
            margin-top: 30px;
        }}
        .details-title {{
            font-size: 14px;
            font-weight: bold;
            color: {c.text_muted};
            margin-bottom: 15px;
            text-transform: uppercase;
            letter-spacing: 1px;
        }}
        .contact-info {{
            margin-top: 20px;
            padding-top: 20px;
            border-top: 1px solid {c.border};
        }}
        .contact-title {{
            font-size: 14px;
            font-weight: bold;
            color: {c.text_muted};
            margin-bottom: 10px;
        }}
        .contact-item {{
            font-size: {theme.font.size.small};
            color: {c.text_muted};
            margin-bottom: 5px;
        }}""",
        request_button_css(background=c.primary),
        technical_details_css(theme),
        disclaimer_css(background="#fff3cd", border="#ffc107", text="#856404"),
        """        @media (max-width: 600px) {
            .content { padding: 20px; }
            .title, .subtitle { font-size: 24px; }
            .info-row { flex-direction: column; }
            .info-label { width: auto; margin-bottom: 5px; }
        }""",
    )


class VendorRenderer(TemplateRenderer):
    mode = "fortinet"

    def render(self, config: BlockPageConfig, theme: ThemeConfig) -> str:
        title, subtitle = block_titles(config.block_type)

        info_rows = core_info_rows(config)
        info_rows.append(("Firewall:", esc(config.firewall_name)))
        info_html = render_rows(info_rows, "flex")
        connection_html = render_rows(
            [
                ("Organization:", esc(config.organization.strip() or "N/A")),
                ("Policy Applied:", esc(config.technical_details.web_filter_profile or "N/A")),
            ],
            "flex",
            indent=12,
        )
        contact_html = render_contact_lines(config)

        request_html = ""
        if config.show_request_access:
            request_html = render_request_access()

        technical_html = ""
        if config.show_technical_details:
            rows_html = render_rows(technical_rows(config), "flex")
            technical_html = f"""        <details class="technical-details">
            <summary>{TECHNICAL_DETAILS_TITLE}</summary>
            <div class="info-table" style="margin-top: 15px;">
{rows_html}
            </div>
        </details>"""

        disclaimer_html = ""
        if config.show_disclaimer:
            disclaimer_html = render_disclaimer(
                title="Training Simulation Notice",
                text=(
                    "<strong>This is a simulated page for training purposes only.</strong> "
                    "This page was generated as part of a cybersecurity awareness training exercise. "
                    "No actual security policy violation has occurred."
                ),
            )

        body = f"""    <div class="header">
        <div class="logo-container">
            <div class="logo">
                <span class="logo-f">F</span>
                <div class="logo-bars">
                    <div class="logo-bar"></div>
                    <div class="logo-bar"></div>
                    <div class="logo-bar"></div>
                </div>
                <span class="logo-text">RTINET</span>
            </div>
        </div>
        <div class="geometric-header">
            <div class="geo-bar geo-red-left"></div>
            <div class="geo-bar geo-teal"></div>
            <div class="geo-bar geo-dark"></div>
            <div class="geo-bar geo-gray"></div>
            <div class="geo-bar geo-red-right"></div>
            <div class="geo-bar geo-blue"></div>
            <div class="dots">{_DOTS}</div>
        </div>
    </div>

    <div class="content">
        <h1 class="title">{esc(title)}</h1>
        <h2 class="subtitle">- {esc(subtitle)}</h2>

        <h3 class="section-title">Web Page Blocked</h3>

        <p class="description">
            You have tried to access a web page that is in violation of your Internet usage policy.
        </p>

        <div class="info-table">
{info_html}
        </div>

        <p class="re-eval">
            To have the rating of this web page re-evaluated <a href="#">please click here</a>.
        </p>

{request_html}

{technical_html}

        <div class="details-box">
            <div class="details-title">Connection Details</div>
{connection_html}
        </div>

        <div class="contact-info">
            <div class="contact-title">Network Administrator Contact</div>
{contact_html}
        </div>

{disclaimer_html}
    </div>"""

        return render_html_document(
            lang=config.language,
            title=f"{title} - {subtitle}",
            css=_css(theme),
            body=body,
        )
