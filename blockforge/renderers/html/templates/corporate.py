# blockforge/renderers/html/templates/corporate.py
"""
Generic corporate firewall block page: organization name in a branded
header bar, red alert callout, label/value grid.
"""

from __future__ import annotations

from ....config.models import BlockPageConfig
from ....core.themes import ThemeConfig
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
from ..styles import RESET_CSS, disclaimer_css, join_css, themed_body_css
from ..utils import esc, mailto_href
from .base import TemplateRenderer, org_or


CORPORATE_LABELS = {
    "url": "Blocked URL:",
    "ip": "Your IP:",
    "user": "Username:",
}


def _css(theme: ThemeConfig) -> str:
    c = theme.colors
    return join_css(
        RESET_CSS,
        themed_body_css(theme, extra="\n            display: flex;\n            flex-direction: column;"),
        f"""        .header {{
            background: {c.primary};
            padding: 20px 40px;
            color: white;
        }}
        .header-content {{
            max-width: 1000px;
            margin: 0 auto;
            display: flex;
            align-items: center;
            gap: 15px;
        }}
        .shield-icon {{
            width: 40px;
            height: 40px;
            background: white;
            border-radius: 50%;
            display: flex;
            align-items: center;
            justify-content: center;
        }}
        .shield-icon svg {{
            width: 24px;
            height: 24px;
            fill: {c.primary};
        }}
        .header-title {{
            font-size: 20px;
            font-weight: bold;
        }}
        .header-subtitle {{
            font-size: 14px;
            opacity: 0.9;
        }}
        .content {{
            flex: 1;
            padding: 40px;
            max-width: 1000px;
            margin: 0 auto;
            width: 100%;
        }}
        .alert-box {{
            background: #fee2e2;
            border-left: 4px solid {c.error};
            padding: 20px;
            margin-bottom: 30px;
            border-radius: 0 4px 4px 0;
        }}
        .alert-title {{
            color: {c.error};
            font-size: 18px;
            font-weight: bold;
            margin-bottom: 10px;
            display: flex;
            align-items: center;
            gap: 10px;
        }}
        .alert-text {{
            color: #7f1d1d;
            font-size: 14px;
        }}
        .main-title {{
            font-size: 28px;
            font-weight: bold;
            color: {c.text};
            margin-bottom: 20px;
        }}
        .info-section {{
            background: {c.surface};
            border: 1px solid {c.border};
            border-radius: 8px;
            padding: 25px;
            margin-bottom: 20px;
        }}
        .info-section-title {{
            font-size: 16px;
            font-weight: bold;
            color: {c.text_muted};
            margin-bottom: 15px;
            text-transform: uppercase;
            letter-spacing: 0.5px;
        }}
        .info-grid {{
            display: grid;
            grid-template-columns: 150px 1fr;
            gap: 12px 20px;
        }}
        .info-label {{
            color: {c.text_muted};
            font-size: 14px;
        }}
        .info-value {{
            color: {c.text};
            font-size: 14px;
            font-family: monospace;
            word-break: break-all;
        }}
        .action-section {{
            margin-top: 30px;
            padding-top: 30px;
            border-top: 1px solid {c.border};
        }}
        .action-title {{
            font-size: 16px;
            font-weight: bold;
            margin-bottom: 15px;
        }}
        .action-buttons {{
            display: flex;
            gap: 15px;
            flex-wrap: wrap;
        }}
        .btn {{
            padding: 12px 24px;
            border-radius: 6px;
            font-size: 14px;
            font-weight: 600;
            cursor: pointer;
            text-decoration: none;
            display: inline-flex;
            align-items: center;
            gap: 8px;
            border: none;
        }}
        .btn-primary {{
            background: {c.primary};
            color: white;
        }}
        .btn-secondary {{
            background: {c.surface};
            color: {c.text};
            border: 1px solid {c.border};
        }}
        .contact-list {{
            margin-top: 20px;
            font-size: {theme.font.size.small};
            color: {c.text_muted};
        }}
        .contact-item {{
            margin-bottom: 5px;
        }}
        .footer {{
            background: {c.surface};
            border-top: 1px solid {c.border};
            padding: 20px 40px;
            text-align: center;
            font-size: 12px;
            color: {c.text_muted};
        }}""",
        disclaimer_css(background="#fef3c7", border="#f59e0b", text="#92400e"),
        """        @media (max-width: 600px) {
            .content { padding: 20px; }
            .info-grid { grid-template-columns: 1fr; }
        }""",
    )


class CorporateRenderer(TemplateRenderer):
    mode = "corporate"
    title = "Access Denied - Corporate Security Policy"

    def render(self, config: BlockPageConfig, theme: ThemeConfig) -> str:
        organization = org_or(config, "Corporate Security")
        info_html = render_rows(core_info_rows(config, CORPORATE_LABELS), "grid")
        contact_html = render_contact_lines(config, indent=16)

        technical_html = ""
        if config.show_technical_details:
            rows_html = render_rows(technical_rows(config), "grid")
            technical_html = f"""        <div class="info-section technical-details">
            <div class="info-section-title">{TECHNICAL_DETAILS_TITLE}</div>
            <div class="info-grid">
{rows_html}
            </div>
        </div>"""

        request_html = ""
        if config.show_request_access:
            request_html = render_request_access(label="Request Exception", css_class="btn btn-primary", indent=16)

        support_html = ""
        support_href = mailto_href(config.admin_email)
        if support_href:
            support_html = f'                <a href="{support_href}" class="btn btn-secondary">Contact IT Support</a>'

        disclaimer_html = ""
        if config.show_disclaimer:
            disclaimer_html = render_disclaimer(
                title="Training Simulation",
                text=(
                    "This is a simulated page for training purposes only. "
                    "No actual security policy violation has occurred."
                ),
            )

        footer_support = ""
        if config.admin_email.strip():
            footer_support = f'        <p style="margin-top: 5px;">Support: {esc(config.admin_email)}</p>'

        body = f"""    <div class="header">
        <div class="header-content">
            <div class="shield-icon">
                <svg viewBox="0 0 24 24"><path d="M12 1L3 5v6c0 5.55 3.84 10.74 9 12 5.16-1.26 9-6.45 9-12V5l-9-4z"/></svg>
            </div>
            <div>
                <div class="header-title">{esc(organization)}</div>
                <div class="header-subtitle">Network Protection System</div>
            </div>
        </div>
    </div>

    <div class="content">
        <div class="alert-box" role="alert">
            <div class="alert-title">
                <svg width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
                    <circle cx="12" cy="12" r="10"/>
                    <line x1="12" y1="8" x2="12" y2="12"/>
                    <line x1="12" y1="16" x2="12.01" y2="16"/>
                </svg>
                Access Denied - Security Policy Violation
            </div>
            <div class="alert-text">
                Your request to access this resource has been blocked in accordance with company security policies.
            </div>
        </div>

        <h1 class="main-title">Request Blocked</h1>

        <div class="info-section">
            <div class="info-section-title">Request Details</div>
            <div class="info-grid">
{info_html}
            </div>
        </div>

{technical_html}

        <div class="action-section">
            <div class="action-title">What can you do?</div>
            <div class="action-buttons">
{request_html}
{support_html}
            </div>
            <div class="contact-list">
{contact_html}
            </div>
        </div>

{disclaimer_html}
    </div>

    <div class="footer">
        <p>If you believe this is an error, please contact your IT department.</p>
{footer_support}
    </div>"""

        return render_html_document(
            lang=config.language,
            title=self.title,
            css=_css(theme),
            body=body,
        )
