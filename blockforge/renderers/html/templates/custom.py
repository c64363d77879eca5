# blockforge/renderers/html/templates/custom.py
"""
Custom-branded block page.

The organization's colors replace the theme's primary/secondary/accent
when they are valid CSS colors; a logo image replaces the text header
when its source is an http(s) URL or a data:image URI.
"""

from __future__ import annotations

from ....config.models import BlockPageConfig, CustomColors
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
from ..styles import (
    RESET_CSS,
    disclaimer_css,
    join_css,
    request_button_css,
    technical_details_css,
    themed_body_css,
)
from ..utils import esc, mailto_href, safe_css_color, safe_image_src
from .base import TemplateRenderer, copyright_line, org_or


DEFAULT_BRAND = "Network Security"

CUSTOM_LABELS = {"ip": "Your IP:"}


def _css(theme: ThemeConfig, brand: CustomColors) -> str:
    c = theme.colors
    primary = safe_css_color(brand.primary, c.primary)
    secondary = safe_css_color(brand.secondary, c.secondary)
    accent = safe_css_color(brand.accent, c.accent)
    return join_css(
        RESET_CSS,
        themed_body_css(theme),
        f"""        .header {{
            background: {primary};
            padding: 30px 40px;
            text-align: center;
        }}
        .header h1 {{
            color: white;
            font-size: 24px;
        }}
        .logo {{
            max-width: 200px;
            max-height: 60px;
        }}
        .content {{
            padding: 50px 40px;
            max-width: 800px;
            margin: 0 auto;
            text-align: center;
        }}
        .icon {{
            width: 80px;
            height: 80px;
            background: {secondary};
            border-radius: 50%;
            margin: 0 auto 30px;
            display: flex;
            align-items: center;
            justify-content: center;
        }}
        .icon svg {{
            width: 40px;
            height: 40px;
            fill: white;
        }}
        .title {{
            font-size: 36px;
            font-weight: bold;
            color: {c.text};
            margin-bottom: 15px;
        }}
        .subtitle {{
            font-size: 18px;
            color: {c.text_muted};
            margin-bottom: 40px;
        }}
        .info-box {{
            background: {c.surface};
            border-radius: 12px;
            padding: 30px;
            margin-bottom: 30px;
            text-align: left;
        }}
        .info-row {{
            display: flex;
            padding: 12px 0;
            border-bottom: 1px solid {c.border};
        }}
        .info-row:last-child {{
            border-bottom: none;
        }}
        .info-label {{
            width: 150px;
            color: {c.text_muted};
            font-weight: 500;
        }}
        .info-value {{
            flex: 1;
            color: {c.text};
            font-family: monospace;
            word-break: break-all;
        }}
        .actions {{
            display: flex;
            gap: 15px;
            justify-content: center;
            flex-wrap: wrap;
            margin-top: 30px;
        }}
        .btn-secondary {{
            padding: 12px 28px;
            border-radius: 8px;
            font-size: 16px;
            font-weight: 600;
            text-decoration: none;
            background: transparent;
            color: {accent};
            border: 2px solid {accent};
        }}
        .footer {{
            background: {c.surface};
            border-top: 1px solid {c.border};
            padding: 30px 40px;
            text-align: center;
        }}
        .footer-text {{
            font-size: 14px;
            color: {c.text_muted};
        }}""",
        request_button_css(background=primary, radius="8px"),
        technical_details_css(theme),
        disclaimer_css(background="#fef3c7", border="#f59e0b", text="#92400e", radius="12px"),
        """        @media (max-width: 600px) {
            .content { padding: 30px 20px; }
            .title { font-size: 28px; }
            .info-row { flex-direction: column; }
            .info-label { width: auto; margin-bottom: 5px; }
        }""",
    )


class CustomRenderer(TemplateRenderer):
    mode = "custom"

    def render(self, config: BlockPageConfig, theme: ThemeConfig) -> str:
        organization = org_or(config, DEFAULT_BRAND)
        brand = config.custom_colors or CustomColors()

        logo_src = safe_image_src(config.custom_logo)
        if logo_src:
            header_html = f'        <img src="{logo_src}" alt="Logo" class="logo">'
        else:
            header_html = f"        <h1>{esc(organization)}</h1>"

        info_html = render_rows(core_info_rows(config, CUSTOM_LABELS), "flex", indent=12)

        request_html = ""
        if config.show_request_access:
            request_html = render_request_access(indent=12)

        support_html = ""
        support_href = mailto_href(config.admin_email)
        if support_href:
            support_html = f'            <a href="{support_href}" class="btn-secondary">Contact Support</a>'

        technical_html = ""
        if config.show_technical_details:
            rows_html = render_rows(technical_rows(config), "flex", indent=12)
            technical_html = f"""        <details class="technical-details" style="text-align: left;">
            <summary>{TECHNICAL_DETAILS_TITLE}</summary>
{rows_html}
        </details>"""

        disclaimer_html = ""
        if config.show_disclaimer:
            disclaimer_html = render_disclaimer(
                title="Training Simulation",
                text=(
                    "This is a simulated block page created for educational purposes. "
                    "No actual access restriction is in place."
                ),
            )

        help_html = render_contact_lines(config, tag="p", css_class="footer-text", indent=8)
        if help_html:
            help_html = f'        <p class="footer-text">Need help? Contact us:</p>\n{help_html}'

        body = f"""    <div class="header">
{header_html}
    </div>

    <div class="content">
        <div class="icon">
            <svg viewBox="0 0 24 24"><path d="M12 1L3 5v6c0 5.55 3.84 10.74 9 12 5.16-1.26 9-6.45 9-12V5l-9-4z"/></svg>
        </div>
        <h1 class="title">Access Blocked</h1>
        <p class="subtitle">This resource is not accessible from your current location</p>

        <div class="info-box">
{info_html}
        </div>

{technical_html}

        <div class="actions">
{request_html}
{support_html}
        </div>

{disclaimer_html}
    </div>

    <div class="footer">
{help_html}
        <p class="footer-text" style="margin-top: 10px;">{copyright_line(config, organization)}</p>
    </div>"""

        return render_html_document(
            lang=config.language,
            title=f"Access Blocked - {organization}",
            css=_css(theme, brand),
            body=body,
        )
