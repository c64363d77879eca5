# blockforge/renderers/html/templates/school.py
"""
School network block page.

Fixed cheerful palette: the selected theme is ignored on purpose so the
page reads the same for every pupil.
"""

from __future__ import annotations

from typing import Tuple

from ....config.models import BlockPageConfig
from ....core.themes import ThemeConfig
from ..layout import render_html_document
from ..sections import (
    TECHNICAL_DETAILS_TITLE,
    core_info_rows,
    render_alternatives,
    render_contact_lines,
    render_disclaimer,
    render_request_access,
    render_rows,
    technical_rows,
)
from ..styles import RESET_CSS, disclaimer_css, join_css, request_button_css
from ..utils import esc
from .base import TemplateRenderer, org_or


SCHOOL_LABELS = {
    "url": "Website:",
    "timestamp": "Time:",
    "ip": "Your Computer:",
    "user": "Your Name:",
}

ALTERNATIVES: Tuple[str, ...] = (
    "Educational games on approved sites",
    "School library online resources",
    "Teacher-recommended websites",
    "Research databases",
)

CSS = join_css(
    RESET_CSS,
    """        body {
            font-family: 'Comic Sans MS', 'Chalkboard SE', sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: #333;
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            padding: 20px;
        }
        .card {
            background: white;
            border-radius: 20px;
            padding: 40px;
            max-width: 600px;
            width: 100%;
            box-shadow: 0 20px 60px rgba(0,0,0,0.3);
            text-align: center;
        }
        .mascot {
            width: 100px;
            height: 100px;
            background: #ffd700;
            border-radius: 50%;
            margin: 0 auto 20px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 50px;
        }
        .title {
            font-size: 28px;
            color: #5a67d8;
            margin-bottom: 10px;
        }
        .subtitle {
            font-size: 18px;
            color: #718096;
            margin-bottom: 30px;
        }
        .message-box {
            background: #e6fffa;
            border-radius: 12px;
            padding: 20px;
            margin-bottom: 25px;
            text-align: left;
        }
        .message-title {
            font-weight: bold;
            color: #234e52;
            margin-bottom: 10px;
        }
        .message-text {
            color: #285e61;
            font-size: 14px;
            line-height: 1.6;
        }
        .details, .technical-details {
            background: #f7fafc;
            border-radius: 12px;
            padding: 20px;
            text-align: left;
            margin-bottom: 25px;
        }
        .technical-details summary {
            font-weight: bold;
            color: #5a67d8;
            cursor: pointer;
            margin-bottom: 10px;
        }
        .detail-row {
            display: flex;
            justify-content: space-between;
            gap: 10px;
            padding: 8px 0;
            border-bottom: 1px dashed #e2e8f0;
        }
        .detail-row:last-child {
            border-bottom: none;
        }
        .detail-label {
            color: #718096;
            font-size: 14px;
        }
        .detail-value {
            color: #2d3748;
            font-size: 14px;
            font-weight: 600;
            word-break: break-all;
            text-align: right;
        }
        .alternatives {
            background: #fef5e7;
            border-radius: 12px;
            padding: 20px;
            margin-bottom: 25px;
            text-align: left;
        }
        .alternatives-title {
            font-weight: bold;
            color: #c05621;
            margin-bottom: 10px;
        }
        .alternatives-list {
            list-style: none;
            color: #744210;
            font-size: 14px;
        }
        .alternatives-list li {
            padding: 5px 0;
            padding-left: 20px;
            position: relative;
        }
        .alternatives-list li:before {
            content: "\\2713";
            position: absolute;
            left: 0;
            color: #38a169;
        }
        .request-area {
            margin-bottom: 20px;
        }
        .contact {
            font-size: 13px;
            color: #718096;
        }
        .contact-line {
            margin-top: 6px;
        }
        .contact-line a {
            color: #5a67d8;
        }""",
    request_button_css(background="#5a67d8", radius="20px"),
    disclaimer_css(background="#fffaf0", border="#ed8936", text="#c05621", radius="12px"),
    """        @media (max-width: 480px) {
            .card { padding: 25px; }
            .title { font-size: 24px; }
        }""",
)


class SchoolRenderer(TemplateRenderer):
    mode = "school"
    title = "Website Blocked - School Network"

    def render(self, config: BlockPageConfig, theme: ThemeConfig) -> str:
        organization = org_or(config, "School Network")
        details_html = render_rows(core_info_rows(config, SCHOOL_LABELS), "detail", indent=12)
        alternatives_html = render_alternatives(ALTERNATIVES)

        request_html = ""
        if config.show_request_access:
            request_html = render_request_access(label="Ask for Access")

        technical_html = ""
        if config.show_technical_details:
            rows_html = render_rows(technical_rows(config), "detail", indent=12)
            technical_html = f"""        <details class="technical-details">
            <summary>{TECHNICAL_DETAILS_TITLE}</summary>
{rows_html}
        </details>"""

        support_html = render_contact_lines(config, tag="p", css_class="contact-line")

        disclaimer_html = ""
        if config.show_disclaimer:
            disclaimer_html = render_disclaimer(
                title="Training Simulation",
                text=(
                    "This is a practice page for learning about internet safety. "
                    "No real rule was broken."
                ),
            )

        body = f"""    <div class="card">
        <div class="mascot">&#128274;</div>
        <h1 class="title">Oops! This Site is Blocked</h1>
        <p class="subtitle">{esc(organization)} Protection</p>

        <div class="message-box">
            <div class="message-title">&#128218; Learning First!</div>
            <div class="message-text">
                This website has been blocked because it doesn't support our educational mission.
                We're here to help you learn and grow!
            </div>
        </div>

        <div class="details">
{details_html}
        </div>

{technical_html}

{alternatives_html}

        <div class="request-area">
{request_html}
        </div>

        <div class="contact">
            <p>Think this is a mistake? Talk to your teacher!</p>
{support_html}
        </div>

{disclaimer_html}
    </div>"""

        return render_html_document(
            lang=config.language,
            title=self.title,
            css=CSS,
            body=body,
        )
