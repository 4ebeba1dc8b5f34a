"""HTML shell for the k6 report: styles, header, tab bar, footer and script.

The section bodies are produced by ``sections.py``; this module only lays
them out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .constants import (
    FONT_AWESOME_CDN_URL,
    HEADER_GRADIENT_FAIL,
    HEADER_GRADIENT_PASS,
    K6_DOCS_URL,
    REPORT_HEADING,
    STATUS_FAILED_LABEL,
    STATUS_PASSED_LABEL,
)
from .formatting import escape_html


@dataclass
class ReportSection:
    """One tab of the report.

    Attributes:
        section_id: DOM id of the panel, also used by the tab button
        label: Tab button text
        icon: Font Awesome icon class for the tab button
        body: Already escaped HTML fragment shown in the panel
    """
    section_id: str
    label: str
    icon: str
    body: str


_BASE_CSS = """
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: #333;
            line-height: 1.6;
            padding: 20px;
            min-height: 100vh;
        }

        .container {
            max-width: 1400px;
            margin: 0 auto;
            background: white;
            border-radius: 20px;
            box-shadow: 0 20px 60px rgba(0, 0, 0, 0.3);
            overflow: hidden;
        }

        /* ---- Header ---- */
        .header {
            color: white;
            padding: 40px;
            position: relative;
            overflow: hidden;
        }

        .header::before {
            content: '';
            position: absolute;
            top: -50%;
            right: -50%;
            width: 200%;
            height: 200%;
            background: radial-gradient(circle, rgba(255,255,255,0.1) 0%, transparent 70%);
            animation: pulse 15s ease-in-out infinite;
        }

        @keyframes pulse {
            0%, 100% { transform: scale(1); opacity: 0.5; }
            50% { transform: scale(1.1); opacity: 0.8; }
        }

        .header-content {
            position: relative;
            z-index: 10;
        }

        .header h1 {
            font-size: 2.5em;
            margin-bottom: 10px;
            font-weight: 300;
            display: flex;
            align-items: center;
            gap: 15px;
        }

        .k6-logo {
            width: 60px;
            height: 60px;
            background: rgba(255, 255, 255, 0.2);
            border-radius: 12px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 2em;
        }

        .test-status {
            display: inline-block;
            padding: 10px 25px;
            border-radius: 50px;
            font-size: 0.9em;
            font-weight: 600;
            margin-top: 15px;
            background: rgba(255, 255, 255, 0.3);
            backdrop-filter: blur(10px);
        }

        .header-subtitle {
            font-size: 1.1em;
            opacity: 0.85;
            margin: 15px 0 10px 0;
            font-family: 'Courier New', monospace;
            background: rgba(255, 255, 255, 0.2);
            padding: 10px 20px;
            border-radius: 8px;
            display: inline-block;
        }

        .http-method-badge {
            display: inline-block;
            padding: 5px 15px;
            border-radius: 6px;
            font-weight: 700;
            font-size: 0.9em;
            margin-right: 10px;
            font-family: 'Courier New', monospace;
            letter-spacing: 1px;
            background: rgba(0, 0, 0, 0.25);
            color: white;
        }

        .method-GET { background: #28a745; color: white; }
        .method-POST { background: #007bff; color: white; }
        .method-PUT { background: #ffc107; color: #000; }
        .method-DELETE { background: #dc3545; color: white; }
        .method-PATCH { background: #17a2b8; color: white; }

        /* ---- Stats grid ---- */
        .stats-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(280px, 1fr));
            gap: 25px;
            padding: 40px;
            background: #f8f9fa;
        }

        .stat-card {
            background: white;
            border-radius: 15px;
            padding: 30px;
            box-shadow: 0 10px 30px rgba(0, 0, 0, 0.1);
            transition: all 0.3s ease;
            position: relative;
            overflow: hidden;
        }

        .stat-card::before {
            content: '';
            position: absolute;
            top: 0;
            left: 0;
            width: 100%;
            height: 4px;
            background: linear-gradient(90deg, #667eea 0%, #764ba2 100%);
        }

        .stat-card:hover {
            transform: translateY(-5px);
            box-shadow: 0 15px 40px rgba(0, 0, 0, 0.15);
        }

        .stat-card.success::before { background: linear-gradient(90deg, #11998e 0%, #38ef7d 100%); }
        .stat-card.error::before { background: linear-gradient(90deg, #eb3349 0%, #f45c43 100%); }
        .stat-card.warning::before { background: linear-gradient(90deg, #f2994a 0%, #f2c94c 100%); }

        .stat-icon {
            font-size: 3em;
            opacity: 0.1;
            position: absolute;
            right: 20px;
            top: 50%;
            transform: translateY(-50%);
        }

        .stat-label {
            font-size: 0.85em;
            color: #6c757d;
            text-transform: uppercase;
            letter-spacing: 1px;
            margin-bottom: 10px;
            font-weight: 600;
        }

        .stat-value {
            font-size: 2.5em;
            font-weight: 700;
            color: #2c3e50;
            position: relative;
            z-index: 10;
        }

        .stat-subtext {
            font-size: 0.9em;
            color: #95a5a6;
            margin-top: 8px;
        }

        /* ---- Tabs ---- */
        .tabs-container {
            padding: 40px;
        }

        .tabs {
            display: flex;
            gap: 10px;
            border-bottom: 2px solid #e9ecef;
            margin-bottom: 30px;
            flex-wrap: wrap;
        }

        .tab-button {
            padding: 15px 30px;
            background: none;
            border: none;
            cursor: pointer;
            font-size: 1em;
            font-weight: 600;
            color: #6c757d;
            border-bottom: 3px solid transparent;
            transition: all 0.3s ease;
            display: flex;
            align-items: center;
            gap: 10px;
        }

        .tab-button:hover {
            color: #667eea;
            background: rgba(102, 126, 234, 0.1);
        }

        .tab-button.active {
            color: #667eea;
            border-bottom-color: #667eea;
        }

        .tab-content {
            display: none;
            animation: fadeIn 0.5s ease;
        }

        .tab-content.active {
            display: block;
        }

        @keyframes fadeIn {
            from { opacity: 0; transform: translateY(10px); }
            to { opacity: 1; transform: translateY(0); }
        }

        /* ---- Tables ---- */
        .metrics-table {
            width: 100%;
            border-collapse: separate;
            border-spacing: 0;
            border-radius: 10px;
            overflow: hidden;
            box-shadow: 0 5px 15px rgba(0, 0, 0, 0.1);
        }

        .metrics-table thead {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
        }

        .metrics-table th {
            padding: 15px;
            text-align: left;
            font-weight: 600;
            font-size: 0.9em;
            text-transform: uppercase;
            letter-spacing: 0.5px;
        }

        .metrics-table td {
            padding: 15px;
            border-bottom: 1px solid #e9ecef;
        }

        .metrics-table tbody tr:hover { background: #f8f9fa; }
        .metrics-table tbody tr:last-child td { border-bottom: none; }

        .info-table {
            width: 100%;
            border-collapse: collapse;
            margin-top: 15px;
        }

        .info-table td {
            padding: 10px 15px;
            border-bottom: 1px solid #e9ecef;
        }

        .info-table td:first-child {
            font-weight: 600;
            color: #667eea;
            width: 40%;
        }

        .info-table td:last-child {
            color: #2c3e50;
            font-family: 'Courier New', monospace;
        }

        .info-table tr:last-child td { border-bottom: none; }
        .info-table tr:hover { background: #f8f9fa; }

        /* ---- Badges ---- */
        .badge {
            display: inline-block;
            padding: 5px 12px;
            border-radius: 20px;
            font-size: 0.85em;
            font-weight: 600;
        }

        .badge-success { background: #d4edda; color: #155724; }
        .badge-error { background: #f8d7da; color: #721c24; }
        .badge-warning { background: #fff3cd; color: #856404; }

        .metric-value-good { color: #28a745; font-weight: 600; }
        .metric-value-bad { color: #dc3545; font-weight: 600; }

        /* ---- Containers and progress bars ---- */
        .chart-container {
            background: white;
            border-radius: 15px;
            padding: 30px;
            box-shadow: 0 5px 15px rgba(0, 0, 0, 0.1);
            margin-bottom: 30px;
        }

        .chart-title {
            font-size: 1.3em;
            font-weight: 600;
            margin-bottom: 20px;
            color: #2c3e50;
        }

        .progress-bar {
            height: 30px;
            background: #e9ecef;
            border-radius: 15px;
            overflow: hidden;
            margin: 10px 0;
            position: relative;
        }

        .progress-fill {
            height: 100%;
            background: linear-gradient(90deg, #11998e 0%, #38ef7d 100%);
            border-radius: 15px;
            display: flex;
            align-items: center;
            justify-content: flex-end;
            padding-right: 15px;
            color: white;
            font-weight: 600;
            transition: width 1s ease;
        }

        .progress-fill.error {
            background: linear-gradient(90deg, #eb3349 0%, #f45c43 100%);
        }

        /* ---- Checks ---- */
        .check-item {
            display: flex;
            justify-content: space-between;
            align-items: center;
            padding: 15px;
            background: white;
            border-radius: 10px;
            margin-bottom: 10px;
            box-shadow: 0 2px 5px rgba(0, 0, 0, 0.05);
        }

        .check-item:hover { box-shadow: 0 5px 15px rgba(0, 0, 0, 0.1); }

        .check-name {
            flex: 1;
            font-weight: 500;
        }

        .check-stats {
            display: flex;
            gap: 20px;
        }

        /* ---- Footer ---- */
        .footer {
            text-align: center;
            padding: 30px;
            background: #f8f9fa;
            color: #6c757d;
            font-size: 0.9em;
        }

        .footer a {
            color: #667eea;
            text-decoration: none;
            font-weight: 600;
        }

        .footer a:hover { text-decoration: underline; }

        @media (max-width: 768px) {
            .header h1 { font-size: 1.8em; }
            .stats-grid { grid-template-columns: 1fr; padding: 20px; }
            .tabs-container { padding: 20px; }
            .tab-button { font-size: 0.9em; padding: 12px 20px; }
        }
"""

_SCRIPT = """
        function switchTab(event, tabId) {
            document.querySelectorAll('.tab-button').forEach(btn => btn.classList.remove('active'));
            document.querySelectorAll('.tab-content').forEach(content => content.classList.remove('active'));
            event.currentTarget.classList.add('active');
            document.getElementById(tabId).classList.add('active');
        }

        // Progress bars start empty and grow to their final width
        window.addEventListener('load', () => {
            document.querySelectorAll('.progress-fill').forEach(bar => {
                const width = bar.style.width;
                bar.style.width = '0';
                setTimeout(() => { bar.style.width = width; }, 100);
            });
        });
"""

_K6_LOGO = """<svg width="40" height="36" viewBox="0 0 50 45" fill="white">
                            <path d="M31.968 34.681a2.007 2.007 0 002.011-2.003c0-1.106-.9-2.003-2.011-2.003a2.007 2.007 0 00-2.012 2.003c0 1.106.9 2.003 2.012 2.003z"/>
                            <path d="M39.575 0L27.154 16.883 16.729 9.31 0 45h50L39.575 0zM23.663 37.17l-2.97-4.072v4.072h-2.751V22.038l2.75 1.989v7.66l3.659-5.014 2.086 1.51-3.071 4.21 3.486 4.776h-3.189v.001zm8.305.17c-2.586 0-4.681-2.088-4.681-4.662 0-1.025.332-1.972.896-2.743l4.695-6.435 2.086 1.51-2.239 3.07a4.667 4.667 0 013.924 4.6c0 2.572-2.095 4.66-4.681 4.66z"/>
                        </svg>"""


def _render_subtitle(subtitle: str, http_method: str) -> str:
    if not subtitle:
        return ""
    if http_method:
        method = escape_html(http_method)
        marker = f'<span class="http-method-badge method-{method}">{method}</span>'
    else:
        marker = '<i class="fas fa-link"></i>'
    return f"""
                <div class="header-subtitle">
                    {marker}
                    {escape_html(subtitle)}
                </div>"""


def _render_tabs(sections: List[ReportSection]) -> str:
    buttons = []
    panels = []
    for i, section in enumerate(sections):
        active = " active" if i == 0 else ""
        buttons.append(f"""
                <button class="tab-button{active}" onclick="switchTab(event, '{section.section_id}')">
                    <i class="fas {section.icon}"></i> {section.label}
                </button>""")
        panels.append(f"""
            <div id="{section.section_id}" class="tab-content{active}">
                {section.body}
            </div>""")
    return f"""
        <div class="tabs-container">
            <div class="tabs">{''.join(buttons)}
            </div>
{''.join(panels)}
        </div>"""


def render_report_template(
    title: str,
    subtitle: str,
    http_method: str,
    passed: bool,
    generated_at: str,
    stats_grid: str,
    sections: List[ReportSection],
) -> str:
    """Render the complete report document.

    Args:
        title: Report title (plain text, escaped here)
        subtitle: Endpoint or description shown under the title, may be empty
        http_method: Method shown as a badge next to the subtitle, may be empty
        passed: Overall status, selects the header theme and status banner
        generated_at: Timestamp shown in the header
        stats_grid: Rendered overview cards
        sections: Tabs in display order; the first one starts active

    Returns:
        Complete HTML string
    """
    header_gradient = HEADER_GRADIENT_PASS if passed else HEADER_GRADIENT_FAIL
    status_label = STATUS_PASSED_LABEL if passed else STATUS_FAILED_LABEL
    status_class = "pass" if passed else "fail"

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{REPORT_HEADING} - {escape_html(title)}</title>
    <link rel="stylesheet" href="{FONT_AWESOME_CDN_URL}">
    <style>{_BASE_CSS}
        .header {{
            background: {header_gradient};
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <div class="header-content">
                <h1>
                    <div class="k6-logo">
                        {_K6_LOGO}
                    </div>
                    {REPORT_HEADING}
                </h1>
                <p style="font-size: 1.2em; opacity: 0.9; margin: 10px 0;">{escape_html(title)}</p>{_render_subtitle(subtitle, http_method)}
                <span class="test-status status-{status_class}">
                    {status_label}
                </span>
                <p style="margin-top: 15px; opacity: 0.9;">
                    <i class="far fa-clock"></i> Generated: {escape_html(generated_at)}
                </p>
            </div>
        </div>

        {stats_grid}
{_render_tabs(sections)}

        <div class="footer">
            <p><strong>K6 Modern Report</strong></p>
            <p>Generated from the k6 end-of-test summary</p>
            <p style="margin-top: 10px;">
                <a href="{K6_DOCS_URL}" target="_blank">K6 Documentation</a>
            </p>
        </div>
    </div>

    <script>{_SCRIPT}    </script>
</body>
</html>
"""
