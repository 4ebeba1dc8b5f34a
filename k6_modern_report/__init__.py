"""Self-contained HTML reports for k6 load-test summaries."""

from .report import ReportOptions, build_report, render_html_report

__all__ = ["ReportOptions", "build_report", "render_html_report"]
