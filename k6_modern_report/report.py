"""Entry point: render a k6 end-of-test summary as a self-contained HTML report."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field, fields
from datetime import datetime, UTC
from typing import Any, Dict, Mapping, Tuple, Union

from .constants import DEFAULT_TITLE_FORMAT, GENERATED_AT_FORMAT, LOG_PREFIX
from .report_template import ReportSection, render_report_template
from .sections import (
    build_checks_section,
    build_metrics_table,
    build_overview_section,
    build_stats_grid,
    build_test_info_section,
    build_thresholds_section,
)
from .stats import DerivedStats, calculate_stats


@dataclass
class ReportOptions:
    """Presentation options for one report.

    Attributes:
        title: Main title. Empty means the current UTC time, minute precision.
        subtitle: Endpoint or description shown under the title.
        http_method: HTTP method badge shown next to the subtitle.
        additional_info: Free-form key/value pairs for the Test Info tab.
            The tab is omitted when this is empty.
        debug: Print the raw summary to stderr before rendering.
    """
    title: str = ""
    subtitle: str = ""
    http_method: str = ""
    additional_info: Dict[str, Any] = field(default_factory=dict)
    debug: bool = False

    # Option names as written in k6 scripts
    _ALIASES = {
        "httpMethod": "http_method",
        "additionalInfo": "additional_info",
    }

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "ReportOptions":
        """Build options from a mapping, ignoring unrecognized keys.

        Falsy values fall back to the defaults.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in options.items():
            name = cls._ALIASES.get(key, key)
            if name in known and value:
                values[name] = value
        return cls(**values)


def _default_title() -> str:
    return datetime.now(UTC).strftime(DEFAULT_TITLE_FORMAT)


def _coerce_options(options: Union[ReportOptions, Mapping[str, Any], None]) -> ReportOptions:
    if options is None:
        return ReportOptions()
    if isinstance(options, ReportOptions):
        return options
    return ReportOptions.from_mapping(options)


def build_report(
    summary: Mapping[str, Any],
    options: Union[ReportOptions, Mapping[str, Any], None] = None,
) -> Tuple[DerivedStats, str]:
    """Aggregate a k6 summary and render its HTML report in one pass.

    Args:
        summary: The object k6 passes to ``handleSummary``
        options: ReportOptions, or a mapping with the same keys
            (``title``, ``subtitle``, ``httpMethod``/``http_method``,
            ``additionalInfo``/``additional_info``, ``debug``)

    Returns:
        Tuple of (DerivedStats, complete HTML document)

    Raises:
        ValueError: If the summary lacks 'metrics' or 'root_group'
    """
    opts = _coerce_options(options)
    title = opts.title or _default_title()
    additional_info = dict(opts.additional_info or {})

    if opts.debug:
        print(f"{LOG_PREFIX} Generating modern HTML summary report", file=sys.stderr)
        print(json.dumps(summary, indent=2, default=str), file=sys.stderr)

    stats = calculate_stats(summary)

    sections = [
        ReportSection("overview", "Overview", "fa-chart-pie", build_overview_section(stats)),
        ReportSection("metrics", "Detailed Metrics", "fa-table", build_metrics_table(summary)),
        ReportSection("checks", "Checks &amp; Groups", "fa-tasks", build_checks_section(summary)),
        ReportSection("thresholds", "Thresholds", "fa-gauge-high", build_thresholds_section(summary)),
    ]
    if additional_info:
        sections.append(
            ReportSection("testinfo", "Test Info", "fa-info-circle", build_test_info_section(additional_info))
        )

    html = render_report_template(
        title=title,
        subtitle=opts.subtitle,
        http_method=opts.http_method,
        passed=stats.passed,
        generated_at=datetime.now().strftime(GENERATED_AT_FORMAT),
        stats_grid=build_stats_grid(stats),
        sections=sections,
    )
    return stats, html


def render_html_report(
    summary: Mapping[str, Any],
    options: Union[ReportOptions, Mapping[str, Any], None] = None,
) -> str:
    """Render the HTML report for a k6 summary.

    Same arguments as ``build_report``; only the document is returned.
    """
    return build_report(summary, options)[1]
