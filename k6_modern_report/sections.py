"""HTML fragments for the individual report sections.

Each builder returns a self-contained fragment. Every value that comes from
the summary or the caller goes through ``escape_html`` before it is placed
in the markup.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from .constants import (
    COLOR_FAIL,
    COLOR_PASS,
    FIXED_DECIMALS,
    SLOW_AVG_RESPONSE_MS,
    STANDARD_METRICS,
)
from .formatting import escape_html, format_count, js_number, to_fixed, to_number
from .stats import DerivedStats, coerce_int


def _card_state(ok: bool) -> str:
    return "success" if ok else "error"


def _stat_card(icon: str, label: str, value: str, subtext: str, state: str = "") -> str:
    classes = f"stat-card {state}".strip()
    return f"""
            <div class="{classes}">
                <i class="fas {icon} stat-icon"></i>
                <div class="stat-label">{label}</div>
                <div class="stat-value">{value}</div>
                <div class="stat-subtext">{subtext}</div>
            </div>"""


def build_stats_grid(stats: DerivedStats) -> str:
    """Overview cards shown above the tabs."""
    slow = to_number(stats.avg_response_time) > SLOW_AVG_RESPONSE_MS
    cards = [
        _stat_card(
            "fa-globe",
            "Total Requests",
            escape_html(format_count(stats.total_requests)),
            f"{escape_html(format_count(stats.successful_requests))} successful",
            _card_state(stats.failed_requests == 0),
        ),
        _stat_card(
            "fa-chart-line",
            "Success Rate",
            f"{escape_html(stats.success_rate)}%",
            f"{escape_html(js_number(stats.failed_requests))} failed requests",
            _card_state(to_number(stats.error_rate) <= 0),
        ),
        _stat_card(
            "fa-tachometer-alt",
            "Avg Response Time",
            f'{escape_html(stats.avg_response_time)}<span style="font-size: 0.5em;">ms</span>',
            f"P95: {escape_html(stats.p95_response_time)}ms",
            "warning" if slow else "success",
        ),
        _stat_card(
            "fa-users",
            "Virtual Users",
            escape_html(js_number(stats.max_vus)),
            f"Average: {escape_html(stats.avg_vus)} VUs",
        ),
        _stat_card(
            "fa-redo",
            "Iterations",
            escape_html(format_count(stats.iterations)),
            f"Duration: {escape_html(stats.test_duration)}s",
        ),
        _stat_card(
            "fa-check-circle",
            "Checks",
            escape_html(js_number(stats.total_checks)),
            f"{stats.check_passes} passed / {stats.check_failures} failed",
            _card_state(stats.check_failures == 0),
        ),
        _stat_card(
            "fa-exclamation-triangle",
            "Thresholds",
            escape_html(js_number(stats.threshold_failures)),
            f"of {stats.threshold_count} breached",
            _card_state(stats.threshold_failures == 0),
        ),
    ]
    return '<div class="stats-grid">' + "".join(cards) + "\n        </div>"


def _progress_bar(label: str, value: str, value_class: str, fill_class: str) -> str:
    # The fill width is the raw rate; out-of-range input is not clamped
    value = escape_html(value)
    return f"""
            <div style="margin: 30px 0;">
                <div style="display: flex; justify-content: space-between; margin-bottom: 10px;">
                    <span>{label}</span>
                    <span class="{value_class}">{value}%</span>
                </div>
                <div class="progress-bar">
                    <div class="{fill_class}" style="width: {value}%">{value}%</div>
                </div>
            </div>"""


def _timing_cell(label: str, value: str, color: str) -> str:
    return f"""
                <div style="text-align: center; padding: 20px; background: #f8f9fa; border-radius: 10px;">
                    <div style="font-size: 0.9em; color: #6c757d; margin-bottom: 5px;">{label}</div>
                    <div style="font-size: 1.8em; font-weight: 700; color: {color};">{escape_html(value)}ms</div>
                </div>"""


def _transfer_cell(icon: str, color: str, value: str, label: str) -> str:
    return f"""
                <div style="text-align: center;">
                    <i class="fas {icon}" style="font-size: 3em; color: {color}; opacity: 0.3;"></i>
                    <div style="font-size: 2em; font-weight: 700; margin: 10px 0;">{escape_html(value)} MB</div>
                    <div style="color: #6c757d;">{label}</div>
                </div>"""


def build_overview_section(stats: DerivedStats) -> str:
    """Success/error progress bars, response time breakdown and data transfer."""
    timings = "".join([
        _timing_cell("MIN", stats.min_response_time, "#28a745"),
        _timing_cell("AVG", stats.avg_response_time, "#667eea"),
        _timing_cell("P95", stats.p95_response_time, "#f2994a"),
        _timing_cell("MAX", stats.max_response_time, "#dc3545"),
    ])
    transfer = "".join([
        _transfer_cell("fa-download", "#667eea", stats.data_received, "Data Received"),
        _transfer_cell("fa-upload", "#764ba2", stats.data_sent, "Data Sent"),
    ])
    return f"""
        <div class="chart-container">
            <h3 class="chart-title">Performance Overview</h3>
            {_progress_bar("Success Rate", stats.success_rate, "metric-value-good", "progress-fill")}
            {_progress_bar("Error Rate", stats.error_rate, "metric-value-bad", "progress-fill error")}
            <div style="display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 20px; margin-top: 30px;">{timings}
            </div>
        </div>
        <div class="chart-container">
            <h3 class="chart-title">Data Transfer</h3>
            <div style="display: grid; grid-template-columns: 1fr 1fr; gap: 30px; margin-top: 20px;">{transfer}
            </div>
        </div>
    """


def build_metrics_table(summary: Mapping[str, Any]) -> str:
    """Timing breakdown table for the standard k6 trend metrics."""
    metrics = summary["metrics"]
    rows = []
    for name in STANDARD_METRICS:
        metric = metrics.get(name)
        if metric is None:
            continue
        values = metric.get("values") or {}

        def cell(key: str) -> str:
            return to_fixed(values.get(key) or 0, FIXED_DECIMALS)

        rows.append(
            "<tr>"
            f"<td><strong>{escape_html(name)}</strong></td>"
            f"<td>{cell('avg')}</td>"
            f'<td class="metric-value-good">{cell("min")}</td>'
            f"<td>{cell('med')}</td>"
            f'<td class="metric-value-bad">{cell("max")}</td>'
            f"<td>{cell('p(90)')}</td>"
            f"<td>{cell('p(95)')}</td>"
            "</tr>"
        )

    return (
        '<div class="chart-container"><h3 class="chart-title">HTTP Request Metrics</h3>'
        '<table class="metrics-table"><thead><tr>'
        "<th>Metric</th><th>Avg</th><th>Min</th><th>Med</th><th>Max</th><th>P90</th><th>P95</th>"
        "</tr></thead><tbody>"
        + "".join(rows)
        + "</tbody></table></div>"
        '<p style="margin-top: 10px; color: #6c757d; font-size: 0.9em;">'
        '<i class="fas fa-info-circle"></i> All times are in milliseconds</p>'
    )


def _check_item(check: Mapping[str, Any]) -> str:
    passes = coerce_int(check.get("passes"))
    fails = coerce_int(check.get("fails"))
    badges = f'<span class="badge badge-success"><i class="fas fa-check"></i> {passes} passed</span>'
    if fails > 0:
        badges += f'<span class="badge badge-error"><i class="fas fa-times"></i> {fails} failed</span>'
    return (
        '<div class="check-item">'
        f'<div class="check-name">{escape_html(check.get("name", ""))}</div>'
        f'<div class="check-stats">{badges}</div>'
        "</div>"
    )


def build_checks_section(summary: Mapping[str, Any]) -> str:
    """Checks grouped by their (first level) group, then ungrouped checks."""
    root_group = summary["root_group"]
    blocks: List[str] = []

    for group in root_group.get("groups") or []:
        checks = group.get("checks") or []
        if checks:
            body = "".join(_check_item(c) for c in checks)
        else:
            body = '<p style="color: #6c757d;">No checks in this group</p>'
        blocks.append(
            '<div class="chart-container">'
            '<h3 class="chart-title"><i class="fas fa-layer-group"></i> '
            f'Group: {escape_html(group.get("name", ""))}</h3>'
            f"{body}</div>"
        )

    root_checks = root_group.get("checks") or []
    if root_checks:
        blocks.append(
            '<div class="chart-container">'
            '<h3 class="chart-title"><i class="fas fa-list-check"></i> Other Checks</h3>'
            + "".join(_check_item(c) for c in root_checks)
            + "</div>"
        )

    if not blocks:
        return (
            '<div class="chart-container">'
            '<p style="color: #6c757d;">No checks configured for this test</p>'
            "</div>"
        )
    return "".join(blocks)


def _threshold_row(metric_name: str, expression: str, passed: bool) -> str:
    color = COLOR_PASS if passed else COLOR_FAIL
    icon = "check-circle" if passed else "times-circle"
    if passed:
        badge = '<span class="badge badge-success"><i class="fas fa-check"></i> PASSED</span>'
    else:
        badge = '<span class="badge badge-error"><i class="fas fa-times"></i> FAILED</span>'
    return f"""
            <div class="check-item" style="border-left: 4px solid {color};">
                <div style="flex: 1;">
                    <div style="font-weight: 600; margin-bottom: 5px;">
                        <i class="fas fa-{icon}" style="color: {color};"></i> {escape_html(metric_name)}
                    </div>
                    <div style="color: #6c757d; font-size: 0.9em; font-family: monospace;">{escape_html(expression)}</div>
                </div>
                <div class="check-stats">{badge}</div>
            </div>"""


def build_thresholds_section(summary: Mapping[str, Any]) -> str:
    """Passed/failed summary followed by one row per threshold expression."""
    rows = []
    passed_count = 0
    failed_count = 0

    for metric_name, metric in summary["metrics"].items():
        thresholds = (metric or {}).get("thresholds")
        if not thresholds:
            continue
        for expression, result in thresholds.items():
            passed = bool((result or {}).get("ok"))
            if passed:
                passed_count += 1
            else:
                failed_count += 1
            rows.append(_threshold_row(metric_name, expression, passed))

    title = '<h3 class="chart-title"><i class="fas fa-gauge-high"></i> Threshold Results</h3>'
    if not rows:
        return (
            f'<div class="chart-container">{title}'
            '<p style="color: #6c757d; text-align: center; padding: 40px;">'
            "No thresholds configured for this test</p></div>"
        )

    counts = f"""
            <div style="display: grid; grid-template-columns: 1fr 1fr; gap: 20px; margin-bottom: 30px;">
                <div style="background: linear-gradient(135deg, #d4edda 0%, #c3e6cb 100%); padding: 20px; border-radius: 10px; text-align: center;">
                    <div style="font-size: 2.5em; font-weight: 700; color: #155724;">{passed_count}</div>
                    <div style="color: #155724; font-weight: 600;">Passed</div>
                </div>
                <div style="background: linear-gradient(135deg, #f8d7da 0%, #f5c6cb 100%); padding: 20px; border-radius: 10px; text-align: center;">
                    <div style="font-size: 2.5em; font-weight: 700; color: #721c24;">{failed_count}</div>
                    <div style="color: #721c24; font-weight: 600;">Failed</div>
                </div>
            </div>"""
    return f'<div class="chart-container">{title}{counts}' + "".join(rows) + "</div>"


def build_test_info_section(additional_info: Dict[str, Any]) -> str:
    """Key/value table of caller supplied test information."""
    rows = "".join(
        "<tr>"
        '<td><i class="fas fa-caret-right" style="color: #667eea; margin-right: 8px;"></i>'
        f"{escape_html(key)}</td>"
        f"<td>{escape_html(value)}</td>"
        "</tr>"
        for key, value in additional_info.items()
    )
    return (
        '<div class="chart-container">'
        '<h3 class="chart-title"><i class="fas fa-info-circle"></i> '
        "Test Configuration &amp; Additional Information</h3>"
        f'<table class="info-table">{rows}</table>'
        "</div>"
    )
