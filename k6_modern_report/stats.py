"""Summary statistics derived from a k6 end-of-test summary.

The summary is the object k6 hands to ``handleSummary``:

    {
      "metrics": {
        "http_reqs": {"values": {"count": 100, "rate": 9.8}},
        "http_req_duration": {
          "values": {"avg": 120.4, "p(95)": 310.0, ...},
          "thresholds": {"p(95)<1000": {"ok": true}}
        },
        ...
      },
      "root_group": {"checks": [...], "groups": [...]}
    }

Every metric and sub-field is optional; missing data counts as zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple

from .constants import (
    BYTES_PER_MB,
    FIXED_DECIMALS,
    METRIC_DATA_RECEIVED,
    METRIC_DATA_SENT,
    METRIC_HTTP_REQ_DURATION,
    METRIC_HTTP_REQ_FAILED,
    METRIC_HTTP_REQS,
    METRIC_ITERATIONS,
    METRIC_VUS,
    MS_PER_SECOND,
    PCT_CONVERSION_FACTOR,
)
from .formatting import js_round, to_fixed


@dataclass
class DerivedStats:
    """Report-ready numbers computed from one summary.

    Counts are plain numbers. Rates, response times, transferred megabytes
    and the run duration are kept as the fixed-point strings shown in the
    report; they stay at ``"0"`` when their source metric is absent.

    Attributes:
        failed_requests / successful_requests: Only meaningful when the
            ``http_req_failed`` metric is present, otherwise both stay 0.
        success_rate: ``100 - error_rate`` computed from the already rounded
            error rate string, so rounding compounds across the two.
        threshold_count: Number of *metrics* carrying thresholds, not the
            number of threshold expressions.
        threshold_failures: Number of threshold *expressions* that failed.
    """
    total_requests: Any = 0
    successful_requests: int = 0
    failed_requests: int = 0
    success_rate: str = "0"
    error_rate: str = "0"
    avg_response_time: str = "0"
    p95_response_time: str = "0"
    max_response_time: str = "0"
    min_response_time: str = "0"
    threshold_failures: int = 0
    threshold_count: int = 0
    check_failures: int = 0
    check_passes: int = 0
    total_checks: int = 0
    max_vus: Any = 0
    avg_vus: str = "0"
    iterations: Any = 0
    data_received: str = "0"
    data_sent: str = "0"
    test_duration: str = "0"

    @property
    def passed(self) -> bool:
        """Overall status: no failed requests, checks or thresholds."""
        return (
            self.failed_requests == 0
            and self.check_failures == 0
            and self.threshold_failures == 0
        )


def coerce_int(value: Any) -> int:
    """``parseInt``-style coercion; anything non-numeric counts as 0."""
    if not value or isinstance(value, bool):
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def count_checks(checks: Iterable[Mapping[str, Any]]) -> Tuple[int, int]:
    """Sum passes and fails across a sequence of checks.

    Counts are unbounded Python ints, so totals beyond the int64 range
    are kept exactly.

    Returns:
        Tuple of (passes, fails)
    """
    passes = fails = 0
    for check in checks:
        passes += coerce_int(check.get("passes"))
        fails += coerce_int(check.get("fails"))
    return passes, fails


def validate_summary(summary: Any) -> None:
    """Ensure the top-level containers every report section reads are present.

    Raises:
        ValueError: If summary is not a mapping or lacks 'metrics'/'root_group'
    """
    if not isinstance(summary, Mapping):
        raise ValueError(f"Summary must be a JSON object, got {type(summary).__name__}")
    for field in ("metrics", "root_group"):
        if field not in summary:
            raise ValueError(f"Summary must contain '{field}' field")
        if not isinstance(summary[field], Mapping):
            raise ValueError(f"Summary field '{field}' must be an object")


def metric_values(metrics: Mapping[str, Any], name: str) -> Dict[str, Any]:
    """Return ``metrics[name]['values']``, or an empty dict if absent."""
    metric = metrics.get(name)
    if not metric:
        return {}
    return metric.get("values") or {}


def calculate_stats(summary: Mapping[str, Any]) -> DerivedStats:
    """Calculate the report statistics for one k6 summary.

    Args:
        summary: k6 end-of-test summary (see module docstring)

    Returns:
        DerivedStats for this summary

    Raises:
        ValueError: If the summary lacks 'metrics' or 'root_group'
    """
    validate_summary(summary)
    metrics = summary["metrics"]
    root_group = summary["root_group"]
    stats = DerivedStats()

    if METRIC_HTTP_REQS in metrics:
        stats.total_requests = metric_values(metrics, METRIC_HTTP_REQS).get("count") or 0

    # Success/failure split, only when the failure rate is reported
    if METRIC_HTTP_REQ_FAILED in metrics:
        rate = metric_values(metrics, METRIC_HTTP_REQ_FAILED).get("rate") or 0
        stats.failed_requests = js_round(rate * stats.total_requests)
        stats.successful_requests = stats.total_requests - stats.failed_requests
        stats.error_rate = to_fixed(rate * PCT_CONVERSION_FACTOR, FIXED_DECIMALS)
        stats.success_rate = to_fixed(
            PCT_CONVERSION_FACTOR - float(stats.error_rate), FIXED_DECIMALS
        )

    if METRIC_HTTP_REQ_DURATION in metrics:
        duration = metric_values(metrics, METRIC_HTTP_REQ_DURATION)
        stats.avg_response_time = to_fixed(duration.get("avg") or 0, FIXED_DECIMALS)
        stats.p95_response_time = to_fixed(duration.get("p(95)") or 0, FIXED_DECIMALS)
        stats.max_response_time = to_fixed(duration.get("max") or 0, FIXED_DECIMALS)
        stats.min_response_time = to_fixed(duration.get("min") or 0, FIXED_DECIMALS)

    if METRIC_VUS in metrics:
        vus = metric_values(metrics, METRIC_VUS)
        stats.max_vus = vus.get("max") or 0
        stats.avg_vus = to_fixed(vus.get("avg") or 0, 0)

    if METRIC_ITERATIONS in metrics:
        stats.iterations = metric_values(metrics, METRIC_ITERATIONS).get("count") or 0

    # Bytes -> MB
    if METRIC_DATA_RECEIVED in metrics:
        received = metric_values(metrics, METRIC_DATA_RECEIVED).get("count") or 0
        stats.data_received = to_fixed(received / BYTES_PER_MB, FIXED_DECIMALS)
    if METRIC_DATA_SENT in metrics:
        sent = metric_values(metrics, METRIC_DATA_SENT).get("count") or 0
        stats.data_sent = to_fixed(sent / BYTES_PER_MB, FIXED_DECIMALS)

    state = summary.get("state") or {}
    duration_ms = state.get("testRunDurationMs")
    if duration_ms:
        stats.test_duration = to_fixed(duration_ms / MS_PER_SECOND, FIXED_DECIMALS)

    # One per metric with thresholds; failures counted per expression
    for metric in metrics.values():
        thresholds = (metric or {}).get("thresholds")
        if not thresholds:
            continue
        stats.threshold_count += 1
        for result in thresholds.values():
            if not (result or {}).get("ok"):
                stats.threshold_failures += 1

    # Root checks plus one level of groups; deeper groups are not visited
    if root_group.get("checks"):
        passes, fails = count_checks(root_group["checks"])
        stats.check_passes += passes
        stats.check_failures += fails
    for group in root_group.get("groups") or []:
        if group.get("checks"):
            passes, fails = count_checks(group["checks"])
            stats.check_passes += passes
            stats.check_failures += fails

    stats.total_checks = stats.check_passes + stats.check_failures
    return stats
