#!/usr/bin/env python3
"""
Test suite for stats.py

Covers the derived statistics, check tallies and summary validation.
"""
import pytest

from k6_modern_report.stats import (
    DerivedStats,
    calculate_stats,
    coerce_int,
    count_checks,
    validate_summary,
)
from k6_modern_report.report import render_html_report


class TestCalculateStats:
    """Test calculate_stats function."""

    def test_sample_summary(self, sample_summary):
        """All derived fields for a realistic failing run."""
        stats = calculate_stats(sample_summary)

        assert isinstance(stats, DerivedStats)
        assert stats.total_requests == 100
        assert stats.failed_requests == 20
        assert stats.successful_requests == 80
        assert stats.error_rate == "20.00"
        assert stats.success_rate == "80.00"
        assert stats.avg_response_time == "123.46"
        assert stats.p95_response_time == "250.13"
        assert stats.max_response_time == "1000.00"
        assert stats.min_response_time == "50.10"
        assert stats.max_vus == 50
        assert stats.avg_vus == "25"
        assert stats.iterations == 100
        assert stats.data_received == "2.50"
        assert stats.data_sent == "0.13"
        assert stats.test_duration == "12.35"
        assert stats.passed is False

    def test_empty_summary_defaults(self, empty_summary):
        """Every field keeps its zero default when no metrics are present."""
        stats = calculate_stats(empty_summary)

        assert stats == DerivedStats()
        assert stats.total_requests == 0
        assert stats.failed_requests == 0
        assert stats.successful_requests == 0
        assert stats.error_rate == "0"
        assert stats.success_rate == "0"
        assert stats.avg_response_time == "0"
        assert stats.data_received == "0"
        assert stats.threshold_count == 0
        assert stats.total_checks == 0
        assert stats.passed is True

    def test_missing_failure_rate_leaves_split_at_zero(self):
        """Without http_req_failed, successful/failed stay at their defaults."""
        summary = {
            "metrics": {"http_reqs": {"values": {"count": 42}}},
            "root_group": {},
        }

        stats = calculate_stats(summary)

        assert stats.total_requests == 42
        assert stats.failed_requests == 0
        assert stats.successful_requests == 0
        assert stats.error_rate == "0"

    @pytest.mark.parametrize("rate,count", [
        (0.0, 10),
        (1 / 3, 10),
        (0.0517, 1000),
        (0.999, 7),
        (1.0, 3),
    ])
    def test_request_split_and_rates(self, rate, count):
        """failed = round(rate * n), successful = n - failed, rates add to 100.00."""
        summary = {
            "metrics": {
                "http_reqs": {"values": {"count": count}},
                "http_req_failed": {"values": {"rate": rate}},
            },
            "root_group": {},
        }

        stats = calculate_stats(summary)

        assert stats.failed_requests == int(rate * count + 0.5)
        assert stats.successful_requests == count - stats.failed_requests
        assert f"{float(stats.error_rate) + float(stats.success_rate):.2f}" == "100.00"

    def test_success_rate_derived_from_rounded_error_rate(self):
        """Success rate is 100 minus the two-decimal error rate."""
        summary = {
            "metrics": {"http_req_failed": {"values": {"rate": 1 / 3}}},
            "root_group": {},
        }

        stats = calculate_stats(summary)

        assert stats.error_rate == "33.33"
        assert stats.success_rate == "66.67"

    def test_out_of_range_rate_not_clamped(self):
        """A malformed rate propagates as an out-of-range percentage."""
        summary = {
            "metrics": {
                "http_reqs": {"values": {"count": 10}},
                "http_req_failed": {"values": {"rate": 1.5}},
            },
            "root_group": {},
        }

        stats = calculate_stats(summary)

        assert stats.error_rate == "150.00"
        assert stats.success_rate == "-50.00"
        assert stats.failed_requests == 15
        assert stats.successful_requests == -5

    def test_missing_sub_fields_default_to_zero(self):
        """Present metrics with missing values still produce zeros."""
        summary = {
            "metrics": {
                "http_reqs": {},
                "http_req_duration": {"values": {"avg": 12.5}},
                "vus": {"values": {}},
                "data_received": {"values": {}},
            },
            "root_group": {},
        }

        stats = calculate_stats(summary)

        assert stats.total_requests == 0
        assert stats.avg_response_time == "12.50"
        assert stats.p95_response_time == "0.00"
        assert stats.max_vus == 0
        assert stats.avg_vus == "0"
        assert stats.data_received == "0.00"

    def test_summary_not_mutated(self, sample_summary):
        import copy

        before = copy.deepcopy(sample_summary)
        calculate_stats(sample_summary)

        assert sample_summary == before


class TestThresholdTally:
    """Test threshold counting in calculate_stats."""

    def test_two_metrics_one_failure(self):
        """Two metrics with one threshold each, one failing."""
        summary = {
            "metrics": {
                "http_req_duration": {"values": {}, "thresholds": {"p(95)<1000": {"ok": True}}},
                "http_req_failed": {"values": {"rate": 0}, "thresholds": {"rate<0.01": {"ok": False}}},
            },
            "root_group": {"checks": [], "groups": []},
        }

        stats = calculate_stats(summary)

        assert stats.threshold_count == 2
        assert stats.threshold_failures == 1
        assert stats.passed is False

    def test_count_is_per_metric_failures_per_expression(self):
        """threshold_count counts metrics; failures count expressions."""
        summary = {
            "metrics": {
                "http_req_duration": {
                    "values": {},
                    "thresholds": {
                        "p(95)<100": {"ok": False},
                        "p(99)<200": {"ok": False},
                        "avg<50": {"ok": True},
                    },
                },
            },
            "root_group": {},
        }

        stats = calculate_stats(summary)

        assert stats.threshold_count == 1
        assert stats.threshold_failures == 2

    def test_missing_ok_flag_counts_as_failure(self):
        summary = {
            "metrics": {"checks": {"values": {}, "thresholds": {"rate>0.9": {}}}},
            "root_group": {},
        }

        assert calculate_stats(summary).threshold_failures == 1

    def test_empty_threshold_mapping_ignored(self):
        summary = {
            "metrics": {"checks": {"values": {}, "thresholds": {}}},
            "root_group": {},
        }

        assert calculate_stats(summary).threshold_count == 0


class TestCheckTally:
    """Test check counting across the root group and its direct groups."""

    def test_root_and_group_checks(self):
        """Root checks plus one group's checks are summed."""
        summary = {
            "metrics": {},
            "root_group": {
                "checks": [{"name": "A", "passes": 3, "fails": 0}],
                "groups": [{"name": "G1", "checks": [{"name": "B", "passes": 1, "fails": 1}]}],
            },
        }

        stats = calculate_stats(summary)

        assert stats.check_passes == 4
        assert stats.check_failures == 1
        assert stats.total_checks == 5
        assert stats.passed is False

    def test_nested_groups_not_visited(self):
        """Only one level of groups is traversed."""
        summary = {
            "metrics": {},
            "root_group": {
                "groups": [{
                    "name": "outer",
                    "checks": [{"name": "a", "passes": 2, "fails": 0}],
                    "groups": [{"name": "inner", "checks": [{"name": "b", "passes": 100, "fails": 100}]}],
                }],
            },
        }

        stats = calculate_stats(summary)

        assert stats.check_passes == 2
        assert stats.check_failures == 0
        assert stats.total_checks == 2

    def test_absent_checks_and_groups(self):
        stats = calculate_stats({"metrics": {}, "root_group": {}})

        assert stats.total_checks == stats.check_passes + stats.check_failures == 0


class TestCountChecks:
    """Test count_checks helper."""

    def test_sums_passes_and_fails(self):
        checks = [
            {"name": "a", "passes": 3, "fails": 1},
            {"name": "b", "passes": 5, "fails": 0},
        ]

        assert count_checks(checks) == (8, 1)

    def test_empty_sequence(self):
        assert count_checks([]) == (0, 0)

    def test_missing_and_malformed_fields(self):
        """Missing fields count as 0, strings are parsed, garbage is 0."""
        checks = [
            {"name": "a", "passes": "3"},
            {"name": "b", "passes": "abc", "fails": 2.7},
            {"name": "c", "passes": None, "fails": "1"},
        ]

        assert count_checks(checks) == (3, 3)

    def test_counts_beyond_int64_range(self):
        """Huge counts are summed exactly instead of overflowing."""
        checks = [
            {"name": "a", "passes": 1e20, "fails": 0},
            {"name": "b", "passes": "1e19", "fails": 2 ** 63},
        ]

        assert count_checks(checks) == (10 ** 20 + 10 ** 19, 2 ** 63)

    def test_huge_counts_render(self):
        """A summary with out-of-range check counts still renders."""
        summary = {
            "metrics": {},
            "root_group": {"checks": [{"name": "a", "passes": "1e19", "fails": 0}], "groups": []},
        }

        html = render_html_report(summary)

        assert "10000000000000000000 passed" in html

    def test_coerce_int(self):
        assert coerce_int("12") == 12
        assert coerce_int(7.9) == 7
        assert coerce_int(float("nan")) == 0
        assert coerce_int([]) == 0

    def test_coerce_int_rejects_booleans(self):
        """Booleans are not numbers here, like parseInt(true)."""
        assert coerce_int(True) == 0
        assert coerce_int(False) == 0
        assert count_checks([{"name": "a", "passes": True, "fails": True}]) == (0, 0)


class TestValidateSummary:
    """Test upfront structural validation."""

    def test_missing_metrics(self):
        with pytest.raises(ValueError, match="must contain 'metrics'"):
            calculate_stats({"root_group": {}})

    def test_missing_root_group(self):
        with pytest.raises(ValueError, match="must contain 'root_group'"):
            calculate_stats({"metrics": {}})

    def test_not_a_mapping(self):
        with pytest.raises(ValueError, match="must be a JSON object"):
            validate_summary([1, 2, 3])

    def test_wrong_container_type(self):
        with pytest.raises(ValueError, match="'metrics' must be an object"):
            validate_summary({"metrics": [], "root_group": {}})
