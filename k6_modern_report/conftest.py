"""Shared k6 summaries for the report tests."""
import pytest


@pytest.fixture
def sample_summary():
    """A failing run: 20% request errors, failed checks and two breached thresholds."""
    return {
        "state": {"testRunDurationMs": 12345.6},
        "metrics": {
            "http_reqs": {"type": "counter", "values": {"count": 100, "rate": 9.5}},
            "http_req_failed": {
                "type": "rate",
                "values": {"rate": 0.2, "passes": 20, "fails": 80},
                "thresholds": {"rate==0.00": {"ok": False}},
            },
            "http_req_duration": {
                "type": "trend",
                "values": {
                    "avg": 123.456,
                    "min": 50.1,
                    "med": 110,
                    "max": 999.999,
                    "p(90)": 200.5,
                    "p(95)": 250.125,
                },
                "thresholds": {"p(95)<1000": {"ok": True}},
            },
            "http_req_waiting": {
                "type": "trend",
                "values": {"avg": 100.0, "min": 40.0, "med": 95.0, "max": 900.0, "p(90)": 180.0, "p(95)": 230.0},
            },
            "vus": {"type": "gauge", "values": {"value": 1, "min": 1, "max": 50, "avg": 25.4}},
            "iterations": {"type": "counter", "values": {"count": 100, "rate": 9.5}},
            "data_received": {"type": "counter", "values": {"count": 2500000, "rate": 250000}},
            "data_sent": {"type": "counter", "values": {"count": 125000, "rate": 12500}},
            "checks": {
                "type": "rate",
                "values": {"rate": 0.8, "passes": 80, "fails": 20},
                "thresholds": {"rate==1.00": {"ok": False}},
            },
        },
        "root_group": {
            "name": "",
            "path": "",
            "checks": [{"name": "Response status 200", "passes": 80, "fails": 20}],
            "groups": [],
        },
    }


@pytest.fixture
def passing_summary():
    """A clean run: no failed requests, checks or thresholds."""
    return {
        "metrics": {
            "http_reqs": {"values": {"count": 1500}},
            "http_req_failed": {"values": {"rate": 0}, "thresholds": {"rate==0.00": {"ok": True}}},
            "http_req_duration": {"values": {"avg": 80.0, "min": 20.0, "max": 300.0, "p(95)": 150.0}},
        },
        "root_group": {
            "checks": [],
            "groups": [{"name": "login", "checks": [{"name": "status is 200", "passes": 10, "fails": 0}]}],
        },
    }


@pytest.fixture
def empty_summary():
    return {"metrics": {}, "root_group": {"checks": [], "groups": []}}
