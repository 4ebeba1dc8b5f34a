#!/usr/bin/env python3
"""Command-line front end: turn a saved k6 summary into an HTML report.

The summary is the JSON k6 passes to ``handleSummary``, e.g. saved with

    export function handleSummary(data) {
        return { "summary.json": JSON.stringify(data) };
    }
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from datetime import datetime, UTC
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SCRIPT_NAME,
    EXIT_FAILURE,
    EXIT_PARSE_ERROR,
    EXIT_SUCCESS,
    SCRIPT_NAME_ENV_VAR,
)
from .report import ReportOptions, build_report


def _parse_info(pairs: List[str]) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` pairs, keeping their order."""
    info = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid --info entry (expected KEY=VALUE): {pair}")
        info[key] = value
    return info


def _load_summary(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def default_report_path(out_dir: str, name: str, now: Optional[datetime] = None) -> Path:
    """``<out_dir>/<name>-<timestamp>.html`` with a filesystem-safe ISO timestamp.

    The timestamp is the JSON form of the current UTC time with ':' replaced
    by '-', e.g. ``test-reporter-2026-10-19T08-05-00.000Z.html``.
    """
    now = now or datetime.now(UTC)
    stamp = now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    return Path(out_dir) / f"{name}-{stamp.replace(':', '-')}.html"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Generate a self-contained HTML report from a k6 end-of-test summary."
    )
    p.add_argument("summary", help='Summary JSON file written from handleSummary, or "-" for stdin')
    p.add_argument("--out", help="Output HTML file path (default: <out-dir>/<name>-<timestamp>.html)")
    p.add_argument("--out-dir", default=DEFAULT_OUTPUT_DIR, help="Output directory when --out is not given")
    p.add_argument(
        "--name",
        default=os.environ.get(SCRIPT_NAME_ENV_VAR) or DEFAULT_SCRIPT_NAME,
        help=f"Report file name prefix (default: ${SCRIPT_NAME_ENV_VAR} or {DEFAULT_SCRIPT_NAME})",
    )
    p.add_argument("--title", default="", help="Report title (default: current time)")
    p.add_argument("--subtitle", default="", help="Subtitle, e.g. the tested endpoint")
    p.add_argument("--http-method", default="", help="HTTP method badge shown with the subtitle")
    p.add_argument(
        "--info",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Additional test information, repeatable",
    )
    p.add_argument("--debug", action="store_true", help="Print the raw summary to stderr")

    args = p.parse_args(argv)

    try:
        info = _parse_info(args.info)
    except ValueError as e:
        print(f"Error parsing arguments: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    try:
        summary = _load_summary(args.summary)
        options = ReportOptions(
            title=args.title,
            subtitle=args.subtitle,
            http_method=args.http_method,
            additional_info=info,
            debug=args.debug,
        )
        stats, report = build_report(summary, options)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Error reading summary: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    out_path = Path(args.out) if args.out else default_report_path(args.out_dir, args.name)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(report, encoding="utf-8")
    except OSError as e:
        print(f"Error writing report: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    print(f"📊 {'✅ PASSED' if stats.passed else '❌ FAILED'}: "
          f"{stats.failed_requests} failed requests, "
          f"{stats.check_failures} failed checks, "
          f"{stats.threshold_failures} breached thresholds")
    print(f"Wrote HTML report to: {out_path}")

    return EXIT_SUCCESS if stats.passed else EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
