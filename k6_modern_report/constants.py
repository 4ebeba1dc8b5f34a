"""
k6 Modern HTML Reporter - Constants Configuration

This module centralizes all configuration constants used throughout the tool.
Each constant is documented with its purpose and acceptable value ranges.
"""

# ==============================================================================
# METRIC NAMES
# ==============================================================================

# Counter metric holding the total number of HTTP requests
METRIC_HTTP_REQS = "http_reqs"

# Rate metric holding the fraction of failed HTTP requests (0.0 - 1.0)
METRIC_HTTP_REQ_FAILED = "http_req_failed"

# Trend metric holding the end-to-end request duration in milliseconds
METRIC_HTTP_REQ_DURATION = "http_req_duration"

# Gauge metric holding the number of active virtual users
METRIC_VUS = "vus"

# Counter metric holding the number of completed iterations
METRIC_ITERATIONS = "iterations"

# Counter metrics holding transferred bytes
METRIC_DATA_RECEIVED = "data_received"
METRIC_DATA_SENT = "data_sent"

# Trend metrics shown in the Detailed Metrics table, in display order.
# Metrics missing from the summary are skipped, never rendered as zero rows.
STANDARD_METRICS = (
    "http_req_duration",
    "http_req_waiting",
    "http_req_connecting",
    "http_req_tls_handshaking",
    "http_req_sending",
    "http_req_receiving",
    "http_req_blocked",
    "iteration_duration",
)


# ==============================================================================
# MATHEMATICAL CONSTANTS
# ==============================================================================

# Conversion factor from fraction to percentage
# Multiply by 100 to convert 0.05 -> 5%
PCT_CONVERSION_FACTOR = 100

# Divisor converting byte counters to megabytes (decimal, not MiB)
BYTES_PER_MB = 1_000_000

# Divisor converting the run duration from milliseconds to seconds
MS_PER_SECOND = 1000

# Decimal places for fixed-format values (rates, times, megabytes)
FIXED_DECIMALS = 2


# ==============================================================================
# STATUS THRESHOLDS
# ==============================================================================

# Average response time (ms) above which the response-time card is flagged
# with the warning treatment. Purely presentational, does not affect PASS/FAIL.
SLOW_AVG_RESPONSE_MS = 1000.0


# ==============================================================================
# UI/HTML REPORT CONSTANTS
# ==============================================================================

# Font Awesome stylesheet, the only external asset of the report
FONT_AWESOME_CDN_URL = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css"

# Header gradients for the two overall statuses
HEADER_GRADIENT_PASS = "linear-gradient(135deg, #11998e 0%, #38ef7d 100%)"
HEADER_GRADIENT_FAIL = "linear-gradient(135deg, #eb3349 0%, #f45c43 100%)"

# Badge colors used by threshold result rows
COLOR_PASS = "#28a745"
COLOR_FAIL = "#dc3545"

# Report heading and status banner labels
REPORT_HEADING = "K6 Performance Test Report"
STATUS_PASSED_LABEL = "✅ ALL TESTS PASSED"
STATUS_FAILED_LABEL = "❌ TESTS FAILED"

# Footer links
K6_DOCS_URL = "https://k6.io/docs/"

# Format of the default report title (UTC, minute precision)
DEFAULT_TITLE_FORMAT = "%Y-%m-%d %H:%M"

# Format of the "Generated:" timestamp shown in the header (local time)
GENERATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"

# Prefix for diagnostic lines written to stderr
LOG_PREFIX = "[k6-modern-report]"


# ==============================================================================
# CLI DEFAULTS
# ==============================================================================

# Directory reports are written to when --out is not given
DEFAULT_OUTPUT_DIR = "reports"

# Environment variable naming the k6 script, used in the report file name
SCRIPT_NAME_ENV_VAR = "K6_SCRIPT_NAME"

# Fallback script name when the environment variable is unset
DEFAULT_SCRIPT_NAME = "test-reporter"


# ==============================================================================
# EXIT CODES
# ==============================================================================

# Exit code when the report status is PASS
EXIT_SUCCESS = 0

# Exit code when the report status is FAIL (failed requests, checks or thresholds)
EXIT_FAILURE = 1

# Exit code for parsing/input errors
EXIT_PARSE_ERROR = 2
