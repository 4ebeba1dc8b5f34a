"""Escaping and number formatting shared by the report builders.

k6 hands its summary to JavaScript, so the reported numbers follow the
JavaScript formatting rules (``toFixed``, ``Math.round``, default number to
string conversion) rather than Python's round-half-even.
"""

from __future__ import annotations

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from html import escape
from typing import Any

import numpy as np

# Wide enough for every finite double
_EXACT = Context(prec=400)


def escape_html(value: Any) -> str:
    """Escape ``& < > " '`` for safe interpolation into markup.

    Any value is accepted and converted with ``str()`` first.
    """
    return escape(str(value), quote=True)


def to_fixed(value: float, digits: int = 2) -> str:
    """Format like JavaScript ``Number.prototype.toFixed``.

    Ties in the exact binary value round away from zero. Magnitudes of
    1e21 and above fall back to the plain number form (``"1e+25"``).
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return js_number(value)

    # -0 formats without a sign, small negatives keep theirs ("-0.00")
    if value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-digits)
    exact = Decimal(value)
    return str(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=_EXACT))


def js_round(value: float) -> int:
    """``Math.round``: halves round towards positive infinity."""
    return int(np.floor(float(value) + 0.5))


def js_number(value: Any) -> str:
    """Render a number the way a JavaScript template literal would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        # repr already uses the "1e+25" exponent form
        return repr(value)
    return str(value)


def format_count(value: Any) -> str:
    """Thousands-grouped count, as ``toLocaleString()`` renders it in en-US."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return js_number(value)
        if not value.is_integer():
            return f"{value:,.3f}".rstrip("0").rstrip(".")
        value = int(value)
    return f"{value:,}"


def to_number(value: Any) -> float:
    """Numeric coercion used for comparisons against formatted fields."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0
