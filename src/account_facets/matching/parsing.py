"""
Number Parsing for Loosely Typed Columns.

Numeric columns arrive as numbers, numeric strings, or (for revenue)
human-formatted amounts such as "$1.2B" or "USD 450,000". Parsers never
raise: anything they cannot read is 0.0, which the range matcher treats
as "no value".
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Optional

_CURRENCY_PATTERN = re.compile(r"(us\$|usd|inr|eur|gbp|rs\.?|[$€£₹¥])", re.IGNORECASE)
_AMOUNT_PATTERN = re.compile(
    r"^(?P<number>[-+]?(?:\d+(?:\.\d*)?|\.\d+))(?P<suffix>[a-z]*)$",
    re.IGNORECASE,
)

_MAGNITUDES: Dict[str, float] = {
    "": 1.0,
    "k": 1e3,
    "thousand": 1e3,
    "m": 1e6,
    "mm": 1e6,
    "mn": 1e6,
    "million": 1e6,
    "b": 1e9,
    "bn": 1e9,
    "billion": 1e9,
    "t": 1e12,
    "tn": 1e12,
    "trillion": 1e12,
}


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _as_float(text: str) -> Optional[float]:
    try:
        return _finite(float(text))
    except ValueError:
        return None


def normalize_number(value: Any) -> float:
    """
    Read a plain number or numeric string.

    None, empty/blank strings, unparsable strings and non-finite values
    all become 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return _finite(float(value))
    text = str(value).strip()
    if not text:
        return 0.0
    plain = _as_float(text)
    return 0.0 if plain is None else plain


def parse_revenue(value: Any) -> float:
    """
    Read a revenue amount.

    Accepts everything ``normalize_number`` does plus currency symbols
    and codes, thousands separators, a trailing "+" and magnitude
    suffixes (K, M/MN/MM, B/BN, T/TN and their spelled-out forms).

    Examples:
        >>> parse_revenue("$1.2M")
        1200000.0
        >>> parse_revenue("USD 3,500")
        3500.0
        >>> parse_revenue("n/a")
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return _finite(float(value))

    text = _CURRENCY_PATTERN.sub("", str(value))
    text = text.replace(",", "").replace(" ", "").strip().rstrip("+")
    if not text:
        return 0.0
    plain = _as_float(text)
    if plain is not None:
        return plain

    match = _AMOUNT_PATTERN.match(text)
    if match is None:
        return 0.0

    multiplier = _MAGNITUDES.get(match.group("suffix").lower())
    if multiplier is None:
        return 0.0
    return _finite(float(match.group("number")) * multiplier)
