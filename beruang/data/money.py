"""
Fixed-point money: amounts are held as integer cents, never as floats.
"""
from __future__ import annotations

import re
from decimal import Decimal

from beruang.data.errors import CoercionError

SCALE = 2
PRECISION = 10
# Decimal(10, 2): at most 10 digits, so |cents| < 10**10
MAX_CENTS = 10 ** PRECISION
_FACTOR = 10 ** SCALE

_AMOUNT_RE = re.compile(r"^\s*([+-]?)(\d*)(?:\.(\d{0,2}))?\s*$")


def decode(raw: float) -> int:
    """Spreadsheet currency cell → integer cents.

    Every float in a money column is an amount with two decimal digits,
    so scaling and rounding recovers the exact cent value.
    Example: 1.50 → 150.
    """
    return int(round(raw * _FACTOR))


def encode(total: int) -> str:
    """Integer cents → "123.45". The sign is placed before the whole part."""
    sign = "-" if total < 0 else ""
    whole, cents = divmod(abs(int(total)), _FACTOR)
    return f"{sign}{whole}.{cents:0{SCALE}d}"


def parse(text: str) -> int:
    """Exact decimal text ("-12.5", "3", "0.07") → integer cents."""
    m = _AMOUNT_RE.match(str(text))
    if not m or not (m.group(2) or m.group(3)):
        raise CoercionError(f"Not an amount: {text!r}")
    sign, whole, frac = m.groups()
    cents = int(whole or "0") * _FACTOR + int((frac or "").ljust(SCALE, "0"))
    return -cents if sign == "-" else cents


def to_decimal(total: int) -> Decimal:
    return Decimal(int(total)).scaleb(-SCALE)
