"""
Exact fixed-point helpers shared by the analytics modules.
"""
from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal

import pandas as pd


def cents_sum(values: pd.Series) -> int:
    return int(values.astype("int64").sum())


def cents_mean(values: pd.Series) -> int:
    """Mean of integer cents, rounded half-even to the cent. No float intermediate."""
    if values.empty:
        return 0
    mean = Decimal(cents_sum(values)) / Decimal(len(values))
    return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_EVEN))


def cents_min(values: pd.Series) -> int:
    return int(values.min())


def cents_max(values: pd.Series) -> int:
    return int(values.max())
