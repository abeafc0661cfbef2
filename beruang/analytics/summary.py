"""
Lifetime summary — sum / mean / max / min of cost per (account, currency).
"""
from __future__ import annotations

import pandas as pd

from beruang.analytics.common import cents_max, cents_mean, cents_min, cents_sum
from beruang.data.store import Ledger, Query

SUMMARY_COLUMNS = ["Sum", "Mean", "Max", "Min"]


def summary_query(ledger: Ledger) -> Query:
    h = ledger.header
    return ledger.query().group_by(h.account, h.currency).agg(
        Sum=(h.cost, cents_sum),
        Mean=(h.cost, cents_mean),
        Max=(h.cost, cents_max),
        Min=(h.cost, cents_min),
    )


def summarize(ledger: Ledger) -> pd.DataFrame:
    """One row per distinct (account, currency); all amounts in integer cents."""
    h = ledger.header
    df = summary_query(ledger).collect()
    df = df[[h.account, h.currency, *SUMMARY_COLUMNS]]
    return df.astype({c: "int64" for c in SUMMARY_COLUMNS})
