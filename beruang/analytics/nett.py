"""
Net flow per time window, per (account, currency), with transfers left out.
"""
from __future__ import annotations

from typing import Union

import pandas as pd

from beruang.config import TRANSFER_CATEGORY
from beruang.data.schemas import TimeBucket, TimeGroup
from beruang.data.store import Ledger, Query


def nett_query(ledger: Ledger, group: Union[TimeGroup, TimeBucket], ignore_category: str) -> Query:
    h = ledger.header
    bucket = group.bucket if isinstance(group, TimeGroup) else group
    return (
        ledger.query()
        .filter(lambda df: df[h.category] != ignore_category)
        # date first, then account, then currency
        .sort(h.date, h.account, h.currency)
        .group_by_dynamic(h.date, bucket, by=[h.account, h.currency])
        .agg(**{h.cost: (h.cost, "sum")})
    )


def nett(
    ledger: Ledger,
    group: Union[TimeGroup, TimeBucket] = TimeGroup.MONTHLY,
    ignore_category: str = TRANSFER_CATEGORY,
) -> pd.DataFrame:
    """Sum of cost per (window start, account, currency).

    Rows whose category equals `ignore_category` are removed before
    grouping. Windows without rows are not emitted.
    """
    h = ledger.header
    df = nett_query(ledger, group, ignore_category).collect()
    df = df[[h.date, h.account, h.currency, h.cost]]
    return df.astype({h.cost: "int64"})
