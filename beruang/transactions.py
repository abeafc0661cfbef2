"""
Single-transaction append utility: one record in, one CSV row out.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import asdict, dataclass
from pathlib import Path

import pandas as pd

from beruang.config import CATEGORIES, DEFAULT_ACCOUNT, DEFAULT_CURRENCY
from beruang.data import money


@dataclass
class Transaction:
    date: dt.date
    details: str
    account: str
    category: str
    participant: str
    currency: str
    total: str           # "123.45"

    @classmethod
    def from_cents(
        cls,
        total: int,
        category: str,
        participant: str,
        details: str,
        date: dt.date,
        account: str = DEFAULT_ACCOUNT,
        currency: str = DEFAULT_CURRENCY,
    ) -> "Transaction":
        """Build a record from an integer total in cents (e.g. 12345 → "123.45")."""
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: '{category}'. Valid: {CATEGORIES}")
        return cls(
            date=date,
            details=details,
            account=account,
            category=category,
            participant=participant,
            currency=currency,
            total=money.encode(total),
        )


def append_transaction(txn: Transaction, path: Path) -> Path:
    """Append one row; the header is written only when the file is new."""
    path = Path(path)
    exists = path.exists()
    if not exists:
        path.parent.mkdir(parents=True, exist_ok=True)
    row = asdict(txn)
    row["date"] = txn.date.isoformat()
    pd.DataFrame([row]).to_csv(path, mode="a", header=not exists, index=False)
    return path
