"""
Ledger — immutable transaction table with deferred query composition.

A Query records its steps and runs them once, in order, on collect().
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

import pandas as pd

from beruang.data.errors import QueryError
from beruang.data.loader import ingest_file, load_snapshot
from beruang.data.schemas import DEFAULT_HEADER, Header, TimeBucket
from beruang.data.windows import assign_windows

Step = Callable[[pd.DataFrame], pd.DataFrame]
Predicate = Callable[[pd.DataFrame], pd.Series]


def _require(df: pd.DataFrame, columns: Iterable[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise QueryError(f"Unknown column(s): {', '.join(missing)}")


class Query:
    """Lazily composed operations over a frame."""

    def __init__(self, frame: pd.DataFrame, steps: tuple[Step, ...] = ()) -> None:
        self._frame = frame
        self._steps = steps

    def _then(self, step: Step) -> "Query":
        return Query(self._frame, self._steps + (step,))

    # ------------------------------------------------------------------
    # Row / column operations
    # ------------------------------------------------------------------

    def filter(self, predicate: Predicate) -> "Query":
        return self._then(lambda df: df[predicate(df)])

    def select(self, *columns: str) -> "Query":
        def step(df: pd.DataFrame) -> pd.DataFrame:
            _require(df, columns)
            return df[list(columns)]
        return self._then(step)

    def sort(self, *columns: str) -> "Query":
        """Stable sort; the first column is the dominant key."""
        def step(df: pd.DataFrame) -> pd.DataFrame:
            _require(df, columns)
            return df.sort_values(list(columns), kind="stable")
        return self._then(step)

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def group_by(self, *keys: str) -> "GroupBy":
        return GroupBy(self, list(keys))

    def group_by_dynamic(self, index: str, bucket: TimeBucket, by: Iterable[str] = ()) -> "GroupBy":
        """Group by time window of `index` (calendar-aware), then by `by`.

        The output's `index` column holds each window's start.
        """
        def step(df: pd.DataFrame) -> pd.DataFrame:
            _require(df, [index])
            windows = assign_windows(df[index], bucket)
            out = df.loc[windows["row"]].reset_index(drop=True)
            out[index] = windows["start"].to_numpy()
            return out
        return GroupBy(self._then(step), [index, *by])

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def collect(self) -> pd.DataFrame:
        """Run every step once and return the result."""
        df = self._frame
        for step in self._steps:
            df = step(df)
        return df.reset_index(drop=True)


class GroupBy:
    def __init__(self, query: Query, keys: list[str]) -> None:
        self._query = query
        self._keys = keys

    def agg(self, **named: tuple[str, str | Callable]) -> Query:
        """Named aggregations, e.g. agg(total=("Jumlah", "sum")). Output sorted by key."""
        keys = self._keys

        def step(df: pd.DataFrame) -> pd.DataFrame:
            _require(df, keys + [col for col, _ in named.values()])
            return df.groupby(keys, sort=True, observed=True).agg(**named).reset_index()
        return self._query._then(step)


class Ledger:
    """Typed transaction table (date, details, category, account, currency, cost)."""

    def __init__(self, frame: pd.DataFrame, header: Header = DEFAULT_HEADER, dropped: int = 0) -> None:
        self.frame = frame
        self.header = header
        self.dropped = dropped

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_workbook(
        cls,
        path: Path | str,
        sheets: Optional[Iterable[str]] = None,
        header: Header = DEFAULT_HEADER,
    ) -> "Ledger":
        result = ingest_file(path, sheets, header)
        return cls(result.frame, header, dropped=result.dropped)

    @classmethod
    def load(cls, path: Path | str, header: Header = DEFAULT_HEADER) -> "Ledger":
        """Load a snapshot written by the parquet or CSV sink."""
        return cls(load_snapshot(path, header), header)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def query(self) -> Query:
        return Query(self.frame)

    def __len__(self) -> int:
        return len(self.frame)

    def accounts(self) -> list[str]:
        if self.frame.empty:
            return []
        return sorted(self.frame[self.header.account].dropna().unique().tolist())

    def date_range(self) -> str:
        """Human-readable date range string."""
        if self.frame.empty:
            return "N/A"
        dates = self.frame[self.header.date]
        return f"{dates.min():%Y-%m-%d} to {dates.max():%Y-%m-%d}"
