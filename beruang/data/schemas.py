"""
Column schema, header configuration, and time bucket definitions.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

import pandas as pd

from beruang import config
from beruang.data.errors import EmptyHeaderError, QueryError


class SemanticType(str, Enum):
    DATE = "date"
    DECIMAL = "decimal"      # precision 10, scale 2, stored as integer cents
    TEXT = "text"


@dataclass(frozen=True)
class Header:
    """Names of the six ledger columns, plus which header names carry dates and money."""
    date: str = config.DATE_COLUMN
    details: str = config.DETAILS_COLUMN
    category: str = config.CATEGORY_COLUMN
    account: str = config.ACCOUNT_COLUMN
    currency: str = config.CURRENCY_COLUMN
    cost: str = config.COST_COLUMN
    date_columns: frozenset = field(default_factory=lambda: frozenset(config.DATE_COLUMNS))
    cost_columns: frozenset = field(default_factory=lambda: frozenset(config.COST_COLUMNS))


DEFAULT_HEADER = Header()


def infer_type(name: str, header: Header = DEFAULT_HEADER) -> SemanticType:
    """Expected type of a column from its header name."""
    if name in header.date_columns:
        return SemanticType.DATE
    if name in header.cost_columns:
        return SemanticType.DECIMAL
    return SemanticType.TEXT


@dataclass(frozen=True)
class Schema:
    """Ordered column name → semantic type."""
    columns: tuple[tuple[str, SemanticType], ...]

    @classmethod
    def from_header(cls, cells: Iterable, sheet: str, header: Header = DEFAULT_HEADER) -> "Schema":
        names = [None if c is None or str(c).strip() == "" else str(c).strip() for c in cells]
        while names and names[-1] is None:
            names.pop()
        if not names:
            raise EmptyHeaderError(sheet)
        names = [n if n is not None else f"Unnamed: {i}" for i, n in enumerate(names)]
        return cls(tuple((n, infer_type(n, header)) for n in names))

    @property
    def names(self) -> list[str]:
        return [n for n, _ in self.columns]

    @property
    def types(self) -> list[SemanticType]:
        return [t for _, t in self.columns]

    def __len__(self) -> int:
        return len(self.columns)


# ---------------------------------------------------------------------------
# Calendar durations and time buckets
# ---------------------------------------------------------------------------

_DURATION_RE = re.compile(r"(\d+)(mo|w|d)")


@dataclass(frozen=True)
class Duration:
    """Calendar duration: months advance the month field, not a fixed day count."""
    months: int = 0
    weeks: int = 0
    days: int = 0

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Parse "4mo", "2w", "3d", "1mo2w" or "0"."""
        text = text.strip()
        if text == "0":
            return cls()
        parts = _DURATION_RE.findall(text)
        if not parts or "".join(n + u for n, u in parts) != text:
            raise QueryError(f"Invalid duration: {text!r}")
        values = {"mo": 0, "w": 0, "d": 0}
        for n, unit in parts:
            values[unit] += int(n)
        return cls(months=values["mo"], weeks=values["w"], days=values["d"])

    @property
    def is_zero(self) -> bool:
        return self.months == 0 and self.weeks == 0 and self.days == 0

    @property
    def total_days(self) -> int:
        return self.weeks * 7 + self.days

    def to_offset(self) -> pd.DateOffset:
        return pd.DateOffset(months=self.months, weeks=self.weeks, days=self.days)

    def __str__(self) -> str:
        out = "".join(f"{n}{u}" for n, u in ((self.months, "mo"), (self.weeks, "w"), (self.days, "d")) if n)
        return out or "0"


@dataclass(frozen=True)
class TimeBucket:
    """Windows start every `every` from `offset` and each spans `period`."""
    every: Duration
    period: Duration
    offset: Duration = Duration()

    @classmethod
    def parse(cls, every: str, period: Optional[str] = None, offset: str = "0") -> "TimeBucket":
        return cls(Duration.parse(every), Duration.parse(period or every), Duration.parse(offset))


class TimeGroup(str, Enum):
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    BIWEEKLY = "biweekly"
    WEEKLY = "weekly"

    @property
    def bucket(self) -> TimeBucket:
        return _PRESETS[self]


# "Quarterly" is a four month window.
_PRESETS = {
    TimeGroup.QUARTERLY: TimeBucket.parse("4mo"),
    TimeGroup.MONTHLY: TimeBucket.parse("1mo"),
    TimeGroup.BIWEEKLY: TimeBucket.parse("2w"),
    TimeGroup.WEEKLY: TimeBucket.parse("1w"),
}
