"""
Calendar-aware window assignment for dynamic time grouping.
"""
from __future__ import annotations

import math

import pandas as pd

from beruang.data.errors import QueryError
from beruang.data.schemas import Duration, TimeBucket

_EPOCH = pd.Timestamp("1970-01-01")
# Week windows start on Monday; this is the Monday on or before the epoch.
_WEEK_ANCHOR = pd.Timestamp("1969-12-29")


def _check(every: Duration) -> None:
    if every.is_zero:
        raise QueryError("Window step must be non-zero")
    if every.months and every.total_days:
        raise QueryError(f"Window step mixes months with weeks/days: {every}")


def truncate(dates: pd.Series, every: Duration) -> pd.Series:
    """Latest window start on or before each date, for windows stepping by `every`."""
    _check(every)
    if every.months:
        idx = (dates.dt.year - 1970) * 12 + (dates.dt.month - 1)
        start = idx - idx % every.months
        return pd.to_datetime(pd.DataFrame({
            "year": 1970 + start // 12,
            "month": start % 12 + 1,
            "day": 1,
        }, index=dates.index))

    anchor = _WEEK_ANCHOR if every.weeks else _EPOCH
    step = every.total_days
    days = (dates.dt.normalize() - anchor).dt.days
    return anchor + pd.to_timedelta(days - days % step, unit="D")


def _max_overlap(bucket: TimeBucket) -> int:
    """How many windows back from the latest one can still contain a date."""
    every, period = bucket.every, bucket.period
    if period.is_zero:
        raise QueryError("Window period must be non-zero")
    if every.months:
        if period.total_days:
            # calendar months have no fixed day length; bound with the shortest month
            return math.ceil((period.months * 31 + period.total_days) / (every.months * 28))
        return math.ceil(period.months / every.months)
    if period.months:
        return math.ceil((period.months * 31 + period.total_days) / every.total_days)
    return math.ceil(period.total_days / every.total_days)


def assign_windows(dates: pd.Series, bucket: TimeBucket) -> pd.DataFrame:
    """Pair each row with every window [start, start + period) containing its date.

    Returns a frame with columns `row` (the original index label) and
    `start`. With every == period each row appears exactly once; with a
    period shorter than the step, rows in the gaps appear not at all.
    """
    every, period, offset = bucket.every, bucket.period, bucket.offset
    if dates.empty:
        return pd.DataFrame({"row": pd.Series([], dtype=dates.index.dtype),
                             "start": pd.Series([], dtype="datetime64[ns]")})

    shifted = dates - offset.to_offset() if not offset.is_zero else dates
    latest = truncate(shifted, every)
    if not offset.is_zero:
        latest = latest + offset.to_offset()

    step = every.to_offset()
    span = period.to_offset()
    pieces = []
    start = latest
    for k in range(_max_overlap(bucket)):
        if k:
            start = start - step
        inside = ((start <= dates) & (dates < start + span)).to_numpy()
        pieces.append(pd.DataFrame({"row": dates.index[inside], "start": start.to_numpy()[inside]}))
    return pd.concat(pieces, ignore_index=True)
