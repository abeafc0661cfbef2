"""Tests for calendar-aware window assignment."""

import pandas as pd
import pytest

from beruang.data.errors import QueryError
from beruang.data.schemas import Duration, TimeBucket, TimeGroup
from beruang.data.windows import assign_windows, truncate


def _dates(*iso):
    return pd.Series(pd.to_datetime(list(iso)))


def _starts(series):
    return [d.strftime("%Y-%m-%d") for d in series]


class TestTruncate:
    def test_month(self):
        out = truncate(_dates("2024-01-05", "2024-01-31", "2024-02-29", "1969-12-15"), Duration(months=1))
        assert _starts(out) == ["2024-01-01", "2024-01-01", "2024-02-01", "1969-12-01"]

    def test_four_months_align_to_jan_may_sep(self):
        out = truncate(_dates("2024-01-05", "2024-04-30", "2024-06-10", "2024-12-31"), Duration(months=4))
        assert _starts(out) == ["2024-01-01", "2024-01-01", "2024-05-01", "2024-09-01"]

    def test_week_starts_monday(self):
        out = truncate(_dates("2024-01-01", "2024-01-05", "2024-01-07", "2024-01-08"), Duration(weeks=1))
        assert _starts(out) == ["2024-01-01", "2024-01-01", "2024-01-01", "2024-01-08"]

    def test_two_weeks(self):
        out = truncate(_dates("2024-01-05", "2024-01-14", "2024-01-15", "2024-01-20"), Duration(weeks=2))
        assert _starts(out) == ["2024-01-01", "2024-01-01", "2024-01-15", "2024-01-15"]

    def test_days_anchor_at_epoch(self):
        out = truncate(_dates("1970-01-01", "1970-01-03", "1970-01-04", "1969-12-31"), Duration(days=3))
        assert _starts(out) == ["1970-01-01", "1970-01-01", "1970-01-04", "1969-12-29"]

    def test_zero_step(self):
        with pytest.raises(QueryError):
            truncate(_dates("2024-01-05"), Duration())

    def test_mixed_step(self):
        with pytest.raises(QueryError):
            truncate(_dates("2024-01-05"), Duration(months=1, weeks=1))


class TestAssignWindows:
    @pytest.mark.parametrize("group", list(TimeGroup))
    def test_presets_assign_each_row_once(self, group):
        dates = _dates(*pd.date_range("2023-11-20", "2024-03-10", freq="3D").strftime("%Y-%m-%d"))
        out = assign_windows(dates, group.bucket)
        assert sorted(out["row"]) == list(dates.index)

    def test_start_contains_date(self):
        dates = _dates("2024-01-05", "2024-02-01", "2024-06-30")
        out = assign_windows(dates, TimeGroup.MONTHLY.bucket)
        assert _starts(out.sort_values("row")["start"]) == ["2024-01-01", "2024-02-01", "2024-06-01"]

    def test_overlapping_windows(self):
        bucket = TimeBucket.parse("1w", "2w")
        out = assign_windows(_dates("2024-01-10"), bucket)
        assert sorted(_starts(out["start"])) == ["2024-01-01", "2024-01-08"]

    def test_gaps_drop_rows(self):
        bucket = TimeBucket.parse("2w", "1w")
        out = assign_windows(_dates("2024-01-03", "2024-01-10"), bucket)
        assert list(out["row"]) == [0]
        assert _starts(out["start"]) == ["2024-01-01"]

    def test_offset_shifts_boundaries(self):
        bucket = TimeBucket.parse("1mo", "1mo", "1w")
        out = assign_windows(_dates("2024-01-05", "2024-01-09"), bucket)
        assert _starts(out.sort_values("row")["start"]) == ["2023-12-08", "2024-01-08"]

    def test_empty(self):
        out = assign_windows(pd.Series([], dtype="datetime64[ns]"), TimeGroup.WEEKLY.bucket)
        assert out.empty
        assert list(out.columns) == ["row", "start"]

    def test_zero_period(self):
        with pytest.raises(QueryError):
            assign_windows(_dates("2024-01-05"), TimeBucket(Duration(weeks=1), Duration()))
