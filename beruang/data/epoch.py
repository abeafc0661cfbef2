"""
Spreadsheet serial dates → day offsets from the Unix epoch.
"""
from __future__ import annotations

import datetime as dt
import math

import pandas as pd
from openpyxl.utils.datetime import WINDOWS_EPOCH, to_excel

# Spreadsheets count days from 1900, the ledger counts from 1970-01-01.
# Seventy years of 365.25 days, plus one for the serial that starts at 1.
_EPOCH_SHIFT = 1 + 70 * 365.25

# Whole days a datetime64[ns] column can hold: 1677-09-22 .. 2262-04-11.
MIN_DAY_OFFSET = -106751
MAX_DAY_OFFSET = 106751


def to_day_offset(serial: float) -> int:
    """Serial date number → whole days since 1970-01-01.

    The 365.25 average year is not exact: serials with a time-of-day part
    of half a day or more land on the following day.
    """
    return math.floor(serial - _EPOCH_SHIFT)


def serial_of(value: dt.date | dt.datetime) -> float:
    """1900-system serial of a date cell, whatever system the workbook uses."""
    return float(to_excel(value, epoch=WINDOWS_EPOCH))


def duration_ms(value: dt.timedelta) -> int:
    return int(round(value.total_seconds() * 1000))


def to_timestamps(offsets: pd.Series) -> pd.Series:
    """Vectorized day offsets → datetime64 column."""
    return pd.to_datetime(offsets.astype("int64"), unit="D")
