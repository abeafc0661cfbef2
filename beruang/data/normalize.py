"""
Cell coercion against a schema and conversion of coerced rows to a typed frame.
"""
from __future__ import annotations

import datetime as dt
import math
from typing import Any, Sequence

import numpy as np
import pandas as pd

from beruang.data import epoch, money
from beruang.data.errors import CoercionError
from beruang.data.schemas import Schema, SemanticType


# ---------------------------------------------------------------------------
# Single cells
# ---------------------------------------------------------------------------

def _is_number(value: Any) -> bool:
    # bool is an int subclass; a TRUE/FALSE cell is never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _day_offset(serial: float) -> int:
    if isinstance(serial, float) and not math.isfinite(serial):
        raise CoercionError(f"non-finite date serial {serial}")
    offset = epoch.to_day_offset(serial)
    if not epoch.MIN_DAY_OFFSET <= offset <= epoch.MAX_DAY_OFFSET:
        raise CoercionError(f"date serial out of range: {serial}")
    return offset


def coerce_cell(value: Any, kind: SemanticType) -> Any:
    """Convert one raw openpyxl cell value to its column type.

    DATE → day offset (int), DECIMAL → cents (int), TEXT → str.
    Raises CoercionError for empty cells, booleans, durations, mismatches
    and amounts that do not fit Decimal(10, 2).
    """
    if value is None:
        raise CoercionError("empty cell")
    if isinstance(value, (bool, dt.timedelta, dt.time)):
        raise CoercionError(f"unsupported cell type {type(value).__name__}")

    if kind is SemanticType.DATE:
        if isinstance(value, (dt.datetime, dt.date)):
            return _day_offset(epoch.serial_of(value))
        if _is_number(value):
            return _day_offset(value)
    elif kind is SemanticType.DECIMAL:
        if _is_number(value):
            if isinstance(value, float) and not math.isfinite(value):
                raise CoercionError(f"non-finite amount {value}")
            cents = money.decode(value)
            if abs(cents) >= money.MAX_CENTS:
                raise CoercionError(f"amount out of range: {value}")
            return cents
    elif kind is SemanticType.TEXT:
        if isinstance(value, str):
            return value

    raise CoercionError(f"{type(value).__name__} cell in {kind.value} column")


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

def is_blank(cells: Sequence[Any]) -> bool:
    return all(c is None or (isinstance(c, str) and c.strip() == "") for c in cells)


def coerce_row(cells: Sequence[Any], schema: Schema) -> list[Any]:
    """Coerce a row positionally; cells that do not fit become None.

    Short rows are padded with None, cells past the header are ignored.
    """
    out = []
    for i, kind in enumerate(schema.types):
        value = cells[i] if i < len(cells) else None
        try:
            out.append(coerce_cell(value, kind))
        except CoercionError:
            out.append(None)
    return out


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------

def rows_to_frame(rows: list[list[Any]], schema: Schema) -> pd.DataFrame:
    """Build the typed ledger frame from coerced rows, dropping any row with a null.

    DATE → datetime64, DECIMAL → int64 cents, TEXT → object.
    """
    df = pd.DataFrame(rows, columns=schema.names, dtype=object)
    df = df.dropna(how="any").reset_index(drop=True)
    for name, kind in schema.columns:
        if kind is SemanticType.DATE:
            df[name] = epoch.to_timestamps(df[name])
        elif kind is SemanticType.DECIMAL:
            df[name] = df[name].astype(np.int64)
        else:
            df[name] = df[name].astype(object)
    return df
