"""
Output sinks for finished frames: parquet snapshot, CSV, styled xlsx, console.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path

import pandas as pd

from beruang.data import money
from beruang.data.schemas import DEFAULT_HEADER, Header
from beruang.excel import ExcelWriter, column_specs


class OutputFormat(str, Enum):
    PARQUET = "parquet"
    CSV = "csv"
    XLSX = "xlsx"


def _display(df: pd.DataFrame, money_columns: set[str]) -> pd.DataFrame:
    """Copy with dates as ISO strings and cents as "123.45"."""
    out = df.copy()
    for col in out.columns:
        if col in money_columns:
            out[col] = out[col].map(money.encode)
        elif pd.api.types.is_datetime64_any_dtype(out[col]):
            out[col] = out[col].dt.strftime("%Y-%m-%d")
    return out


def write_parquet(df: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(path, index=False)
    return path


def write_csv(df: pd.DataFrame, path: Path, header: Header = DEFAULT_HEADER) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _display(df, set(header.cost_columns)).to_csv(path, index=False)
    return path


def write_xlsx(df: pd.DataFrame, path: Path, title: str, header: Header = DEFAULT_HEADER) -> Path:
    writer = ExcelWriter()
    ws = writer.add_sheet("Ledger")
    row = writer.write_title(ws, title, f"{len(df):,} transactions")
    writer.write_table(ws, row, column_specs(df, set(header.cost_columns)), df)
    return writer.save(path)


def write_output(df: pd.DataFrame, path: Path, fmt: OutputFormat, header: Header = DEFAULT_HEADER) -> Path:
    if fmt is OutputFormat.PARQUET:
        return write_parquet(df, path)
    if fmt is OutputFormat.CSV:
        return write_csv(df, path, header)
    return write_xlsx(df, path, path.stem, header)


def render(df: pd.DataFrame, money_columns: set[str]) -> str:
    """Fixed-width console table."""
    if df.empty:
        return "(no rows)"
    return _display(df, money_columns).to_string(index=False)
