"""
Workbook ingestion (one sheet per month) and snapshot loading.
"""
from __future__ import annotations

import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook

from beruang.config import MONTH_SHEETS
from beruang.data import money
from beruang.data.errors import (
    HeaderMismatchError, IngestError, MissingSheetError, NoSheetsError, SnapshotError,
    UnreadableWorkbookError,
)
from beruang.data.normalize import coerce_row, is_blank, rows_to_frame
from beruang.data.schemas import DEFAULT_HEADER, Header, Schema


@dataclass
class IngestResult:
    frame: pd.DataFrame
    rows_read: int
    dropped: int


# ---------------------------------------------------------------------------
# Sheet helpers
# ---------------------------------------------------------------------------

def _column_order(schema: Schema, cells: tuple, sheet: str, header: Header) -> Optional[list[int]]:
    """Positions that bring a later sheet's columns into the first sheet's order.

    None when the sheet already matches.
    """
    other = Schema.from_header(cells, sheet, header)
    if other.names == schema.names:
        return None
    if sorted(other.names) != sorted(schema.names):
        raise HeaderMismatchError(sheet, schema.names, other.names)
    return [other.names.index(n) for n in schema.names]


def available_month_sheets(workbook: Workbook) -> list[str]:
    """Month sheets present in the workbook, in calendar order."""
    return [s for s in MONTH_SHEETS if s in workbook.sheetnames]


# ---------------------------------------------------------------------------
# Ingestion
# ---------------------------------------------------------------------------

def ingest(
    workbook: Workbook,
    sheet_names: Iterable[str],
    header: Header = DEFAULT_HEADER,
) -> IngestResult:
    """Concatenate the named sheets into one typed frame.

    The first sheet's header row fixes the schema; later sheets must carry
    the same column names (reordered if needed) and their header rows are
    discarded. Rows with any cell that does not fit its column are dropped.
    """
    sheet_names = list(sheet_names)
    if not sheet_names:
        raise NoSheetsError()
    for name in sheet_names:
        if name not in workbook.sheetnames:
            raise MissingSheetError(name, workbook.sheetnames)

    schema: Optional[Schema] = None
    rows: list[list] = []
    rows_read = 0
    for i, name in enumerate(sheet_names, 1):
        it = workbook[name].iter_rows(values_only=True)
        head = next(it, None) or ()
        if schema is None:
            schema = Schema.from_header(head, name, header)
            order = None
        else:
            order = _column_order(schema, head, name, header)

        count = 0
        for cells in it:
            if is_blank(cells):
                continue
            if order is not None:
                cells = [cells[j] if j < len(cells) else None for j in order]
            rows.append(coerce_row(cells, schema))
            count += 1
        rows_read += count
        print(f"  [{i}/{len(sheet_names)}] {name}: {count:,} rows")

    frame = rows_to_frame(rows, schema)
    dropped = rows_read - len(frame)
    if dropped:
        print(f"  Dropped {dropped:,} incomplete rows")
    print(f"  Total: {len(frame):,} rows from {len(sheet_names)} sheets")
    return IngestResult(frame=frame, rows_read=rows_read, dropped=dropped)


def ingest_file(
    path: Path | str,
    sheet_names: Optional[Iterable[str]] = None,
    header: Header = DEFAULT_HEADER,
) -> IngestResult:
    """Open an xlsx workbook and ingest it. No sheet names → every month sheet present."""
    path = Path(path)
    print(f"Loading workbook {path.name}...")
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise UnreadableWorkbookError(path, str(exc)) from exc
    try:
        if sheet_names is None:
            sheet_names = available_month_sheets(wb)
        return ingest(wb, sheet_names, header)
    finally:
        wb.close()


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------

def load_snapshot(path: Path | str, header: Header = DEFAULT_HEADER) -> pd.DataFrame:
    """Read a frame written by the parquet or CSV sink."""
    path = Path(path)
    if not path.exists():
        raise IngestError(f"Snapshot not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in (".parquet", ".csv"):
        raise IngestError(f"Unsupported snapshot format: {path.name}")
    try:
        if suffix == ".parquet":
            return pd.read_parquet(path)
        return _read_csv_snapshot(path, header)
    except (OSError, ValueError, OverflowError) as exc:
        # CoercionError and pyarrow's ArrowInvalid are ValueErrors
        raise SnapshotError(path, str(exc)) from exc


def _read_csv_snapshot(path: Path, header: Header) -> pd.DataFrame:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    for col in df.columns:
        if col in header.date_columns:
            df[col] = pd.to_datetime(df[col], format="%Y-%m-%d")
        elif col in header.cost_columns:
            df[col] = df[col].map(money.parse).astype("int64")
    return df
