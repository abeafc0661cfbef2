"""Shared fixtures: in-memory workbooks, saved xlsx files, and typed ledger frames."""

from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest
from openpyxl import Workbook

from beruang.data.store import Ledger

HEADER_ROW = ["Tarikh", "Keterangan", "Kategori", "Akaun", "Wang", "Jumlah"]


def build_workbook(sheets: dict) -> Workbook:
    """sheets: name -> list of rows (first row is the header)."""
    wb = Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(title=name)
        for row in rows:
            ws.append(row)
    return wb


@pytest.fixture
def make_workbook():
    return build_workbook


@pytest.fixture
def write_workbook(tmp_path):
    def _write(sheets: dict, name: str = "Kewangan.xlsx") -> Path:
        path = tmp_path / name
        build_workbook(sheets).save(path)
        return path
    return _write


@pytest.fixture
def sample_sheets():
    return {
        "Jan": [
            HEADER_ROW,
            [datetime(2024, 1, 5), "Nasi lemak", "Makan", "A", "MYR", 10.0],
            [datetime(2024, 1, 20), "Roti canai", "Makan", "A", "MYR", 5.0],
            [datetime(2024, 1, 21), "Gaji", "Upah", "B", "USD", 1234.56],
        ],
        "Feb": [
            HEADER_ROW,
            [datetime(2024, 2, 1), "Ke akaun simpanan", "Pertukaran", "A", "MYR", 100.0],
            [datetime(2024, 2, 3), "Teksi", "Pengangkutan", "A", "MYR", -12.3],
        ],
    }


def make_frame(rows: list[tuple]) -> pd.DataFrame:
    """rows: (iso date, details, category, account, currency, cents)."""
    df = pd.DataFrame(rows, columns=HEADER_ROW)
    df["Tarikh"] = pd.to_datetime(df["Tarikh"])
    df["Jumlah"] = df["Jumlah"].astype("int64")
    return df


@pytest.fixture
def ledger_from_rows():
    def _ledger(rows: list[tuple]) -> Ledger:
        return Ledger(make_frame(rows))
    return _ledger
