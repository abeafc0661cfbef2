"""
ExcelWriter — builds a styled xlsx workbook from ledger frames.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from beruang.data import money
from beruang.excel.styles import TITLE_FONT, SUBTITLE_FONT
from beruang.excel.formatters import format_header_row, format_data_cell, auto_column_width


ColSpec = tuple[str, str, str]  # (key, col_type, label)


def column_specs(df: pd.DataFrame, money_columns: set[str]) -> list[ColSpec]:
    """Derive (key, col_type, label) from a frame's dtypes."""
    specs = []
    for col in df.columns:
        if col in money_columns:
            specs.append((col, "money", col))
        elif pd.api.types.is_datetime64_any_dtype(df[col]):
            specs.append((col, "date", col))
        else:
            specs.append((col, "text", col))
    return specs


class ExcelWriter:
    """Fluent builder for styled Excel workbooks."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._first_sheet = True

    def add_sheet(self, title: str) -> Worksheet:
        """Create a new worksheet (re-uses the default sheet for the first call)."""
        if self._first_sheet:
            ws = self.wb.active
            ws.title = title
            self._first_sheet = False
        else:
            ws = self.wb.create_sheet(title=title)
        return ws

    def write_title(self, ws: Worksheet, title: str, subtitle: str) -> int:
        """Write title + subtitle rows. Returns next available row."""
        ws.cell(row=1, column=1).value = title
        ws.cell(row=1, column=1).font = TITLE_FONT
        ws.cell(row=2, column=1).value = subtitle
        ws.cell(row=2, column=1).font = SUBTITLE_FONT
        return 4

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[ColSpec],
        data: pd.DataFrame,
        freeze: bool = True,
    ) -> int:
        """Write headers + data rows. Money columns hold integer cents.

        Returns the row number after the last data row.
        """
        for col_num, (_, _, label) in enumerate(columns, 1):
            ws.cell(row=start_row, column=col_num).value = label
        format_header_row(ws, start_row, len(columns))

        row = start_row + 1
        for record in data.to_dict("records"):
            for col_num, (key, col_type, _) in enumerate(columns, 1):
                val = record.get(key)
                if col_type == "money":
                    val = money.to_decimal(val)
                elif col_type == "date":
                    val = val.date()
                format_data_cell(ws, row, col_num, val, col_type)
            row += 1

        auto_column_width(ws)
        if freeze:
            ws.freeze_panes = f"A{start_row + 1}"
        return row

    def save(self, path: str | Path) -> Path:
        """Save the workbook to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
