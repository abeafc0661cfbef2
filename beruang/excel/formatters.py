"""
Reusable Excel cell/row formatting helpers.
"""
from __future__ import annotations

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from beruang.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, NEGATIVE_FONT,
    THIN_BORDER, ALTERNATE_FILL,
    CENTER, LEFT, RIGHT,
    MONEY_FORMAT, DATE_FORMAT,
)


# ---------------------------------------------------------------------------
# Header row
# ---------------------------------------------------------------------------

def format_header_row(ws: Worksheet, row_num: int, num_cols: int) -> None:
    """Apply header styling to an entire row."""
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


# ---------------------------------------------------------------------------
# Data cell
# ---------------------------------------------------------------------------

def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value,
    col_type: str = "text",
) -> None:
    """Write and format a single data cell. col_type: text, money, date."""
    cell = ws.cell(row=row_num, column=col_num)
    cell.value = value
    cell.border = THIN_BORDER
    cell.alignment = RIGHT if col_type in ("money", "date") else LEFT
    cell.font = DATA_FONT

    if col_type == "money":
        cell.number_format = MONEY_FORMAT
        if value is not None and value < 0:
            cell.font = NEGATIVE_FONT
    elif col_type == "date":
        cell.number_format = DATE_FORMAT

    if row_num % 2 == 0:
        cell.fill = ALTERNATE_FILL


# ---------------------------------------------------------------------------
# Auto column width
# ---------------------------------------------------------------------------

def auto_column_width(ws: Worksheet, min_width: int = 10, max_width: int = 55) -> None:
    """Auto-fit column widths based on content length."""
    for column in ws.columns:
        max_length = 0
        column_letter = get_column_letter(column[0].column)
        for cell in column:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))
        adjusted = min(max(max_length + 2, min_width), max_width)
        ws.column_dimensions[column_letter].width = adjusted
