"""Excel styling, formatting, and writing utilities."""
from .formatters import format_header_row, format_data_cell, auto_column_width
from .writer import ExcelWriter, column_specs
