"""
Error types raised while building and querying a ledger.
"""
from __future__ import annotations

from pathlib import Path


class IngestError(ValueError):
    """A workbook could not be turned into a ledger. Aborts the run."""


class NoSheetsError(IngestError):
    def __init__(self) -> None:
        super().__init__("No sheets requested")


class MissingSheetError(IngestError):
    def __init__(self, sheet: str, available: list[str] | None = None) -> None:
        self.sheet = sheet
        msg = f"Sheet not found: '{sheet}'"
        if available:
            msg += f" (available: {', '.join(available)})"
        super().__init__(msg)


class EmptyHeaderError(IngestError):
    def __init__(self, sheet: str) -> None:
        self.sheet = sheet
        super().__init__(f"Sheet '{sheet}' has no header row")


class HeaderMismatchError(IngestError):
    def __init__(self, sheet: str, expected: list[str], found: list[str]) -> None:
        self.sheet = sheet
        self.expected = expected
        self.found = found
        super().__init__(
            f"Sheet '{sheet}' columns {found} do not match {expected}"
        )


class UnreadableWorkbookError(IngestError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read workbook {self.path}: {reason}")


class SnapshotError(IngestError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read snapshot {self.path}: {reason}")


class CoercionError(ValueError):
    """A cell does not fit its column type. Turned into a null, never raised to callers."""


class QueryError(ValueError):
    """Malformed query: unknown column or unusable time bucket."""
