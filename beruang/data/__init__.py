"""Workbook ingestion, typed schema, and deferred query engine."""
from .errors import (
    IngestError, NoSheetsError, MissingSheetError, EmptyHeaderError,
    HeaderMismatchError, UnreadableWorkbookError, SnapshotError, CoercionError, QueryError,
)
from .loader import ingest, ingest_file, load_snapshot, IngestResult
from .schemas import Header, DEFAULT_HEADER, Schema, SemanticType, Duration, TimeBucket, TimeGroup
from .store import Ledger, Query
