"""artselect package."""

from .bulk_fill import BulkFillOrchestrator
from .cursor import DEFAULT_PAGE_SIZE, PageCursor
from .errors import ArtselectError, BulkCountError, RecordSourceError, SessionBusyError
from .helpers import parse_count, safe_request, validate_count
from .models import Artwork, FillReport, Page
from .selection import SelectionStore, toggle_select_all_on_page
from .session import SelectionSession
from .sources import ArticRecordSource, InMemoryRecordSource, RecordSource

__all__ = [
    "BulkFillOrchestrator",
    "DEFAULT_PAGE_SIZE",
    "PageCursor",
    "ArtselectError",
    "BulkCountError",
    "RecordSourceError",
    "SessionBusyError",
    "parse_count",
    "safe_request",
    "validate_count",
    "Artwork",
    "FillReport",
    "Page",
    "SelectionStore",
    "toggle_select_all_on_page",
    "SelectionSession",
    "ArticRecordSource",
    "InMemoryRecordSource",
    "RecordSource",
]
