"""Event surface tying the cursor, the selection store and bulk fill together.

One :class:`SelectionSession` is owned per user session.  The rendering layer
forwards its events here and reads the display contract back
(:meth:`SelectionSession.rows`, :meth:`SelectionSession.page_frame`,
``loading`` and ``total_records``).
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

import pandas as pd

from .bulk_fill import BulkFillOrchestrator
from .cursor import PageCursor
from .errors import SessionBusyError
from .helpers import parse_count
from .models import Artwork, FillReport, Page
from .selection import RecordLike, SelectionStore, toggle_select_all_on_page
from .sources.base import RecordSource
from .tracer import trace

logger = logging.getLogger(__name__)

DISPLAY_COLUMNS = [
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
]


def records_frame(records: List[Artwork]) -> pd.DataFrame:
    return pd.DataFrame([r.model_dump() for r in records], columns=DISPLAY_COLUMNS)


class SelectionSession:
    def __init__(self, source: RecordSource, page_size: Optional[int] = None) -> None:
        self.source = source
        self.store = SelectionStore()
        self.cursor = PageCursor(source, page_size)
        self.bulk = BulkFillOrchestrator(source, self.store, self.cursor.page_size)
        self.all_page_selected = False
        self._fetch_lock = threading.Lock()

    @contextmanager
    def _fetching(self, what: str) -> Iterator[None]:
        if not self._fetch_lock.acquire(blocking=False):
            trace("busy", rejected=what)
            raise SessionBusyError(f"cannot {what} while another fetch is in progress")
        try:
            yield
        finally:
            self._fetch_lock.release()

    @property
    def busy(self) -> bool:
        return self._fetch_lock.locked()

    @property
    def loading(self) -> bool:
        return self.cursor.loading or self.bulk.running

    @property
    def total_records(self) -> int:
        return self.cursor.total_records

    @property
    def select_all_label(self) -> str:
        return "Unselect All on Page" if self.all_page_selected else "Select All on Page"

    def start(self) -> Page:
        """Load the first page."""
        return self.go_to_page(1)

    def go_to_page(self, page_number: int, page_size: Optional[int] = None) -> Page:
        with self._fetching("change page"):
            return self.cursor.go_to_page(page_number, page_size)

    def on_page_change(self, new_offset: int, new_page_size: Optional[int] = None) -> Page:
        size = new_page_size or self.cursor.page_size
        return self.go_to_page(max(new_offset, 0) // size + 1, size)

    def on_row_checkbox_toggle(self, record: RecordLike) -> bool:
        return self.store.toggle(record)

    def on_select_all_on_page(self) -> bool:
        self.all_page_selected = toggle_select_all_on_page(
            self.store, self.cursor.records, self.all_page_selected
        )
        return self.all_page_selected

    def on_bulk_select_submit(self, count_text: str) -> FillReport:
        """Parse the bulk count box and replace the selection.

        Invalid input raises :class:`artselect.errors.BulkCountError` without
        any fetch or state change.
        """
        count = parse_count(count_text)
        with self._fetching("bulk select"):
            self.bulk.page_size = self.cursor.page_size
            self.bulk.fill(count)
        report = self.bulk.last_report
        if not report.complete:
            logger.warning(
                "Bulk selection stopped early with %d of %d records: %s",
                report.returned,
                report.requested,
                report.error_message,
            )
        return report

    def rows(self) -> List[Tuple[Artwork, bool]]:
        return [(r, self.store.is_selected(r.id)) for r in self.cursor.records]

    def page_frame(self) -> pd.DataFrame:
        """Current page as a DataFrame with a leading ``Selected`` column."""
        records = self.cursor.records
        df = records_frame(records)
        df.insert(0, "Selected", [self.store.is_selected(r.id) for r in records])
        return df

    def selection_frame(self) -> pd.DataFrame:
        return records_frame(self.store.records())
