import logging
from typing import Any, List, Optional, Tuple

from . import cursor
from .helpers import validate_count
from .models import Artwork, FillReport
from .selection import SelectionStore
from .sources.base import RecordSource
from .tracer import trace

logger = logging.getLogger(__name__)


class BulkFillOrchestrator:
    """Select exactly the first N records of the dataset.

    Pages are requested one after the other starting at page 1, whatever
    page is currently displayed, until enough records are gathered or the
    source runs dry.  A failing page ends the run early; the records
    gathered so far are still used and the failure is recorded in
    :attr:`last_report`.
    """

    def __init__(
        self,
        source: RecordSource,
        store: SelectionStore,
        page_size: Optional[int] = None,
    ) -> None:
        self.source = source
        self.store = store
        self.page_size = page_size or cursor.DEFAULT_PAGE_SIZE
        self.running = False
        self.last_report: Optional[FillReport] = None

    def accumulate(self, target_count: Any) -> Tuple[List[Artwork], FillReport]:
        """Gather up to ``target_count`` records without touching the store."""
        target = validate_count(target_count)
        report = FillReport(requested=target)
        accumulated: List[Artwork] = []
        page_number = 1

        self.running = True
        try:
            while len(accumulated) < target:
                try:
                    page = self.source.fetch_page(page_number, self.page_size)
                except Exception as e:
                    logger.warning(
                        "Error fetching page %s during bulk fill: %s", page_number, e
                    )
                    report.error_message = str(e)
                    break
                report.pages_fetched += 1
                accumulated.extend(page.records)
                trace("fill_page", page=page_number, rows=len(page.records), have=len(accumulated))
                if page.is_short:
                    report.exhausted = True
                    break
                page_number += 1
        finally:
            self.running = False

        result = accumulated[:target]
        report.returned = len(result)
        if report.short and report.complete:
            logger.info("Dataset exhausted after %d of %d records", report.returned, target)
        return result, report

    def fill(self, target_count: Any) -> List[Artwork]:
        """Replace the selection with the first ``target_count`` records.

        Raises :class:`artselect.errors.BulkCountError` before any fetch when
        ``target_count`` is not a positive integer.
        """
        records, report = self.accumulate(target_count)
        self.store.merge_many(records)
        self.last_report = report
        trace(
            "fill",
            requested=report.requested,
            returned=report.returned,
            pages=report.pages_fetched,
            complete=report.complete,
        )
        return records
