import logging
from typing import List, Optional

from .models import Artwork, Page
from .sources.base import RecordSource
from .tracer import trace

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


class PageCursor:
    """Track the window currently displayed and fetch pages on demand."""

    def __init__(self, source: RecordSource, page_size: Optional[int] = None) -> None:
        self.source = source
        self.offset = 0
        self.page_size = page_size or DEFAULT_PAGE_SIZE
        self.total_records = 0
        self.page: Optional[Page] = None
        self.loading = False

    @property
    def page_number(self) -> int:
        return self.offset // self.page_size + 1

    @property
    def page_count(self) -> int:
        if not self.total_records:
            return 0
        return -(-self.total_records // self.page_size)

    @property
    def records(self) -> List[Artwork]:
        return list(self.page.records) if self.page else []

    def go_to_page(self, page_number: int, page_size: Optional[int] = None) -> Page:
        """Fetch ``page_number`` and make it the displayed page.

        On failure the previous page and totals stay in place and the error
        is re-raised to the caller.
        """
        if isinstance(page_number, bool) or not isinstance(page_number, int) or page_number < 1:
            raise ValueError(f"page number must be a positive integer, got {page_number!r}")
        size = page_size or self.page_size
        if size < 1:
            raise ValueError(f"page size must be a positive integer, got {size!r}")

        self.loading = True
        try:
            page = self.source.fetch_page(page_number, size)
        except Exception as e:
            logger.error("Error fetching page %s: %s", page_number, e)
            trace("page_error", page=page_number, error=str(e))
            raise
        finally:
            self.loading = False

        self.page = page
        self.page_size = size
        self.offset = (page_number - 1) * size
        self.total_records = page.total_count
        trace("page", page=page_number, size=size, rows=len(page.records), total=page.total_count)
        return page
