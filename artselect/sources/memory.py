"""In-process record source used by the debug page and the test-suite."""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Set, Union

import requests

from ..models import Artwork, Page


def sample_artworks(count: int) -> List[Artwork]:
    return [
        Artwork(id=i, title=f"Artwork {i}", artist_display=f"Artist {i % 7}")
        for i in range(1, count + 1)
    ]


class InMemoryRecordSource:
    """Serve pages out of a list held in memory.

    ``fail_pages`` lists page numbers whose fetch raises a
    ``requests.ConnectionError``.  Every requested page number is appended
    to ``calls`` so callers can assert on the fetch sequence.
    """

    def __init__(
        self,
        records: Iterable[Union[Artwork, Mapping[str, Any]]] = (),
        *,
        fail_pages: Optional[Iterable[int]] = None,
    ) -> None:
        self.records: List[Artwork] = [
            r if isinstance(r, Artwork) else Artwork.model_validate(r) for r in records
        ]
        self.fail_pages: Set[int] = set(fail_pages or ())
        self.calls: List[int] = []

    @classmethod
    def with_size(cls, count: int, **kwargs: Any) -> "InMemoryRecordSource":
        return cls(sample_artworks(count), **kwargs)

    def fetch_page(self, page: int, page_size: int) -> Page:
        self.calls.append(page)
        if page in self.fail_pages:
            raise requests.ConnectionError(f"page {page} unavailable")
        start = (page - 1) * page_size
        chunk = self.records[start : start + page_size]
        return Page(
            number=page, size=page_size, records=chunk, total_count=len(self.records)
        )
