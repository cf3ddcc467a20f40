from typing import Protocol, runtime_checkable

from ..models import Page


@runtime_checkable
class RecordSource(Protocol):
    """Anything able to fetch one page of records.

    Implementations raise ``requests.RequestException`` on transport
    failures and :class:`artselect.errors.RecordSourceError` when the
    payload cannot be understood.  No retry policy is expected here.
    """

    def fetch_page(self, page: int, page_size: int) -> Page:
        ...
