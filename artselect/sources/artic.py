import logging
from typing import Any, Dict, List, Optional, Sequence

import requests
from pydantic import ValidationError

from ..errors import RecordSourceError
from ..helpers import safe_request
from ..models import Artwork, Page

logger = logging.getLogger(__name__)

# Public collection endpoint of the Art Institute of Chicago
API_URL = "https://api.artic.edu/api/v1/artworks"
FIELDS: List[str] = list(Artwork.model_fields)
TIMEOUT: float = 15.0
RETRIES: int = 1


def parse_artworks_payload(data: Any, page: int, page_size: int) -> Page:
    """Convert a decoded ``/artworks`` response into a :class:`Page`.

    Entries that do not validate as :class:`Artwork` (for example because
    they lack an ``id``) are skipped with a warning.
    """
    if not isinstance(data, dict) or not isinstance(data.get("data"), list):
        raise RecordSourceError("response has no 'data' list")
    pagination = data.get("pagination") or {}
    try:
        total = max(int(pagination.get("total", 0)), 0)
    except (TypeError, ValueError) as e:
        raise RecordSourceError(f"invalid pagination.total: {e}") from e

    records: List[Artwork] = []
    for item in data["data"]:
        try:
            records.append(Artwork.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping malformed artwork on page %s: %s", page, e)
    return Page(number=page, size=page_size, records=records, total_count=total)


class ArticRecordSource:
    """Record source backed by the Art Institute of Chicago REST API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        metrics: Optional[Dict[str, Any]] = None,
        *,
        api_url: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.metrics = metrics
        self.api_url = api_url
        self.fields = list(fields) if fields is not None else None

    def fetch_page(self, page: int, page_size: int) -> Page:
        params: Dict[str, Any] = {"page": page, "limit": page_size}
        fields = self.fields if self.fields is not None else FIELDS
        if fields:
            params["fields"] = ",".join(fields)
        response = safe_request(
            self.api_url or API_URL,
            params=params,
            retries=RETRIES,
            session=self.session,
            timeout=TIMEOUT,
            metrics=self.metrics,
        )
        try:
            payload = response.json()
        except ValueError as e:
            raise RecordSourceError(f"response is not JSON: {e}") from e
        return parse_artworks_payload(payload, page, page_size)
