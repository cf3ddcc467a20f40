from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

RecordId = Union[int, str]


class Artwork(BaseModel):
    """Immutable snapshot of a single artwork as returned by the API."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: RecordId
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None


class Page(BaseModel):
    """One fetched window of records."""

    number: int = Field(ge=1)
    size: int = Field(ge=1)
    records: List[Artwork] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)

    @property
    def is_short(self) -> bool:
        """True when the source returned fewer records than requested."""
        return len(self.records) < self.size


class FillReport(BaseModel):
    """Outcome of a bulk fill run."""

    requested: int
    returned: int = 0
    pages_fetched: int = 0
    exhausted: bool = False
    error_message: Optional[str] = None

    @property
    def complete(self) -> bool:
        return self.error_message is None

    @property
    def short(self) -> bool:
        return self.returned < self.requested
