"""Record sources feeding the page cursor and the bulk fill orchestrator."""

from .artic import ArticRecordSource
from .base import RecordSource
from .memory import InMemoryRecordSource

__all__ = ["ArticRecordSource", "InMemoryRecordSource", "RecordSource"]
