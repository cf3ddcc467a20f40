"""Health check for the upstream record source."""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from .sources.artic import ArticRecordSource
from .sources.base import RecordSource


def check_source(source: Optional[RecordSource] = None) -> dict:
    """Fetch a one-record page and report whether the source answered."""
    src = source or ArticRecordSource()
    try:
        page = src.fetch_page(1, 1)
    except Exception as e:
        return {"source_ok": False, "total_records": None, "error": str(e)}
    return {"source_ok": True, "total_records": page.total_count, "error": None}


app = FastAPI()


@app.get("/health")
def health() -> dict:
    """FastAPI endpoint exposing record source status."""
    return check_source()
