"""Command line interface for artselect."""

from __future__ import annotations

from typing import Optional
import argparse
import logging
import sys
from pathlib import Path

import requests

from . import cursor
from .config import apply_config, load_config
from .errors import ArtselectError
from .session import SelectionSession, records_frame
from .sources.artic import ArticRecordSource

logger = logging.getLogger(__name__)


def _page(session: SelectionSession, number: int, page_size: Optional[int]) -> int:
    page = session.go_to_page(number, page_size)
    frame = records_frame(page.records)
    print(frame.to_string(index=False))
    print(f"\nPage {number} of {session.cursor.page_count} ({page.total_count} records)")
    return 0


def _fill(session: SelectionSession, count: str, output: Optional[str]) -> int:
    report = session.on_bulk_select_submit(count)
    frame = session.selection_frame()
    if output:
        frame.to_csv(output, index=False)
        print(f"Wrote {len(frame)} records to {output}")
    else:
        frame.to_csv(sys.stdout, index=False)
    if not report.complete:
        print(
            f"Stopped early after {report.pages_fetched} pages: {report.error_message}",
            file=sys.stderr,
        )
        return 1
    if report.short:
        print(
            f"Only {report.returned} of {report.requested} records available",
            file=sys.stderr,
        )
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Browse and bulk-select artworks")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests and state changes")
    sub = parser.add_subparsers(dest="command", required=True)

    page_cmd = sub.add_parser("page", help="Print one page of artworks")
    page_cmd.add_argument("number", type=int, help="1-based page number")
    page_cmd.add_argument("--page-size", type=int, default=None, help="Rows per page")

    fill_cmd = sub.add_parser("fill", help="Select the first N artworks and export them")
    fill_cmd.add_argument("count", type=str, help="Number of artworks to select")
    fill_cmd.add_argument("--output", type=str, default=None, help="CSV file to write (default: stdout)")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    apply_config(load_config(Path(args.config) if args.config else None))
    session = SelectionSession(ArticRecordSource(), cursor.DEFAULT_PAGE_SIZE)
    try:
        if args.command == "page":
            return _page(session, args.number, args.page_size)
        return _fill(session, args.count, args.output)
    except (ArtselectError, ValueError, requests.RequestException) as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
