"""
pipeline/assembler.py — columns to day records.

Column order is kept. A header that is not a date means the columns
themselves are wrong, so it fails the whole page.
"""

import logging

from menu_parser.errors import UnparsableLayout
from menu_parser.pipeline.dates import resolve_date
from menu_parser.state import Day, Run

logger = logging.getLogger(__name__)


def assemble(state: dict) -> dict:
    """Resolve each column header and emit one Day per column."""
    columns: list[list[Run]] = state["columns"]
    today = state.get("today")

    days: list[Day] = []
    for column in columns:
        header = column[0]["text"]
        date = resolve_date(header, today)
        if date is None:
            logger.error("Column header %r is not a date", header)
            raise UnparsableLayout(f"column header {header!r} is not a date")
        days.append(Day(
            date=date,
            items=[run["text"].strip() for run in column[1:]],
        ))

    logger.info("Assembly complete: %d days", len(days))
    return {"days": days}
