"""
Groups runs into day columns by horizontal center proximity.

Greedy and order dependent: a run joins the first column holding *any* member
whose center is within tolerance, so a column's acceptance region is the union
of its members' neighbourhoods rather than a single centroid. Wrapped item
lines (close below the previous entry, starting lower-case) are folded back
into that entry while clustering.
"""

import logging

from menu_parser.config import LayoutConfig
from menu_parser.errors import UnparsableLayout
from menu_parser.pipeline.denoiser import remove_usual_items
from menu_parser.state import Run, run_center

logger = logging.getLogger(__name__)


def _find_column(columns: list[list[Run]], run: Run, tolerance: int) -> list[Run] | None:
    center = run_center(run)
    for column in columns:
        if any(abs(run_center(member) - center) < tolerance for member in column):
            return column
    return None


def _is_continuation(last: Run, run: Run, tolerance: int) -> bool:
    return abs(run["top"] - last["top"]) <= tolerance and run["text"][:1].islower()


def _join(last: Run, run: Run) -> None:
    if last["text"][-1:].isspace() or run["text"][:1].isspace():
        last["text"] += run["text"]
    else:
        last["text"] += " " + run["text"]
    last["start"] = min(last["start"], run["start"])
    last["end"] = max(last["end"], run["end"])


def _dedup(column: list[Run]) -> list[Run]:
    seen: set[str] = set()
    unique: list[Run] = []
    for run in column:
        key = run["text"].lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(run)
    return unique


def cluster_columns(state: dict) -> dict:
    """Build day columns; raise UnparsableLayout when none is usable."""
    config: LayoutConfig = state["config"]
    runs: list[Run] = state["runs"]

    columns: list[list[Run]] = []
    joined = 0
    for run in runs:
        column = _find_column(columns, run, config.column_tolerance)
        if column is None:
            columns.append([run])
        elif _is_continuation(column[-1], run, config.multiline_tolerance):
            _join(column[-1], run)
            joined += 1
        else:
            column.append(run)

    columns = [_dedup(column) for column in columns]
    if config.drop_usual_items:
        columns = remove_usual_items(columns, config)

    found = len(columns)
    columns = [column for column in columns if len(column) >= 2]

    logger.info("Clustered %d runs into %d columns (%d degenerate dropped, %d lines joined)",
                len(runs), len(columns), found - len(columns), joined)
    if not columns:
        raise UnparsableLayout("no column with a header and at least one item")
    return {"columns": columns}
