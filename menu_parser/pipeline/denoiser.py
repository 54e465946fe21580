"""
Noise suppression on runs and columns.

A row where one text repeats across (nearly) every column is a structural
banner, e.g. a day-of-week or week-number label printed above each day. The
whole row goes, including its odd ones out.
"""

import logging
from collections import Counter, defaultdict

from menu_parser.config import LayoutConfig
from menu_parser.state import Run

logger = logging.getLogger(__name__)


def repeated_row_threshold(row_size: int, config: LayoutConfig) -> int:
    return max(row_size - config.repeated_row_margin, config.repeated_row_min_count)


def remove_noise_rows(state: dict) -> dict:
    """Drop every run sharing a `top` with a frequently repeated text."""
    config: LayoutConfig = state["config"]
    runs: list[Run] = state["runs"]

    rows: dict[int, list[Run]] = defaultdict(list)
    for run in runs:
        rows[run["top"]].append(run)

    noisy: set[int] = set()
    for top, row in rows.items():
        counts = Counter(run["text"].lower() for run in row)
        text, count = counts.most_common(1)[0]
        if count >= repeated_row_threshold(len(row), config):
            logger.debug("Dropping row at top=%d (%r x%d of %d)", top, text, count, len(row))
            noisy.add(top)

    kept = [run for run in runs if run["top"] not in noisy]
    logger.info("Removed %d repeated-label rows (%d runs)", len(noisy), len(runs) - len(kept))
    return {"runs": kept}


def remove_usual_items(columns: list[list[Run]], config: LayoutConfig) -> list[list[Run]]:
    """Drop items served nearly every day (bread, water...) from all columns.

    Only applies from `usual_items_min_columns` columns up; column headers are
    never considered.
    """
    if len(columns) < config.usual_items_min_columns:
        return columns

    counts = Counter(
        text
        for column in columns
        for text in {run["text"].lower() for run in column[1:]}
    )
    usual = {text for text, n in counts.items() if n >= len(columns) - 1}
    if not usual:
        return columns

    logger.info("Dropping %d usual items: %s", len(usual), sorted(usual))
    return [
        column[:1] + [run for run in column[1:] if run["text"].lower() not in usual]
        for column in columns
    ]
