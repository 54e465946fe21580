"""
Merges same-row fragments into runs.

The renderer splits words and phrases into arbitrary pieces; glyph widths are
unknown, so a run's right edge is estimated as `char_width` pixels per
character.
"""

import logging

from menu_parser.config import LayoutConfig
from menu_parser.state import Fragment, Run

logger = logging.getLogger(__name__)


def _new_run(fragment: Fragment, char_width: int) -> Run:
    text = fragment["text"].lstrip()
    return Run(
        top=fragment["top"],
        start=fragment["left"],
        end=fragment["left"] + len(text) * char_width,
        text=text,
    )


def _absorb(run: Run, fragment: Fragment, char_width: int) -> None:
    text = fragment["text"]
    # Runs of trailing spaces are rendering padding; a single one is a word gap.
    if text.endswith("  "):
        text = text.rstrip(" ")
    if run["text"].endswith(" "):
        text = text.lstrip()
    run["end"] = fragment["left"] + len(text) * char_width
    run["text"] += text


def _trim(run: Run) -> None:
    run["text"] = run["text"].strip()


def merge_words(state: dict) -> dict:
    """Walk fragments sorted by (top, left) once, growing the current run."""
    config: LayoutConfig = state["config"]
    fragments: list[Fragment] = state["fragments"]

    runs: list[Run] = []
    for fragment in fragments:
        if runs:
            last = runs[-1]
            if (last["top"] == fragment["top"]
                    and abs(fragment["left"] - last["end"]) < config.merge_drift):
                _absorb(last, fragment, config.char_width)
                continue
            _trim(last)
        runs.append(_new_run(fragment, config.char_width))

    if runs:
        _trim(runs[-1])
    runs = [run for run in runs if run["text"]]

    logger.info("Merged %d fragments into %d runs", len(fragments), len(runs))
    return {"runs": runs}
