"""
Shared TypedDicts for the layout pipeline.
"""

import datetime
from typing import TypedDict


class Fragment(TypedDict):
    top: int
    left: int
    text: str
    color: str       # ink class: "red" for legends/annotations, "" otherwise


class Run(TypedDict):
    top: int
    start: int
    end: int         # estimated from character count, not measured
    text: str


class PageDimensions(TypedDict):
    width: int
    height: int


class Day(TypedDict):
    date: datetime.date
    items: list[str]


def run_center(run: Run) -> int:
    return run["start"] + (run["end"] - run["start"]) // 2
