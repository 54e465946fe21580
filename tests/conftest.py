import pytest

from menu_parser.config import LayoutConfig
from menu_parser.state import Fragment, PageDimensions, Run


@pytest.fixture
def a4_landscape() -> PageDimensions:
    return PageDimensions(width=842, height=595)


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig()


@pytest.fixture
def fragment():
    def make(top: int, left: int, text: str, color: str = "") -> Fragment:
        return Fragment(top=top, left=left, text=text, color=color)
    return make


@pytest.fixture
def run():
    """Run factory; `end` follows the 4 px per character estimate unless given."""
    def make(top: int, start: int, text: str, end: int | None = None) -> Run:
        if end is None:
            end = start + len(text) * 4
        return Run(top=top, start=start, end=end, text=text)
    return make
