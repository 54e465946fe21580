import datetime

import pytest

from menu_parser.config import LayoutConfig
from menu_parser.errors import UnparsableLayout
from menu_parser.main import parse_layout
from menu_parser.state import PageDimensions

TODAY = datetime.date(2024, 3, 10)
HEADERS = ["Lundi 11 mars", "Mardi 12 mars", "Mercredi 13 mars", "Jeudi 14 mars", "Vendredi 15 mars"]
ROW_TOPS = [130, 160, 210, 250, 300, 340]


def _week_fragments(fragment):
    fragments = []
    for col, header in enumerate(HEADERS):
        left = 40 + col * 150
        fragments.append(fragment(ROW_TOPS[0], left, header))
        for row, top in enumerate(ROW_TOPS[1:], start=1):
            fragments.append(fragment(top, left, f"Plat {col}-{row}"))
    return fragments


def test_full_week(fragment, a4_landscape):
    days = parse_layout(_week_fragments(fragment), a4_landscape, today=TODAY)

    assert len(days) == 5
    assert [d["date"] for d in days] == [datetime.date(2024, 3, 11 + i) for i in range(5)]
    for col, day in enumerate(days):
        assert day["items"] == [f"Plat {col}-{row}" for row in range(1, 6)]


def test_input_order_does_not_matter(fragment, a4_landscape):
    fragments = _week_fragments(fragment)
    assert parse_layout(fragments[::-1], a4_landscape, today=TODAY) == \
        parse_layout(fragments, a4_landscape, today=TODAY)


def test_noisy_page(fragment, a4_landscape):
    fragments = _week_fragments(fragment)
    for col in range(5):
        left = 40 + col * 150
        fragments.append(fragment(125, left, "Semaine 11"))         # banner row
        fragments.append(fragment(186, left, "Entrées"))            # category band
        fragments.append(fragment(400, left, "*fait maison", "red"))
        fragments.append(fragment(560, left, "Bon appétit"))        # footer
    # split word and wrapped second line
    fragments.append(fragment(360, 40, "Gratin "))
    fragments.append(fragment(360, 68, "dauphinois"))
    fragments.append(fragment(370, 40, "maison"))

    days = parse_layout(fragments, a4_landscape, today=TODAY)

    assert len(days) == 5
    assert days[0]["items"][-1] == "Gratin dauphinois maison"
    assert days[1]["items"] == [f"Plat 1-{row}" for row in range(1, 6)]


def test_no_fragments_is_unparsable():
    with pytest.raises(UnparsableLayout):
        parse_layout([], PageDimensions(width=842, height=595), today=TODAY)


def test_undated_header_is_unparsable(fragment, a4_landscape):
    fragments = [fragment(130, 40, "Menu de la semaine"), fragment(160, 40, "Salade")]
    with pytest.raises(UnparsableLayout):
        parse_layout(fragments, a4_landscape, today=TODAY)


def test_config_is_honoured(fragment, a4_landscape):
    fragments = _week_fragments(fragment)
    # a content band that starts below the header row leaves no date to read
    config = LayoutConfig(content_band=(150, 525))
    with pytest.raises(UnparsableLayout):
        parse_layout(fragments, a4_landscape, config=config, today=TODAY)
