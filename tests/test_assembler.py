import datetime

import pytest

from menu_parser.errors import UnparsableLayout
from menu_parser.pipeline.assembler import assemble

TODAY = datetime.date(2024, 3, 10)


def test_columns_become_days_in_order(run):
    columns = [
        [run(130, 0, "Lundi 11 mars"), run(160, 0, "Salade "), run(190, 0, "Riz")],
        [run(130, 200, "Mardi 12 mars"), run(160, 200, "Soupe")],
    ]
    days = assemble({"columns": columns, "today": TODAY})["days"]
    assert days == [
        {"date": datetime.date(2024, 3, 11), "items": ["Salade", "Riz"]},
        {"date": datetime.date(2024, 3, 12), "items": ["Soupe"]},
    ]


def test_bad_header_fails_the_page(run):
    columns = [
        [run(130, 0, "Lundi 11 mars"), run(160, 0, "Salade")],
        [run(130, 200, "Menu"), run(160, 200, "Soupe")],
    ]
    with pytest.raises(UnparsableLayout, match="Menu"):
        assemble({"columns": columns, "today": TODAY})
