from __future__ import annotations

import pytest

from sales_pipeline.formatting import format_currency, format_percent, trend_points
from sales_pipeline.models import YearSubCategoryTrendRow


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, "$0"), (1234.4, "$1,234"), (1234567.8, "$1,234,568"), (-383.2, "-$383"), (-0.2, "$0")],
)
def test_format_currency(value: float, expected: str) -> None:
    assert format_currency(value) == expected


def test_format_percent() -> None:
    assert format_percent(12.345) == "12.3%"
    assert format_percent(-4.0) == "-4.0%"
    assert format_percent(None) == "n/a"


def test_trend_points_mark_missing_years_as_none() -> None:
    rows = [
        YearSubCategoryTrendRow(year=2020, sales_by_sub_category={"Chairs": 100.0, "Tables": 50.0}),
        YearSubCategoryTrendRow(year=2021, sales_by_sub_category={"Chairs": 150.0}),
        YearSubCategoryTrendRow(year=2022, sales_by_sub_category={"Tables": 70.0, "Bookcases": 5.0}),
    ]

    points = trend_points(rows)

    assert len(points) == 9
    tables = [(p["year"], p["sales"]) for p in points if p["sub_category"] == "Tables"]
    assert tables == [(2020, 50.0), (2021, None), (2022, 70.0)]
    bookcases = [p["sales"] for p in points if p["sub_category"] == "Bookcases"]
    assert bookcases == [None, None, 5.0]


def test_trend_points_empty() -> None:
    assert trend_points([]) == []
