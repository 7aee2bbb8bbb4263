from __future__ import annotations

from datetime import date

import pytest

from sales_pipeline.config import Settings
from sales_pipeline.models import SaleRecord


def rec(year: int, sales: float, profit: float, sub_category: str, month: int = 1, day: int = 1) -> SaleRecord:
    return SaleRecord(
        order_date=date(year, month, day),
        sales=sales,
        profit=profit,
        sub_category=sub_category,
    )


@pytest.fixture
def example_records() -> list[SaleRecord]:
    return [
        rec(2020, 100.0, 10.0, "Chairs"),
        rec(2020, 50.0, 5.0, "Tables"),
        rec(2021, 150.0, 20.0, "Chairs"),
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(data_source="unused.csv")


SAMPLE_CSV = """Row ID,Order Date,Ship Mode,Sub-Category,Sales,Profit
1,11/8/2016,Second Class,Bookcases,261.96,41.9136
2,11/8/2016,Second Class,Chairs,731.94,219.582
3,6/12/2016,Second Class,Tables,957.5775,-383.031
4,10/11/2015,Standard Class,Tables,"1,044.63",-123.858
5,10/11/2015,Standard Class,Furnishings,48.86,14.1694
"""


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV
