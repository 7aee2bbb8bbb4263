"""Shared grouping and summation helpers for the builders."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from sales_pipeline.models import SaleRecord

RECORD_COLUMNS = ["year", "sales", "profit", "sub_category"]


def records_to_frame(records: Sequence[SaleRecord]) -> pd.DataFrame:
    """Return a DataFrame with one row per record, in input order.

    Args:
        records: Validated sale records.

    Returns:
        pandas.DataFrame with columns `year`, `sales`, `profit`, `sub_category`.
    """
    return pd.DataFrame(
        [(r.year, r.sales, r.profit, r.sub_category) for r in records],
        columns=RECORD_COLUMNS,
    )


def group_totals(pdf: pd.DataFrame, keys: str | list[str]) -> pd.DataFrame:
    """Sum sales and profit and count records per group.

    Groups come out in first-seen order (``sort=False``); callers that need
    a particular order must sort explicitly.

    Args:
        pdf: DataFrame from `records_to_frame`.
        keys: Column name(s) to group by.

    Returns:
        DataFrame with the key column(s) plus `total_sales`, `total_profit`,
        `order_count`.
    """
    return (
        pdf.groupby(keys, sort=False)
        .agg(
            total_sales=("sales", "sum"),
            total_profit=("profit", "sum"),
            order_count=("sales", "size"),
        )
        .reset_index()
    )


def growth_pct(current: float, previous: float) -> float | None:
    """Percent change from `previous` to `current`.

    Returns ``None`` when `previous` is zero, where the change is undefined.
    """
    if previous == 0:
        return None
    return (current - previous) / previous * 100.0
