"""Builders for the dashboard views.

Functions in this module take the full, already-validated record collection
and return frozen Pydantic models. Input order never changes the result
except where documented (ties in the sub-category ranking and key order in
trend rows follow first appearance).
"""
from __future__ import annotations

import logging
from typing import Sequence

from sales_pipeline.aggregate.grouping import group_totals, growth_pct, records_to_frame
from sales_pipeline.errors import EmptyDatasetError
from sales_pipeline.models import (
    AggregateMetrics,
    SaleRecord,
    SubCategorySummary,
    YearlySummary,
    YearSubCategoryTrendRow,
)

log = logging.getLogger(__name__)


# =========================================================
# YEARLY
# =========================================================

def build_yearly_summaries(records: Sequence[SaleRecord]) -> list[YearlySummary]:
    """Return per-year totals sorted ascending by year, with growth.

    Growth is computed against the immediately preceding year present in the
    data. The earliest year has no growth (``None``), and so does any year
    whose predecessor's total is zero.

    Args:
        records: Sale records; may be empty.

    Returns:
        List of `YearlySummary`, empty for empty input.
    """
    if not records:
        return []

    totals = group_totals(records_to_frame(records), "year").sort_values(
        "year", kind="stable"
    )

    summaries: list[YearlySummary] = []
    prev: YearlySummary | None = None
    for row in totals.itertuples(index=False):
        total_sales = float(row.total_sales)
        total_profit = float(row.total_profit)
        order_count = int(row.order_count)
        current = YearlySummary(
            year=int(row.year),
            total_sales=total_sales,
            total_profit=total_profit,
            order_count=order_count,
            avg_order_value=total_sales / order_count,
            sales_growth_pct=None if prev is None else growth_pct(total_sales, prev.total_sales),
            profit_growth_pct=None if prev is None else growth_pct(total_profit, prev.total_profit),
        )
        summaries.append(current)
        prev = current

    return summaries


# =========================================================
# SUB-CATEGORY
# =========================================================

def build_sub_category_summaries(records: Sequence[SaleRecord]) -> list[SubCategorySummary]:
    """Return whole-dataset totals per sub-category, ranked by sales.

    Sorted by `total_sales` descending; ties keep first-seen order.

    Args:
        records: Sale records; may be empty.

    Returns:
        List of `SubCategorySummary`, empty for empty input.
    """
    if not records:
        return []

    totals = group_totals(records_to_frame(records), "sub_category").sort_values(
        "total_sales", ascending=False, kind="stable"
    )

    return [
        SubCategorySummary(
            name=str(row.sub_category),
            total_sales=float(row.total_sales),
            total_profit=float(row.total_profit),
            order_count=int(row.order_count),
        )
        for row in totals.itertuples(index=False)
    ]


# =========================================================
# TREND (YEAR × SUB-CATEGORY)
# =========================================================

def build_sub_category_trends(records: Sequence[SaleRecord]) -> list[YearSubCategoryTrendRow]:
    """Return one row per year mapping sub-category → sales within that year.

    The mapping is sparse: a sub-category without records in a year has no
    key in that year's row. Rows are sorted ascending by year.

    Args:
        records: Sale records; may be empty.

    Returns:
        List of `YearSubCategoryTrendRow`, empty for empty input.
    """
    if not records:
        return []

    sales = (
        records_to_frame(records)
        .groupby(["year", "sub_category"], sort=False)["sales"]
        .sum()
    )

    by_year: dict[int, dict[str, float]] = {}
    for (year, sub_category), total in sales.items():
        by_year.setdefault(int(year), {})[str(sub_category)] = float(total)

    return [
        YearSubCategoryTrendRow(year=year, sales_by_sub_category=by_year[year])
        for year in sorted(by_year)
    ]


# =========================================================
# WHOLE DATASET
# =========================================================

def build_aggregate_metrics(records: Sequence[SaleRecord]) -> AggregateMetrics:
    """Return totals and average order value across every record.

    Raises:
        EmptyDatasetError: if `records` is empty (average is undefined).
    """
    if not records:
        raise EmptyDatasetError("No sale records: average order value is undefined")

    pdf = records_to_frame(records)
    total_sales = float(pdf["sales"].sum())
    total_orders = len(pdf)

    return AggregateMetrics(
        total_sales=total_sales,
        total_profit=float(pdf["profit"].sum()),
        total_orders=total_orders,
        avg_order_value=total_sales / total_orders,
    )
