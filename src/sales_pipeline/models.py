"""Pydantic models for sale records and the derived dashboard views.

Every model is frozen: derived views are computed once per run and never
mutated afterwards. Float fields reject NaN and Infinity so an undefined
numeric value cannot reach the presentation layer.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_FROZEN = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)


class SaleRecord(BaseModel):
    """A single validated sale (one row of the source file)."""
    model_config = _FROZEN
    order_date: date
    sales: float
    profit: float
    sub_category: str = Field(..., min_length=1)

    @property
    def year(self) -> int:
        return self.order_date.year


class YearlySummary(BaseModel):
    """Totals for one calendar year plus growth against the preceding year.

    Attributes:
        year: Calendar year of the order dates.
        total_sales: Sum of sales in the year.
        total_profit: Sum of profit in the year.
        order_count: Number of records in the year.
        avg_order_value: ``total_sales / order_count``.
        sales_growth_pct: Percent change versus the preceding year present in
            the data; ``None`` for the earliest year or a zero prior total.
        profit_growth_pct: Same as `sales_growth_pct`, for profit.
    """
    model_config = _FROZEN
    year: int
    total_sales: float
    total_profit: float
    order_count: int = Field(..., ge=1)
    avg_order_value: float
    sales_growth_pct: float | None = None
    profit_growth_pct: float | None = None


class SubCategorySummary(BaseModel):
    """Whole-dataset totals for one sub-category."""
    model_config = _FROZEN
    name: str
    total_sales: float
    total_profit: float
    order_count: int = Field(..., ge=1)


class YearSubCategoryTrendRow(BaseModel):
    """Sales per sub-category within one year.

    Only sub-categories with records in `year` are keys of
    `sales_by_sub_category`; absent ones are gaps, not zeros.
    """
    model_config = _FROZEN
    year: int
    sales_by_sub_category: dict[str, float]

    def to_chart_row(self) -> dict[str, Any]:
        """Flatten into ``{"year": ..., <sub-category>: sales, ...}``."""
        return {"year": self.year, **self.sales_by_sub_category}


class AggregateMetrics(BaseModel):
    """Whole-dataset KPI values."""
    model_config = _FROZEN
    total_sales: float
    total_profit: float
    total_orders: int = Field(..., ge=1)
    avg_order_value: float


class DashboardData(BaseModel):
    """The four read-only outputs handed to the presentation layer."""
    model_config = _FROZEN
    yearly_summaries: tuple[YearlySummary, ...]
    sub_category_summaries: tuple[SubCategorySummary, ...]
    trend_rows: tuple[YearSubCategoryTrendRow, ...]
    aggregate: AggregateMetrics


class LoadStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class DashboardState(BaseModel):
    """Lifecycle of one dashboard load: ``LOADING`` then ``READY`` or ``ERROR``."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    status: LoadStatus = LoadStatus.LOADING
    data: DashboardData | None = None
    error: str | None = None
