"""Display helpers shared by the CLI report and the Streamlit view."""

from __future__ import annotations

from typing import Any, Sequence

from sales_pipeline.models import YearSubCategoryTrendRow

NOT_AVAILABLE = "n/a"


def format_currency(value: float) -> str:
    """Format as whole US dollars, e.g. ``-1234.4`` → ``"-$1,234"``."""
    sign = "-" if round(value) < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_percent(value: float | None) -> str:
    """Format a percentage with one decimal; ``None`` → ``"n/a"``."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.1f}%"


def trend_points(rows: Sequence[YearSubCategoryTrendRow]) -> list[dict[str, Any]]:
    """Long-form chart points: one per (year, sub-category) pair.

    Every sub-category seen in any year gets a point in every year; pairs
    without records carry ``sales=None`` so line charts draw a break there
    instead of bridging the missing year.
    """
    names: dict[str, None] = {}
    for row in rows:
        names.update(dict.fromkeys(row.sales_by_sub_category))

    return [
        {
            "year": row.year,
            "sub_category": name,
            "sales": row.sales_by_sub_category.get(name),
        }
        for row in rows
        for name in names
    ]
