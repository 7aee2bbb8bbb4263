"""Cleaning and normalization utilities.

The output DataFrame has a stable schema (`row_number`, `order_date`,
`sales`, `profit`, `sub_category`, `year`) suitable for Pydantic validation.
Unparseable cells become NaN/NaT rather than raising; validation decides what
to do with them.
"""
from __future__ import annotations

import logging

import pandas as pd

from sales_pipeline.ingest.parse_csv import ORDER_DATE, PROFIT, SALES, SUB_CATEGORY

log = logging.getLogger(__name__)

COLUMN_MAP = {
    ORDER_DATE: "order_date",
    SALES: "sales",
    PROFIT: "profit",
    SUB_CATEGORY: "sub_category",
}


def _to_amount(s: pd.Series) -> pd.Series:
    """Coerce currency-formatted strings (``"$1,234.50"``) to floats."""
    cleaned = s.astype(object).str.strip().str.replace(r"[$,]", "", regex=True)
    return pd.to_numeric(cleaned, errors="coerce").astype(float)


def clean_sales_frame(pdf: pd.DataFrame, date_format: str | None = None) -> pd.DataFrame:
    """Clean a parsed sales DataFrame.

    Performs column selection and renaming, text normalization, date parsing,
    amount coercion, and year derivation.

    Args:
        pdf: DataFrame returned by `parse_sales_csv`.
        date_format: Optional explicit strftime format for the order date.
            When omitted dates are parsed in mixed mode, month first.

    Returns:
        Cleaned DataFrame; `row_number` is the 1-based data-row index in the
        source so rejected rows can be reported.
    """
    log.info("Starting clean_sales_frame transformation")

    out = pdf[list(COLUMN_MAP)].rename(columns=COLUMN_MAP).reset_index(drop=True)
    out.insert(0, "row_number", range(1, len(out) + 1))

    # -----------------------------
    # Normalize sub-category
    # -----------------------------
    out["sub_category"] = (
        out["sub_category"]
        .astype(object)
        .str.strip()
        .str.replace(r"\s+", " ", regex=True)
        .replace({"": None})
    )

    # -----------------------------
    # Standardize date
    # -----------------------------
    out["order_date"] = pd.to_datetime(
        out["order_date"].astype(object).str.strip(),
        errors="coerce",
        format=date_format or "mixed",
    )

    # -----------------------------
    # Amounts
    # -----------------------------
    out["sales"] = _to_amount(out["sales"])
    out["profit"] = _to_amount(out["profit"])

    # -----------------------------
    # Derive year
    # -----------------------------
    out["year"] = out["order_date"].dt.year.astype("Int64")

    return out
