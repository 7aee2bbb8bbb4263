"""Validation utilities for cleaned sales rows.

This module validates cleaned rows against the Pydantic `SaleRecord` model,
converting pandas missing values and timestamps into native Python types
prior to validation.
"""
from __future__ import annotations

from typing import Any

import pandas as pd
from pydantic import ValidationError

from sales_pipeline.models import SaleRecord

RECORD_FIELDS = ("order_date", "sales", "profit", "sub_category")


def _native(value: Any) -> Any:
    """Map NaN/NaT/NA to None and Timestamps to dates."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, pd.Timestamp):
        return value.date()
    return value


def validate_frame(pdf: pd.DataFrame) -> tuple[list[SaleRecord], list[int]]:
    """Validate a cleaned DataFrame row by row using Pydantic.

    Args:
        pdf: DataFrame returned by `clean_sales_frame`.

    Returns:
        A tuple of (validated_records, bad_row_numbers). Source row order is
        preserved in `validated_records`.
    """
    good: list[SaleRecord] = []
    bad: list[int] = []

    for rec in pdf.to_dict(orient="records"):
        payload = {k: _native(rec.get(k)) for k in RECORD_FIELDS}
        try:
            good.append(SaleRecord.model_validate(payload))
        except ValidationError:
            bad.append(int(rec["row_number"]))

    return good, bad
