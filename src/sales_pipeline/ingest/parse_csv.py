"""Parsing helpers for the delimited sales export.

`parse_sales_csv` converts the raw text into a pandas DataFrame of strings.
Structural problems (blank input, ragged rows, missing required columns)
raise `ParseError`; cell-level problems are left for cleaning/validation.
"""

from __future__ import annotations

import csv
import io
import logging

import pandas as pd

from sales_pipeline.errors import ParseError

log = logging.getLogger(__name__)

ORDER_DATE = "Order Date"
SALES = "Sales"
PROFIT = "Profit"
SUB_CATEGORY = "Sub-Category"
REQUIRED_COLUMNS = (ORDER_DATE, SALES, PROFIT, SUB_CATEGORY)


def _check_field_counts(text: str, delimiter: str) -> None:
    """Raise `ParseError` if any non-blank row has a different width than the header."""
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    expected: int | None = None
    try:
        for row in reader:
            if not row or all(not cell.strip() for cell in row):
                continue
            if expected is None:
                expected = len(row)
            elif len(row) != expected:
                raise ParseError(
                    f"Line {reader.line_num}: expected {expected} fields, saw {len(row)}"
                )
    except csv.Error as exc:
        raise ParseError(f"Line {reader.line_num}: {exc}") from exc


def parse_sales_csv(text: str, delimiter: str = ",") -> pd.DataFrame:
    """Parse delimited sales text into a DataFrame.

    Args:
        text: Full file contents, header row first.
        delimiter: Single-character field delimiter.

    Returns:
        pandas.DataFrame with every cell as a string (missing cells are NaN)
        and whitespace-stripped column names. Extra columns are kept.

    Raises:
        ParseError: if the text is blank, rows have inconsistent widths, or a
            required column is missing from the header.
    """
    text = text.lstrip("\ufeff")
    if not text.strip():
        raise ParseError("Sales data is empty")

    _check_field_counts(text, delimiter)

    try:
        pdf = pd.read_csv(
            io.StringIO(text),
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            na_values=[""],
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise ParseError(f"Unable to parse sales data: {exc}") from exc

    pdf.columns = [str(c).strip() for c in pdf.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in pdf.columns]
    if missing:
        raise ParseError(f"Missing required columns: {', '.join(missing)}")

    log.info("Parsed %d rows with %d columns", len(pdf), len(pdf.columns))
    return pdf
