"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads environment variables (after loading `.env` from the project root) and
checks that the values make sense before any data is read.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

ROW_POLICIES = ("skip", "reject")


@dataclass(frozen=True)
class Settings:
    """Container for pipeline configuration read from the environment.

    Attributes:
        data_source: Local path or http(s) URL of the sales CSV.
        delimiter: Single-character field delimiter.
        encoding: Text encoding of the source file.
        date_format: Optional strftime format for `Order Date`. When ``None``
            dates are parsed in mixed mode (month-first).
        row_policy: What to do with malformed rows: ``skip`` or ``reject``.
        fetch_timeout: Timeout in seconds for remote sources.
    """
    data_source: str
    delimiter: str = ","
    encoding: str = "utf-8"
    date_format: str | None = None
    row_policy: str = "skip"
    fetch_timeout: float = 30.0


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if a variable holds a value the pipeline cannot use.
    """
    data_source = os.getenv("SALES_DATA_SOURCE", "data/FurnitureSales.csv").strip()
    delimiter = os.getenv("SALES_DELIMITER", ",")
    encoding = os.getenv("SALES_ENCODING", "utf-8").strip()
    date_format = os.getenv("SALES_DATE_FORMAT", "").strip() or None
    row_policy = os.getenv("SALES_ROW_POLICY", "skip").strip().lower()
    raw_timeout = os.getenv("SALES_FETCH_TIMEOUT", "30").strip()

    if not data_source:
        raise RuntimeError("SALES_DATA_SOURCE must not be empty.")

    if len(delimiter) != 1:
        raise RuntimeError(
            f"SALES_DELIMITER must be a single character, got {delimiter!r}."
        )

    if row_policy not in ROW_POLICIES:
        raise RuntimeError(
            f"SALES_ROW_POLICY must be one of {', '.join(ROW_POLICIES)}, got {row_policy!r}."
        )

    try:
        fetch_timeout = float(raw_timeout)
    except ValueError:
        raise RuntimeError(
            f"SALES_FETCH_TIMEOUT must be a number of seconds, got {raw_timeout!r}."
        ) from None
    if fetch_timeout <= 0:
        raise RuntimeError("SALES_FETCH_TIMEOUT must be positive.")

    return Settings(
        data_source=data_source,
        delimiter=delimiter,
        encoding=encoding,
        date_format=date_format,
        row_policy=row_policy,
        fetch_timeout=fetch_timeout,
    )
