"""Ingestion orchestration: source → text → DataFrame → validated records.

Malformed rows (unparseable date, non-numeric amount, empty sub-category)
are handled by one policy for the whole run, so every builder sees the same
record set:

- ``skip``: drop them and log a warning.
- ``reject``: fail the run with `ParseError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sales_pipeline.clean.transform import clean_sales_frame
from sales_pipeline.clean.validate import validate_frame
from sales_pipeline.config import Settings, get_settings
from sales_pipeline.errors import ParseError
from sales_pipeline.ingest.fetch_source import read_source_text
from sales_pipeline.ingest.parse_csv import parse_sales_csv
from sales_pipeline.models import SaleRecord

log = logging.getLogger(__name__)

MAX_REPORTED_ROWS = 10


@dataclass(frozen=True)
class IngestResult:
    """Outcome of reading one sales export.

    Attributes:
        records: Validated records in source row order.
        total_rows: Number of data rows in the source (header excluded).
        skipped_rows: 1-based row numbers dropped as malformed.
    """
    records: tuple[SaleRecord, ...]
    total_rows: int
    skipped_rows: tuple[int, ...] = ()


def _preview(rows: list[int]) -> str:
    shown = ", ".join(str(r) for r in rows[:MAX_REPORTED_ROWS])
    if len(rows) > MAX_REPORTED_ROWS:
        shown += ", ..."
    return shown


def records_from_text(text: str, settings: Settings) -> IngestResult:
    """Parse, clean and validate raw delimited text.

    Args:
        text: Raw file contents.
        settings: Provides `delimiter`, `date_format` and `row_policy`.

    Returns:
        IngestResult with the records that passed validation.

    Raises:
        ParseError: if the text is malformed, or if any row is malformed and
            `settings.row_policy` is ``reject``.
    """
    pdf = parse_sales_csv(text, delimiter=settings.delimiter)
    cleaned = clean_sales_frame(pdf, date_format=settings.date_format)
    records, bad = validate_frame(cleaned)

    if bad:
        if settings.row_policy == "reject":
            raise ParseError(
                f"{len(bad)} malformed row(s) in sales data (rows {_preview(bad)})"
            )
        log.warning(
            "Skipping %d malformed row(s) of %d (rows %s)",
            len(bad),
            len(cleaned),
            _preview(bad),
        )

    return IngestResult(
        records=tuple(records),
        total_rows=len(cleaned),
        skipped_rows=tuple(bad),
    )


def load_sale_records(
    source: str | Path | None = None,
    settings: Settings | None = None,
) -> IngestResult:
    """Read and validate the sales export.

    Args:
        source: Path or URL; defaults to `settings.data_source`.
        settings: Pipeline settings; defaults to `get_settings()`.

    Raises:
        IngestionError: if the source cannot be read.
        ParseError: if the contents are malformed (see `records_from_text`).
    """
    s = settings or get_settings()
    src = source if source is not None else s.data_source

    text = read_source_text(src, encoding=s.encoding, timeout=s.fetch_timeout)
    result = records_from_text(text, s)

    log.info(
        "Loaded %d sale records from %s (%d skipped)",
        len(result.records),
        src,
        len(result.skipped_rows),
    )
    return result
