"""Run the aggregation builders and drive the dashboard load lifecycle.

`run_pipeline` is all-or-nothing: either all four outputs are produced or an
error is raised. `load_dashboard` wraps ingestion + `run_pipeline` into the
``LOADING → READY | ERROR`` state the presentation layer renders.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from sales_pipeline.aggregate.build_summaries import (
    build_aggregate_metrics,
    build_sub_category_summaries,
    build_sub_category_trends,
    build_yearly_summaries,
)
from sales_pipeline.config import Settings
from sales_pipeline.errors import AggregationError, EmptyDatasetError, SalesPipelineError
from sales_pipeline.ingest.load_records import load_sale_records
from sales_pipeline.models import DashboardData, DashboardState, LoadStatus, SaleRecord

log = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load dashboard data. Please try again later."


def run_pipeline(records: Sequence[SaleRecord]) -> DashboardData:
    """Compute every dashboard view from one snapshot of records.

    Args:
        records: Validated sale records.

    Returns:
        DashboardData with yearly summaries, sub-category summaries, trend
        rows and whole-dataset metrics.

    Raises:
        EmptyDatasetError: if `records` is empty. No builder runs in that case.
        AggregationError: if a total or growth rate is not finite.
    """
    snapshot = tuple(records)
    if not snapshot:
        raise EmptyDatasetError("No sale records to aggregate")

    try:
        data = DashboardData(
            yearly_summaries=tuple(build_yearly_summaries(snapshot)),
            sub_category_summaries=tuple(build_sub_category_summaries(snapshot)),
            trend_rows=tuple(build_sub_category_trends(snapshot)),
            aggregate=build_aggregate_metrics(snapshot),
        )
    except ValidationError as exc:
        raise AggregationError(f"Aggregation produced an invalid value: {exc}") from exc

    log.info(
        "Aggregated %d records: %d years, %d sub-categories",
        len(snapshot),
        len(data.yearly_summaries),
        len(data.sub_category_summaries),
    )
    return data


def load_dashboard(
    source: str | Path | None = None,
    settings: Settings | None = None,
) -> DashboardState:
    """Load the sales export and build the dashboard views.

    Args:
        source: Path or URL; defaults to the configured data source.
        settings: Pipeline settings; defaults to `get_settings()`.

    Returns:
        A `READY` state carrying the data, or an `ERROR` state carrying the
        user-facing message and no data.
    """
    try:
        result = load_sale_records(source, settings)
        data = run_pipeline(result.records)
    except SalesPipelineError:
        log.exception("Error loading data")
        return DashboardState(status=LoadStatus.ERROR, error=LOAD_ERROR_MESSAGE)

    return DashboardState(status=LoadStatus.READY, data=data)
