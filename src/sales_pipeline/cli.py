"""Command-line interface for running the sales pipeline.

Provides subcommands: `ingest`, `summary`, and `report`. Each command is
implemented as a `cmd_*` function that accepts an argparse namespace and
returns a process exit code.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from sales_pipeline.config import get_settings
from sales_pipeline.errors import SalesPipelineError
from sales_pipeline.formatting import format_currency, format_percent
from sales_pipeline.ingest.load_records import load_sale_records
from sales_pipeline.logging_config import configure_logging
from sales_pipeline.models import DashboardData
from sales_pipeline.pipeline import run_pipeline

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _build_data(args: argparse.Namespace) -> DashboardData:
    """Ingest `args.source` (or the configured source) and run every builder."""
    result = load_sale_records(args.source, get_settings())
    return run_pipeline(result.records)


# --------------------------------------------------
# INGEST
# --------------------------------------------------
def cmd_ingest(args: argparse.Namespace) -> int:
    """Read and validate the source, then print row counts.

    Args:
        args: argparse namespace with `source`.
    """
    result = load_sale_records(args.source, get_settings())
    print(f"rows={result.total_rows} records={len(result.records)} skipped={len(result.skipped_rows)}")
    return 0


# --------------------------------------------------
# SUMMARY
# --------------------------------------------------
def cmd_summary(args: argparse.Namespace) -> int:
    """Write every dashboard view as JSON to stdout or `args.out`.

    Args:
        args: argparse namespace with `source`, `out`, `indent`.
    """
    data = _build_data(args)
    payload = data.model_dump_json(indent=args.indent)

    if args.out is None:
        print(payload)
    else:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(payload + "\n", encoding="utf-8")
        log.info("Wrote summary to %s", args.out)
    return 0


# --------------------------------------------------
# REPORT
# --------------------------------------------------
def cmd_report(args: argparse.Namespace) -> int:
    """Print KPI cards, the yearly table and the sub-category ranking."""
    data = _build_data(args)
    agg = data.aggregate

    print(f"Total Sales:      {format_currency(agg.total_sales)}")
    print(f"Total Profit:     {format_currency(agg.total_profit)}")
    print(f"Total Orders:     {agg.total_orders:,}")
    print(f"Avg Order Value:  {format_currency(agg.avg_order_value)}")
    print()
    print(f"{'Year':<6}{'Sales':>14}{'Profit':>14}{'Orders':>8}{'Sales YoY':>11}{'Profit YoY':>12}")
    for y in data.yearly_summaries:
        print(
            f"{y.year:<6}{format_currency(y.total_sales):>14}{format_currency(y.total_profit):>14}"
            f"{y.order_count:>8}{format_percent(y.sales_growth_pct):>11}"
            f"{format_percent(y.profit_growth_pct):>12}"
        )
    print()
    print(f"{'Sub-Category':<20}{'Sales':>14}{'Profit':>14}{'Orders':>8}")
    for s in data.sub_category_summaries:
        print(
            f"{s.name:<20}{format_currency(s.total_sales):>14}"
            f"{format_currency(s.total_profit):>14}{s.order_count:>8}"
        )
    return 0


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    The returned parser has subcommands `ingest`, `summary`, and `report`,
    all accepting `--source` to override `SALES_DATA_SOURCE`.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="sales_pipeline")
    p.add_argument("--log-file", type=Path, default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    for name in ("ingest", "summary", "report"):
        sp = sub.add_parser(name)
        sp.add_argument("--source", default=None)
        if name == "summary":
            sp.add_argument("--out", type=Path, default=None)
            sp.add_argument("--indent", type=int, default=2)

    return p


COMMANDS = {
    "ingest": cmd_ingest,
    "summary": cmd_summary,
    "report": cmd_report,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    # stdout carries command output
    configure_logging(args.log_file, stream=sys.stderr)

    try:
        return COMMANDS[args.cmd](args)
    except SalesPipelineError as exc:
        log.error("%s failed: %s", args.cmd, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
