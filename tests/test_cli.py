from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from sales_pipeline import cli


@pytest.fixture
def csv_path(tmp_path: Path, sample_csv: str, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    for name in ("SALES_DATA_SOURCE", "SALES_ROW_POLICY", "SALES_DELIMITER", "SALES_DATE_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "sales.csv"
    path.write_text(sample_csv, encoding="utf-8")
    yield path
    # main() points the root handler at the captured stderr
    for h in list(logging.getLogger().handlers):
        logging.getLogger().removeHandler(h)


def test_ingest_prints_counts(csv_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["ingest", "--source", str(csv_path)]) == 0
    assert capsys.readouterr().out.strip() == "rows=5 records=5 skipped=0"


def test_summary_writes_json(csv_path: Path, tmp_path: Path) -> None:
    out = tmp_path / "out" / "summary.json"
    assert cli.main(["summary", "--source", str(csv_path), "--out", str(out)]) == 0

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert set(payload) == {"yearly_summaries", "sub_category_summaries", "trend_rows", "aggregate"}
    assert payload["aggregate"]["total_orders"] == 5
    assert payload["yearly_summaries"][0]["sales_growth_pct"] is None


def test_summary_to_stdout_uses_configured_source(
    csv_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SALES_DATA_SOURCE", str(csv_path))
    assert cli.main(["summary"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [y["year"] for y in payload["yearly_summaries"]] == [2015, 2016]


def test_report_prints_tables(csv_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["report", "--source", str(csv_path)]) == 0

    out = capsys.readouterr().out
    assert "Total Orders:     5" in out
    assert "Tables" in out
    assert "n/a" in out


def test_missing_source_exits_with_error(tmp_path: Path, csv_path: Path) -> None:
    assert cli.main(["summary", "--source", str(tmp_path / "missing.csv")]) == 1


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_overflowing_totals_exit_with_error(tmp_path: Path, csv_path: Path) -> None:
    path = tmp_path / "huge.csv"
    path.write_text(
        "Order Date,Sales,Profit,Sub-Category\n1/1/2020,1e308,1,Chairs\n2/1/2020,1e308,1,Chairs\n",
        encoding="utf-8",
    )
    assert cli.main(["summary", "--source", str(path)]) == 1
