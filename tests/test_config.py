from __future__ import annotations

import pytest

from sales_pipeline.config import get_settings

ENV_VARS = (
    "SALES_DATA_SOURCE",
    "SALES_DELIMITER",
    "SALES_ENCODING",
    "SALES_DATE_FORMAT",
    "SALES_ROW_POLICY",
    "SALES_FETCH_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = get_settings()
    assert s.data_source == "data/FurnitureSales.csv"
    assert s.delimiter == ","
    assert s.encoding == "utf-8"
    assert s.date_format is None
    assert s.row_policy == "skip"
    assert s.fetch_timeout == 30.0


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALES_DATA_SOURCE", "https://example.com/sales.csv")
    monkeypatch.setenv("SALES_DELIMITER", ";")
    monkeypatch.setenv("SALES_DATE_FORMAT", "%Y-%m-%d")
    monkeypatch.setenv("SALES_ROW_POLICY", "REJECT")
    monkeypatch.setenv("SALES_FETCH_TIMEOUT", "2.5")

    s = get_settings()
    assert s.data_source == "https://example.com/sales.csv"
    assert s.delimiter == ";"
    assert s.date_format == "%Y-%m-%d"
    assert s.row_policy == "reject"
    assert s.fetch_timeout == 2.5


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SALES_ROW_POLICY", "ignore"),
        ("SALES_DELIMITER", "||"),
        ("SALES_FETCH_TIMEOUT", "soon"),
        ("SALES_FETCH_TIMEOUT", "0"),
        ("SALES_DATA_SOURCE", "  "),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError, match=name):
        get_settings()
