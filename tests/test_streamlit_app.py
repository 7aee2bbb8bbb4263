from __future__ import annotations

from pathlib import Path

import pytest

st = pytest.importorskip("streamlit")
from streamlit.testing.v1 import AppTest  # noqa: E402

from sales_pipeline.pipeline import LOAD_ERROR_MESSAGE  # noqa: E402

APP_PATH = Path(__file__).resolve().parents[1] / "streamlit_app" / "app.py"


@pytest.fixture(autouse=True)
def clear_cache() -> None:
    st.cache_data.clear()


def test_app_renders_metrics_and_charts(
    tmp_path: Path, sample_csv: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "sales.csv"
    path.write_text(sample_csv, encoding="utf-8")
    monkeypatch.setenv("SALES_DATA_SOURCE", str(path))

    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()

    assert not at.exception
    assert not at.error
    assert [m.label for m in at.metric] == ["Total Sales", "Total Profit", "Total Orders", "Avg Order Value"]
    assert at.metric[2].value == "5"


def test_app_retries_after_load_error(
    tmp_path: Path, sample_csv: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "sales.csv"
    monkeypatch.setenv("SALES_DATA_SOURCE", str(path))

    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    assert at.error[0].value == LOAD_ERROR_MESSAGE

    # the file appears later; the failed load must not be served from cache
    path.write_text(sample_csv, encoding="utf-8")
    at.run()

    assert not at.exception
    assert not at.error
    assert at.metric[2].value == "5"
