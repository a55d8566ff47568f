import pandas as pd
import pytest
from streamlit.testing.v1 import AppTest

from core.config import get_settings

@pytest.fixture
def app_with_source(monkeypatch):
    def _run(path):
        monkeypatch.setenv("MINMAX_DATA_SOURCE", str(path))
        get_settings.cache_clear()
        at = AppTest.from_file("../app.py", default_timeout=30)
        at.run()
        get_settings.cache_clear()
        return at
    return _run

def test_renders_loaded_workbook(app_with_source, tmp_path, scenario_raw):
    path = tmp_path / "minmax.xlsx"
    scenario_raw.to_excel(path, index=False)
    at = app_with_source(path)
    assert not at.exception
    assert not at.error
    assert at.header[0].value == "Min/Max Recommendations"
    state = at.session_state["dashboard_state"]
    assert state.load_status == "ready"
    assert state.rows["item_id"].tolist() == ["A1", "A2"]

def test_missing_workbook_shows_error_and_retry(app_with_source, tmp_path):
    at = app_with_source(tmp_path / "nope.xlsx")
    assert not at.exception
    assert at.error[0].value.startswith("Failed to load data")
    assert any(b.label == "Retry" for b in at.button)

def test_reload_button_reloads_the_workbook(app_with_source, tmp_path, scenario_raw, row_factory):
    path = tmp_path / "minmax.xlsx"
    scenario_raw.to_excel(path, index=False)
    at = app_with_source(path)
    assert at.session_state["dashboard_state"].load_generation == 1
    assert len(at.get("link_button")) == 2

    pd.DataFrame([row_factory("Z9", max_=50, prev=40)]).to_excel(path, index=False)
    at.button(key="mm_reload").click().run()
    state = at.session_state["dashboard_state"]
    assert not at.exception
    assert state.load_generation == 2
    assert state.rows["item_id"].tolist() == ["Z9"]
