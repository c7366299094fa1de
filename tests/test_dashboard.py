from dataclasses import replace
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from app.settings import STORE_ENV_VAR
from core.config import DEFAULT_CONFIG
from engine.runner import run_projection
from reports.formatting import format_currency

APP_PATH = str(Path(__file__).resolve().parent.parent / "app" / "streamlit_app.py")


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv(STORE_ENV_VAR, str(tmp_path / "scenarios.json"))
    return AppTest.from_file(APP_PATH, default_timeout=60)


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def test_default_page_renders(app):
    app.run()

    assert not app.exception
    assert app.metric[0].label == "Final assets"
    expected = run_projection(DEFAULT_CONFIG).summary.final_assets
    assert app.metric[0].value == format_currency(expected)


def test_one_year_horizon_skips_retirement_slider(app):
    app.session_state["config"] = replace(DEFAULT_CONFIG, years_to_grow=1, retirement_year=1)

    app.run()

    assert not app.exception
    assert all(s.label != "Withdrawals start after year" for s in app.slider)
    assert any(c.value == "Retire at age 26" for c in app.caption)
    assert app.session_state["config"].retirement_year == 1


def test_section_locks_disable_inputs(app):
    app.run()
    assert not app.number_input[0].disabled

    app.toggle(key="lock_basic").set_value(True)
    app.toggle(key="lock_events").set_value(True)
    app.run()

    assert not app.exception
    assert app.number_input[0].disabled
    assert app.slider[0].disabled
    assert _button(app, "Add lump sum").disabled


def test_add_lump_sum_appends_event(app):
    app.run()

    _button(app, "Add lump sum").click()
    app.run()

    assert not app.exception
    events = app.session_state["config"].one_time_events
    assert len(events) == 1
    assert events[0].year == 15
