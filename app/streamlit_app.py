"""
Compound Pro - Wealth Projection Dashboard
==========================================

  1. Plan inputs:     principal, contribution, rate, horizon, retirement, one-time events
  2. Trajectory:      assets vs. invested principal vs. purchasing power
  3. Age table:       one row per year, click-through to the monthly detail
  4. Scenarios:       save / load / delete named plans (JSON file)

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
import uuid
from dataclasses import replace
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULT_CONFIG, INPUT_LIMITS, OneTimeEvent, SimulationConfig, add_event, new_event
from core.errors import CompoundProError
from data_prep.validators import validate_config
from engine.runner import run_month_detail, run_projection
from reports.formatting import format_currency
from reports.tables import age_table, monthly_frame, trajectory_long
from store.json_file import JsonFileScenarioStore

from app.settings import store_path

STATE_KEY = "config"
EVENT_COLUMNS = ["id", "name", "year", "amount", "type"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _current_config() -> SimulationConfig:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DEFAULT_CONFIG
    return st.session_state[STATE_KEY]


def _events_frame(config: SimulationConfig) -> pd.DataFrame:
    rows = [
        {"id": e.id, "name": e.name, "year": e.year, "amount": e.amount, "type": e.type}
        for e in config.one_time_events
    ]
    return pd.DataFrame(rows, columns=EVENT_COLUMNS)


def _events_from_frame(df: pd.DataFrame) -> tuple:
    events = []
    for _, row in df.dropna(subset=["year", "amount"]).iterrows():
        # rows added in the editor come back with NaN id/name/type
        events.append(OneTimeEvent(
            id=str(row["id"]) if pd.notna(row["id"]) else uuid.uuid4().hex,
            name=str(row["name"]) if pd.notna(row["name"]) else "",
            year=int(row["year"]),
            amount=float(row["amount"]),
            type=str(row["type"]) if pd.notna(row["type"]) else "deposit",
        ))
    return tuple(events)


def _plot_trajectory(results, *, retirement_year: int, height: int = 380):
    long = trajectory_long(results)
    lines = (
        alt.Chart(long).mark_line()
        .encode(
            x=alt.X("year:Q", title="Year"),
            y=alt.Y("value:Q", title="Balance", axis=alt.Axis(format="~s")),
            color=alt.Color("series:N", title="Series"),
            tooltip=["year", "age", "series", alt.Tooltip("value:Q", format=",.0f")],
        )
    )
    assets = (
        alt.Chart(long[long["series"] == "Total assets"]).mark_area(opacity=0.15)
        .encode(x="year:Q", y="value:Q")
    )
    chart = assets + lines
    if retirement_year < int(long["year"].max()):
        rule = (
            alt.Chart(pd.DataFrame({"year": [retirement_year]}))
            .mark_rule(color="firebrick", strokeDash=[4, 4])
            .encode(x="year:Q")
        )
        chart = chart + rule
    st.altair_chart(chart.properties(height=height), use_container_width=True)


def _limits(name: str, value: float):
    """(min, max, value) as floats for a form widget; value is pulled into range."""
    lo, hi = (float(v) for v in INPUT_LIMITS[name])
    return lo, hi, min(max(float(value), lo), hi)


def _fmt_table(df: pd.DataFrame, money_cols) -> pd.DataFrame:
    out = df.copy()
    for c in money_cols:
        out[c] = out[c].apply(format_currency)
    return out


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="Compound Pro", layout="wide")
st.title("Compound Pro")
st.caption("Advanced wealth simulator: monthly compounding, retirement withdrawals, one-time events")

store = JsonFileScenarioStore(store_path())
cfg = _current_config()

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR - Plan inputs
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    hdr, lock = st.columns([3, 1])
    hdr.header("Basics")
    basic_locked = lock.toggle("Lock", key="lock_basic")
    principal = st.number_input(
        "Initial principal", *_limits("initial_principal", cfg.initial_principal), 10_000.0,
        disabled=basic_locked,
    )
    contribution = st.number_input(
        "Monthly contribution", *_limits("monthly_contribution", cfg.monthly_contribution), 1_000.0,
        disabled=basic_locked,
    )
    rate = st.slider(
        "Annual return (%)", *_limits("annual_rate", cfg.annual_rate), 0.1, disabled=basic_locked,
    )
    c1, c2 = st.columns(2)
    lo, hi, value = _limits("start_age", cfg.start_age)
    start_age = c1.number_input("Start age", int(lo), int(hi), int(value), 1, disabled=basic_locked)
    lo, hi, value = _limits("years_to_grow", cfg.years_to_grow)
    years = c2.number_input("Years", int(lo), int(hi), int(value), 1, disabled=basic_locked)
    inflation = st.slider(
        "Inflation (%)", 0.0, 10.0, min(max(float(cfg.inflation_rate), 0.0), 10.0), 0.1,
        disabled=basic_locked,
    )

    hdr, lock = st.columns([3, 1])
    hdr.header("Retirement")
    retirement_locked = lock.toggle("Lock", key="lock_retirement")
    if int(years) > 1:
        retirement_year = st.slider(
            "Withdrawals start after year", 1, int(years), min(max(int(cfg.retirement_year), 1), int(years)),
            help="Contributions stop and monthly withdrawals begin after this year.",
            disabled=retirement_locked,
        )
    else:
        # a one-year horizon has no withdrawal phase to place
        retirement_year = 1
    st.caption(f"Retire at age {int(start_age) + retirement_year}")
    withdrawal = st.number_input(
        "Monthly withdrawal", *_limits("monthly_withdrawal", cfg.monthly_withdrawal), 1_000.0,
        disabled=retirement_locked,
    )

    cfg = replace(
        cfg,
        initial_principal=float(principal),
        monthly_contribution=float(contribution),
        annual_rate=float(rate),
        years_to_grow=int(years),
        start_age=int(start_age),
        retirement_year=int(retirement_year),
        monthly_withdrawal=float(withdrawal),
        inflation_rate=float(inflation),
    )

    hdr, lock = st.columns([3, 1])
    hdr.header("One-time events")
    events_locked = lock.toggle("Lock", key="lock_events")
    edited = st.data_editor(
        _events_frame(cfg),
        hide_index=True,
        use_container_width=True,
        key="events_editor",
        column_config={
            "id": None,
            "year": st.column_config.NumberColumn("Year", min_value=1, max_value=int(years), step=1),
            "amount": st.column_config.NumberColumn(
                "Amount", min_value=0, max_value=INPUT_LIMITS["event_amount"][1], step=10_000,
            ),
            "type": st.column_config.SelectboxColumn("Type", options=["deposit", "withdrawal"]),
        },
        disabled=True if events_locked else ["id"],
    )
    cfg = replace(cfg, one_time_events=_events_from_frame(edited))
    if st.button("Add lump sum", use_container_width=True, disabled=events_locked):
        cfg = add_event(cfg, new_event(cfg))
        st.session_state[STATE_KEY] = cfg
        st.rerun()

st.session_state[STATE_KEY] = cfg

# Validation
vr = validate_config(cfg)
if not vr.is_valid:
    st.error("Plan validation failed:\n" + vr.summary())
    st.stop()
for w in vr.warnings:
    st.warning(w)

result = run_projection(cfg, validate=False)
summary = result.summary

# ═══════════════════════════════════════════════════════════════════════════
# SUMMARY CARDS
# ═══════════════════════════════════════════════════════════════════════════
k1, k2, k3, k4 = st.columns(4)
k1.metric("Final assets", format_currency(summary.final_assets),
          help=f"{summary.years} years | age {summary.final_age}")
k2.metric("Total invested", format_currency(summary.total_invested))
k3.metric("Total interest", format_currency(summary.total_interest))
if summary.final_purchasing_power is not None:
    k4.metric("Purchasing power", format_currency(summary.final_purchasing_power))
for flag in summary.flags:
    st.warning(flag)

# ═══════════════════════════════════════════════════════════════════════════
# TRAJECTORY / AGE TABLE
# ═══════════════════════════════════════════════════════════════════════════
tab_chart, tab_age = st.tabs(["Asset trajectory", "By age"])

with tab_chart:
    _plot_trajectory(result.yearly, retirement_year=cfg.retirement_year)

with tab_age:
    table = age_table(result.yearly)
    st.dataframe(
        _fmt_table(table, ["total_invested", "interest_earned_yearly", "total_assets", "purchasing_power"]),
        use_container_width=True,
        hide_index=True,
    )

    st.markdown("**Monthly detail**")
    detail_year = st.selectbox(
        "Year",
        options=table["year"].tolist(),
        format_func=lambda y: f"Year {y} (age {cfg.start_age + y})",
    )
    if detail_year is not None:
        details = monthly_frame(run_month_detail(cfg, int(detail_year), validate=False))
        st.dataframe(
            _fmt_table(details, ["start_balance", "interest", "contribution", "end_balance"]),
            use_container_width=True,
            hide_index=True,
        )

# ═══════════════════════════════════════════════════════════════════════════
# SCENARIOS - save / load / delete
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
st.subheader("Saved scenarios")

save_col, list_col = st.columns([1, 2])
with save_col:
    scenario_name = st.text_input("Scenario name", placeholder="e.g. Retire at 55")
    if st.button("Save scenario", type="primary", disabled=not scenario_name.strip()):
        try:
            rec = store.add(scenario_name, cfg)
            st.success(f"Saved '{rec.name}'")
        except CompoundProError as e:
            st.error(str(e))

with list_col:
    try:
        records = store.list()
    except CompoundProError as e:
        st.error(str(e))
        records = []
    if not records:
        st.info("No saved scenarios yet.")
    for rec in records:
        r1, r2, r3 = st.columns([4, 1, 1])
        r1.markdown(f"**{rec.name}**  \n{rec.date}")
        if r2.button("Load", key=f"load_{rec.id}"):
            st.session_state[STATE_KEY] = rec.config()
            st.rerun()
        if r3.button("Delete", key=f"delete_{rec.id}"):
            store.remove(rec.id)
            st.rerun()
