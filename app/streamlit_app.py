"""
FUEGO — Financial Independence Path Dashboard
=============================================

Sidebar sliders feed the assumption set; every change rebuilds the path and
re-renders:
  1. Headline metrics:  retirement age, final net worth, FI number
  2. Net worth vs age with the FI target line
  3. Net salary / expenses / savings vs age
  4. What-if suggestions (single-variable re-projections)

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path as FsPath

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = FsPath(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULT_CONFIG
from core.schema import create_default_assumptions, update_assumption
from core.validators import validate_assumptions

from engine.path import build_path

from insights.metrics import compute_path_metrics
from insights.suggestions import generate_suggestions, rank_suggestions

from scenarios.presets import PREDEFINED_SCENARIOS, apply_scenario

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("fuego.app")

# Slider order in the sidebar
SLIDER_ORDER = [
    "current_age",
    "current_savings",
    "salary",
    "income_tax_rate",
    "monthly_expenses",
    "monthly_savings",
    "investment_return",
    "inflation_rate",
]


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
def _fmt_money(val):
    """Format currency: €1.2M / €850k / €900."""
    if abs(val) >= 1_000_000:
        return f"€{val / 1_000_000:.1f}M"
    if abs(val) >= 1_000:
        return f"€{val / 1_000:.0f}k"
    return f"€{val:,.0f}"


def _plot_net_worth(df, *, target, fi_age, height=320):
    if len(df) == 0:
        st.info("No years to project — current age is past the horizon.")
        return
    line = (
        alt.Chart(df).mark_line(color="steelblue", strokeWidth=2)
        .encode(
            x=alt.X("age:Q", title="Age"),
            y=alt.Y("net_worth:Q", title="Net Worth (€)", axis=alt.Axis(format=",.0f")),
            tooltip=["age", "year", alt.Tooltip("net_worth:Q", format=",.0f")],
        )
    )
    rule = alt.Chart(pd.DataFrame({"target": [target]})).mark_rule(
        color="firebrick", strokeDash=[6, 4]
    ).encode(y="target:Q")
    layers = line + rule
    if fi_age is not None:
        marker = alt.Chart(df[df["age"] == fi_age]).mark_circle(size=90, color="green").encode(
            x="age:Q", y="net_worth:Q"
        )
        layers = layers + marker
    st.altair_chart(layers.properties(title="Net Worth vs Age", height=height), use_container_width=True)


def _plot_cashflows(df, *, height=280):
    if len(df) == 0:
        return
    d = df[["age", "net_salary", "monthly_expenses", "monthly_savings"]].copy()
    d["Net Salary (annual)"] = d["net_salary"]
    d["Expenses (annual)"] = d["monthly_expenses"] * 12
    d["Savings (annual)"] = d["monthly_savings"] * 12
    series = ["Net Salary (annual)", "Expenses (annual)", "Savings (annual)"]
    long = d.melt(id_vars=["age"], value_vars=series, var_name="series", value_name="value")
    chart = (
        alt.Chart(long).mark_line()
        .encode(
            x=alt.X("age:Q", title="Age"),
            y=alt.Y("value:Q", title="€ per year", axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Series"),
        )
        .properties(title="Income, Expenses and Savings", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="FUEGO", layout="wide")
st.title("🔥 FUEGO")
st.caption("Financial Independence Path Calculator")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Scenario + Assumptions
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    st.header("Scenario")
    scenario_id = st.selectbox(
        "Start from",
        options=list(PREDEFINED_SCENARIOS.keys()),
        format_func=lambda k: PREDEFINED_SCENARIOS[k].name,
    )
    scenario = PREDEFINED_SCENARIOS[scenario_id]
    if scenario.description:
        st.caption(scenario.description)

    assumptions, decisions = apply_scenario(scenario, create_default_assumptions())

    st.header("Assumptions")
    for key in SLIDER_ORDER:
        a = assumptions.get(key)
        value = st.slider(
            f"{a.name} ({a.unit})",
            min_value=float(a.min),
            max_value=float(a.max),
            value=float(a.value),
            step=float(a.step),
            help=a.description,
            key=f"{scenario_id}:{key}",
        )
        assumptions = update_assumption(assumptions, key, value)

# ═══════════════════════════════════════════════════════════════════════════
# PROJECTION
# ═══════════════════════════════════════════════════════════════════════════
vr = validate_assumptions(assumptions, DEFAULT_CONFIG)
if not vr.is_valid:
    st.error(vr.summary())

path = build_path(assumptions, decisions, id=scenario.id, name=scenario.name, config=DEFAULT_CONFIG)
metrics = compute_path_metrics(path)
df = path.result.to_dataframe()
logger.info("projected %s: retirement_age=%s score=%.2f", path.id, path.retirement_age, path.score)

k1, k2, k3, k4 = st.columns(4)
k1.metric("Retirement Age", metrics.retirement_age if metrics.retirement_age is not None else "Never")
k2.metric("Years to FI", metrics.years_to_fi if metrics.years_to_fi is not None else "Never")
k3.metric("Final Net Worth", _fmt_money(metrics.final_net_worth))
k4.metric("FI Number", _fmt_money(metrics.fi_number))

left, right = st.columns([2, 1])
with left:
    _plot_net_worth(df, target=path.target_amount, fi_age=path.retirement_age)
    _plot_cashflows(df)
with right:
    st.subheader("📊 Key Metrics")
    st.dataframe(metrics.to_dataframe(), use_container_width=True, hide_index=True)
    if decisions:
        st.subheader("Decisions")
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "Decision": d.name,
                        "From": d.start_age,
                        "To": d.end_age if d.end_age is not None else "—",
                    }
                    for d in decisions
                ]
            ),
            use_container_width=True,
            hide_index=True,
        )

# ═══════════════════════════════════════════════════════════════════════════
# SUGGESTIONS
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("💡 Optimization Suggestions")
suggestions = rank_suggestions(generate_suggestions(path))
if not suggestions:
    st.info("No single-variable improvements apply to these assumptions.")
else:
    cols = st.columns(len(suggestions))
    for col, s in zip(cols, suggestions):
        with col:
            st.markdown(f"**{s.title}**")
            st.write(s.description)
            st.caption(s.tag)

with st.expander("Year-by-year projection"):
    st.dataframe(df, use_container_width=True, hide_index=True)
