from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))


import pandas as pd
import streamlit as st

from mortgage_projection.app.charts import ChartSurface, chart_frame, format_currency
from mortgage_projection.core.scenarios import MODES, TIMEFRAME_OPTIONS, base_scenario
from mortgage_projection.core.simulator import SimulationResult, recalculate
from mortgage_projection.core.timeframe import project

logger = logging.getLogger(__name__)


st.set_page_config(page_title="Mortgage & Net Worth Projection", layout="wide")


def sidebar_inputs() -> dict:
    defaults = base_scenario()
    with st.sidebar.expander("Loan", expanded=True):
        principal = st.number_input("Loan amount", min_value=0.0, value=float(defaults.principal), step=5_000.0)
        rate = st.number_input(
            "Interest rate (annual %)", min_value=0.0, max_value=25.0, value=defaults.annual_rate_percent, step=0.05, format="%.3f"
        )
        term = st.number_input("Term (years)", min_value=0, max_value=50, value=int(defaults.term_years), step=1)
        extra = st.number_input("Extra payment (monthly)", min_value=0.0, value=defaults.extra_monthly_payment, step=50.0)

    with st.sidebar.expander("Investments & Home", expanded=True):
        portfolio = st.number_input("Starting portfolio", value=float(defaults.initial_portfolio), step=5_000.0)
        market_return = st.number_input(
            "Market return (annual %)", value=defaults.annual_market_return_percent, step=0.1, format="%.2f"
        )
        home_value = st.number_input("Home value", min_value=0.0, value=float(defaults.home_value), step=5_000.0)
        appreciation = st.number_input(
            "Home appreciation (annual %)", value=defaults.annual_home_appreciation_percent, step=0.1, format="%.2f"
        )

    return {
        "principal": principal,
        "annual_rate_percent": rate,
        "term_years": term,
        "extra_monthly_payment": extra,
        "initial_portfolio": portfolio,
        "annual_market_return_percent": market_return,
        "initial_home_value": home_value,
        "annual_home_appreciation_percent": appreciation,
    }


def render_summary(result: SimulationResult) -> None:
    cols = st.columns(3)
    cols[0].metric("Monthly payment", format_currency(result.summary["monthly_payment"]))
    cols[1].metric("Total interest", format_currency(result.summary["total_interest"]))
    cols[2].metric("Total cost", format_currency(result.summary["total_cost"]))


def draw_mortgage(df: pd.DataFrame) -> None:
    st.markdown("**Balance remaining**")
    st.line_chart(chart_frame(df, ["balance"]), height=260)
    st.markdown("**Principal paid per year**")
    st.bar_chart(chart_frame(df, ["principal"]), height=200)
    st.markdown("**Interest per month (at sample)**")
    st.line_chart(chart_frame(df, ["interest"]), height=200)


def draw_portfolio(df: pd.DataFrame) -> None:
    st.line_chart(chart_frame(df, ["portfolio"]), height=260)
    st.markdown("**Monthly payment withdrawn**")
    st.line_chart(chart_frame(df, ["portfolio_payment"]), height=200)


def draw_net_worth(df: pd.DataFrame) -> None:
    st.line_chart(chart_frame(df, ["net_worth", "home_equity", "portfolio"]), height=320)


SURFACES = {
    "mortgage": ("Mortgage", draw_mortgage),
    "portfolio": ("Investment portfolio", draw_portfolio),
    "net_worth": ("Net worth", draw_net_worth),
}


def chart_surfaces() -> dict:
    # Placeholders only live for one script run; the rerun itself clears the old charts
    return {key: ChartSurface(key, st.empty) for key in SURFACES}


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    st.title("Mortgage & Net Worth Projection")
    st.write(
        "Amortize a mortgage month by month and follow the investment portfolio, home equity and total net worth it leaves behind."
    )

    raw = sidebar_inputs()
    mode = st.sidebar.selectbox("Projection mode", options=list(MODES))
    settings = MODES[mode]()

    previous = st.session_state.get("full_result")
    result = recalculate(raw, previous=previous, settings=settings)
    if result is None:
        st.info("Enter a positive loan amount, interest rate and term to see the projection.")
        return
    if result is previous:
        logger.warning("Showing last valid projection after rejected input")
        st.warning("Some inputs are invalid; showing the last valid projection.")
    st.session_state["full_result"] = result

    render_summary(result)

    surfaces = chart_surfaces()
    for key, (title, draw) in SURFACES.items():
        st.subheader(title)
        timeframe = st.selectbox("Timeframe (years)", options=TIMEFRAME_OPTIONS, key=f"{key}_timeframe")
        surfaces[key].render(project(result.series, timeframe), draw)


if __name__ == "__main__":
    main()
