"""
Event Financial Planner - Streamlit UI
Revenue modeling for in-person arcs, downtime parties, online sessions and classic game nights.
The engine is the single source of truth; every rerun recomputes the full projection.
"""

import logging

import streamlit as st
from config.default_params import ANNUAL_PROFIT_TARGET_NOTE
from engine.compute import compute, stream_table
from components.state import init_state, current_assumptions
from components.widgets import stat_box
from components.stream_panels import (
    render_in_person_card, render_party_card, render_online_card, render_classic_card
)
from components.analysis_panel import render_analysis_panel
from utils.formatting import format_currency, format_number, format_percent
from utils.visualizations import create_stream_profit_chart, create_revenue_cost_chart

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


st.set_page_config(
    page_title="Event Financial Planner",
    page_icon="🎲",
    layout="wide"
)


def render_header():
    title_col, badge_col = st.columns([4, 1])
    with title_col:
        st.title("Event Financial Planner")
        st.caption("Revenue Modeling & Cost Analysis")
    with badge_col:
        st.markdown("🟢 **Live Projection**")


def render_stats(res):
    """Four headline tiles from the projection totals."""
    totals = res["totals"]
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        stat_box("Est. Annual Profit", format_currency(totals["annual_profit"]),
                 ANNUAL_PROFIT_TARGET_NOTE)
    with c2:
        stat_box("Monthly Average", format_currency(totals["monthly_avg"], 0))
    with c3:
        stat_box("Active Tables", format_number(totals["total_tables"]),
                 f"{totals['active_tables']} In-Person / {format_number(totals['online_tables'])} Online")
    with c4:
        stat_box("Profit Margin", format_percent(totals["gross_margin_pct"]), "Gross Estimate")


def main():
    init_state()
    a = current_assumptions()
    logger.debug("Rerun with assumptions %s", a)
    res = compute(a)

    render_header()
    render_stats(res)

    main_col, side_col = st.columns([2, 1])
    with main_col:
        render_in_person_card(res, a.in_person.players_per_table)
        render_party_card(res)
    with side_col:
        render_online_card(res)
        render_classic_card(res)
        render_analysis_panel(res)

    streams_df = stream_table(res)
    chart_col1, chart_col2 = st.columns(2)
    with chart_col1:
        st.plotly_chart(create_stream_profit_chart(streams_df), width="stretch")
    with chart_col2:
        st.plotly_chart(create_revenue_cost_chart(streams_df), width="stretch")

    with st.expander("View Stream Breakdown"):
        display_df = streams_df.copy()
        for col in ['annual_rev', 'annual_cost', 'annual_profit', 'monthly_profit']:
            display_df[col] = display_df[col].apply(lambda x: format_currency(x, 0))
        display_df.columns = ['Stream', 'Annual Revenue', 'Annual Costs', 'Annual Profit', 'Monthly Profit']
        st.dataframe(display_df, width="stretch", hide_index=True)


if __name__ == "__main__":
    main()
