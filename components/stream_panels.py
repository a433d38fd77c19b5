"""Per-stream cards: inputs on top, monthly or per-event breakdown below."""

import streamlit as st
from components.widgets import (
    number_field, readonly_field, toggle_field, result_row
)
from utils.formatting import format_currency, format_number


def render_in_person_card(res, players_per_table):
    """1. In-person arcs with the optional hired-DM table."""
    with st.container(border=True):
        st.subheader("1. In-Person D&D Arcs (6 Weeks)")

        info_col, toggle_col = st.columns([3, 1])
        with info_col:
            st.markdown(f"**Model:** {format_number(players_per_table)} players @ 6-week cycles.")
        with toggle_col:
            toggle_field("Hire 2nd DM", "in_person.run_second_table")

        c1, c2, c3, c4 = st.columns(4)
        with c1:
            number_field("Arc Cost (6 Weeks)", "in_person.arc_price")
        with c2:
            readonly_field("Session Fee (Calc)", res["derived"]["session_fee"], "session_fee")
        with c3:
            number_field("Venue Cost / Session", "in_person.venue_cost_per_session")
        with c4:
            number_field("Hired DM Rate", "in_person.hired_dm_rate")

        c1, c2, c3 = st.columns(3)
        with c1:
            number_field("Players / Table", "in_person.players_per_table", prefix="#")
        with c2:
            number_field("Drop-in Price", "in_person.drop_in_price")
        with c3:
            number_field("Drop-ins / Arc", "in_person.drop_ins_per_arc", prefix="#")

        ip = res["in_person"]
        st.markdown("##### Monthly Financial Breakdown")
        result_row("Table 1 Revenue (Owner)", ip["table1"]["monthly_rev"], subtext="Runs 52 weeks/yr")
        result_row("Table 1 Costs (Venue)", ip["table1"]["monthly_cost"], negative=True)

        if ip["second_table"]:
            st.caption("Expansion Table")
            result_row("Table 2 Revenue", ip["table2"]["monthly_rev"], subtext="Same capacity assumed")
            result_row("Table 2 Costs", ip["table2"]["monthly_cost"], negative=True, subtext="Venue + Hired DM")

        result_row("Net D&D Monthly Profit", ip["total_monthly_profit"], total=True)


def render_party_card(res):
    """2. Downtime party held after every arc."""
    with st.container(border=True):
        st.subheader("2. Downtime Party")
        inputs_col, summary_col = st.columns([3, 1])

        with inputs_col:
            st.write("Special events hosted after every 6-week arc. "
                     "Revenue is driven by total attendees from active tables.")
            c1, c2, c3, c4 = st.columns(4)
            with c1:
                number_field("Ticket Price", "party.ticket_price")
            with c2:
                number_field("Guests / Table", "party.attendees_per_table", prefix="#")
            with c3:
                number_field("Venue Cost", "party.venue_cost")
            with c4:
                number_field("Supplies Cost", "party.supplies_cost")

        party = res["party"]
        with summary_col:
            st.markdown("**Event Profitability**")
            result_row("Revenue", party["rev_per_event"], subtext=f"{party['attendees']:g} attendees")
            result_row("Expenses", party["cost_per_event"], negative=True)
            net = party["net_per_event"]
            color = "#34d399" if net >= 0 else "#fb7185"
            st.markdown(
                f"<div style='display:flex;justify-content:space-between'>"
                f"<strong>Net / Party</strong>"
                f"<span style='font-family:monospace;font-weight:700;color:{color}'>{format_currency(net)}</span></div>",
                unsafe_allow_html=True,
            )


def render_online_card(res):
    """3. Online tables priced per arc."""
    with st.container(border=True):
        st.subheader("3. Online Sessions")
        c1, c2 = st.columns(2)
        with c1:
            number_field("Arc Cost (6 Weeks)", "online.arc_price")
            number_field("Tables", "online.tables", prefix="#", clamp=True)
        with c2:
            readonly_field("Session Fee (Calc)", res["derived"]["online_session_fee"], "online_session_fee")
            number_field("Software Cost/Mo", "online.platform_cost_per_month")

        online = res["online"]
        result_row("Monthly Revenue", online["monthly_rev"])
        result_row("Software Subs", online["monthly_cost"], negative=True)
        result_row("Net Monthly", online["monthly_profit"], total=True)


def render_classic_card(res):
    """4. Classic game nights."""
    with st.container(border=True):
        st.subheader("4. Classic Games")
        c1, c2 = st.columns(2)
        with c1:
            number_field("Entry Fee", "classic.entry_fee")
            number_field("Prize Cost", "classic.prize_cost")
        with c2:
            number_field("Events / Month", "classic.events_per_month", prefix="#")
            number_field("Players", "classic.players", prefix="#")

        classic = res["classic"]
        result_row("Monthly Revenue", classic["monthly_rev"])
        result_row("Monthly Cost", classic["monthly_cost"], negative=True)
        result_row("Net Monthly", classic["monthly_profit"], total=True)
