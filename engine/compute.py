import logging

import pandas as pd

from .models import Assumptions, ARCS_PER_YEAR
from .revenue import (
    active_in_person_tables, in_person_streams, party_stream,
    online_stream, classic_stream
)
from .metrics import grand_total_annual_profit, monthly_average, gross_margin_pct

logger = logging.getLogger(__name__)

STREAM_LABELS = {
    "in_person": "In-Person D&D Arcs",
    "party": "Downtime Party",
    "online": "Online Sessions",
    "classic": "Classic Games",
}

def compute(a: Assumptions) -> dict:
    """
    Compute the full projection from the current assumptions.

    Pure: reads `a`, never mutates it, keeps no state between calls.

    Args:
        a: Assumptions for all four streams
    """
    ip = a.in_person
    active_tables = active_in_person_tables(ip)

    in_person = in_person_streams(ip)
    party = party_stream(a.party, active_tables)
    online = online_stream(a.online, ip.players_per_table)
    classic = classic_stream(a.classic)

    annual_profit = grand_total_annual_profit(
        in_person["total_annual_profit"],
        party["annual_profit"],
        online["annual_profit"],
        classic["annual_profit"],
    )
    margin = gross_margin_pct(
        annual_profit, ip.venue_cost_per_session, active_tables,
        ip.hired_dm_rate, ip.run_second_table
    )

    logger.debug("Projection computed: annual_profit=%.2f margin=%s active_tables=%d",
                 annual_profit, margin, active_tables)

    return {
        "derived": {
            "session_fee": in_person["session_fee"],
            "online_session_fee": online["session_fee"],
            "arcs_per_year": ARCS_PER_YEAR,
            "active_tables": active_tables,
        },
        "in_person": in_person,
        "party": party,
        "online": online,
        "classic": classic,
        "totals": {
            "annual_profit": annual_profit,
            "monthly_avg": monthly_average(annual_profit),
            "gross_margin_pct": margin,
            "active_tables": active_tables,
            "online_tables": online["tables"],
            "total_tables": active_tables + online["tables"],
        },
    }

def stream_table(res: dict) -> pd.DataFrame:
    """One row per stream with annual revenue, cost and profit"""
    ip = res["in_person"]
    second = ip["second_table"]
    in_person_rev = ip["table1"]["annual_rev"] + (ip["table2"]["annual_rev"] if second else 0.0)
    in_person_cost = ip["table1"]["annual_cost"] + (ip["table2"]["annual_cost"] if second else 0.0)

    rows = [
        {"stream": STREAM_LABELS["in_person"], "annual_rev": in_person_rev,
         "annual_cost": in_person_cost, "annual_profit": ip["total_annual_profit"]},
    ]
    for key in ("party", "online", "classic"):
        s = res[key]
        rows.append({
            "stream": STREAM_LABELS[key],
            "annual_rev": s["annual_rev"],
            "annual_cost": s["annual_cost"],
            "annual_profit": s["annual_profit"],
        })

    df = pd.DataFrame(rows)
    df["monthly_profit"] = df["annual_profit"] / 12
    return df
