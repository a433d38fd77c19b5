from .models import (
    InPersonSessions, DowntimeParty, OnlineSessions, ClassicGames,
    ARC_LENGTH_WEEKS, WEEKS_PER_YEAR, MONTHS_PER_YEAR, ARCS_PER_YEAR
)

def per_session_from_arc(arc_price: float) -> float:
    """Convert a 6-week arc price into a per-session fee"""
    return arc_price / ARC_LENGTH_WEEKS

def active_in_person_tables(ip: InPersonSessions) -> int:
    return 1 + (1 if ip.run_second_table else 0)

def table_weekly_revenue(ip: InPersonSessions) -> float:
    """Recurring players plus drop-ins amortized across the arc"""
    session_fee = per_session_from_arc(ip.arc_price)
    drop_in_weekly = (ip.drop_ins_per_arc * ip.drop_in_price) / ARC_LENGTH_WEEKS
    return ip.players_per_table * session_fee + drop_in_weekly

def in_person_streams(ip: InPersonSessions) -> dict:
    """
    Weekly/monthly/annual figures for table 1 (owner run) and table 2 (hired DM).

    Table 2 figures are always computed so the advisory rules can judge the
    hire; only `total_annual_profit` honours the run_second_table flag.
    """
    weekly_rev = table_weekly_revenue(ip)

    def table(weekly_cost: float) -> dict:
        weekly_profit = weekly_rev - weekly_cost
        return {
            "weekly_rev": weekly_rev,
            "weekly_cost": weekly_cost,
            "weekly_profit": weekly_profit,
            "monthly_rev": weekly_rev * WEEKS_PER_YEAR / MONTHS_PER_YEAR,
            "monthly_cost": weekly_cost * WEEKS_PER_YEAR / MONTHS_PER_YEAR,
            "annual_rev": weekly_rev * WEEKS_PER_YEAR,
            "annual_cost": weekly_cost * WEEKS_PER_YEAR,
            "annual_profit": weekly_profit * WEEKS_PER_YEAR,
        }

    table1 = table(ip.venue_cost_per_session)
    table2 = table(ip.venue_cost_per_session + ip.hired_dm_rate)

    total_annual_profit = table1["annual_profit"] + (table2["annual_profit"] if ip.run_second_table else 0.0)

    return {
        "session_fee": per_session_from_arc(ip.arc_price),
        "table1": table1,
        "table2": table2,
        "second_table": ip.run_second_table,
        "total_annual_profit": total_annual_profit,
        "total_monthly_profit": total_annual_profit / MONTHS_PER_YEAR,
    }

def party_stream(party: DowntimeParty, active_tables: int) -> dict:
    """One party per arc; attendance scales with active in-person tables"""
    attendees = party.attendees_per_table * active_tables
    rev_per_event = attendees * party.ticket_price
    cost_per_event = party.venue_cost + party.supplies_cost
    net_per_event = rev_per_event - cost_per_event
    return {
        "attendees": attendees,
        "rev_per_event": rev_per_event,
        "cost_per_event": cost_per_event,
        "net_per_event": net_per_event,
        "events_per_year": ARCS_PER_YEAR,
        "annual_rev": rev_per_event * ARCS_PER_YEAR,
        "annual_cost": cost_per_event * ARCS_PER_YEAR,
        "annual_profit": net_per_event * ARCS_PER_YEAR,
    }

def online_stream(online: OnlineSessions, players_per_table: float) -> dict:
    """Remote tables; seat count comes from the in-person players_per_table"""
    session_fee = per_session_from_arc(online.arc_price)
    weekly_rev = players_per_table * session_fee * online.tables
    annual_rev = weekly_rev * WEEKS_PER_YEAR
    annual_cost = online.platform_cost_per_month * MONTHS_PER_YEAR
    annual_profit = annual_rev - annual_cost
    return {
        "session_fee": session_fee,
        "tables": online.tables,
        "weekly_rev": weekly_rev,
        "monthly_rev": annual_rev / MONTHS_PER_YEAR,
        "monthly_cost": online.platform_cost_per_month,
        "monthly_profit": annual_profit / MONTHS_PER_YEAR,
        "annual_rev": annual_rev,
        "annual_cost": annual_cost,
        "annual_profit": annual_profit,
    }

def classic_stream(classic: ClassicGames) -> dict:
    rev_per_event = classic.players * classic.entry_fee
    cost_per_event = classic.prize_cost
    events_per_year = classic.events_per_month * MONTHS_PER_YEAR
    annual_profit = (rev_per_event - cost_per_event) * events_per_year
    return {
        "rev_per_event": rev_per_event,
        "cost_per_event": cost_per_event,
        "events_per_month": classic.events_per_month,
        "monthly_rev": rev_per_event * classic.events_per_month,
        "monthly_cost": cost_per_event * classic.events_per_month,
        "monthly_profit": annual_profit / MONTHS_PER_YEAR,
        "annual_rev": rev_per_event * events_per_year,
        "annual_cost": cost_per_event * events_per_year,
        "annual_profit": annual_profit,
    }
