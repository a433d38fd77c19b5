import math

from .models import WEEKS_PER_YEAR, MONTHS_PER_YEAR

def grand_total_annual_profit(*stream_profits: float) -> float:
    return sum(stream_profits)

def monthly_average(annual_profit: float) -> float:
    return annual_profit / MONTHS_PER_YEAR

def round_half_up(x: float) -> int:
    """Round .5 upward, like a browser's Math.round"""
    return int(math.floor(x + 0.5))

def gross_margin_pct(annual_profit: float, venue_cost_per_session: float, active_tables: int,
                     hired_dm_rate: float, second_table: bool):
    """
    Headline "Gross Estimate" margin.

    profit / (profit + annual venue cost of active tables + annual hired DM cost).
    Party, online and classic costs are not in the denominator; kept as the
    planner has always shown it. Returns None when the denominator is zero.
    """
    venue_annual = venue_cost_per_session * WEEKS_PER_YEAR * active_tables
    dm_annual = hired_dm_rate * WEEKS_PER_YEAR * (1 if second_table else 0)
    denominator = annual_profit + venue_annual + dm_annual
    if denominator == 0:
        return None
    return round_half_up(annual_profit / denominator * 100)
