"""Test headline totals and the gross-estimate margin"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from engine.models import *
from engine.compute import compute
from engine.metrics import gross_margin_pct, round_half_up, monthly_average

def expected_margin(res, a):
    profit = res["totals"]["annual_profit"]
    ip = a.in_person
    denom = (profit + ip.venue_cost_per_session * 52 * res["derived"]["active_tables"] +
             ip.hired_dm_rate * 52 * (1 if ip.run_second_table else 0))
    return round_half_up(profit / denom * 100)

def test_margin_matches_literal_formula_defaults():
    a = Assumptions()
    res = compute(a)
    assert res["totals"]["gross_margin_pct"] == expected_margin(res, a)

def test_margin_excludes_dm_cost_when_second_table_off():
    a = Assumptions()
    a.in_person.run_second_table = False
    res = compute(a)
    profit = res["totals"]["annual_profit"]
    denom = profit + 50 * 52 * 1
    assert res["totals"]["gross_margin_pct"] == round_half_up(profit / denom * 100)

def test_margin_ignores_party_online_classic_costs():
    """Only venue and hired DM costs enter the denominator"""
    a = Assumptions()
    a.online.platform_cost_per_month = 0
    a.party.supplies_cost = 0
    res = compute(a)
    assert res["totals"]["gross_margin_pct"] == expected_margin(res, a)

def test_margin_zero_denominator_is_none():
    assert gross_margin_pct(0.0, 0.0, 1, 0.0, False) is None
    assert gross_margin_pct(-5200.0, 50.0, 2, 0.0, False) is None

def test_margin_known_values():
    # 1000 / (1000 + 50*52*1) = 27.78% -> 28
    assert gross_margin_pct(1000.0, 50.0, 1, 0.0, False) == 28
    # 2600 / (2600 + 2600) = 50%
    assert gross_margin_pct(2600.0, 50.0, 1, 999.0, False) == 50
    # DM cost counted only when second table runs
    assert gross_margin_pct(5200.0, 50.0, 2, 50.0, True) == 40

def test_round_half_up_matches_browser_rounding():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(27.4) == 27

def test_monthly_average():
    assert monthly_average(1200.0) == 100.0
    res = compute(Assumptions())
    assert res["totals"]["monthly_avg"] == res["totals"]["annual_profit"] / 12

def test_total_tables_counts_online():
    a = Assumptions()
    a.online.tables = 3
    totals = compute(a)["totals"]
    assert totals["active_tables"] == 2
    assert totals["online_tables"] == 3
    assert totals["total_tables"] == 5
