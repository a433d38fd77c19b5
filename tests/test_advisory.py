"""Test advisory rules fire exactly on their conditions"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from engine.models import *
from engine.compute import compute
from engine.advisory import evaluate, Advisory, SEVERITIES

def titles(res):
    return [adv.title for adv in evaluate(res)]

def assumptions_with_table2_profit(weekly_profit):
    """Table 1 weekly revenue is 125 (5 players, $150 arc, no drop-ins); tune the DM rate"""
    a = Assumptions()
    a.in_person.drop_ins_per_arc = 0
    a.in_person.venue_cost_per_session = 50
    a.in_person.hired_dm_rate = 125 - 50 - weekly_profit
    return a

def test_default_scenario_warns_but_no_table2_loss():
    """Weekly table 2 profit of 33.33 is low margin, not a loss"""
    res = compute(Assumptions())
    fired = titles(res)
    assert "Table 2 Low Margin" in fired
    assert "Table 2 Loss" not in fired

@pytest.mark.parametrize("profit,loss,low", [
    (-20.0, True, False),
    (0.0, True, False),
    (0.01, False, True),
    (25.0, False, True),
    (49.99, False, True),
    (50.0, False, False),
    (120.0, False, False),
])
def test_table2_rules_iff(profit, loss, low):
    res = compute(assumptions_with_table2_profit(profit))
    p = res["in_person"]["table2"]["weekly_profit"]
    fired = titles(res)
    assert ("Table 2 Loss" in fired) == (p <= 0) == loss
    assert ("Table 2 Low Margin" in fired) == (0 < p < 50) == low

def test_table2_rules_never_both_fire():
    for profit in (-10, 0, 10, 49, 50, 60):
        fired = titles(compute(assumptions_with_table2_profit(profit)))
        assert not ("Table 2 Loss" in fired and "Table 2 Low Margin" in fired)

def test_table2_rules_evaluated_when_second_table_off():
    a = assumptions_with_table2_profit(-5)
    a.in_person.run_second_table = False
    assert "Table 2 Loss" in titles(compute(a))

def test_party_loss_fires_when_costs_exceed_tickets():
    a = Assumptions()  # 12 attendees * 15 = 180 < 250
    assert "Party Loss" in titles(compute(a))
    a.party.ticket_price = 25  # 300 > 250
    assert "Party Loss" not in titles(compute(a))

def test_party_loss_not_fired_at_break_even():
    a = Assumptions()  # 12 attendees * 15 = 180
    a.party.venue_cost = 180
    a.party.supplies_cost = 0
    res = compute(a)
    assert res["party"]["rev_per_event"] == res["party"]["cost_per_event"]
    assert "Party Loss" not in titles(res)

def test_expansion_info_always_present_and_echoes_active_tables():
    a = Assumptions()
    advisories = evaluate(compute(a))
    info = [adv for adv in advisories if adv.severity == "info"]
    assert info == [Advisory("info", "Expansion", "Running 2 tables drives party profit.")]

    a.in_person.run_second_table = False
    info = [adv for adv in evaluate(compute(a)) if adv.severity == "info"]
    assert info[0].message == "Running 1 tables drives party profit."

def test_all_matching_rules_returned_in_order():
    a = assumptions_with_table2_profit(-1)   # loss
    a.party.ticket_price = 0                 # party loss
    fired = titles(compute(a))
    assert fired == ["Table 2 Loss", "Party Loss", "Expansion"]

def test_severities_are_known():
    for adv in evaluate(compute(Assumptions())):
        assert adv.severity in SEVERITIES
