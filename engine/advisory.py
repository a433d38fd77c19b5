"""Advisory rules evaluated against a computed projection"""
from dataclasses import dataclass

SEVERITIES = ("danger", "warning", "info")

LOW_MARGIN_WEEKLY = 50.0  # table 2 weekly profit below this is risky

@dataclass(frozen=True)
class Advisory:
    severity: str   # danger | warning | info
    title: str
    message: str

def table2_loss(res: dict) -> bool:
    return res["in_person"]["table2"]["weekly_profit"] <= 0

def table2_low_margin(res: dict) -> bool:
    profit = res["in_person"]["table2"]["weekly_profit"]
    return 0 < profit < LOW_MARGIN_WEEKLY

def party_loss(res: dict) -> bool:
    return res["party"]["rev_per_event"] < res["party"]["cost_per_event"]

def evaluate(res: dict) -> list[Advisory]:
    """
    Return every advisory whose condition holds, in display order.

    Rules are independent; table 2 rules look at the hired-DM table even when
    it is switched off.
    """
    active = res["derived"]["active_tables"]
    rules = [
        (table2_loss(res), Advisory("danger", "Table 2 Loss",
                                    "Hired DM costs exceed revenue.")),
        (table2_low_margin(res), Advisory("warning", "Table 2 Low Margin",
                                          "Profit < $50/week. Risky.")),
        (party_loss(res), Advisory("danger", "Party Loss",
                                   "Party costs exceed ticket sales.")),
        (True, Advisory("info", "Expansion",
                        f"Running {active} tables drives party profit.")),
    ]
    return [adv for fired, adv in rules if fired]
