"""Default assumptions for the event financial planner."""

EVENT_DEFAULTS = {
    'in_person': {
        'arc_price': 150,              # 6-week arc
        'players_per_table': 5,
        'drop_in_price': 25,
        'drop_ins_per_arc': 2,
        'venue_cost_per_session': 50,
        'run_second_table': True,
        'hired_dm_rate': 50,
    },
    'party': {
        'ticket_price': 15,
        'venue_cost': 150,
        'supplies_cost': 100,
        'attendees_per_table': 6,
    },
    'online': {
        'arc_price': 120,
        'platform_cost_per_month': 15,
        'tables': 1,
    },
    'classic': {
        'entry_fee': 10,
        'players': 8,
        'prize_cost': 30,
        'events_per_month': 1,
    },
}

# Static annotation under the annual profit tile
ANNUAL_PROFIT_TARGET_NOTE = "+12% vs target"
