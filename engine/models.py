from dataclasses import dataclass, asdict

from .inputs import coerce_number, clamp_count

ARC_LENGTH_WEEKS = 6
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12
ARCS_PER_YEAR = WEEKS_PER_YEAR / ARC_LENGTH_WEEKS  # ≈8.67 parties/year

@dataclass
class InPersonSessions:
    arc_price: float = 150.0              # total for one 6-week arc
    players_per_table: float = 5.0        # also drives online revenue
    drop_in_price: float = 25.0
    drop_ins_per_arc: float = 2.0
    venue_cost_per_session: float = 50.0
    run_second_table: bool = True         # hire a 2nd DM
    hired_dm_rate: float = 50.0           # per session

@dataclass
class DowntimeParty:
    ticket_price: float = 15.0
    venue_cost: float = 150.0
    supplies_cost: float = 100.0
    attendees_per_table: float = 6.0

@dataclass
class OnlineSessions:
    arc_price: float = 120.0
    platform_cost_per_month: float = 15.0
    tables: float = 1.0                   # never below 0

@dataclass
class ClassicGames:
    entry_fee: float = 10.0
    players: float = 8.0
    prize_cost: float = 30.0
    events_per_month: float = 1.0

# Fields coerced with a floor of zero
COUNT_FIELDS = {("online", "tables")}

@dataclass
class Assumptions:
    in_person: InPersonSessions = None
    party: DowntimeParty = None
    online: OnlineSessions = None
    classic: ClassicGames = None

    def __post_init__(self):
        if self.in_person is None:
            self.in_person = InPersonSessions()
        if self.party is None:
            self.party = DowntimeParty()
        if self.online is None:
            self.online = OnlineSessions()
        if self.classic is None:
            self.classic = ClassicGames()

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Assumptions":
        """
        Build assumptions from a nested mapping such as EVENT_DEFAULTS or the
        UI state. Missing groups/fields keep their defaults; every numeric
        value goes through input coercion so junk becomes 0 instead of raising.
        """
        groups = {
            "in_person": InPersonSessions,
            "party": DowntimeParty,
            "online": OnlineSessions,
            "classic": ClassicGames,
        }
        built = {}
        for group_name, group_cls in groups.items():
            raw = (data or {}).get(group_name) or {}
            defaults = asdict(group_cls())
            values = {}
            for field_name, default in defaults.items():
                if field_name not in raw:
                    values[field_name] = default
                elif isinstance(default, bool):
                    values[field_name] = bool(raw[field_name])
                elif (group_name, field_name) in COUNT_FIELDS:
                    values[field_name] = clamp_count(raw[field_name])
                else:
                    values[field_name] = coerce_number(raw[field_name])
            built[group_name] = group_cls(**values)
        return cls(**built)
