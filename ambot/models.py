# ambot/models.py
"""Per-operation observation records.

Handles stored here belong to the browser session of the run that created
them and are only meaningful until the panel they came from is redrawn.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

# Opaque element reference produced by the page accessor.
Handle = Any


@dataclass
class Fuel:
    fuel_type: str
    price: float = 0.0
    holding: float = 0.0
    capacity: float = 0.0

    @property
    def need(self) -> float:
        return self.capacity - self.holding

    @property
    def keep_percent(self) -> float:
        if self.capacity <= 0:
            return 0.0
        return self.holding / self.capacity * 100


@dataclass
class Lounge:
    name: str
    wear_percent: float
    needs_repair: bool = False
    handle: Handle = field(default=None, repr=False)


@dataclass
class Hub:
    name: str
    departures: float = 0.0
    arrivals: float = 0.0
    pax_departed: float = 0.0
    pax_arrived: float = 0.0
    has_catering: bool = False
    handle: Handle = field(default=None, repr=False)


@dataclass
class Aircraft:
    reg_number: str
    ac_type: str = ""


@dataclass(frozen=True)
class CampaignSpec:
    """Static description of one marketing campaign row in the finance panel."""
    key: str
    name: str
    row: str
    cost: str
    buy: str
    option_value: str = ""


@dataclass(frozen=True)
class MarketingCampaign:
    spec: CampaignSpec
    active: bool
    duration_seconds: Optional[int] = None

    @property
    def name(self) -> str:
        return self.spec.name


@dataclass
class AllianceMember:
    uid: str
    name: str
    contributed_total: float = 0.0
    contributed_per_day: float = 0.0
    flights: int = 0
    season_money: float = 0.0
    share_price: Optional[float] = None


@dataclass(frozen=True)
class Route:
    name: str
    distance: int = 0
    runway: int = 0
    demand_y: int = 0
    demand_j: int = 0
    demand_f: int = 0
    demand_large: int = 0
    demand_heavy: int = 0

    def as_row(self) -> dict:
        return {
            "RouteName": self.name,
            "Distance": self.distance,
            "Runway": self.runway,
            "DemandY": self.demand_y,
            "DemandJ": self.demand_j,
            "DemandF": self.demand_f,
            "DemandLarge": self.demand_large,
            "DemandHeavy": self.demand_heavy,
        }


@dataclass
class RunResult:
    success: bool
    elapsed: float = 0.0
    failed_operation: Optional[str] = None
    error: Optional[BaseException] = field(default=None, repr=False)
