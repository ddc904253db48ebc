# ambot/policy.py
"""
Purchase decisions.

Every function here is pure: it gets observed values and limits and returns a
``Decision``. Reading the page, clicking and debiting the ledger is left to
the services.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from .models import Aircraft, Fuel

FUEL_MINIMUM_AMOUNT = 1000
LOUNGE_WEAR_PERCENT_FOR_REPAIR = 16.0
CAMPAIGN_ACTIVE_CLASS = "not-active"

# Skip reasons
FULL = "full"
TOO_EXPENSIVE = "too expensive"
INSUFFICIENT_BUDGET = "insufficient budget"
NOTHING_SELECTED = "nothing selected"
NO_COST = "no cost shown"
FREE = "zero cost"
ALREADY_PRESENT = "already present"
NOT_OFFERED = "not offered"
# Proceed reasons
APPROVED = "approved"
EMERGENCY = "emergency"


@dataclass(frozen=True)
class Decision:
    proceed: bool
    reason: str
    cost: float = 0.0
    amount: int = 0

    def __bool__(self) -> bool:
        return self.proceed


def skip(reason: str, cost: float = 0.0) -> Decision:
    return Decision(False, reason, cost)


def within_budget(cost: float, budget: float) -> Decision:
    if cost > budget:
        return skip(INSUFFICIENT_BUDGET, cost)
    return Decision(True, APPROVED, cost)


def fuel_is_full(capacity: float, holding: float) -> bool:
    return capacity - holding < FUEL_MINIMUM_AMOUNT


def decide_fuel(fuel: Fuel, expected_price: float, critical_percent: float, budget: float) -> Decision:
    """
    Buy the whole shortfall unless the tank is full.

    A tank at or below ``critical_percent`` is refilled at any price and
    budget. Otherwise the price must not exceed ``expected_price`` and the
    purchase must fit the fuel budget. Prices are quoted per 1000 units.
    """
    if fuel_is_full(fuel.capacity, fuel.holding):
        return skip(FULL)

    amount = int(fuel.need)
    cost = fuel.need * fuel.price / 1000
    if fuel.keep_percent <= critical_percent:
        return Decision(True, EMERGENCY, cost, amount)
    if fuel.price > expected_price:
        return skip(TOO_EXPENSIVE, cost)
    if cost > budget:
        return skip(INSUFFICIENT_BUDGET, cost)
    return Decision(True, APPROVED, cost, amount)


def lounge_needs_repair(wear_percent: float) -> bool:
    return wear_percent >= LOUNGE_WEAR_PERCENT_FOR_REPAIR


def limit_reached(count: int, limit: int) -> bool:
    return count >= limit


def decide_catering(has_catering: bool, control_present: bool, cost: Optional[float], budget: float) -> Decision:
    if has_catering:
        return skip(ALREADY_PRESENT)
    if not control_present:
        return skip(NOT_OFFERED)
    if cost is None:
        return skip(NO_COST)
    return within_budget(cost, budget)


def a_check_eligible(hours_to_check: int, max_hours: int) -> bool:
    return hours_to_check <= max_hours


def decide_a_check(selected: int, total_cost: float, budget: float) -> Decision:
    if selected == 0:
        return skip(NOTHING_SELECTED)
    return within_budget(total_cost, budget)


def decide_bulk_repair(total_cost: Optional[float], budget: float) -> Decision:
    if total_cost is None:
        return skip(NO_COST)
    return within_budget(total_cost, budget)


def select_modify_candidates(aircraft: Iterable[Aircraft], limit: int) -> list[Aircraft]:
    """Last ``limit`` aircraft by registration.

    The sort is lexicographic: "N-10" sorts before "N-9". Registrations are not
    normalized, so mixed formats keep that order.
    """
    if limit <= 0:
        return []
    ordered = sorted(aircraft, key=lambda ac: ac.reg_number)
    return ordered[-limit:]


def decide_modify(cost: float, budget: float) -> Decision:
    if cost == 0:
        return skip(FREE)
    return within_budget(cost, budget)


def campaign_is_active(class_attribute: Optional[str]) -> bool:
    """The game marks a running campaign row with the ``not-active`` class."""
    return CAMPAIGN_ACTIVE_CLASS in (class_attribute or "").split()


def decide_campaign(cost: float, budget: float) -> Decision:
    return within_budget(cost, budget)
