# ambot/services/fuel.py
from loguru import logger

from .. import policy
from .. import selectors as sel
from ..ledger import Category
from ..models import Fuel
from .base import Service

# (fuel type, tab button)
FUEL_TABS = (
    ("fuel", sel.BUTTON_COMMON_TAB1),
    ("co2", sel.BUTTON_COMMON_TAB2),
)


class FuelService(Service):
    name = "buy_fuel"

    async def run(self) -> list[Fuel]:
        logger.info("⛽ Checking fuel and co2")
        observed = []
        async with self.panel(sel.BUTTON_MAIN_FUEL):
            for fuel_type, tab in FUEL_TABS:
                await self.page.click(tab)
                fuel = await self.observe(fuel_type)
                self.report(fuel)
                await self.buy(fuel)
                observed.append(fuel)
        return observed

    async def observe(self, fuel_type: str) -> Fuel:
        fuel = Fuel(fuel_type)
        fuel.price = await self.read_float(sel.TEXT_FUEL_FUEL_PRICE)
        fuel.holding = await self.read_float(sel.TEXT_FUEL_FUEL_HOLDING)
        fuel.capacity = await self.read_float(sel.TEXT_FUEL_FUEL_CAPACITY)
        logger.debug(f"⛽ {fuel}")
        return fuel

    def report(self, fuel: Fuel) -> None:
        self.metrics.fuel_holding.labels(fuel.fuel_type).set(fuel.holding)
        self.metrics.fuel_limit.labels(fuel.fuel_type).set(fuel.capacity)
        self.metrics.fuel_price.labels(fuel.fuel_type).set(fuel.price)

    async def buy(self, fuel: Fuel) -> bool:
        expected = getattr(self.conf.good_price, fuel.fuel_type)
        budget = self.ledger.available(Category.FUEL)
        decision = policy.decide_fuel(fuel, expected, self.conf.fuel_critical_percent, budget)

        if not decision:
            if decision.reason == policy.FULL:
                logger.info(f"⛽ {fuel.fuel_type} is full ({fuel.holding:,.0f}/{fuel.capacity:,.0f})")
            elif decision.reason == policy.TOO_EXPENSIVE:
                logger.info(f"💲 {fuel.fuel_type} is too expensive: {fuel.price:,.0f} > {expected:,.0f}")
            else:
                logger.info(
                    f"💲 Not enough fuel budget for {fuel.fuel_type}: "
                    f"{decision.cost:,.0f} > {budget:,.0f}"
                )
            return False

        if decision.reason == policy.EMERGENCY:
            logger.warning(
                f"🚨 {fuel.fuel_type} at {fuel.keep_percent:.1f}% "
                f"(critical {self.conf.fuel_critical_percent:g}%), buying at {fuel.price:,.0f}"
            )
        logger.info(f"🛒 Buying {decision.amount:,} {fuel.fuel_type} for {decision.cost:,.0f}")
        await self.page.set_value(sel.TEXT_FIELD_FUEL_AMOUNT, str(decision.amount))
        await self.page.click(sel.BUTTON_FUEL_BUY)
        self.ledger.debit(Category.FUEL, decision.cost)
        return True
