# ambot/services/hubs.py
"""
Hub statistics, lounge repair and catering.

Lounge rows are tied to hubs by name: a lounge belongs to the first hub whose
name contains the upper-cased lounge name. Hubs without a matching lounge get
no repair this run.
"""
from typing import Optional

from loguru import logger

from .. import policy
from .. import selectors as sel
from ..ledger import Category
from ..models import Hub, Lounge
from .base import Service

# (metric stat label, Hub attribute, selector)
HUB_STATS = (
    ("departures", "departures", sel.TEXT_HUBS_HUB_DEPARTURES),
    ("arrivals", "arrivals", sel.TEXT_HUBS_HUB_ARRIVALS),
    ("paxDeparted", "pax_departed", sel.TEXT_HUBS_HUB_PAX_DEPARTED),
    ("paxArrived", "pax_arrived", sel.TEXT_HUBS_HUB_PAX_ARRIVED),
)


class HubsService(Service):
    name = "hubs"

    async def run(self) -> list[Hub]:
        logger.info("🏢 Checking hubs")
        lounge_alert = await self.page.is_visible(sel.ICON_FI_LOUNGE_ALERT)
        async with self.panel(sel.BUTTON_MAIN_HUBS):
            hubs = await self.collect_hubs()
            if lounge_alert and self.conf.repair_lounges:
                await self.repair_lounges(hubs)
            if self.conf.buy_catering_if_missing:
                await self.buy_catering(hubs)
        return hubs

    async def collect_hubs(self) -> list[Hub]:
        hubs = []
        for row in await self.page.find_all(sel.LIST_HUBS_HUBS):
            hub = Hub(name=await self.page.text(sel.TEXT_HUBS_HUB_NAME, scope=row), handle=row)
            for stat, attr, selector in HUB_STATS:
                value = await self.read_float(selector, scope=row)
                setattr(hub, attr, value)
                self.metrics.hub_stats.labels(hub.name, stat).set(value)
            hub.has_catering = await self.page.is_visible(sel.ICON_HUBS_CATERING, scope=row)
            logger.debug(f"🏢 {hub}")
            hubs.append(hub)
        return hubs

    async def find_lounge(self, hub_name: str) -> Optional[Lounge]:
        for row in await self.page.find_all(sel.LIST_HUBS_LOUNGES):
            name = (await self.page.text(sel.TEXT_HUBS_LOUNGES_LOUNGE_NAME, scope=row)).upper()
            wear = await self.read_float(sel.TEXT_HUBS_LOUNGES_LOUNGE_WEAR_PERCENT, scope=row)
            if name in hub_name:
                return Lounge(name, wear, policy.lounge_needs_repair(wear), handle=row)
        return None

    async def repair_lounges(self, hubs: list[Hub]) -> int:
        """Repair worn lounges, at most ``hubs_maintenance_limit`` per run."""
        limit = self.conf.hubs_maintenance_limit
        handled = 0
        repaired = 0
        async with self.panel(sel.BUTTON_HUBS_LOUNGES_MAINTENANCE, sel.BUTTON_HUBS_LOUNGES_BACK_TO_HUBS):
            for hub in hubs:
                if policy.limit_reached(handled, limit):
                    logger.info(f"🛑 Lounge repair limit of {limit} reached for this run")
                    break
                lounge = await self.find_lounge(hub.name)
                if lounge is None or not lounge.needs_repair:
                    continue
                handled += 1
                if await self.repair_lounge(hub, lounge):
                    repaired += 1
        return repaired

    async def repair_lounge(self, hub: Hub, lounge: Lounge) -> bool:
        if not await self.page.is_visible(sel.TEXT_HUBS_LOUNGES_LOUNGE_REPAIR_COST, scope=lounge.handle):
            logger.info(f"🛋️ No repair offered for lounge {lounge.name}")
            return False
        cost = await self.read_float(sel.TEXT_HUBS_LOUNGES_LOUNGE_REPAIR_COST, scope=lounge.handle)
        budget = self.ledger.available(Category.MAINTENANCE)
        if not policy.within_budget(cost, budget):
            logger.warning(f"💲 Lounge repair at {hub.name} is too expensive: {cost:,.0f} > {budget:,.0f}")
            return False

        logger.info(f"🔧 Repairing lounge {lounge.name} ({lounge.wear_percent:.1f}% wear) for {cost:,.0f}")
        await self.page.click(sel.BUTTON_HUBS_LOUNGES_LOUNGE_REPAIR, scope=lounge.handle)
        self.ledger.debit(Category.MAINTENANCE, cost)
        # the lounge grid is redrawn after a repair
        await self.page.click(sel.BUTTON_HUBS_LOUNGES_BACK_TO_HUBS)
        await self.page.click(sel.BUTTON_HUBS_LOUNGES_MAINTENANCE)
        return True

    async def find_hub_row(self, name: str):
        for row in await self.page.find_all(sel.LIST_HUBS_HUBS):
            if await self.page.text(sel.TEXT_HUBS_HUB_NAME, scope=row) == name:
                return row
        return None

    async def buy_catering(self, hubs: list[Hub]) -> int:
        """Buy catering for hubs without it, at most ``hubs_maintenance_limit`` per run."""
        limit = self.conf.hubs_maintenance_limit
        handled = 0
        bought = 0
        for hub in hubs:
            if policy.limit_reached(handled, limit):
                logger.info(f"🛑 Catering limit of {limit} reached for this run")
                break
            if hub.has_catering:
                continue
            handled += 1
            if await self.buy_hub_catering(hub):
                bought += 1
        return bought

    async def buy_hub_catering(self, hub: Hub) -> bool:
        row = await self.find_hub_row(hub.name)
        if row is None:
            logger.warning(f"⚠️ Hub {hub.name} disappeared from the hub list")
            return False

        logger.info(f"🍽️ Checking catering for {hub.name}")
        async with self.panel(sel.ELEMENT_HUB, sel.BUTTON_HUBS_HUB_MANAGE_BACK, scope=row):
            offered = await self.page.is_visible(sel.BUTTON_HUBS_ADD_CATERING)
            cost = None
            if offered:
                await self.page.click(sel.BUTTON_HUBS_ADD_CATERING)
                await self.page.wait_visible(sel.ELEM_HUBS_CATERING_OPTION_3)
                await self.page.click(sel.ELEM_HUBS_CATERING_OPTION_3)
                await self.page.set_value(sel.SELECT_HUBS_CATERING_DURATION, self.conf.catering_duration_hours)
                await self.page.set_value(sel.SELECT_HUBS_CATERING_AMOUNT, self.conf.catering_amount_option)
                cost = await self.read_float(sel.TEXT_HUBS_CATERING_COST)

            budget = self.ledger.available(Category.MAINTENANCE)
            decision = policy.decide_catering(hub.has_catering, offered, cost, budget)
            if not decision:
                if decision.reason == policy.NOT_OFFERED:
                    logger.warning(f"⚠️ '+ Add catering' is not available for {hub.name}")
                else:
                    logger.warning(f"💲 Catering for {hub.name} is too expensive: {decision.cost:,.0f} > {budget:,.0f}")
                return False

            await self.page.click(sel.BUTTON_HUBS_CATERING_BUY)
            self.ledger.debit(Category.MAINTENANCE, decision.cost)
            logger.success(f"✅ Bought catering for {hub.name} for {decision.cost:,.0f}")
            return True
