# ambot/services/maintenance.py
from typing import Optional

from loguru import logger

from .. import policy
from .. import selectors as sel
from ..errors import ElementNotFoundError, ParseError
from ..ledger import Category
from ..models import Aircraft
from .base import Service


class MaintenanceService(Service):
    """A-Check, bulk repair and modification, in that order, in one panel session.

    A failing stage ends the whole operation; later stages are not attempted.
    """
    name = "ac_maintenance"

    async def run(self) -> dict:
        logger.info("🛠️ Starting aircraft maintenance")
        async with self.panel(sel.BUTTON_MAIN_MAINTENANCE):
            planned = {
                "a_check": await self.a_check(),
                "repair": await self.repair(),
                "modify": await self.modify(),
            }
        return planned

    @property
    def budget(self) -> float:
        return self.ledger.available(Category.MAINTENANCE)

    async def a_check(self) -> int:
        """Plan an A-Check for every aircraft due within the configured hours."""
        logger.info("🔎 Searching aircraft due for A-Check")
        await self.page.click(sel.BUTTON_COMMON_TAB2)
        await self.page.click(sel.BUTTON_MAINTENANCE_BULK_ACHECK)

        selected = 0
        max_hours = self.conf.aircraft_max_hours_to_check
        for row in await self.page.find_all(sel.LIST_MAINTENANCE_BULK_ACHECK_AC_LIST):
            try:
                hours = await self.read_int(sel.TEXT_MAINTENANCE_BULK_ACHECK_HOURS, scope=row)
                if not policy.a_check_eligible(hours, max_hours):
                    logger.debug(f"⏭️ Skipping aircraft with {hours}h to A-Check")
                    continue
                await self.page.click(sel.TEXT_MAINTENANCE_BULK_ACHECK_HOURS, scope=row)
            except (ElementNotFoundError, ParseError) as e:
                logger.warning(f"⚠️ Skipping A-Check row: {e}")
                continue
            selected += 1

        total_cost = await self.read_float(sel.TEXT_MAINTENANCE_BULK_ACHECK_COST) if selected else 0.0
        decision = policy.decide_a_check(selected, total_cost, self.budget)
        if not decision:
            if decision.reason == policy.NOTHING_SELECTED:
                logger.info("✅ No aircraft need A-Check")
            else:
                logger.warning(f"💲 A-Check for {selected} aircraft is too expensive: {total_cost:,.0f} > {self.budget:,.0f}")
            return 0

        logger.info(f"📋 Planning A-Check for {selected} aircraft, total {total_cost:,.0f}")
        await self.page.click(sel.BUTTON_MAINTENANCE_BULK_ACHECK_PLAN)
        self.ledger.debit(Category.MAINTENANCE, total_cost)
        return selected

    async def repair(self) -> int:
        """Plan a bulk repair for aircraft above the configured wear percent."""
        logger.info("🔎 Searching aircraft which need repair")
        await self.page.click(sel.BUTTON_COMMON_TAB2)
        await self.page.click(sel.BUTTON_MAINTENANCE_BULK_REPAIR)
        await self.page.set_value(sel.SELECT_MAINTENANCE_BULK_REPAIR_PERCENT, self.conf.aircraft_wear_percent)

        total_cost: Optional[float] = None
        if await self.page.is_visible(sel.TEXT_MAINTENANCE_BULK_REPAIR_COST):
            total_cost = await self.read_float(sel.TEXT_MAINTENANCE_BULK_REPAIR_COST)

        decision = policy.decide_bulk_repair(total_cost, self.budget)
        if not decision:
            if decision.reason == policy.NO_COST:
                logger.info("✅ No aircraft need repair")
            else:
                logger.warning(f"💲 Bulk repair is too expensive: {total_cost:,.0f} > {self.budget:,.0f}")
            return 0

        logger.info(f"📋 Planning bulk repair, total {total_cost:,.0f}")
        await self.page.click(sel.BUTTON_MAINTENANCE_BULK_REPAIR_PLAN)
        self.ledger.debit(Category.MAINTENANCE, total_cost)
        return 1

    async def list_base_aircraft(self) -> list[Aircraft]:
        aircraft = []
        for row in await self.page.find_all(sel.LIST_MAINTENANCE_AC_LIST):
            reg = await self.page.attribute(row, sel.ATTR_MAINTENANCE_AC_REG_NUMBER)
            ac_type = await self.page.attribute(row, sel.ATTR_MAINTENANCE_AC_TYPE)
            if reg:
                aircraft.append(Aircraft(reg_number=reg, ac_type=ac_type or ""))
        return aircraft

    async def modify(self) -> int:
        logger.info("🔎 Searching aircraft which need modification")
        await self.page.click(sel.BUTTON_COMMON_TAB2)
        await self.page.click(sel.BUTTON_MAINTENANCE_BASE_ONLY)

        candidates = policy.select_modify_candidates(
            await self.list_base_aircraft(), self.conf.aircraft_modify_limit
        )
        logger.debug(f"🛩️ Modification candidates: {[ac.reg_number for ac in candidates]}")

        planned = 0
        for aircraft in candidates:
            if await self.modify_aircraft(aircraft):
                planned += 1
        if planned:
            logger.info(f"📋 Planned modification for {planned} aircraft")
        else:
            logger.info("✅ No aircraft need modification")
        return planned

    async def find_aircraft_row(self, reg_number: str):
        # the list is redrawn after every planned modification
        await self.page.click(sel.BUTTON_COMMON_TAB2)
        for row in await self.page.find_all(sel.LIST_MAINTENANCE_AC_LIST):
            if await self.page.attribute(row, sel.ATTR_MAINTENANCE_AC_REG_NUMBER) == reg_number:
                return row
        return None

    async def modify_aircraft(self, aircraft: Aircraft) -> bool:
        reg = aircraft.reg_number.upper()
        row = await self.find_aircraft_row(aircraft.reg_number)
        if row is None:
            logger.warning(f"⚠️ Aircraft {reg} not found in the maintenance list")
            return False

        await self.page.click(sel.BUTTON_MAINTENANCE_MODIFY, scope=row)
        for checkbox in sel.CHECKBOX_MAINTENANCE_MODIFY_MODS:
            await self.page.click(checkbox)
        cost = await self.read_float(sel.TEXT_MAINTENANCE_MODIFY_TOTAL_COST)

        decision = policy.decide_modify(cost, self.budget)
        if not decision:
            if decision.reason == policy.FREE:
                logger.debug(f"⏭️ {reg} has nothing left to modify")
            else:
                logger.warning(f"💲 Modification of {reg} is too expensive: {cost:,.0f} > {self.budget:,.0f}")
            return False

        logger.info(f"📋 Planning modification of {reg} for {cost:,.0f}")
        await self.page.click(sel.BUTTON_MAINTENANCE_PLAN_MODIFY)
        self.ledger.debit(Category.MAINTENANCE, cost)
        return True
