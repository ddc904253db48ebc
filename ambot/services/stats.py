# ambot/services/stats.py
"""Read-only statistics: company overview, alliance and staff."""
from typing import Optional

from loguru import logger

from .. import selectors as sel
from ..errors import ElementNotFoundError, ParseError
from ..models import AllianceMember
from .base import Service


class CompanyStatsService(Service):
    name = "company_stats"

    async def run(self) -> dict:
        logger.info("📊 Collecting company stats")
        async with self.panel(sel.BUTTON_FI_OVERVIEW):
            await self.page.wait_visible(sel.TEXT_OVERVIEW_AIRLINE_REPUTATION)
            values = {
                "airline_reputation": await self.read_float(sel.TEXT_OVERVIEW_AIRLINE_REPUTATION),
                "cargo_reputation": await self.read_float(sel.TEXT_OVERVIEW_CARGO_REPUTATION),
                "fleet_size": await self.read_float(sel.TEXT_OVERVIEW_FLEET_SIZE),
                "pending_delivery": await self.read_float(sel.TEXT_OVERVIEW_AC_PENDING_DELIVERY),
                "routes": await self.read_float(sel.TEXT_OVERVIEW_ROUTES),
                "hubs": await self.read_float(sel.TEXT_OVERVIEW_HUBS),
                "pending_maintenance": await self.read_float(sel.TEXT_OVERVIEW_AC_PENDING_MAINTENANCE),
                "hangar_capacity": await self.read_float(sel.TEXT_OVERVIEW_HANGAR_CAPACITY),
                "in_flight": await self.read_float(sel.TEXT_OVERVIEW_AC_INFLIGHT),
                "share_price": await self.read_float(sel.TEXT_OVERVIEW_SHARE_PRICE),
                "flights_operated": await self.read_float(sel.TEXT_OVERVIEW_FLIGHTS_OPERATED),
                "economy": await self.read_float(sel.TEXT_OVERVIEW_PASSENGERS_ECONOMY),
                "business": await self.read_float(sel.TEXT_OVERVIEW_PASSENGERS_BUSINESS),
                "first": await self.read_float(sel.TEXT_OVERVIEW_PASSENGERS_FIRST),
                "large": await self.read_float(sel.TEXT_OVERVIEW_CARGO_LARGE),
                "heavy": await self.read_float(sel.TEXT_OVERVIEW_CARGO_HEAVY),
            }
        values["wo_route"] = values["fleet_size"] - (values["pending_delivery"] + values["routes"])
        self.report(values)
        return values

    def report(self, v: dict) -> None:
        m = self.metrics
        put = m.set_non_negative
        put(m.reputation, v["airline_reputation"], "airline")
        put(m.reputation, v["cargo_reputation"], "cargo")
        put(m.fleet_size, v["fleet_size"])
        for status in ("in_flight", "pending_delivery", "pending_maintenance", "wo_route"):
            put(m.aircraft_status, v[status], status)
        put(m.routes, v["routes"])
        put(m.hubs, v["hubs"])
        put(m.hangar_capacity, v["hangar_capacity"])
        put(m.share_value, v["share_price"])
        put(m.flights_operated, v["flights_operated"])
        for cls in ("economy", "business", "first"):
            put(m.passengers, v[cls], cls)
        for cargo in ("large", "heavy"):
            put(m.cargo, v[cargo], cargo)


class AllianceStatsService(Service):
    name = "alliance_stats"

    async def run(self) -> Optional[list[AllianceMember]]:
        logger.info("🤝 Collecting alliance stats")
        async with self.panel(sel.BUTTON_ALLIANCE_INFO):
            if not await self.page.is_visible(sel.TEXT_ALLIANCE_CONTRIBUTED_TOTAL):
                logger.warning("⚠️ No alliance stats available")
                return None

            members = await self.collect_members()
            self.report_members(members)

            m = self.metrics
            m.set_non_negative(m.alliance_contributed_total, await self.read_float(sel.TEXT_ALLIANCE_CONTRIBUTED_TOTAL))
            m.set_non_negative(m.alliance_contributed_per_day, await self.read_float(sel.TEXT_ALLIANCE_CONTRIBUTED_PER_DAY))
            m.set_non_negative(m.alliance_flights, await self.read_float(sel.TEXT_ALLIANCE_FLIGHTS))
            m.set_non_negative(m.alliance_season_money, await self.read_float(sel.TEXT_ALLIANCE_SEASON_MONEY))
        return members

    async def collect_members(self) -> list[AllianceMember]:
        members = []
        for row in await self.page.find_all(sel.LIST_ALLIANCE_MEMBERS):
            uid = (await self.page.attribute(row, sel.ATTR_ALLIANCE_MEMBER_ID) or "").replace(
                sel.ALLIANCE_MEMBER_ID_PREFIX, ""
            )
            try:
                member = AllianceMember(
                    uid=uid,
                    name=await self.page.text(sel.TEXT_ALLIANCE_MEMBER_NAME, scope=row),
                    contributed_total=await self.read_float(sel.TEXT_ALLIANCE_MEMBER_CONTRIBUTED_TOTAL, scope=row),
                    contributed_per_day=await self.read_float(sel.TEXT_ALLIANCE_MEMBER_CONTRIBUTED_PER_DAY, scope=row),
                    flights=await self.read_int(sel.TEXT_ALLIANCE_MEMBER_FLIGHTS, scope=row),
                    season_money=await self.read_float(sel.TEXT_ALLIANCE_MEMBER_SEASON_MONEY, scope=row),
                )
            except (ElementNotFoundError, ParseError) as e:
                logger.warning(f"⚠️ Skipping alliance member {uid or '?'}: {e}")
                continue
            # "N/A" for members without shares
            try:
                member.share_price = await self.read_float(sel.TEXT_ALLIANCE_MEMBER_SHARE_PRICE, scope=row)
            except ParseError:
                logger.debug(f"🤝 No share price for {member.name}")
            members.append(member)
        return members

    def report_members(self, members: list[AllianceMember]) -> None:
        m = self.metrics
        m.reset_members()
        for member in members:
            labels = (member.uid, member.name)
            if member.share_price is not None:
                m.set_non_negative(m.member_share_price, member.share_price, *labels)
            m.set_non_negative(m.member_contributed_total, member.contributed_total, *labels)
            m.set_non_negative(m.member_contributed_per_day, member.contributed_per_day, *labels)
            m.set_non_negative(m.member_season_money, member.season_money, *labels)
            m.set_non_negative(m.member_flights, member.flights, *labels)


class StaffMoraleService(Service):
    """Company rank, training points and per-staff salary and morale.

    With ``raise_salary_if_low_morale`` the salary of a staff type whose morale
    is under ``staff_morale_min_percent`` is raised one step per run.
    """
    name = "staff_morale"

    async def run(self) -> dict:
        logger.info("👥 Checking staff morale")
        staff = {}
        async with self.panel(sel.BUTTON_MAIN_COMPANY):
            m = self.metrics
            m.set_non_negative(m.company_rank, await self.read_int(sel.TEXT_COMPANY_RANK))
            await self.page.click(sel.BUTTON_COMPANY_STAFF_TAB)
            m.set_non_negative(m.training_points, await self.read_int(sel.TEXT_COMPANY_STAFF_TRAINING_POINTS))

            for staff_type, salary_sel, morale_sel, raise_sel in sel.STAFF_ENTRIES:
                salary = await self.read_float(salary_sel)
                morale = await self.read_float(morale_sel)
                m.set_non_negative(m.staff_salary, salary, staff_type)
                m.set_non_negative(m.staff_morale, morale, staff_type)
                staff[staff_type] = (salary, morale)

                if self.conf.raise_salary_if_low_morale and morale < self.conf.staff_morale_min_percent:
                    logger.info(f"📈 Raising {staff_type} salary, morale at {morale:g}%")
                    await self.page.click(raise_sel)
        return staff
