# ambot/services/bonus.py
from loguru import logger

from .. import selectors as sel
from .base import Service


class ClaimRewardsService(Service):
    name = "claim_rewards"

    async def run(self) -> bool:
        if not await self.page.is_visible(sel.ICON_FREE_REWARDS):
            logger.info("🎁 No free rewards available")
            return False

        async with self.panel(sel.BUTTON_MAIN_BONUS):
            await self.page.click(sel.BUTTON_BONUS_DUTY_FREE_TAB)
            if not await self.page.is_visible(sel.BUTTON_BONUS_CLAIM_GIFT):
                logger.warning("⚠️ Free rewards icon shown but no gift to claim")
                return False
            await self.page.click(sel.BUTTON_BONUS_CLAIM_GIFT)
        logger.success("🎁 Claimed duty free gift")
        return True


class DepartService(Service):
    name = "depart"

    async def run(self) -> int:
        if not await self.page.is_visible(sel.TEXT_FI_DEPART_AMOUNT):
            logger.info("🛫 No aircraft ready for departure")
            return 0
        ready = await self.read_int(sel.TEXT_FI_DEPART_AMOUNT)
        if ready <= 0:
            logger.info("🛫 No aircraft ready for departure")
            return 0
        await self.page.click(sel.BUTTON_FI_DEPART_ALL)
        logger.success(f"🛫 Departed {ready} aircraft")
        return ready
