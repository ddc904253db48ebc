# ambot/services/marketing.py
"""
Marketing campaigns.

The run is split in two stages. The status stage reads every configured
campaign before anything is bought, because buying one campaign reorders the
finance panel. The action stage then buys inactive campaigns and reads the
remaining time of active ones, producing a new list of campaign records.
"""
from dataclasses import replace
from typing import Iterable, Optional

from loguru import logger

from .. import policy
from .. import selectors as sel
from ..errors import ElementNotFoundError, ParseError
from ..ledger import Category
from ..models import CampaignSpec, MarketingCampaign
from ..utils.parsing import parse_duration_to_seconds
from ..utils.poller import poll_until
from .base import Service

CAMPAIGNS = (
    CampaignSpec(
        key="airline_reputation",
        name="Airline reputation",
        row=sel.ELEM_FINANCE_MARKETING_INC_AIRLINE_REP,
        cost=sel.TEXT_FINANCE_MARKETING_REPUTATION_COST,
        buy=sel.BUTTON_FINANCE_MARKETING_REPUTATION_BUY,
        option_value="6",
    ),
    CampaignSpec(
        key="cargo_reputation",
        name="Cargo reputation",
        row=sel.ELEM_FINANCE_MARKETING_INC_CARGO_REP,
        cost=sel.TEXT_FINANCE_MARKETING_REPUTATION_COST,
        buy=sel.BUTTON_FINANCE_MARKETING_REPUTATION_BUY,
        option_value="6",
    ),
    CampaignSpec(
        key="eco_friendly",
        name="Eco friendly",
        row=sel.ELEM_FINANCE_MARKETING_ECO_FRIENDLY,
        cost=sel.BUTTON_FINANCE_MARKETING_ECO_FRIENDLY_BUY,
        buy=sel.BUTTON_FINANCE_MARKETING_ECO_FRIENDLY_BUY,
    ),
)

DURATION_POLL_ATTEMPTS = 5
DURATION_POLL_INTERVAL = 0.1


def campaigns_for(keys: Iterable[str], duration_option: str) -> tuple[CampaignSpec, ...]:
    """Campaign definitions selected by config, in catalogue order."""
    wanted = set(keys)
    unknown = wanted - {c.key for c in CAMPAIGNS}
    if unknown:
        logger.warning(f"⚠️ Unknown marketing campaigns ignored: {sorted(unknown)}")
    return tuple(
        replace(c, option_value=duration_option) if c.option_value else c
        for c in CAMPAIGNS
        if c.key in wanted
    )


class MarketingService(Service):
    name = "marketing"

    async def run(self) -> list[MarketingCampaign]:
        logger.info("📣 Checking marketing campaigns")
        specs = campaigns_for(self.conf.marketing_campaigns, self.conf.marketing_duration_option)
        async with self.panel(sel.BUTTON_MAIN_FINANCE):
            await self.page.click(sel.BUTTON_COMMON_TAB2)
            await self.page.click(sel.BUTTON_FINANCE_MARKETING_NEW_COMPANY)
            statuses = [await self.check_status(spec) for spec in specs]
            return [await self.act(campaign) for campaign in statuses]

    async def check_status(self, spec: CampaignSpec) -> MarketingCampaign:
        classes = await self.page.attribute(spec.row, "class")
        campaign = MarketingCampaign(spec, active=policy.campaign_is_active(classes))
        logger.debug(f"📣 {spec.name}: active={campaign.active}")
        return campaign

    async def act(self, campaign: MarketingCampaign) -> MarketingCampaign:
        if not campaign.active and await self.activate(campaign.spec):
            campaign = replace(campaign, active=True)
        if not campaign.active:
            return campaign

        duration = await self.collect_duration(campaign.spec)
        if duration is not None:
            self.metrics.marketing_duration.labels(campaign.name).set(duration)
        return replace(campaign, duration_seconds=duration)

    async def activate(self, spec: CampaignSpec) -> bool:
        await self.page.click(sel.BUTTON_COMMON_TAB2)
        await self.page.click(sel.BUTTON_FINANCE_MARKETING_NEW_COMPANY)
        await self.page.click(spec.row)
        if spec.option_value:
            await self.page.set_value(sel.SELECT_FINANCE_MARKETING_COMPANY_DURATION, spec.option_value)
        cost = await self.read_float(spec.cost)

        budget = self.ledger.available(Category.MARKETING)
        if not policy.decide_campaign(cost, budget):
            logger.warning(f"💲 Campaign '{spec.name}' is too expensive: {cost:,.0f} > {budget:,.0f}")
            return False

        await self.page.click(spec.buy)
        self.ledger.debit(Category.MARKETING, cost)
        logger.success(
            f"✅ Campaign '{spec.name}' started for {cost:,.0f}, "
            f"marketing budget left {self.ledger.marketing:,.0f}"
        )
        return True

    async def collect_duration(self, spec: CampaignSpec) -> Optional[int]:
        """Remaining seconds of an active campaign, None when it cannot be read."""
        await self.page.click(sel.BUTTON_COMMON_TAB2)
        try:
            for row in await self.page.find_all(sel.LIST_FINANCE_MARKETING_COMPANIES):
                name = await self.page.text(sel.TEXT_MARKETING_COMPANY_NAME, scope=row)
                if name != spec.name:
                    continue
                text = await poll_until(
                    lambda: self.page.text(sel.TEXT_MARKETING_COMPANY_DURATION, scope=row),
                    attempts=DURATION_POLL_ATTEMPTS,
                    interval=DURATION_POLL_INTERVAL,
                    name=f"'{spec.name}' duration",
                )
                return parse_duration_to_seconds(text or "")
        except (ElementNotFoundError, ParseError) as e:
            logger.warning(f"⚠️ Cannot read duration of '{spec.name}': {e}")
            return None
        logger.warning(f"⚠️ Campaign '{spec.name}' not found in the active list")
        return None
