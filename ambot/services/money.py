# ambot/services/money.py
from loguru import logger

from .. import selectors as sel
from ..errors import ElementNotFoundError
from .base import Service


class MoneyService(Service):
    """Bank accounts. Runs every time, ahead of the configured services."""
    name = "money"

    async def run(self) -> float:
        """Report every account and return the balance of the first one."""
        async with self.panel(sel.BUTTON_MAIN_ACCOUNT):
            rows = await self.page.find_all(sel.LIST_ACCOUNT_ACCOUNTS)
            if not rows:
                raise ElementNotFoundError(sel.LIST_ACCOUNT_ACCOUNTS)
            balances = []
            for row in rows:
                name = await self.page.text(sel.TEXT_ACCOUNT_ACCOUNT_NAME, scope=row)
                balance = await self.read_float(sel.TEXT_ACCOUNT_ACCOUNT_BALANCE, scope=row)
                self.metrics.money.labels(name).set(balance)
                balances.append(balance)
        logger.info(f"🏦 Account balance: {balances[0]:,.0f}")
        return balances[0]
