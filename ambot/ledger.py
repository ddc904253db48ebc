# ambot/ledger.py
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from loguru import logger


class Category(str, Enum):
    MAINTENANCE = "maintenance"
    MARKETING = "marketing"
    FUEL = "fuel"


@dataclass
class BudgetLedger:
    """Spendable money per category for the current run.

    Balances are derived from the account balance at the start of each run and
    only go down afterwards, one debit per confirmed purchase.
    """
    maintenance: float = 0.0
    marketing: float = 0.0
    fuel: float = 0.0
    account_balance: float = 0.0

    def reset(self, account_balance: float, percentages: Mapping[str, float]) -> None:
        self.account_balance = account_balance
        for category in Category:
            setattr(self, category.value, account_balance * percentages[category.value] / 100)
        logger.info(
            f"💰 Budgets: maintenance={self.maintenance:,.0f} marketing={self.marketing:,.0f} "
            f"fuel={self.fuel:,.0f} (account {account_balance:,.0f})"
        )

    def available(self, category: Category) -> float:
        return getattr(self, Category(category).value)

    def debit(self, category: Category, amount: float) -> None:
        category = Category(category)
        setattr(self, category.value, self.available(category) - amount)
        self.account_balance -= amount
        logger.debug(
            f"💸 Debited {amount:,.0f} from {category.value}: "
            f"{self.available(category):,.0f} left, account {self.account_balance:,.0f}"
        )
