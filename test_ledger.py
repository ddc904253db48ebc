# test_ledger.py
import pytest
from hypothesis import given, strategies as st

from ambot.ledger import BudgetLedger, Category

PERCENT = {"maintenance": 50, "marketing": 70, "fuel": 70}


def test_reset_splits_balance_by_percent():
    ledger = BudgetLedger()
    ledger.reset(1000, PERCENT)
    assert (ledger.maintenance, ledger.marketing, ledger.fuel) == (500, 700, 700)
    assert ledger.account_balance == 1000


def test_debit_touches_only_its_category():
    ledger = BudgetLedger()
    ledger.reset(1000, PERCENT)
    ledger.debit(Category.FUEL, 100)
    assert ledger.fuel == 600
    assert ledger.maintenance == 500
    assert ledger.marketing == 700
    assert ledger.account_balance == 900


def test_reset_replaces_previous_run():
    ledger = BudgetLedger()
    ledger.reset(1000, PERCENT)
    ledger.debit(Category.MAINTENANCE, 400)
    ledger.reset(2000, PERCENT)
    assert ledger.maintenance == 1000
    assert ledger.account_balance == 2000


def test_available_accepts_category_names():
    ledger = BudgetLedger()
    ledger.reset(1000, PERCENT)
    assert ledger.available("marketing") == 700
    with pytest.raises(ValueError):
        ledger.available("lounges")


@given(
    balance=st.floats(min_value=0, max_value=1e12, allow_nan=False),
    debits=st.lists(
        st.tuples(st.sampled_from(list(Category)), st.floats(min_value=0, max_value=1e6, allow_nan=False)),
        max_size=10,
    ),
)
def test_category_balances_never_increase(balance, debits):
    ledger = BudgetLedger()
    ledger.reset(balance, PERCENT)
    for category, amount in debits:
        before = {c: ledger.available(c) for c in Category}
        ledger.debit(category, amount)
        for other in Category:
            if other is category:
                assert ledger.available(other) <= before[other]
            else:
                assert ledger.available(other) == before[other]
