# test_bot.py
"""A full run against the in-memory page: login, budgets, service order, failures."""
import asyncio

import pytest
import yaml

from ambot import selectors as sel
from ambot.bot import Bot
from ambot.config import ConfigProvider
from ambot.errors import AuthError, ElementNotFoundError, RunTimeoutError
from conftest import session_for


@pytest.fixture
def provider(tmp_path, monkeypatch):
    monkeypatch.delenv("AM4_USERNAME", raising=False)
    monkeypatch.delenv("AM4_PASSWORD", raising=False)

    def make(**options):
        path = tmp_path / "config.yaml"
        raw = {"username": "pilot@example.com", "password": "secret", **options}
        path.write_text(yaml.safe_dump(raw), encoding="utf-8")
        return ConfigProvider(path)

    return make


def logged_in(page, balance="$ 2,000,000"):
    page.show(sel.BUTTON_MAIN_HUBS)
    page.lists[(sel.LIST_ACCOUNT_ACCOUNTS, None)] = ["acct:main", "acct:savings"]
    page.set_text(sel.TEXT_ACCOUNT_ACCOUNT_NAME, "Main", scope="acct:main")
    page.set_text(sel.TEXT_ACCOUNT_ACCOUNT_BALANCE, balance, scope="acct:main")
    page.set_text(sel.TEXT_ACCOUNT_ACCOUNT_NAME, "Savings", scope="acct:savings")
    page.set_text(sel.TEXT_ACCOUNT_ACCOUNT_BALANCE, "$ 10", scope="acct:savings")
    return page


@pytest.mark.asyncio
async def test_successful_run_resets_budgets_and_runs_services(page, metrics, provider):
    logged_in(page)
    page.set_text(sel.TEXT_FI_DEPART_AMOUNT, "7")
    bot = Bot(provider(services=["depart"]), metrics, session_factory=session_for(page))

    result = await bot.run()

    assert result.success
    assert page.navigated == ["https://www.airlinemanager.com/"]
    assert (sel.TEXT_FIELD_LOGIN, "pilot@example.com", None) in page.values
    assert bot.ledger.account_balance == 2_000_000
    assert bot.ledger.maintenance == 1_000_000
    assert bot.ledger.fuel == 1_400_000
    assert metrics.value("am4_company_money", {"type": "Savings"}) == 10
    assert page.clicked(sel.BUTTON_FI_DEPART_ALL) == 1
    assert metrics.value("am4_duration_seconds") is not None


@pytest.mark.asyncio
async def test_login_failure_stops_the_run(page, metrics, provider):
    bot = Bot(provider(services=["depart"]), metrics, session_factory=session_for(page))

    result = await bot.run()

    assert not result.success
    assert result.failed_operation == "auth"
    assert isinstance(result.error, AuthError)
    assert page.clicked(sel.BUTTON_MAIN_ACCOUNT) == 0


@pytest.mark.asyncio
async def test_missing_login_form_is_an_auth_error(page, metrics, provider):
    page.broken[(sel.BUTTON_PLAY_NOW, None)] = ElementNotFoundError(sel.BUTTON_PLAY_NOW)
    bot = Bot(provider(), metrics, session_factory=session_for(page))

    result = await bot.run()

    assert isinstance(result.error, AuthError)


@pytest.mark.asyncio
async def test_unknown_service_is_skipped(page, metrics, provider):
    logged_in(page)
    page.set_text(sel.TEXT_FI_DEPART_AMOUNT, "1")
    bot = Bot(provider(services=["teleport", "depart"]), metrics, session_factory=session_for(page))

    result = await bot.run()

    assert result.success
    assert page.clicked(sel.BUTTON_FI_DEPART_ALL) == 1


@pytest.mark.asyncio
async def test_failing_service_aborts_remaining_services(page, metrics, provider):
    logged_in(page)
    page.set_text(sel.TEXT_FI_DEPART_AMOUNT, "3")
    bot = Bot(provider(services=["buy_fuel", "depart"]), metrics, session_factory=session_for(page))

    result = await bot.run()

    assert not result.success
    assert result.failed_operation == "buy_fuel"
    assert isinstance(result.error, ElementNotFoundError)
    # the fuel panel is still closed on the way out
    assert page.clicked(sel.BUTTON_COMMON_CLOSE_POPUP) == 2
    assert page.clicked(sel.BUTTON_FI_DEPART_ALL) == 0


@pytest.mark.asyncio
async def test_run_timeout(page, metrics, provider):
    async def hang(url):
        await asyncio.sleep(5)

    page.navigate = hang
    bot = Bot(provider(timeout_seconds=0.05), metrics, session_factory=session_for(page))

    result = await bot.run()

    assert not result.success
    assert isinstance(result.error, RunTimeoutError)
    assert result.failed_operation == "auth"


@pytest.mark.asyncio
async def test_reloaded_config_used_for_next_run(page, metrics, provider, tmp_path):
    logged_in(page)
    seen = []
    bot = Bot(provider(services=[]), metrics, session_factory=session_for(page), on_reload=seen.append)
    await bot.run()
    assert seen == []

    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"services": [], "timeout_seconds": 60}), encoding="utf-8")
    await bot.run()

    assert len(seen) == 1
    assert bot.conf.timeout_seconds == 60
