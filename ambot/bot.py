# ambot/bot.py
"""
One bot run: config check, login, budget refresh, configured services.

Any failure after the config check stops the run; the remaining services are
not attempted. The whole run is bounded by ``timeout_seconds``.
"""
import asyncio
import time
from typing import Callable, Optional

from loguru import logger

from . import selectors as sel
from .config import Config, ConfigProvider
from .errors import AmbotError, AuthError, RunTimeoutError
from .ledger import BudgetLedger
from .metrics import Metrics
from .models import RunResult
from .page import BrowserSession, PageAccessor
from .services import SERVICES, RunContext
from .services.money import MoneyService
from .utils.error_classifier import ErrorClassifier
from .utils.parsing import mask_username

SessionFactory = Callable[[Config], object]


async def authenticate(page: PageAccessor, conf: Config) -> None:
    """Log in and wait for the main screen."""
    logger.info(f"🔑 Logging in as {mask_username(conf.username)}")
    try:
        await page.navigate(conf.url)
        await page.click(sel.BUTTON_PLAY_NOW)
        await page.click(sel.BUTTON_LOGIN)
        await page.set_value(sel.TEXT_FIELD_LOGIN, conf.username)
        await page.set_value(sel.TEXT_FIELD_PASSWORD, conf.password)
        await page.click(sel.BUTTON_AUTH)
    except AmbotError as e:
        raise AuthError(f"login form unavailable: {e}") from e
    if not await page.is_visible(sel.BUTTON_MAIN_HUBS, timeout=conf.element_timeout_seconds):
        raise AuthError(f"main screen not shown after login as {mask_username(conf.username)}")
    logger.success("✅ Logged in")


class Bot:
    def __init__(
        self,
        provider: ConfigProvider,
        metrics: Metrics,
        session_factory: Optional[SessionFactory] = None,
        on_reload: Optional[Callable[[Config], None]] = None,
    ):
        self.provider = provider
        self.metrics = metrics
        self.session_factory = session_factory or BrowserSession.from_config
        self.on_reload = on_reload
        self.ledger = BudgetLedger()
        self.operation: Optional[str] = None

    @property
    def conf(self) -> Config:
        return self.provider.config

    async def run(self) -> RunResult:
        if self.provider.reload_if_changed():
            logger.info("🔄 Using reloaded config for this run")
            if self.on_reload:
                self.on_reload(self.provider.config)
        conf = self.conf
        start = time.monotonic()
        self.operation = None

        try:
            await asyncio.wait_for(self._run(conf), timeout=conf.timeout_seconds)
        except asyncio.TimeoutError:
            error = RunTimeoutError(conf.timeout_seconds)
            return self._failed(start, error)
        except Exception as e:
            return self._failed(start, e)

        elapsed = time.monotonic() - start
        self.metrics.duration.set(elapsed)
        logger.success(f"🏁 Run complete in {elapsed:.1f}s")
        return RunResult(success=True, elapsed=elapsed)

    def _failed(self, start: float, error: Exception) -> RunResult:
        elapsed = time.monotonic() - start
        category = ErrorClassifier.classify_error(error)
        severity = ErrorClassifier.get_error_severity(category)
        logger.error(
            f"❌ Run failed in {self.operation or 'startup'} after {elapsed:.1f}s "
            f"[{category}/{severity}]: {error}"
        )
        return RunResult(success=False, elapsed=elapsed, failed_operation=self.operation, error=error)

    async def _run(self, conf: Config) -> None:
        self.operation = "browser"
        async with self.session_factory(conf) as page:
            self.operation = "auth"
            await authenticate(page, conf)

            ctx = RunContext(page=page, conf=conf, ledger=self.ledger, metrics=self.metrics)
            self.operation = MoneyService.name
            balance = await MoneyService(ctx).run()
            self.ledger.reset(balance, conf.budget_percent.as_dict())

            for name in conf.services:
                service_cls = SERVICES.get(name)
                if service_cls is None:
                    logger.warning(f"⚠️ Unknown service '{name}', available: {sorted(SERVICES)}")
                    continue
                self.operation = name
                await service_cls(ctx).run()
        self.operation = None
