# ambot/services/base.py
import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass

from loguru import logger

from .. import selectors as sel
from ..config import Config
from ..errors import AmbotError
from ..ledger import BudgetLedger
from ..metrics import Metrics
from ..page import PageAccessor
from ..utils.parsing import float_from_string, int_from_string


@dataclass
class RunContext:
    page: PageAccessor
    conf: Config
    ledger: BudgetLedger
    metrics: Metrics


class Service:
    """One task category of a run.

    Subclasses implement ``run``. Panels are opened with ``panel`` so they are
    closed again on every exit path.
    """
    name = "service"

    def __init__(self, ctx: RunContext):
        self.ctx = ctx
        self.page = ctx.page
        self.conf = ctx.conf
        self.ledger = ctx.ledger
        self.metrics = ctx.metrics

    async def run(self):
        raise NotImplementedError

    @asynccontextmanager
    async def panel(self, open_target: str, close_target: str = sel.BUTTON_COMMON_CLOSE_POPUP, scope=None):
        await self.page.click(open_target, scope=scope)
        try:
            yield
        except asyncio.CancelledError:
            raise
        except BaseException:
            try:
                await self.page.click(close_target)
            except AmbotError as close_error:
                logger.warning(f"⚠️ {self.name}: closing panel after failure also failed: {close_error}")
            raise
        await self.page.click(close_target)

    async def read_float(self, selector: str, scope=None) -> float:
        return float_from_string(await self.page.text(selector, scope=scope))

    async def read_int(self, selector: str, scope=None) -> int:
        return int_from_string(await self.page.text(selector, scope=scope))
