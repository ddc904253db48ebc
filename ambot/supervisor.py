# ambot/supervisor.py
"""
Scheduling and failure accounting for bot runs.

Runs never overlap. The next firing is computed from the cron expression
after the previous run has finished, so firings that fall inside a long run
are skipped rather than queued.
"""
import asyncio
import sys
from datetime import datetime
from typing import Awaitable, Callable, Optional

from croniter import croniter
from loguru import logger

from .bot import Bot
from .metrics import Metrics
from .models import RunResult

FAILURE_THRESHOLD = 5


class Supervisor:
    def __init__(
        self,
        bot: Bot,
        metrics: Metrics,
        threshold: int = FAILURE_THRESHOLD,
        now: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.bot = bot
        self.metrics = metrics
        self.threshold = threshold
        self.now = now
        self.sleep = sleep
        self.consecutive_failures = 0

    async def run_once(self, count: bool = True) -> RunResult:
        """Run the bot and record the outcome.

        With ``count=False`` only the ``up`` gauge is set and the failure
        counter is left alone.
        """
        result = await self.bot.run()
        if not count:
            self.metrics.up.set(1 if result.success else 0)
            if not result.success:
                logger.error(f"❌ Startup run failed in {result.failed_operation or 'startup'}: {result.error}")
            return result
        if result.success:
            if self.consecutive_failures:
                logger.info(f"💚 Recovered after {self.consecutive_failures} failed run(s)")
            self.consecutive_failures = 0
            self.metrics.up.set(1)
            return result

        self.consecutive_failures += 1
        self.metrics.up.set(0)
        logger.error(
            f"❌ Run failed in {result.failed_operation or 'startup'} "
            f"(attempt {self.consecutive_failures}/{self.threshold}): {result.error}"
        )
        if self.consecutive_failures >= self.threshold:
            logger.critical(f"💀 {self.consecutive_failures} consecutive failed runs, exiting")
            sys.exit(1)
        return result

    def next_fire(self, after: datetime) -> datetime:
        # read per call so a reloaded schedule takes effect
        return croniter(self.bot.conf.cron_schedule, after).get_next(datetime)

    async def serve(self, max_runs: Optional[int] = None) -> None:
        """Startup run, then one run per cron firing.

        ``max_runs`` limits the scheduled runs. The startup run sets ``up`` but
        does not count towards the failure threshold.
        """
        logger.info("▶️ Startup run")
        await self.run_once(count=False)

        runs = 0
        while max_runs is None or runs < max_runs:
            fire_at = self.next_fire(self.now())
            delay = (fire_at - self.now()).total_seconds()
            logger.info(f"⏰ Next run at {fire_at:%Y-%m-%d %H:%M:%S}")
            if delay > 0:
                await self.sleep(delay)
            await self.run_once()
            runs += 1
