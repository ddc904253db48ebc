# ambot/utils/poller.py
import asyncio
from typing import Any, Awaitable, Callable

from loguru import logger


async def poll_until(
    fetch: Callable[[], Awaitable[Any]],
    predicate: Callable[[Any], bool] = bool,
    attempts: int = 5,
    interval: float = 0.1,
    name: str = "value",
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> Any:
    """
    Call ``fetch`` until ``predicate`` accepts its result.

    Args:
        fetch: Async callable producing the value
        predicate: Acceptance test, truthiness by default
        attempts: Maximum number of fetches
        interval: Pause between fetches in seconds
        name: Label used in debug logs
        sleep: Injectable sleep, tests pass a no-op

    Returns:
        The first accepted value, or the last fetched one when none was accepted.
        Errors raised by ``fetch`` propagate on the attempt that raised them.
    """
    value = None
    for attempt in range(1, attempts + 1):
        value = await fetch()
        if predicate(value):
            return value
        logger.debug(f"⏳ {name} not ready (attempt {attempt}/{attempts})")
        if attempt < attempts:
            await sleep(interval)
    return value
