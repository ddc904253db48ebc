# ambot/page.py
"""
Browser access for the services.

``PageAccessor`` is everything the bot needs from a browser. ``PlaywrightPage``
implements it on top of a Playwright page, ``BrowserSession`` owns the browser
for a single run.
"""
from typing import Optional, Protocol, Union

from loguru import logger
from playwright.async_api import ElementHandle, Page, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright_stealth.stealth import Stealth

from . import selectors as sel
from .errors import ElementNotFoundError, ElementTimeoutError
from .models import Handle

Target = Union[str, Handle]


class PageAccessor(Protocol):
    async def navigate(self, url: str) -> None: ...

    async def find_all(self, selector: str, scope: Optional[Handle] = None) -> list: ...

    async def text(self, target: Target, scope: Optional[Handle] = None) -> str: ...

    async def attribute(self, target: Target, name: str, scope: Optional[Handle] = None) -> Optional[str]: ...

    async def click(self, target: Target, scope: Optional[Handle] = None) -> None: ...

    async def set_value(self, selector: str, value: str, scope: Optional[Handle] = None) -> None: ...

    async def is_visible(self, selector: str, timeout: Optional[float] = None, scope: Optional[Handle] = None) -> bool: ...

    async def wait_visible(self, selector: str, timeout: Optional[float] = None) -> None: ...


class PlaywrightPage:
    """PageAccessor over a Playwright page.

    Element waits use ``timeout`` seconds, visibility probes use
    ``visible_timeout`` seconds. Every click waits for the game's loading
    overlay to disappear before returning.
    """

    def __init__(self, page: Page, timeout: float = 10.0, visible_timeout: float = 2.0):
        self.page = page
        self.timeout = timeout
        self.visible_timeout = visible_timeout

    def _root(self, scope: Optional[Handle]):
        return scope if scope is not None else self.page

    async def _query(self, selector: str, scope: Optional[Handle] = None) -> ElementHandle:
        try:
            handle = await self._root(scope).wait_for_selector(
                selector, state="attached", timeout=self.timeout * 1000
            )
        except PlaywrightTimeoutError:
            raise ElementNotFoundError(selector) from None
        if handle is None:
            raise ElementNotFoundError(selector)
        return handle

    async def _resolve(self, target: Target, scope: Optional[Handle]) -> ElementHandle:
        if isinstance(target, str):
            return await self._query(target, scope)
        return target

    async def navigate(self, url: str) -> None:
        logger.debug(f"🌐 Navigating to {url}")
        await self.page.goto(url, wait_until="domcontentloaded", timeout=self.timeout * 1000)

    async def find_all(self, selector: str, scope: Optional[Handle] = None) -> list:
        root = self._root(scope)
        try:
            await root.wait_for_selector(selector, state="attached", timeout=self.visible_timeout * 1000)
        except PlaywrightTimeoutError:
            logger.debug(f"🔍 No elements for {selector}")
            return []
        return await root.query_selector_all(selector)

    async def text(self, target: Target, scope: Optional[Handle] = None) -> str:
        handle = await self._resolve(target, scope)
        return (await handle.inner_text()).strip()

    async def attribute(self, target: Target, name: str, scope: Optional[Handle] = None) -> Optional[str]:
        handle = await self._resolve(target, scope)
        return await handle.get_attribute(name)

    async def click(self, target: Target, scope: Optional[Handle] = None) -> None:
        handle = await self._resolve(target, scope)
        label = target if isinstance(target, str) else "element handle"
        try:
            await handle.click(timeout=self.timeout * 1000)
        except PlaywrightTimeoutError:
            raise ElementNotFoundError(label, "not clickable") from None
        except PlaywrightError as e:
            raise ElementNotFoundError(label, f"not clickable ({e.message})") from e
        await self._settle()

    async def _settle(self) -> None:
        try:
            await self.page.wait_for_selector(sel.OVERLAY_LOADING, state="hidden", timeout=self.timeout * 1000)
        except PlaywrightTimeoutError:
            raise ElementTimeoutError(sel.OVERLAY_LOADING, self.timeout) from None

    async def set_value(self, selector: str, value: str, scope: Optional[Handle] = None) -> None:
        handle = await self._query(selector, scope)
        tag = await handle.evaluate("el => el.tagName")
        if tag == "SELECT":
            await handle.select_option(value=str(value), timeout=self.timeout * 1000)
        else:
            await handle.fill(str(value), timeout=self.timeout * 1000)

    async def is_visible(self, selector: str, timeout: Optional[float] = None, scope: Optional[Handle] = None) -> bool:
        timeout = self.visible_timeout if timeout is None else timeout
        try:
            await self._root(scope).wait_for_selector(selector, state="visible", timeout=timeout * 1000)
        except PlaywrightTimeoutError:
            return False
        return True

    async def wait_visible(self, selector: str, timeout: Optional[float] = None) -> None:
        timeout = self.timeout if timeout is None else timeout
        if not await self.is_visible(selector, timeout=timeout):
            raise ElementTimeoutError(selector, timeout)


class BrowserSession:
    """One stealth Chromium instance per run, closed on exit."""

    LAUNCH_ARGS = [
        "--disable-blink-features=AutomationControlled",
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
        "--start-maximized",
    ]

    def __init__(self, headless: bool = True, debug: bool = False, timeout: float = 10.0, visible_timeout: float = 2.0):
        self.headless = headless
        self.debug = debug
        self.timeout = timeout
        self.visible_timeout = visible_timeout
        self.pw = None
        self.browser = None
        self.context = None

    @classmethod
    def from_config(cls, conf) -> "BrowserSession":
        return cls(
            headless=conf.chrome_headless,
            debug=conf.chrome_debug,
            timeout=conf.element_timeout_seconds,
            visible_timeout=conf.visible_timeout_seconds,
        )

    async def __aenter__(self) -> PlaywrightPage:
        self.pw = await async_playwright().start()
        self.browser = await self.pw.chromium.launch(headless=self.headless, args=self.LAUNCH_ARGS)
        self.context = await self.browser.new_context(viewport={"width": 1920, "height": 1080})
        await Stealth().apply_stealth_async(self.context)
        page = await self.context.new_page()
        if self.debug:
            page.on("console", lambda msg: logger.debug(f"🖥️ console.{msg.type}: {msg.text}"))
        logger.info(f"🚀 Browser ready (headless={self.headless})")
        return PlaywrightPage(page, timeout=self.timeout, visible_timeout=self.visible_timeout)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self.context:
            await self.context.close()
        if self.browser:
            await self.browser.close()
        if self.pw:
            await self.pw.stop()
        self.context = self.browser = self.pw = None
        logger.debug("🧹 Browser closed")
