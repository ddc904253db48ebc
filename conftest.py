# conftest.py
"""Shared fixtures: an in-memory page that replays scripted game state."""
from contextlib import asynccontextmanager
from dataclasses import replace

import pytest

from ambot.config import Config
from ambot.errors import ElementNotFoundError, ElementTimeoutError
from ambot.ledger import BudgetLedger
from ambot.metrics import Metrics
from ambot.services import RunContext


class FakePage:
    """Scripted PageAccessor.

    ``texts`` and ``visible`` are keyed by ``(selector_or_handle, scope)``,
    ``lists`` by ``(selector, scope)`` and ``attrs`` by ``(handle_or_selector, name)``.
    A list in ``texts`` is consumed one value per read, the last value sticks.
    ``on_click`` maps a target to a callback run after the click is recorded.
    """

    def __init__(self):
        self.texts = {}
        self.attrs = {}
        self.lists = {}
        self.visible = set()
        self.on_click = {}
        self.broken = {}
        self.clicks = []
        self.values = []
        self.navigated = []

    # scripting helpers
    def set_text(self, target, text, scope=None):
        self.texts[(target, scope)] = text
        self.visible.add((target, scope))
        return self

    def show(self, target, scope=None):
        self.visible.add((target, scope))
        return self

    def clicked(self, target, scope=None) -> int:
        return self.clicks.count((target, scope))

    # PageAccessor
    async def navigate(self, url):
        self.navigated.append(url)

    async def find_all(self, selector, scope=None):
        return list(self.lists.get((selector, scope), []))

    async def text(self, target, scope=None):
        key = (target, scope)
        if key not in self.texts:
            raise ElementNotFoundError(str(target))
        value = self.texts[key]
        if isinstance(value, list):
            return value.pop(0) if len(value) > 1 else value[0]
        if isinstance(value, Exception):
            raise value
        return value

    async def attribute(self, target, name, scope=None):
        return self.attrs.get((target, name))

    async def click(self, target, scope=None):
        if (target, scope) in self.broken:
            raise self.broken[(target, scope)]
        self.clicks.append((target, scope))
        callback = self.on_click.get(target)
        if callback:
            callback()

    async def set_value(self, selector, value, scope=None):
        self.values.append((selector, value, scope))

    async def is_visible(self, selector, timeout=None, scope=None):
        return (selector, scope) in self.visible

    async def wait_visible(self, selector, timeout=None):
        if (selector, None) not in self.visible:
            raise ElementTimeoutError(selector, timeout or 0)


def session_for(page):
    """Session factory handing out ``page`` for every run."""

    @asynccontextmanager
    async def factory(conf):
        yield page

    return factory


@pytest.fixture
def page():
    return FakePage()


@pytest.fixture
def conf():
    return Config(username="pilot@example.com", password="secret")


@pytest.fixture
def metrics():
    return Metrics()


@pytest.fixture
def ledger():
    ledger = BudgetLedger()
    ledger.reset(1_000_000, {"maintenance": 50, "marketing": 70, "fuel": 70})
    return ledger


@pytest.fixture
def make_ctx(page, conf, ledger, metrics):
    def make(**overrides):
        return RunContext(page=page, conf=replace(conf, **overrides), ledger=ledger, metrics=metrics)

    return make
