# test_metrics.py
"""Gauges, the HTTP exporter and error classification."""
import asyncio

import pytest
from aiohttp.test_utils import make_mocked_request
from loguru import logger
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ambot.errors import AuthError, ConfigError, ElementNotFoundError, NotNumericError, RunTimeoutError
from ambot.exporter import MetricsExporter, parse_listen_address
from ambot.utils.error_classifier import ErrorClassifier
from ambot.utils.poller import poll_until


def test_negative_values_left_unset(metrics):
    assert not metrics.set_non_negative(metrics.company_rank, -1)
    assert metrics.value("am4_company_rank") == 0
    assert not metrics.set_non_negative(metrics.passengers, -5, "economy")
    assert metrics.value("am4_stats_passengers_transported", {"type": "economy"}) is None
    assert metrics.set_non_negative(metrics.passengers, 5, "economy")
    assert metrics.value("am4_stats_passengers_transported", {"type": "economy"}) == 5


def test_negative_value_logged_with_metric_name(metrics):
    messages = []
    sink = logger.add(messages.append, level="ERROR")
    try:
        metrics.set_non_negative(metrics.staff_morale, -3, "pilots")
    finally:
        logger.remove(sink)
    assert "am4_company_staff_morale" in messages[0]
    assert "pilots" in messages[0]


def test_start_time_set(metrics):
    assert metrics.value("process_start_time_seconds") > 0


@pytest.mark.parametrize(
    "address, expected",
    [(":9150", ("0.0.0.0", 9150)), ("127.0.0.1:8080", ("127.0.0.1", 8080))],
)
def test_parse_listen_address(address, expected):
    assert parse_listen_address(address) == expected


@pytest.mark.parametrize("address", ["9150", "localhost:", "host:port"])
def test_parse_listen_address_rejects_garbage(address):
    with pytest.raises(ValueError):
        parse_listen_address(address)


@pytest.mark.asyncio
async def test_exporter_serves_registry(metrics):
    metrics.up.set(1)
    metrics.fuel_price.labels("fuel").set(450)
    exporter = MetricsExporter(metrics)

    response = await exporter.handle_metrics(make_mocked_request("GET", "/metrics"))
    body = response.body.decode()

    assert "text/plain" in response.headers["Content-Type"]
    assert "up 1.0" in body
    assert 'am4_market_fuel_price{type="fuel"} 450.0' in body


@pytest.mark.asyncio
async def test_exporter_landing_page_links_metrics(metrics):
    exporter = MetricsExporter(metrics, metrics_path="/probe")
    response = await exporter.handle_index(make_mocked_request("GET", "/"))
    assert 'href="/probe"' in response.text


@pytest.mark.parametrize(
    "error, category",
    [
        (ConfigError("bad"), "config_error"),
        (AuthError("nope"), "auth_error"),
        (RunTimeoutError(180), "run_timeout"),
        (ElementNotFoundError("#x"), "selector_not_found"),
        (NotNumericError("N/A"), "parse_error"),
        (PlaywrightTimeoutError("Timeout 30000ms exceeded"), "timeout"),
        (OSError("Temporary failure in name resolution"), "dns_error"),
        (RuntimeError("something odd"), "unknown"),
    ],
)
def test_error_classification(error, category):
    assert ErrorClassifier.classify_error(error) == category


@pytest.mark.asyncio
async def test_poll_until_gives_up_after_attempts():
    calls = []

    async def fetch():
        calls.append(1)
        return ""

    async def no_sleep(_):
        await asyncio.sleep(0)

    assert await poll_until(fetch, attempts=5, sleep=no_sleep) == ""
    assert len(calls) == 5
