# ambot/exporter.py
from datetime import datetime, timezone
from pathlib import Path

from aiohttp import web
from jinja2 import Template
from loguru import logger
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from . import __version__
from .metrics import Metrics

TEMPLATE_DIR = Path(__file__).parent / "templates"


def parse_listen_address(address: str) -> tuple[str, int]:
    """``":9150"`` -> ``("0.0.0.0", 9150)``, ``"127.0.0.1:9150"`` -> ``("127.0.0.1", 9150)``."""
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address {address!r}, expected [host]:port")
    return host or "0.0.0.0", int(port)


class MetricsExporter:
    """Serves the metrics registry and a small landing page over HTTP."""

    def __init__(self, metrics: Metrics, address: str = ":9150", metrics_path: str = "/metrics"):
        self.metrics = metrics
        self.address = address
        self.metrics_path = metrics_path
        self.started = datetime.now(timezone.utc)
        self.template = Template((TEMPLATE_DIR / "index.html").read_text(encoding="utf-8"))
        self.runner: web.AppRunner | None = None

    async def handle_metrics(self, request: web.Request) -> web.Response:
        return web.Response(
            body=generate_latest(self.metrics.registry),
            headers={"Content-Type": CONTENT_TYPE_LATEST},
        )

    async def handle_index(self, request: web.Request) -> web.Response:
        html = self.template.render(
            version=__version__,
            started=self.started.isoformat(timespec="seconds"),
            metrics_path=self.metrics_path,
        )
        return web.Response(text=html, content_type="text/html")

    def build_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get(self.metrics_path, self.handle_metrics)
        if self.metrics_path != "/":
            app.router.add_get("/", self.handle_index)
        return app

    async def start(self) -> None:
        host, port = parse_listen_address(self.address)
        self.runner = web.AppRunner(self.build_app())
        await self.runner.setup()
        await web.TCPSite(self.runner, host, port).start()
        logger.info(f"📈 Serving metrics on http://{host}:{port}{self.metrics_path}")

    async def stop(self) -> None:
        if self.runner:
            await self.runner.cleanup()
            self.runner = None
