# ambot/cli.py
"""Entry points: ``ambot`` (scheduled bot + metrics) and ``ambot-scanner`` (one-shot route scan)."""
import argparse
import asyncio
import sys

from dotenv import load_dotenv
from loguru import logger

from . import __version__
from .bot import Bot
from .config import Config, ConfigProvider
from .errors import AmbotError, ConfigError
from .exporter import MetricsExporter, parse_listen_address
from .metrics import Metrics
from .scanner import Scanner
from .supervisor import Supervisor
from .utils.log import LEVELS, setup_logging


def _base_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("-c", "--app.config", dest="config", default="config.yaml", help="YAML file with configuration")
    parser.add_argument(
        "--log.level",
        dest="log_level",
        choices=LEVELS,
        default=None,
        help="Only log messages with the given severity or above (default: log_level from config)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_bot_parser() -> argparse.ArgumentParser:
    parser = _base_parser("ambot", "Airline Manager 4 bot with a Prometheus exporter")
    parser.add_argument(
        "--web.listen-address",
        dest="listen_address",
        default=None,
        help="Address to expose metrics on (default: prometheus_address from config)",
    )
    parser.add_argument("--web.telemetry-path", dest="telemetry_path", default="/metrics", help="Path to expose metrics on")
    return parser


def build_scanner_parser() -> argparse.ArgumentParser:
    return _base_parser("ambot-scanner", "Scan Airline Manager 4 routes into per-hub CSV files")


def _load(args) -> ConfigProvider:
    setup_logging(args.log_level or "info")
    try:
        provider = ConfigProvider(args.config)
    except ConfigError as e:
        logger.critical(f"💀 Config loading error: {e}")
        sys.exit(1)
    setup_logging(args.log_level or provider.config.log_level)
    return provider


async def serve_bot(provider: ConfigProvider, listen_address: str, telemetry_path: str, log_override: str | None) -> None:
    metrics = Metrics()

    def on_reload(conf: Config) -> None:
        if not log_override:
            setup_logging(conf.log_level)

    exporter = MetricsExporter(metrics, listen_address, telemetry_path)
    await exporter.start()
    try:
        bot = Bot(provider, metrics, on_reload=on_reload)
        await Supervisor(bot, metrics).serve()
    finally:
        await exporter.stop()


def main_bot(argv=None) -> None:
    load_dotenv()
    args = build_bot_parser().parse_args(argv)
    provider = _load(args)
    address = args.listen_address or provider.config.prometheus_address
    try:
        parse_listen_address(address)
    except ValueError as e:
        logger.critical(f"💀 {e}")
        sys.exit(1)
    logger.info(f"🤖 ambot {__version__} starting with {provider.config}")
    try:
        asyncio.run(serve_bot(provider, address, args.telemetry_path, args.log_level))
    except KeyboardInterrupt:
        logger.info("👋 Interrupted, shutting down")


def main_scanner(argv=None) -> None:
    load_dotenv()
    args = build_scanner_parser().parse_args(argv)
    conf = _load(args).config
    logger.info(f"🔭 ambot-scanner {__version__} starting with {conf}")
    try:
        asyncio.run(Scanner(conf).run())
    except (AmbotError, OSError) as e:
        logger.critical(f"💀 Scan failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main_bot()
