# ambot/utils/log.py
import sys

from loguru import logger

LEVELS = ("debug", "info", "warn", "error")

FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "info") -> None:
    """Replace loguru's default sink with one stderr sink at ``level``."""
    name = level.upper()
    if name == "WARN":
        name = "WARNING"
    logger.remove()
    logger.add(sys.stderr, level=name, format=FORMAT)
