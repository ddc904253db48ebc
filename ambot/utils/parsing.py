# ambot/utils/parsing.py
"""
Number extraction from game text.

The game renders values with currency signs, thousands separators and labels
("$ 1,234,567", "Rank is 3,210 now").  Every digit run in the string is glued
together, so the helpers are meant for elements that hold exactly one value.
"""
import re
from datetime import datetime

from loguru import logger

from ..errors import BadFormatError, NotNumericError

INT_RUN = re.compile(r"-?\d+")
FLOAT_RUN = re.compile(r"-?\d+(?:\.\d+)?")
DURATION_LAYOUT = "%H:%M:%S"


def int_from_string(text: str) -> int:
    """Integer part of the number in ``text``; the fraction is dropped, not rounded."""
    whole = text.split(".")[0].replace(",", "")
    digits = "".join(INT_RUN.findall(whole))
    try:
        return int(digits)
    except ValueError:
        logger.debug(f"🔢 Cannot parse int from {text!r}")
        raise NotNumericError(text) from None


def float_from_string(text: str) -> float:
    digits = "".join(FLOAT_RUN.findall(text.replace(",", "")))
    try:
        return float(digits)
    except ValueError:
        logger.warning(f"🔢 Cannot parse float from {text!r}")
        raise NotNumericError(text) from None


def parse_duration_to_seconds(text: str, layout: str = DURATION_LAYOUT) -> int:
    """Clock-style countdown ("01:45:22") to whole seconds since 00:00:00."""
    try:
        parsed = datetime.strptime(text.strip(), layout)
    except ValueError:
        logger.warning(f"⏱️ Cannot parse duration {text!r} with layout {layout!r}")
        raise BadFormatError(text, layout) from None
    return parsed.hour * 3600 + parsed.minute * 60 + parsed.second


def atoi_safe(text: str | None) -> int:
    """Attribute values on route rows are sometimes empty; those count as zero."""
    if not text:
        return 0
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _mask(part: str) -> str:
    if len(part) == 3:
        return part[0] + "*" * (len(part) - 1)
    if len(part) > 3:
        return part[0] + "*" * (len(part) - 2) + part[-1]
    return "*" * len(part)


def mask_username(username: str) -> str:
    """Hide most of a login name for log output, keeping the mail domain."""
    parts = username.split("@")
    if len(parts) == 1:
        return _mask(parts[0])
    return f"{_mask(parts[0])}@{parts[1]}"
