# ambot/utils/error_classifier.py
import asyncio

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..errors import (
    AuthError,
    ConfigError,
    ElementNotFoundError,
    ElementTimeoutError,
    ParseError,
    RunTimeoutError,
)


class ErrorClassifier:
    """Classifies run failures into categories for logging and alerting."""

    @staticmethod
    def classify_error(error: BaseException) -> str:
        """Classify an exception into a category name."""
        if isinstance(error, ConfigError):
            return "config_error"
        if isinstance(error, AuthError):
            return "auth_error"
        if isinstance(error, RunTimeoutError):
            return "run_timeout"
        if isinstance(error, (ElementTimeoutError, PlaywrightTimeoutError, asyncio.TimeoutError)):
            return "timeout"
        if isinstance(error, ElementNotFoundError):
            return "selector_not_found"
        if isinstance(error, ParseError):
            return "parse_error"

        error_msg = str(error).lower()
        if isinstance(error, PlaywrightError):
            if "target closed" in error_msg or "browser has been closed" in error_msg:
                return "browser_closed"
            if "net::" in error_msg or "connection" in error_msg:
                return "connection_error"
            return "browser_error"
        if "name resolution" in error_msg or "dns" in error_msg:
            return "dns_error"
        return "unknown"

    @staticmethod
    def get_error_severity(error_type: str) -> str:
        """Get severity level for an error type."""
        severity_map = {
            # Critical - the next run will fail the same way
            "config_error": "critical",
            "auth_error": "critical",

            # High - browser or network trouble
            "browser_closed": "high",
            "connection_error": "high",
            "dns_error": "high",
            "browser_error": "high",

            # Medium - slow game UI
            "run_timeout": "medium",
            "timeout": "medium",

            # Low - markup drift, usually a single panel
            "selector_not_found": "low",
            "parse_error": "low",

            "unknown": "medium",
        }
        return severity_map.get(error_type, "medium")
