# ambot/errors.py


class AmbotError(Exception):
    """Base class for every error raised by the bot."""


class ConfigError(AmbotError):
    """Config file missing, unreadable, malformed or invalid."""


class AuthError(AmbotError):
    """Login did not reach the main game screen."""


class ElementNotFoundError(AmbotError):
    def __init__(self, selector: str, reason: str = "not found"):
        self.selector = selector
        super().__init__(f"element {reason}: {selector}")


class ElementTimeoutError(AmbotError):
    def __init__(self, selector: str, timeout: float):
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"element not ready after {timeout:g}s: {selector}")


class RunTimeoutError(AmbotError):
    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"run exceeded timeout of {timeout:g}s")


class ParseError(AmbotError):
    """Text could not be turned into the requested value."""


class NotNumericError(ParseError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"no number in {text!r}")


class BadFormatError(ParseError):
    def __init__(self, text: str, layout: str):
        self.text = text
        self.layout = layout
        super().__init__(f"{text!r} does not match layout {layout!r}")
