"""
Error taxonomy for element resolution and waiting
"""

from typing import Optional


class AutomationError(Exception):
    """Base class for every error raised by autowait"""


class ConfigurationError(AutomationError, ValueError):
    """Programmer error: unknown element kind, malformed locator, bad setting. Never retried."""


class NotFound(AutomationError):
    """The driver found no element for a locator at the moment of the query"""

    def __init__(self, locator, message: Optional[str] = None):
        self.locator = locator
        super().__init__(message or f"No element found for {_describe(locator)}")


class StaleReference(AutomationError):
    """A previously resolved DOM node was detached before the action completed"""

    def __init__(self, locator=None, message: Optional[str] = None):
        self.locator = locator
        if message is None:
            message = "Element is no longer attached to the DOM"
            if locator is not None:
                message += f" ({_describe(locator)})"
        super().__init__(message)


class DeadlineExceeded(AutomationError, TimeoutError):
    """A poll never observed a truthy predicate before its deadline"""

    def __init__(self, timeout: float, elapsed: float, message: str = "",
                 last_error: Optional[BaseException] = None):
        self.timeout = timeout
        self.elapsed = elapsed
        self.last_error = last_error
        text = f"Condition not met after {elapsed:.2f}s (timeout {timeout:g}s)"
        if message:
            text = f"{message}: {text}"
        if last_error is not None:
            text += f"; last error: {last_error}"
        super().__init__(text)


def _describe(locator) -> str:
    describe = getattr(locator, 'describe', None)
    return describe() if callable(describe) else repr(locator)
