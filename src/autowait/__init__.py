"""
autowait - self-waiting element handles for Playwright

Two pieces do the real work: a condition poller that retries a predicate against
the live page until it holds or a deadline passes, and lazy element handles that
re-resolve their locator on every access so re-rendered nodes never go stale.
"""

import logging

from .config import WaitSettings
from .driver import BrowserDriver, PlaywrightDriver
from .elements import (
    BaseElement,
    ButtonElement,
    CheckboxElement,
    ClickableElement,
    DivElement,
    DropdownElement,
    ImageElement,
    InputElement,
    LabelElement,
    LinkElement,
    RadioElement,
    TableHeaderElement,
    TextAreaElement,
)
from .exceptions import AutomationError, ConfigurationError, DeadlineExceeded, NotFound, StaleReference
from .locator import Locator, Strategy, as_locator
from .poller import Poller, PollerConfig, PollOutcome, wait_until
from .registry import ElementRegistry, default_registry
from .resolver import ElementResolver
from .session import BrowserSession
from .wait import WaitSession

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'WaitSettings',
    'BrowserDriver',
    'PlaywrightDriver',
    'BaseElement',
    'ButtonElement',
    'CheckboxElement',
    'ClickableElement',
    'DivElement',
    'DropdownElement',
    'ImageElement',
    'InputElement',
    'LabelElement',
    'LinkElement',
    'RadioElement',
    'TableHeaderElement',
    'TextAreaElement',
    'AutomationError',
    'ConfigurationError',
    'DeadlineExceeded',
    'NotFound',
    'StaleReference',
    'Locator',
    'Strategy',
    'as_locator',
    'Poller',
    'PollerConfig',
    'PollOutcome',
    'wait_until',
    'ElementRegistry',
    'default_registry',
    'ElementResolver',
    'BrowserSession',
    'WaitSession',
]
