"""
Wait session - per-session poller cache plus the explicit wait conditions

Element interactions already wait for readiness on their own. The explicit waits
here are for the cases that need something more specific, e.g. text changing after
an XHR, or a class toggling when an animation finishes.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, FrozenSet, Optional, TypeVar

from .config import WaitSettings, positive_seconds
from .driver import BrowserDriver
from .exceptions import ConfigurationError, NotFound, StaleReference
from .poller import Poller, PollerConfig

logger = logging.getLogger(__name__)

T = TypeVar('T')

CLASS_ATTRIBUTE = 'class'
DOM_READY_STATE_SCRIPT = 'document.readyState'
DOM_READY_STATE_COMPLETE = 'complete'


def class_tokens(class_attribute: Optional[str]) -> FrozenSet[str]:
    """Split a class attribute into its whitespace-delimited tokens"""
    return frozenset((class_attribute or '').split())


class WaitSession:
    """
    Owns the pollers of one browser session, one per distinct timeout value.

    Timeout overrides are passed per call and never written back to the session,
    so ``timeout`` keeps its value whether a wait succeeds or raises.
    """

    def __init__(self, driver: BrowserDriver, settings: Optional[WaitSettings] = None,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], Any] = time.sleep):
        self.driver = driver
        self.settings = settings or WaitSettings.from_env()
        if self.settings.debug:
            logging.getLogger('autowait').setLevel(logging.DEBUG)
        self._timeout = self.settings.timeout
        self._clock = clock
        self._sleep = sleep
        self._pollers: Dict[float, Poller] = {}
        self._lock = threading.Lock()

    @property
    def timeout(self) -> float:
        """Default timeout (seconds) for waits that do not pass their own"""
        return self._timeout

    @timeout.setter
    def timeout(self, value: float):
        if not positive_seconds(value):
            raise ConfigurationError(f"Wait timeout must be a positive finite number, got {value}")
        self._timeout = float(value)

    def effective_timeout(self, timeout: Optional[float] = None) -> float:
        return self._timeout if timeout is None else float(timeout)

    def poller(self, timeout: Optional[float] = None) -> Poller:
        """Return the cached poller for this timeout, creating it on first use"""
        key = self.effective_timeout(timeout)
        with self._lock:
            poller = self._pollers.get(key)
            if poller is None:
                config = PollerConfig(timeout=key, poll_interval=self.settings.poll_interval)
                poller = Poller(config, clock=self._clock, sleep=self._sleep)
                self._pollers[key] = poller
                logger.debug("Created %r", poller)
            return poller

    def until(self, predicate: Callable[[], T], timeout: Optional[float] = None, message: str = '') -> T:
        """
        Wait for a custom condition.

        Examples:
            session.until(lambda: 'dashboard' in page.url)
            session.until(lambda: element.get_attribute('aria-busy') == 'false', timeout=30)

        Args:
            predicate: zero-argument callable, re-evaluated until it returns something truthy
            timeout: one-shot timeout in seconds for this call only
            message: added to the DeadlineExceeded message on failure

        Returns:
            The truthy value returned by the predicate
        """
        return self.poller(timeout).until(predicate, message)

    # Canned conditions

    def wait_for_text_to_contain(self, element, text: str, timeout: Optional[float] = None) -> bool:
        """Wait for an element's text to contain ``text``"""
        return self.until(lambda: text in self.driver.get_text(element.locate()), timeout,
                          f"text of {element} to contain {text!r}")

    def wait_until_enabled(self, element, timeout: Optional[float] = None) -> bool:
        return self.until(lambda: self.driver.is_enabled(element.locate()), timeout,
                          f"{element} to be enabled")

    def wait_until_displayed(self, element, timeout: Optional[float] = None) -> Any:
        """Wait for an element to be visible and return its freshly resolved raw reference"""
        def displayed():
            raw = element.locate()
            return raw if self.driver.is_displayed(raw) else None
        return self.until(displayed, timeout, f"{element} to be displayed")

    def wait_until_not_displayed(self, element, timeout: Optional[float] = None) -> bool:
        """Wait for an element to be hidden; an element that is gone counts as hidden"""
        def hidden():
            try:
                return not self.driver.is_displayed(element.locate())
            except (NotFound, StaleReference):
                return True
        return self.until(hidden, timeout, f"{element} to be hidden")

    def wait_for_element_to_have_class(self, element, class_name: str, timeout: Optional[float] = None) -> bool:
        return self.until(lambda: class_name in self._classes_of(element), timeout,
                          f"{element} to have class {class_name!r}")

    def wait_for_element_to_not_have_class(self, element, class_name: str,
                                           timeout: Optional[float] = None) -> bool:
        return self.until(lambda: class_name not in self._classes_of(element), timeout,
                          f"{element} to not have class {class_name!r}")

    def wait_until_page_is_loaded(self, timeout: Optional[float] = None) -> bool:
        """Wait for document.readyState to reach 'complete'"""
        return self.until(
            lambda: self.driver.execute_script(DOM_READY_STATE_SCRIPT) == DOM_READY_STATE_COMPLETE,
            timeout, "page to finish loading")

    def _classes_of(self, element) -> FrozenSet[str]:
        return class_tokens(self.driver.get_attribute(element.locate(), CLASS_ATTRIBUTE))

    # Session lifetime

    def close(self):
        """Drop every cached poller; the session should not be used afterwards"""
        with self._lock:
            self._pollers.clear()

    def __enter__(self) -> 'WaitSession':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def cached_timeouts(self):
        with self._lock:
            return sorted(self._pollers)
