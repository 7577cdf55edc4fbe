"""
Browser driver boundary - point-in-time, non-waiting DOM primitives
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from playwright.sync_api import ElementHandle, Page
from playwright.sync_api import Error as PlaywrightError

from .exceptions import NotFound, StaleReference
from .locator import Locator

logger = logging.getLogger(__name__)

# Playwright reports detached nodes through plain Error messages
_DETACHED_MARKERS = (
    'not attached to the dom',
    'element is detached',
    'node is detached',
    'element handle is disposed',
    'execution context was destroyed',
)


class BrowserDriver(ABC):
    """
    Primitives the core consumes from the browser.

    None of these wait: each call reflects the DOM at the moment it is made.
    ``find_element`` raises NotFound when nothing matches; operations on a detached
    node raise StaleReference.
    """

    @abstractmethod
    def find_element(self, locator: Locator, root: Any = None) -> Any:
        """Find the first match for ``locator`` (ignoring its parent), searching under ``root`` if given"""
        pass

    @abstractmethod
    def find_elements(self, locator: Locator, root: Any = None) -> List[Any]:
        """Find every match for ``locator`` (ignoring its parent); empty list when none"""
        pass

    @abstractmethod
    def is_attached(self, raw: Any) -> bool:
        pass

    @abstractmethod
    def get_attribute(self, raw: Any, name: str) -> Optional[str]:
        pass

    @abstractmethod
    def get_text(self, raw: Any) -> str:
        pass

    @abstractmethod
    def get_value(self, raw: Any) -> str:
        """Current value of an input, textarea or select"""
        pass

    @abstractmethod
    def get_tag_name(self, raw: Any) -> str:
        pass

    @abstractmethod
    def get_bounding_box(self, raw: Any) -> Optional[Dict[str, float]]:
        pass

    @abstractmethod
    def is_displayed(self, raw: Any) -> bool:
        pass

    @abstractmethod
    def is_enabled(self, raw: Any) -> bool:
        pass

    @abstractmethod
    def is_checked(self, raw: Any) -> bool:
        pass

    @abstractmethod
    def click(self, raw: Any) -> None:
        pass

    @abstractmethod
    def send_keys(self, raw: Any, text: str) -> None:
        pass

    @abstractmethod
    def clear(self, raw: Any) -> None:
        pass

    @abstractmethod
    def scroll_into_view(self, raw: Any) -> None:
        pass

    @abstractmethod
    def select_option(self, raw: Any, index: Optional[int] = None, value: Optional[str] = None,
                      label: Optional[str] = None) -> None:
        pass

    @abstractmethod
    def get_options_text(self, raw: Any) -> List[str]:
        pass

    @abstractmethod
    def execute_script(self, script: str, arg: Any = None) -> Any:
        pass


class PlaywrightDriver(BrowserDriver):
    """BrowserDriver over a Playwright sync ``Page``"""

    def __init__(self, page: Page, action_timeout_ms: int = 5000):
        self.page = page
        # Upper bound for Playwright's own actionability checks inside a single primitive
        self.action_timeout_ms = action_timeout_ms

    def find_element(self, locator: Locator, root: Optional[ElementHandle] = None) -> ElementHandle:
        scope = root if root is not None else self.page
        with self._translated(locator):
            element = scope.query_selector(locator.to_selector())
        if element is None:
            raise NotFound(locator)
        return element

    def find_elements(self, locator: Locator, root: Optional[ElementHandle] = None) -> List[ElementHandle]:
        scope = root if root is not None else self.page
        with self._translated(locator):
            return list(scope.query_selector_all(locator.to_selector()))

    def is_attached(self, raw: ElementHandle) -> bool:
        try:
            return bool(raw.evaluate('el => el.isConnected'))
        except PlaywrightError as e:
            if _is_detached(e):
                return False
            raise

    def get_attribute(self, raw: ElementHandle, name: str) -> Optional[str]:
        with self._translated():
            return raw.get_attribute(name)

    def get_text(self, raw: ElementHandle) -> str:
        with self._translated():
            return raw.inner_text()

    def get_value(self, raw: ElementHandle) -> str:
        with self._translated():
            return raw.input_value()

    def get_tag_name(self, raw: ElementHandle) -> str:
        with self._translated():
            return raw.evaluate('el => el.tagName.toLowerCase()')

    def get_bounding_box(self, raw: ElementHandle) -> Optional[Dict[str, float]]:
        with self._translated():
            return raw.bounding_box()

    def is_displayed(self, raw: ElementHandle) -> bool:
        with self._translated():
            return raw.is_visible()

    def is_enabled(self, raw: ElementHandle) -> bool:
        with self._translated():
            return raw.is_enabled()

    def is_checked(self, raw: ElementHandle) -> bool:
        with self._translated():
            return raw.is_checked()

    def click(self, raw: ElementHandle) -> None:
        with self._translated():
            raw.click(timeout=self.action_timeout_ms)

    def send_keys(self, raw: ElementHandle, text: str) -> None:
        with self._translated():
            raw.type(text, timeout=self.action_timeout_ms)

    def clear(self, raw: ElementHandle) -> None:
        with self._translated():
            raw.fill('', timeout=self.action_timeout_ms)

    def scroll_into_view(self, raw: ElementHandle) -> None:
        with self._translated():
            raw.scroll_into_view_if_needed(timeout=self.action_timeout_ms)

    def select_option(self, raw: ElementHandle, index: Optional[int] = None, value: Optional[str] = None,
                      label: Optional[str] = None) -> None:
        with self._translated():
            raw.select_option(index=index, value=value, label=label, timeout=self.action_timeout_ms)

    def get_options_text(self, raw: ElementHandle) -> List[str]:
        with self._translated():
            return [option.inner_text() for option in raw.query_selector_all('option')]

    def execute_script(self, script: str, arg: Any = None) -> Any:
        with self._translated():
            return self.page.evaluate(script, arg)

    @contextmanager
    def _translated(self, locator: Optional[Locator] = None):
        """Re-raise Playwright detachment errors as StaleReference"""
        try:
            yield
        except PlaywrightError as e:
            if _is_detached(e):
                logger.debug("Detached element%s: %s", f" for {locator}" if locator else '', e)
                raise StaleReference(locator) from e
            raise


def _is_detached(error: Exception) -> bool:
    message = str(error).lower()
    return any(marker in message for marker in _DETACHED_MARKERS)
