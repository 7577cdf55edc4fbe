"""
Browser session - wires a Playwright page to the wait engine and element resolver
"""

import logging
import traceback
from types import TracebackType
from typing import Any, List, Optional, Type, Union

from playwright.sync_api import Page, sync_playwright

from .config import WaitSettings
from .driver import PlaywrightDriver
from .locator import Locator
from .registry import ElementRegistry
from .resolver import ElementResolver
from .wait import WaitSession

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    One browser tab plus everything that waits on it.

    Each session owns its own WaitSession (and so its own poller cache); nothing is
    shared between sessions, so parallel test workers each create their own.
    """

    def __init__(self, page: Page, settings: Optional[WaitSettings] = None,
                 registry: Optional[ElementRegistry] = None, action_timeout_ms: int = 5000):
        self.settings = settings or WaitSettings.from_env()
        self.page = page
        self.driver = PlaywrightDriver(page, action_timeout_ms=action_timeout_ms)
        self.wait = WaitSession(self.driver, self.settings)
        self.resolver = ElementResolver(self.wait, registry)

        # Set by launch() when this session owns the browser
        self._playwright = None
        self._browser = None

    @classmethod
    def launch(cls, headless: bool = True, slow_mo: int = 0, settings: Optional[WaitSettings] = None,
               registry: Optional[ElementRegistry] = None) -> 'BrowserSession':
        """Start Playwright, launch Chromium and open a fresh page"""
        # Bad AUTOWAIT_* values must fail before a browser process exists
        settings = settings or WaitSettings.from_env()
        playwright = sync_playwright().start()
        try:
            browser = playwright.chromium.launch(headless=headless, slow_mo=slow_mo)
            page = browser.new_page()
            session = cls(page, settings=settings, registry=registry)
        except Exception:
            playwright.stop()
            raise

        session._playwright = playwright
        session._browser = browser
        logger.debug("Launched chromium (headless=%s, slow_mo=%s)", headless, slow_mo)
        return session

    def goto(self, url: str, wait_for_load: bool = True, timeout: Optional[float] = None):
        """Navigate and, by default, wait for document.readyState == 'complete'"""
        logger.debug("Navigating to %s", url)
        self.page.goto(url)
        if wait_for_load:
            self.wait.wait_until_page_is_loaded(timeout)

    def element(self, kind: Union[str, type], locator: Union[Locator, str],
                parent: Union[Locator, str, None] = None, timeout: Optional[float] = None) -> Any:
        return self.resolver.resolve_one(kind, locator, parent=parent, timeout=timeout)

    def elements(self, kind: Union[str, type], locator: Union[Locator, str],
                 parent: Union[Locator, str, None] = None, timeout: Optional[float] = None) -> List[Any]:
        return self.resolver.resolve_many(kind, locator, parent=parent, timeout=timeout)

    def close(self):
        """Release the poller cache and, if this session launched it, the browser"""
        self.wait.close()
        if self._browser is not None:
            try:
                self._browser.close()
            except Exception as e:
                logger.warning("Failed to close browser: %s", e)
            self._browser = None
        if self._playwright is not None:
            try:
                self._playwright.stop()
            except Exception as e:
                logger.warning("Failed to stop playwright: %s", e)
            self._playwright = None

    def __enter__(self) -> 'BrowserSession':
        return self

    def __exit__(self, exc_type: Optional[Type[BaseException]], exc_value: Optional[BaseException],
                 traceback_obj: Optional[TracebackType]):
        if exc_type is not None:
            logger.error("Unhandled exception in browser session -> %s",
                         ''.join(traceback.format_exception(exc_type, exc_value, traceback_obj)))
        self.close()
