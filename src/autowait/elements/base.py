"""
Base element handle - a lazy reference that re-resolves its locator on every access
"""

import logging
from typing import Any, Dict, FrozenSet, List, Optional, Union

from ..driver import BrowserDriver
from ..exceptions import ConfigurationError, NotFound, StaleReference
from ..locator import Locator, as_locator
from ..registry import ElementRegistry, default_registry
from ..wait import CLASS_ATTRIBUTE, WaitSession, class_tokens

logger = logging.getLogger(__name__)

ACTIVE_CLASS = 'active'

# Readiness levels an interaction can wait for
PRESENT = 'present'
VISIBLE = 'visible'
ENABLED = 'enabled'


@default_registry.element('element')
class BaseElement:
    """
    Lazy handle bound to a Locator.

    Nothing is looked up at construction. Every query or interaction resolves the
    locator again (parent chain first), so a DOM node re-rendered between two calls
    is picked up transparently. Interactions wait for the readiness they need
    (present, visible, enabled) before acting.

    Handles built from a raw reference (the results of ``find_elements`` /
    ``resolve_many``) are snapshots: they act on that node and raise StaleReference
    once it leaves the DOM.
    """

    kind = 'element'

    def __init__(self, locator: Union[Locator, str, None] = None, session: Optional[WaitSession] = None,
                 raw: Any = None, index: Optional[int] = None, timeout: Optional[float] = None,
                 scope: Optional['BaseElement'] = None, registry: Optional[ElementRegistry] = None):
        if session is None:
            raise ConfigurationError(f"{type(self).__name__} needs a WaitSession")
        if locator is None and raw is None:
            raise ConfigurationError(f"{type(self).__name__} needs a locator or a raw element reference")
        self.locator = as_locator(locator) if locator is not None else None
        self.session = session
        self.index = index
        self.timeout = timeout
        self.scope = scope
        self.registry = registry or default_registry
        self._raw = raw
        self._snapshot = raw is not None

    @property
    def driver(self) -> BrowserDriver:
        return self.session.driver

    @property
    def raw(self) -> Any:
        """Reference from the most recent resolution; for diagnostics only, never reuse it"""
        return self._raw

    @property
    def is_snapshot(self) -> bool:
        return self._snapshot

    # Resolution

    def locate(self) -> Any:
        """
        Point-in-time resolution without waiting.

        Raises:
            NotFound: the locator (or one of its parents) matches nothing right now
            StaleReference: a snapshot handle's node has been detached
        """
        if self._snapshot:
            if not self.driver.is_attached(self._raw):
                raise StaleReference(self.locator)
            return self._raw

        root = self.scope.locate() if self.scope is not None else None
        for link in self.locator.chain():
            root = self.driver.find_element(link, root)
        self._raw = root
        return root

    def resolve(self, readiness: str = PRESENT, timeout: Optional[float] = None) -> Any:
        """Poll until the element reaches ``readiness`` and return a fresh raw reference"""
        def ready():
            raw = self.locate()
            if readiness in (VISIBLE, ENABLED) and not self.driver.is_displayed(raw):
                return None
            if readiness == ENABLED and not self.driver.is_enabled(raw):
                return None
            return raw

        return self.session.until(ready, self._timeout(timeout), f"{self} to be {readiness}")

    def _timeout(self, timeout: Optional[float]) -> Optional[float]:
        return timeout if timeout is not None else self.timeout

    # Queries

    def is_present(self) -> bool:
        """Whether the element is in the DOM right now (no wait)"""
        try:
            self.locate()
        except (NotFound, StaleReference):
            return False
        return True

    def is_displayed(self) -> bool:
        """Whether the element is visible right now (no wait); absent elements are not displayed"""
        try:
            return self.driver.is_displayed(self.locate())
        except (NotFound, StaleReference):
            return False

    def is_enabled(self, timeout: Optional[float] = None) -> bool:
        return self.driver.is_enabled(self.resolve(PRESENT, timeout))

    def get_attribute(self, name: str, timeout: Optional[float] = None) -> Optional[str]:
        return self.driver.get_attribute(self.resolve(PRESENT, timeout), name)

    def get_text(self, timeout: Optional[float] = None) -> str:
        return self.driver.get_text(self.resolve(PRESENT, timeout))

    def get_tag_name(self, timeout: Optional[float] = None) -> str:
        return self.driver.get_tag_name(self.resolve(PRESENT, timeout))

    def get_bounding_box(self, timeout: Optional[float] = None) -> Optional[Dict[str, float]]:
        return self.driver.get_bounding_box(self.resolve(PRESENT, timeout))

    def get_location(self, timeout: Optional[float] = None) -> Optional[Dict[str, float]]:
        box = self.get_bounding_box(timeout)
        return {'x': box['x'], 'y': box['y']} if box else None

    def get_size(self, timeout: Optional[float] = None) -> Optional[Dict[str, float]]:
        box = self.get_bounding_box(timeout)
        return {'width': box['width'], 'height': box['height']} if box else None

    def get_classes(self, timeout: Optional[float] = None) -> FrozenSet[str]:
        return class_tokens(self.get_attribute(CLASS_ATTRIBUTE, timeout))

    def has_class(self, class_name: str, timeout: Optional[float] = None) -> bool:
        """Exact token match against the class attribute: 'inactive' does not satisfy 'active'"""
        return class_name in self.get_classes(timeout)

    def is_active(self, timeout: Optional[float] = None) -> bool:
        return self.has_class(ACTIVE_CLASS, timeout)

    # Interactions

    def scroll_into_view(self, timeout: Optional[float] = None) -> Any:
        """Scroll the element into the viewport and return the re-resolved raw reference"""
        def scrolled():
            raw = self.locate()
            if not self.driver.is_displayed(raw):
                return None
            self.driver.scroll_into_view(raw)
            return self.locate()

        return self.session.until(scrolled, self._timeout(timeout), f"{self} to scroll into view")

    # Children

    def find_element(self, kind: Union[str, type], locator: Union[Locator, str],
                     timeout: Optional[float] = None) -> 'BaseElement':
        """Lazy handle for a descendant of this element"""
        locator = as_locator(locator)
        if self._snapshot:
            return self.registry.create(kind, locator=locator, session=self.session,
                                        timeout=self._timeout(timeout), scope=self)
        return self.registry.create(kind, locator=locator.within(self.locator), session=self.session,
                                    timeout=self._timeout(timeout), scope=self.scope)

    def find_elements(self, kind: Union[str, type], locator: Union[Locator, str],
                      timeout: Optional[float] = None) -> List['BaseElement']:
        """Snapshot of the descendants matching ``locator`` once this element is present"""
        locator = as_locator(locator)
        kind = self.registry.kind_of(kind)
        root = self.resolve(PRESENT, timeout)
        raws = self.driver.find_elements(locator, root)
        logger.debug("%s: %d matches for %s", self, len(raws), locator)
        child_locator = locator if self._snapshot else locator.within(self.locator)
        return [
            self.registry.create(kind, locator=child_locator, session=self.session, raw=raw, index=i,
                                 timeout=self._timeout(timeout))
            for i, raw in enumerate(raws)
        ]

    def __repr__(self) -> str:
        target = self.locator.describe() if self.locator is not None else 'raw element'
        if self._snapshot and self.index is not None:
            target += f" [{self.index}]"
        return f"{type(self).__name__}({target})"
