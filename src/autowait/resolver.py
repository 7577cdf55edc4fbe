"""
Resolution dispatcher - builds typed element handles from locators
"""

import logging
from typing import Any, List, Optional, Union

from .elements import BaseElement
from .locator import Locator, as_locator
from .registry import ElementRegistry, default_registry
from .wait import WaitSession

logger = logging.getLogger(__name__)


class ElementResolver:
    """
    Turns (kind, locator) into element handles for one WaitSession.

    ``resolve_one`` is lazy and never touches the DOM. ``resolve_many`` is the one
    eager path: counting matches is inherently a point-in-time question, so it
    snapshots the current matches and returns one handle per node.
    """

    def __init__(self, session: WaitSession, registry: Optional[ElementRegistry] = None):
        self.session = session
        self.registry = registry or default_registry

    def resolve_one(self, kind: Union[str, type], locator: Union[Locator, str],
                    parent: Union[Locator, str, None] = None, timeout: Optional[float] = None) -> Any:
        """
        Lazy handle of ``kind`` bound to ``locator``.

        Args:
            kind: registered kind tag (e.g. 'button') or a registered handle class
            locator: Locator or CSS selector string
            parent: optional parent scope, applied on top of any parent the locator already has
            timeout: per-handle timeout for implicit waits; None uses the session default

        Raises:
            ConfigurationError: ``kind`` is not registered
        """
        locator = as_locator(locator).within(parent)
        return self.registry.create(kind, locator=locator, session=self.session, timeout=timeout)

    def resolve_many(self, kind: Union[str, type], locator: Union[Locator, str],
                     parent: Union[Locator, str, None] = None, timeout: Optional[float] = None) -> List[Any]:
        """
        Snapshot of every element currently matching ``locator``.

        When the locator has a parent chain, the parents are waited for first (same
        deadline rules as any interaction); the final lookup is point-in-time and an
        empty match returns an empty list.
        """
        locator = as_locator(locator).within(parent)
        kind = self.registry.kind_of(kind)

        root = None
        if locator.parent is not None:
            scope = BaseElement(locator=locator.parent, session=self.session, timeout=timeout)
            root = scope.resolve(timeout=timeout)

        raws = self.session.driver.find_elements(locator, root)
        logger.debug("resolve_many(%r, %s): %d matches", kind, locator, len(raws))
        return [
            self.registry.create(kind, locator=locator, session=self.session, raw=raw, index=i, timeout=timeout)
            for i, raw in enumerate(raws)
        ]
