"""
Clickable element kinds
"""

import logging
from typing import Optional

from ..registry import default_registry
from .base import ENABLED, PRESENT, BaseElement

logger = logging.getLogger(__name__)


@default_registry.element('clickable')
class ClickableElement(BaseElement):
    """Anything that can be clicked: waits for visible + enabled, scrolls, then clicks"""

    kind = 'clickable'

    def click(self, timeout: Optional[float] = None):
        raw = self.resolve(ENABLED, timeout)
        self.driver.scroll_into_view(raw)
        self.driver.click(raw)
        logger.debug("Clicked %s", self)


@default_registry.element('button')
class ButtonElement(ClickableElement):
    kind = 'button'


@default_registry.element('link')
class LinkElement(ClickableElement):
    kind = 'link'

    def get_href(self, timeout: Optional[float] = None) -> Optional[str]:
        return self.driver.get_attribute(self.resolve(PRESENT, timeout), 'href')


@default_registry.element('checkbox')
class CheckboxElement(ClickableElement):
    """Checkbox; ``check``/``uncheck`` only click when the state has to change"""

    kind = 'checkbox'

    def is_checked(self, timeout: Optional[float] = None) -> bool:
        return self.driver.is_checked(self.resolve(PRESENT, timeout))

    def check(self, timeout: Optional[float] = None):
        if not self.is_checked(timeout):
            self.click(timeout)

    def uncheck(self, timeout: Optional[float] = None):
        if self.is_checked(timeout):
            self.click(timeout)


@default_registry.element('radio')
class RadioElement(ClickableElement):
    kind = 'radio'

    def is_checked(self, timeout: Optional[float] = None) -> bool:
        return self.driver.is_checked(self.resolve(PRESENT, timeout))

    def select(self, timeout: Optional[float] = None):
        if not self.is_checked(timeout):
            self.click(timeout)
