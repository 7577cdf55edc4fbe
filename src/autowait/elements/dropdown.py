"""
Dropdown (<select>) element
"""

import logging
from typing import List, Optional

from ..registry import default_registry
from .base import ENABLED, PRESENT
from .clickable import ClickableElement

logger = logging.getLogger(__name__)


@default_registry.element('dropdown')
class DropdownElement(ClickableElement):
    """A <select> element"""

    kind = 'dropdown'

    def get_options_text(self, timeout: Optional[float] = None) -> List[str]:
        return self.driver.get_options_text(self.resolve(PRESENT, timeout))

    def get_value(self, timeout: Optional[float] = None) -> str:
        return self.driver.get_value(self.resolve(PRESENT, timeout))

    def select_by_index(self, index: int, timeout: Optional[float] = None):
        self.driver.select_option(self.resolve(ENABLED, timeout), index=index)

    def select_by_value(self, value: str, timeout: Optional[float] = None):
        self.driver.select_option(self.resolve(ENABLED, timeout), value=value)

    def select_by_visible_text(self, text: Optional[str], timeout: Optional[float] = None):
        """
        Select the option whose visible text is ``text``.

        A blank value leaves the field alone, so data-driven tests can pass empty
        columns straight through without guarding every call.
        """
        if text is None or not text.strip():
            logger.debug("Blank option text for %s, leaving selection unchanged", self)
            return
        self.driver.select_option(self.resolve(ENABLED, timeout), label=text)
