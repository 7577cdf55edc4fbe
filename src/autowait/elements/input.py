"""
Typable element kinds
"""

from typing import Optional

from ..registry import default_registry
from .base import ENABLED, PRESENT
from .clickable import ClickableElement


@default_registry.element('input')
class InputElement(ClickableElement):
    """Text input that can be clicked and typed into"""

    kind = 'input'

    def send_keys(self, *keys: str, timeout: Optional[float] = None):
        """Type the given text/key sequences once the input is visible and enabled"""
        self.driver.send_keys(self.resolve(ENABLED, timeout), ''.join(keys))

    def get_value(self, timeout: Optional[float] = None) -> str:
        return self.driver.get_value(self.resolve(PRESENT, timeout))

    def clear(self, timeout: Optional[float] = None):
        self.driver.clear(self.resolve(ENABLED, timeout))

    def clear_and_send_keys(self, text: Optional[str], timeout: Optional[float] = None):
        """
        Clear the field, then type ``text``.

        None or '' only clears the field. Whitespace is typed as-is.
        """
        self.clear(timeout)
        if text:
            self.send_keys(text, timeout=timeout)


@default_registry.element('textarea')
class TextAreaElement(InputElement):
    kind = 'textarea'
