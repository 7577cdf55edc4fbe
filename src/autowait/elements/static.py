"""
Read-only element kinds
"""

from typing import Optional

from ..registry import default_registry
from .base import PRESENT, BaseElement


@default_registry.element('div')
class DivElement(BaseElement):
    kind = 'div'


@default_registry.element('label')
class LabelElement(BaseElement):
    kind = 'label'


@default_registry.element('image')
class ImageElement(BaseElement):
    """An <img>; exposes its source and alt text"""

    kind = 'image'

    def get_src(self, timeout: Optional[float] = None) -> Optional[str]:
        return self.driver.get_attribute(self.resolve(PRESENT, timeout), 'src')

    def get_alt(self, timeout: Optional[float] = None) -> Optional[str]:
        return self.driver.get_attribute(self.resolve(PRESENT, timeout), 'alt')
