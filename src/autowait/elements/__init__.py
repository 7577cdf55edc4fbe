"""
Element handle kinds. Importing this package registers every built-in kind
with the default registry.
"""

from .base import ACTIVE_CLASS, ENABLED, PRESENT, VISIBLE, BaseElement
from .clickable import ButtonElement, CheckboxElement, ClickableElement, LinkElement, RadioElement
from .dropdown import DropdownElement
from .input import InputElement, TextAreaElement
from .static import DivElement, ImageElement, LabelElement
from .table import TableHeaderElement

__all__ = [
    'ACTIVE_CLASS',
    'PRESENT',
    'VISIBLE',
    'ENABLED',
    'BaseElement',
    'ClickableElement',
    'ButtonElement',
    'LinkElement',
    'CheckboxElement',
    'RadioElement',
    'DropdownElement',
    'InputElement',
    'TextAreaElement',
    'DivElement',
    'ImageElement',
    'LabelElement',
    'TableHeaderElement',
]
