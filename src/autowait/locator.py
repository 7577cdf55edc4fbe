"""
Locator descriptors - immutable descriptions of how to find an element
"""

import json
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .exceptions import ConfigurationError


class Strategy(str, Enum):
    """Selector strategies understood by the driver boundary"""
    CSS = 'css'
    XPATH = 'xpath'
    ID = 'id'
    CLASS_NAME = 'class_name'
    NAME = 'name'
    TAG_NAME = 'tag_name'
    LINK_TEXT = 'link_text'
    PARTIAL_LINK_TEXT = 'partial_link_text'
    TEXT = 'text'


@dataclass(frozen=True)
class Locator:
    """Strategy + selector text, optionally scoped under a parent locator"""
    strategy: Strategy
    value: str
    parent: Optional['Locator'] = None

    def __post_init__(self):
        try:
            strategy = Strategy(self.strategy)
        except ValueError:
            raise ConfigurationError(f"Unknown selector strategy: {self.strategy!r}") from None
        object.__setattr__(self, 'strategy', strategy)

        if not isinstance(self.value, str) or not self.value.strip():
            raise ConfigurationError(f"Locator value must be a non-empty string, got {self.value!r}")
        if strategy is Strategy.CLASS_NAME and len(self.value.split()) > 1:
            raise ConfigurationError(f"Compound class names are not supported: {self.value!r}")
        if self.parent is not None and not isinstance(self.parent, Locator):
            raise ConfigurationError(f"Parent must be a Locator, got {type(self.parent).__name__}")

    # Convenience constructors

    @classmethod
    def css(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.CSS, value, parent)

    @classmethod
    def xpath(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.XPATH, value, parent)

    @classmethod
    def id(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.ID, value, parent)

    @classmethod
    def class_name(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.CLASS_NAME, value, parent)

    @classmethod
    def name(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.NAME, value, parent)

    @classmethod
    def tag_name(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.TAG_NAME, value, parent)

    @classmethod
    def link_text(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.LINK_TEXT, value, parent)

    @classmethod
    def partial_link_text(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.PARTIAL_LINK_TEXT, value, parent)

    @classmethod
    def text(cls, value: str, parent: Optional['Locator'] = None) -> 'Locator':
        return cls(Strategy.TEXT, value, parent)

    def within(self, parent: Union['Locator', str, None]) -> 'Locator':
        """
        Scope this locator under a parent.

        An existing parent chain is kept and the new parent becomes the outermost
        ancestor, so ``a.within(b).within(c)`` resolves c, then b inside c, then a inside b.
        """
        if parent is None:
            return self
        parent = as_locator(parent)
        if self.parent is None:
            return replace(self, parent=parent)
        return replace(self, parent=self.parent.within(parent))

    def chain(self) -> Tuple['Locator', ...]:
        """Ancestry from the outermost parent down to this locator"""
        links = []
        current = self
        while current is not None:
            links.append(current)
            current = current.parent
        return tuple(reversed(links))

    def to_selector(self) -> str:
        """Translate this locator (without its parent) into a Playwright selector"""
        quoted = _css_string(self.value)
        if self.strategy is Strategy.CSS:
            return f"css={self.value}"
        if self.strategy is Strategy.XPATH:
            return f"xpath={self.value}"
        if self.strategy is Strategy.ID:
            return f"css=[id={quoted}]"
        if self.strategy is Strategy.CLASS_NAME:
            return f"css=[class~={quoted}]"
        if self.strategy is Strategy.NAME:
            return f"css=[name={quoted}]"
        if self.strategy is Strategy.TAG_NAME:
            return f"css={self.value}"
        if self.strategy is Strategy.LINK_TEXT:
            return f"css=a:text-is({quoted})"
        if self.strategy is Strategy.PARTIAL_LINK_TEXT:
            return f"css=a:has-text({quoted})"
        return f"text={json.dumps(self.value, ensure_ascii=False)}"

    def describe(self) -> str:
        return ' >> '.join(f"{link.strategy.value}={link.value!r}" for link in self.chain())

    def __str__(self) -> str:
        return self.describe()


def as_locator(value: Union[Locator, str]) -> Locator:
    """Accept a Locator or a bare CSS selector string"""
    if isinstance(value, Locator):
        return value
    if isinstance(value, str):
        return Locator.css(value)
    raise ConfigurationError(f"Expected a Locator or CSS selector string, got {type(value).__name__}")


def _css_string(value: str) -> str:
    """Quote ``value`` as a CSS string token (CSS escapes, not JSON ones)"""
    escaped = []
    for char in value:
        if char in '\\"':
            escaped.append('\\' + char)
        elif char < ' ' or char == '\x7f':
            # Hex escape; the trailing space ends it so a following hex digit is not absorbed
            escaped.append(f"\\{ord(char):x} ")
        else:
            escaped.append(char)
    return '"' + ''.join(escaped) + '"'
