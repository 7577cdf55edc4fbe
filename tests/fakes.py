"""
Test doubles: a fake clock and an in-memory DOM behind the BrowserDriver interface
"""

import re
from typing import Callable, Dict, List, Optional

from autowait import Locator, Strategy
from autowait.driver import BrowserDriver
from autowait.exceptions import NotFound, StaleReference


class FakeClock:
    """Monotonic clock whose sleep() advances time instantly and fires scheduled callbacks"""

    def __init__(self):
        self.now = 0.0
        self.sleeps: List[float] = []
        self._scheduled: List = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        self.now = round(self.now + seconds, 9)
        due = [item for item in self._scheduled if item[0] <= self.now]
        self._scheduled = [item for item in self._scheduled if item[0] > self.now]
        for _, callback in sorted(due, key=lambda item: item[0]):
            callback()

    def at(self, when: float, callback: Callable[[], None]):
        self._scheduled.append((when, callback))


class FakeNode:
    def __init__(self, tag: str, text: str = '', visible: bool = True, enabled: bool = True, **attrs):
        self.tag = tag
        self.text = text
        self.visible = visible
        self.enabled = enabled
        self.checked = False
        self.value = attrs.pop('value', '')
        self.options: List[Dict[str, str]] = []
        self.selected: Optional[Dict[str, str]] = None
        self.attrs = {name.rstrip('_'): value for name, value in attrs.items()}
        self.children: List['FakeNode'] = []
        self.parent: Optional['FakeNode'] = None
        self.clicks = 0
        self.scrolls = 0

    def add(self, *children: 'FakeNode') -> 'FakeNode':
        for child in children:
            child.parent = self
            self.children.append(child)
        return self

    def remove(self):
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None

    def descendants(self):
        for child in self.children:
            yield child
            yield from child.descendants()

    def __repr__(self):
        return f"FakeNode({self.tag}, {self.attrs})"


_SIMPLE_CSS = re.compile(r'^(?P<tag>[a-z0-9]+)?(?:#(?P<id>[\w-]+))?(?P<classes>(?:\.[\w-]+)*)$')


def _matches(node: FakeNode, locator: Locator) -> bool:
    classes = node.attrs.get('class', '').split()
    if locator.strategy in (Strategy.CSS, Strategy.TAG_NAME):
        match = _SIMPLE_CSS.match(locator.value)
        if not match:
            raise ValueError(f"FakeDriver cannot parse selector {locator.value!r}")
        if match.group('tag') and node.tag != match.group('tag'):
            return False
        if match.group('id') and node.attrs.get('id') != match.group('id'):
            return False
        wanted = [c for c in match.group('classes').split('.') if c]
        return all(c in classes for c in wanted)
    if locator.strategy is Strategy.ID:
        return node.attrs.get('id') == locator.value
    if locator.strategy is Strategy.CLASS_NAME:
        return locator.value in classes
    if locator.strategy is Strategy.NAME:
        return node.attrs.get('name') == locator.value
    if locator.strategy is Strategy.TEXT:
        return node.text == locator.value
    raise ValueError(f"FakeDriver does not support {locator.strategy}")


class FakeDriver(BrowserDriver):
    """BrowserDriver over FakeNode trees; records every action"""

    def __init__(self):
        self.document = FakeNode('html')
        self.ready_state = 'complete'
        self.finds = 0
        self.typed: List[str] = []
        self.scripts: List[str] = []

    def _attached(self, node: FakeNode) -> bool:
        while node.parent is not None:
            node = node.parent
        return node is self.document

    def _live(self, node: FakeNode) -> FakeNode:
        if not self._attached(node):
            raise StaleReference()
        return node

    def find_element(self, locator, root=None):
        for node in self.find_elements(locator, root):
            return node
        raise NotFound(locator)

    def find_elements(self, locator, root=None):
        self.finds += 1
        scope = self._live(root) if root is not None else self.document
        return [node for node in scope.descendants() if _matches(node, locator)]

    def is_attached(self, raw):
        return self._attached(raw)

    def get_attribute(self, raw, name):
        return self._live(raw).attrs.get(name)

    def get_text(self, raw):
        return self._live(raw).text

    def get_value(self, raw):
        return self._live(raw).value

    def get_tag_name(self, raw):
        return self._live(raw).tag

    def get_bounding_box(self, raw):
        self._live(raw)
        return {'x': 10.0, 'y': 20.0, 'width': 100.0, 'height': 30.0}

    def is_displayed(self, raw):
        return self._live(raw).visible

    def is_enabled(self, raw):
        return self._live(raw).enabled

    def is_checked(self, raw):
        return self._live(raw).checked

    def click(self, raw):
        node = self._live(raw)
        node.clicks += 1
        if node.attrs.get('type') in ('checkbox', 'radio'):
            node.checked = not node.checked

    def send_keys(self, raw, text):
        node = self._live(raw)
        node.value += text
        self.typed.append(text)

    def clear(self, raw):
        self._live(raw).value = ''

    def scroll_into_view(self, raw):
        self._live(raw).scrolls += 1

    def select_option(self, raw, index=None, value=None, label=None):
        node = self._live(raw)
        for i, option in enumerate(node.options):
            if (index is not None and i == index) or (value is not None and option['value'] == value) \
                    or (label is not None and option['label'] == label):
                node.selected = option
                node.value = option['value']
                return
        raise NotFound(None, f"No option matching index={index} value={value} label={label}")

    def get_options_text(self, raw):
        return [option['label'] for option in self._live(raw).options]

    def execute_script(self, script, arg=None):
        self.scripts.append(script)
        if script == 'document.readyState':
            return self.ready_state
        return None

