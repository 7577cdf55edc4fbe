"""
Table element kinds
"""

from ..exceptions import ConfigurationError
from ..registry import default_registry
from .base import BaseElement


@default_registry.element('table_header')
class TableHeaderElement(BaseElement):
    """
    One header cell of a table, as returned by ``find_elements``/``resolve_many``.

    Built from a raw reference plus its zero-based position among the matches.
    """

    kind = 'table_header'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.index is None:
            raise ConfigurationError("Table headers are built from a multi-element lookup and need an index")

    def get_column_index(self) -> int:
        """One-based column index"""
        return self.index + 1
