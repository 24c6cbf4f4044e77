"""Ordering utilities for blog and file lists.

Natural ordering compares digit runs by their numeric value, so ``file2``
sorts before ``file10``. StableComparer applies a list of sort keys and falls
back to the items' original order when every key ties.
"""

import re
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple

_RUNS = re.compile(r'(\d+)')

COLLECTION_KEY = "__collection"
PROGRESS_KEY = "__progress"


def natural_sort_key(text: str) -> Tuple[Tuple[int, Any], ...]:
    """Build a sort key from alternating digit and text runs.

    Digit runs compare numerically and before text at the same position;
    text runs compare case-insensitively.

    Args:
        text: String to build the key for

    Returns:
        Tuple usable as a ``sorted()`` key

    Examples:
        >>> sorted(["img12.png", "img3.png"], key=natural_sort_key)
        ['img3.png', 'img12.png']
    """
    key = []
    for run in _RUNS.split(text):
        if not run:
            continue
        if run.isdigit():
            key.append((0, int(run)))
        else:
            key.append((1, run.casefold()))
    return tuple(key)


def natural_compare(a: str, b: str) -> int:
    """Compare two strings in natural order.

    Returns:
        -1, 0 or 1
    """
    key_a = natural_sort_key(a)
    key_b = natural_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortDescription(NamedTuple):
    """One sort key: an attribute name and a direction."""

    property_name: str
    direction: SortDirection = SortDirection.ASCENDING


def _compare_values(a: Any, b: Any) -> int:
    if a is None or b is None:
        return (a is not None) - (b is not None)
    if isinstance(a, str) and isinstance(b, str):
        return natural_compare(a, b)
    try:
        return (a > b) - (a < b)
    except TypeError:
        # Unorderable mix such as int and str: group by type name
        name_a, name_b = type(a).__name__, type(b).__name__
        return (name_a > name_b) - (name_a < name_b)


class StableComparer:
    """Multi-key comparer that keeps the original order for ties.

    Items are compared key by key. When all keys compare equal, the item that
    appeared first in ``items`` comes first, whatever order the sort
    algorithm asks for comparisons in.

    The special property names ``"__collection"`` and ``"__progress"`` are
    resolved through the ``get_collection_name`` and ``get_progress_value``
    callables instead of attribute lookup.

    Example:
        >>> comparer = StableComparer(blogs, [SortDescription("name")])
        >>> ordered = sorted(blogs, key=comparer.key)
    """

    def __init__(
        self,
        items: Sequence[Any],
        sort_descriptions: Sequence[SortDescription],
        get_collection_name: Optional[Callable[[Any], str]] = None,
        get_progress_value: Optional[Callable[[Any], Any]] = None,
    ):
        """Initialize comparer.

        Args:
            items: Items in their original order
            sort_descriptions: Sort keys, most significant first
            get_collection_name: Accessor for the "__collection" key
            get_progress_value: Accessor for the "__progress" key
        """
        self.items = list(items)
        self.sort_descriptions = list(sort_descriptions)
        self.get_collection_name = get_collection_name
        self.get_progress_value = get_progress_value

        # Identity-based so unhashable items work
        self._positions = {}
        for index, item in enumerate(self.items):
            self._positions.setdefault(id(item), index)

    def _value(self, item: Any, property_name: str) -> Any:
        if property_name == COLLECTION_KEY:
            if self.get_collection_name is None:
                raise ValueError(f"Sorting by {COLLECTION_KEY} requires get_collection_name")
            return self.get_collection_name(item)
        if property_name == PROGRESS_KEY:
            if self.get_progress_value is None:
                raise ValueError(f"Sorting by {PROGRESS_KEY} requires get_progress_value")
            return self.get_progress_value(item)
        return getattr(item, property_name, None)

    def _position(self, item: Any) -> int:
        return self._positions.get(id(item), len(self.items))

    def compare(self, a: Any, b: Any) -> int:
        """Compare two items.

        Returns:
            Negative if a sorts first, positive if b sorts first, 0 only
            when a and b are the same item
        """
        for description in self.sort_descriptions:
            result = _compare_values(
                self._value(a, description.property_name),
                self._value(b, description.property_name),
            )
            if result:
                if description.direction is SortDirection.DESCENDING:
                    return -result
                return result

        return self._position(a) - self._position(b)

    @property
    def key(self) -> Callable[[Any], Any]:
        """Key function for ``sorted()`` and ``list.sort()``."""
        return cmp_to_key(self.compare)

    def sort(self, items: Optional[Sequence[Any]] = None) -> List[Any]:
        """Return a sorted copy of ``items`` (defaults to the comparer's items)."""
        return sorted(self.items if items is None else items, key=self.key)
