"""
Hash set backed by an AdaptiveHashMap.
"""

from typing import Any, Iterator, Optional

from .hash_table import AdaptiveHashMap


# Placeholder value stored against every element
_PRESENT = object()


class AdaptiveHashSet:
    """
    A mutable set storing its elements as keys of an AdaptiveHashMap.

    Example:
        s = AdaptiveHashSet()
        s.add('alice')
        s.add('alice')
        s.contains('alice')  # True
        s.size()             # 1
    """

    __slots__ = ('_map',)

    def __init__(self, capacity: Optional[int] = None, threshold: Optional[int] = None):
        self._map = AdaptiveHashMap(capacity, threshold)

    def add(self, elem: Any) -> None:
        """Add elem. Adding an element that is already present is a no-op."""
        self._map.put(elem, _PRESENT)

    def contains(self, elem: Any) -> bool:
        return self._map.contains_key(elem)

    def size(self) -> int:
        return self._map.size()

    def __contains__(self, elem: Any) -> bool:
        return self.contains(elem)

    def __len__(self) -> int:
        return self._map.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._map)

    def __repr__(self) -> str:
        elems = ', '.join(repr(e) for e in self)
        return f'AdaptiveHashSet({{{elems}}})'

    @staticmethod
    def create(*elems) -> 'AdaptiveHashSet':
        """Create an AdaptiveHashSet holding elems."""
        s = AdaptiveHashSet()
        for elem in elems:
            s.add(elem)
        return s
