"""
Singly linked collision chain, the initial form of every hash map bucket.
"""

from typing import Any, Iterable, Iterator, Tuple, Optional

from .balanced_tree import BalancedTree


class ChainNode:
    """A key-value entry in a collision chain."""

    __slots__ = ('key', 'value', 'next')

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        self.next: Optional['ChainNode'] = None


class CollisionChain:
    """
    Unordered list of entries whose keys landed in the same bucket.

    Entries keep insertion order and keys are unique: putting an existing
    key replaces its value instead of appending. Keys are matched with
    ==, never by identity.
    """

    __slots__ = ('_head', '_tail', '_count')

    def __init__(self):
        self._head: Optional[ChainNode] = None
        self._tail: Optional[ChainNode] = None
        self._count = 0

    def put(self, key: Any, value: Any) -> bool:
        """Insert or overwrite key. Returns True if a new entry was appended."""
        node = self._head
        while node is not None:
            if node.key == key:
                node.value = value
                return False
            node = node.next

        new_node = ChainNode(key, value)
        if self._head is None:
            self._head = new_node
        else:
            self._tail.next = new_node
        self._tail = new_node
        self._count += 1
        return True

    def get(self, key: Any, default=None) -> Any:
        """Get the value of the first entry equal to key, or default."""
        node = self._head
        while node is not None:
            if node.key == key:
                return node.value
            node = node.next
        return default

    def size(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate over (key, value) pairs in insertion order."""
        node = self._head
        while node is not None:
            yield (node.key, node.value)
            node = node.next

    def drain_to_tree(self, extra: Iterable[Tuple[Any, Any]] = ()) -> BalancedTree:
        """
        Move every entry, in chain order, into a new BalancedTree.

        Pairs in extra are inserted after the chain's own entries. The chain
        is emptied only once the tree is complete, so a comparison error
        leaves it untouched. Costs O(n log n) in the chain length.
        """
        tree = BalancedTree()
        for key, value in self.items():
            tree.insert(key, value)
        for key, value in extra:
            tree.insert(key, value)

        self._head = None
        self._tail = None
        self._count = 0
        return tree

    def __repr__(self) -> str:
        items = ' -> '.join(f'{k!r}: {v!r}' for k, v in self.items())
        return f'CollisionChain({items})'
