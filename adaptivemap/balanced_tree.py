"""
Height-balanced (AVL) binary search tree.

Used on its own as a sorted map and as the promoted form of a hash map
bucket once its collision chain grows too long. Keys are compared with
their natural ordering only; hashes are never consulted inside the tree.
Every structural insert rebalances the ancestors on the insertion path, so
lookups and inserts are O(log n) in the worst case.
"""

from typing import Any, Iterator, Tuple, Optional

from .exceptions import InvalidKeyError, InvariantViolation


_NO_BOUND = object()


class TreeNode:
    """A single tree node. Absent children count as height -1."""

    __slots__ = ('key', 'value', 'height', 'left', 'right')

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        self.height = 0
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None

    @property
    def left_height(self) -> int:
        return -1 if self.left is None else self.left.height

    @property
    def right_height(self) -> int:
        return -1 if self.right is None else self.right.height

    @property
    def balance_factor(self) -> int:
        return self.left_height - self.right_height

    def update_height(self) -> None:
        self.height = 1 + max(self.left_height, self.right_height)


def _rotate_left(node: TreeNode) -> TreeNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node

    # demoted node first, the pivot's height depends on it
    node.update_height()
    pivot.update_height()
    return pivot


def _rotate_right(node: TreeNode) -> TreeNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node

    node.update_height()
    pivot.update_height()
    return pivot


def _rebalance(node: TreeNode) -> TreeNode:
    """Restore the AVL property at node, returning the new subtree root."""
    balance = node.balance_factor

    if balance < -1:
        # right-left case
        if node.right.balance_factor > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)

    if balance > 1:
        # left-right case
        if node.left.balance_factor < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)

    return node


class BalancedTree:
    """
    A mutable sorted map backed by an AVL tree.

    Example:
        t = BalancedTree()
        t.insert('b', 2)
        t.insert('a', 1)
        list(t.items())  # [('a', 1), ('b', 2)]
    """

    __slots__ = ('_root', '_count')

    def __init__(self):
        self._root: Optional[TreeNode] = None
        self._count = 0

    def insert(self, key: Any, value: Any) -> bool:
        """
        Insert or overwrite key.

        Returns True if a new node was created, False if an existing key
        had its value replaced. None is rejected with InvalidKeyError.
        """
        if key is None:
            raise InvalidKeyError()
        if self._root is None:
            self._root = TreeNode(key, value)
            self._count = 1
            return True

        self._root, inserted = self._insert(self._root, key, value)
        if inserted:
            self._count += 1
        return inserted

    def _insert(self, node: Optional[TreeNode], key: Any, value: Any) -> Tuple[TreeNode, bool]:
        if node is None:
            return TreeNode(key, value), True

        if key < node.key:
            node.left, inserted = self._insert(node.left, key, value)
        elif key > node.key:
            node.right, inserted = self._insert(node.right, key, value)
        else:
            # Same key, shape is unchanged so there is nothing to rebalance
            node.value = value
            return node, False

        if not inserted:
            return node, False

        node.update_height()
        return _rebalance(node), True

    def _find(self, key: Any) -> Optional[TreeNode]:
        if key is None:
            raise InvalidKeyError()
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def get(self, key: Any, default=None) -> Any:
        """Get the value stored under key, or default if it is absent."""
        node = self._find(key)
        return default if node is None else node.value

    def __getitem__(self, key: Any) -> Any:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._count

    def size(self) -> int:
        return self._count

    def height(self) -> int:
        """Height of the root node, -1 for an empty tree."""
        return -1 if self._root is None else self._root.height

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate over (key, value) pairs in ascending key order."""
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield (node.key, node.value)
            node = node.right

    def keys(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in self.items():
            yield value

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def validate(self) -> None:
        """
        Check ordering, balance and cached heights of every node.

        Raises InvariantViolation describing the first broken node.
        """
        count = self._validate(self._root, _NO_BOUND, _NO_BOUND)
        if count != self._count:
            raise InvariantViolation(f"tree holds {count} nodes but reports {self._count}")

    def _validate(self, node: Optional[TreeNode], low: Any, high: Any) -> int:
        if node is None:
            return 0
        if low is not _NO_BOUND and not low < node.key:
            raise InvariantViolation(f"key {node.key!r} is not greater than {low!r}")
        if high is not _NO_BOUND and not node.key < high:
            raise InvariantViolation(f"key {node.key!r} is not less than {high!r}")

        count = 1 + self._validate(node.left, low, node.key) + self._validate(node.right, node.key, high)

        expected = 1 + max(node.left_height, node.right_height)
        if node.height != expected:
            raise InvariantViolation(
                f"node {node.key!r} caches height {node.height}, expected {expected}")
        if abs(node.balance_factor) > 1:
            raise InvariantViolation(
                f"node {node.key!r} has balance factor {node.balance_factor}")
        return count

    def __repr__(self) -> str:
        items = ', '.join(f'{k!r}: {v!r}' for k, v in self.items())
        return f'BalancedTree({{{items}}})'
