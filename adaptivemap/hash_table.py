"""
Hash map with adaptive collision resolution.

The map owns a fixed number of buckets. A bucket starts out as a
CollisionChain on its first insert and is promoted, once and for good, to
a BalancedTree as soon as its chain holds more entries than the promotion
threshold. Hash clustering therefore degrades a lookup to O(log n) at
worst instead of O(n).

The bucket array never grows and entries are never removed.
"""

import enum
import logging
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union

from . import config
from .balanced_tree import BalancedTree
from .collision_chain import CollisionChain
from .exceptions import InvalidCapacityError, InvalidKeyError, InvalidThresholdError

logger = logging.getLogger(__name__)


_WORD_MASK = (1 << 64) - 1
_SIGN_BIT = 1 << 63


def bucket_hash(key: Any, capacity: int) -> int:
    """
    Map key onto a bucket index in ``range(capacity)``.

    hash(key) is taken as a 64-bit two's-complement word, its upper bits are
    folded into the lower ones (h ^ (h >>> 16)), and the absolute value of
    the signed result is reduced modulo the full capacity.
    """
    h = hash(key) & _WORD_MASK
    h ^= h >> 16
    if h & _SIGN_BIT:
        h -= 1 << 64
    return abs(h) % capacity


class BucketKind(enum.Enum):
    CHAIN = 'chain'
    TREE = 'tree'


class Bucket:
    """One occupied slot of the bucket array, tagged with its structure kind."""

    __slots__ = ('kind', 'store')

    def __init__(self, kind: BucketKind, store: Union[CollisionChain, BalancedTree]):
        self.kind = kind
        self.store = store

    def __len__(self) -> int:
        return len(self.store)


class AdaptiveHashMap:
    """
    A mutable hash map whose crowded buckets turn into AVL trees.

    Keys must be hashable, not None, and comparable with each other once
    they share a promoted bucket.

    Example:
        m = AdaptiveHashMap(capacity=16, threshold=4)
        m.put('alice', 1)
        m.get('alice')         # 1
        m.contains_key('bob')  # False
    """

    __slots__ = ('_buckets', '_capacity', '_threshold', '_count')

    def __init__(self, capacity: Optional[int] = None, threshold: Optional[int] = None):
        if capacity is None:
            capacity = config.DEFAULT_BUCKET_CAPACITY
        if threshold is None:
            threshold = config.DEFAULT_TREE_THRESHOLD

        if capacity <= 1:
            raise InvalidCapacityError(capacity)
        if threshold < 1:
            raise InvalidThresholdError(threshold)

        self._capacity = capacity
        self._threshold = threshold
        self._buckets: List[Optional[Bucket]] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def threshold(self) -> int:
        return self._threshold

    def bucket_index(self, key: Any) -> int:
        """Index of the bucket that holds (or would hold) key."""
        if key is None:
            raise InvalidKeyError()
        return bucket_hash(key, self._capacity)

    def bucket_kind(self, index: int) -> Optional[BucketKind]:
        """Structure kind of the bucket at index, or None if it is empty."""
        bucket = self._buckets[index]
        return None if bucket is None else bucket.kind

    def promoted_buckets(self) -> List[int]:
        """Indices of all buckets that have been promoted to trees."""
        return [i for i, bucket in enumerate(self._buckets)
                if bucket is not None and bucket.kind is BucketKind.TREE]

    def put(self, key: Any, value: Any) -> None:
        """Associate key with value, replacing any previous value."""
        idx = self.bucket_index(key)
        bucket = self._buckets[idx]

        if bucket is None:
            chain = CollisionChain()
            chain.put(key, value)
            self._buckets[idx] = Bucket(BucketKind.CHAIN, chain)
            self._count += 1
            return

        if bucket.kind is BucketKind.CHAIN:
            chain = bucket.store
            if len(chain) >= self._threshold and chain.get(key, _NOT_FOUND) is _NOT_FOUND:
                # the new key would push the chain past the threshold
                self._promote(idx, bucket, key, value)
                inserted = True
            else:
                inserted = chain.put(key, value)
        elif bucket.kind is BucketKind.TREE:
            inserted = bucket.store.insert(key, value)
        else:
            raise AssertionError(f"unknown bucket kind {bucket.kind!r}")

        if inserted:
            self._count += 1

    def _promote(self, idx: int, bucket: Bucket, key: Any, value: Any) -> None:
        # A key that cannot be ordered against the chain raises here and
        # leaves the bucket as it was.
        tree = bucket.store.drain_to_tree(extra=[(key, value)])
        bucket.store = tree
        bucket.kind = BucketKind.TREE
        logger.debug("Promoted bucket %d to a balanced tree (%d entries)", idx, len(tree))

    def _lookup(self, key: Any, not_found: Any) -> Any:
        bucket = self._buckets[self.bucket_index(key)]
        if bucket is None:
            return not_found
        # chains and trees share the get(key, default) signature
        return bucket.store.get(key, not_found)

    def get(self, key: Any, default=None) -> Any:
        """Get the value associated with key, or default if not present."""
        result = self._lookup(key, _NOT_FOUND)
        return default if result is _NOT_FOUND else result

    def contains_key(self, key: Any) -> bool:
        """Check whether key is present, even if its value is None."""
        return self._lookup(key, _NOT_FOUND) is not _NOT_FOUND

    def size(self) -> int:
        """Number of distinct keys stored."""
        return self._count

    def update(self, other: Mapping) -> None:
        """Put every (key, value) pair of other into this map."""
        for key, value in other.items():
            self.put(key, value)

    def __getitem__(self, key: Any) -> Any:
        """Get item using bracket notation. Raises KeyError if not found."""
        result = self._lookup(key, _NOT_FOUND)
        if result is _NOT_FOUND:
            raise KeyError(key)
        return result

    def __setitem__(self, key: Any, value: Any) -> None:
        self.put(key, value)

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __len__(self) -> int:
        return self._count

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """
        Iterate over (key, value) pairs.

        Buckets are visited in index order; chains yield in insertion order,
        trees in key order.
        """
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket.store.items()

    def keys(self) -> Iterator[Any]:
        return iter(self)

    def values(self) -> Iterator[Any]:
        for _, value in self.items():
            yield value

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def __repr__(self) -> str:
        items = ', '.join(f'{k!r}: {v!r}' for k, v in self.items())
        return f'AdaptiveHashMap({{{items}}})'

    def __eq__(self, other) -> bool:
        """Two maps are equal when they hold the same keys and values."""
        if not isinstance(other, AdaptiveHashMap):
            return NotImplemented

        if len(self) != len(other):
            return False

        for key, val in self.items():
            if other.get(key, _NOT_FOUND) != val:
                return False
        return True

    @staticmethod
    def create(**kwargs) -> 'AdaptiveHashMap':
        """Create an AdaptiveHashMap from keyword arguments."""
        m = AdaptiveHashMap()
        m.update(kwargs)
        return m

    @staticmethod
    def from_dict(d: Mapping, capacity: Optional[int] = None,
                  threshold: Optional[int] = None) -> 'AdaptiveHashMap':
        """Create an AdaptiveHashMap holding the contents of d."""
        m = AdaptiveHashMap(capacity, threshold)
        m.update(d)
        return m


# Sentinel value for "not found"
_NOT_FOUND = object()
