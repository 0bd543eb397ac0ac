"""
adaptivemap - hash map and set with adaptive collision resolution.

Buckets begin as linked collision chains and are promoted to AVL trees once
they hold more than a configurable number of entries.
"""

from .balanced_tree import BalancedTree
from .collision_chain import CollisionChain
from .exceptions import (
    AdaptiveMapError,
    InvalidCapacityError,
    InvalidKeyError,
    InvalidThresholdError,
    InvariantViolation,
)
from .hash_set import AdaptiveHashSet
from .hash_table import AdaptiveHashMap, BucketKind, bucket_hash
from .social import SocialNetwork

__version__ = "1.0.0"

__all__ = [
    'AdaptiveHashMap',
    'AdaptiveHashSet',
    'AdaptiveMapError',
    'BalancedTree',
    'BucketKind',
    'CollisionChain',
    'InvalidCapacityError',
    'InvalidKeyError',
    'InvalidThresholdError',
    'InvariantViolation',
    'SocialNetwork',
    'bucket_hash',
]
