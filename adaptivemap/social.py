"""
Social graph registry built on AdaptiveHashMap and AdaptiveHashSet.

Each registered user maps to the set of their friends' names.
"""

import logging
from typing import Iterator, Optional

from .hash_set import AdaptiveHashSet
from .hash_table import AdaptiveHashMap

logger = logging.getLogger(__name__)


UNBOUNDED = -1

DEFAULT_MAX_CAPACITY = 100


class SocialNetwork:
    """
    Registry of users and the friendships between them.

    A bounded network stops accepting new users once it holds max_capacity
    of them; pass UNBOUNDED (the default) to lift the limit.
    """

    def __init__(self, max_capacity: int = UNBOUNDED):
        self._users = AdaptiveHashMap()
        self._max_capacity = max_capacity

    def register_user(self, name: str) -> bool:
        """
        Register name. Returns True if name is registered afterwards.

        Registering an existing user keeps their friends.
        """
        if self._users.contains_key(name):
            return True

        if self.is_full():
            logger.warning("Cannot register %r: network is full (%d users)", name, self.size())
            return False

        self._users.put(name, AdaptiveHashSet())
        logger.info("Registered user %r", name)
        return True

    def become_friends(self, name1: str, name2: str) -> bool:
        """Record a friendship. Returns False if either user is unknown."""
        friends1 = self._users.get(name1)
        friends2 = self._users.get(name2)

        if friends1 is None or friends2 is None:
            return False

        friends1.add(name2)
        friends2.add(name1)
        return True

    def are_they_friends(self, name1: str, name2: str) -> bool:
        friends1 = self._users.get(name1)
        friends2 = self._users.get(name2)

        return ((friends1 is not None and friends1.contains(name2))
                or (friends2 is not None and friends2.contains(name1)))

    def friends_of(self, name: str) -> Optional[Iterator[str]]:
        """Iterate over the friends of name, or None if name is unknown."""
        friends = self._users.get(name)
        return None if friends is None else iter(friends)

    def is_bounded(self) -> bool:
        return self._max_capacity != UNBOUNDED

    def is_full(self) -> bool:
        return self.is_bounded() and self.size() >= self._max_capacity

    def size(self) -> int:
        return self._users.size()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, name: str) -> bool:
        return self._users.contains_key(name)
