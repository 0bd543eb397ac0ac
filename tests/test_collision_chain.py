"""Unit tests for CollisionChain."""

import pytest

from adaptivemap import BalancedTree, CollisionChain

from helpers import CollidingKey


class TestCollisionChainBasics:
    """Test insert, overwrite and lookup on a chain."""

    def test_empty_chain(self):
        chain = CollisionChain()
        assert len(chain) == 0
        assert chain.size() == 0
        assert chain.get("a") is None
        assert list(chain.items()) == []

    def test_put_appends_in_order(self):
        """Test new keys are appended at the tail."""
        chain = CollisionChain()
        for key in ["c", "a", "b"]:
            assert chain.put(key, key.upper()) is True

        assert chain.size() == 3
        assert list(chain.items()) == [("c", "C"), ("a", "A"), ("b", "B")]

    def test_put_existing_key_overwrites(self):
        """Test a duplicate key replaces the value in place."""
        chain = CollisionChain()
        chain.put("a", 1)
        chain.put("b", 2)

        assert chain.put("a", 10) is False
        assert chain.size() == 2
        assert chain.get("a") == 10
        assert list(chain.items()) == [("a", 10), ("b", 2)]

    def test_get_default(self):
        chain = CollisionChain()
        chain.put("a", 1)
        assert chain.get("z", "default") == "default"

    def test_keys_matched_by_value_not_identity(self):
        """Test distinct but equal key objects are treated as one key."""
        chain = CollisionChain()
        chain.put(CollidingKey(7), "first")

        assert chain.get(CollidingKey(7)) == "first"
        assert chain.put(CollidingKey(7), "second") is False
        assert chain.size() == 1
        assert chain.get(CollidingKey(7)) == "second"


class TestCollisionChainDrain:
    """Test conversion of a chain into a balanced tree."""

    def test_drain_to_tree(self):
        """Test every entry moves into the tree."""
        chain = CollisionChain()
        for i in [5, 3, 8, 1, 4]:
            chain.put(i, str(i))

        tree = chain.drain_to_tree()

        assert isinstance(tree, BalancedTree)
        assert len(tree) == 5
        assert list(tree.items()) == [(1, "1"), (3, "3"), (4, "4"), (5, "5"), (8, "8")]
        tree.validate()

    def test_drain_empties_chain(self):
        chain = CollisionChain()
        chain.put("a", 1)
        chain.drain_to_tree()

        assert chain.size() == 0
        assert chain.get("a") is None

    def test_drain_empty_chain(self):
        tree = CollisionChain().drain_to_tree()
        assert len(tree) == 0
        assert tree.height() == -1

    def test_drain_with_extra_entries(self):
        """Test extra pairs land in the tree after the chain's entries."""
        chain = CollisionChain()
        chain.put(2, "two")
        chain.put(1, "one")

        tree = chain.drain_to_tree(extra=[(3, "three"), (1, "uno")])

        assert list(tree.items()) == [(1, "uno"), (2, "two"), (3, "three")]
        assert chain.size() == 0

    def test_failed_drain_keeps_chain(self):
        """Test a comparison error leaves every entry in the chain."""
        chain = CollisionChain()
        chain.put(0, "int")
        chain.put(CollidingKey(1), "ck")

        with pytest.raises(TypeError):
            chain.drain_to_tree()

        assert chain.size() == 2
        assert list(chain.items()) == [(0, "int"), (CollidingKey(1), "ck")]
