"""Tests for the linked-list / union-by-size representation."""

import pytest

from dsugraph import LinkedListDisjointSets


@pytest.fixture
def lists():
    return LinkedListDisjointSets()


def chain_labels(dsu, e):
    """Walk the chain holding ``e`` from its head."""
    head = dsu._repr[dsu._index[e]]
    return [dsu._items[i] for i in dsu._chain(head)]


class TestUnionBySize:
    """Tests for the size heuristic and its tie-break."""

    def test_tie_second_set_survives(self, lists):
        """Test equal-size union keeps the second argument's representative."""
        lists.make_set("x")
        lists.make_set("y")
        lists.union("x", "y")
        assert lists.find_set("x") == "y"
        assert lists.find_set("y") == "y"
        assert lists.cardinality_of_set_containing("x") == 2

    def test_larger_first_set_survives(self, lists):
        """Test the larger set keeps its representative when passed first."""
        for x in "abc":
            lists.make_set(x)
        lists.union("a", "b")  # {a, b} rep b
        lists.union("b", "c")  # 2 > 1, so c is absorbed
        assert lists.find_set("c") == "b"
        assert lists.cardinality_of_set_containing("a") == 3

    def test_smaller_first_set_absorbed(self, lists):
        """Test the smaller set is absorbed when passed first."""
        for x in "abc":
            lists.make_set(x)
        lists.union("a", "b")
        lists.union("c", "a")
        assert lists.find_set("c") == "b"

    def test_equal_larger_sets_tie(self, lists):
        """Test tie-break also applies to sets larger than singletons."""
        for x in "abcd":
            lists.make_set(x)
        lists.union("a", "b")  # rep b
        lists.union("c", "d")  # rep d
        lists.union("a", "c")  # tie: set of c survives
        assert lists.find_set("a") == "d"
        assert lists.cardinality_of_set_containing("b") == 4


class TestChainStructure:
    """Tests for the chain layout after splicing."""

    def test_head_is_representative(self, lists):
        """Test the chain head is always the representative."""
        for x in "abcd":
            lists.make_set(x)
        lists.union("a", "b")
        lists.union("c", "b")
        chain = chain_labels(lists, "a")
        assert chain[0] == lists.find_set("a")
        assert sorted(chain) == ["a", "b", "c"]

    def test_absorbed_chain_spliced_after_head(self, lists):
        """Test the absorbed chain follows the surviving head."""
        for x in "abc":
            lists.make_set(x)
        lists.union("a", "b")
        assert chain_labels(lists, "a") == ["b", "a"]
        lists.union("c", "a")
        assert chain_labels(lists, "c") == ["b", "c", "a"]

    def test_tail_tracked_after_singleton_absorber(self, lists):
        """Test unions stay consistent after the absorber was a singleton."""
        for x in range(6):
            lists.make_set(x)
        lists.union(0, 1)  # absorber 1 was a singleton
        lists.union(2, 3)
        lists.union(0, 2)
        lists.union(4, 5)
        lists.union(5, 0)
        chain = chain_labels(lists, 0)
        assert sorted(chain) == list(range(6))
        assert len(chain) == lists.cardinality_of_set_containing(4)
        assert lists._next[lists._tail[lists._repr[lists._index[0]]]] == -1

    def test_num_sets_tracks_heads(self, lists):
        """Test num_sets matches the number of chain heads."""
        for x in range(5):
            lists.make_set(x)
        lists.union(0, 1)
        lists.union(3, 4)
        assert lists.num_sets == 3
        assert lists.current_representatives() == {1, 2, 4}
