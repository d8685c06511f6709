"""Tests for the counting multiset."""

import pytest

from dsugraph import (
    ConcurrentModificationError,
    InvalidArgumentError,
    MissingArgumentError,
    Multiset,
)


@pytest.fixture
def bag():
    m = Multiset()
    m.add("a", 2)
    m.add("b")
    return m


class TestCounting:
    """Tests for add / remove / count."""

    def test_empty(self):
        m = Multiset()
        assert m.is_empty()
        assert len(m) == 0
        assert m.count("x") == 0
        assert list(m) == []

    def test_add_returns_previous_count(self, bag):
        """Test add reports the multiplicity before the call."""
        assert bag.add("a", 3) == 2
        assert bag.count("a") == 5
        assert bag.size() == 6

    def test_add_zero_is_noop(self, bag):
        assert bag.add("c", 0) == 0
        assert "c" not in bag
        assert len(bag) == 3

    def test_remove_partial(self, bag):
        """Test removing fewer copies than present keeps the element."""
        assert bag.remove("a") == 2
        assert bag.count("a") == 1
        assert len(bag) == 2

    def test_remove_more_than_present(self, bag):
        """Test over-removal drops the element entirely."""
        assert bag.remove("a", 10) == 2
        assert "a" not in bag
        assert bag.element_set() == {"b"}
        assert len(bag) == 1

    def test_remove_absent(self, bag):
        assert bag.remove("zzz") == 0
        assert len(bag) == 3

    def test_discard(self, bag):
        assert bag.discard("b") is True
        assert bag.discard("b") is False

    def test_set_count(self, bag):
        assert bag.set_count("b", 4) == 1
        assert bag.set_count("a", 0) == 2
        assert bag.element_set() == {"b"}
        assert len(bag) == 4

    def test_contains(self, bag):
        assert bag.contains("a")
        assert not bag.contains("c")
        assert None not in bag

    def test_clear(self, bag):
        bag.clear()
        assert bag.is_empty()
        assert len(bag) == 0


class TestArguments:
    """Tests for rejected arguments."""

    @pytest.mark.parametrize("method", ["add", "remove", "count", "contains"])
    def test_none_element(self, bag, method):
        with pytest.raises(MissingArgumentError):
            getattr(bag, method)(None)

    def test_negative_occurrences(self, bag):
        with pytest.raises(InvalidArgumentError):
            bag.add("a", -1)
        with pytest.raises(InvalidArgumentError):
            bag.remove("a", -1)
        with pytest.raises(InvalidArgumentError):
            bag.set_count("a", -1)
        assert bag.count("a") == 2


class TestIteration:
    """Tests for iteration and equality."""

    def test_iterates_every_occurrence(self, bag):
        """Test occurrences of one element come out consecutively."""
        items = list(bag)
        assert sorted(items) == ["a", "a", "b"]
        first = items.index("a")
        assert items[first + 1] == "a"

    def test_fail_fast_on_add(self, bag):
        """Test a change after the iterator is made breaks it."""
        it = iter(bag)
        next(it)
        bag.add("c")
        with pytest.raises(ConcurrentModificationError):
            next(it)

    def test_fail_fast_before_first_step(self, bag):
        """Test the iterator remembers the state it was created in."""
        it = iter(bag)
        bag.remove("b")
        with pytest.raises(ConcurrentModificationError):
            next(it)

    def test_noop_does_not_invalidate(self, bag):
        """Test calls that change nothing leave iterators valid."""
        it = iter(bag)
        bag.add("a", 0)
        bag.remove("missing")
        bag.set_count("b", 1)
        assert len(list(it)) == 3

    def test_equality_and_hash(self, bag):
        other = Multiset()
        other.add("b")
        other.add("a")
        other.add("a")
        assert other == bag
        assert hash(other) == hash(bag)
        other.add("a")
        assert other != bag
