"""
Tests for the Priority Frontier
===============================
"""

import operator

import pytest

from costwalk.core.frontier import FrontierEntry, PriorityFrontier


class TestPriorityFrontier:
    """Tests for PriorityFrontier ordering and bookkeeping."""

    def test_new_frontier_is_empty(self):
        frontier = PriorityFrontier(operator.lt)
        assert frontier.is_empty() is True
        assert len(frontier) == 0
        assert not frontier

    def test_pop_returns_cheapest_first(self):
        frontier = PriorityFrontier(operator.lt)
        for state, cost in [("c", 7), ("a", 1), ("d", 9), ("b", 3)]:
            frontier.push(state, None, cost)

        popped = [frontier.pop().state for _ in range(4)]
        assert popped == ["a", "b", "c", "d"]
        assert frontier.is_empty()

    def test_custom_less_reverses_order(self):
        frontier = PriorityFrontier(operator.gt)
        for cost in [2, 8, 5]:
            frontier.push(cost, None, cost)

        assert [frontier.pop().cost for _ in range(3)] == [8, 5, 2]

    def test_non_numeric_costs(self):
        # Costs ordered by length, not lexicographically
        frontier = PriorityFrontier(lambda a, b: len(a) < len(b))
        frontier.push("x", None, "aaaa")
        frontier.push("y", None, "zz")
        frontier.push("z", None, "b")

        assert [frontier.pop().state for _ in range(3)] == ["z", "y", "x"]

    def test_duplicate_states_are_kept(self):
        frontier = PriorityFrontier(operator.lt)
        frontier.push("a", None, 5)
        frontier.push("a", "b", 2)

        assert len(frontier) == 2
        assert frontier.pop() == FrontierEntry(state="a", prev="b", cost=2)
        assert frontier.pop() == FrontierEntry(state="a", prev=None, cost=5)

    def test_entry_carries_predecessor(self):
        frontier = PriorityFrontier(operator.lt)
        frontier.push((1, 2), (1, 1), 4)

        entry = frontier.pop()
        assert entry.state == (1, 2)
        assert entry.prev == (1, 1)
        assert entry.cost == 4

    def test_pop_empty_raises(self):
        frontier = PriorityFrontier(operator.lt)
        with pytest.raises(IndexError):
            frontier.pop()

    def test_interleaved_push_pop(self):
        frontier = PriorityFrontier(operator.lt)
        frontier.push("a", None, 4)
        frontier.push("b", None, 2)
        assert frontier.pop().state == "b"

        frontier.push("c", None, 1)
        frontier.push("d", None, 6)
        assert frontier.pop().state == "c"
        assert frontier.pop().state == "a"
        assert frontier.pop().state == "d"
        assert frontier.is_empty()

    def test_equal_costs_all_come_out(self):
        frontier = PriorityFrontier(operator.lt)
        for state in "abcde":
            frontier.push(state, None, 1)

        assert sorted(frontier.pop().state for _ in range(5)) == list("abcde")
