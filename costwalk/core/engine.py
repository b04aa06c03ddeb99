"""
Search Engine
=============

Lazy-deletion Dijkstra over caller-supplied callbacks.

Key Design Principles:
1. The start state is always seeded, ``accumulate`` is never asked about it
2. The first time a state is popped its cost is minimal, so it is finalized
3. Improved candidates are pushed unconditionally; stale entries are
   discarded when they are popped, not when they are pushed
4. Costs must never decrease along an accumulation step under ``less``;
   violations (e.g. negative weights) are not detected
"""

import logging
from typing import Any, Callable, Hashable, Iterable, Optional

from costwalk.core.errors import VisitLimitExceeded
from costwalk.core.frontier import PriorityFrontier
from costwalk.core.schema import CostMap, NodeCost

logger = logging.getLogger(__name__)


Accumulator = Callable[[Any, Hashable, Hashable], tuple[Any, bool]]
"""``accumulate(agg, from_state, to_state) -> (next_cost, admissible)``"""

Less = Callable[[Any, Any], bool]
"""Strict ordering over costs."""

Edges = Callable[[Hashable], Iterable[Hashable]]
"""``edges(state) -> candidate neighbours``"""


def compute_costs(
    start: Hashable,
    initial: Any,
    accumulate: Accumulator,
    less: Less,
    edges: Edges,
    *,
    max_visits: Optional[int] = None,
) -> CostMap:
    """
    Compute the minimum cost to every state reachable from ``start``.

    Parameters
    ----------
    start : Hashable
        State the search begins from.
    initial : Any
        Cost of reaching ``start``.
    accumulate : callable
        Extends a cost by one step. Returning ``admissible=False`` drops
        the candidate: it means "no edge", not an error.
    less : callable
        Strict ordering over costs.
    edges : callable
        Lists candidate neighbours of a state. May return nothing.
    max_visits : int, optional
        Stop with `VisitLimitExceeded` instead of finalizing more states
        than this. Without it an unbounded space never terminates.

    Returns
    -------
    CostMap
        One `NodeCost` per finalized state, with predecessor links forming
        a tree rooted at ``start``.

    Raises
    ------
    VisitLimitExceeded
        If ``max_visits`` is set and the reachable space is larger.
    ValueError
        If ``max_visits`` is less than 1.
    """
    if max_visits is not None and max_visits < 1:
        raise ValueError(f"max_visits must be at least 1, got {max_visits!r}")

    frontier = PriorityFrontier(less)
    costs: CostMap = {}
    pushes = 1
    stale = 0

    logger.debug("Searching from %r (initial cost %r)", start, initial)
    frontier.push(start, None, initial)

    while frontier:
        entry = frontier.pop()
        current = entry.state
        if current in costs:
            stale += 1
            continue

        if max_visits is not None and len(costs) >= max_visits:
            logger.warning(
                "Search from %r hit max_visits=%d with %d entries still queued",
                start, max_visits, len(frontier) + 1,
            )
            raise VisitLimitExceeded(costs, max_visits)

        costs[current] = NodeCost(key=current, cost=entry.cost, prev=entry.prev)

        for dest in edges(current):
            next_cost, admissible = accumulate(entry.cost, current, dest)
            if admissible:
                frontier.push(dest, current, next_cost)
                pushes += 1

    logger.debug(
        "Search from %r finalized %d states (%d pushes, %d stale pops)",
        start, len(costs), pushes, stale,
    )
    return costs
