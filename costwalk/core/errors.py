"""
Search Errors
=============

Exceptions raised by the search engine and the path reconstructor.

An unreachable goal is an expected outcome of searching a disconnected or
partially explored space, so `NotReachableError` carries the diagnostics a
caller needs to report it rather than signalling a fault.
"""

from typing import Any, Hashable, Optional

from costwalk.core.schema import CostMap


class SearchError(Exception):
    """Base class for errors raised by costwalk itself."""


class NotReachableError(SearchError, LookupError):
    """
    The requested goal has no finalized record in the cost map.

    Attributes
    ----------
    costs : CostMap
        The (possibly partial) cost map the lookup was made against.
    start : Hashable or None
        Best guess at the search origin: the cheapest finalized state.
        Diagnostic only, it is not guaranteed to be the real start.
    goal : Hashable
        The goal that could not be resolved.
    starting_unknown : bool
        True when the cost map was empty and no start could be inferred.
    """

    def __init__(
        self,
        costs: CostMap,
        goal: Hashable,
        start: Optional[Hashable] = None,
        starting_unknown: bool = False,
    ):
        self.costs = costs
        self.start = start
        self.goal = goal
        self.starting_unknown = starting_unknown
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.starting_unknown:
            return f"the specified goal is not reachable from the start node: {self.goal!r}"
        return (
            "the specified goal is not reachable from the start node: "
            f"{self.start!r} -> {self.goal!r}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            self.__class__,
            (self.costs, self.goal, self.start, self.starting_unknown),
        )


class VisitLimitExceeded(SearchError):
    """
    A run needed to finalize more states than its configured ``max_visits``.

    ``costs`` holds every record finalized before the cap was hit; each of
    them is already minimal.
    """

    def __init__(self, costs: CostMap, limit: int):
        self.costs = costs
        self.limit = limit
        super().__init__(
            f"search stopped after finalizing {limit} states (max_visits={limit})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__, (self.costs, self.limit))
