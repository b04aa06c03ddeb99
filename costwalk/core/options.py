"""
Search Options
==============

Configuration record holding the three callbacks that define a search
space, plus the entry operations that run it.

Callbacks:
- accumulate(agg, from_state, to_state) -> (next_cost, admissible)
- less(cost_a, cost_b) -> bool, a strict ordering
- edges(state) -> iterable of candidate neighbours

When ``edges`` is omitted the states must describe their own neighbours
through an ``adjacent()`` method (see `Adjacent`).
"""

from typing import Any, Callable, Hashable, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from costwalk.core import engine
from costwalk.core.path import resolve_path
from costwalk.core.schema import Adjacent, CostMap


def _adjacent_edges(state: Adjacent) -> Iterable[Hashable]:
    return state.adjacent()


def _supports_adjacency(state_type: type) -> bool:
    return isinstance(state_type, type) and issubclass(state_type, Adjacent)


class SearchOptions(BaseModel):
    """
    Callbacks and limits for one family of searches.

    Options are immutable. Build variants through validation, e.g.
    ``SearchOptions.model_validate({**options.model_dump(), "max_visits": 100})``;
    ``model_copy(update=...)`` skips the field checks.

    Example
    -------
    >>> weights = {("a", "b"): 1, ("b", "c"): 2, ("a", "c"): 5}
    >>> options = SearchOptions(
    ...     accumulate=lambda agg, u, v: (agg + weights.get((u, v), 0), (u, v) in weights),
    ...     less=lambda x, y: x < y,
    ...     edges=lambda node: ["a", "b", "c"],
    ... )
    >>> options.create_path_finder("a", 0)("c")
    ['a', 'b', 'c']
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    accumulate: Callable[[Any, Any, Any], tuple[Any, bool]]
    """Extends a cost by one step and says whether the step is allowed."""

    less: Callable[[Any, Any], bool]
    """Strict ordering over costs."""

    edges: Optional[Callable[[Any], Iterable[Any]]] = None
    """Neighbour enumeration. Falls back to ``state.adjacent()`` when unset."""

    state_type: Optional[type] = None
    """
    State class, used to resolve the ``adjacent()`` fallback up front.
    Without it the fallback is resolved from the start state of each run.
    """

    max_visits: Optional[int] = Field(default=None, ge=1)
    """Optional cap on finalized states per run."""

    @model_validator(mode="before")
    @classmethod
    def _resolve_edges(cls, data: Any) -> Any:
        """Bind the ``adjacent()`` fallback when the state type is known."""
        if not isinstance(data, dict):
            return data
        state_type = data.get("state_type")
        if data.get("edges") is not None or state_type is None:
            return data
        if not _supports_adjacency(state_type):
            raise ValueError(
                f"edges is not configured and {getattr(state_type, '__name__', state_type)} "
                "does not define adjacent()"
            )
        return {**data, "edges": _adjacent_edges}

    def edges_for(self, start: Hashable) -> Callable[[Any], Iterable[Any]]:
        """
        Return the neighbour callback to use for a run starting at ``start``.

        Raises
        ------
        TypeError
            If no ``edges`` is configured and the start state cannot
            enumerate its own neighbours.
        """
        if self.edges is not None:
            return self.edges
        if not _supports_adjacency(type(start)):
            raise TypeError(
                f"edges is not configured and {type(start).__name__} "
                "does not define adjacent()"
            )
        return _adjacent_edges

    def compute_costs(self, start: Hashable, initial: Any) -> CostMap:
        """Run the search engine from ``start``; see `engine.compute_costs`."""
        return engine.compute_costs(
            start,
            initial,
            self.accumulate,
            self.less,
            self.edges_for(start),
            max_visits=self.max_visits,
        )

    def resolve_path(self, costs: CostMap, goal: Hashable) -> list[Hashable]:
        """Reconstruct the path to ``goal`` from a cost map."""
        return resolve_path(costs, goal, self.less)

    def create_path_finder(self, start: Hashable, initial: Any) -> "PathFinder":
        """Search once from ``start`` and answer any number of goal queries."""
        return PathFinder(self, start, initial)


class PathFinder:
    """
    Callable bound to the cost map of a single search run.

    Calling it with a goal returns the path or raises `NotReachableError`.
    """

    def __init__(self, options: SearchOptions, start: Hashable, initial: Any):
        self._options = options
        self._start = start
        self._costs = options.compute_costs(start, initial)

    @property
    def start(self) -> Hashable:
        return self._start

    @property
    def costs(self) -> CostMap:
        """The cached cost map (treat as read-only)."""
        return self._costs

    def __call__(self, goal: Hashable) -> list[Hashable]:
        return self._options.resolve_path(self._costs, goal)

    def __contains__(self, goal: Hashable) -> bool:
        return goal in self._costs

    def __repr__(self) -> str:
        return f"PathFinder(start={self._start!r}, finalized={len(self._costs)})"
