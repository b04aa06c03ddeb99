"""
Search Schema
=============

Domain-agnostic records shared by the frontier, the engine and the path
reconstructor.

States are opaque hashable keys (grid cells, graph nodes, game positions...)
and costs are opaque values ordered only by the caller's ``less``. ``None``
is reserved to mean "no predecessor" and cannot be used as a state.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class NodeCost:
    """
    Finalized record for one state.

    Created once, when the state is first popped from the frontier, and
    never modified afterwards.
    """

    key: Hashable
    """The finalized state."""

    cost: Any
    """Minimum accumulated cost from the start."""

    prev: Optional[Hashable] = None
    """Predecessor on the optimal path, ``None`` for the start state."""

    @property
    def is_origin(self) -> bool:
        """True for the record that has no predecessor."""
        return self.prev is None


CostMap = dict[Hashable, NodeCost]
"""Finalized records of one run, keyed by state."""


@runtime_checkable
class Adjacent(Protocol):
    """
    A state type that can enumerate its own neighbours.

    Used when ``SearchOptions`` has no explicit ``edges`` callback.
    """

    def adjacent(self) -> Iterable[Hashable]:
        ...


def cost_values(costs: CostMap) -> dict[Hashable, Any]:
    """Flatten a cost map into ``{state: cost}``."""
    return {key: node.cost for key, node in costs.items()}
