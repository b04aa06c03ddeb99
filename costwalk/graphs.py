"""
NetworkX Adapter
================

Derives `SearchOptions` from a caller-owned NetworkX graph. The graph is
only read through the callbacks; nothing is copied or cached.
"""

import operator
from typing import Any, Hashable

import networkx as nx

from costwalk.core.options import SearchOptions


def edge_weight(
    graph: nx.Graph,
    u: Hashable,
    v: Hashable,
    weight: str = "weight",
    default: float = 1.0,
) -> float:
    """
    Weight of the edge ``u -> v``.

    For multigraphs the cheapest parallel edge is used.
    """
    data = graph[u][v]
    if graph.is_multigraph():
        return min(attrs.get(weight, default) for attrs in data.values())
    return data.get(weight, default)


def options_from_graph(
    graph: nx.Graph,
    weight: str = "weight",
    default: float = 1.0,
    **kwargs: Any,
) -> SearchOptions:
    """
    Build additive, numeric search options over ``graph``.

    Parameters
    ----------
    graph : nx.Graph
        Any NetworkX graph. Directed graphs follow successors only.
    weight : str
        Edge attribute holding the step cost.
    default : float
        Step cost for edges without the attribute.
    **kwargs
        Extra `SearchOptions` fields, e.g. ``max_visits``.

    Raises
    ------
    ValueError
        From ``accumulate`` when a negative weight is traversed, since the
        engine cannot produce correct costs with one.
    """
    neighbors = graph.successors if graph.is_directed() else graph.neighbors

    def accumulate(agg: float, u: Hashable, v: Hashable) -> tuple[float, bool]:
        if not graph.has_edge(u, v):
            return agg, False
        step = edge_weight(graph, u, v, weight, default)
        if step < 0:
            raise ValueError(f"negative weight {step!r} on edge {u!r} -> {v!r}")
        return agg + step, True

    def edges(node: Hashable) -> list[Hashable]:
        if node not in graph:
            return []
        return list(neighbors(node))

    return SearchOptions(accumulate=accumulate, less=operator.lt, edges=edges, **kwargs)
