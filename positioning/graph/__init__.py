"""Graph module for ordering elements by topological sort.

This module provides the graph capability the ordering builder sorts with,
the two bundled strategies (Kahn's algorithm and depth-first search), and a
small registry for selecting a strategy by name.
"""

from positioning.graph.base import Graph, GraphFactory, Identifiable
from positioning.graph.dfs import DepthFirstGraph
from positioning.graph.kahn import KahnGraph
from positioning.graph.validator import ValidationReport, find_cycle

GRAPH_STRATEGIES: dict[str, type] = {
    "kahn": KahnGraph,
    "dfs": DepthFirstGraph,
}


def get_graph_factory(name: str) -> GraphFactory:
    """Resolve a strategy name to a graph factory.

    Args:
        name: Strategy name ('kahn' or 'dfs'), case-insensitive

    Returns:
        Zero-argument callable producing a fresh graph

    Raises:
        ValueError: If the strategy name is unknown
    """
    normalized = name.lower().strip()
    if normalized not in GRAPH_STRATEGIES:
        error_msg = (
            f"Unsupported graph strategy: {name}. "
            f"Use one of: {', '.join(sorted(GRAPH_STRATEGIES))}."
        )
        raise ValueError(error_msg)
    return GRAPH_STRATEGIES[normalized]


__all__ = [
    "GRAPH_STRATEGIES",
    "DepthFirstGraph",
    "Graph",
    "GraphFactory",
    "Identifiable",
    "KahnGraph",
    "ValidationReport",
    "find_cycle",
    "get_graph_factory",
]
