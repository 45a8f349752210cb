"""Kahn's-algorithm graph, the default ordering strategy.

Nodes are keyed by element id and remembered in registration order. Among
all nodes that are ready at a given step, the one registered first is
emitted first, so identical inputs always sort to identical outputs.
"""

from heapq import heapify, heappop, heappush
from typing import Generic

import structlog

from positioning.errors import CycleDetectedError
from positioning.graph.base import T
from positioning.graph.validator import find_cycle

logger = structlog.get_logger(__name__)


class KahnGraph(Generic[T]):
    """Insertion-ordered directed graph sorted with Kahn's algorithm.

    An edge ``(a, b)`` means ``a`` must be emitted before ``b``.

    Thread-safety:
        This class is NOT thread-safe. A graph is meant to be built and
        sorted by a single caller; protect it with external synchronization
        if it has to be shared.

    Example:
        >>> graph = KahnGraph()
        >>> graph.add_node(a)
        >>> graph.add_node(b)
        >>> graph.add_edge(b, a)
        >>> graph.sort()  # Returns [b, a]
    """

    def __init__(self):
        """Initialize an empty graph."""
        self.nodes: dict[str, T] = {}
        # Successor ids per node; dict keys keep edge registration order
        self.successors: dict[str, dict[str, None]] = {}

    def add_node(self, element: T) -> None:
        """Register a node. Adding an id that is already known is a no-op.

        Args:
            element: The element to add
        """
        if element.id in self.nodes:
            return

        self.nodes[element.id] = element
        self.successors[element.id] = {}

    def add_edge(self, from_element: T, to_element: T) -> None:
        """Register that ``from_element`` must come before ``to_element``.

        Endpoints that were never added with add_node() are registered here,
        in the order they appear in the call.

        Args:
            from_element: The element to emit first
            to_element: The element to emit after it
        """
        self.add_node(from_element)
        self.add_node(to_element)
        self.successors[from_element.id][to_element.id] = None

        logger.debug("edge_added", from_id=from_element.id, to_id=to_element.id)

    def sort(self) -> list[T]:
        """Return the nodes in an order consistent with every edge.

        Returns:
            Elements in topological order, ties broken by registration order

        Raises:
            CycleDetectedError: If the edges contain a cycle
        """
        position = {node_id: index for index, node_id in enumerate(self.nodes)}
        in_degree = dict.fromkeys(self.nodes, 0)
        for targets in self.successors.values():
            for target in targets:
                in_degree[target] += 1

        ready = [(position[node_id], node_id) for node_id, degree in in_degree.items() if degree == 0]
        heapify(ready)

        ordered: list[T] = []
        while ready:
            _, node_id = heappop(ready)
            ordered.append(self.nodes[node_id])

            for target in self.successors[node_id]:
                in_degree[target] -= 1
                if in_degree[target] == 0:
                    heappush(ready, (position[target], target))

        if len(ordered) < len(self.nodes):
            unsorted = [node_id for node_id, degree in in_degree.items() if degree > 0]
            cycle = find_cycle(self.successors, unsorted) or []
            error_msg = f"Cycle detected in ordering graph: {' -> '.join(cycle)}"
            logger.error(
                "cycle_detected_in_graph",
                cycle=cycle,
                unsorted=unsorted,
                node_count=len(self.nodes),
            )
            raise CycleDetectedError(error_msg, unsorted=unsorted, cycle=cycle)

        logger.debug("graph_sorted", node_count=len(ordered))

        return ordered
