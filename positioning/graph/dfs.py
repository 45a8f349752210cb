"""Depth-first graph, an alternative ordering strategy.

The topological order of a DAG is its reverse postorder. Nodes are visited
in reverse registration order and successors in reverse edge order, so that
unconstrained nodes keep their registration order in the output, the same as
``KahnGraph``. Once edges are involved, the tie-break differs: a node is
placed as late as its successors allow rather than as early as possible.
"""

from typing import Generic

import structlog

from positioning.errors import CycleDetectedError
from positioning.graph.base import T

logger = structlog.get_logger(__name__)


class DepthFirstGraph(Generic[T]):
    """Insertion-ordered directed graph sorted by depth-first search.

    Thread-safety:
        This class is NOT thread-safe; see ``KahnGraph``.
    """

    def __init__(self):
        self.nodes: dict[str, T] = {}
        self.successors: dict[str, dict[str, None]] = {}

    def add_node(self, element: T) -> None:
        if element.id in self.nodes:
            return

        self.nodes[element.id] = element
        self.successors[element.id] = {}

    def add_edge(self, from_element: T, to_element: T) -> None:
        self.add_node(from_element)
        self.add_node(to_element)
        self.successors[from_element.id][to_element.id] = None

        logger.debug("edge_added", from_id=from_element.id, to_id=to_element.id)

    def sort(self) -> list[T]:
        """Return the nodes in reverse postorder.

        Raises:
            CycleDetectedError: If a back edge is found during the search
        """
        finished: set[str] = set()
        on_stack: set[str] = set()
        postorder: list[str] = []

        for start in reversed(self.nodes):
            if start in finished:
                continue

            path = [start]
            on_stack.add(start)
            stack = [(start, reversed(list(self.successors[start])))]

            while stack:
                node_id, children = stack[-1]
                child = next(children, None)

                if child is None:
                    stack.pop()
                    path.pop()
                    on_stack.discard(node_id)
                    finished.add(node_id)
                    postorder.append(node_id)
                elif child in on_stack:
                    cycle = [*path[path.index(child):], child]
                    unsorted = [n for n in self.nodes if n not in finished]
                    error_msg = f"Cycle detected in ordering graph: {' -> '.join(cycle)}"
                    logger.error(
                        "cycle_detected_in_graph",
                        cycle=cycle,
                        unsorted=unsorted,
                        node_count=len(self.nodes),
                    )
                    raise CycleDetectedError(error_msg, unsorted=unsorted, cycle=cycle)
                elif child not in finished:
                    path.append(child)
                    on_stack.add(child)
                    stack.append((child, reversed(list(self.successors[child]))))

        postorder.reverse()
        logger.debug("graph_sorted", node_count=len(postorder))

        return [self.nodes[node_id] for node_id in postorder]
