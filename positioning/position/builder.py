"""Ordering builder collecting elements and their relative positions.

Callers register elements with ``element()``, which also makes the element
the current focus, then attach positions to the focus with ``before()`` and
``after()``. Constraints are stored unresolved and only looked up when
``sort()`` runs, so they may reference elements registered later.

Example:
    >>> builder = OrderingBuilder()
    >>> builder.element(a).element(b).after("a")
    >>> builder.element(c).before("a")
    >>> builder.sort()  # Returns [c, a, b]
"""

from typing import TYPE_CHECKING, Generic

import structlog

from positioning.errors import FocusUndefinedError, UnknownElementError
from positioning.graph import get_graph_factory
from positioning.graph.base import GraphFactory, T
from positioning.graph.kahn import KahnGraph
from positioning.graph.validator import ValidationReport, find_cycle
from positioning.position.constraints import PositionConstraint, PositionKind

if TYPE_CHECKING:
    from positioning.config import OrderingConfig

logger = structlog.get_logger(__name__)


class OrderingBuilder(Generic[T]):
    """Accumulates elements and relative positions, then sorts them.

    The builder keeps a single focus cursor and is meant for one caller
    building up state sequentially. It is NOT thread-safe.

    Attributes:
        graph_factory: Zero-argument callable producing the graph used by sort()
    """

    def __init__(self, graph_factory: GraphFactory = KahnGraph):
        """Initialize an empty builder.

        Args:
            graph_factory: Produces a fresh graph for every sort() call.
                Defaults to the Kahn's-algorithm graph.
        """
        self.graph_factory = graph_factory
        self._focus_id: str | None = None
        self._elements: dict[str, T] = {}
        self._positions: dict[str, list[PositionConstraint]] = {}

    @classmethod
    def from_config(cls, config: "OrderingConfig") -> "OrderingBuilder[T]":
        """Create a builder using the graph strategy named in ``config``."""
        return cls(graph_factory=get_graph_factory(config.graph_strategy))

    def element(self, element: T) -> "OrderingBuilder[T]":
        """Register ``element`` if its id is new and make it the focus.

        Registering an id twice keeps the first element and its positions.

        Args:
            element: The element to register

        Returns:
            This builder, for chaining
        """
        self._focus_id = element.id
        if element.id not in self._elements:
            self._elements[element.id] = element
            logger.debug("element_registered", element_id=element.id)

        return self

    def before(self, element_id: str) -> "OrderingBuilder[T]":
        """Position the focus element before the element with ``element_id``.

        Raises:
            FocusUndefinedError: If element() has not been called yet
        """
        return self._positioning(PositionKind.BEFORE, element_id)

    def after(self, element_id: str) -> "OrderingBuilder[T]":
        """Position the focus element after the element with ``element_id``.

        Raises:
            FocusUndefinedError: If element() has not been called yet
        """
        return self._positioning(PositionKind.AFTER, element_id)

    def sort(self) -> list[T]:
        """Resolve every position and return the elements in order.

        A fresh graph is built on each call, so the builder can keep
        collecting positions and be sorted again.

        Returns:
            Registered elements in an order satisfying every position

        Raises:
            UnknownElementError: If a position references an unregistered id
            CycleDetectedError: If the positions contradict each other
        """
        graph = self.graph_factory()
        for node in self._elements.values():
            graph.add_node(node)

        edge_count = 0
        for owner_id, constraints in self._positions.items():
            owner = self._element_by_id(owner_id)
            for constraint in constraints:
                for from_element, to_element in constraint.resolve(self._element_by_id).sort(owner):
                    graph.add_edge(from_element, to_element)
                    edge_count += 1

        ordered = graph.sort()

        logger.debug(
            "ordering_sorted",
            element_count=len(ordered),
            edge_count=edge_count,
        )

        return ordered

    def validate(self) -> ValidationReport:
        """Check the collected positions without raising.

        Repeated positions and elements positioned against themselves are
        reported as warnings; the latter also fail as a cycle.

        Returns:
            ValidationReport listing unknown references, any cycle and warnings
        """
        report = ValidationReport()
        successors: dict[str, dict[str, None]] = {node_id: {} for node_id in self._elements}
        seen: set[PositionConstraint] = set()

        for constraint in self.constraints:
            if constraint in seen:
                report.add_warning(f"Duplicate position: {constraint}")
                continue
            seen.add(constraint)

            if constraint.owner_id == constraint.reference_id:
                report.add_warning(f"Element positioned against itself: {constraint}")

            if constraint.reference_id not in self._elements:
                report.missing_refs.add(constraint.reference_id)
                continue
            if constraint.kind is PositionKind.BEFORE:
                successors[constraint.owner_id][constraint.reference_id] = None
            else:
                successors[constraint.reference_id][constraint.owner_id] = None

        if report.missing_refs:
            report.add_error(
                f"Positions reference unknown elements: {', '.join(sorted(report.missing_refs))}",
            )

        cycle = find_cycle(successors)
        if cycle:
            report.cycles.append(cycle)
            report.add_error(f"Cycle detected: {' -> '.join(cycle)}")

        return report

    @property
    def constraints(self) -> tuple[PositionConstraint, ...]:
        """All declared positions, grouped by owner, in declaration order."""
        return tuple(
            constraint for constraints in self._positions.values() for constraint in constraints
        )

    @property
    def elements(self) -> tuple[T, ...]:
        """Registered elements in registration order."""
        return tuple(self._elements.values())

    @property
    def focus_id(self) -> str | None:
        """Id of the element that before()/after() currently apply to."""
        return self._focus_id

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def _positioning(self, kind: PositionKind, element_id: str) -> "OrderingBuilder[T]":
        if self._focus_id is None:
            error_msg = "No current element is defined"
            logger.error("positioning_without_focus", kind=kind.value, reference_id=element_id)
            raise FocusUndefinedError(error_msg)

        constraint = PositionConstraint(kind, self._focus_id, element_id)
        self._positions.setdefault(self._focus_id, []).append(constraint)

        logger.debug(
            "position_added",
            owner_id=constraint.owner_id,
            kind=kind.value,
            reference_id=element_id,
        )

        return self

    def _element_by_id(self, element_id: str) -> T:
        if element_id not in self._elements:
            logger.error("unknown_element_referenced", element_id=element_id)
            raise UnknownElementError(element_id)
        return self._elements[element_id]
