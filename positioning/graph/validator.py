"""Cycle search and validation reporting for ordering graphs.

``find_cycle`` walks a successor mapping depth-first and returns the first
cycle it meets as a path. Graph strategies use it to enrich
``CycleDetectedError``; the ordering builder uses it, together with
``ValidationReport``, to describe a broken constraint set without raising.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class ValidationReport:
    """Report containing validation results for a set of positions.

    Attributes:
        is_valid: Whether the constraints passed all validation checks
        errors: List of error messages (critical issues)
        warnings: List of warning messages (potential issues)
        cycles: List of detected cycles, each represented as a list of element ids
        missing_refs: Set of element ids referenced by constraints but never registered
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)
    missing_refs: set[str] = field(default_factory=set)

    def add_error(self, message: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(message)
        self.is_valid = False
        logger.error("validation_error", message=message)

    def add_warning(self, message: str) -> None:
        """Add a warning message without failing validation."""
        self.warnings.append(message)
        logger.warning("validation_warning", message=message)

    def summary(self) -> str:
        """Generate a human-readable summary of the validation report."""
        lines = []
        lines.append(f"Validation Status: {'PASS' if self.is_valid else 'FAIL'}")
        lines.append(f"Errors: {len(self.errors)}")
        lines.append(f"Warnings: {len(self.warnings)}")
        lines.append(f"Cycles: {len(self.cycles)}")
        lines.append(f"Missing References: {len(self.missing_refs)}")

        if self.errors:
            lines.append("\nErrors:")
            lines.extend(f"  - {error}" for error in self.errors)

        if self.warnings:
            lines.append("\nWarnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)

        if self.cycles:
            lines.append("\nCycles Detected:")
            for i, cycle in enumerate(self.cycles, 1):
                lines.append(f"  {i}. {' -> '.join(cycle)}")

        if self.missing_refs:
            lines.append(f"\nMissing References: {', '.join(sorted(self.missing_refs))}")

        return "\n".join(lines)


def find_cycle(
    successors: Mapping[str, Iterable[str]],
    nodes: Iterable[str] | None = None,
) -> list[str] | None:
    """Find one cycle in a successor mapping using DFS.

    Args:
        successors: Mapping of node id to the ids that must come after it
        nodes: Start nodes, tried in order. Defaults to the mapping's keys.

    Returns:
        The cycle as a path whose first id is repeated at the end
        (e.g. ``["a", "b", "a"]``), or None if the graph is acyclic
    """
    visited: set[str] = set()
    on_stack: set[str] = set()
    path: list[str] = []

    # Iterative DFS; each frame holds the node and an iterator over its successors
    for start in successors if nodes is None else nodes:
        if start in visited:
            continue

        stack = [(start, iter(successors.get(start, ())))]
        visited.add(start)
        on_stack.add(start)
        path.append(start)

        while stack:
            node, children = stack[-1]
            child = next(children, None)

            if child is None:
                # Backtrack
                stack.pop()
                on_stack.discard(node)
                path.pop()
            elif child in on_stack:
                cycle_start_idx = path.index(child)
                return [*path[cycle_start_idx:], child]
            elif child not in visited:
                visited.add(child)
                on_stack.add(child)
                path.append(child)
                stack.append((child, iter(successors.get(child, ()))))

    return None
