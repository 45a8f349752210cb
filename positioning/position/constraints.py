"""Relative position resolvers.

``Before`` and ``After`` turn "owner relative to reference" into the
directed edges a graph understands. ``PositionConstraint`` is the deferred
form the builder stores: it names the reference by id and is only resolved
when the ordering is sorted, so references may point at elements registered
later.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic

from positioning.graph.base import T


class PositionKind(str, Enum):
    """Direction of a relative position."""

    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class Before(Generic[T]):
    """Owner must come before ``reference``."""

    reference: T

    def sort(self, owner: T) -> list[tuple[T, T]]:
        return [(owner, self.reference)]


@dataclass(frozen=True)
class After(Generic[T]):
    """Owner must come after ``reference``."""

    reference: T

    def sort(self, owner: T) -> list[tuple[T, T]]:
        return [(self.reference, owner)]


@dataclass(frozen=True)
class PositionConstraint:
    """A declared, not yet resolved, relative position.

    Attributes:
        kind: Whether the owner goes before or after the reference
        owner_id: Id of the element the constraint is attached to
        reference_id: Id of the element the owner is positioned against
    """

    kind: PositionKind
    owner_id: str
    reference_id: str

    def resolve(self, lookup: Callable[[str], T]) -> Before[T] | After[T]:
        """Look the reference up and build the matching resolver.

        Args:
            lookup: Maps an element id to the registered element; expected
                to raise if the id is unknown

        Returns:
            A Before or After resolver bound to the reference element
        """
        reference = lookup(self.reference_id)
        if self.kind is PositionKind.BEFORE:
            return Before(reference)
        return After(reference)

    def __str__(self) -> str:
        return f"{self.owner_id} {self.kind.value} {self.reference_id}"
