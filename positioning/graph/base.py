"""Capabilities shared by every graph strategy.

The ordering builder only talks to graphs through the ``Graph`` protocol, so
any class providing ``add_node``, ``add_edge`` and ``sort`` can be plugged in
through a zero-argument factory.
"""

from collections.abc import Callable
from typing import Protocol, TypeVar


class Identifiable(Protocol):
    """Anything with a stable, unique string identifier."""

    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=Identifiable)


class Graph(Protocol[T]):
    """Directed "comes before" graph able to produce a topological order."""

    def add_node(self, element: T) -> None: ...

    def add_edge(self, from_element: T, to_element: T) -> None: ...

    def sort(self) -> list[T]: ...


GraphFactory = Callable[[], Graph[T]]
