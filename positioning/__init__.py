"""Resolve a total order over elements from relative before/after positions."""

from positioning.config import LoggingConfig, OrderingConfig, load_config
from positioning.errors import (
    CycleDetectedError,
    FocusUndefinedError,
    PositioningError,
    UnknownElementError,
)
from positioning.graph import DepthFirstGraph, Graph, Identifiable, KahnGraph, get_graph_factory
from positioning.position import After, Before, OrderingBuilder, PositionConstraint, PositionKind

__version__ = "0.1.0"

__all__ = [
    "After",
    "Before",
    "CycleDetectedError",
    "DepthFirstGraph",
    "FocusUndefinedError",
    "Graph",
    "Identifiable",
    "KahnGraph",
    "LoggingConfig",
    "OrderingBuilder",
    "OrderingConfig",
    "PositionConstraint",
    "PositionKind",
    "PositioningError",
    "UnknownElementError",
    "get_graph_factory",
    "load_config",
]
