"""Relative positioning of elements.

This module contains the ordering builder that collects elements and their
before/after positions, and the resolvers that turn positions into graph
edges.
"""

from positioning.position.builder import OrderingBuilder
from positioning.position.constraints import After, Before, PositionConstraint, PositionKind

__all__ = ["After", "Before", "OrderingBuilder", "PositionConstraint", "PositionKind"]
