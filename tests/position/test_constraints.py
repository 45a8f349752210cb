"""Unit tests for Before/After resolvers and PositionConstraint."""

import pytest

from positioning.errors import UnknownElementError
from positioning.position.constraints import After, Before, PositionConstraint, PositionKind


class TestResolvers:
    """Test edge production."""

    def test_before_edge(self, make_items):
        """Test Before puts the owner first."""
        owner, reference = make_items("owner", "ref")

        assert Before(reference).sort(owner) == [(owner, reference)]

    def test_after_edge(self, make_items):
        """Test After puts the reference first."""
        owner, reference = make_items("owner", "ref")

        assert After(reference).sort(owner) == [(reference, owner)]

    def test_resolvers_are_stateless(self, make_items):
        """Test the same resolver can serve several owners."""
        first, second, reference = make_items("first", "second", "ref")
        before = Before(reference)

        assert before.sort(first) == [(first, reference)]
        assert before.sort(second) == [(second, reference)]


class TestPositionConstraint:
    """Test deferred constraint records."""

    def test_resolve_before(self, make_items):
        """Test resolving a BEFORE record builds a Before resolver."""
        (reference,) = make_items("b")
        constraint = PositionConstraint(PositionKind.BEFORE, "a", "b")

        resolver = constraint.resolve({"b": reference}.__getitem__)

        assert resolver == Before(reference)

    def test_resolve_after(self, make_items):
        """Test resolving an AFTER record builds an After resolver."""
        (reference,) = make_items("b")
        constraint = PositionConstraint(PositionKind.AFTER, "a", "b")

        assert constraint.resolve(lambda _: reference) == After(reference)

    def test_resolve_propagates_lookup_error(self):
        """Test that lookup failures are not swallowed."""
        constraint = PositionConstraint(PositionKind.BEFORE, "a", "missing")

        def lookup(element_id):
            raise UnknownElementError(element_id)

        with pytest.raises(UnknownElementError):
            constraint.resolve(lookup)

    def test_str(self):
        """Test the readable form of a constraint."""
        constraint = PositionConstraint(PositionKind.AFTER, "b", "a")

        assert str(constraint) == "b after a"

    def test_records_compare_by_value(self):
        """Test that records are plain values."""
        assert PositionConstraint(PositionKind.BEFORE, "a", "b") == PositionConstraint(
            PositionKind.BEFORE,
            "a",
            "b",
        )
