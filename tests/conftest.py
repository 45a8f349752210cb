"""Shared fixtures for the positioning test suite."""

from dataclasses import dataclass, field

import pytest
import structlog


@dataclass(frozen=True)
class Item:
    """Minimal element: an id plus an arbitrary payload."""

    id: str
    payload: dict = field(default_factory=dict, compare=False, hash=False)


@pytest.fixture
def make_items():
    """Fixture building one Item per id."""

    def _make(*ids: str) -> list[Item]:
        return [Item(item_id) for item_id in ids]

    return _make


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so configure_logging() in one test does not leak."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
