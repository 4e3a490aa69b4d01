"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from holocron.store import EntityStore, build_store
from holocron.store.models import Droid, Episode, Human, Review, Starship


@pytest.fixture
def store() -> EntityStore:
    """A fresh store seeded with the built-in dataset."""
    return build_store()


@pytest.fixture
def reduced_store() -> EntityStore:
    """Han and Chewbacca only; Chewbacca still lists the absent Luke as a friend."""
    return EntityStore(
        humans=[
            Human(
                id="han",
                name="Han Solo",
                appears_in=[Episode.NEWHOPE],
                friend_ids=["chewie"],
                starship_ids=["falcon", "tie"],
                credits=1000,
            )
        ],
        droids=[
            Droid(
                id="chewie",
                name="Chewbacca",
                appears_in=[Episode.NEWHOPE],
                friend_ids=["han", "luke"],
                primary_function="Co-pilot",
            )
        ],
        starships=[Starship(id="falcon", name="Millennium Falcon", length_meters=34.75)],
        reviews=[Review(episode=Episode.JEDI, stars=0, comment="return of the jedi")],
    )


def _make_info(store: EntityStore) -> MagicMock:
    """Create a mock GraphQL info object carrying ``store`` in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture
def mock_info(store: EntityStore) -> MagicMock:
    return _make_info(store)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]


@pytest.fixture
def make_info():
    """Factory for mock info objects bound to an arbitrary store."""
    return _make_info
