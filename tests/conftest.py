"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from birdly_engine.config import get_settings  # noqa: E402
from birdly_engine.core.mastery import ConceptGroup, MasteryEntity, PracticeSet  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow statistical tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


def make_group(label: str, *masteries: float, primary_first: bool = True) -> ConceptGroup:
    """Build a group whose first entity is the primary variant."""
    entities = []
    for index, mastery in enumerate(masteries or (0.0,)):
        variant = "primary" if index == 0 and primary_first else f"alt{index}"
        entities.append(MasteryEntity(variant=variant, mastery=mastery))
    return ConceptGroup(label=label, entities=entities)


@pytest.fixture
def group_factory():
    """Factory fixture for concept groups."""
    return make_group


@pytest.fixture
def new_practice_set():
    """Five never-seen birds with two images each."""
    labels = ["Wren", "Robin", "Magpie", "Blackbird", "Starling"]
    return PracticeSet(
        groups=[make_group(label, 0.0, 0.0) for label in labels],
        title="Garden Birds",
    )
