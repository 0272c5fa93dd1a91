"""Shared fixtures for Observatory tests."""

import tempfile
from pathlib import Path

import pytest

from observatory.config import EngineConfig
from observatory.engine.core import Observatory
from observatory.engine.scheduler import Scheduler
from observatory.sim.random_source import RandomSource


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def scheduler() -> Scheduler:
    """Scheduler on a fresh virtual clock."""
    return Scheduler()


@pytest.fixture
def engine():
    """Seeded engine on a virtual clock."""
    obs = Observatory(rng=RandomSource(seed=42))
    yield obs
    obs.close()


@pytest.fixture
def empty_engine():
    """Engine with no seeded history."""
    obs = Observatory(config=EngineConfig(seed_history=False), rng=RandomSource(seed=7))
    yield obs
    obs.close()
