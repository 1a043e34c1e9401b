"""
Shared fixtures for engine tests.
"""

from datetime import datetime, timezone

import pytest

from tensor_srs.fsrs import EngineConfig
from tensor_srs.tensor import DefaultScheduler, MemoryState


@pytest.fixture
def config():
    """Default FSRS-6 configuration"""
    return EngineConfig.default()


@pytest.fixture
def scheduler():
    """Scheduler that uses S_new as the interval"""
    return DefaultScheduler()


@pytest.fixture
def now():
    """Fixed review timestamp"""
    return datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def on_time_state():
    """S=10, D=5, reviewed after 5 days"""
    return MemoryState(S=10.0, difficulty=5.0, t=5.0)
