"""
Shared pytest fixtures for Ghostly tests.
"""

from datetime import datetime, timezone

import pytest

from ghostly.models import Episode
from ghostly.storage.episode_store import EpisodeStore
from ghostly.core.memory_manager import MemoryManager


@pytest.fixture
def memory_file(tmp_path):
    """Path to a memory file that does not exist yet."""
    return tmp_path / "ghostly" / "memory.json"


@pytest.fixture
def store(memory_file):
    """EpisodeStore at a temp path."""
    return EpisodeStore(memory_file)


@pytest.fixture
def manager(store):
    """MemoryManager wired to the temp store."""
    return MemoryManager(store=store)


@pytest.fixture
def make_episode():
    """Factory for episodes with fixed ids and timestamps."""
    def _make(body: str, scope: str = "abc123", episode_id: str = "1000") -> Episode:
        summary = body.split()[0] if body.split() else ""
        return Episode(
            id=episode_id,
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            project_scope=scope,
            summary=summary,
            body=body,
            keywords=summary,
        )
    return _make
