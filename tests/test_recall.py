"""
Tests for recall.
"""

import pytest

from ghostly.models import MemoryStore
from ghostly.core.recall import Recall, matches


@pytest.fixture
def scenario(make_episode):
    """A, B in scope abc123 and C in def456, appended in that order."""
    a = make_episode("git rebase -i HEAD~3", scope="abc123", episode_id="1")
    b = make_episode("npm run build", scope="abc123", episode_id="2")
    c = make_episode("git status", scope="def456", episode_id="3")
    return MemoryStore(episodes=[a, b, c]), a, b, c


class TestScenario:
    """The capture-then-search walkthrough."""

    def test_query_matches_in_scope_only(self, scenario):
        store, a, b, c = scenario

        assert Recall.search(store, "abc123", "git", 10) == [a]

    def test_empty_query_lists_most_recent_first(self, scenario):
        store, a, b, c = scenario

        assert Recall.search(store, "abc123", "", 10) == [b, a]

    def test_unknown_scope_is_empty(self, scenario):
        store, a, b, c = scenario

        assert Recall.search(store, "zzz999", "", 10) == []


class TestMatching:
    """Tests for the text predicate."""

    def test_case_insensitive_body_match(self, make_episode):
        """Test that queries match regardless of case."""
        episode = make_episode("Fix Nginx config")
        store = MemoryStore(episodes=[episode])

        assert Recall.search(store, "abc123", "nginx") == [episode]
        assert Recall.search(store, "abc123", "FIX") == [episode]

    def test_summary_match(self, make_episode):
        """Test matching against the summary alone."""
        episode = make_episode("ls -la").model_copy(update={"summary": "listing"})

        assert matches(episode, "LIST")

    def test_substring_not_token(self, make_episode):
        """Test that matching is plain containment, spanning word boundaries."""
        episode = make_episode("docker compose up")

        assert matches(episode, "ker comp")
        assert not matches(episode, "compose docker")

    def test_no_results_is_empty_list(self, scenario):
        """Test that no match returns an empty list, not an error."""
        store, *_ = scenario

        assert Recall.search(store, "abc123", "no-such-token") == []

    def test_none_query_skips_filter(self, scenario):
        store, a, b, c = scenario

        assert Recall.search(store, "abc123", None) == [b, a]


class TestScoping:
    """Tests for scope isolation."""

    def test_other_scope_never_returned(self, make_episode):
        """Test that episodes from other scopes never leak in."""
        mine = make_episode("make test", scope="s1", episode_id="1")
        theirs = make_episode("make test", scope="s2", episode_id="2")
        store = MemoryStore(episodes=[mine, theirs])

        assert Recall.search(store, "s1", "") == [mine]
        assert Recall.search(store, "s1", "make") == [mine]


class TestBound:
    """Tests for the result bound."""

    def test_limit_returns_most_recent(self, make_episode):
        """Test that only the newest `limit` matches come back, newest first."""
        episodes = [make_episode(f"echo {i}", episode_id=str(i)) for i in range(15)]
        store = MemoryStore(episodes=episodes)

        results = Recall.search(store, "abc123", "echo", limit=10)

        assert len(results) == 10
        assert [e.id for e in results] == [str(i) for i in range(14, 4, -1)]

    def test_default_limit_is_ten(self, make_episode):
        episodes = [make_episode(f"echo {i}", episode_id=str(i)) for i in range(12)]

        assert len(Recall.search(MemoryStore(episodes=episodes), "abc123")) == 10

    def test_limit_counts_matches_not_episodes(self, make_episode):
        """Test that the bound applies after filtering."""
        episodes = [
            make_episode("git log" if i % 2 else "ls", episode_id=str(i))
            for i in range(20)
        ]

        results = Recall.search(MemoryStore(episodes=episodes), "abc123", "git", limit=3)

        assert [e.id for e in results] == ["19", "17", "15"]

    def test_non_positive_limit(self, scenario):
        store, *_ = scenario

        assert Recall.search(store, "abc123", "", limit=0) == []

    def test_search_does_not_reorder_store(self, scenario):
        """Test that reversing results leaves the store untouched."""
        store, a, b, c = scenario

        Recall.search(store, "abc123")

        assert store.episodes == [a, b, c]
