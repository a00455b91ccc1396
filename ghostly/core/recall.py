"""
Recall for Ghostly.

Answers "what did I do before, in this project, matching this query":
- Scope filtering (exact match, no fallback)
- Case-insensitive substring matching on summary or body
- Recency bound: the last N matches, most recent first
"""

import logging
from typing import Optional

from ghostly.models import Episode, MemoryStore

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


def matches(episode: Episode, query: str) -> bool:
    """Check whether query occurs in the episode's summary or body, ignoring case."""
    needle = query.lower()
    return needle in episode.summary.lower() or needle in episode.body.lower()


class Recall:
    """Read-side query over a loaded MemoryStore."""

    @staticmethod
    def search(
        store: MemoryStore,
        scope: str,
        query: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Episode]:
        """
        Find the most recent episodes in a scope matching a query.

        Args:
            store: The loaded memory store
            scope: Scope id to restrict results to
            query: Substring to look for; None or "" returns every episode in scope
            limit: Maximum number of episodes to return

        Returns:
            At most `limit` episodes, most recently appended first. An empty
            list when nothing matches.
        """
        if limit <= 0:
            return []

        results = [e for e in store.episodes if e.project_scope == scope]
        if query:
            results = [e for e in results if matches(e, query)]

        # episodes are insertion ordered, so the tail holds the newest matches
        results = results[-limit:]
        results.reverse()

        logger.debug(f"Recall found {len(results)} episodes in scope {scope} for query {query!r}")
        return results
