"""
Memory Manager for Ghostly.

The seam between the user-facing layer and the store:
- capture: save a snippet for the current project
- search: find snippets in the current project
- list_recent: the latest snippets in the current project
"""

import logging
from typing import Optional

from ghostly.models import Episode, create_episode
from ghostly.storage.episode_store import EpisodeStore
from ghostly.core.project_scope import ProjectScope
from ghostly.core.recall import DEFAULT_LIMIT, Recall
from ghostly.core.validation import ValidationLayer

logger = logging.getLogger(__name__)


class MemoryManager:
    """
    Coordinates scoping, storage and recall.

    Presentation (prompts, pick lists, clipboard) belongs to the caller;
    everything here just returns data or raises.
    """

    def __init__(
        self,
        store: EpisodeStore,
        max_results: int = DEFAULT_LIMIT,
        normalize_paths: bool = False,
    ):
        """Initialize the memory manager."""
        self.store = store
        self.max_results = max_results
        self.scope = ProjectScope(normalize=normalize_paths)
        self.validation = ValidationLayer()

    def scope_for(self, root_path: Optional[str] = None) -> str:
        """Get the scope id used for a project root."""
        return self.scope.current(root_path)

    def capture(self, raw_text: Optional[str], root_path: Optional[str] = None) -> Episode:
        """
        Capture a snippet for the project at root_path.

        Args:
            raw_text: The captured text, stored verbatim
            root_path: Project root, or None when no project is open

        Returns:
            The stored Episode

        Raises:
            EmptyInputError: If raw_text is empty; nothing is written
        """
        self.validation.validate_capture_text(raw_text)

        scope = self.scope_for(root_path)
        memory = self.store.load_all()
        # ids in files from older versions may be out of order
        highest = max((int(e.id) for e in memory.episodes if e.id.isdigit()), default=None)
        previous_id = str(highest) if highest is not None else None

        episode = create_episode(raw_text, scope, previous_id=previous_id)
        self.store.append(episode)

        logger.info(f"Captured episode {episode.id} in scope {scope}")
        return episode

    def search(
        self,
        query: Optional[str],
        root_path: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[Episode]:
        """
        Search the current project's episodes.

        Args:
            query: Substring to match; None or "" lists everything
            root_path: Project root, or None when no project is open
            limit: Max results (capped at max_results)

        Returns:
            Matching episodes, most recent first
        """
        query = self.validation.normalize_query(query)
        limit = self.max_results if limit is None else min(limit, self.max_results)

        memory = self.store.load_all()
        return Recall.search(memory, self.scope_for(root_path), query, limit)

    def list_recent(
        self,
        root_path: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[Episode]:
        """Get the most recent episodes for the current project."""
        return self.search(None, root_path, limit)
