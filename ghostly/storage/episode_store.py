"""
JSON file storage for Ghostly.

The whole memory store lives in one JSON file. Every operation reads
the full file and every write replaces it, so the store is only safe
for a single process at a time: two processes appending at once can
lose an episode (last writer wins), though the file stays valid.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from ghostly.models import Episode, MemoryStore

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for memory file failures."""

    def __init__(self, message: str, path: Path):
        self.message = message
        self.path = path
        super().__init__(message)


class StorageUnavailable(StorageError):
    """Raised when the storage location cannot be created, read or written."""


class CorruptStore(StorageError):
    """Raised when the memory file exists but does not hold a valid store."""


class EpisodeStore:
    """
    Append-only log of episodes backed by a single JSON file.

    The file location is injected so tests can point the store at a
    temporary directory instead of the user's real memory.
    """

    def __init__(self, memory_file: Path):
        """
        Initialize the episode store.

        Args:
            memory_file: Path of the JSON memory file
        """
        self.memory_file = Path(memory_file)

    def ensure_initialized(self) -> None:
        """Create the storage directory and an empty memory file if missing. Idempotent."""
        try:
            self.memory_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create storage directory {self.memory_file.parent}: {e}")
            raise StorageUnavailable(
                f"Cannot create storage directory {self.memory_file.parent}: {e}",
                self.memory_file,
            ) from e

        if not self.memory_file.exists():
            self.save(MemoryStore())
            logger.info(f"Initialized memory file at {self.memory_file}")

    def load_all(self) -> MemoryStore:
        """
        Read the entire memory file.

        Returns:
            The parsed MemoryStore

        Raises:
            StorageUnavailable: If the file cannot be read
            CorruptStore: If the content is not a valid memory store
        """
        self.ensure_initialized()

        try:
            raw = self.memory_file.read_bytes()
        except OSError as e:
            logger.error(f"Cannot read memory file {self.memory_file}: {e}")
            raise StorageUnavailable(
                f"Cannot read memory file {self.memory_file}: {e}",
                self.memory_file,
            ) from e

        try:
            data = json.loads(raw.decode("utf-8"))
            return MemoryStore.model_validate(data)
        except (UnicodeDecodeError, json.JSONDecodeError, PydanticValidationError) as e:
            logger.error(f"Memory file {self.memory_file} is corrupt: {e}")
            raise CorruptStore(
                f"Memory file {self.memory_file} is corrupt: {e}",
                self.memory_file,
            ) from e

    def save(self, store: MemoryStore) -> None:
        """
        Write the whole store back to disk.

        Raises:
            StorageUnavailable: If the file cannot be written
        """
        content = json.dumps(store.to_json_dict(), indent=2, ensure_ascii=False)
        try:
            self.memory_file.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot write memory file {self.memory_file}: {e}")
            raise StorageUnavailable(
                f"Cannot write memory file {self.memory_file}: {e}",
                self.memory_file,
            ) from e

    def append(self, episode: Episode) -> None:
        """
        Append an episode at the tail of the store.

        Raises:
            ValueError: If an episode with the same id is already stored
        """
        store = self.load_all()

        if any(existing.id == episode.id for existing in store.episodes):
            raise ValueError(f"Episode {episode.id} already exists")

        store.episodes.append(episode)
        self.save(store)
        logger.info(f"Appended episode {episode.id} ({len(store.episodes)} total)")
