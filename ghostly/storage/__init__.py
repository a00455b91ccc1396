"""Storage layer for Ghostly."""

from ghostly.storage.episode_store import (
    CorruptStore,
    EpisodeStore,
    StorageError,
    StorageUnavailable,
)

__all__ = ["EpisodeStore", "StorageError", "StorageUnavailable", "CorruptStore"]
