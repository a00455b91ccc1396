"""
Ghostly - Local episodic memory for terminal commands.

Remembers the commands and fixes you capture, scoped to the project you
were working in, and finds them again with a plain substring search.
"""

from ghostly.models import Episode, MemoryStore, create_episode
from ghostly.core.memory_manager import MemoryManager
from ghostly.config import Config

__version__ = "0.1.0"
__all__ = [
    "Episode",
    "MemoryStore",
    "create_episode",
    "MemoryManager",
    "Config",
]
