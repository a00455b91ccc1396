"""Core engine components for Ghostly."""

from ghostly.core.memory_manager import MemoryManager
from ghostly.core.project_scope import NO_PROJECT_SCOPE, ProjectScope
from ghostly.core.recall import Recall
from ghostly.core.validation import EmptyInputError, ValidationError, ValidationLayer

__all__ = [
    "MemoryManager",
    "ProjectScope",
    "NO_PROJECT_SCOPE",
    "Recall",
    "ValidationLayer",
    "ValidationError",
    "EmptyInputError",
]
