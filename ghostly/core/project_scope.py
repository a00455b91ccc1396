"""
Project scoping for Ghostly.

Episodes are partitioned by a short hash of the project root path so that
recall in one project never surfaces another project's snippets. The hash
is a grouping key, not a security boundary.
"""

import hashlib
import os
from pathlib import Path
from typing import Optional

# Scope shared by everything captured with no project open
NO_PROJECT_SCOPE = "unknown"
SCOPE_WIDTH = 8


class ProjectScope:
    """Derives the scope id for a project root path."""

    def __init__(self, normalize: bool = False):
        """
        Initialize the scope resolver.

        Args:
            normalize: Resolve symlinks, trailing separators and case before
                hashing. Off by default so ids match files written by
                earlier versions, which hashed the raw path.
        """
        self.normalize = normalize

    def current(self, root_path: Optional[str] = None) -> str:
        """
        Get the scope id for a project root.

        Args:
            root_path: Absolute path of the project root, or None if no
                project is open

        Returns:
            An 8 character hex digest, or NO_PROJECT_SCOPE
        """
        if not root_path:
            return NO_PROJECT_SCOPE

        path = str(root_path)
        if self.normalize:
            path = os.path.normcase(str(Path(path).resolve()))

        return hashlib.md5(path.encode("utf-8")).hexdigest()[:SCOPE_WIDTH]
