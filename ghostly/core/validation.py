"""
Input validation for Ghostly.

Rejects captures that carry no text before they reach the store.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class EmptyInputError(ValidationError):
    """Raised when a capture is requested with no text."""


class ValidationLayer:
    """Validates user input before it reaches storage."""

    @staticmethod
    def validate_capture_text(raw_text: Optional[str]) -> None:
        """
        Validate text submitted for capture.

        Raises:
            EmptyInputError: If the text is missing, empty or only whitespace
        """
        if raw_text is None or not raw_text.strip():
            raise EmptyInputError("No text selected", field="raw_text")

    @staticmethod
    def normalize_query(query: Optional[str]) -> Optional[str]:
        """
        Normalize a search query.

        An absent or empty query becomes None, meaning "no text filter".
        Anything else is kept verbatim; substring matching is literal.
        """
        if not query:
            return None
        return query
