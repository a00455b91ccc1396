"""
Data models for Ghostly.

These Pydantic models define the on-disk shape of the memory file.
Python attribute names differ from the stored keys for a few fields
(``created_at``/``timestamp``, ``project_scope``/``project_hash``,
``body``/``fix``); the stored names are kept so files written by
earlier Ghostly versions stay readable.
"""

import time
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, TypeAdapter, field_validator

_DATETIME = TypeAdapter(datetime)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class Episode(BaseModel):
    """One captured snippet plus its metadata. Immutable once created."""

    id: str
    created_at: str = Field(..., alias="timestamp")
    project_scope: str = Field(..., alias="project_hash")
    summary: str = ""
    body: str = Field(..., alias="fix")
    keywords: str = ""

    class Config:
        frozen = True
        populate_by_name = True
        extra = "allow"  # unknown fields survive a write-back

    @field_validator("created_at", mode="before")
    @classmethod
    def _keep_timestamp_text(cls, value: Any) -> Any:
        # stored text is kept as written so old records rewrite unchanged
        if isinstance(value, datetime):
            return format_timestamp(value)
        if isinstance(value, str):
            try:
                _DATETIME.validate_python(value)
            except ValueError:
                raise ValueError(f"Invalid timestamp: {value!r}") from None
        return value

    @property
    def created_time(self) -> datetime:
        """The creation instant parsed from the stored timestamp."""
        return _DATETIME.validate_python(self.created_at)


class MemoryStore(BaseModel):
    """The persisted aggregate: episodes in insertion order, plus reserved events."""

    events: list[Any] = Field(default_factory=list)
    episodes: list[Episode] = Field(default_factory=list)

    class Config:
        extra = "allow"

    def to_json_dict(self) -> dict:
        """Dump using the on-disk field names."""
        return self.model_dump(mode="json", by_alias=True)


def first_token(text: str) -> str:
    """First whitespace-delimited token of text, or "" if there is none."""
    parts = text.split()
    return parts[0] if parts else ""


def create_episode(
    raw_text: str,
    scope: str,
    previous_id: Optional[str] = None,
) -> Episode:
    """
    Build a new Episode from captured text.

    The id is the creation instant in epoch milliseconds. If previous_id
    is numeric and the clock has not moved past it, the id is bumped to
    previous_id + 1 so ids keep increasing in creation order.

    Args:
        raw_text: The captured text, stored verbatim as the body
        scope: Project scope id for the episode
        previous_id: Highest id already in the store, if any

    Returns:
        The new Episode (not yet persisted)
    """
    millis = time.time_ns() // 1_000_000
    if previous_id is not None and previous_id.isdigit():
        millis = max(millis, int(previous_id) + 1)

    label = first_token(raw_text)
    return Episode(
        id=str(millis),
        created_at=datetime.fromtimestamp(millis // 1000, tz=timezone.utc).replace(
            microsecond=(millis % 1000) * 1000
        ),
        project_scope=scope,
        summary=label,
        body=raw_text,
        keywords=label,
    )
