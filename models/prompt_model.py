"""Prompt data model definitions.

Updates: v0.2.0 - 2026-10-13 - Read and write the extension storage record format.
Updates: v0.1.0 - 2026-10-12 - Initial Prompt schema with serialization helpers.
"""
from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

DEFAULT_CATEGORY = "Uncategorized"


def _utc_now() -> datetime:
    """Return an aware UTC timestamp."""
    return datetime.now(UTC)


def _ensure_uuid(value: Any) -> uuid.UUID:
    """Parse arbitrary UUID representations into a uuid.UUID instance."""
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


def _ensure_datetime(value: Any) -> datetime:
    """Parse epoch-millisecond numbers, isoformat strings, or datetimes."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if value is None:
        return _utc_now()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=UTC)
    parsed = datetime.fromisoformat(str(value))
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def _to_epoch_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)


@dataclass(slots=True)
class Prompt:
    """Dataclass representation of a stored prompt entry."""

    id: uuid.UUID
    title: str
    content: str
    category: str = DEFAULT_CATEGORY
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def create(cls, title: str, content: str, category: str | None = None) -> Prompt:
        """Return a new prompt with a fresh identifier and matching timestamps."""
        now = _utc_now()
        return cls(
            id=uuid.uuid4(),
            title=title,
            content=content,
            category=category or DEFAULT_CATEGORY,
            created_at=now,
            updated_at=now,
        )

    def to_record(self) -> dict[str, Any]:
        """Return the storage representation (camelCase keys, epoch milliseconds)."""
        return {
            "id": str(self.id),
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "createdAt": _to_epoch_millis(self.created_at),
            "updatedAt": _to_epoch_millis(self.updated_at),
        }

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> Prompt:
        """Create a Prompt from a storage record."""
        created_at = _ensure_datetime(data.get("createdAt"))
        return cls(
            id=_ensure_uuid(data.get("id") or uuid.uuid4()),
            title=str(data["title"]),
            content=str(data["content"]),
            category=str(data.get("category") or DEFAULT_CATEGORY),
            created_at=created_at,
            updated_at=_ensure_datetime(data.get("updatedAt") or created_at),
        )


__all__ = ["DEFAULT_CATEGORY", "Prompt"]
