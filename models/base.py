from __future__ import annotations

from datetime import datetime, timezone
from beanie import Document
from pydantic import Field


def utcnow() -> datetime:
    # naive UTC, the form Mongo hands back on reads
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseDoc(Document):
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    async def touch(self) -> None:
        """Bump updated_at and persist."""
        self.updated_at = utcnow()
        await self.save()
