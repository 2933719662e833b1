"""Base document for plain admin-managed records."""

from datetime import datetime
from typing import Any

from beanie import Document
from pydantic import Field, field_validator

from app.domain.utils.clock import parse_mongo_datetime, utc_now


class RecordDocument(Document):
    """Document with creation/update timestamps.

    Subclasses are plain records: admin-settable fields and no invariants
    beyond their own field validation.
    """

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _parse_timestamps(cls, v: Any) -> Any:
        return parse_mongo_datetime(v)

    def to_out(self) -> dict[str, Any]:
        """JSON-safe representation with the ObjectId exposed as `id`."""
        data = self.model_dump(mode="json", exclude={"revision_id"})
        data["id"] = str(self.id) if self.id else None
        return data
