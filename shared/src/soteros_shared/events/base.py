from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from soteros_shared.enums import DomainEventType


class EventMetadata(BaseModel):
    event_id: UUID = Field(default_factory=uuid4)
    event_type: DomainEventType
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1
