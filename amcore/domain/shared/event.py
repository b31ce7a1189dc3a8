"""Domain events published to in-process subscribers."""

from datetime import datetime
from typing import NewType
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from amcore.domain.shared.model.aggregate import utc_now

EventId = NewType("EventId", UUID)


class Event(BaseModel):
    """Base class for domain events."""

    model_config = ConfigDict(frozen=True)

    id: EventId
    created_at: datetime = Field(default_factory=utc_now)
