from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import utc_now


class Event(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int

    title: str | None = None
    description: str | None = None
    date: datetime | None = None
    location: str | None = None
    capacity: int | None = None

    organizer_id: int | None = None

    # user ids, mirrors the registrations of this event
    participants: list[int] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
