from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field

from .user import UserPublic


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    date: datetime
    location: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=1)


class EventUpdate(BaseModel):
    """Partial update: only the fields sent are applied."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=1)


class EventPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="allow")

    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    capacity: Optional[int] = None
    organizer_id: Optional[int] = None
    participants: List[int] = []
    created_at: datetime
    updated_at: datetime


class EventWithParticipants(EventPublic):
    participant_details: List[UserPublic] = []
