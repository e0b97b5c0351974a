from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .event import EventPublic


class RegistrationPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    user_id: int
    registered_at: datetime


class RegistrationWithEvent(RegistrationPublic):
    # None when the event was deleted after the registration was read
    event: Optional[EventPublic] = None
