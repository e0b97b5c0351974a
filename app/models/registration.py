from datetime import datetime

from pydantic import BaseModel, Field

from app.models.user import utc_now


class Registration(BaseModel):
    id: int

    event_id: int
    user_id: int

    registered_at: datetime = Field(default_factory=utc_now)
