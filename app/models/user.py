from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """Stored user record. Holds the password hash; never returned as-is by the API.

    The store builds records without validation; request schemas validate at the edge.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    email: str | None = None
    password: str = ""
    name: str | None = None
    role: str = "attendee"  # attendee/organizer
    created_at: datetime = Field(default_factory=utc_now)
