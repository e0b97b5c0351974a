from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserPublic(BaseModel):
    """User without credentials. Built from a stored User; extra fields are dropped."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int
    email: str
    name: Optional[str] = None
    role: str
    created_at: datetime
