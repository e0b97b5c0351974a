from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from .user import UserPublic


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: Optional[str] = Field(None, max_length=120)
    role: Literal["attendee", "organizer"] = "attendee"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserPublic
