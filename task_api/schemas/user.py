from pydantic import BaseModel, Field
from typing import Optional

from .common import Payload


class SignupRequest(Payload):
    required = ("full_name", "email", "password")

    full_name: Optional[str] = Field(None, alias="fullName")
    email: Optional[str] = None
    password: Optional[str] = None


class UserCreate(SignupRequest):
    """Admin-side user creation; same as signup plus an optional role."""
    role: Optional[str] = None


class UserUpdate(Payload):
    """Partial update; only fields present in the body are applied."""
    required = ("full_name", "email", "password")

    full_name: Optional[str] = Field(None, alias="fullName")
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserRead(BaseModel):
    id: str
    full_name: str = Field(alias="fullName")
    email: str
    role: str

    class Config:
        populate_by_name = True
