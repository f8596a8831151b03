from pydantic import BaseModel, Field
from typing import Optional

from .common import Payload


class TaskCreate(Payload):
    required = ("title", "user_id")
    nullable = ("description",)

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")


class TaskUpdate(TaskCreate):
    """Partial update; only fields present in the body are applied."""
    pass


class TaskRead(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    status: str
    user_id: str = Field(alias="userId")

    class Config:
        populate_by_name = True
