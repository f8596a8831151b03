from sqlmodel import SQLModel, Field
from typing import Optional
from uuid import uuid4

DEFAULT_STATUS = "Pending"


class Task(SQLModel, table=True):
    """Unit of work owned by a user.

    ``user_id`` is a plain indexed column, not a foreign key: tasks may name
    users that do not exist, and deleting a user leaves its tasks in place.
    """
    __tablename__ = "tasks"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    title: str
    description: Optional[str] = None
    status: str = Field(default=DEFAULT_STATUS)
    user_id: str = Field(index=True)
