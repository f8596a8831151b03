from sqlmodel import SQLModel, Field
from uuid import uuid4

DEFAULT_ROLE = "User"


class User(SQLModel, table=True):
    """Registered user.

    ``email`` carries a unique index; the store rejects a second user with
    the same address and that rejection is reported as a conflict.
    """
    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    full_name: str
    email: str = Field(unique=True, index=True)
    password_hash: str
    role: str = Field(default=DEFAULT_ROLE)
