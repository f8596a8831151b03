from .common import CreatedResponse, ErrorResponse, MessageResponse
from .task import TaskCreate, TaskRead, TaskUpdate
from .user import SignupRequest, UserCreate, UserRead, UserUpdate

__all__ = [
    "CreatedResponse",
    "ErrorResponse",
    "MessageResponse",
    "SignupRequest",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
