from .base import Repository
from .task import TaskRepository
from .user import UserRepository

__all__ = ["Repository", "TaskRepository", "UserRepository"]
