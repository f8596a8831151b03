from .task import Task
from .user import User

# Export all models for easy importing
__all__ = ["Task", "User"]
