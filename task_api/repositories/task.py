from ..models import Task
from .base import Repository


class TaskRepository(Repository[Task]):
    model = Task
    label = "Task"
    required_fields = ("title", "user_id")
