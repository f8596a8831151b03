from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import ValidationError
from ..models import Task
from ..repositories import TaskRepository
from ..results import Err
from ..schemas import CreatedResponse, MessageResponse, TaskCreate, TaskRead, TaskUpdate
from .common import ERROR_RESPONSES, error_response

router = APIRouter()


def _build_task_payload(task: Task) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status,
        "userId": task.user_id,
    }


@router.post(
    "/tasks",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_task(task: TaskCreate, db: Session = Depends(get_db)):
    """Create a new task.

    ``userId`` is stored as given; it is not checked against existing users.
    """
    missing = task.missing_or_invalid()
    if missing:
        return error_response(ValidationError.for_fields(missing))

    result = TaskRepository(db).create(task.model_dump(exclude_unset=True))
    if isinstance(result, Err):
        return error_response(result.error)
    return {"message": "Task created successfully", "id": result.value}


@router.get("/tasks", response_model=List[TaskRead], responses=ERROR_RESPONSES)
def get_tasks(db: Session = Depends(get_db)):
    result = TaskRepository(db).find_all()
    if isinstance(result, Err):
        return error_response(result.error)
    return [_build_task_payload(task) for task in result.value]


@router.get("/tasks/{task_id}", response_model=TaskRead, responses=ERROR_RESPONSES)
def get_task(task_id: str, db: Session = Depends(get_db)):
    result = TaskRepository(db).find_by_id(task_id)
    if isinstance(result, Err):
        return error_response(result.error)
    return _build_task_payload(result.value)


@router.put("/tasks/{task_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def update_task(task_id: str, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """Update a task; omitted fields keep their stored values."""
    invalid = task_update.missing_or_invalid(partial=True)
    if invalid:
        return error_response(ValidationError.for_fields(invalid))

    result = TaskRepository(db).update(task_id, task_update.model_dump(exclude_unset=True))
    if isinstance(result, Err):
        return error_response(result.error)
    return {"message": "Task updated successfully"}


@router.delete("/tasks/{task_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_task(task_id: str, db: Session = Depends(get_db)):
    result = TaskRepository(db).delete(task_id)
    if isinstance(result, Err):
        return error_response(result.error)
    return {"message": "Task deleted successfully"}
