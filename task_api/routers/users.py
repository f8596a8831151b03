from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..context import AppContext, get_context
from ..database import get_db
from ..errors import ValidationError
from ..models import User
from ..repositories import UserRepository
from ..results import Err
from ..schemas import CreatedResponse, MessageResponse, SignupRequest, UserCreate, UserRead, UserUpdate
from .common import ERROR_RESPONSES, error_response

router = APIRouter()


def _build_user_payload(user: User) -> dict:
    return {
        "id": user.id,
        "fullName": user.full_name,
        "email": user.email,
        "role": user.role,
    }


def register_user(payload: SignupRequest, context: AppContext, db: Session, message: str):
    """Validate, hash and store a new user; shared by signup and admin create."""
    missing = payload.missing_or_invalid()
    if missing:
        return error_response(ValidationError.for_fields(missing))

    fields = payload.model_dump(exclude={"password"}, exclude_unset=True)
    fields["password_hash"] = context.hasher.hash(payload.password)

    result = UserRepository(db).create(fields)
    if isinstance(result, Err):
        return error_response(result.error)
    return {"message": message, "id": result.value}


@router.post(
    "/users",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_user(
    user: UserCreate,
    context: AppContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Create a new user."""
    return register_user(user, context, db, "User created successfully")


@router.get("/users", response_model=List[UserRead], responses=ERROR_RESPONSES)
def get_users(db: Session = Depends(get_db)):
    """Retrieve all users."""
    result = UserRepository(db).find_all()
    if isinstance(result, Err):
        return error_response(result.error)
    return [_build_user_payload(user) for user in result.value]


@router.get("/users/{user_id}", response_model=UserRead, responses=ERROR_RESPONSES)
def get_user(user_id: str, db: Session = Depends(get_db)):
    """Retrieve a user by ID."""
    result = UserRepository(db).find_by_id(user_id)
    if isinstance(result, Err):
        return error_response(result.error)
    return _build_user_payload(result.value)


@router.put("/users/{user_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def update_user(
    user_id: str,
    user_update: UserUpdate,
    context: AppContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Update an existing user; omitted fields keep their stored values."""
    invalid = user_update.missing_or_invalid(partial=True)
    if invalid:
        return error_response(ValidationError.for_fields(invalid))

    changes = user_update.model_dump(exclude_unset=True)
    if "password" in changes:
        changes["password_hash"] = context.hasher.hash(changes.pop("password"))

    result = UserRepository(db).update(user_id, changes)
    if isinstance(result, Err):
        return error_response(result.error)
    return {"message": "User updated successfully"}


@router.delete("/users/{user_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    """Delete a user. The user's tasks are left in place."""
    result = UserRepository(db).delete(user_id)
    if isinstance(result, Err):
        return error_response(result.error)
    return {"message": "User deleted successfully"}
