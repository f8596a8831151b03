from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..context import AppContext, get_context
from ..database import get_db
from ..schemas import CreatedResponse, SignupRequest
from .common import ERROR_RESPONSES
from .users import register_user

router = APIRouter()


@router.post(
    "/signup",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def signup(
    user: SignupRequest,
    context: AppContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Create a new user account with the default role."""
    return register_user(user, context, db, "User registered successfully")
