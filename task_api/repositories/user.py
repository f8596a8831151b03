from ..models import User
from .base import Repository


class UserRepository(Repository[User]):
    model = User
    label = "User"
    required_fields = ("full_name", "email", "password_hash")
