from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .config import Settings
from .security import PasswordHasher


@dataclass
class AppContext:
    """Everything a request needs that outlives the request.

    Built once by ``create_app`` and stored on ``app.state.context``;
    handlers receive it through :func:`get_context`.
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    hasher: PasswordHasher
    tables_ready: bool = False

    def dispose(self) -> None:
        self.engine.dispose()


def get_context(request: Request) -> AppContext:
    return request.app.state.context
