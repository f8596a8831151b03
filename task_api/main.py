"""
Application factory for the Task API.

``create_app`` builds the application context (settings, engine, session
factory, password hasher), installs the error handlers and mounts the
routers.  The module-level ``app`` is what uvicorn serves::

    uvicorn task_api.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session

from .config import Settings
from .context import AppContext
from .database import build_engine, create_tables
from .errors import InternalError, ValidationError
from .logging_config import setup_logging
from .routers import auth, tasks, users
from .routers.common import error_response
from .security import PasswordHasher

logger = logging.getLogger(__name__)


def _field_names(exc: RequestValidationError) -> list:
    names = []
    for error in exc.errors():
        # loc is ("body", <field>, ...) for field errors; an unparseable
        # document reports ("body", <char offset>) instead.
        if error.get("type") == "json_invalid":
            name = "body"
        else:
            loc = [str(part) for part in error.get("loc", ())[1:]]
            name = ".".join(loc) or "body"
        if name not in names:
            names.append(name)
    return names


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    engine = build_engine(settings.database_url)
    context = AppContext(
        settings=settings,
        engine=engine,
        session_factory=sessionmaker(bind=engine, class_=Session, autoflush=False),
        hasher=PasswordHasher(),
    )

    app = FastAPI(
        title=settings.project_name,
        description="User and task management API",
        version=settings.api_version,
    )
    app.state.context = context

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(ValidationError.for_fields(_field_names(exc)))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(InternalError())

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api", tags=["users"])
    app.include_router(tasks.router, prefix="/api", tags=["tasks"])

    # A failed connection is logged, not fatal; routes answer 500 until the store is back.
    @app.on_event("startup")
    def on_startup():
        context.tables_ready = create_tables(context.engine)

    @app.on_event("shutdown")
    def on_shutdown():
        context.dispose()

    @app.get("/")
    def read_root():
        return {"message": settings.project_name}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
