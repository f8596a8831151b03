import logging

from fastapi import Depends
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine

from .context import AppContext, get_context

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task, User  # noqa: F401

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # Server databases: check pooled connections before handing them out
    return create_engine(database_url, echo=False, pool_pre_ping=True)


def create_tables(engine: Engine) -> bool:
    """Create all database tables.

    Returns ``False`` when the store cannot be reached; the error is logged
    and the caller keeps running so requests report 500 until it recovers.
    """
    try:
        SQLModel.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Database connection error")
        return False
    logger.info("Database connected")
    return True


def get_db(context: AppContext = Depends(get_context)):
    """Dependency to get database session."""
    if not context.tables_ready:
        # Startup could not reach the store; try again now it may be back.
        context.tables_ready = create_tables(context.engine)
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()
