"""
Single-table persistence operations shared by every entity kind.

A repository wraps one request-scoped session.  Each operation makes at
most two store round-trips (read then write for update/delete) and hands
back an ``Ok``/``Err`` result instead of raising.  Store failures are
rolled back, logged with their traceback and reported as
``InternalError`` so no driver detail leaks into a response.
"""

import functools
import logging
from typing import Any, ClassVar, Dict, Generic, List, Tuple, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, Session, select

from ..errors import ConflictError, InternalError, NotFoundError, ValidationError
from ..results import Err, Ok, Result
from ..schemas.common import is_blank

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


def _store_operation(name: str):
    """Turn unexpected store errors raised by ``fn`` into ``InternalError``."""

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(self, *args, **kwargs):
            try:
                return fn(self, *args, **kwargs)
            except SQLAlchemyError:
                self.session.rollback()
                logger.exception("%s %s error", name, self.label)
                return Err(InternalError())

        return wrapper

    return decorator


class Repository(Generic[ModelT]):
    model: ClassVar[Type[SQLModel]]
    label: ClassVar[str] = "Record"
    required_fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, session: Session):
        self.session = session

    def conflict(self) -> ConflictError:
        return ConflictError(f"{self.label} already exists")

    def not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    @_store_operation("Create")
    def create(self, fields: Dict[str, Any]) -> Result[str]:
        missing = [name for name in self.required_fields if is_blank(fields.get(name))]
        if missing:
            return Err(ValidationError.for_fields(missing))

        record = self.model(**fields)
        record_id = record.id
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return Err(self.conflict())
        return Ok(record_id)

    @_store_operation("Retrieve")
    def find_all(self) -> Result[List[ModelT]]:
        return Ok(list(self.session.exec(select(self.model)).all()))

    @_store_operation("Retrieve")
    def find_by_id(self, record_id: str) -> Result[ModelT]:
        # Ids are opaque strings, so a malformed id is simply one that matches nothing.
        record = self.session.get(self.model, record_id)
        if record is None:
            return Err(self.not_found())
        return Ok(record)

    @_store_operation("Update")
    def update(self, record_id: str, changes: Dict[str, Any]) -> Result[ModelT]:
        record = self.session.get(self.model, record_id)
        if record is None:
            return Err(self.not_found())

        for field, value in changes.items():
            setattr(record, field, value)

        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return Err(self.conflict())
        self.session.refresh(record)
        return Ok(record)

    @_store_operation("Delete")
    def delete(self, record_id: str) -> Result[None]:
        record = self.session.get(self.model, record_id)
        if record is None:
            return Err(self.not_found())

        self.session.delete(record)
        self.session.commit()
        return Ok(None)
