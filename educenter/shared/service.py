"""Generic service - uniform CRUD behavior and error mapping"""

import logging
from typing import Any, Optional

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .repository import CrudRepository

logger = logging.getLogger(__name__)


def describe_error(exc: SQLAlchemyError) -> str:
    """Database driver message behind an ORM exception, if any"""
    original = getattr(exc, "orig", None)
    if original is not None and str(original):
        return str(original)
    return str(exc)


class CrudService:
    """
    Service layer for one resource.

    Lookups that find nothing raise 404; any ORM failure rolls the session
    back and raises 500 carrying the database message.
    """

    def __init__(self, db: Session, repo: CrudRepository, label: str, plural: str):
        self.db = db
        self.repo = repo
        self.label = label
        self.plural = plural

    def fail(self, exc: SQLAlchemyError, fallback: str) -> HTTPException:
        self.db.rollback()
        message = describe_error(exc) or fallback
        logger.error(f"❌ {fallback} {message}")
        return HTTPException(status_code=500, detail=message)

    def not_found(self, record_id: int) -> HTTPException:
        return HTTPException(status_code=404, detail=f"Not found {self.label} with id {record_id}.")

    # Hooks for resources that transform values before they are stored
    def before_create(self, values: dict[str, Any]) -> dict[str, Any]:
        return values

    def before_update(self, record, values: dict[str, Any]) -> dict[str, Any]:
        return values

    def list(
        self,
        filters: Optional[dict[str, Any]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list:
        try:
            return self.repo.list(self.db, filters, limit, offset)
        except SQLAlchemyError as e:
            raise self.fail(e, f"Some error occurred while retrieving {self.plural}.") from e

    def get(self, record_id: int):
        try:
            record = self.repo.get_by_id(self.db, record_id)
        except SQLAlchemyError as e:
            raise self.fail(e, f"Some error occurred while retrieving the {self.label}.") from e
        if not record:
            raise self.not_found(record_id)
        return record

    def list_related(self, record_id: int, attribute: str) -> list:
        """Records reached through one of the parent's relationships"""
        record = self.get(record_id)
        try:
            return sorted(getattr(record, attribute), key=lambda related: related.id)
        except SQLAlchemyError as e:
            raise self.fail(e, f"Some error occurred while retrieving the {self.label} {attribute}.") from e

    def create(self, data: BaseModel):
        values = self.before_create(data.model_dump(exclude_unset=True))
        try:
            record = self.repo.create(self.db, **values)
        except SQLAlchemyError as e:
            raise self.fail(e, f"Some error occurred while creating the {self.label}.") from e
        logger.info(f"✅ Created {self.label} {record.id}")
        return record

    def update(self, record_id: int, data: BaseModel):
        record = self.get(record_id)
        values = self.before_update(record, data.model_dump(exclude_unset=True))
        try:
            return self.repo.update(self.db, record, **values)
        except SQLAlchemyError as e:
            raise self.fail(e, f"Error updating {self.label} with id {record_id}") from e

    def delete(self, record_id: int) -> dict:
        record = self.get(record_id)
        try:
            self.repo.delete(self.db, record)
        except SQLAlchemyError as e:
            raise self.fail(e, f"Could not delete {self.label} with id {record_id}") from e
        logger.info(f"🗑️ Deleted {self.label} {record_id}")
        return {"message": f"{self.label} with id {record_id} was deleted successfully!"}
