"""Generic repository - Database operations for a single model"""

from typing import Any, Optional

from sqlalchemy.orm import Query, Session

from ..database import Base


class CrudRepository:
    """Repository for list/get/create/update/delete on one mapped model"""

    def __init__(self, model: type[Base]):
        self.model = model

    def base_query(self, db: Session) -> Query:
        """Query every list and lookup starts from; subclasses narrow it"""
        return db.query(self.model)

    def list(
        self,
        db: Session,
        filters: Optional[dict[str, Any]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list:
        """Get records matching equality filters, ordered by id"""
        query = self.base_query(db)

        for attribute, value in (filters or {}).items():
            query = query.filter(getattr(self.model, attribute) == value)

        query = query.order_by(self.model.id)

        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        return query.all()

    def get_by_id(self, db: Session, record_id: int):
        """Get a specific record by ID"""
        return self.base_query(db).filter(self.model.id == record_id).first()

    def create(self, db: Session, **data):
        """Create a new record"""
        record = self.model(**data)
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    def update(self, db: Session, record, **updates):
        """Update a record with provided fields"""
        for key, value in updates.items():
            if hasattr(record, key):
                setattr(record, key, value)

        db.commit()
        db.refresh(record)
        return record

    def delete(self, db: Session, record) -> None:
        """Delete a record"""
        db.delete(record)
        db.commit()
