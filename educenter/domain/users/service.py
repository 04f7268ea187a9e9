"""User service - password handling on top of the generic CRUD service"""

import logging
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ...models import User
from ...security_utils import hash_password_bcrypt
from ...shared.service import CrudService

logger = logging.getLogger(__name__)


class UserService(CrudService):
    """Service layer for users: plain passwords are hashed before storage"""

    def before_create(self, values: dict[str, Any]) -> dict[str, Any]:
        values["password"] = hash_password_bcrypt(values["password"])
        return values

    def before_update(self, record, values: dict[str, Any]) -> dict[str, Any]:
        if "password" in values:
            password = values.pop("password")
            if password:
                values["password"] = hash_password_bcrypt(password)
                logger.info(f"🔑 Password changed for user {record.id}")
        return values

    def email_taken(self, email: str) -> bool:
        return self.repo.base_query(self.db).filter(User.email == email).first() is not None

    def register(self, data: BaseModel) -> User:
        """Create an account; an email that is already in use is a 409"""
        if self.email_taken(data.email):
            raise HTTPException(status_code=409, detail="Email is already registered")

        values = self.before_create(data.model_dump(exclude_unset=True))
        try:
            record = self.repo.create(self.db, **values)
        except IntegrityError as e:
            self.db.rollback()
            # A concurrent registration may have claimed the email after the check
            if self.email_taken(data.email):
                logger.warning(f"⚠️ Registration raced for {data.email}")
                raise HTTPException(status_code=409, detail="Email is already registered") from e
            raise self.fail(e, f"Some error occurred while creating the {self.label}.") from e
        except SQLAlchemyError as e:
            raise self.fail(e, f"Some error occurred while creating the {self.label}.") from e

        logger.info(f"✅ Registered {self.label} {record.id}")
        return record
