"""User repository - Database operations for users and workers"""

from typing import Optional

from sqlalchemy.orm import Query, Session

from ...models import User
from ...shared.repository import CrudRepository


class UserRepository(CrudRepository):
    """Repository for user database operations"""

    def __init__(self):
        super().__init__(User)

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by login email (stored lowercase)"""
        return db.query(User).filter(User.email == email.strip().lower()).first()


class WorkerRepository(UserRepository):
    """Users restricted to those employed by an education center"""

    def base_query(self, db: Session) -> Query:
        return db.query(User).filter(User.work_education_center_id.isnot(None))
