"""
Session authentication

Only the user id is kept in the signed session cookie; the user is
reloaded by primary key on every request that needs it.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from .database import get_db
from .domain.users.repository import UserRepository
from .models import User
from .security_utils import verify_password_bcrypt

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"


class AuthenticationError(Exception):
    """Credentials were rejected; message is safe to show to the client"""


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Local strategy: look the user up by email and compare the password hash"""
    user = UserRepository.get_user_by_email(db, email)
    if not user:
        raise AuthenticationError("Incorrect email.")

    if not verify_password_bcrypt(password, user.password):
        raise AuthenticationError("Password incorrect")

    return user


def login_session(request: Request, user: User) -> None:
    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id


def logout_session(request: Request) -> None:
    request.session.clear()


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    """Resolve the session user, or None for anonymous requests"""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None

    user = db.get(User, user_id)
    if not user:
        # Stale session pointing at a deleted user
        logger.warning(f"⚠️ Session refers to missing user {user_id}, clearing it")
        request.session.clear()
        return None

    return user


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Require an authenticated session"""
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user
