import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..auth import (
    AuthenticationError,
    authenticate_user,
    get_current_user,
    login_session,
    logout_session,
)
from ..config import LOGIN_RATE_LIMIT, LOGIN_RATE_WINDOW
from ..database import get_db
from ..domain.users.repository import UserRepository
from ..domain.users.schemas import UserCreate, UserResponse
from ..domain.users.service import UserService
from ..models import User
from ..rate_limiter import create_rate_limiter
from ..schemas import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

rate_limit_login = create_rate_limiter(
    limit=LOGIN_RATE_LIMIT, window_seconds=LOGIN_RATE_WINDOW, key_prefix="login"
)


class LoginRequest(BaseModel):
    email: str
    password: str


@router.post("/login", response_model=UserResponse)
def login(
    data: LoginRequest,
    request: Request,
    db: Session = Depends(get_db),
    _: None = Depends(rate_limit_login),
):
    """Log in with email and password; the session cookie carries the user id"""
    try:
        user = authenticate_user(db, data.email, data.password)
    except AuthenticationError as e:
        logger.warning(f"🔒 Login failed for {data.email}: {e}")
        raise HTTPException(status_code=401, detail=str(e)) from e

    login_session(request, user)
    logger.info(f"✅ User {user.id} logged in")
    return user


@router.post("/register", response_model=UserResponse, status_code=201)
def register(data: UserCreate, request: Request, db: Session = Depends(get_db)):
    """Create an account with a hashed password and start a session for it"""
    service = UserService(db, UserRepository(), label="User", plural="users")
    user = service.register(data)

    login_session(request, user)
    return user


@router.get("/logout", response_model=MessageResponse)
@router.post("/logout", response_model=MessageResponse)
def logout(request: Request):
    """End the current session"""
    logout_session(request)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    """The user behind the current session"""
    return current_user
