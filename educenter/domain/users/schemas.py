"""User domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ...schemas import CamelModel
from ...shared.validators import reject_null, validate_email


class UserCreate(CamelModel):
    """Schema for creating a new user"""

    email: str = Field(..., max_length=100)
    password: str = Field(..., min_length=6, max_length=128)
    name: str = Field(..., min_length=1, max_length=100)
    user_role_id: int
    work_education_center_id: Optional[int] = None
    profile_image: Optional[str] = Field(None, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        return validate_email(v)


class WorkerCreate(UserCreate):
    """A worker is a user employed by an education center"""

    work_education_center_id: int


class UserUpdate(CamelModel):
    """Schema for updating an existing user"""

    email: Optional[str] = Field(None, max_length=100)
    password: Optional[str] = Field(None, min_length=6, max_length=128)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    user_role_id: Optional[int] = None
    work_education_center_id: Optional[int] = None
    profile_image: Optional[str] = Field(None, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        if v:
            return validate_email(v)
        return v

    @field_validator("user_role_id")
    @classmethod
    def role_not_null(cls, v):
        return reject_null(v)


class UserResponse(CamelModel):
    """Schema for user response - the password hash is never exposed"""

    id: int
    email: Optional[str] = None
    name: Optional[str] = None
    work_education_center_id: Optional[int] = None
    user_role_id: int
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserRoleCreate(CamelModel):
    role_name: str = Field(..., min_length=1, max_length=255)


class UserRoleUpdate(CamelModel):
    role_name: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("role_name")
    @classmethod
    def role_name_not_null(cls, v):
        return reject_null(v)


class UserRoleResponse(CamelModel):
    id: int
    role_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
