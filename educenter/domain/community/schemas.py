"""Community schemas - reviews, notifications and search history"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ...schemas import CamelModel
from ...shared.validators import reject_null


class ReviewCreate(CamelModel):
    user_id: int
    branch_id: int
    rating: int = Field(..., ge=1, le=5)
    description: str


class ReviewUpdate(CamelModel):
    user_id: Optional[int] = None
    branch_id: Optional[int] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    description: Optional[str] = None


class ReviewResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    branch_id: Optional[int] = None
    rating: Optional[int] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class NotificationCreate(CamelModel):
    user_id: int
    content: str = Field(..., max_length=255)
    seen: bool = False


class NotificationUpdate(CamelModel):
    user_id: Optional[int] = None
    content: Optional[str] = Field(None, max_length=255)
    seen: Optional[bool] = None

    @field_validator("seen")
    @classmethod
    def seen_not_null(cls, v):
        return reject_null(v)


class NotificationResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    content: Optional[str] = None
    seen: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SearchHistoryCreate(CamelModel):
    user_id: int
    query: str = Field(..., max_length=255)


class SearchHistoryUpdate(CamelModel):
    user_id: Optional[int] = None
    query: Optional[str] = Field(None, max_length=255)


class SearchHistoryResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    query: Optional[str] = None
    created_at: Optional[datetime] = None
