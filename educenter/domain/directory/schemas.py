"""Directory schemas - education centers, their branches, announcements and FAQs"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ...schemas import CamelModel


class EducationCenterCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=255)


class EducationCenterUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=255)


class EducationCenterResponse(CamelModel):
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BranchCreate(CamelModel):
    education_center_id: int
    name: str = Field(..., max_length=100)
    subdistrict_id: int
    other_description: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    image: Optional[str] = Field(None, max_length=255)


class BranchUpdate(CamelModel):
    education_center_id: Optional[int] = None
    name: Optional[str] = Field(None, max_length=100)
    subdistrict_id: Optional[int] = None
    other_description: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    image: Optional[str] = Field(None, max_length=255)


class BranchResponse(CamelModel):
    id: int
    education_center_id: Optional[int] = None
    name: Optional[str] = None
    subdistrict_id: Optional[int] = None
    other_description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AnnouncementCreate(CamelModel):
    education_center_id: int
    title: str = Field(..., max_length=255)
    content: str


class AnnouncementUpdate(CamelModel):
    education_center_id: Optional[int] = None
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None


class AnnouncementResponse(CamelModel):
    id: int
    education_center_id: Optional[int] = None
    title: Optional[str] = None
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FAQCreate(CamelModel):
    question: str
    answer: str


class FAQUpdate(CamelModel):
    question: Optional[str] = None
    answer: Optional[str] = None


class FAQResponse(CamelModel):
    id: int
    question: Optional[str] = None
    answer: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
