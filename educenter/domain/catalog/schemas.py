"""Catalog schemas - courses and the tags they are filed under"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from ...schemas import CamelModel
from ...shared.validators import validate_date_range


class CourseFields(CamelModel):
    branch_id: Optional[int] = None
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    enrollment_start_date: Optional[datetime] = None
    enrollment_end_date: Optional[datetime] = None
    max_students: Optional[int] = Field(None, ge=0)
    current_students: Optional[int] = Field(None, ge=0)
    image: Optional[str] = Field(None, max_length=255)

    @model_validator(mode="after")
    def check_date_ranges(self):
        validate_date_range(self.start_date, self.end_date, "course dates")
        validate_date_range(
            self.enrollment_start_date, self.enrollment_end_date, "enrollment dates"
        )
        return self


class CourseCreate(CourseFields):
    name: str = Field(..., min_length=1, max_length=100)


class CourseUpdate(CourseFields):
    pass


class CourseResponse(CamelModel):
    id: int
    branch_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    enrollment_start_date: Optional[datetime] = None
    enrollment_end_date: Optional[datetime] = None
    max_students: Optional[int] = None
    current_students: Optional[int] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CourseTagCreate(CamelModel):
    tag_name: str = Field(..., min_length=1, max_length=100)


class CourseTagUpdate(CamelModel):
    tag_name: Optional[str] = Field(None, min_length=1, max_length=100)


class CourseTagResponse(CamelModel):
    id: int
    tag_name: Optional[str] = None


class CourseTagMappingCreate(CamelModel):
    course_id: int
    tag_id: int


class CourseTagMappingUpdate(CamelModel):
    course_id: Optional[int] = None
    tag_id: Optional[int] = None


class CourseTagMappingResponse(CamelModel):
    id: int
    course_id: Optional[int] = None
    tag_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
