"""Catalog routers - courses, course tags and the mapping between them"""

from fastapi import Depends

from ...models import Course, CourseTag, CourseTagMapping
from ...shared.router import build_crud_router
from ...shared.service import CrudService
from ..users.schemas import UserResponse
from .schemas import (
    CourseCreate,
    CourseResponse,
    CourseTagCreate,
    CourseTagMappingCreate,
    CourseTagMappingResponse,
    CourseTagMappingUpdate,
    CourseTagResponse,
    CourseTagUpdate,
    CourseUpdate,
)

courses_router, get_course_service = build_crud_router(
    prefix="/courses",
    tag="Course",
    label="Course",
    plural="courses",
    model=Course,
    create_schema=CourseCreate,
    update_schema=CourseUpdate,
    response_schema=CourseResponse,
    filter_fields=("branch_id",),
)

course_tags_router, get_course_tag_service = build_crud_router(
    prefix="/courseTags",
    tag="CourseTag",
    label="CourseTag",
    plural="course tags",
    model=CourseTag,
    create_schema=CourseTagCreate,
    update_schema=CourseTagUpdate,
    response_schema=CourseTagResponse,
)

course_tag_mappings_router, _ = build_crud_router(
    prefix="/courseTagMappings",
    tag="CourseTagMapping",
    label="CourseTagMapping",
    plural="course tag mappings",
    model=CourseTagMapping,
    create_schema=CourseTagMappingCreate,
    update_schema=CourseTagMappingUpdate,
    response_schema=CourseTagMappingResponse,
    filter_fields=("course_id", "tag_id"),
)


@courses_router.get("/{record_id}/tags", response_model=list[CourseTagResponse])
def get_course_tags(record_id: int, service: CrudService = Depends(get_course_service)):
    """Tags mapped to a course"""
    return service.list_related(record_id, "tags")


@courses_router.get("/{record_id}/students", response_model=list[UserResponse])
def get_course_students(record_id: int, service: CrudService = Depends(get_course_service)):
    """Users enrolled in a course"""
    return service.list_related(record_id, "students")


@course_tags_router.get("/{record_id}/courses", response_model=list[CourseResponse])
def get_tagged_courses(record_id: int, service: CrudService = Depends(get_course_tag_service)):
    """Courses carrying a tag"""
    return service.list_related(record_id, "courses")
