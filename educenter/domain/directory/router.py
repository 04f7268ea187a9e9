"""Directory routers - education centers, branches, announcements and FAQs"""

from fastapi import Depends

from ...models import FAQ, Announcement, Branch, EducationCenter
from ...shared.router import build_crud_router
from ...shared.service import CrudService
from ..catalog.schemas import CourseResponse
from ..community.schemas import ReviewResponse
from ..users.schemas import UserResponse
from .schemas import (
    AnnouncementCreate,
    AnnouncementResponse,
    AnnouncementUpdate,
    BranchCreate,
    BranchResponse,
    BranchUpdate,
    EducationCenterCreate,
    EducationCenterResponse,
    EducationCenterUpdate,
    FAQCreate,
    FAQResponse,
    FAQUpdate,
)

educenters_router, get_educenter_service = build_crud_router(
    prefix="/educenters",
    tag="EducationCenter",
    label="EducationCenter",
    plural="education centers",
    model=EducationCenter,
    create_schema=EducationCenterCreate,
    update_schema=EducationCenterUpdate,
    response_schema=EducationCenterResponse,
)

branches_router, get_branch_service = build_crud_router(
    prefix="/branches",
    tag="Branch",
    label="Branch",
    plural="branches",
    model=Branch,
    create_schema=BranchCreate,
    update_schema=BranchUpdate,
    response_schema=BranchResponse,
    filter_fields=("education_center_id", "subdistrict_id"),
)

announcements_router, _ = build_crud_router(
    prefix="/announcements",
    tag="Announcement",
    label="Announcement",
    plural="announcements",
    model=Announcement,
    create_schema=AnnouncementCreate,
    update_schema=AnnouncementUpdate,
    response_schema=AnnouncementResponse,
    filter_fields=("education_center_id",),
)

faqs_router, _ = build_crud_router(
    prefix="/faqs",
    tag="FAQ",
    label="FAQ",
    plural="faqs",
    model=FAQ,
    create_schema=FAQCreate,
    update_schema=FAQUpdate,
    response_schema=FAQResponse,
)


@educenters_router.get("/{record_id}/branches", response_model=list[BranchResponse])
def get_educenter_branches(record_id: int, service: CrudService = Depends(get_educenter_service)):
    """Branches run by an education center"""
    return service.list_related(record_id, "branches")


@educenters_router.get("/{record_id}/announcements", response_model=list[AnnouncementResponse])
def get_educenter_announcements(record_id: int, service: CrudService = Depends(get_educenter_service)):
    """Announcements published by an education center"""
    return service.list_related(record_id, "announcements")


@educenters_router.get("/{record_id}/workers", response_model=list[UserResponse])
def get_educenter_workers(record_id: int, service: CrudService = Depends(get_educenter_service)):
    """Users employed by an education center"""
    return service.list_related(record_id, "workers")


@branches_router.get("/{record_id}/courses", response_model=list[CourseResponse])
def get_branch_courses(record_id: int, service: CrudService = Depends(get_branch_service)):
    """Courses offered at a branch"""
    return service.list_related(record_id, "courses")


@branches_router.get("/{record_id}/reviews", response_model=list[ReviewResponse])
def get_branch_reviews(record_id: int, service: CrudService = Depends(get_branch_service)):
    """Reviews left for a branch"""
    return service.list_related(record_id, "reviews")
