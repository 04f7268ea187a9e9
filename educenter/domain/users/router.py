"""User routers - users, user roles and workers"""

from fastapi import Depends

from ...models import UserRole
from ...shared.router import build_crud_router
from ...shared.service import CrudService
from ..catalog.schemas import CourseResponse
from .repository import UserRepository, WorkerRepository
from .schemas import (
    UserCreate,
    UserResponse,
    UserRoleCreate,
    UserRoleResponse,
    UserRoleUpdate,
    UserUpdate,
    WorkerCreate,
)
from .service import UserService

user_repository = UserRepository()

users_router, get_user_service = build_crud_router(
    prefix="/users",
    tag="User",
    label="User",
    plural="users",
    model=user_repository.model,
    create_schema=UserCreate,
    update_schema=UserUpdate,
    response_schema=UserResponse,
    filter_fields=("user_role_id", "work_education_center_id"),
    repository=user_repository,
    service_class=UserService,
)

workers_router, _ = build_crud_router(
    prefix="/workers",
    tag="Worker",
    label="Worker",
    plural="workers",
    model=user_repository.model,
    create_schema=WorkerCreate,
    update_schema=UserUpdate,
    response_schema=UserResponse,
    filter_fields=("user_role_id", "work_education_center_id"),
    repository=WorkerRepository(),
    service_class=UserService,
)

user_roles_router, _ = build_crud_router(
    prefix="/userRoles",
    tag="UserRole",
    label="UserRole",
    plural="user roles",
    model=UserRole,
    create_schema=UserRoleCreate,
    update_schema=UserRoleUpdate,
    response_schema=UserRoleResponse,
)


@users_router.get("/{record_id}/courses", response_model=list[CourseResponse])
def get_user_courses(record_id: int, service: CrudService = Depends(get_user_service)):
    """Courses the user is enrolled in"""
    return service.list_related(record_id, "courses")
