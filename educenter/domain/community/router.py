"""Community routers - reviews, notifications and search history"""

from ...models import Notification, Review, SearchHistory
from ...shared.router import build_crud_router
from .schemas import (
    NotificationCreate,
    NotificationResponse,
    NotificationUpdate,
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
    SearchHistoryCreate,
    SearchHistoryResponse,
    SearchHistoryUpdate,
)

reviews_router, _ = build_crud_router(
    prefix="/reviews",
    tag="Review",
    label="Review",
    plural="reviews",
    model=Review,
    create_schema=ReviewCreate,
    update_schema=ReviewUpdate,
    response_schema=ReviewResponse,
    filter_fields=("user_id", "branch_id", "rating"),
)

notifications_router, _ = build_crud_router(
    prefix="/notifications",
    tag="Notification",
    label="Notification",
    plural="notifications",
    model=Notification,
    create_schema=NotificationCreate,
    update_schema=NotificationUpdate,
    response_schema=NotificationResponse,
    filter_fields=("user_id", "seen"),
)

search_histories_router, _ = build_crud_router(
    prefix="/searchHistories",
    tag="SearchHistory",
    label="SearchHistory",
    plural="search histories",
    model=SearchHistory,
    create_schema=SearchHistoryCreate,
    update_schema=SearchHistoryUpdate,
    response_schema=SearchHistoryResponse,
    filter_fields=("user_id",),
)
