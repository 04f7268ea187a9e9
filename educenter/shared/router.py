"""Router factory - the five CRUD endpoints every resource exposes"""

import logging
from typing import Any, Callable, Optional, Sequence

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from ..database import Base, get_db
from ..schemas import MessageResponse
from .repository import CrudRepository
from .service import CrudService

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}


def parse_filter_value(raw: str, python_type: type) -> Any:
    if python_type is bool:
        lowered = raw.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise ValueError(f"expected a boolean, got {raw!r}")
    return python_type(raw)


def parse_filters(request: Request, model: type[Base], fields: Sequence[str]) -> dict[str, Any]:
    """
    Read equality filters from the query string.

    Each allowed attribute is addressed by its camelCase name (``cityId`` for
    ``city_id``); values are converted to the column's Python type.
    """
    filters = {}
    for attribute in fields:
        raw = request.query_params.get(to_camel(attribute))
        if raw is None:
            continue

        python_type = model.__table__.columns[attribute].type.python_type
        try:
            filters[attribute] = parse_filter_value(raw, python_type)
        except ValueError as e:
            raise HTTPException(
                status_code=422,
                detail=f"Invalid value for query parameter '{to_camel(attribute)}': {raw}",
            ) from e
    return filters


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    label: str,
    plural: str,
    model: type[Base],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
    filter_fields: Sequence[str] = (),
    repository: Optional[CrudRepository] = None,
    service_class: type[CrudService] = CrudService,
) -> tuple[APIRouter, Callable[..., CrudService]]:
    """
    Build list/get/create/update/delete endpoints for one resource.

    Returns the router together with its service dependency so callers can
    hang extra endpoints (association reads) off the same service.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    repo = repository or CrudRepository(model)
    lowered = label[0].lower() + label[1:]

    def get_service(db: Session = Depends(get_db)) -> CrudService:
        """Dependency injection for the resource service"""
        return service_class(db, repo, label=label, plural=plural)

    filter_help = ", ".join(to_camel(name) for name in filter_fields)

    @router.get(
        "",
        response_model=list[response_schema],
        summary=f"Retrieve all {plural}",
        description=f"Optional equality filters: {filter_help}." if filter_help else None,
        responses={500: {"description": "Internal Server Error"}},
    )
    def list_records(
        request: Request,
        limit: Optional[int] = Query(None, ge=1, le=1000, description="Maximum number of records"),
        offset: int = Query(0, ge=0, description="Number of records to skip"),
        service: CrudService = Depends(get_service),
    ):
        filters = parse_filters(request, model, filter_fields)
        return service.list(filters, limit, offset)

    @router.get(
        "/{record_id}",
        response_model=response_schema,
        summary=f"Retrieve a single {lowered} by ID",
        responses={404: {"description": "Not Found"}, 500: {"description": "Internal Server Error"}},
    )
    def get_record(record_id: int, service: CrudService = Depends(get_service)):
        return service.get(record_id)

    @router.post(
        "",
        response_model=response_schema,
        status_code=201,
        summary=f"Create a new {lowered}",
        responses={500: {"description": "Internal server error"}},
    )
    def create_record(data: create_schema, service: CrudService = Depends(get_service)):
        return service.create(data)

    @router.put(
        "/{record_id}",
        response_model=response_schema,
        summary=f"Update a {lowered} by ID",
        description=f"Updates the supplied fields of an existing {lowered}.",
        responses={404: {"description": f"{label} not found"}, 500: {"description": f"Error updating {lowered}"}},
    )
    def update_record(record_id: int, data: update_schema, service: CrudService = Depends(get_service)):
        return service.update(record_id, data)

    @router.delete(
        "/{record_id}",
        response_model=MessageResponse,
        summary=f"Delete a {lowered} by its ID",
        responses={404: {"description": f"{label} not found"}, 500: {"description": "Internal server error"}},
    )
    def delete_record(record_id: int, service: CrudService = Depends(get_service)):
        return service.delete(record_id)

    logger.debug(f"Registered CRUD routes for {prefix}")
    return router, get_service
