"""Geography routers - cities, districts and subdistricts"""

from fastapi import Depends

from ...models import City, District, Subdistrict
from ...shared.router import build_crud_router
from ...shared.service import CrudService
from .schemas import (
    CityCreate,
    CityResponse,
    CityUpdate,
    DistrictCreate,
    DistrictResponse,
    DistrictUpdate,
    SubdistrictCreate,
    SubdistrictResponse,
    SubdistrictUpdate,
)

cities_router, get_city_service = build_crud_router(
    prefix="/cities",
    tag="City",
    label="City",
    plural="cities",
    model=City,
    create_schema=CityCreate,
    update_schema=CityUpdate,
    response_schema=CityResponse,
)

districts_router, get_district_service = build_crud_router(
    prefix="/districts",
    tag="District",
    label="District",
    plural="districts",
    model=District,
    create_schema=DistrictCreate,
    update_schema=DistrictUpdate,
    response_schema=DistrictResponse,
    filter_fields=("city_id",),
)

subdistricts_router, get_subdistrict_service = build_crud_router(
    prefix="/subdistricts",
    tag="Subdistrict",
    label="Subdistrict",
    plural="subdistricts",
    model=Subdistrict,
    create_schema=SubdistrictCreate,
    update_schema=SubdistrictUpdate,
    response_schema=SubdistrictResponse,
    filter_fields=("district_id",),
)


@cities_router.get("/{record_id}/districts", response_model=list[DistrictResponse])
def get_city_districts(record_id: int, service: CrudService = Depends(get_city_service)):
    """Districts belonging to a city"""
    return service.list_related(record_id, "districts")


@districts_router.get("/{record_id}/subdistricts", response_model=list[SubdistrictResponse])
def get_district_subdistricts(record_id: int, service: CrudService = Depends(get_district_service)):
    """Subdistricts belonging to a district"""
    return service.list_related(record_id, "subdistricts")
