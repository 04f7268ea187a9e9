"""Geography schemas - city / district / subdistrict taxonomy"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ...schemas import CamelModel
from ...shared.validators import reject_null


class CityCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)


class CityUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v):
        return reject_null(v)


class CityResponse(CamelModel):
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DistrictCreate(CamelModel):
    city_id: int
    name: str = Field(..., min_length=1, max_length=255)


class DistrictUpdate(CamelModel):
    city_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("city_id", "name")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


class DistrictResponse(CamelModel):
    id: int
    city_id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SubdistrictCreate(CamelModel):
    district_id: int
    name: str = Field(..., min_length=1, max_length=255)


class SubdistrictUpdate(CamelModel):
    district_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("district_id", "name")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


class SubdistrictResponse(CamelModel):
    id: int
    district_id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
