"""Enrollment schemas - course enrollments, contracts and payments"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ...schemas import CamelModel


class EnrollmentCreate(CamelModel):
    user_id: int
    course_id: int


class EnrollmentUpdate(CamelModel):
    user_id: Optional[int] = None
    course_id: Optional[int] = None


class EnrollmentResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    course_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ContractCreate(CamelModel):
    user_id: int
    course_id: int
    content: str
    status: Optional[str] = Field(None, max_length=50, examples=["pending"])


class ContractUpdate(CamelModel):
    user_id: Optional[int] = None
    course_id: Optional[int] = None
    content: Optional[str] = None
    status: Optional[str] = Field(None, max_length=50, examples=["approved"])


class ContractResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    course_id: Optional[int] = None
    content: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaymentCreate(CamelModel):
    user_id: int
    contract_id: int
    amount: float = Field(..., ge=0)
    status: str = Field(..., max_length=255)
    method: str = Field(..., max_length=50, examples=["credit_card"])


class PaymentUpdate(CamelModel):
    user_id: Optional[int] = None
    contract_id: Optional[int] = None
    amount: Optional[float] = Field(None, ge=0)
    status: Optional[str] = Field(None, max_length=255)
    method: Optional[str] = Field(None, max_length=50)


class PaymentResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    contract_id: Optional[int] = None
    amount: Optional[float] = None
    status: Optional[str] = None
    method: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
