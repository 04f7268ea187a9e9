"""Enrollment routers - enrollments, contracts and payments"""

from fastapi import Depends

from ...models import Contract, Enrollment, Payment
from ...shared.router import build_crud_router
from ...shared.service import CrudService
from .schemas import (
    ContractCreate,
    ContractResponse,
    ContractUpdate,
    EnrollmentCreate,
    EnrollmentResponse,
    EnrollmentUpdate,
    PaymentCreate,
    PaymentResponse,
    PaymentUpdate,
)

enrollments_router, _ = build_crud_router(
    prefix="/enrollments",
    tag="Enrollment",
    label="Enrollment",
    plural="enrollments",
    model=Enrollment,
    create_schema=EnrollmentCreate,
    update_schema=EnrollmentUpdate,
    response_schema=EnrollmentResponse,
    filter_fields=("user_id", "course_id"),
)

contracts_router, get_contract_service = build_crud_router(
    prefix="/contracts",
    tag="Contract",
    label="Contract",
    plural="contracts",
    model=Contract,
    create_schema=ContractCreate,
    update_schema=ContractUpdate,
    response_schema=ContractResponse,
    filter_fields=("user_id", "course_id", "status"),
)

payments_router, _ = build_crud_router(
    prefix="/payments",
    tag="Payment",
    label="Payment",
    plural="payments",
    model=Payment,
    create_schema=PaymentCreate,
    update_schema=PaymentUpdate,
    response_schema=PaymentResponse,
    filter_fields=("user_id", "contract_id", "status"),
)


@contracts_router.get("/{record_id}/payments", response_model=list[PaymentResponse])
def get_contract_payments(record_id: int, service: CrudService = Depends(get_contract_service)):
    """Payments made against a contract"""
    return service.list_related(record_id, "payments")
