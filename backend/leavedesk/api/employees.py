# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, status

from leavedesk.api.deps import AuthDep, DirectoryDep, DirectoryManagerDep
from leavedesk.exceptions import NotFoundError
from leavedesk.schemas.employee import (
    CreateEmployeeRequest,
    EmployeeListResponse,
    EmployeeResponse,
    UpsertEmployeeRequest,
)
from leavedesk.schemas.leave import MessageResponse
from leavedesk.services.employee import EmployeeInfo

logger = logging.getLogger(__name__)

employees_router = APIRouter(prefix="/employees", tags=["employees"])


def _to_response(employee: EmployeeInfo) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        name=employee.name,
        role=employee.role,
        email=employee.email,
        department=employee.department,
        phone=employee.phone,
        profile_photo=employee.profile_photo,
    )


@employees_router.get("", response_model=EmployeeListResponse)
async def list_employees(
    directory: DirectoryDep,
    auth: AuthDep,
) -> EmployeeListResponse:
    """List the employee directory."""
    employees = await directory.list_employees()
    items = [_to_response(e) for e in employees]
    return EmployeeListResponse(items=items, total=len(items))


@employees_router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: uuid.UUID,
    directory: DirectoryDep,
    auth: AuthDep,
) -> EmployeeResponse:
    """Get one directory entry."""
    employee = await directory.get_employee(employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return _to_response(employee)


@employees_router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: CreateEmployeeRequest,
    directory: DirectoryDep,
    auth: DirectoryManagerDep,
) -> EmployeeResponse:
    """Add an employee to the directory (HR/admin only)."""
    employee = EmployeeInfo(id=payload.id or uuid.uuid4(), **payload.model_dump(exclude={"id"}))
    saved = await directory.save_employee(employee)
    logger.info("Employee %s added to directory by %s", saved.id, auth.user_id)
    return _to_response(saved)


@employees_router.put("/{employee_id}", response_model=EmployeeResponse)
async def upsert_employee(
    employee_id: uuid.UUID,
    payload: UpsertEmployeeRequest,
    directory: DirectoryDep,
    auth: DirectoryManagerDep,
) -> EmployeeResponse:
    """Create or replace a directory entry (HR/admin only)."""
    saved = await directory.save_employee(EmployeeInfo(id=employee_id, **payload.model_dump()))
    logger.info("Employee %s updated by %s", saved.id, auth.user_id)
    return _to_response(saved)


@employees_router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: uuid.UUID,
    directory: DirectoryDep,
    auth: DirectoryManagerDep,
) -> MessageResponse:
    """Remove a directory entry (HR/admin only)."""
    if not await directory.delete_employee(employee_id):
        raise NotFoundError("Employee not found")
    logger.info("Employee %s removed from directory by %s", employee_id, auth.user_id)
    return MessageResponse(message="Employee deleted successfully")
