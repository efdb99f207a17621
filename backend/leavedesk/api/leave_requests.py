# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, status

from leavedesk.api.deps import AuthDep, DirectoryDep, StoreDep
from leavedesk.schemas.leave import (
    CreateLeavePayload,
    LeaveRequestResponse,
    MessageResponse,
    UpdateLeavePayload,
)
from leavedesk.services import leave as leave_service

leave_requests_router = APIRouter(prefix="/leave-requests", tags=["leave-requests"])


@leave_requests_router.get("", response_model=list[LeaveRequestResponse])
async def list_leave_requests(
    store: StoreDep,
    directory: DirectoryDep,
    auth: AuthDep,
) -> list[LeaveRequestResponse]:
    """List leave requests (all for HR/admin, own submissions otherwise)."""
    return await leave_service.list_leave_requests(store, directory, auth)


@leave_requests_router.get("/employee/{employee_id}", response_model=list[LeaveRequestResponse])
async def list_employee_leave_requests(
    employee_id: uuid.UUID,
    store: StoreDep,
    directory: DirectoryDep,
    auth: AuthDep,
) -> list[LeaveRequestResponse]:
    """List leave requests concerning one employee."""
    return await leave_service.list_employee_leave_requests(store, directory, employee_id)


@leave_requests_router.get("/{request_id}", response_model=LeaveRequestResponse)
async def get_leave_request(
    request_id: uuid.UUID,
    store: StoreDep,
    directory: DirectoryDep,
    auth: AuthDep,
) -> LeaveRequestResponse:
    """Get a single leave request."""
    return await leave_service.get_leave_request(store, directory, request_id)


@leave_requests_router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_leave_request(
    payload: CreateLeavePayload,
    store: StoreDep,
    directory: DirectoryDep,
    auth: AuthDep,
) -> LeaveRequestResponse:
    """Submit a new leave request."""
    return await leave_service.create_leave_request(store, directory, auth, payload)


@leave_requests_router.put("/{request_id}", response_model=LeaveRequestResponse)
async def update_leave_request(
    request_id: uuid.UUID,
    payload: UpdateLeavePayload,
    store: StoreDep,
    directory: DirectoryDep,
    auth: AuthDep,
) -> LeaveRequestResponse:
    """Approve/reject a request (HR/admin) or make the owner's one-time edit."""
    return await leave_service.update_leave_request(store, directory, auth, request_id, payload)


@leave_requests_router.delete("/{request_id}", response_model=MessageResponse)
async def delete_leave_request(
    request_id: uuid.UUID,
    store: StoreDep,
    auth: AuthDep,
) -> MessageResponse:
    """Delete a pending leave request (owner or admin)."""
    return await leave_service.delete_leave_request(store, auth, request_id)
