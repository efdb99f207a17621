# ruff: noqa: B008, TC003
from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import Depends, Header

from leavedesk.db import SessionDep
from leavedesk.exceptions import AuthorizationError
from leavedesk.models.enums import Role
from leavedesk.schemas.auth import AuthContext
from leavedesk.services.employee import EmployeeService, get_employee_service
from leavedesk.services.permissions import can_manage_directory
from leavedesk.services.store import LeaveRequestStore, SqlLeaveRequestStore


async def get_auth_context(
    x_user_id: uuid.UUID = Header(),
    x_role: Role = Header(default=Role.EMPLOYEE),
) -> AuthContext:
    """Extract dev auth context from request headers."""
    return AuthContext(user_id=x_user_id, role=x_role)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_directory_manager(
    auth: AuthDep,
) -> AuthContext:
    """Require an HR or admin role to change the employee directory."""
    if not can_manage_directory(auth.role):
        raise AuthorizationError("Only HR managers and admins can manage employees")
    return auth


DirectoryManagerDep = Annotated[AuthContext, Depends(require_directory_manager)]


async def get_leave_request_store(session: SessionDep) -> LeaveRequestStore:
    """Build the SQL-backed store for the current request's session."""
    return SqlLeaveRequestStore(session)


StoreDep = Annotated[LeaveRequestStore, Depends(get_leave_request_store)]
DirectoryDep = Annotated[EmployeeService, Depends(get_employee_service)]
