# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from leavedesk.models.enums import Role


class UpsertEmployeeRequest(BaseModel):
    """Request body for creating or replacing a directory entry."""

    name: str = Field(min_length=1, max_length=200)
    role: Role = Role.EMPLOYEE
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    department: str = Field(min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=50)
    profile_photo: str | None = Field(default=None, max_length=500)


class CreateEmployeeRequest(UpsertEmployeeRequest):
    """Request body for POST /employees. The id is generated when omitted."""

    id: uuid.UUID | None = None


class EmployeeResponse(BaseModel):
    """Response schema for an employee."""

    id: uuid.UUID
    name: str
    role: Role
    email: str
    department: str
    phone: str | None
    profile_photo: str | None


class EmployeeListResponse(BaseModel):
    """List of employees."""

    items: list[EmployeeResponse]
    total: int
