# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

from leavedesk.models.enums import Role
from leavedesk.schemas.leave import IdentitySummary


class EmployeeInfo(BaseModel):
    """Employee directory entry."""

    id: uuid.UUID
    name: str
    role: Role = Role.EMPLOYEE
    email: str
    department: str
    phone: str | None = None
    profile_photo: str | None = None

    def summary(self) -> IdentitySummary:
        """Project the entry onto the fields shown next to a leave request."""
        return IdentitySummary(
            id=self.id,
            name=self.name,
            role=self.role,
            email=self.email,
            profile_photo=self.profile_photo,
        )


@runtime_checkable
class EmployeeService(Protocol):
    """Interface for the employee directory."""

    async def get_employee(self, employee_id: uuid.UUID) -> EmployeeInfo | None:
        """Fetch a directory entry. Returns None if not found."""
        ...

    async def list_employees(self) -> list[EmployeeInfo]:
        """List all directory entries ordered by name."""
        ...

    async def save_employee(self, employee: EmployeeInfo) -> EmployeeInfo:
        """Create or replace a directory entry."""
        ...

    async def delete_employee(self, employee_id: uuid.UUID) -> bool:
        """Remove an entry. Returns False if it did not exist."""
        ...


class InMemoryEmployeeService:
    """In-memory directory used for development and tests."""

    def __init__(self) -> None:
        self._employees: dict[uuid.UUID, EmployeeInfo] = {}

    def seed(self, employee: EmployeeInfo) -> None:
        """Seed an employee for testing."""
        self._employees[employee.id] = employee

    async def get_employee(self, employee_id: uuid.UUID) -> EmployeeInfo | None:
        return self._employees.get(employee_id)

    async def list_employees(self) -> list[EmployeeInfo]:
        return sorted(self._employees.values(), key=lambda e: e.name.lower())

    async def save_employee(self, employee: EmployeeInfo) -> EmployeeInfo:
        self._employees[employee.id] = employee
        return employee

    async def delete_employee(self, employee_id: uuid.UUID) -> bool:
        return self._employees.pop(employee_id, None) is not None


async def resolve_identity(service: EmployeeService, identity_id: uuid.UUID) -> IdentitySummary:
    """Look up an identity for display, falling back to a bare id when unknown."""
    employee = await service.get_employee(identity_id)
    if employee is None:
        return IdentitySummary(id=identity_id)
    return employee.summary()


_employee_service: EmployeeService = InMemoryEmployeeService()


def get_employee_service() -> EmployeeService:
    """FastAPI dependency for the employee directory."""
    return _employee_service


def set_employee_service(service: EmployeeService) -> None:
    """Override the service (for testing or production wiring)."""
    global _employee_service
    _employee_service = service
