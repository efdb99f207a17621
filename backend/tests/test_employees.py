"""Tests for the employee directory: in-memory service and /employees endpoints."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

import pytest

from leavedesk.models.enums import Role
from leavedesk.services.employee import (
    EmployeeInfo,
    EmployeeService,
    InMemoryEmployeeService,
    resolve_identity,
    set_employee_service,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from httpx import AsyncClient

HR_HEADERS = {"X-User-Id": str(uuid.uuid4()), "X-Role": "hr"}
ADMIN_HEADERS = {"X-User-Id": str(uuid.uuid4()), "X-Role": "admin"}
EMPLOYEE_HEADERS = {"X-User-Id": str(uuid.uuid4()), "X-Role": "employee"}
EMPLOYEES_URL = "/employees"


def _employee(name: str = "Jane Doe", **overrides: Any) -> EmployeeInfo:
    data: dict[str, Any] = {
        "id": uuid.uuid4(),
        "name": name,
        "email": f"{name.split()[0].lower()}@example.com",
        "department": "Engineering",
    }
    data.update(overrides)
    return EmployeeInfo(**data)


def _body(name: str = "Jane Doe", **overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "name": name,
        "role": "employee",
        "email": f"{name.split()[0].lower()}@example.com",
        "department": "Engineering",
    }
    body.update(overrides)
    return body


@pytest.fixture(autouse=True)
def _fresh_directory() -> Iterator[InMemoryEmployeeService]:
    svc = InMemoryEmployeeService()
    set_employee_service(svc)
    yield svc
    set_employee_service(InMemoryEmployeeService())


# ---------------------------------------------------------------------------
# InMemoryEmployeeService
# ---------------------------------------------------------------------------


async def test_service_satisfies_protocol() -> None:
    assert isinstance(InMemoryEmployeeService(), EmployeeService)


async def test_service_get_not_found() -> None:
    assert await InMemoryEmployeeService().get_employee(uuid.uuid4()) is None


async def test_service_list_sorted_by_name() -> None:
    svc = InMemoryEmployeeService()
    svc.seed(_employee("zoe Zed"))
    svc.seed(_employee("Adam Ant"))
    svc.seed(_employee("mia Moe"))
    names = [e.name for e in await svc.list_employees()]
    assert names == ["Adam Ant", "mia Moe", "zoe Zed"]


async def test_service_save_replaces_and_delete_reports_absence() -> None:
    svc = InMemoryEmployeeService()
    emp = _employee()
    await svc.save_employee(emp)
    await svc.save_employee(emp.model_copy(update={"department": "Finance"}))

    stored = await svc.get_employee(emp.id)
    assert stored is not None
    assert stored.department == "Finance"

    assert await svc.delete_employee(emp.id) is True
    assert await svc.delete_employee(emp.id) is False


async def test_resolve_identity() -> None:
    svc = InMemoryEmployeeService()
    emp = _employee(role=Role.HR, profile_photo="https://example.com/jane.png", phone="555")
    svc.seed(emp)

    summary = await resolve_identity(svc, emp.id)
    assert summary.model_dump() == {
        "id": emp.id,
        "name": "Jane Doe",
        "role": Role.HR,
        "email": "jane@example.com",
        "profile_photo": "https://example.com/jane.png",
    }

    unknown_id = uuid.uuid4()
    unknown = await resolve_identity(svc, unknown_id)
    assert unknown.id == unknown_id
    assert unknown.name is None


# ---------------------------------------------------------------------------
# /employees endpoints
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("headers", [HR_HEADERS, ADMIN_HEADERS])
async def test_create_employee(async_client: AsyncClient, headers: dict[str, str]) -> None:
    resp = await async_client.post(EMPLOYEES_URL, json=_body(phone="+1 555 0101"), headers=headers)
    assert resp.status_code == 201
    data = resp.json()
    assert data["name"] == "Jane Doe"
    assert data["phone"] == "+1 555 0101"
    assert data["profile_photo"] is None
    uuid.UUID(data["id"])


async def test_create_employee_with_explicit_id(async_client: AsyncClient) -> None:
    employee_id = uuid.uuid4()
    resp = await async_client.post(EMPLOYEES_URL, json=_body(id=str(employee_id)), headers=HR_HEADERS)
    assert resp.json()["id"] == str(employee_id)


async def test_employee_cannot_manage_directory(async_client: AsyncClient) -> None:
    resp = await async_client.post(EMPLOYEES_URL, json=_body(), headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 403
    assert resp.json()["error"] == "AuthorizationError"

    resp = await async_client.put(f"{EMPLOYEES_URL}/{uuid.uuid4()}", json=_body(), headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 403

    resp = await async_client.delete(f"{EMPLOYEES_URL}/{uuid.uuid4()}", headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 403


async def test_upsert_then_get(async_client: AsyncClient) -> None:
    employee_id = uuid.uuid4()
    url = f"{EMPLOYEES_URL}/{employee_id}"

    resp = await async_client.put(url, json=_body(), headers=HR_HEADERS)
    assert resp.status_code == 200
    resp = await async_client.put(url, json=_body(department="Finance", role="hr"), headers=HR_HEADERS)
    assert resp.json()["department"] == "Finance"

    resp = await async_client.get(url, headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 200
    assert resp.json()["role"] == "hr"
    assert resp.json()["department"] == "Finance"


async def test_get_employee_not_found(async_client: AsyncClient) -> None:
    resp = await async_client.get(f"{EMPLOYEES_URL}/{uuid.uuid4()}", headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Employee not found"


async def test_list_employees(async_client: AsyncClient, _fresh_directory: InMemoryEmployeeService) -> None:
    _fresh_directory.seed(_employee("Bob Smith"))
    _fresh_directory.seed(_employee("Alice Johnson"))

    resp = await async_client.get(EMPLOYEES_URL, headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 2
    assert [e["name"] for e in data["items"]] == ["Alice Johnson", "Bob Smith"]


async def test_delete_employee(async_client: AsyncClient, _fresh_directory: InMemoryEmployeeService) -> None:
    emp = _employee()
    _fresh_directory.seed(emp)

    resp = await async_client.delete(f"{EMPLOYEES_URL}/{emp.id}", headers=ADMIN_HEADERS)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Employee deleted successfully"}

    resp = await async_client.delete(f"{EMPLOYEES_URL}/{emp.id}", headers=ADMIN_HEADERS)
    assert resp.status_code == 404


async def test_invalid_employee_body(async_client: AsyncClient) -> None:
    resp = await async_client.post(EMPLOYEES_URL, json=_body(email="nope"), headers=HR_HEADERS)
    assert resp.status_code == 422


async def test_directory_feeds_leave_request_display(async_client: AsyncClient) -> None:
    """A directory entry added over HTTP shows up on leave requests that reference it."""
    employee_id = uuid.uuid4()
    await async_client.put(
        f"{EMPLOYEES_URL}/{employee_id}",
        json=_body("Dana Diaz", profile_photo="https://example.com/dana.png"),
        headers=HR_HEADERS,
    )
    resp = await async_client.post(
        "/leave-requests",
        json={"employee_id": str(employee_id), "from_date": "2024-06-01", "to_date": "2024-06-02", "reason": "x"},
        headers={"X-User-Id": str(employee_id), "X-Role": "employee"},
    )
    assert resp.status_code == 201
    assert resp.json()["employee_id"]["name"] == "Dana Diaz"
    assert resp.json()["submitted_by"]["profile_photo"] == "https://example.com/dana.png"
