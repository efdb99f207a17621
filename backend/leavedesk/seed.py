"""Seed script for development data.

Run with:  python -m leavedesk.seed
Requires the API to be running at BASE_URL.
"""

from __future__ import annotations

import asyncio
import sys
from datetime import date, timedelta

import httpx

BASE_URL = "http://localhost:8000"

# Well-known identity UUIDs
ADMIN_ID = "00000000-0000-0000-0000-000000000001"
HANNA_ID = "00000000-0000-0000-0000-000000000002"
ALICE_ID = "00000000-0000-0000-0000-000000000003"
BOB_ID = "00000000-0000-0000-0000-000000000004"


def _headers(user_id: str, role: str) -> dict[str, str]:
    return {"Content-Type": "application/json", "X-User-Id": user_id, "X-Role": role}


ADMIN_HEADERS = _headers(ADMIN_ID, "admin")
HR_HEADERS = _headers(HANNA_ID, "hr")

EMPLOYEES = [
    {
        "id": ADMIN_ID,
        "name": "Avery Admin",
        "role": "admin",
        "email": "avery.admin@example.com",
        "department": "IT",
    },
    {
        "id": HANNA_ID,
        "name": "Hanna Rivera",
        "role": "hr",
        "email": "hanna.rivera@example.com",
        "department": "People Operations",
        "phone": "+1 555 0100",
    },
    {
        "id": ALICE_ID,
        "name": "Alice Johnson",
        "role": "employee",
        "email": "alice.johnson@example.com",
        "department": "Engineering",
        "phone": "+1 555 0101",
    },
    {
        "id": BOB_ID,
        "name": "Bob Smith",
        "role": "employee",
        "email": "bob.smith@example.com",
        "department": "Sales",
    },
]


async def _safe_put(client: httpx.AsyncClient, url: str, json: dict, label: str) -> dict | None:
    """Upsert through PUT; safe to rerun."""
    resp = await client.put(url, json=json, headers=ADMIN_HEADERS)
    if resp.status_code in (200, 201):
        print(f"  [OK] {label}")
        return resp.json()
    print(f"  [ERROR] {label}: {resp.status_code} {resp.text[:200]}")
    return None


async def _submit(client: httpx.AsyncClient, user_id: str, body: dict, label: str) -> dict | None:
    resp = await client.post(f"{BASE_URL}/leave-requests", json=body, headers=_headers(user_id, "employee"))
    if resp.status_code == 201:
        print(f"  [OK] {label}")
        return resp.json()
    print(f"  [ERROR] {label}: {resp.status_code} {resp.text[:200]}")
    return None


async def seed_employees(client: httpx.AsyncClient) -> None:
    """Seed the directory via PUT (upsert)."""
    print("\n--- Seeding employees ---")
    for emp in EMPLOYEES:
        body = {k: v for k, v in emp.items() if k != "id"}
        await _safe_put(client, f"{BASE_URL}/employees/{emp['id']}", body, emp["name"])


async def seed_leave_requests(client: httpx.AsyncClient) -> None:
    """Seed one request in each lifecycle state.

    Unlike the directory these are not idempotent; every run adds new rows.
    """
    print("\n--- Seeding leave requests ---")
    today = date.today()

    # Alice: pending, untouched.
    await _submit(
        client,
        ALICE_ID,
        {
            "employee_id": ALICE_ID,
            "from_date": (today + timedelta(days=30)).isoformat(),
            "to_date": (today + timedelta(days=34)).isoformat(),
            "reason": "Vacation",
        },
        "Alice vacation (pending)",
    )

    # Alice: pending, edited once.
    edited = await _submit(
        client,
        ALICE_ID,
        {
            "employee_id": ALICE_ID,
            "from_date": (today + timedelta(days=60)).isoformat(),
            "to_date": (today + timedelta(days=61)).isoformat(),
            "reason": "Conference",
        },
        "Alice conference",
    )
    if edited:
        resp = await client.put(
            f"{BASE_URL}/leave-requests/{edited['id']}",
            json={"reason": "Conference and travel day"},
            headers=_headers(ALICE_ID, "employee"),
        )
        print(f"  [{'OK' if resp.status_code == 200 else 'ERROR'}] Alice edits conference request")

    # Bob: approved and rejected, decided by HR.
    for offset, reason, decision in ((10, "Family trip", "approved"), (20, "Moving house", "rejected")):
        result = await _submit(
            client,
            BOB_ID,
            {
                "employee_id": BOB_ID,
                "from_date": (today + timedelta(days=offset)).isoformat(),
                "to_date": (today + timedelta(days=offset + 2)).isoformat(),
                "reason": reason,
            },
            f"Bob {reason.lower()}",
        )
        if result:
            resp = await client.put(
                f"{BASE_URL}/leave-requests/{result['id']}",
                json={"status": decision},
                headers=HR_HEADERS,
            )
            if resp.status_code == 200:
                print(f"  [OK] Hanna {decision} Bob's request")
            else:
                print(f"  [ERROR] Deciding Bob's request: {resp.status_code}")


async def main() -> None:
    print("=" * 60)
    print("  Leave Desk: development seed script")
    print("=" * 60)

    async with httpx.AsyncClient(timeout=30.0) as client:
        try:
            resp = await client.get(f"{BASE_URL}/health")
            if resp.status_code != 200:
                print(f"API health check failed: {resp.status_code}")
                sys.exit(1)
            print("\n[OK] API is healthy")
        except httpx.ConnectError:
            print("ERROR: Cannot connect to API at", BASE_URL)
            print("Make sure the API is running (uvicorn leavedesk.main:app)")
            sys.exit(1)

        await seed_employees(client)
        await seed_leave_requests(client)

    print("\n" + "=" * 60)
    print("  Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
