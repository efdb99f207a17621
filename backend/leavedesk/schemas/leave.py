# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from leavedesk.models.enums import LeaveStatus, Role

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class CreateLeavePayload(BaseModel):
    """Request body for submitting a new leave request."""

    employee_id: uuid.UUID
    from_date: date
    to_date: date
    reason: str = Field(min_length=1, max_length=1000)


class UpdateLeavePayload(BaseModel):
    """Request body for PUT /leave-requests/{id}.

    Carries either a status decision (approved/rejected) or a content edit.
    Content fields left out, or sent empty, keep their stored value.
    """

    status: LeaveStatus | None = None
    from_date: date | None = None
    to_date: date | None = None
    reason: str | None = Field(default=None, max_length=1000)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class IdentitySummary(BaseModel):
    """Display-friendly view of an identity referenced by a leave request."""

    id: uuid.UUID
    name: str | None = None
    role: Role | None = None
    email: str | None = None
    profile_photo: str | None = None


class OriginalData(BaseModel):
    """Leave content as it was before the single permitted edit."""

    from_date: date
    to_date: date
    reason: str


class LeaveRequestResponse(BaseModel):
    """Response schema for a single leave request with identities resolved."""

    id: uuid.UUID
    employee_id: IdentitySummary
    submitted_by: IdentitySummary
    from_date: date
    to_date: date
    reason: str
    status: LeaveStatus
    approved_by: IdentitySummary | None
    approved_date: datetime | None
    rejected_by: IdentitySummary | None
    rejected_date: datetime | None
    is_edited: bool
    edited_date: datetime | None
    original_data: OriginalData | None
    version: int
    created_at: datetime


class MessageResponse(BaseModel):
    """Confirmation message returned by delete endpoints."""

    message: str
