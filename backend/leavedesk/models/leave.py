# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

import sqlalchemy as sa
from sqlmodel import Field

from leavedesk.models.base import RecordBase, timestamp_field
from leavedesk.models.enums import LeaveStatus


class LeaveRequest(RecordBase, table=True):
    """A leave request with its approval and single-edit state.

    ``original_*`` columns hold the content as it was before the one permitted
    edit and are only populated once ``is_edited`` flips to true.
    """

    __tablename__ = "leave_request"
    __table_args__ = (sa.Index("ix_leave_request_submitted_by_created", "submitted_by", "created_at"),)

    employee_id: uuid.UUID = Field(index=True)
    submitted_by: uuid.UUID = Field(index=True)
    from_date: date
    to_date: date
    reason: str
    status: str = Field(
        default=LeaveStatus.PENDING, max_length=20, index=True, sa_column_kwargs={"server_default": "pending"}
    )

    approved_by: uuid.UUID | None = None
    approved_date: datetime | None = timestamp_field()
    rejected_by: uuid.UUID | None = None
    rejected_date: datetime | None = timestamp_field()

    is_edited: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    edited_date: datetime | None = timestamp_field()
    original_from_date: date | None = None
    original_to_date: date | None = None
    original_reason: str | None = None

    version: int = Field(default=1, sa_column_kwargs={"server_default": "1"})
