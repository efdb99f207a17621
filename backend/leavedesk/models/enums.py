from __future__ import annotations

import enum


class LeaveStatus(enum.StrEnum):
    """State machine for leave requests.

    PENDING is the only non-terminal state; APPROVED and REJECTED are final.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


TERMINAL_STATUSES = frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED})


class Role(enum.StrEnum):
    """Role carried by the caller's identity."""

    EMPLOYEE = "employee"
    HR = "hr"
    ADMIN = "admin"
