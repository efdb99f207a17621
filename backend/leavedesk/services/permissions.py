"""Role and ownership predicates for leave requests and the directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from leavedesk.models.enums import Role

if TYPE_CHECKING:
    from leavedesk.models.leave import LeaveRequest
    from leavedesk.schemas.auth import AuthContext

DECISION_ROLES = frozenset({Role.HR, Role.ADMIN})
VIEW_ALL_ROLES = frozenset({Role.HR, Role.ADMIN})
DIRECTORY_ROLES = frozenset({Role.HR, Role.ADMIN})


def can_view_all(role: Role) -> bool:
    """HR and admins see every leave request; others only their own."""
    return role in VIEW_ALL_ROLES


def can_decide(role: Role) -> bool:
    """Whether the role may approve or reject a leave request."""
    return role in DECISION_ROLES


def can_manage_directory(role: Role) -> bool:
    return role in DIRECTORY_ROLES


def is_owner(auth: AuthContext, request: LeaveRequest) -> bool:
    """The owner is whoever submitted the request, not the employee it concerns."""
    return request.submitted_by == auth.user_id


def can_delete(auth: AuthContext, request: LeaveRequest) -> bool:
    """Owners may delete their own requests; admins may delete anyone's.

    Status is checked separately and applies to admins as well.
    """
    return is_owner(auth, request) or auth.role == Role.ADMIN
