from sqlmodel import SQLModel

from leavedesk.models.base import RecordBase
from leavedesk.models.enums import TERMINAL_STATUSES, LeaveStatus, Role
from leavedesk.models.leave import LeaveRequest

__all__ = [
    "TERMINAL_STATUSES",
    "LeaveRequest",
    "LeaveStatus",
    "RecordBase",
    "Role",
    "SQLModel",
]
