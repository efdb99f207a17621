# ruff: noqa: TC003
"""Leave request lifecycle: listing, submission, decisions, edits and deletion.

State machine::

    pending --approve (hr/admin)--> approved   [terminal]
    pending --reject  (hr/admin)--> rejected   [terminal]
    pending --edit (owner, once)--> pending (is_edited=True)

Deletion is allowed only from pending, by the owner or an admin.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from leavedesk.exceptions import AuthorizationError, InvalidStateError, NotFoundError, ValidationError
from leavedesk.models.base import now_utc
from leavedesk.models.enums import LeaveStatus
from leavedesk.models.leave import LeaveRequest
from leavedesk.schemas.leave import (
    CreateLeavePayload,
    LeaveRequestResponse,
    MessageResponse,
    OriginalData,
    UpdateLeavePayload,
)
from leavedesk.services.employee import resolve_identity
from leavedesk.services.permissions import can_decide, can_delete, can_view_all, is_owner

if TYPE_CHECKING:
    from leavedesk.schemas.auth import AuthContext
    from leavedesk.services.employee import EmployeeService
    from leavedesk.services.store import LeaveRequestStore

logger = logging.getLogger(__name__)

_create_adapter: TypeAdapter[CreateLeavePayload] = TypeAdapter(CreateLeavePayload)
_update_adapter: TypeAdapter[UpdateLeavePayload] = TypeAdapter(UpdateLeavePayload)

NOT_FOUND = "Leave request not found"
DECIDE_FORBIDDEN = "Only HR managers and admins can approve/reject leave requests"
ALREADY_DECIDED = "Leave request has already been processed"
EDIT_FORBIDDEN = "You can only edit your own leave requests"
EDIT_PROCESSED = "Cannot edit a leave request that has already been processed"
EDIT_TWICE = "Leave request can only be edited once"
DELETE_FORBIDDEN = "You can only delete your own leave requests"
DELETE_PROCESSED = "Cannot delete a leave request that has already been processed"
DELETED = "Leave request deleted successfully"


# ---------------------------------------------------------------------------
# Update branches
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StatusDecision:
    """An approve or reject issued by HR or an admin."""

    status: LeaveStatus


@dataclass(frozen=True)
class ContentEdit:
    """The owner's one-time change to dates and/or reason."""

    changes: dict[str, Any]


def classify_update(payload: UpdateLeavePayload) -> StatusDecision | ContentEdit:
    """Pick the update branch from the payload shape.

    A status other than pending means a decision; anything else is a content
    edit. Empty or missing content fields are dropped so they keep their
    stored value.
    """
    if payload.status is not None and payload.status != LeaveStatus.PENDING:
        return StatusDecision(status=payload.status)

    changes = {
        field: value
        for field, value in payload.model_dump(include={"from_date", "to_date", "reason"}).items()
        if value
    }
    return ContentEdit(changes=changes)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _original_data(request: LeaveRequest) -> OriginalData | None:
    if not request.is_edited:
        return None
    return OriginalData(
        from_date=request.original_from_date,  # type: ignore[arg-type]
        to_date=request.original_to_date,  # type: ignore[arg-type]
        reason=request.original_reason,  # type: ignore[arg-type]
    )


async def _build_leave_response(request: LeaveRequest, directory: EmployeeService) -> LeaveRequestResponse:
    """Map a record to its response schema, resolving every referenced identity."""
    approved_by = await resolve_identity(directory, request.approved_by) if request.approved_by else None
    rejected_by = await resolve_identity(directory, request.rejected_by) if request.rejected_by else None
    return LeaveRequestResponse(
        id=request.id,
        employee_id=await resolve_identity(directory, request.employee_id),
        submitted_by=await resolve_identity(directory, request.submitted_by),
        from_date=request.from_date,
        to_date=request.to_date,
        reason=request.reason,
        status=LeaveStatus(request.status),
        approved_by=approved_by,
        approved_date=request.approved_date,
        rejected_by=rejected_by,
        rejected_date=request.rejected_date,
        is_edited=request.is_edited,
        edited_date=request.edited_date,
        original_data=_original_data(request),
        version=request.version,
        created_at=request.created_at,
    )


async def _get_request_or_404(store: LeaveRequestStore, request_id: uuid.UUID) -> LeaveRequest:
    request = await store.get(request_id)
    if request is None:
        raise NotFoundError(NOT_FOUND)
    return request


def _coerce_payload(payload: Any, adapter: TypeAdapter[Any]) -> Any:
    """Validate anything that is not already a payload model.

    Model instances come back unchanged; mappings, ``None`` and other shapes
    go through the adapter, and invalid input raises ``ValidationError``.
    """
    try:
        return adapter.validate_python(payload)
    except PydanticValidationError as exc:
        raise ValidationError(str(exc.errors(include_url=False))) from exc


async def _apply_decision(
    store: LeaveRequestStore,
    auth: AuthContext,
    request: LeaveRequest,
    decision: StatusDecision,
) -> LeaveRequest:
    if not can_decide(auth.role):
        logger.info("Denied %s of leave request %s by %s (%s)", decision.status, request.id, auth.user_id, auth.role)
        raise AuthorizationError(DECIDE_FORBIDDEN)
    if request.status != LeaveStatus.PENDING:
        raise InvalidStateError(ALREADY_DECIDED)

    now = now_utc()
    if decision.status == LeaveStatus.APPROVED:
        changes: dict[str, Any] = {"approved_by": auth.user_id, "approved_date": now}
    else:
        changes = {"rejected_by": auth.user_id, "rejected_date": now}
    changes["status"] = decision.status.value

    updated = await store.update(request.id, changes, expected_version=request.version)
    logger.info("Leave request %s %s by %s", request.id, decision.status, auth.user_id)
    return updated


async def _apply_edit(
    store: LeaveRequestStore,
    auth: AuthContext,
    request: LeaveRequest,
    edit: ContentEdit,
) -> LeaveRequest:
    if not is_owner(auth, request):
        logger.info("Denied edit of leave request %s by non-owner %s", request.id, auth.user_id)
        raise AuthorizationError(EDIT_FORBIDDEN)
    if request.status != LeaveStatus.PENDING:
        raise InvalidStateError(EDIT_PROCESSED)
    if request.is_edited:
        raise InvalidStateError(EDIT_TWICE)

    changes: dict[str, Any] = {
        "original_from_date": request.from_date,
        "original_to_date": request.to_date,
        "original_reason": request.reason,
        **edit.changes,
        "is_edited": True,
        "edited_date": now_utc(),
    }

    updated = await store.update(request.id, changes, expected_version=request.version)
    logger.info("Leave request %s edited by owner %s (fields: %s)", request.id, auth.user_id, sorted(edit.changes))
    return updated


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def list_leave_requests(
    store: LeaveRequestStore,
    directory: EmployeeService,
    auth: AuthContext,
) -> list[LeaveRequestResponse]:
    """List requests visible to the caller, newest first.

    HR and admins see everything; other roles see only what they submitted.
    """
    submitted_by = None if can_view_all(auth.role) else auth.user_id
    requests = await store.list(submitted_by=submitted_by)
    return [await _build_leave_response(r, directory) for r in requests]


async def list_employee_leave_requests(
    store: LeaveRequestStore,
    directory: EmployeeService,
    employee_id: uuid.UUID,
) -> list[LeaveRequestResponse]:
    """List every request concerning one employee, newest first. Not role-scoped."""
    requests = await store.list(employee_id=employee_id)
    return [await _build_leave_response(r, directory) for r in requests]


async def get_leave_request(
    store: LeaveRequestStore,
    directory: EmployeeService,
    request_id: uuid.UUID,
) -> LeaveRequestResponse:
    """Get a single request by ID."""
    request = await _get_request_or_404(store, request_id)
    return await _build_leave_response(request, directory)


async def create_leave_request(
    store: LeaveRequestStore,
    directory: EmployeeService,
    auth: AuthContext,
    payload: CreateLeavePayload | Mapping[str, Any],
) -> LeaveRequestResponse:
    """Submit a new pending request owned by the caller."""
    data: CreateLeavePayload = _coerce_payload(payload, _create_adapter)

    request = LeaveRequest(
        employee_id=data.employee_id,
        submitted_by=auth.user_id,
        from_date=data.from_date,
        to_date=data.to_date,
        reason=data.reason,
        status=LeaveStatus.PENDING.value,
    )
    saved = await store.insert(request)
    logger.info("Leave request %s submitted by %s for employee %s", saved.id, auth.user_id, saved.employee_id)
    return await _build_leave_response(saved, directory)


async def update_leave_request(
    store: LeaveRequestStore,
    directory: EmployeeService,
    auth: AuthContext,
    request_id: uuid.UUID,
    payload: UpdateLeavePayload | Mapping[str, Any],
) -> LeaveRequestResponse:
    """Approve/reject (HR or admin) or edit content (owner, once, while pending)."""
    data: UpdateLeavePayload = _coerce_payload(payload, _update_adapter)
    request = await _get_request_or_404(store, request_id)

    branch = classify_update(data)
    if isinstance(branch, StatusDecision):
        updated = await _apply_decision(store, auth, request, branch)
    else:
        updated = await _apply_edit(store, auth, request, branch)
    return await _build_leave_response(updated, directory)


async def delete_leave_request(
    store: LeaveRequestStore,
    auth: AuthContext,
    request_id: uuid.UUID,
) -> MessageResponse:
    """Delete a pending request. Owner or admin only; no exemption on status."""
    request = await _get_request_or_404(store, request_id)

    if not can_delete(auth, request):
        logger.info("Denied delete of leave request %s by %s (%s)", request.id, auth.user_id, auth.role)
        raise AuthorizationError(DELETE_FORBIDDEN)
    if request.status != LeaveStatus.PENDING:
        raise InvalidStateError(DELETE_PROCESSED)

    await store.delete(request.id, expected_version=request.version)
    logger.info("Leave request %s deleted by %s", request.id, auth.user_id)
    return MessageResponse(message=DELETED)
