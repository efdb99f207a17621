# ruff: noqa: TC003
"""Persistence boundary for leave requests.

The lifecycle rules in :mod:`leavedesk.services.leave` only talk to a
``LeaveRequestStore``. ``SqlLeaveRequestStore`` is the production
implementation; ``InMemoryLeaveRequestStore`` honours the same contract for
tests and local experiments.

Every ``update`` and ``delete`` is guarded by the record's ``version``: the
write only lands if nobody else changed the row since it was read.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, NoReturn, Protocol, runtime_checkable

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col

from leavedesk.exceptions import NotFoundError, StaleRecordError, StoreError
from leavedesk.models.leave import LeaveRequest

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Leave request not found"


@runtime_checkable
class LeaveRequestStore(Protocol):
    """Interface the lifecycle engine needs from persistence."""

    async def get(self, request_id: uuid.UUID) -> LeaveRequest | None:
        """Point lookup. Returns None if the record does not exist."""
        ...

    async def list(
        self,
        *,
        submitted_by: uuid.UUID | None = None,
        employee_id: uuid.UUID | None = None,
    ) -> list[LeaveRequest]:
        """Filtered listing, newest first."""
        ...

    async def insert(self, record: LeaveRequest) -> LeaveRequest:
        """Persist a new record and return it."""
        ...

    async def update(
        self,
        request_id: uuid.UUID,
        changes: dict[str, Any],
        *,
        expected_version: int,
    ) -> LeaveRequest:
        """Apply a partial update. Raises NotFoundError or StaleRecordError."""
        ...

    async def delete(self, request_id: uuid.UUID, *, expected_version: int) -> None:
        """Remove a record. Raises NotFoundError or StaleRecordError."""
        ...


# ---------------------------------------------------------------------------
# SQL implementation
# ---------------------------------------------------------------------------


class SqlLeaveRequestStore:
    """Leave request store backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.exception("Leave request store %s failed", operation)
            raise StoreError(f"Leave request store failed during {operation}") from exc

    async def _missed_write(self, request_id: uuid.UUID) -> NoReturn:
        """Raise the right error for a guarded write that matched no row."""
        await self._session.rollback()
        if await self.get(request_id) is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        raise StaleRecordError

    async def get(self, request_id: uuid.UUID) -> LeaveRequest | None:
        with self._store_errors("get"):
            result = await self._session.execute(
                select(LeaveRequest)
                .where(col(LeaveRequest.id) == request_id)
                .execution_options(populate_existing=True)
            )
            return result.scalar_one_or_none()

    async def list(
        self,
        *,
        submitted_by: uuid.UUID | None = None,
        employee_id: uuid.UUID | None = None,
    ) -> list[LeaveRequest]:
        query = select(LeaveRequest)
        if submitted_by is not None:
            query = query.where(col(LeaveRequest.submitted_by) == submitted_by)
        if employee_id is not None:
            query = query.where(col(LeaveRequest.employee_id) == employee_id)
        query = query.order_by(col(LeaveRequest.created_at).desc())

        with self._store_errors("list"):
            result = await self._session.execute(query)
            return list(result.scalars().all())

    async def insert(self, record: LeaveRequest) -> LeaveRequest:
        with self._store_errors("insert"):
            self._session.add(record)
            try:
                await self._session.commit()
            except SQLAlchemyError:
                await self._session.rollback()
                raise
            await self._session.refresh(record)
            return record

    async def update(
        self,
        request_id: uuid.UUID,
        changes: dict[str, Any],
        *,
        expected_version: int,
    ) -> LeaveRequest:
        with self._store_errors("update"):
            result = await self._session.execute(
                update(LeaveRequest)
                .where(
                    col(LeaveRequest.id) == request_id,
                    col(LeaveRequest.version) == expected_version,
                )
                .values(**changes, version=expected_version + 1)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                await self._missed_write(request_id)
            await self._session.commit()

        updated = await self.get(request_id)
        if updated is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return updated

    async def delete(self, request_id: uuid.UUID, *, expected_version: int) -> None:
        with self._store_errors("delete"):
            result = await self._session.execute(
                delete(LeaveRequest)
                .where(
                    col(LeaveRequest.id) == request_id,
                    col(LeaveRequest.version) == expected_version,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                await self._missed_write(request_id)
            await self._session.commit()


# ---------------------------------------------------------------------------
# In-memory implementation
# ---------------------------------------------------------------------------


def _clone(record: LeaveRequest) -> LeaveRequest:
    """Detach a copy so callers cannot mutate stored state in place."""
    return LeaveRequest.model_validate(record.model_dump())


class InMemoryLeaveRequestStore:
    """Dict-backed store with the same semantics as the SQL store."""

    def __init__(self) -> None:
        self._records: dict[uuid.UUID, LeaveRequest] = {}

    async def get(self, request_id: uuid.UUID) -> LeaveRequest | None:
        record = self._records.get(request_id)
        return _clone(record) if record is not None else None

    async def list(
        self,
        *,
        submitted_by: uuid.UUID | None = None,
        employee_id: uuid.UUID | None = None,
    ) -> list[LeaveRequest]:
        records = [
            r
            for r in self._records.values()
            if (submitted_by is None or r.submitted_by == submitted_by)
            and (employee_id is None or r.employee_id == employee_id)
        ]
        records.sort(key=lambda r: r.created_at, reverse=True)
        return [_clone(r) for r in records]

    async def insert(self, record: LeaveRequest) -> LeaveRequest:
        if record.id in self._records:
            raise StoreError(f"Leave request {record.id} already exists")
        self._records[record.id] = _clone(record)
        return _clone(record)

    async def update(
        self,
        request_id: uuid.UUID,
        changes: dict[str, Any],
        *,
        expected_version: int,
    ) -> LeaveRequest:
        stored = self._records.get(request_id)
        if stored is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        if stored.version != expected_version:
            raise StaleRecordError

        updated = _clone(stored)
        for field, value in changes.items():
            setattr(updated, field, value)
        updated.version = expected_version + 1
        self._records[request_id] = updated
        return _clone(updated)

    async def delete(self, request_id: uuid.UUID, *, expected_version: int) -> None:
        stored = self._records.get(request_id)
        if stored is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        if stored.version != expected_version:
            raise StaleRecordError
        del self._records[request_id]
