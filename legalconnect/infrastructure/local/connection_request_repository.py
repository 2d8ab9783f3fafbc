"""
SQLite implementation of connection request repository.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from legalconnect.core.exceptions import (
    DuplicateRequestError,
    InvalidTransitionError,
    NotFoundError,
)
from legalconnect.core.logger import logger
from legalconnect.infrastructure.local.database import ConnectionRequestORM, get_session_factory
from legalconnect.interfaces.connection_request_repository import IConnectionRequestRepository
from legalconnect.models.connection_request import ConnectionRequest
from legalconnect.models.enums import RequestStatus
from legalconnect.utils.datetime_utils import ensure_utc, now_utc


def active_pair_key(seeker_id: str, lawyer_id: str) -> str:
    # Length prefix keeps ("a|b", "c") and ("a", "b|c") apart.
    return f"{len(seeker_id)}:{seeker_id}|{lawyer_id}"


class SqliteConnectionRequestRepository(IConnectionRequestRepository):
    """SQLite implementation of connection request repository."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: ConnectionRequestORM) -> ConnectionRequest:
        return ConnectionRequest(
            id=UUID(orm.id),
            seeker_id=orm.seeker_id,
            lawyer_id=orm.lawyer_id,
            subject=orm.subject,
            status=RequestStatus(orm.status),
            chat_room_id=UUID(orm.chat_room_id) if orm.chat_room_id else None,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def create(self, seeker_id: str, lawyer_id: str, subject: str) -> ConnectionRequest:
        async with self._session_factory() as session:
            now = now_utc()
            orm = ConnectionRequestORM(
                id=str(uuid4()),
                seeker_id=seeker_id,
                lawyer_id=lawyer_id,
                subject=subject,
                status=RequestStatus.PENDING.value,
                active_pair_key=active_pair_key(seeker_id, lawyer_id),
                created_at=now,
                updated_at=now,
            )
            session.add(orm)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                logger.warning(
                    f"Duplicate connection request rejected: seeker={seeker_id} lawyer={lawyer_id}"
                )
                raise DuplicateRequestError(seeker_id, lawyer_id) from e
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get(self, request_id: UUID) -> ConnectionRequest | None:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ConnectionRequestORM).where(ConnectionRequestORM.id == str(request_id))
            )
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None

    async def find_active(self, seeker_id: str, lawyer_id: str) -> ConnectionRequest | None:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ConnectionRequestORM).where(
                    ConnectionRequestORM.active_pair_key == active_pair_key(seeker_id, lawyer_id)
                )
            )
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None

    async def list_for_seeker(self, seeker_id: str) -> list[ConnectionRequest]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ConnectionRequestORM)
                .where(ConnectionRequestORM.seeker_id == seeker_id)
                .order_by(ConnectionRequestORM.created_at.desc())
            )
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def list_for_lawyer(self, lawyer_id: str) -> list[ConnectionRequest]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ConnectionRequestORM)
                .where(ConnectionRequestORM.lawyer_id == lawyer_id)
                .order_by(ConnectionRequestORM.created_at.desc())
            )
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def set_status(self, request_id: UUID, status: RequestStatus) -> ConnectionRequest:
        if status != RequestStatus.REJECTED:
            # acceptance goes through the chat room repository
            raise InvalidTransitionError(
                f"Cannot set connection request status to {status.value} directly"
            )
        async with self._session_factory() as session:
            # Conditional update: only a still-pending row can move.
            result = await session.execute(
                update(ConnectionRequestORM)
                .where(
                    ConnectionRequestORM.id == str(request_id),
                    ConnectionRequestORM.status == RequestStatus.PENDING.value,
                )
                .values(status=status.value, active_pair_key=None, updated_at=now_utc())
            )
            await session.commit()

            orm = (
                await session.execute(
                    select(ConnectionRequestORM).where(ConnectionRequestORM.id == str(request_id))
                )
            ).scalar_one_or_none()
            if not orm:
                raise NotFoundError(f"Connection request {request_id} not found")
            if result.rowcount == 0:
                raise InvalidTransitionError(
                    f"Connection request {request_id} is already {orm.status}"
                )
            logger.info(f"Connection request {request_id} marked {status.value}")
            return self._orm_to_model(orm)
