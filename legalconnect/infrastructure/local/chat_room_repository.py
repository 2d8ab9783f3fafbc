"""
SQLite implementation of chat room repository.

Messages live in their own table as an append-only log. A send is a single
INSERT plus a last_message_at bump in one transaction, so concurrent senders
never overwrite each other's messages.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError

from legalconnect.core.exceptions import (
    InfrastructureError,
    InvalidTransitionError,
    NotFoundError,
)
from legalconnect.core.logger import logger
from legalconnect.infrastructure.local.database import (
    ChatMessageORM,
    ChatRoomORM,
    ConnectionRequestORM,
    get_session_factory,
)
from legalconnect.interfaces.chat_room_repository import IChatRoomRepository
from legalconnect.models.chat_room import (
    Attachment,
    ChatMessage,
    ChatRoom,
    ChatRoomBase,
    ChatRoomSummary,
)
from legalconnect.models.enums import RequestStatus
from legalconnect.utils.datetime_utils import ensure_utc, now_utc

PREVIEW_LENGTH = 30


class SqliteChatRoomRepository(IChatRoomRepository):
    """SQLite implementation of chat room repository."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()
        # room id -> [lock, holders and waiters]; dropped when nobody uses it
        self._room_locks: dict[str, list] = {}

    def _message_to_model(self, orm: ChatMessageORM) -> ChatMessage:
        attachment = None
        if orm.attachment_url:
            attachment = Attachment(
                content_type=orm.attachment_content_type or "application/octet-stream",
                name=orm.attachment_name or "file",
                size=orm.attachment_size or 0,
                url=orm.attachment_url,
            )
        return ChatMessage(
            id=UUID(orm.id),
            room_id=UUID(orm.room_id),
            sender_id=orm.sender_id,
            text=orm.text or "",
            attachment=attachment,
            created_at=ensure_utc(orm.created_at),
        )

    def _room_fields(self, orm: ChatRoomORM) -> dict:
        return dict(
            id=UUID(orm.id),
            connection_request_id=UUID(orm.connection_request_id),
            seeker_id=orm.seeker_id,
            lawyer_id=orm.lawyer_id,
            subject=orm.subject or "Chat",
            created_at=ensure_utc(orm.created_at),
            last_message_at=ensure_utc(orm.last_message_at),
        )

    def _room_to_model(self, orm: ChatRoomORM, messages: list[ChatMessageORM]) -> ChatRoom:
        return ChatRoom(
            **self._room_fields(orm),
            messages=[self._message_to_model(m) for m in messages],
        )

    @asynccontextmanager
    async def _room_lock(self, room_id: UUID):
        key = str(room_id)
        entry = self._room_locks.get(key)
        if entry is None:
            entry = self._room_locks[key] = [asyncio.Lock(), 0]
        entry[1] += 1
        try:
            async with entry[0]:
                yield
        finally:
            entry[1] -= 1
            if entry[1] == 0:
                del self._room_locks[key]

    async def create_from_request(self, request_id: UUID) -> UUID:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ConnectionRequestORM).where(ConnectionRequestORM.id == str(request_id))
            )
            request = result.scalar_one_or_none()
            if not request:
                raise NotFoundError(f"Connection request {request_id} not found")

            if request.status == RequestStatus.ACCEPTED.value and request.chat_room_id:
                return UUID(request.chat_room_id)
            if request.status == RequestStatus.REJECTED.value:
                raise InvalidTransitionError(
                    f"Connection request {request_id} was rejected and cannot be accepted"
                )

            now = now_utc()
            room = ChatRoomORM(
                id=str(uuid4()),
                connection_request_id=request.id,
                seeker_id=request.seeker_id,
                lawyer_id=request.lawyer_id,
                subject=request.subject or "Chat",
                created_at=now,
                last_message_at=now,
            )
            session.add(room)
            try:
                await session.flush()
                moved = await session.execute(
                    update(ConnectionRequestORM)
                    .where(
                        ConnectionRequestORM.id == str(request_id),
                        ConnectionRequestORM.status == RequestStatus.PENDING.value,
                    )
                    .values(
                        status=RequestStatus.ACCEPTED.value,
                        chat_room_id=room.id,
                        updated_at=now,
                    )
                )
                if moved.rowcount == 0:
                    # Status changed since it was read.
                    await session.rollback()
                    current = (
                        await session.execute(
                            select(ConnectionRequestORM).where(
                                ConnectionRequestORM.id == str(request_id)
                            )
                        )
                    ).scalar_one()
                    if current.status == RequestStatus.ACCEPTED.value and current.chat_room_id:
                        return UUID(current.chat_room_id)
                    raise InvalidTransitionError(
                        f"Connection request {request_id} is already {current.status}"
                    )
                await session.commit()
            except IntegrityError as e:
                # Another accept won the race; the unique request reference kept it to one room.
                await session.rollback()
                winner = (
                    await session.execute(
                        select(ChatRoomORM.id).where(
                            ChatRoomORM.connection_request_id == str(request_id)
                        )
                    )
                ).scalar_one_or_none()
                if winner is None:
                    raise InfrastructureError(
                        f"Failed to create chat room for request {request_id}: {e}"
                    ) from e
                return UUID(winner)

            logger.info(f"Chat room {room.id} created for connection request {request_id}")
            return UUID(room.id)

    async def get(self, room_id: UUID) -> Optional[ChatRoom]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ChatRoomORM).where(ChatRoomORM.id == str(room_id))
            )
            room = result.scalar_one_or_none()
            if not room:
                return None
            messages = await session.execute(
                select(ChatMessageORM)
                .where(ChatMessageORM.room_id == room.id)
                .order_by(ChatMessageORM.seq.asc())
            )
            return self._room_to_model(room, list(messages.scalars().all()))

    async def get_info(self, room_id: UUID) -> Optional[ChatRoomBase]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ChatRoomORM).where(ChatRoomORM.id == str(room_id))
            )
            room = result.scalar_one_or_none()
            return ChatRoomBase(**self._room_fields(room)) if room else None

    async def _list_summaries(self, column, participant_id: str) -> list[ChatRoomSummary]:
        stats = (
            select(
                ChatMessageORM.room_id.label("room_id"),
                func.count(ChatMessageORM.seq).label("message_count"),
                func.max(ChatMessageORM.seq).label("last_seq"),
            )
            .group_by(ChatMessageORM.room_id)
            .subquery()
        )
        async with self._session_factory() as session:
            result = await session.execute(
                select(
                    ChatRoomORM,
                    stats.c.message_count,
                    ChatMessageORM.text,
                    ChatMessageORM.attachment_kind,
                )
                .outerjoin(stats, stats.c.room_id == ChatRoomORM.id)
                .outerjoin(ChatMessageORM, ChatMessageORM.seq == stats.c.last_seq)
                .where(column == participant_id)
                .order_by(ChatRoomORM.last_message_at.desc(), ChatRoomORM.created_at.desc())
            )
            summaries = []
            for room, message_count, last_text, last_kind in result.all():
                preview = last_text or (f"Sent a {last_kind}" if last_kind else None)
                if preview and len(preview) > PREVIEW_LENGTH:
                    preview = preview[:PREVIEW_LENGTH] + "..."
                summaries.append(
                    ChatRoomSummary(
                        **self._room_fields(room),
                        message_count=message_count or 0,
                        last_message_preview=preview,
                    )
                )
            return summaries

    async def list_for_seeker(self, seeker_id: str) -> list[ChatRoomSummary]:
        return await self._list_summaries(ChatRoomORM.seeker_id, seeker_id)

    async def list_for_lawyer(self, lawyer_id: str) -> list[ChatRoomSummary]:
        return await self._list_summaries(ChatRoomORM.lawyer_id, lawyer_id)

    async def append_message(
        self,
        room_id: UUID,
        sender_id: str,
        text: str,
        attachment: Optional[Attachment] = None,
    ) -> ChatMessage:
        async with self._room_lock(room_id):
            async with self._session_factory() as session:
                result = await session.execute(
                    select(ChatRoomORM).where(ChatRoomORM.id == str(room_id))
                )
                room = result.scalar_one_or_none()
                if not room:
                    raise NotFoundError(f"Chat room {room_id} not found")

                now = now_utc()
                orm = ChatMessageORM(
                    id=str(uuid4()),
                    room_id=room.id,
                    sender_id=sender_id,
                    text=text,
                    created_at=now,
                )
                if attachment:
                    orm.attachment_kind = attachment.kind.value
                    orm.attachment_content_type = attachment.content_type
                    orm.attachment_name = attachment.name
                    orm.attachment_size = attachment.size
                    orm.attachment_url = attachment.url
                session.add(orm)
                room.last_message_at = now
                await session.commit()
                await session.refresh(orm)
                return self._message_to_model(orm)
