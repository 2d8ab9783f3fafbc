"""
Tests for ChatRoomService: accept, messaging and attachment upload.
"""

import asyncio
import time
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from legalconnect.core.exceptions import (
    EmptyMessageError,
    ForbiddenError,
    InfrastructureError,
    InvalidTransitionError,
    NotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from legalconnect.infrastructure.local.storage_provider import LocalStorageProvider
from legalconnect.models.chat_room import Attachment
from legalconnect.models.enums import AttachmentKind, RequestStatus
from legalconnect.services.chat_room_service import ChatRoomService
from legalconnect.services.connection_request_service import ConnectionRequestService


@pytest.fixture
def storage(tmp_path):
    return LocalStorageProvider(str(tmp_path / "storage"))


@pytest.fixture
def request_service(request_repo):
    return ConnectionRequestService(request_repo)


@pytest.fixture
def service(request_repo, room_repo, storage):
    return ChatRoomService(request_repo, room_repo, storage, max_attachment_bytes=1024)


@pytest.fixture
async def room_id(request_service, service, seeker, lawyer):
    request_id = await request_service.create_request(seeker, "U1", "L1", "Tenancy dispute")
    return await service.accept_and_create_room(lawyer, request_id)


class TestAccept:
    @pytest.mark.asyncio
    async def test_full_scenario(self, request_service, service, seeker, lawyer):
        request_id = await request_service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        room_id = await service.accept_and_create_room(lawyer, request_id)

        request = await request_service.get_request(seeker, request_id)
        assert request.status == RequestStatus.ACCEPTED
        assert request.chat_room_id == room_id
        room = await service.get_room(seeker, room_id)
        assert room.messages == []
        assert {room.seeker_id, room.lawyer_id} == {"U1", "L1"}

    @pytest.mark.asyncio
    async def test_accept_twice_same_room(self, request_service, service, seeker, lawyer):
        request_id = await request_service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        first = await service.accept_and_create_room(lawyer, request_id)
        second = await service.accept_and_create_room(lawyer, request_id)

        assert first == second
        assert len(await service.list_rooms_for_lawyer(lawyer, "L1")) == 1

    @pytest.mark.asyncio
    async def test_seeker_cannot_accept(self, request_service, service, seeker):
        request_id = await request_service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        with pytest.raises(ForbiddenError):
            await service.accept_and_create_room(seeker, request_id)

    @pytest.mark.asyncio
    async def test_accept_after_reject(self, request_service, service, seeker, lawyer):
        request_id = await request_service.create_request(seeker, "U1", "L1", "Tenancy dispute")
        await request_service.reject(lawyer, request_id)

        with pytest.raises(InvalidTransitionError):
            await service.accept_and_create_room(lawyer, request_id)

    @pytest.mark.asyncio
    async def test_reject_after_accept(self, request_service, service, seeker, lawyer):
        request_id = await request_service.create_request(seeker, "U1", "L1", "Tenancy dispute")
        await service.accept_and_create_room(lawyer, request_id)

        with pytest.raises(InvalidTransitionError):
            await request_service.reject(lawyer, request_id)

    @pytest.mark.asyncio
    async def test_accept_missing(self, service, lawyer):
        with pytest.raises(NotFoundError):
            await service.accept_and_create_room(lawyer, uuid4())


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_conversation(self, service, seeker, lawyer, room_id):
        assert await service.send_message(seeker, room_id, "U1", "Hello")
        assert await service.send_message(lawyer, room_id, "L1", "Hi, how can I help?")

        room = await service.get_room(lawyer, room_id)
        assert [(m.sender_id, m.text) for m in room.messages] == [
            ("U1", "Hello"),
            ("L1", "Hi, how can I help?"),
        ]

    @pytest.mark.asyncio
    async def test_concurrent_sends(self, service, seeker, lawyer, room_id):
        sends = [
            service.send_message(seeker if i % 2 else lawyer, room_id, "U1" if i % 2 else "L1", f"m{i}")
            for i in range(10)
        ]

        results = await asyncio.gather(*sends)

        assert all(results)
        room = await service.get_room(seeker, room_id)
        assert len(room.messages) == 10

    @pytest.mark.asyncio
    async def test_send_does_not_load_message_log(
        self, service, room_repo, seeker, room_id, monkeypatch
    ):
        load_room = AsyncMock(side_effect=AssertionError("message log loaded"))
        monkeypatch.setattr(room_repo, "get", load_room)

        assert await service.send_message(seeker, room_id, "U1", "Hello")
        await service.upload_attachment(seeker, room_id, "a.png", "image/png", b"png")

        load_room.assert_not_awaited()
        [summary] = await room_repo.list_for_seeker("U1")
        assert summary.message_count == 1

    @pytest.mark.asyncio
    async def test_empty_message_not_persisted(self, service, seeker, room_id):
        with pytest.raises(EmptyMessageError):
            await service.send_message(seeker, room_id, "U1", "   ")

        room = await service.get_room(seeker, room_id)
        assert room.messages == []

    @pytest.mark.asyncio
    async def test_attachment_only_message(self, service, seeker, room_id):
        attachment = Attachment(
            content_type="application/pdf",
            name="lease.pdf",
            size=2048,
            url="http://localhost:8000/storage/chat-files/U1/lease.pdf",
        )

        await service.send_message(seeker, room_id, "U1", "", attachment)

        [message] = (await service.get_room(seeker, room_id)).messages
        assert message.text == ""
        assert message.attachment.kind == AttachmentKind.PDF
        assert message.attachment.name == "lease.pdf"
        assert message.attachment.size == 2048

    @pytest.mark.asyncio
    async def test_outsider_forbidden(self, service, outsider, room_id):
        with pytest.raises(ForbiddenError):
            await service.send_message(outsider, room_id, "U9", "Hello")
        with pytest.raises(ForbiddenError):
            await service.get_room(outsider, room_id)

    @pytest.mark.asyncio
    async def test_impersonation_forbidden(self, service, seeker, room_id):
        with pytest.raises(ForbiddenError):
            await service.send_message(seeker, room_id, "L1", "Pretending to be the lawyer")

    @pytest.mark.asyncio
    async def test_missing_room(self, service, seeker):
        with pytest.raises(NotFoundError):
            await service.send_message(seeker, uuid4(), "U1", "Hello")


class TestUploadAttachment:
    @pytest.mark.asyncio
    async def test_upload_pdf(self, service, storage, seeker, room_id):
        attachment = await service.upload_attachment(
            seeker, room_id, "lease.pdf", "application/pdf", b"%PDF-1.4 test"
        )

        assert attachment.kind == AttachmentKind.PDF
        assert attachment.size == len(b"%PDF-1.4 test")
        assert attachment.name == "lease.pdf"
        path = attachment.url.split("/storage/", 1)[1]
        assert (storage.root / path).read_bytes() == b"%PDF-1.4 test"

    @pytest.mark.asyncio
    async def test_oversize(self, service, seeker, room_id):
        with pytest.raises(ValidationError):
            await service.upload_attachment(seeker, room_id, "big.bin", None, b"x" * 2048)

    @pytest.mark.asyncio
    async def test_empty_file(self, service, seeker, room_id):
        with pytest.raises(ValidationError):
            await service.upload_attachment(seeker, room_id, "empty.txt", "text/plain", b"")

    @pytest.mark.asyncio
    async def test_storage_failure(self, request_repo, room_repo, seeker, room_id):
        storage = MagicMock()
        storage.upload = AsyncMock(side_effect=InfrastructureError("disk full"))
        service = ChatRoomService(request_repo, room_repo, storage)

        with pytest.raises(UpstreamUnavailableError):
            await service.upload_attachment(seeker, room_id, "a.png", "image/png", b"png")

    @pytest.mark.asyncio
    async def test_storage_timeout(self, request_repo, room_repo, seeker, room_id):
        async def slow_upload(*args, **kwargs):
            await asyncio.sleep(1)

        storage = MagicMock()
        storage.upload = slow_upload
        service = ChatRoomService(request_repo, room_repo, storage, upstream_timeout=0.01)

        with pytest.raises(UpstreamUnavailableError):
            await service.upload_attachment(seeker, room_id, "a.png", "image/png", b"png")

    @pytest.mark.asyncio
    async def test_stalled_disk_times_out(
        self, request_repo, room_repo, storage, seeker, room_id, monkeypatch
    ):
        def stalled_write(self, data):
            time.sleep(0.5)

        monkeypatch.setattr(Path, "write_bytes", stalled_write)
        service = ChatRoomService(request_repo, room_repo, storage, upstream_timeout=0.05)

        started = time.monotonic()
        with pytest.raises(UpstreamUnavailableError):
            await service.upload_attachment(seeker, room_id, "a.png", "image/png", b"png")

        assert time.monotonic() - started < 0.4

    @pytest.mark.asyncio
    async def test_outsider_cannot_upload(self, service, outsider, room_id):
        with pytest.raises(ForbiddenError):
            await service.upload_attachment(outsider, room_id, "a.png", "image/png", b"png")
