"""
Tests for domain error translation and router-level behavior.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi import HTTPException

from legalconnect.api import chat_rooms, connection_requests
from legalconnect.api.errors import to_http_exception
from legalconnect.core.exceptions import (
    AuthenticationError,
    DuplicateRequestError,
    EmptyMessageError,
    ForbiddenError,
    InvalidTransitionError,
    LegalConnectError,
    NotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from legalconnect.interfaces.auth_provider import User
from legalconnect.models.chat_room import ChatMessageCreate
from legalconnect.models.connection_request import ConnectionRequestCreate
from legalconnect.models.enums import UserRole


@pytest.mark.parametrize(
    "error, status_code",
    [
        (NotFoundError("missing"), 404),
        (DuplicateRequestError("U1", "L1"), 409),
        (InvalidTransitionError("already rejected"), 409),
        (EmptyMessageError("empty"), 400),
        (ValidationError("bad"), 400),
        (AuthenticationError("no token"), 401),
        (ForbiddenError("not yours"), 403),
        (UpstreamUnavailableError("down"), 503),
        (LegalConnectError("unknown"), 500),
    ],
)
def test_to_http_exception(error, status_code):
    http_error = to_http_exception(error)

    assert http_error.status_code == status_code
    assert http_error.detail == error.message


@pytest.mark.asyncio
async def test_create_request_defaults_seeker_to_caller():
    service = SimpleNamespace(create_request=AsyncMock(return_value=uuid4()))
    user = User(id="U1", role=UserRole.USER)

    result = await connection_requests.create_request(
        ConnectionRequestCreate(lawyer_id="L1", subject="Tenancy dispute"), user, service
    )

    service.create_request.assert_awaited_once_with(
        user, seeker_id="U1", lawyer_id="L1", subject="Tenancy dispute"
    )
    assert result.request_id == service.create_request.return_value


@pytest.mark.asyncio
async def test_create_request_duplicate_is_conflict():
    service = SimpleNamespace(
        create_request=AsyncMock(side_effect=DuplicateRequestError("U1", "L1"))
    )

    with pytest.raises(HTTPException) as exc_info:
        await connection_requests.create_request(
            ConnectionRequestCreate(lawyer_id="L1", subject="Tenancy dispute"),
            User(id="U1"),
            service,
        )

    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_list_requests_uses_role_when_unfiltered():
    service = SimpleNamespace(
        list_requests_for_lawyer=AsyncMock(return_value=[]),
        list_requests_for_seeker=AsyncMock(return_value=[]),
    )
    lawyer = User(id="L1", role=UserRole.LAWYER)

    await connection_requests.list_requests(lawyer, service, seeker_id=None, lawyer_id=None)

    service.list_requests_for_lawyer.assert_awaited_once_with(lawyer, "L1")
    service.list_requests_for_seeker.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_requests_rejects_both_filters():
    service = SimpleNamespace()

    with pytest.raises(HTTPException) as exc_info:
        await connection_requests.list_requests(User(id="U1"), service, seeker_id="U1", lawyer_id="L1")

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_send_empty_message_is_bad_request():
    service = SimpleNamespace(send_message=AsyncMock(side_effect=EmptyMessageError("empty")))

    with pytest.raises(HTTPException) as exc_info:
        await chat_rooms.send_message(uuid4(), ChatMessageCreate(text=""), User(id="U1"), service)

    assert exc_info.value.status_code == 400
