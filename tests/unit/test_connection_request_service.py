"""
Tests for ConnectionRequestService against a real SQLite repository.
"""

from uuid import uuid4

import pytest

from legalconnect.core.exceptions import (
    DuplicateRequestError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from legalconnect.interfaces.auth_provider import User
from legalconnect.models.enums import RequestStatus, UserRole
from legalconnect.services.connection_request_service import ConnectionRequestService


@pytest.fixture
def service(request_repo):
    return ConnectionRequestService(request_repo)


class TestCreateRequest:
    @pytest.mark.asyncio
    async def test_create_and_list(self, service, seeker, lawyer):
        request_id = await service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        seeker_view = await service.list_requests_for_seeker(seeker, "U1")
        lawyer_view = await service.list_requests_for_lawyer(lawyer, "L1")
        assert [r.id for r in seeker_view] == [request_id]
        assert [r.id for r in lawyer_view] == [request_id]
        assert lawyer_view[0].status == RequestStatus.PENDING
        assert lawyer_view[0].subject == "Tenancy dispute"

    @pytest.mark.asyncio
    async def test_numeric_ids_match_string_ids(self, service):
        caller = User(id=101, role=UserRole.USER)

        await service.create_request(caller, 101, 202, "Property deed")

        assert len(await service.list_requests_for_seeker(caller, "101")) == 1

    @pytest.mark.asyncio
    async def test_duplicate(self, service, seeker):
        await service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        with pytest.raises(DuplicateRequestError):
            await service.create_request(seeker, "U1", "L1", "Tenancy dispute")

    @pytest.mark.asyncio
    async def test_caller_must_be_seeker(self, service, outsider):
        with pytest.raises(ForbiddenError):
            await service.create_request(outsider, "U1", "L1", "Tenancy dispute")

    @pytest.mark.asyncio
    async def test_lawyer_cannot_send(self, service, lawyer):
        with pytest.raises(ForbiddenError):
            await service.create_request(lawyer, "L1", "L2", "Referral")

    @pytest.mark.asyncio
    async def test_blank_subject(self, service, seeker):
        with pytest.raises(ValidationError):
            await service.create_request(seeker, "U1", "L1", "   ")

    @pytest.mark.asyncio
    async def test_self_request(self, service, seeker):
        with pytest.raises(ValidationError):
            await service.create_request(seeker, "U1", "U1", "Myself")

    @pytest.mark.asyncio
    async def test_invalid_lawyer_id(self, service, seeker):
        with pytest.raises(ValidationError):
            await service.create_request(seeker, "U1", "", "Tenancy dispute")


class TestListing:
    @pytest.mark.asyncio
    async def test_cannot_list_someone_else(self, service, seeker, lawyer):
        await service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        with pytest.raises(ForbiddenError):
            await service.list_requests_for_lawyer(seeker, "L1")
        with pytest.raises(ForbiddenError):
            await service.list_requests_for_seeker(lawyer, "U1")

    @pytest.mark.asyncio
    async def test_get_request_parties_only(self, service, seeker, lawyer, outsider):
        request_id = await service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        assert (await service.get_request(lawyer, request_id)).id == request_id
        with pytest.raises(ForbiddenError):
            await service.get_request(outsider, request_id)
        with pytest.raises(NotFoundError):
            await service.get_request(seeker, uuid4())


class TestReject:
    @pytest.mark.asyncio
    async def test_reject_then_request_again(self, service, seeker, lawyer):
        request_id = await service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        rejected = await service.reject(lawyer, request_id)
        again = await service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        assert rejected.status == RequestStatus.REJECTED
        assert again != request_id

    @pytest.mark.asyncio
    async def test_only_addressed_lawyer(self, service, seeker):
        request_id = await service.create_request(seeker, "U1", "L1", "Tenancy dispute")
        other_lawyer = User(id="L2", role=UserRole.LAWYER)

        with pytest.raises(ForbiddenError):
            await service.reject(other_lawyer, request_id)
        with pytest.raises(ForbiddenError):
            await service.reject(seeker, request_id)

    @pytest.mark.asyncio
    async def test_set_status_accepted_refused(self, service, seeker, lawyer):
        request_id = await service.create_request(seeker, "U1", "L1", "Tenancy dispute")

        with pytest.raises(InvalidTransitionError):
            await service.set_status(lawyer, request_id, RequestStatus.ACCEPTED)

    @pytest.mark.asyncio
    async def test_reject_missing(self, service, lawyer):
        with pytest.raises(NotFoundError):
            await service.reject(lawyer, uuid4())
