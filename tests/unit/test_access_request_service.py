import pytest
from datetime import timedelta

from app.core.exceptions import ForbiddenError, InvalidArgumentError, NotFoundError
from app.models.recruitment.candidate import Candidate
from app.models.shared.enums import AccessRequestStatus, ResourceType
from app.services.access.access_request_service import AccessRequestService, parse_request_id, to_response
from app.utils.clock import as_utc


@pytest.mark.asyncio
class TestCreateAccessRequest:
    """Opening a request against another admin's resource"""

    async def test_create_pending_request(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)

        request = await service.create("bob", "Employee", 7, "need access")

        assert request.status == AccessRequestStatus.PENDING
        assert request.owner_admin_id == "alice"
        assert request.requester_admin_id == "bob"
        assert request.resource_type == ResourceType.EMPLOYEE
        assert request.resource_id == 7
        assert request.note == "need access"
        assert as_utc(request.requested_at) == clock.now
        assert request.decided_at is None
        assert request.allowed_until is None

    async def test_create_accepts_display_id(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)

        request = await service.create("bob", "employee", "E-7")

        assert request.resource_id == 7

    async def test_self_request_rejected(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)

        with pytest.raises(InvalidArgumentError) as exc:
            await service.create("ALICE", "Employee", 7)

        assert exc.value.status_code == 400
        assert exc.value.detail == "You already own this resource"

    async def test_missing_requester_rejected(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)

        with pytest.raises(InvalidArgumentError):
            await service.create("  ", "Employee", 7)

    async def test_unknown_resource_not_found(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)

        with pytest.raises(NotFoundError):
            await service.create("bob", "Employee", 99)
        with pytest.raises(NotFoundError):
            await service.create("bob", "Spaceship", 7)

    async def test_unowned_resource_not_found(self, session, clock, alice_employee):
        alice_employee.owner_admin_id = None
        await session.commit()
        service = AccessRequestService(session, clock)

        with pytest.raises(NotFoundError):
            await service.create("bob", "Employee", 7)

    async def test_second_pending_request_rejected(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        await service.create("bob", "Employee", 7)

        with pytest.raises(InvalidArgumentError):
            await service.create("bob", "Employee", 7)

    async def test_new_request_allowed_after_decision(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        first = await service.create("bob", "Employee", 7)
        await service.deny(first.id, "alice")

        second = await service.create("bob", "Employee", 7)

        assert second.id != first.id
        assert second.status == AccessRequestStatus.PENDING

    async def test_other_requesters_are_independent(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        await service.create("bob", "Employee", 7)

        carol = await service.create("carol", "Employee", 7)

        assert carol.status == AccessRequestStatus.PENDING


@pytest.mark.asyncio
class TestDecideAccessRequest:
    """Approve / deny, owner only, exactly once"""

    async def test_approve_defaults_to_fifteen_minutes(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        clock.advance(minutes=2)

        approved = await service.approve(request.id, "alice")

        assert approved.status == AccessRequestStatus.APPROVED
        assert as_utc(approved.decided_at) == clock.now
        assert as_utc(approved.allowed_until) == clock.now + timedelta(minutes=15)

    async def test_approve_with_custom_window(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)

        approved = await service.approve(request.id, "alice", allow_minutes=30)

        assert as_utc(approved.allowed_until) == clock.now + timedelta(minutes=30)

    @pytest.mark.parametrize("minutes", [0, -5, 7 * 24 * 60 + 1, 10**10])
    async def test_approve_rejects_out_of_range_window(self, session, clock, alice_employee, minutes):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        request_id = request.id

        with pytest.raises(InvalidArgumentError):
            await service.approve(request_id, "alice", allow_minutes=minutes)

        reloaded = await service.get_access_request(request_id)
        assert reloaded.status == AccessRequestStatus.PENDING
        assert reloaded.allowed_until is None

    async def test_approve_accepts_longest_window(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)

        approved = await service.approve(request.id, "alice", allow_minutes=7 * 24 * 60)

        assert as_utc(approved.allowed_until) == clock.now + timedelta(days=7)

    async def test_only_owner_can_decide(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        request_id = request.id

        with pytest.raises(ForbiddenError) as exc:
            await service.approve(request_id, "bob")
        assert exc.value.status_code == 400

        with pytest.raises(ForbiddenError):
            await service.deny(request_id, "mallory")

        reloaded = await service.get_access_request(request_id)
        assert reloaded.status == AccessRequestStatus.PENDING

    async def test_owner_match_ignores_case(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)

        approved = await service.approve(request.id, "Alice")

        assert approved.status == AccessRequestStatus.APPROVED

    async def test_missing_request_not_found(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)

        with pytest.raises(NotFoundError):
            await service.approve(404, "alice")
        with pytest.raises(NotFoundError):
            await service.deny(404, "alice")

    async def test_approve_twice_rejected(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        request_id = request.id
        await service.approve(request_id, "alice")

        with pytest.raises(InvalidArgumentError):
            await service.approve(request_id, "alice", allow_minutes=60)

    async def test_approved_request_cannot_be_denied(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        request_id = request.id
        await service.approve(request_id, "alice")

        with pytest.raises(InvalidArgumentError):
            await service.deny(request_id, "alice")

        reloaded = await service.get_access_request(request_id)
        assert reloaded.status == AccessRequestStatus.APPROVED

    async def test_deny_leaves_allowed_until_unset(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)

        denied = await service.deny(request.id, "alice")

        assert denied.status == AccessRequestStatus.DENIED
        assert as_utc(denied.decided_at) == clock.now
        assert denied.allowed_until is None

        with pytest.raises(InvalidArgumentError):
            await service.approve(request.id, "alice")


@pytest.mark.asyncio
class TestAccessRequestListing:
    """Inbox, outbox and the active-grant countdown list"""

    async def _add_candidate(self, session) -> Candidate:
        candidate = Candidate(
            first_name="Sam",
            last_name="Lee",
            email="sam.lee@example.com",
            owner_admin_id="alice",
        )
        session.add(candidate)
        await session.commit()
        return candidate

    async def test_inbox_and_outbox_newest_first(self, session, clock, alice_employee):
        candidate = await self._add_candidate(session)
        service = AccessRequestService(session, clock)
        older = await service.create("bob", "Employee", 7)
        clock.advance(minutes=5)
        newer = await service.create("bob", "Candidate", candidate.id)

        inbox = await service.get_inbox("alice")
        outbox = await service.get_outbox("bob")

        assert [r.id for r in inbox] == [newer.id, older.id]
        assert [r.id for r in outbox] == [newer.id, older.id]
        assert await service.get_inbox("bob") == []
        assert await service.get_outbox("alice") == []

    async def test_listing_without_admin_is_empty(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        await service.create("bob", "Employee", 7)

        assert await service.get_inbox(None) == []
        assert await service.get_outbox("") == []
        assert await service.get_active_grants(None) == []

    async def test_active_grants_drop_out_when_expired(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        await service.approve(request.id, "alice", allow_minutes=10)

        assert [r.id for r in await service.get_active_grants("bob")] == [request.id]

        clock.advance(minutes=10)
        assert await service.get_active_grants("bob") == []

    async def test_active_approval_boundary_is_strict(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        await service.approve(request.id, "alice")

        clock.advance(minutes=14, seconds=59)
        assert await service.find_active_approval("bob", ResourceType.EMPLOYEE, 7) is not None

        clock.advance(seconds=1)
        assert await service.find_active_approval("bob", ResourceType.EMPLOYEE, 7) is None


@pytest.mark.asyncio
class TestConcurrentAccessRequests:
    """Races the pre-checks cannot see: the database has the last word"""

    async def test_unique_pending_index_rejects_racing_create(self, session, clock, alice_employee, monkeypatch):
        service = AccessRequestService(session, clock)
        await service.create("bob", "Employee", 7)

        async def no_pending(*args, **kwargs):
            return None

        # the second create misses the first one, as a concurrent request would
        monkeypatch.setattr(service, "find_pending", no_pending)

        with pytest.raises(InvalidArgumentError) as exc:
            await service.create("bob", "Employee", 7)

        assert exc.value.status_code == 400
        assert len(await service.get_outbox("bob")) == 1

    async def test_stale_decision_loses_compare_and_set(self, session, session_maker, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        request_id = request.id

        # decided elsewhere while this session still holds the row as Pending
        async with session_maker() as other:
            await AccessRequestService(other, clock).approve(request_id, "alice")
        assert request.status == AccessRequestStatus.PENDING

        with pytest.raises(InvalidArgumentError) as exc:
            await service.deny(request_id, "alice")

        assert exc.value.detail == "Access request has already been decided"
        reloaded = await service.get_access_request(request_id)
        assert reloaded.status == AccessRequestStatus.APPROVED
        assert reloaded.allowed_until is not None

@pytest.mark.asyncio
class TestAccessRequestResponse:
    async def test_response_uses_display_ids(self, session, clock, alice_employee):
        service = AccessRequestService(session, clock)
        request = await service.create("bob", "Employee", 7)
        approved = await service.approve(request.id, "alice")

        response = to_response(approved)

        assert response.id == f"AR-{request.id}"
        assert response.resource_type == "Employee"
        assert response.resource_id == "E-7"
        assert response.status == AccessRequestStatus.APPROVED
        assert response.allowed_until == clock.now + timedelta(minutes=15)
        assert response.requested_at.tzinfo is not None


class TestParseRequestId:
    def test_accepts_bare_and_prefixed(self):
        assert parse_request_id("12") == 12
        assert parse_request_id("AR-12") == 12
        assert parse_request_id("ar-12") == 12
        assert parse_request_id(12) == 12

    @pytest.mark.parametrize("raw", [None, "", "AR-", "abc", "E-12", "-3", "AR-²", "١٢"])
    def test_rejects_garbage(self, raw):
        with pytest.raises(InvalidArgumentError):
            parse_request_id(raw)
