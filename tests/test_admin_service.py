import json

import pytest
from conftest import envelope

from trailhub.models import CompetitionStatus, UserRole
from trailhub.services import AdminService


@pytest.fixture
def pending_payload():
    return {
        "id": "c-9",
        "name": "Lavaredo 120K",
        "slug": "lavaredo-120k",
        "type": "ULTRA",
        "baseDistance": 120,
        "baseElevation": None,
        "status": "DRAFT",
        "totalEditions": 0,
        "event": {
            "id": "e-9",
            "name": "Lavaredo Ultra Trail",
            "slug": "lavaredo-ultra-trail",
            "country": "IT",
            "city": "Cortina d'Ampezzo",
            "organizer": {"id": "u-5", "email": "org@example.com", "fullName": "Org Anizer"},
        },
    }


@pytest.mark.asyncio
async def test_pending_competitions(client, backend, pending_payload):
    backend.add(
        "GET",
        "/admin/competitions/pending",
        json=envelope(
            [pending_payload],
            pagination={"currentPage": 1, "totalPages": 1, "total": 1, "hasNext": False},
        ),
    )

    pending, pagination = await AdminService(client).get_pending_competitions(
        sort_by="createdAt", sort_order="desc"
    )

    assert backend.last_request.url.params["sortBy"] == "createdAt"
    assert pending[0].status == CompetitionStatus.DRAFT
    assert pending[0].event.organizer.full_name == "Org Anizer"
    assert pagination.total == 1


@pytest.mark.asyncio
async def test_approve_and_reject(client, backend):
    competition = {
        "id": "c-9",
        "eventId": "e-9",
        "name": "Lavaredo 120K",
        "slug": "lavaredo-120k",
    }
    backend.add(
        "POST",
        "/admin/competitions/c-9/approve",
        json=envelope({**competition, "status": "PUBLISHED"}),
    )
    backend.add(
        "POST",
        "/admin/competitions/c-9/reject",
        json=envelope({**competition, "status": "REJECTED"}),
    )
    service = AdminService(client)

    approved = await service.approve_competition("c-9", admin_notes="Looks good")
    assert json.loads(backend.last_request.content) == {"adminNotes": "Looks good"}
    assert approved.status == CompetitionStatus.PUBLISHED

    rejected = await service.reject_competition("c-9")
    assert json.loads(backend.last_request.content) == {}
    assert rejected.status == CompetitionStatus.REJECTED


@pytest.mark.asyncio
async def test_update_user_role(client, backend):
    backend.add(
        "PATCH",
        "/admin/users/u-2/role",
        json=envelope({"id": "u-2", "email": "a@example.com", "role": "ORGANIZER"}),
    )

    user = await AdminService(client).update_user_role("u-2", UserRole.ORGANIZER)

    assert json.loads(backend.last_request.content) == {"role": "ORGANIZER"}
    assert user.role == UserRole.ORGANIZER


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 500])
async def test_activity_logs_degrade_to_empty_page(client, backend, status):
    backend.add("GET", "/admin/logs", json={"message": "Not implemented"}, status=status)

    logs = await AdminService(client).get_activity_logs(page=1)

    assert logs.data == []
    assert logs.pagination.total == 0
    assert logs.pagination.current_page == 1


@pytest.mark.asyncio
async def test_activity_logs_when_available(client, backend):
    backend.add(
        "GET",
        "/admin/logs",
        json={
            "success": True,
            "data": [{"type": "EVENT_APPROVED", "eventId": "e-1"}],
            "pagination": {"currentPage": 1, "totalPages": 1, "total": 1},
        },
    )

    logs = await AdminService(client).get_activity_logs()

    assert logs.data == [{"type": "EVENT_APPROVED", "eventId": "e-1"}]
    assert logs.pagination.total_pages == 1


@pytest.mark.asyncio
async def test_empty_list_responses(client, backend):
    backend.add("GET", "/admin/users", status=204)
    backend.add("GET", "/admin/competitions/pending", status=204)
    service = AdminService(client)

    users, pagination = await service.get_users()
    assert users == []
    assert pagination.total == 0

    pending, pagination = await service.get_pending_competitions()
    assert pending == []
    assert pagination.has_next is False
