import json

import pytest
from conftest import envelope

from trailhub.models import EventCreate, EventFilters, EventStatus
from trailhub.services import EventsService


@pytest.mark.asyncio
async def test_list_events_with_filters(client, backend, event_payload):
    backend.add(
        "GET",
        "/events",
        json=envelope(
            [event_payload],
            pagination={"page": 2, "limit": 10, "total": 11, "pages": 2},
        ),
    )

    page = await EventsService(client).get_all(
        EventFilters(page=2, search="utmb", is_featured=True, status=EventStatus.PUBLISHED)
    )

    assert dict(backend.last_request.url.params) == {
        "page": "2",
        "search": "utmb",
        "isFeatured": "true",
        "status": "PUBLISHED",
    }
    assert page.pagination.total == 11
    assert page.data[0].slug == "utmb-mont-blanc"
    assert page.data[0].coordinates.latitude == pytest.approx(45.9237)


@pytest.mark.asyncio
async def test_get_by_slug(client, backend, event_payload):
    backend.add("GET", "/events/slug/utmb-mont-blanc", json=envelope(event_payload))

    event = await EventsService(client).get_by_slug("utmb-mont-blanc")

    assert event.id == "e-1"
    assert event.status == EventStatus.PUBLISHED


@pytest.mark.asyncio
async def test_check_slug(client, backend):
    backend.add("GET", "/events/check-slug/utmb", json=envelope({"available": False}))
    service = EventsService(client)

    assert await service.check_slug("utmb") is False
    assert "excludeId" not in backend.last_request.url.params

    assert await service.check_slug("utmb", exclude_id="e-1") is False
    assert backend.last_request.url.params["excludeId"] == "e-1"


@pytest.mark.asyncio
async def test_create_event(client, backend, event_payload):
    backend.add("POST", "/events", json=envelope({**event_payload, "status": "DRAFT"}))

    event = await EventsService(client).create(
        EventCreate(name="UTMB Mont-Blanc", country="FR", city="Chamonix", first_edition_year=2003)
    )

    assert json.loads(backend.last_request.content) == {
        "name": "UTMB Mont-Blanc",
        "country": "FR",
        "city": "Chamonix",
        "firstEditionYear": 2003,
    }
    assert event.status == EventStatus.DRAFT


@pytest.mark.asyncio
async def test_reject_with_and_without_reason(client, backend, event_payload):
    backend.add("POST", "/events/e-1/reject", json=envelope({**event_payload, "status": "REJECTED"}))
    service = EventsService(client)

    event = await service.reject("e-1", reason="Duplicate listing")
    assert json.loads(backend.last_request.content) == {"reason": "Duplicate listing"}
    assert event.status == EventStatus.REJECTED

    await service.reject("e-1")
    assert json.loads(backend.last_request.content) == {}


@pytest.mark.asyncio
async def test_toggle_featured_uses_patch(client, backend, event_payload):
    backend.add("PATCH", "/events/e-1/featured", json=envelope({**event_payload, "isFeatured": False}))

    event = await EventsService(client).toggle_featured("e-1")

    assert event.is_featured is False
