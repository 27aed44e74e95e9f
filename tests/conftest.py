from collections.abc import Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from trailhub.services import ApiClient, SessionContext

API_PREFIX = "/api/v2"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """In-memory stand-in for the REST backend, keyed by (method, path)."""

    def __init__(self):
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, json: Any = None, status: int = 200) -> None:
        def respond(_: httpx.Request) -> httpx.Response:
            if json is None:
                return httpx.Response(status)
            return httpx.Response(status, json=json)

        self.routes[(method, path)] = respond

    def add_handler(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        handler = self.routes.get((request.method, path))
        if handler is None:
            return httpx.Response(404, json={"message": f"No route for {path}"})
        return handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def envelope(data: Any, **extra: Any) -> dict[str, Any]:
    return {"status": "success", "data": data, **extra}


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def session() -> SessionContext:
    return SessionContext()


@pytest_asyncio.fixture
async def client(backend: FakeBackend, session: SessionContext):
    api = ApiClient(session=session, transport=httpx.MockTransport(backend))
    yield api
    await api.aclose()


@pytest.fixture
def event_payload() -> dict[str, Any]:
    return {
        "id": "e-1",
        "name": "UTMB Mont-Blanc",
        "slug": "utmb-mont-blanc",
        "country": "FR",
        "city": "Chamonix",
        "isFeatured": True,
        "status": "PUBLISHED",
        "organizerId": "u-1",
        "coordinates": {"type": "Point", "coordinates": [6.8694, 45.9237]},
    }


@pytest.fixture
def competition_payload() -> dict[str, Any]:
    return {
        "id": "c-1",
        "eventId": "e-1",
        "name": "UTMB 171K",
        "slug": "utmb-171k",
        "distanceSlug": "171k",
        "type": "ULTRA",
        "baseDistance": 171,
        "baseElevation": 10000,
        "baseMaxParticipants": 2300,
        "status": "PUBLISHED",
    }


@pytest.fixture
def edition_payload() -> dict[str, Any]:
    return {
        "id": "ed-2024",
        "competitionId": "c-1",
        "year": 2024,
        "startDate": "2024-08-30",
        "distance": 174.5,
        "elevation": None,
        "maxParticipants": None,
        "city": None,
        "status": "FINISHED",
        "registrationStatus": "CLOSED",
    }
