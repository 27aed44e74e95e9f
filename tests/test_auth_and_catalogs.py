import json

import pytest
from conftest import envelope

from trailhub.errors import UnauthorizedError
from trailhub.models import CatalogCreate, CatalogKind, LoginCredentials, UserRole
from trailhub.services import AuthService, CatalogService

USER = {"id": "u-1", "email": "runner@example.com", "username": "runner", "role": "ORGANIZER"}


@pytest.mark.asyncio
async def test_login_starts_the_session(client, backend, session):
    backend.add("POST", "/auth/login", json={"token": "tok-abc", "user": USER})

    user = await AuthService(client).login(
        LoginCredentials(email="runner@example.com", password="hunter22")
    )

    assert json.loads(backend.last_request.content) == {
        "email": "runner@example.com",
        "password": "hunter22",
    }
    assert user.role == UserRole.ORGANIZER
    assert session.token == "tok-abc"
    assert session.user.username == "runner"


@pytest.mark.asyncio
async def test_token_is_sent_after_login(client, backend):
    backend.add("POST", "/auth/login", json={"token": "tok-abc", "user": USER})
    backend.add("GET", "/auth/me", json=envelope(USER))
    auth = AuthService(client)

    await auth.login(LoginCredentials(email="runner@example.com", password="hunter22"))
    await auth.me()

    assert backend.last_request.headers["Authorization"] == "Bearer tok-abc"


@pytest.mark.asyncio
async def test_failed_login_leaves_session_anonymous(client, backend, session):
    backend.add("POST", "/auth/login", json={"message": "Invalid credentials"}, status=401)

    with pytest.raises(UnauthorizedError):
        await AuthService(client).login(
            LoginCredentials(email="runner@example.com", password="wrong")
        )

    assert session.is_authenticated is False


@pytest.mark.asyncio
async def test_logout(client, session):
    session.start("tok-abc")

    AuthService(client).logout()

    assert session.is_authenticated is False


@pytest.mark.asyncio
async def test_catalog_lists_active_entries(client, backend):
    backend.add(
        "GET",
        "/terrain-types",
        json=envelope([{"id": "t-1", "name": "Technical", "slug": "technical"}]),
    )

    items = await CatalogService(client, CatalogKind.TERRAIN_TYPES).get_all(active_only=True)

    assert backend.last_request.url.params["isActive"] == "true"
    assert items[0].name == "Technical"


@pytest.mark.asyncio
async def test_catalog_admin_create(client, backend):
    backend.add(
        "POST",
        "/admin/special-series",
        json=envelope({"id": "s-1", "name": "UTMB World Series"}),
    )

    item = await CatalogService(client, CatalogKind.SPECIAL_SERIES).create(
        CatalogCreate(name="UTMB World Series", slug="utmb-world-series")
    )

    assert backend.last_request.url.path == "/api/v2/admin/special-series"
    assert item.id == "s-1"
