import httpx
import pytest
from conftest import envelope

from trailhub.errors import (
    ApiError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    RequestValidationError,
    ServerError,
    UnauthorizedError,
    get_error_message,
    get_validation_errors,
)
from trailhub.types import Language


@pytest.mark.asyncio
async def test_requests_carry_token_and_language(client, backend, session):
    session.start("secret-token")
    session.set_language(Language.FR)
    backend.add("GET", "/events/stats", json=envelope({"total": 3}))

    await client.get("/events/stats")

    request = backend.last_request
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["Accept-Language"] == "fr"
    assert request.url.path == "/api/v2/events/stats"


@pytest.mark.asyncio
async def test_anonymous_requests_have_no_authorization_header(client, backend):
    backend.add("GET", "/events/stats", json=envelope({}))

    await client.get("/events/stats")

    assert "Authorization" not in backend.last_request.headers
    assert backend.last_request.headers["Accept-Language"] == "es"


@pytest.mark.asyncio
async def test_none_params_are_dropped(client, backend):
    backend.add("GET", "/events", json=envelope([]))

    await client.get("/events", params={"search": "utmb", "country": None})

    assert dict(backend.last_request.url.params) == {"search": "utmb"}


@pytest.mark.asyncio
async def test_empty_response_returns_none(client, backend):
    backend.add("DELETE", "/events/e-1", status=204)

    assert await client.delete("/events/e-1") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "error_type", "message"),
    [
        (400, RequestValidationError, "Invalid payload"),
        (403, ForbiddenError, "You do not have permission to perform this action"),
        (404, NotFoundError, "Resource not found"),
        (409, RequestValidationError, "Invalid payload"),
        (422, RequestValidationError, "Invalid payload"),
        (500, ServerError, "Server error. Please try again later."),
        (503, ServerError, "Server error. Please try again later."),
    ],
)
async def test_error_statuses_map_to_error_types(client, backend, status, error_type, message):
    backend.add(
        "POST",
        "/events",
        json={"message": "Invalid payload", "errors": {"name": ["Required"]}},
        status=status,
    )

    with pytest.raises(error_type) as excinfo:
        await client.post("/events", json={})

    assert excinfo.value.status_code == status
    assert excinfo.value.message == message
    assert get_error_message(excinfo.value) == message


@pytest.mark.asyncio
async def test_validation_errors_are_exposed(client, backend):
    backend.add(
        "POST",
        "/events",
        json={"message": "Validation failed", "errors": {"slug": ["Already taken"]}},
        status=422,
    )

    with pytest.raises(RequestValidationError) as excinfo:
        await client.post("/events", json={})

    assert get_validation_errors(excinfo.value) == {"slug": ["Already taken"]}


@pytest.mark.asyncio
async def test_non_json_error_body(client, backend):
    backend.add_handler(
        "GET", "/events", lambda request: httpx.Response(502, text="Bad gateway")
    )

    with pytest.raises(ServerError):
        await client.get("/events")


@pytest.mark.asyncio
async def test_unauthorized_logs_the_session_out(client, backend, session):
    logged_out = []
    session.start("expired-token")
    session.add_logout_listener(lambda: logged_out.append(True))
    backend.add("GET", "/events/my-events", json={"message": "Token expired"}, status=401)

    with pytest.raises(UnauthorizedError) as excinfo:
        await client.get("/events/my-events")

    assert excinfo.value.message == "Token expired"
    assert session.is_authenticated is False
    assert session.token is None
    assert logged_out == [True]


@pytest.mark.asyncio
async def test_network_failure_has_status_zero(client, backend):
    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    backend.add_handler("GET", "/events", unreachable)

    with pytest.raises(NetworkError) as excinfo:
        await client.get("/events")

    assert excinfo.value.status_code == 0
    assert isinstance(excinfo.value, ApiError)


def test_unknown_errors_get_a_generic_message():
    assert get_error_message(RuntimeError("boom")) == "An unexpected error occurred"
    assert get_error_message("plain text") == "plain text"
    assert get_validation_errors(RuntimeError("boom")) is None
