import logging
from enum import StrEnum
from pathlib import Path
from typing import Any

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from trailhub.errors import (
    ApiError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    RequestValidationError,
    ServerError,
    UnauthorizedError,
)
from trailhub.types import Language

from .session import SessionContext

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


class Endpoint(StrEnum):
    EVENTS = "/events"
    MY_EVENTS = "/events/my-events"
    PENDING_EVENTS = "/events/pending"
    EVENT_STATS = "/events/stats"
    EVENT = "/events/{event_id}"
    EVENT_BY_SLUG = "/events/slug/{slug}"
    EVENT_CHECK_SLUG = "/events/check-slug/{slug}"
    EVENT_APPROVE = "/events/{event_id}/approve"
    EVENT_REJECT = "/events/{event_id}/reject"
    EVENT_FEATURED = "/events/{event_id}/featured"

    EVENT_COMPETITIONS = "/events/{event_id}/competitions"
    COMPETITION = "/competitions/{competition_id}"
    COMPETITION_BY_SLUG = "/competitions/slug/{slug}"
    COMPETITION_TOGGLE_ACTIVE = "/competitions/{competition_id}/toggle-active"

    COMPETITION_EDITIONS = "/competitions/{competition_id}/editions"
    COMPETITION_EDITIONS_BULK = "/competitions/{competition_id}/editions/bulk"
    EDITION = "/editions/{edition_id}"
    EDITION_BY_SLUG = "/editions/slug/{slug}"
    EDITION_WITH_INHERITANCE = "/editions/{edition_id}/with-inheritance"
    EDITION_BY_SLUG_WITH_INHERITANCE = "/editions/slug/{slug}/with-inheritance"
    EDITION_STATS = "/editions/{edition_id}/stats"
    EDITION_TOGGLE_ACTIVE = "/editions/{edition_id}/toggle-active"

    EDITION_RATINGS = "/editions/{edition_id}/ratings"
    EDITION_RATINGS_SUMMARY = "/editions/{edition_id}/ratings/summary"
    RATING = "/ratings/{rating_id}"
    RECENT_RATINGS = "/ratings/recent"
    MY_RATINGS = "/me/ratings"

    EDITION_PODIUMS = "/editions/{edition_id}/podiums"
    PODIUM = "/podiums/{podium_id}"

    EDITION_PHOTOS = "/editions/{edition_id}/photos"
    EDITION_PHOTOS_REORDER = "/editions/{edition_id}/photos/reorder"
    PHOTO = "/photos/{photo_id}"

    EDITION_WEATHER = "/editions/{edition_id}/weather"
    EDITION_WEATHER_FETCH = "/editions/{edition_id}/weather/fetch"

    CATALOG = "/{kind}"
    CATALOG_ITEM = "/{kind}/{item_id}"
    ADMIN_CATALOG = "/admin/{kind}"
    ADMIN_CATALOG_ITEM = "/admin/{kind}/{item_id}"

    AUTH_LOGIN = "/auth/login"
    AUTH_REGISTER = "/auth/register"
    AUTH_ME = "/auth/me"

    ADMIN_STATS = "/admin/stats"
    ADMIN_USERS = "/admin/users"
    ADMIN_USER = "/admin/users/{user_id}"
    ADMIN_USER_STATS = "/admin/users/{user_id}/stats"
    ADMIN_USER_ROLE = "/admin/users/{user_id}/role"
    ADMIN_USER_TOGGLE_STATUS = "/admin/users/{user_id}/toggle-status"
    ADMIN_PENDING_COMPETITIONS = "/admin/competitions/pending"
    ADMIN_COMPETITION_APPROVE = "/admin/competitions/{competition_id}/approve"
    ADMIN_COMPETITION_REJECT = "/admin/competitions/{competition_id}/reject"
    ADMIN_COMPETITION_STATS = "/admin/competitions/stats"
    ADMIN_LOGS = "/admin/logs"

    def build(self, **kwargs: str) -> str:
        return self.value.format(**kwargs)


class _ApiConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:3001/api/v2",
        validation_alias="TRAILHUB_API_URL",
    )
    timeout_seconds: float = Field(default=10, validation_alias="TRAILHUB_TIMEOUT_SECONDS")
    language: Language = Field(default=Language.ES, validation_alias="TRAILHUB_LANGUAGE")
    session_file: Path = Field(
        default=Path.home() / ".trailhub" / "session.json",
        validation_alias="TRAILHUB_SESSION_FILE",
    )


class ApiClient:
    """Async JSON client for the events directory backend.

    Adds the bearer token and `Accept-Language` from the session to every
    request and turns failed responses into `ApiError` subclasses. A 401
    logs the session out. Nothing is retried.
    """

    def __init__(
        self,
        session: SessionContext | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.logger = logging.getLogger(__name__)

        self.config = _ApiConfig()  # pyright: ignore[reportCallIssue]
        self.session = session or SessionContext.load(
            self.config.session_file, language=self.config.language
        )

        self._http = httpx.AsyncClient(
            base_url=self.config.base_url,
            headers={"Content-Type": "application/json"},
            timeout=self.config.timeout_seconds,
            transport=transport,
        )
        self.logger.info(f"API client initialized for {self.config.base_url}")

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept-Language": self.session.language.value}
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        self.logger.debug(f"{method} {endpoint}")

        if params is not None:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = await self._http.request(
                method,
                endpoint,
                params=params,
                json=json,
                headers=self._headers(),
            )
        except httpx.RequestError as e:
            self.logger.error(f"Network error for endpoint {endpoint}: {e}")
            raise NetworkError(
                "Connection error. Check your internet connection."
            ) from e

        if response.is_error:
            error = self._to_error(response)
            self.logger.error(f"API error for endpoint {endpoint}: {error!r}")
            raise error

        self.logger.debug(f"{method} {endpoint} -> {response.status_code}")

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _to_error(self, response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        status = response.status_code
        message = body.get("message") or "Unknown error"
        errors = body.get("errors")

        if status == 401:
            self.session.logout()
            return UnauthorizedError(message, status, errors)
        if status == 403:
            return ForbiddenError(
                "You do not have permission to perform this action", status, errors
            )
        if status == 404:
            return NotFoundError("Resource not found", status, errors)
        if status >= 500:
            return ServerError("Server error. Please try again later.", status, errors)
        return RequestValidationError(message, status, errors)

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def post(
        self, endpoint: str, json: Any = None, params: dict[str, Any] | None = None
    ) -> Any:
        return await self.request("POST", endpoint, params=params, json=json)

    async def put(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("PUT", endpoint, json=json)

    async def patch(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("PATCH", endpoint, json=json)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)


def unwrap(body: Any) -> Any:
    """Return the `data` member of a `{status, data}` envelope."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body
