from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field

from ._base import ApiDate, ApiModel, UpdateModel
from .competition import CompetitionType, EventRef


class EditionStatus(StrEnum):
    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
    FINISHED = "FINISHED"
    CANCELLED = "CANCELLED"


class RegistrationStatus(StrEnum):
    NOT_OPEN = "NOT_OPEN"
    COMING_SOON = "COMING_SOON"
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    FULL = "FULL"


class Edition(ApiModel):
    id: str = Field(description="Edition id.")
    competition_id: str = Field(description="Owning competition id.")
    year: int = Field(description="Edition year, unique per competition.", ge=1900, le=2100)
    slug: str | None = Field(default=None)

    specific_date: ApiDate | None = Field(default=None, description="Exact start date, when known.")
    start_date: ApiDate | None = Field(default=None)
    end_date: ApiDate | None = Field(default=None)

    # None means "inherit from the competition (or event, for city)".
    distance: float | None = Field(default=None, ge=0)
    elevation: int | None = Field(default=None, ge=0)
    max_participants: int | None = Field(default=None, ge=0)
    city: str | None = Field(default=None)

    current_participants: int | None = Field(default=None, ge=0)
    results_url: str | None = Field(default=None)
    chronicle: str | None = Field(default=None, description="Post-race write-up.")

    status: EditionStatus = Field(default=EditionStatus.UPCOMING)
    registration_status: RegistrationStatus = Field(default=RegistrationStatus.NOT_OPEN)
    registration_url: str | None = Field(default=None)
    registration_open_date: ApiDate | None = Field(default=None)
    registration_close_date: ApiDate | None = Field(default=None)

    is_active: bool = Field(default=True)
    avg_rating: float | None = Field(default=None, ge=0, le=5)
    total_ratings: int | None = Field(default=None, ge=0)

    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)


class CompetitionSummary(ApiModel):
    id: str
    slug: str | None = Field(default=None)
    name: str | None = Field(default=None)
    type: CompetitionType | None = Field(default=None)
    base_distance: float | None = Field(default=None)
    base_elevation: int | None = Field(default=None)
    base_max_participants: int | None = Field(default=None)


class EditionFull(Edition):
    """Edition with fields already resolved by the backend."""

    resolved_distance: float | None = Field(default=None)
    resolved_elevation: int | None = Field(default=None)
    resolved_max_participants: int | None = Field(default=None)
    resolved_city: str | None = Field(default=None)

    competition: CompetitionSummary
    event: EventRef

    @classmethod
    def from_inheritance_payload(cls, payload: dict[str, Any]) -> "EditionFull":
        """Build from the flat `/with-inheritance` response.

        The backend returns the resolved values in the plain `distance`,
        `elevation`, `maxParticipants` and `city` keys and flattens the
        parents into `competition*` / `event*` keys.
        """
        return cls.model_validate(
            {
                **payload,
                "resolvedDistance": payload.get("distance"),
                "resolvedElevation": payload.get("elevation"),
                "resolvedMaxParticipants": payload.get("maxParticipants"),
                "resolvedCity": payload.get("city"),
                "competition": {
                    "id": payload.get("competitionId"),
                    "slug": payload.get("competitionSlug"),
                    "name": payload.get("competitionName"),
                    "type": payload.get("competitionType"),
                    "baseDistance": payload.get("baseDistance"),
                    "baseElevation": payload.get("baseElevation"),
                    "baseMaxParticipants": payload.get("baseMaxParticipants"),
                },
                "event": {
                    "id": payload.get("eventId"),
                    "slug": payload.get("eventSlug"),
                    "name": payload.get("eventName"),
                    "country": payload.get("eventCountry"),
                    "city": payload.get("city"),
                },
            }
        )


class EditionStats(ApiModel):
    total_ratings: int = Field(default=0, ge=0)
    avg_rating: float | None = Field(default=None)
    total_photos: int = Field(default=0, ge=0)
    total_podiums: int = Field(default=0, ge=0)
    has_weather: bool = Field(default=False)


class EditionCreate(ApiModel):
    year: int = Field(ge=1900, le=2100)
    specific_date: ApiDate | None = Field(default=None)
    start_date: ApiDate
    end_date: ApiDate | None = Field(default=None)
    distance: float | None = Field(default=None, ge=0)
    elevation: int | None = Field(default=None, ge=0)
    max_participants: int | None = Field(default=None, ge=0)
    city: str | None = Field(default=None)
    status: EditionStatus = Field(default=EditionStatus.UPCOMING)
    registration_status: RegistrationStatus = Field(default=RegistrationStatus.NOT_OPEN)
    registration_url: str | None = Field(default=None)
    registration_open_date: ApiDate | None = Field(default=None)
    registration_close_date: ApiDate | None = Field(default=None)


class EditionUpdate(UpdateModel):
    specific_date: ApiDate | None = Field(default=None)
    start_date: ApiDate | None = Field(default=None)
    end_date: ApiDate | None = Field(default=None)
    distance: float | None = Field(default=None, ge=0)
    elevation: int | None = Field(default=None, ge=0)
    max_participants: int | None = Field(default=None, ge=0)
    city: str | None = Field(default=None)
    status: EditionStatus | None = Field(default=None)
    registration_status: RegistrationStatus | None = Field(default=None)
    registration_url: str | None = Field(default=None)
    registration_open_date: ApiDate | None = Field(default=None)
    registration_close_date: ApiDate | None = Field(default=None)
    current_participants: int | None = Field(default=None, ge=0)
    results_url: str | None = Field(default=None)
    chronicle: str | None = Field(default=None)
    is_active: bool | None = Field(default=None)
