from datetime import datetime
from enum import StrEnum

from pydantic import Field

from ._base import ApiModel, UpdateModel


class CompetitionType(StrEnum):
    TRAIL = "TRAIL"
    ULTRA = "ULTRA"
    VERTICAL = "VERTICAL"
    SKYRUNNING = "SKYRUNNING"
    CANICROSS = "CANICROSS"
    OTHER = "OTHER"


class CompetitionStatus(StrEnum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class EventRef(ApiModel):
    id: str
    name: str | None = Field(default=None)
    slug: str | None = Field(default=None)
    country: str | None = Field(default=None)
    city: str | None = Field(default=None)


class Competition(ApiModel):
    id: str = Field(description="Competition id.")
    event_id: str = Field(description="Owning event id.")
    name: str = Field(description="Distance/category name (e.g. 'UTMB 171K').")
    slug: str = Field(
        description="URL-safe identifier, immutable after creation.",
        pattern=r"^[a-z0-9-]+$",
    )
    distance_slug: str | None = Field(
        default=None,
        description="Short distance label used in URLs (e.g. '171k').",
    )
    type: CompetitionType = Field(default=CompetitionType.TRAIL)

    base_distance: float | None = Field(
        default=None,
        description="Default distance in km for every edition.",
        ge=0,
    )
    base_elevation: int | None = Field(
        default=None,
        description="Default positive elevation gain in metres.",
        ge=0,
    )
    base_max_participants: int | None = Field(
        default=None,
        description="Default participant cap.",
        ge=0,
    )

    status: CompetitionStatus = Field(default=CompetitionStatus.DRAFT)
    is_active: bool = Field(default=True)

    event: EventRef | None = Field(default=None)
    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)


class CompetitionCreate(ApiModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=3, pattern=r"^[a-z0-9-]+$")
    distance_slug: str = Field(min_length=1)
    type: CompetitionType = Field(default=CompetitionType.TRAIL)
    description: str | None = Field(default=None)
    base_distance: float | None = Field(default=None, ge=0)
    base_elevation: int | None = Field(default=None, ge=0)
    base_max_participants: int | None = Field(default=None, ge=0)


class CompetitionUpdate(UpdateModel):
    name: str | None = Field(default=None, min_length=1)
    distance_slug: str | None = Field(default=None, min_length=1)
    type: CompetitionType | None = Field(default=None)
    description: str | None = Field(default=None)
    base_distance: float | None = Field(default=None, ge=0)
    base_elevation: int | None = Field(default=None, ge=0)
    base_max_participants: int | None = Field(default=None, ge=0)
    status: CompetitionStatus | None = Field(default=None)
    is_active: bool | None = Field(default=None)
