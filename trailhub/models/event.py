from datetime import datetime
from enum import StrEnum

from pydantic import Field

from ._base import ApiModel, UpdateModel
from .user import UserRole


class EventStatus(StrEnum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    ARCHIVED = "ARCHIVED"

    @classmethod
    def initial_for(cls, role: UserRole) -> "EventStatus":
        """Status a newly created event starts in for a creator with `role`."""
        return cls.PUBLISHED if role == UserRole.ADMIN else cls.DRAFT


class GeoPoint(ApiModel):
    type: str = Field(default="Point")
    coordinates: tuple[float, float] = Field(
        description="GeoJSON order: (longitude, latitude).",
    )

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


class OrganizerRef(ApiModel):
    id: str
    name: str | None = Field(default=None)
    email: str | None = Field(default=None)


class Event(ApiModel):
    id: str = Field(description="Event id.")
    name: str = Field(description="Race brand name (e.g. 'UTMB Mont-Blanc').")
    slug: str = Field(
        description="URL-safe unique identifier.",
        pattern=r"^[a-z0-9-]+$",
    )

    description: str | None = Field(default=None)
    website: str | None = Field(default=None)
    email: str | None = Field(default=None)
    phone: str | None = Field(default=None)

    country: str = Field(description="ISO country code or name.")
    city: str | None = Field(default=None, description="Host city.")
    region: str | None = Field(default=None)
    coordinates: GeoPoint | None = Field(default=None)

    first_edition_year: int | None = Field(default=None, ge=1900, le=2100)
    logo: str | None = Field(default=None, description="Logo URL.")
    banner_image: str | None = Field(default=None, description="Cover image URL.")
    gallery: list[str] = Field(default_factory=list, description="Gallery URLs.")

    is_featured: bool = Field(default=False)
    status: EventStatus = Field(default=EventStatus.DRAFT)

    organizer_id: str | None = Field(default=None)
    organizer: OrganizerRef | None = Field(default=None)
    approved_by: str | None = Field(default=None)
    approved_at: datetime | None = Field(default=None)
    rejection_reason: str | None = Field(default=None)
    admin_notes: str | None = Field(default=None)

    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)


class EventStats(ApiModel):
    total: int = Field(default=0, ge=0)
    published: int = Field(default=0, ge=0)
    draft: int = Field(default=0, ge=0)
    rejected: int = Field(default=0, ge=0)
    approval_rate: float | None = Field(default=None)


class SlugAvailability(ApiModel):
    available: bool


class EventFilters(ApiModel):
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    search: str | None = Field(default=None)
    status: EventStatus | None = Field(default=None)
    country: str | None = Field(default=None)
    organizer_id: str | None = Field(default=None)
    is_featured: bool | None = Field(default=None)

    def to_params(self) -> dict[str, str]:
        params = {}
        for key, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            else:
                params[key] = str(value)
        return params


class EventCreate(ApiModel):
    name: str = Field(min_length=1)
    slug: str | None = Field(default=None, min_length=3, pattern=r"^[a-z0-9-]+$")
    description: str | None = Field(default=None)
    website: str | None = Field(default=None)
    email: str | None = Field(default=None)
    phone: str | None = Field(default=None)
    country: str = Field(min_length=1)
    city: str = Field(min_length=1)
    region: str | None = Field(default=None)
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)
    first_edition_year: int | None = Field(default=None, ge=1900, le=2100)
    logo: str | None = Field(default=None)
    banner_image: str | None = Field(default=None)
    is_featured: bool | None = Field(default=None)


class EventUpdate(UpdateModel):
    name: str | None = Field(default=None, min_length=1)
    slug: str | None = Field(default=None, min_length=3, pattern=r"^[a-z0-9-]+$")
    description: str | None = Field(default=None)
    website: str | None = Field(default=None)
    email: str | None = Field(default=None)
    phone: str | None = Field(default=None)
    country: str | None = Field(default=None)
    city: str | None = Field(default=None)
    region: str | None = Field(default=None)
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)
    first_edition_year: int | None = Field(default=None, ge=1900, le=2100)
    logo: str | None = Field(default=None)
    banner_image: str | None = Field(default=None)
    is_featured: bool | None = Field(default=None)
    status: EventStatus | None = Field(default=None)
    rejection_reason: str | None = Field(default=None)
    admin_notes: str | None = Field(default=None)
