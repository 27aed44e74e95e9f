from datetime import datetime
from typing import Any

from pydantic import Field

from ._base import ApiModel
from .competition import CompetitionStatus


class RoleCount(ApiModel):
    role: str
    count: int = Field(ge=0)


class ActivityPoint(ApiModel):
    type: str
    count: int = Field(ge=0)
    date: str


class AdminStats(ApiModel):
    total_users: int = Field(default=0, ge=0)
    total_events: int = Field(default=0, ge=0)
    total_competitions: int = Field(default=0, ge=0)
    total_editions: int = Field(default=0, ge=0)
    pending_approvals: int = Field(default=0, ge=0)
    new_users_this_month: int = Field(default=0, ge=0)
    new_events_this_month: int = Field(default=0, ge=0)
    active_users: int = Field(default=0, ge=0)
    users_by_role: list[RoleCount] = Field(default_factory=list)
    recent_activity: list[ActivityPoint] = Field(default_factory=list)


class AdminPagination(ApiModel):
    current_page: int = Field(default=1, ge=1)
    total_pages: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    has_next: bool = Field(default=False)
    has_prev: bool = Field(default=False)


class PendingOrganizer(ApiModel):
    id: str
    email: str | None = Field(default=None)
    username: str | None = Field(default=None)
    full_name: str | None = Field(default=None)


class PendingEventRef(ApiModel):
    id: str
    name: str
    slug: str
    country: str | None = Field(default=None)
    city: str | None = Field(default=None)
    organizer: PendingOrganizer | None = Field(default=None)


class PendingCompetition(ApiModel):
    id: str
    name: str
    slug: str
    type: str | None = Field(default=None)
    base_distance: float | None = Field(default=None)
    base_elevation: int | None = Field(default=None)
    status: CompetitionStatus = Field(default=CompetitionStatus.DRAFT)
    event: PendingEventRef
    total_editions: int = Field(default=0, ge=0)
    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)


class ActivityLogPage(ApiModel):
    data: list[dict[str, Any]] = Field(default_factory=list)
    pagination: AdminPagination = Field(default_factory=AdminPagination)
