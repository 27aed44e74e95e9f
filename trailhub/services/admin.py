import logging
from typing import Any, Literal

from pydantic import TypeAdapter

from trailhub.errors import ApiError
from trailhub.models import (
    ActivityLogPage,
    AdminPagination,
    AdminStats,
    Competition,
    PendingCompetition,
    User,
    UserRole,
)

from .client import ApiClient, Endpoint, unwrap


class AdminService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def get_stats(self) -> AdminStats:
        body = await self.client.get(Endpoint.ADMIN_STATS)
        return AdminStats.model_validate(unwrap(body))

    async def get_users(
        self,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
        role: UserRole | None = None,
        is_active: bool | None = None,
        sort_by: str | None = None,
        sort_order: Literal["asc", "desc"] | None = None,
    ) -> tuple[list[User], AdminPagination]:
        body = await self.client.get(
            Endpoint.ADMIN_USERS,
            params={
                "page": page,
                "limit": limit,
                "search": search,
                "role": role.value if role else None,
                "isActive": None if is_active is None else str(is_active).lower(),
                "sortBy": sort_by,
                "sortOrder": sort_order,
            },
        )
        body = body or {}
        users = TypeAdapter(list[User]).validate_python(body.get("data") or [])
        pagination = AdminPagination.model_validate(body.get("pagination") or {})
        self.logger.info(f"Fetched {len(users)} users")
        return users, pagination

    async def get_user(self, user_id: str) -> User:
        body = await self.client.get(Endpoint.ADMIN_USER.build(user_id=user_id))
        return User.model_validate(unwrap(body))

    async def get_user_stats(self, user_id: str) -> dict[str, Any]:
        body = await self.client.get(Endpoint.ADMIN_USER_STATS.build(user_id=user_id))
        return unwrap(body)

    async def update_user_role(self, user_id: str, role: UserRole) -> User:
        body = await self.client.patch(
            Endpoint.ADMIN_USER_ROLE.build(user_id=user_id), json={"role": role.value}
        )
        self.logger.info(f"Changed role of user {user_id} to {role}")
        return User.model_validate(unwrap(body))

    async def toggle_user_status(self, user_id: str) -> User:
        body = await self.client.patch(
            Endpoint.ADMIN_USER_TOGGLE_STATUS.build(user_id=user_id)
        )
        return User.model_validate(unwrap(body))

    async def delete_user(self, user_id: str) -> None:
        await self.client.delete(Endpoint.ADMIN_USER.build(user_id=user_id))
        self.logger.info(f"Deleted user {user_id}")

    async def get_pending_competitions(
        self,
        page: int | None = None,
        limit: int | None = None,
        sort_by: Literal["createdAt", "name", "startDate"] | None = None,
        sort_order: Literal["asc", "desc"] | None = None,
    ) -> tuple[list[PendingCompetition], AdminPagination]:
        body = await self.client.get(
            Endpoint.ADMIN_PENDING_COMPETITIONS,
            params={
                "page": page,
                "limit": limit,
                "sortBy": sort_by,
                "sortOrder": sort_order,
            },
        )
        body = body or {}
        pending = TypeAdapter(list[PendingCompetition]).validate_python(
            body.get("data") or []
        )
        pagination = AdminPagination.model_validate(body.get("pagination") or {})
        self.logger.info(f"Fetched {len(pending)} competitions pending approval")
        return pending, pagination

    async def approve_competition(
        self, competition_id: str, admin_notes: str | None = None
    ) -> Competition:
        body = await self.client.post(
            Endpoint.ADMIN_COMPETITION_APPROVE.build(competition_id=competition_id),
            json={"adminNotes": admin_notes} if admin_notes else {},
        )
        self.logger.info(f"Approved competition {competition_id}")
        return Competition.model_validate(unwrap(body))

    async def reject_competition(
        self, competition_id: str, reason: str | None = None
    ) -> Competition:
        body = await self.client.post(
            Endpoint.ADMIN_COMPETITION_REJECT.build(competition_id=competition_id),
            json={"reason": reason} if reason else {},
        )
        self.logger.info(f"Rejected competition {competition_id}")
        return Competition.model_validate(unwrap(body))

    async def get_competition_stats(self) -> dict[str, Any]:
        body = await self.client.get(Endpoint.ADMIN_COMPETITION_STATS)
        return unwrap(body)

    async def get_activity_logs(
        self,
        page: int | None = None,
        limit: int | None = None,
        log_type: str | None = None,
    ) -> ActivityLogPage:
        # Not implemented by every backend yet; an empty page is acceptable.
        try:
            body = await self.client.get(
                Endpoint.ADMIN_LOGS,
                params={"page": page, "limit": limit, "type": log_type},
            )
        except ApiError as e:
            self.logger.warning(f"Activity logs unavailable, returning empty page: {e!r}")
            return ActivityLogPage()

        return ActivityLogPage.model_validate(body)
