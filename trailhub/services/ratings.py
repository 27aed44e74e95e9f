import logging
from typing import Literal

from pydantic import TypeAdapter

from trailhub.models import EditionRating, Page, RatingCreate, RatingSummary, RatingUpdate

from .client import ApiClient, Endpoint, unwrap


class RatingsService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def create(self, edition_id: str, data: RatingCreate) -> EditionRating:
        body = await self.client.post(
            Endpoint.EDITION_RATINGS.build(edition_id=edition_id),
            json=data.to_payload(),
        )
        self.logger.info(f"Rated edition {edition_id}")
        return EditionRating.model_validate(unwrap(body))

    async def get_by_edition(
        self,
        edition_id: str,
        page: int | None = None,
        limit: int | None = None,
        sort_by: Literal["createdAt", "avgRating"] | None = None,
        sort_order: Literal["asc", "desc"] | None = None,
    ) -> Page[EditionRating]:
        body = await self.client.get(
            Endpoint.EDITION_RATINGS.build(edition_id=edition_id),
            params={
                "page": page,
                "limit": limit,
                "sortBy": sort_by,
                "sortOrder": sort_order,
            },
        )
        ratings = TypeAdapter(Page[EditionRating]).validate_python(body)
        self.logger.info(f"Fetched {len(ratings.data)} ratings for edition {edition_id}")
        return ratings

    async def get_by_id(self, rating_id: str) -> EditionRating:
        body = await self.client.get(Endpoint.RATING.build(rating_id=rating_id))
        return EditionRating.model_validate(unwrap(body))

    async def update(self, rating_id: str, data: RatingUpdate) -> EditionRating:
        body = await self.client.put(
            Endpoint.RATING.build(rating_id=rating_id), json=data.to_payload()
        )
        return EditionRating.model_validate(unwrap(body))

    async def delete(self, rating_id: str) -> None:
        await self.client.delete(Endpoint.RATING.build(rating_id=rating_id))
        self.logger.info(f"Deleted rating {rating_id}")

    async def get_my_ratings(
        self, page: int | None = None, limit: int | None = None
    ) -> Page[EditionRating]:
        body = await self.client.get(
            Endpoint.MY_RATINGS, params={"page": page, "limit": limit}
        )
        return TypeAdapter(Page[EditionRating]).validate_python(body)

    async def get_recent(self, limit: int = 10) -> list[EditionRating]:
        body = await self.client.get(Endpoint.RECENT_RATINGS, params={"limit": limit})
        return TypeAdapter(list[EditionRating]).validate_python(unwrap(body) or [])

    async def get_summary(self, edition_id: str) -> RatingSummary:
        body = await self.client.get(
            Endpoint.EDITION_RATINGS_SUMMARY.build(edition_id=edition_id)
        )
        return RatingSummary.model_validate(unwrap(body))
