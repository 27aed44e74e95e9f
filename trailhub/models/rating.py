from datetime import datetime
from typing import Annotated

from pydantic import Field

from ._base import ApiModel, UpdateModel

Score = Annotated[int, Field(ge=1, le=5)]


class RatingAuthor(ApiModel):
    id: str
    username: str | None = Field(default=None)
    full_name: str | None = Field(default=None)


class RatingEditionRef(ApiModel):
    id: str
    year: int | None = Field(default=None)
    slug: str | None = Field(default=None)


class EditionRating(ApiModel):
    id: str
    edition_id: str
    user_id: str | None = Field(default=None)
    rating_info_briefing: Score
    rating_race_pack: Score
    rating_village: Score
    rating_marking: Score
    rating_aid: Score
    rating_finisher: Score
    rating_eco: Score
    comment: str | None = Field(default=None)
    user: RatingAuthor | None = Field(default=None)
    edition: RatingEditionRef | None = Field(default=None)
    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)

    @property
    def average(self) -> float:
        scores = (
            self.rating_info_briefing,
            self.rating_race_pack,
            self.rating_village,
            self.rating_marking,
            self.rating_aid,
            self.rating_finisher,
            self.rating_eco,
        )
        return sum(scores) / len(scores)


class RatingCreate(ApiModel):
    rating_info_briefing: Score
    rating_race_pack: Score
    rating_village: Score
    rating_marking: Score
    rating_aid: Score
    rating_finisher: Score
    rating_eco: Score
    comment: str | None = Field(default=None, max_length=2000)


class RatingUpdate(UpdateModel):
    rating_info_briefing: int | None = Field(default=None, ge=1, le=5)
    rating_race_pack: int | None = Field(default=None, ge=1, le=5)
    rating_village: int | None = Field(default=None, ge=1, le=5)
    rating_marking: int | None = Field(default=None, ge=1, le=5)
    rating_aid: int | None = Field(default=None, ge=1, le=5)
    rating_finisher: int | None = Field(default=None, ge=1, le=5)
    rating_eco: int | None = Field(default=None, ge=1, le=5)
    comment: str | None = Field(default=None, max_length=2000)


class RatingSummary(ApiModel):
    avg_rating: float = Field(default=0.0, ge=0, le=5)
    total_ratings: int = Field(default=0, ge=0)
    breakdown: dict[str, float] = Field(default_factory=dict)
