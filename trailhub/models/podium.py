from datetime import datetime
from enum import StrEnum
from typing import Self

from pydantic import Field, model_validator

from ._base import ApiModel, UpdateModel


class PodiumType(StrEnum):
    GENERAL = "GENERAL"
    MALE = "MALE"
    FEMALE = "FEMALE"
    CATEGORY = "CATEGORY"


class EditionPodium(ApiModel):
    id: str
    edition_id: str
    type: PodiumType
    category_name: str | None = Field(default=None)
    first_place: str
    first_time: str | None = Field(default=None)
    second_place: str | None = Field(default=None)
    second_time: str | None = Field(default=None)
    third_place: str | None = Field(default=None)
    third_time: str | None = Field(default=None)
    created_at: datetime | None = Field(default=None)

    @property
    def label(self) -> str:
        if self.type == PodiumType.CATEGORY and self.category_name:
            return self.category_name
        return self.type.value.title()


class PodiumCreate(ApiModel):
    type: PodiumType
    category_name: str | None = Field(default=None)
    first_place: str = Field(min_length=1)
    first_time: str | None = Field(default=None)
    second_place: str | None = Field(default=None)
    second_time: str | None = Field(default=None)
    third_place: str | None = Field(default=None)
    third_time: str | None = Field(default=None)

    @model_validator(mode="after")
    def _category_needs_name(self) -> Self:
        if self.type == PodiumType.CATEGORY and not self.category_name:
            raise ValueError("category_name is required for CATEGORY podiums")
        return self


class PodiumUpdate(UpdateModel):
    category_name: str | None = Field(default=None)
    first_place: str | None = Field(default=None, min_length=1)
    first_time: str | None = Field(default=None)
    second_place: str | None = Field(default=None)
    second_time: str | None = Field(default=None)
    third_place: str | None = Field(default=None)
    third_time: str | None = Field(default=None)
