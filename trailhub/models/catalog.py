from enum import StrEnum

from pydantic import Field

from ._base import ApiModel, UpdateModel


class CatalogKind(StrEnum):
    COMPETITION_TYPES = "competition-types"
    TERRAIN_TYPES = "terrain-types"
    SPECIAL_SERIES = "special-series"


class CatalogItem(ApiModel):
    id: str
    name: str
    slug: str | None = Field(default=None)
    description: str | None = Field(default=None)
    website: str | None = Field(default=None)
    is_active: bool = Field(default=True)
    sort_order: int | None = Field(default=None)


class CatalogCreate(ApiModel):
    name: str = Field(min_length=1)
    slug: str | None = Field(default=None, pattern=r"^[a-z0-9-]+$")
    description: str | None = Field(default=None)
    website: str | None = Field(default=None)
    is_active: bool | None = Field(default=None)


class CatalogUpdate(UpdateModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None)
    website: str | None = Field(default=None)
    is_active: bool | None = Field(default=None)
    sort_order: int | None = Field(default=None)
