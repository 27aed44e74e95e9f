from datetime import datetime

from pydantic import Field

from ._base import ApiModel, UpdateModel


class EditionPhoto(ApiModel):
    id: str
    edition_id: str
    url: str = Field(description="Full-size image URL.")
    thumbnail: str | None = Field(default=None, description="Thumbnail URL.")
    caption: str | None = Field(default=None)
    photographer: str | None = Field(default=None)
    is_featured: bool = Field(default=False)
    sort_order: int = Field(default=0, ge=0)
    created_at: datetime | None = Field(default=None)


class PhotoUpdate(UpdateModel):
    caption: str | None = Field(default=None)
    photographer: str | None = Field(default=None)
    is_featured: bool | None = Field(default=None)
    sort_order: int | None = Field(default=None, ge=0)


class PhotoReorder(ApiModel):
    photo_ids: list[str] = Field(min_length=1, description="Photo ids in display order.")
