import logging

from pydantic import TypeAdapter

from trailhub.models import EditionPhoto, PhotoReorder, PhotoUpdate

from .client import ApiClient, Endpoint, unwrap


class PhotosService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def get_by_edition(
        self, edition_id: str, featured_only: bool = False
    ) -> list[EditionPhoto]:
        body = await self.client.get(
            Endpoint.EDITION_PHOTOS.build(edition_id=edition_id),
            params={"featured": "true" if featured_only else None},
        )
        photos = TypeAdapter(list[EditionPhoto]).validate_python(unwrap(body) or [])
        self.logger.info(f"Fetched {len(photos)} photos for edition {edition_id}")
        return photos

    async def get_by_id(self, photo_id: str) -> EditionPhoto:
        body = await self.client.get(Endpoint.PHOTO.build(photo_id=photo_id))
        return EditionPhoto.model_validate(unwrap(body))

    async def update(self, photo_id: str, data: PhotoUpdate) -> EditionPhoto:
        body = await self.client.put(
            Endpoint.PHOTO.build(photo_id=photo_id), json=data.to_payload()
        )
        return EditionPhoto.model_validate(unwrap(body))

    async def delete(self, photo_id: str) -> None:
        await self.client.delete(Endpoint.PHOTO.build(photo_id=photo_id))
        self.logger.info(f"Deleted photo {photo_id}")

    async def reorder(self, edition_id: str, data: PhotoReorder) -> None:
        await self.client.post(
            Endpoint.EDITION_PHOTOS_REORDER.build(edition_id=edition_id),
            json=data.to_payload(),
        )
        self.logger.info(f"Reordered {len(data.photo_ids)} photos for edition {edition_id}")
