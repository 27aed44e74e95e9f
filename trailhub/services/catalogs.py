import logging

from pydantic import TypeAdapter

from trailhub.models import CatalogCreate, CatalogItem, CatalogKind, CatalogUpdate

from .client import ApiClient, Endpoint, unwrap


class CatalogService:
    """Read and admin access to one catalog (competition types, terrain types, special series)."""

    def __init__(self, client: ApiClient, kind: CatalogKind):
        self.logger = logging.getLogger(__name__)
        self.client = client
        self.kind = kind

    async def get_all(self, active_only: bool = False) -> list[CatalogItem]:
        body = await self.client.get(
            Endpoint.CATALOG.build(kind=self.kind),
            params={"isActive": "true" if active_only else None},
        )
        items = TypeAdapter(list[CatalogItem]).validate_python(unwrap(body) or [])
        self.logger.info(f"Fetched {len(items)} {self.kind}")
        return items

    async def get_by_id(self, item_id: str) -> CatalogItem:
        body = await self.client.get(
            Endpoint.CATALOG_ITEM.build(kind=self.kind, item_id=item_id)
        )
        return CatalogItem.model_validate(unwrap(body))

    async def get_all_admin(self) -> list[CatalogItem]:
        body = await self.client.get(Endpoint.ADMIN_CATALOG.build(kind=self.kind))
        return TypeAdapter(list[CatalogItem]).validate_python(unwrap(body) or [])

    async def create(self, data: CatalogCreate) -> CatalogItem:
        body = await self.client.post(
            Endpoint.ADMIN_CATALOG.build(kind=self.kind), json=data.to_payload()
        )
        item = CatalogItem.model_validate(unwrap(body))
        self.logger.info(f"Created {self.kind} entry {item.id}")
        return item

    async def update(self, item_id: str, data: CatalogUpdate) -> CatalogItem:
        body = await self.client.put(
            Endpoint.ADMIN_CATALOG_ITEM.build(kind=self.kind, item_id=item_id),
            json=data.to_payload(),
        )
        return CatalogItem.model_validate(unwrap(body))

    async def delete(self, item_id: str) -> None:
        await self.client.delete(
            Endpoint.ADMIN_CATALOG_ITEM.build(kind=self.kind, item_id=item_id)
        )
        self.logger.info(f"Deleted {self.kind} entry {item_id}")
