import logging
from dataclasses import dataclass, field

from pydantic import TypeAdapter

from trailhub.models import EditionPodium, PodiumCreate, PodiumType, PodiumUpdate

from .client import ApiClient, Endpoint, unwrap


@dataclass
class PodiumsByType:
    general: EditionPodium | None = None
    male: EditionPodium | None = None
    female: EditionPodium | None = None
    categories: list[EditionPodium] = field(default_factory=list)


def group_podiums_by_type(podiums: list[EditionPodium]) -> PodiumsByType:
    grouped = PodiumsByType()
    for podium in podiums:
        match podium.type:
            case PodiumType.GENERAL if grouped.general is None:
                grouped.general = podium
            case PodiumType.MALE if grouped.male is None:
                grouped.male = podium
            case PodiumType.FEMALE if grouped.female is None:
                grouped.female = podium
            case PodiumType.CATEGORY:
                grouped.categories.append(podium)
    return grouped


class PodiumsService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def create(self, edition_id: str, data: PodiumCreate) -> EditionPodium:
        body = await self.client.post(
            Endpoint.EDITION_PODIUMS.build(edition_id=edition_id),
            json=data.to_payload(),
        )
        self.logger.info(f"Created {data.type} podium for edition {edition_id}")
        return EditionPodium.model_validate(unwrap(body))

    async def get_by_edition(
        self, edition_id: str, podium_type: PodiumType | None = None
    ) -> list[EditionPodium]:
        body = await self.client.get(
            Endpoint.EDITION_PODIUMS.build(edition_id=edition_id),
            params={"type": podium_type.value if podium_type else None},
        )
        podiums = TypeAdapter(list[EditionPodium]).validate_python(unwrap(body) or [])
        self.logger.info(f"Fetched {len(podiums)} podiums for edition {edition_id}")
        return podiums

    async def get_by_id(self, podium_id: str) -> EditionPodium:
        body = await self.client.get(Endpoint.PODIUM.build(podium_id=podium_id))
        return EditionPodium.model_validate(unwrap(body))

    async def update(self, podium_id: str, data: PodiumUpdate) -> EditionPodium:
        body = await self.client.put(
            Endpoint.PODIUM.build(podium_id=podium_id), json=data.to_payload()
        )
        return EditionPodium.model_validate(unwrap(body))

    async def delete(self, podium_id: str) -> None:
        await self.client.delete(Endpoint.PODIUM.build(podium_id=podium_id))
        self.logger.info(f"Deleted podium {podium_id}")
