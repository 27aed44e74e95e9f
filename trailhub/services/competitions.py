import logging

from pydantic import TypeAdapter

from trailhub.models import Competition, CompetitionCreate, CompetitionUpdate

from .client import ApiClient, Endpoint, unwrap


class CompetitionsService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def get_by_event(self, event_id: str) -> list[Competition]:
        self.logger.info(f"Fetching competitions for event {event_id}")

        body = await self.client.get(
            Endpoint.EVENT_COMPETITIONS.build(event_id=event_id)
        )
        competitions = TypeAdapter(list[Competition]).validate_python(unwrap(body) or [])

        self.logger.info(f"Fetched {len(competitions)} competitions for event {event_id}")
        return competitions

    async def get_by_id(self, competition_id: str) -> Competition:
        body = await self.client.get(
            Endpoint.COMPETITION.build(competition_id=competition_id)
        )
        return Competition.model_validate(unwrap(body))

    async def get_by_slug(self, slug: str) -> Competition:
        body = await self.client.get(Endpoint.COMPETITION_BY_SLUG.build(slug=slug))
        return Competition.model_validate(unwrap(body))

    async def create(self, event_id: str, data: CompetitionCreate) -> Competition:
        body = await self.client.post(
            Endpoint.EVENT_COMPETITIONS.build(event_id=event_id),
            json=data.to_payload(),
        )
        competition = Competition.model_validate(unwrap(body))
        self.logger.info(
            f"Created competition {competition.id} ({competition.slug}) under event {event_id}"
        )
        return competition

    async def update(self, competition_id: str, data: CompetitionUpdate) -> Competition:
        body = await self.client.put(
            Endpoint.COMPETITION.build(competition_id=competition_id),
            json=data.to_payload(),
        )
        self.logger.info(f"Updated competition {competition_id}")
        return Competition.model_validate(unwrap(body))

    async def delete(self, competition_id: str) -> None:
        await self.client.delete(Endpoint.COMPETITION.build(competition_id=competition_id))
        self.logger.info(f"Deleted competition {competition_id}")

    async def toggle_active(self, competition_id: str) -> Competition:
        body = await self.client.post(
            Endpoint.COMPETITION_TOGGLE_ACTIVE.build(competition_id=competition_id)
        )
        return Competition.model_validate(unwrap(body))
