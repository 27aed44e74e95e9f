import logging
from typing import Literal

from pydantic import TypeAdapter

from trailhub.errors import MissingParentError, NotFoundError
from trailhub.models import (
    Edition,
    EditionCreate,
    EditionFull,
    EditionStats,
    EditionUpdate,
)

from .client import ApiClient, Endpoint, unwrap
from .competitions import CompetitionsService
from .events import EventsService
from .inheritance import ResolvedEdition, resolve_edition


class EditionsService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def get_by_competition(
        self,
        competition_id: str,
        sort_order: Literal["asc", "desc"] = "desc",
    ) -> list[Edition]:
        self.logger.info(f"Fetching editions for competition {competition_id}")

        body = await self.client.get(
            Endpoint.COMPETITION_EDITIONS.build(competition_id=competition_id)
        )
        editions = TypeAdapter(list[Edition]).validate_python(unwrap(body) or [])
        editions.sort(key=lambda e: e.year, reverse=sort_order == "desc")

        self.logger.info(
            f"Fetched {len(editions)} editions for competition {competition_id}"
        )
        return editions

    async def get_by_id(self, edition_id: str) -> Edition:
        body = await self.client.get(Endpoint.EDITION.build(edition_id=edition_id))
        return Edition.model_validate(unwrap(body))

    async def get_by_slug(self, slug: str) -> Edition:
        body = await self.client.get(Endpoint.EDITION_BY_SLUG.build(slug=slug))
        return Edition.model_validate(unwrap(body))

    async def get_with_inheritance(self, edition_id: str) -> EditionFull:
        self.logger.info(f"Fetching edition {edition_id} with inheritance")
        body = await self.client.get(
            Endpoint.EDITION_WITH_INHERITANCE.build(edition_id=edition_id)
        )
        return EditionFull.from_inheritance_payload(unwrap(body))

    async def get_by_slug_with_inheritance(self, slug: str) -> EditionFull:
        self.logger.info(f"Fetching edition {slug} with inheritance")
        body = await self.client.get(
            Endpoint.EDITION_BY_SLUG_WITH_INHERITANCE.build(slug=slug)
        )
        return EditionFull.from_inheritance_payload(unwrap(body))

    async def get_by_year(self, competition_id: str, year: int) -> Edition | None:
        editions = await self.get_by_competition(competition_id)
        return next((e for e in editions if e.year == year), None)

    async def get_stats(self, edition_id: str) -> EditionStats:
        body = await self.client.get(Endpoint.EDITION_STATS.build(edition_id=edition_id))
        return EditionStats.model_validate(unwrap(body))

    async def get_available_years(self, competition_id: str) -> list[int]:
        editions = await self.get_by_competition(competition_id)
        return sorted((e.year for e in editions), reverse=True)

    async def get_latest(self, competition_id: str) -> Edition | None:
        editions = await self.get_by_competition(competition_id, sort_order="desc")
        return editions[0] if editions else None

    async def create(self, competition_id: str, data: EditionCreate) -> Edition:
        body = await self.client.post(
            Endpoint.COMPETITION_EDITIONS.build(competition_id=competition_id),
            json=data.to_payload(),
        )
        edition = Edition.model_validate(unwrap(body))
        self.logger.info(
            f"Created edition {edition.year} ({edition.id}) for competition {competition_id}"
        )
        return edition

    async def create_bulk(self, competition_id: str, years: list[int]) -> list[Edition]:
        body = await self.client.post(
            Endpoint.COMPETITION_EDITIONS_BULK.build(competition_id=competition_id),
            json={"years": years},
        )
        editions = TypeAdapter(list[Edition]).validate_python(unwrap(body) or [])
        self.logger.info(
            f"Created {len(editions)} editions for competition {competition_id}"
        )
        return editions

    async def update(self, edition_id: str, data: EditionUpdate) -> Edition:
        body = await self.client.put(
            Endpoint.EDITION.build(edition_id=edition_id), json=data.to_payload()
        )
        self.logger.info(f"Updated edition {edition_id}")
        return Edition.model_validate(unwrap(body))

    async def delete(self, edition_id: str) -> None:
        await self.client.delete(Endpoint.EDITION.build(edition_id=edition_id))
        self.logger.info(f"Deleted edition {edition_id}")

    async def toggle_active(self, edition_id: str) -> Edition:
        body = await self.client.post(
            Endpoint.EDITION_TOGGLE_ACTIVE.build(edition_id=edition_id)
        )
        return Edition.model_validate(unwrap(body))

    async def resolve(self, edition_id: str) -> ResolvedEdition:
        """Fetch an edition with its parents and resolve it locally."""
        edition = await self.get_by_id(edition_id)

        try:
            competition = await CompetitionsService(self.client).get_by_id(
                edition.competition_id
            )
        except NotFoundError as e:
            raise MissingParentError(
                "edition", edition.id, "competition", edition.competition_id
            ) from e

        try:
            event = await EventsService(self.client).get_by_id(competition.event_id)
        except NotFoundError as e:
            raise MissingParentError(
                "competition", competition.id, "event", competition.event_id
            ) from e

        resolved = resolve_edition(edition, competition, event)
        self.logger.debug(f"Resolved edition {edition_id}: {resolved.as_dict()}")
        return resolved
