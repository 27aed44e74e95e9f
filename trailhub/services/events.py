import logging

from pydantic import TypeAdapter

from trailhub.models import (
    Event,
    EventCreate,
    EventFilters,
    EventStats,
    EventUpdate,
    Page,
    SlugAvailability,
)

from .client import ApiClient, Endpoint, unwrap


class EventsService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def _list(self, endpoint: str, filters: EventFilters | None) -> Page[Event]:
        params = filters.to_params() if filters else None
        body = await self.client.get(endpoint, params=params)

        page = TypeAdapter(Page[Event]).validate_python(body)
        self.logger.info(
            f"Fetched {len(page.data)} events from {endpoint} "
            f"(page {page.pagination.page}/{page.pagination.pages})"
        )
        return page

    async def get_all(self, filters: EventFilters | None = None) -> Page[Event]:
        return await self._list(Endpoint.EVENTS, filters)

    async def get_my_events(self, filters: EventFilters | None = None) -> Page[Event]:
        return await self._list(Endpoint.MY_EVENTS, filters)

    async def get_pending(self, filters: EventFilters | None = None) -> Page[Event]:
        return await self._list(Endpoint.PENDING_EVENTS, filters)

    async def get_stats(self) -> EventStats:
        body = await self.client.get(Endpoint.EVENT_STATS)
        return EventStats.model_validate(unwrap(body))

    async def get_by_id(self, event_id: str) -> Event:
        self.logger.info(f"Fetching event {event_id}")
        body = await self.client.get(Endpoint.EVENT.build(event_id=event_id))
        return Event.model_validate(unwrap(body))

    async def get_by_slug(self, slug: str) -> Event:
        self.logger.info(f"Fetching event by slug {slug}")
        body = await self.client.get(Endpoint.EVENT_BY_SLUG.build(slug=slug))
        return Event.model_validate(unwrap(body))

    async def check_slug(self, slug: str, exclude_id: str | None = None) -> bool:
        body = await self.client.get(
            Endpoint.EVENT_CHECK_SLUG.build(slug=slug),
            params={"excludeId": exclude_id},
        )
        available = SlugAvailability.model_validate(unwrap(body)).available
        self.logger.debug(f"Slug {slug!r} available: {available}")
        return available

    async def create(self, data: EventCreate) -> Event:
        body = await self.client.post(Endpoint.EVENTS, json=data.to_payload())
        event = Event.model_validate(unwrap(body))
        self.logger.info(f"Created event {event.id} ({event.slug}) as {event.status}")
        return event

    async def update(self, event_id: str, data: EventUpdate) -> Event:
        body = await self.client.put(
            Endpoint.EVENT.build(event_id=event_id), json=data.to_payload()
        )
        self.logger.info(f"Updated event {event_id}")
        return Event.model_validate(unwrap(body))

    async def delete(self, event_id: str) -> None:
        await self.client.delete(Endpoint.EVENT.build(event_id=event_id))
        self.logger.info(f"Deleted event {event_id}")

    async def approve(self, event_id: str) -> Event:
        body = await self.client.post(Endpoint.EVENT_APPROVE.build(event_id=event_id))
        self.logger.info(f"Approved event {event_id}")
        return Event.model_validate(unwrap(body))

    async def reject(self, event_id: str, reason: str | None = None) -> Event:
        payload = {"reason": reason} if reason else {}
        body = await self.client.post(
            Endpoint.EVENT_REJECT.build(event_id=event_id), json=payload
        )
        self.logger.info(f"Rejected event {event_id}")
        return Event.model_validate(unwrap(body))

    async def toggle_featured(self, event_id: str) -> Event:
        body = await self.client.patch(Endpoint.EVENT_FEATURED.build(event_id=event_id))
        return Event.model_validate(unwrap(body))
