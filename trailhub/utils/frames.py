import polars as pl

from trailhub.models import Edition, Event
from trailhub.services.inheritance import ResolvedEdition
from trailhub.types import Resolved

_EDITION_SCHEMA = {
    "edition_id": pl.String,
    "year": pl.Int32,
    "status": pl.String,
    "registration_status": pl.String,
    "distance": pl.Float64,
    "distance_source": pl.String,
    "elevation": pl.Int32,
    "elevation_source": pl.String,
    "max_participants": pl.Int32,
    "max_participants_source": pl.String,
    "city": pl.String,
    "city_source": pl.String,
}

_EVENT_SCHEMA = {
    "id": pl.String,
    "slug": pl.String,
    "name": pl.String,
    "city": pl.String,
    "country": pl.String,
    "status": pl.String,
    "is_featured": pl.Boolean,
    "first_edition_year": pl.Int32,
}


def _source(resolved: Resolved) -> str | None:
    return resolved.source.value if resolved.source is not None else None


def editions_frame(rows: list[tuple[Edition, ResolvedEdition]]) -> pl.DataFrame:
    """One row per edition with resolved values and where each came from.

    `*_source` is 'edition', 'competition', 'event' or null when absent.
    """
    records = []
    for edition, resolved in rows:
        records.append(
            {
                "edition_id": edition.id,
                "year": edition.year,
                "status": edition.status.value,
                "registration_status": edition.registration_status.value,
                "distance": resolved.distance.value,
                "distance_source": _source(resolved.distance),
                "elevation": resolved.elevation.value,
                "elevation_source": _source(resolved.elevation),
                "max_participants": resolved.max_participants.value,
                "max_participants_source": _source(resolved.max_participants),
                "city": resolved.city.value,
                "city_source": _source(resolved.city),
            }
        )

    return pl.from_dicts(records, schema=_EDITION_SCHEMA).sort("year", descending=True)


def events_frame(events: list[Event]) -> pl.DataFrame:
    return pl.from_dicts(
        [
            {
                "id": e.id,
                "slug": e.slug,
                "name": e.name,
                "city": e.city,
                "country": e.country,
                "status": e.status.value,
                "is_featured": e.is_featured,
                "first_edition_year": e.first_edition_year,
            }
            for e in events
        ],
        schema=_EVENT_SCHEMA,
    )
