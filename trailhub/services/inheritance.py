from dataclasses import dataclass
from typing import TypeVar

from trailhub.errors import MissingParentError
from trailhub.models import Competition, Edition, Event
from trailhub.types import ABSENT, Inherited, Own, Resolved, Source

T = TypeVar("T")


@dataclass(frozen=True)
class ResolvedEdition:
    edition_id: str
    distance: Resolved[float]
    elevation: Resolved[int]
    max_participants: Resolved[int]
    city: Resolved[str]

    @property
    def resolved_distance(self) -> float | None:
        return self.distance.value

    @property
    def resolved_elevation(self) -> int | None:
        return self.elevation.value

    @property
    def resolved_max_participants(self) -> int | None:
        return self.max_participants.value

    @property
    def resolved_city(self) -> str | None:
        return self.city.value

    def as_dict(self) -> dict[str, float | int | str]:
        """Resolved values keyed like the backend's resolved view; absent fields are omitted."""
        values = {
            "resolvedDistance": self.resolved_distance,
            "resolvedElevation": self.resolved_elevation,
            "resolvedMaxParticipants": self.resolved_max_participants,
            "resolvedCity": self.resolved_city,
        }
        return {k: v for k, v in values.items() if v is not None}


def resolve_field(own: T | None, parent: T | None, source: Source) -> Resolved[T]:
    # Only None means "inherit"; 0 and "" are real values.
    if own is not None:
        return Own(own)
    if parent is not None:
        return Inherited(parent, source)
    return ABSENT


def resolve_edition(
    edition: Edition,
    competition: Competition | None,
    event: Event | None,
) -> ResolvedEdition:
    """Compute the effective distance, elevation, max participants and city.

    Each field is the edition's own value when set, otherwise the
    competition's base value (the event's city for `city`), otherwise
    absent. Raises `MissingParentError` when a parent is missing or is not
    the one the child references.
    """
    if competition is None or competition.id != edition.competition_id:
        raise MissingParentError(
            "edition", edition.id, "competition", edition.competition_id
        )
    if event is None or event.id != competition.event_id:
        raise MissingParentError(
            "competition", competition.id, "event", competition.event_id
        )

    return ResolvedEdition(
        edition_id=edition.id,
        distance=resolve_field(
            edition.distance, competition.base_distance, Source.COMPETITION
        ),
        elevation=resolve_field(
            edition.elevation, competition.base_elevation, Source.COMPETITION
        ),
        max_participants=resolve_field(
            edition.max_participants,
            competition.base_max_participants,
            Source.COMPETITION,
        ),
        city=resolve_field(edition.city, event.city, Source.EVENT),
    )
