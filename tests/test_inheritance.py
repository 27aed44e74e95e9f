"""Edition -> Competition -> Event field resolution."""

import pytest

from trailhub.errors import MissingParentError
from trailhub.models import Competition, Edition, Event
from trailhub.services.inheritance import resolve_edition, resolve_field
from trailhub.types import ABSENT, Inherited, Own, Source


def make_event(**overrides) -> Event:
    fields = dict(
        id="e-1",
        name="UTMB Mont-Blanc",
        slug="utmb-mont-blanc",
        country="FR",
        city="Chamonix",
    )
    fields.update(overrides)
    return Event(**fields)


def make_competition(**overrides) -> Competition:
    fields = dict(
        id="c-1",
        event_id="e-1",
        name="UTMB 100",
        slug="utmb-100",
        base_distance=100,
        base_elevation=200,
        base_max_participants=500,
    )
    fields.update(overrides)
    return Competition(**fields)


def make_edition(**overrides) -> Edition:
    fields = dict(
        id="ed-1",
        competition_id="c-1",
        year=2024,
        distance=None,
        elevation=50,
        max_participants=None,
        city=None,
    )
    fields.update(overrides)
    return Edition(**fields)


def test_fields_resolve_independently():
    resolved = resolve_edition(make_edition(), make_competition(), make_event())

    assert resolved.resolved_distance == 100
    assert resolved.resolved_elevation == 50
    assert resolved.resolved_max_participants == 500
    assert resolved.distance == Inherited(100, Source.COMPETITION)
    assert resolved.elevation == Own(50)
    assert resolved.max_participants == Inherited(500, Source.COMPETITION)


@pytest.mark.parametrize("field", ["distance", "elevation", "max_participants"])
def test_toggling_one_field_leaves_the_others_alone(field):
    competition = make_competition()
    event = make_event()
    baseline = resolve_edition(make_edition(), competition, event)

    current = getattr(make_edition(), field)
    toggled_value = None if current is not None else 7
    toggled = resolve_edition(make_edition(**{field: toggled_value}), competition, event)

    for other in {"distance", "elevation", "max_participants", "city"} - {field}:
        assert getattr(toggled, other) == getattr(baseline, other)
    assert getattr(toggled, field) != getattr(baseline, field)


def test_full_override_ignores_parents():
    edition = make_edition(distance=42.2, elevation=2500, max_participants=800, city="Courmayeur")

    resolved = resolve_edition(edition, make_competition(), make_event())

    assert resolved.distance == Own(42.2)
    assert resolved.elevation == Own(2500)
    assert resolved.max_participants == Own(800)
    assert resolved.city == Own("Courmayeur")


def test_city_comes_from_event():
    resolved = resolve_edition(make_edition(city=None), make_competition(), make_event())

    assert resolved.city == Inherited("Chamonix", Source.EVENT)
    assert resolved.resolved_city == "Chamonix"


def test_absent_values_propagate_instead_of_defaulting_to_zero():
    competition = make_competition(base_max_participants=None)
    event = make_event(city=None)

    resolved = resolve_edition(make_edition(), competition, event)

    assert resolved.max_participants is ABSENT
    assert resolved.resolved_max_participants is None
    assert resolved.city is ABSENT
    assert "resolvedMaxParticipants" not in resolved.as_dict()
    assert "resolvedCity" not in resolved.as_dict()


def test_zero_and_empty_string_are_own_values():
    assert resolve_field(0, 100, Source.COMPETITION) == Own(0)
    assert resolve_field("", "Chamonix", Source.EVENT) == Own("")


def test_resolution_is_idempotent():
    edition, competition, event = make_edition(), make_competition(), make_event()

    first = resolve_edition(edition, competition, event)
    second = resolve_edition(edition, competition, event)

    assert first == second
    assert first.as_dict() == second.as_dict()


def test_missing_competition_raises():
    with pytest.raises(MissingParentError) as excinfo:
        resolve_edition(make_edition(), None, make_event())

    assert excinfo.value.parent == "competition"
    assert excinfo.value.parent_id == "c-1"


def test_missing_event_raises():
    with pytest.raises(MissingParentError) as excinfo:
        resolve_edition(make_edition(), make_competition(), None)

    assert excinfo.value.parent == "event"


def test_wrong_parent_is_treated_as_missing():
    with pytest.raises(MissingParentError):
        resolve_edition(make_edition(competition_id="c-2"), make_competition(), make_event())

    with pytest.raises(MissingParentError):
        resolve_edition(make_edition(), make_competition(), make_event(id="e-9"))
