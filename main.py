import argparse
import asyncio
import logging

import polars as pl

from trailhub.errors import ApiError, MissingParentError, get_error_message
from trailhub.models import EventFilters
from trailhub.services import (
    ApiClient,
    CompetitionsService,
    EditionsService,
    EventsService,
    SlugChecker,
    resolve_edition,
)
from trailhub.utils.frames import editions_frame, events_frame

logger = logging.getLogger("trailhub")


async def resolve(client: ApiClient, edition_id: str) -> None:
    resolved = await EditionsService(client).resolve(edition_id)
    for name in ("distance", "elevation", "max_participants", "city"):
        field = getattr(resolved, name)
        print(f"{name:>17}: {field.value} ({field.source or 'absent'})")


async def check_slug(client: ApiClient, slug: str, exclude_id: str | None) -> None:
    checker = SlugChecker(EventsService(client).check_slug, debounce_seconds=0)
    checker.update(slug, exclude_id)
    state = await checker.wait()

    if state.error:
        print(f"{slug}: {state.error}")
    elif state.available is None:
        print(f"{slug}: not checked")
    else:
        print(f"{slug}: {'available' if state.available else 'taken'}")


async def list_events(client: ApiClient, search: str | None, country: str | None) -> None:
    page = await EventsService(client).get_all(
        EventFilters(search=search, country=country)
    )
    print(events_frame(page.data))


async def list_editions(client: ApiClient, competition_id: str) -> None:
    competition = await CompetitionsService(client).get_by_id(competition_id)
    event = await EventsService(client).get_by_id(competition.event_id)
    editions = await EditionsService(client).get_by_competition(competition_id)

    rows = [(e, resolve_edition(e, competition, event)) for e in editions]
    with pl.Config(tbl_cols=-1):
        print(editions_frame(rows))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trailhub",
        description="Browse the trail-running events directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("resolve", help="Show an edition's effective values")
    p.add_argument("edition_id")

    p = sub.add_parser("check-slug", help="Check if an event slug is free")
    p.add_argument("slug")
    p.add_argument("--exclude-id", default=None)

    p = sub.add_parser("events", help="List events")
    p.add_argument("--search", default=None)
    p.add_argument("--country", default=None)

    p = sub.add_parser("editions", help="List a competition's editions")
    p.add_argument("competition_id")

    return parser


async def run(args: argparse.Namespace) -> None:
    async with ApiClient() as client:
        match args.command:
            case "resolve":
                await resolve(client, args.edition_id)
            case "check-slug":
                await check_slug(client, args.slug, args.exclude_id)
            case "events":
                await list_events(client, args.search, args.country)
            case "editions":
                await list_editions(client, args.competition_id)


def main():
    args = build_parser().parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        asyncio.run(run(args))
    except (ApiError, MissingParentError) as e:
        logger.error(get_error_message(e))
        raise SystemExit(1)


if __name__ == "__main__":
    main()
