import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from trailhub.errors import ApiError
from trailhub.utils.slugs import SLUG_MIN_LENGTH, SLUG_PATTERN

FORMAT_ERROR = "Slugs may only contain lowercase letters, numbers and hyphens"
CHECK_ERROR = "Could not verify slug availability"

SlugLookup = Callable[[str, str | None], Awaitable[bool]]


class _SlugCheckConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debounce_ms: int = Field(default=500, ge=0, validation_alias="TRAILHUB_SLUG_DEBOUNCE_MS")


@dataclass(frozen=True)
class SlugCheckState:
    checking: bool = False
    available: bool | None = None
    error: str | None = None


class SlugChecker:
    """Debounced slug availability check for create/edit forms.

    Call `update()` on every input change. Input that is too short or badly
    formatted is reported immediately as unchecked and never sent. Otherwise
    one lookup runs after `debounce_seconds` without further changes; a newer
    `update()` cancels the previous lookup and any result it still produces
    is dropped.
    """

    def __init__(self, lookup: SlugLookup, debounce_seconds: float | None = None):
        self.logger = logging.getLogger(__name__)
        self._lookup = lookup

        if debounce_seconds is None:
            debounce_seconds = _SlugCheckConfig().debounce_ms / 1000  # pyright: ignore[reportCallIssue]
        self.debounce_seconds = debounce_seconds

        self.state = SlugCheckState()
        self._generation = 0
        self._task: asyncio.Task[None] | None = None

    def update(self, slug: str, exclude_id: str | None = None) -> SlugCheckState:
        self._generation += 1
        self._cancel_pending()

        if len(slug) < SLUG_MIN_LENGTH:
            self.state = SlugCheckState()
            return self.state

        if SLUG_PATTERN.fullmatch(slug) is None:
            self.logger.debug(f"Rejected slug {slug!r} without lookup")
            self.state = SlugCheckState(error=FORMAT_ERROR)
            return self.state

        self.state = SlugCheckState(checking=True)
        self._task = asyncio.get_running_loop().create_task(
            self._run(slug, exclude_id, self._generation)
        )
        return self.state

    def cancel(self) -> None:
        self._generation += 1
        self._cancel_pending()
        self.state = SlugCheckState()

    async def wait(self) -> SlugCheckState:
        """Wait until no lookup is pending and return the final state."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

        if self._task is not None and not self._task.cancelled():
            self._task.result()
        return self.state

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def _run(self, slug: str, exclude_id: str | None, generation: int) -> None:
        await asyncio.sleep(self.debounce_seconds)

        self.logger.debug(f"Checking availability of slug {slug!r}")
        try:
            available = await self._lookup(slug, exclude_id)
        except (ApiError, ValidationError) as e:
            self.logger.error(f"Error checking slug {slug!r}: {e!r}")
            if generation == self._generation:
                self.state = SlugCheckState(error=CHECK_ERROR)
            return

        if generation != self._generation:
            self.logger.debug(f"Discarding stale result for slug {slug!r}")
            return

        self.state = SlugCheckState(available=available)
