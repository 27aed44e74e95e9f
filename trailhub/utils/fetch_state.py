import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from pydantic import ValidationError

from trailhub.errors import ApiError, MissingParentError, get_error_message

T = TypeVar("T")

logger = logging.getLogger(__name__)


class FetchState(Generic[T]):
    """Loading/data/error holder for one screen's fetch.

    Failures are stored as a user-facing message; `refetch()` is the manual
    retry. Nothing is retried automatically.
    """

    def __init__(self, fetch: Callable[[], Awaitable[T]]):
        self._fetch = fetch
        self.data: T | None = None
        self.error: str | None = None
        self.is_loading = False

    async def load(self) -> T | None:
        self.is_loading = True
        self.error = None
        try:
            self.data = await self._fetch()
        except (ApiError, MissingParentError, ValidationError) as e:
            logger.error(f"Fetch failed: {e!r}")
            self.error = get_error_message(e)
        finally:
            self.is_loading = False
        return self.data

    async def refetch(self) -> T | None:
        return await self.load()

    @property
    def has_error(self) -> bool:
        return self.error is not None
