from .fetch_state import FetchState
from .slugs import SLUG_MIN_LENGTH, SLUG_PATTERN, distance_slug, is_valid_slug, slugify

__all__ = [
    "FetchState",
    "SLUG_MIN_LENGTH",
    "SLUG_PATTERN",
    "distance_slug",
    "is_valid_slug",
    "slugify",
]
