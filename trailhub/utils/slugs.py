import re
import unicodedata

SLUG_MIN_LENGTH = 3
SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


def is_valid_slug(slug: str) -> bool:
    return len(slug) >= SLUG_MIN_LENGTH and SLUG_PATTERN.fullmatch(slug) is not None


def slugify(name: str) -> str:
    """'Ultra Trail Côte d'Azur 2024' -> 'ultra-trail-cote-dazur-2024'"""
    ascii_name = (
        unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    )
    slug = ascii_name.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)


def distance_slug(name: str) -> str:
    """'UTMB 171K' -> '171k'; empty when the name has no number."""
    match = re.search(r"\d+", name)
    return f"{match.group(0)}k" if match else ""
