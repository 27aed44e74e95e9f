from .admin import AdminService
from .auth import AuthService
from .catalogs import CatalogService
from .client import ApiClient, Endpoint
from .competitions import CompetitionsService
from .editions import EditionsService
from .events import EventsService
from .inheritance import ResolvedEdition, resolve_edition
from .photos import PhotosService
from .podiums import PodiumsByType, PodiumsService, group_podiums_by_type
from .ratings import RatingsService
from .session import SessionContext
from .slug_check import SlugChecker, SlugCheckState
from .weather import WeatherService

__all__ = [
    "AdminService",
    "ApiClient",
    "AuthService",
    "CatalogService",
    "CompetitionsService",
    "EditionsService",
    "Endpoint",
    "EventsService",
    "PhotosService",
    "PodiumsByType",
    "PodiumsService",
    "RatingsService",
    "ResolvedEdition",
    "SessionContext",
    "SlugCheckState",
    "SlugChecker",
    "WeatherService",
    "group_podiums_by_type",
    "resolve_edition",
]
