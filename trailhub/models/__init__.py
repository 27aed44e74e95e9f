from .admin import ActivityLogPage, AdminPagination, AdminStats, PendingCompetition
from .catalog import CatalogCreate, CatalogItem, CatalogKind, CatalogUpdate
from .competition import (
    Competition,
    CompetitionCreate,
    CompetitionStatus,
    CompetitionType,
    CompetitionUpdate,
    EventRef,
)
from .edition import (
    CompetitionSummary,
    Edition,
    EditionCreate,
    EditionFull,
    EditionStats,
    EditionStatus,
    EditionUpdate,
    RegistrationStatus,
)
from .event import (
    Event,
    EventCreate,
    EventFilters,
    EventStats,
    EventStatus,
    EventUpdate,
    GeoPoint,
    SlugAvailability,
)
from .pagination import Page, Pagination
from .photo import EditionPhoto, PhotoReorder, PhotoUpdate
from .podium import EditionPodium, PodiumCreate, PodiumType, PodiumUpdate
from .rating import EditionRating, RatingCreate, RatingSummary, RatingUpdate
from .user import AuthResponse, LoginCredentials, RegisterData, User, UserRole
from .weather import EditionWeather, WeatherReport

__all__ = [
    "ActivityLogPage",
    "AdminPagination",
    "AdminStats",
    "AuthResponse",
    "CatalogCreate",
    "CatalogItem",
    "CatalogKind",
    "CatalogUpdate",
    "Competition",
    "CompetitionCreate",
    "CompetitionStatus",
    "CompetitionSummary",
    "CompetitionType",
    "CompetitionUpdate",
    "Edition",
    "EditionCreate",
    "EditionFull",
    "EditionPhoto",
    "EditionPodium",
    "EditionRating",
    "EditionStats",
    "EditionStatus",
    "EditionUpdate",
    "EditionWeather",
    "Event",
    "EventCreate",
    "EventFilters",
    "EventRef",
    "EventStats",
    "EventStatus",
    "EventUpdate",
    "GeoPoint",
    "LoginCredentials",
    "Page",
    "Pagination",
    "PendingCompetition",
    "PhotoReorder",
    "PhotoUpdate",
    "PodiumCreate",
    "PodiumType",
    "PodiumUpdate",
    "RatingCreate",
    "RatingSummary",
    "RatingUpdate",
    "RegisterData",
    "RegistrationStatus",
    "SlugAvailability",
    "User",
    "UserRole",
    "WeatherReport",
]
