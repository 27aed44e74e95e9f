from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class Source(StrEnum):
    EDITION = "edition"
    COMPETITION = "competition"
    EVENT = "event"


@dataclass(frozen=True)
class Own(Generic[T]):
    """Value set on the edition itself."""

    value: T

    @property
    def source(self) -> Source:
        return Source.EDITION


@dataclass(frozen=True)
class Inherited(Generic[T]):
    """Value taken from a parent because the edition left it unset."""

    value: T
    source: Source


@dataclass(frozen=True)
class Absent:
    """No level of the hierarchy provides a value."""

    @property
    def value(self) -> None:
        return None

    @property
    def source(self) -> None:
        return None


Resolved = Own[T] | Inherited[T] | Absent

ABSENT = Absent()
