from typing import Generic, TypeVar

from pydantic import Field

from ._base import ApiModel

T = TypeVar("T")


class Pagination(ApiModel):
    page: int = Field(default=1, ge=1, description="Current page (1-based).")
    limit: int = Field(default=10, ge=0, description="Page size.")
    total: int = Field(default=0, ge=0, description="Total number of records.")
    pages: int = Field(default=0, ge=0, description="Total number of pages.")


class Page(ApiModel, Generic[T]):
    data: list[T] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)
