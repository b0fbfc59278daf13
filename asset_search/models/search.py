"""Search-related models."""

from enum import Enum
from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import AssetRecord, DateRange, SizeRange


class FileCategory(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    ARCHIVE = "archive"


class SortBy(str, Enum):
    NAME = "name"
    DATE = "date"
    SIZE = "size"
    VIEWS = "views"
    RELEVANCE = "relevance"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SearchFilters(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str = ""
    tags: list[str] = Field(default_factory=list)
    file_types: list[str] = Field(default_factory=list, alias="fileTypes")
    date_range: Optional[DateRange] = Field(default=None, alias="dateRange")
    size_range: Optional[SizeRange] = Field(default=None, alias="sizeRange")
    sort_by: SortBy = Field(default=SortBy.RELEVANCE, alias="sortBy")
    sort_order: SortOrder = Field(default=SortOrder.DESC, alias="sortOrder")

    @field_validator("sort_by", mode="before")
    @classmethod
    def _default_sort_by(cls, value):
        # Unknown keys fall through to the relevance comparator
        try:
            return SortBy(value)
        except ValueError:
            return SortBy.RELEVANCE

    @field_validator("sort_order", mode="before")
    @classmethod
    def _default_sort_order(cls, value):
        return SortOrder.ASC if value in (SortOrder.ASC, "asc") else SortOrder.DESC


class MatchAll(BaseModel):
    kind: Literal["match_all"] = "match_all"


class ExactPhrase(BaseModel):
    kind: Literal["exact"] = "exact"
    phrase: str


class TermQuery(BaseModel):
    kind: Literal["terms"] = "terms"
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)


ParsedQuery = Union[MatchAll, ExactPhrase, TermQuery]


class SearchRequest(BaseModel):
    filters: SearchFilters = Field(default_factory=SearchFilters)
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=1)


class SearchResponse(BaseModel):
    total: int = 0
    offset: int = 0
    limit: int = 100
    assets: list[AssetRecord] = Field(default_factory=list)


class SizePreset(BaseModel):
    value: str
    label: str
    min: int
    max: Optional[int] = None


class LibraryStats(BaseModel):
    total_assets: int = 0
    total_size: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)
    by_tag: dict[str, int] = Field(default_factory=dict)
