"""Data models."""

from .common import AssetMetadata, AssetRecord, DateRange, ExifData, SizeRange
from .search import (
    ExactPhrase,
    FileCategory,
    LibraryStats,
    MatchAll,
    ParsedQuery,
    SearchFilters,
    SearchRequest,
    SearchResponse,
    SizePreset,
    SortBy,
    SortOrder,
    TermQuery,
)

__all__ = [
    "AssetMetadata",
    "AssetRecord",
    "DateRange",
    "ExifData",
    "SizeRange",
    "ExactPhrase",
    "FileCategory",
    "LibraryStats",
    "MatchAll",
    "ParsedQuery",
    "SearchFilters",
    "SearchRequest",
    "SearchResponse",
    "SizePreset",
    "SortBy",
    "SortOrder",
    "TermQuery",
]
