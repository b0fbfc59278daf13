"""Shared FastAPI dependencies."""

from ..services.history import SearchHistory
from ..services.library import AssetLibrary, asset_library

search_history = SearchHistory()


def get_library() -> AssetLibrary:
    return asset_library


def get_history() -> SearchHistory:
    return search_history
