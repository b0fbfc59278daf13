"""Comparator-based ordering of filtered assets."""

import unicodedata
from functools import cmp_to_key
from typing import Callable, Optional, Sequence

from ..models.common import AssetRecord
from ..models.search import SortBy, SortOrder
from .date_filter import to_local_time
from .relevance import calculate_relevance_score

Comparator = Callable[[AssetRecord, AssetRecord], float]


def _sign(a, b) -> int:
    return (a > b) - (a < b)


# Whitespace, punctuation, symbols, digits, then letters
_CHAR_CLASS_ORDER = {"Z": 0, "P": 1, "S": 2, "N": 3}


def _primary_weights(text: str) -> tuple[tuple[int, str], ...]:
    return tuple((_CHAR_CLASS_ORDER.get(unicodedata.category(ch)[0], 4), ch) for ch in text)


def _collation_key(name: str) -> tuple:
    """Accent- and case-insensitive first, then accents, then lower before upper."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (
        _primary_weights(base.casefold()),
        _primary_weights(decomposed.casefold()),
        decomposed.swapcase(),
    )


def compare_names(a: AssetRecord, b: AssetRecord) -> int:
    return _sign(_collation_key(a.name), _collation_key(b.name))


def compare_dates(a: AssetRecord, b: AssetRecord) -> float:
    return (to_local_time(a.upload_date) - to_local_time(b.upload_date)).total_seconds()


def compare_sizes(a: AssetRecord, b: AssetRecord) -> int:
    return a.size - b.size


def compare_views(a: AssetRecord, b: AssetRecord) -> int:
    return a.view_count - b.view_count


def relevance_comparator(assets: Sequence[AssetRecord], query: str) -> Comparator:
    """Base comparison for the relevance key: higher score first, newest first without a query."""
    if not query.strip():
        return lambda a, b: compare_dates(b, a)

    scores = {id(asset): calculate_relevance_score(asset, query) for asset in assets}

    def compare(a: AssetRecord, b: AssetRecord) -> float:
        return scores[id(b)] - scores[id(a)]

    return compare


def base_comparator(
    sort_by: SortBy,
    assets: Sequence[AssetRecord],
    query: str = "",
) -> Comparator:
    if sort_by == SortBy.NAME:
        return compare_names
    if sort_by == SortBy.DATE:
        return compare_dates
    if sort_by == SortBy.SIZE:
        return compare_sizes
    if sort_by == SortBy.VIEWS:
        return compare_views
    return relevance_comparator(assets, query)


def sort_assets(
    assets: Sequence[AssetRecord],
    sort_by: SortBy = SortBy.RELEVANCE,
    sort_order: SortOrder = SortOrder.DESC,
    query: Optional[str] = "",
) -> list[AssetRecord]:
    """Return a new, stably sorted list.

    The same asc/desc flip applies to every key, including relevance, whose
    base comparison already puts higher scores first. ``desc`` on relevance
    therefore lists the lowest scores first.
    """
    base = base_comparator(sort_by, assets, query or "")
    if sort_order == SortOrder.ASC:
        compare = base
    else:
        def compare(a, b):
            return -base(a, b)

    return sorted(assets, key=cmp_to_key(lambda a, b: _sign(compare(a, b), 0)))
