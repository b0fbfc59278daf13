"""Record predicates and the combined filter pipeline."""

import logging
from typing import Iterable, Optional, Sequence

from ..models.common import AssetRecord, SizeRange
from ..models.search import ExactPhrase, MatchAll, ParsedQuery, SearchFilters, TermQuery
from .categories import get_file_category
from .date_filter import asset_matches_date_range
from .query_parser import parse_query

logger = logging.getLogger(__name__)


def build_haystack(asset: AssetRecord) -> str:
    """Lower-cased text of every searchable field, space-joined."""
    parts = [
        asset.name,
        asset.description,
        asset.ai_description or "",
        asset.ai_text_content or "",
        *asset.tags,
    ]
    return " ".join(parts).lower()


def matches_text(asset: AssetRecord, parsed: ParsedQuery) -> bool:
    if isinstance(parsed, MatchAll):
        return True

    if isinstance(parsed, ExactPhrase):
        phrase = parsed.phrase
        # OCR text is not consulted for exact phrases
        fields = (asset.name, asset.description, asset.ai_description or "")
        if any(phrase in field.lower() for field in fields):
            return True
        return any(phrase in tag.lower() for tag in asset.tags)

    if isinstance(parsed, TermQuery):
        haystack = build_haystack(asset)
        if not all(term in haystack for term in parsed.include):
            return False
        return not any(term in haystack for term in parsed.exclude)

    return True


def matches_file_types(asset: AssetRecord, file_types: Iterable[str]) -> bool:
    wanted = set(file_types)
    if not wanted:
        return True
    return get_file_category(asset.mime_type).value in wanted


def matches_tags(asset: AssetRecord, tags: Iterable[str]) -> bool:
    """Every requested tag must be present (case-sensitive)."""
    owned = set(asset.tags)
    return all(tag in owned for tag in tags)


def matches_size_range(asset: AssetRecord, size_range: Optional[SizeRange]) -> bool:
    if size_range is None:
        return True
    if size_range.min is not None and asset.size < size_range.min:
        return False
    if size_range.max is not None and asset.size > size_range.max:
        return False
    return True


def asset_matches_filters(
    asset: AssetRecord,
    filters: SearchFilters,
    parsed: Optional[ParsedQuery] = None,
) -> bool:
    if parsed is None:
        parsed = parse_query(filters.query)
    return (
        matches_text(asset, parsed)
        and matches_file_types(asset, filters.file_types)
        and matches_tags(asset, filters.tags)
        and asset_matches_date_range(asset, filters.date_range)
        and matches_size_range(asset, filters.size_range)
    )


def apply_filters(
    assets: Sequence[AssetRecord],
    filters: SearchFilters,
    parsed: Optional[ParsedQuery] = None,
) -> list[AssetRecord]:
    """Return the assets that satisfy every active predicate, in input order."""
    if parsed is None:
        parsed = parse_query(filters.query)
    kept = [a for a in assets if asset_matches_filters(a, filters, parsed)]
    logger.debug(f"Filtered {len(assets)} assets down to {len(kept)} ({parsed.kind})")
    return kept
