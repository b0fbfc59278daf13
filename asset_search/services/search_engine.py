"""Query -> filter -> sort pipeline over an asset snapshot."""

import logging
from typing import Sequence

from ..models.common import AssetRecord
from ..models.search import SearchFilters
from .filters import apply_filters
from .query_parser import parse_query
from .sorter import sort_assets

logger = logging.getLogger(__name__)


def perform_smart_search(assets: Sequence[AssetRecord], filters: SearchFilters) -> list[AssetRecord]:
    """Filter and order ``assets`` according to ``filters``.

    Pure: the input sequence is never modified and the same input always
    produces the same ordered output.
    """
    parsed = parse_query(filters.query)
    filtered = apply_filters(assets, filters, parsed)
    ordered = sort_assets(filtered, filters.sort_by, filters.sort_order, filters.query)
    logger.debug(
        f"Search {filters.query!r}: {len(assets)} assets in, {len(ordered)} out "
        f"(sort={filters.sort_by.value} {filters.sort_order.value})"
    )
    return ordered
