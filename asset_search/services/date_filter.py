"""Centralized date filtering logic."""

from datetime import datetime, time
from typing import Optional

from ..models.common import AssetRecord, DateRange

_END_OF_DAY = time(23, 59, 59, 999000)


def asset_matches_date_range(asset: AssetRecord, date_range: Optional[DateRange]) -> bool:
    """Check if an asset's upload date falls within the requested calendar days.

    ``from`` widens to the start of its day, ``to`` to the last millisecond of its day.
    Both bounds are inclusive and independently optional.
    """
    if date_range is None:
        return True

    uploaded = to_local_time(asset.upload_date)

    if date_range.from_ is not None:
        if uploaded < start_of_day(date_range.from_):
            return False
    if date_range.to is not None:
        if uploaded > end_of_day(date_range.to):
            return False
    return True


def start_of_day(dt: datetime) -> datetime:
    return datetime.combine(to_local_time(dt).date(), time.min)


def end_of_day(dt: datetime) -> datetime:
    return datetime.combine(to_local_time(dt).date(), _END_OF_DAY)


def to_local_time(dt: datetime) -> datetime:
    """Convert to naive local wall time for comparison."""
    return dt.astimezone().replace(tzinfo=None) if dt.tzinfo else dt
