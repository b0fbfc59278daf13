"""Tag and history suggestions, size presets."""

from typing import Iterable, Optional, Sequence

from ..models.common import AssetRecord, SizeRange
from ..models.search import SizePreset

MIN_QUERY_LENGTH = 2
MAX_TAG_SUGGESTIONS = 5
MAX_SUGGESTIONS = 8

_MB = 1024 * 1024

SIZE_PRESETS: list[SizePreset] = [
    SizePreset(value="small", label="Small (< 1MB)", min=0, max=_MB),
    SizePreset(value="medium", label="Medium (1-10MB)", min=_MB, max=10 * _MB),
    SizePreset(value="large", label="Large (> 10MB)", min=10 * _MB, max=None),
]


def collect_available_tags(assets: Iterable[AssetRecord]) -> list[str]:
    """Distinct tags across ``assets`` in first-seen order."""
    seen: dict[str, None] = {}
    for asset in assets:
        for tag in asset.tags:
            seen.setdefault(tag, None)
    return list(seen)


def get_suggestions(
    query: str,
    available_tags: Sequence[str],
    history: Sequence[str] = (),
) -> list[str]:
    """Matching tags first, then matching past searches not already suggested."""
    if len(query) < MIN_QUERY_LENGTH:
        return []

    q = query.lower()
    tags = [tag for tag in available_tags if q in tag.lower()][:MAX_TAG_SUGGESTIONS]
    past = [h for h in history if q in h.lower() and h not in tags]
    return [*tags, *past][:MAX_SUGGESTIONS]


def size_range_for_preset(value: str) -> Optional[SizeRange]:
    for preset in SIZE_PRESETS:
        if preset.value == value:
            return SizeRange(min=preset.min, max=preset.max)
    return None
