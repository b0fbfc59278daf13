"""In-memory asset collection."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import TypeAdapter

from ..models.common import AssetRecord
from ..models.search import LibraryStats
from .categories import get_file_category

logger = logging.getLogger(__name__)

_asset_list = TypeAdapter(list[AssetRecord])


class AssetLibrary:
    """Holds the materialized asset records that searches run against."""

    def __init__(self, assets: Optional[Iterable[AssetRecord]] = None):
        self._assets: dict[str, AssetRecord] = {}
        if assets is not None:
            self.replace(assets)

    def load_file(self, path: Union[str, Path]) -> int:
        """Replace the collection with the JSON array stored at ``path``."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        assets = _asset_list.validate_python(raw)
        self.replace(assets)
        logger.info(f"Loaded {len(assets)} assets from {path}")
        return len(assets)

    def replace(self, assets: Iterable[AssetRecord]) -> None:
        self._assets = {a.id: a for a in assets}

    def add(self, asset: AssetRecord) -> None:
        self._assets[asset.id] = asset

    def get(self, asset_id: str) -> Optional[AssetRecord]:
        return self._assets.get(asset_id)

    def snapshot(self) -> list[AssetRecord]:
        return list(self._assets.values())

    def record_view(self, asset_id: str) -> Optional[AssetRecord]:
        asset = self._assets.get(asset_id)
        if not asset:
            return None
        updated = asset.model_copy(
            update={"view_count": asset.view_count + 1, "last_viewed": datetime.now()}
        )
        self._assets[asset_id] = updated
        return updated

    def stats(self) -> LibraryStats:
        by_category: dict[str, int] = {}
        by_tag: dict[str, int] = {}
        for asset in self._assets.values():
            category = get_file_category(asset.mime_type).value
            by_category[category] = by_category.get(category, 0) + 1
            for tag in asset.tags:
                by_tag[tag] = by_tag.get(tag, 0) + 1

        return LibraryStats(
            total_assets=len(self._assets),
            total_size=sum(a.size for a in self._assets.values()),
            by_category=by_category,
            by_tag=by_tag,
        )

    def __len__(self) -> int:
        return len(self._assets)


# Singleton
asset_library = AssetLibrary()
