"""Asset library API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from ..models.common import AssetRecord
from ..models.search import LibraryStats
from ..services.library import AssetLibrary
from ..services.suggestions import collect_available_tags
from .deps import get_library

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("", response_model=list[AssetRecord])
async def list_assets(library: AssetLibrary = Depends(get_library)):
    return library.snapshot()


@router.post("")
async def replace_assets(assets: list[AssetRecord], library: AssetLibrary = Depends(get_library)):
    library.replace(assets)
    return {"loaded": len(library)}


@router.get("/stats", response_model=LibraryStats)
async def get_library_stats(library: AssetLibrary = Depends(get_library)):
    return library.stats()


@router.get("/tags")
async def list_tags(library: AssetLibrary = Depends(get_library)):
    return {"tags": collect_available_tags(library.snapshot())}


@router.get("/{asset_id}", response_model=AssetRecord)
async def get_asset(asset_id: str, library: AssetLibrary = Depends(get_library)):
    asset = library.get(asset_id)
    if not asset:
        raise HTTPException(status_code=404, detail="Asset not found")
    return asset


@router.post("/{asset_id}/view", response_model=AssetRecord)
async def record_asset_view(asset_id: str, library: AssetLibrary = Depends(get_library)):
    asset = library.record_view(asset_id)
    if not asset:
        raise HTTPException(status_code=404, detail="Asset not found")
    return asset
