"""Search API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import settings
from ..models.search import SearchRequest, SearchResponse, SizePreset
from ..services.history import SearchHistory
from ..services.library import AssetLibrary
from ..services.search_engine import perform_smart_search
from ..services.suggestions import SIZE_PRESETS, collect_available_tags, get_suggestions
from .deps import get_history, get_library

router = APIRouter(prefix="/search", tags=["search"])


@router.post("", response_model=SearchResponse)
async def search_assets(
    request: SearchRequest,
    library: AssetLibrary = Depends(get_library),
    history: SearchHistory = Depends(get_history),
):
    if request.limit > settings.max_page_size:
        raise HTTPException(status_code=400, detail=f"limit must be <= {settings.max_page_size}")

    filters = request.filters
    history.record(filters.query)

    ordered = perform_smart_search(library.snapshot(), filters)
    page = ordered[request.offset:request.offset + request.limit]

    return SearchResponse(
        total=len(ordered),
        offset=request.offset,
        limit=request.limit,
        assets=page,
    )


@router.get("/suggestions")
async def search_suggestions(
    q: str = Query(""),
    library: AssetLibrary = Depends(get_library),
    history: SearchHistory = Depends(get_history),
):
    tags = collect_available_tags(library.snapshot())
    return {"query": q, "suggestions": get_suggestions(q, tags, history.entries())}


@router.get("/history")
async def get_search_history(history: SearchHistory = Depends(get_history)):
    return {"entries": history.entries(), "capacity": history.capacity}


@router.delete("/history")
async def clear_search_history(history: SearchHistory = Depends(get_history)):
    history.clear()
    return {"cleared": True}


@router.get("/size-presets", response_model=list[SizePreset])
async def list_size_presets():
    return SIZE_PRESETS
