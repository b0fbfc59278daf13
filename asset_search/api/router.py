"""Aggregate all API sub-routers."""

from fastapi import APIRouter

from . import assets, search

api_router = APIRouter()

api_router.include_router(assets.router)
api_router.include_router(search.router)
