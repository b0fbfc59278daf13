"""Application settings."""

from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 8790
    debug: bool = False
    library_file: Optional[Path] = None  # JSON array of asset records loaded at startup
    history_capacity: int = Field(default=10, ge=1)
    max_page_size: int = 1000

    model_config = {"env_prefix": "ASSET_SEARCH_"}


settings = Settings()
