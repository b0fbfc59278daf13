import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from asset_search.models.common import AssetRecord


@pytest.fixture
def make_asset():
    counter = {"n": 0}

    def _make(name="asset", **kwargs):
        counter["n"] += 1
        kwargs.setdefault("id", f"a{counter['n']}")
        kwargs.setdefault("mime_type", "image/png")
        kwargs.setdefault("upload_date", datetime(2024, 1, 1, 12, 0))
        return AssetRecord(name=name, **kwargs)

    return _make


@pytest.fixture
def library_assets(make_asset):
    return [
        make_asset(
            "Red Car.jpg",
            id="car",
            tags=["vehicle", "red"],
            description="A red car parked outside",
            size=2_000_000,
            upload_date=datetime(2024, 3, 10, 9, 30),
            view_count=4,
        ),
        make_asset(
            "Quarterly Report.pdf",
            id="report",
            mime_type="application/pdf",
            tags=["work", "draft"],
            description="Draft figures for Q1",
            ai_text_content="revenue grew in the red region",
            size=500_000,
            upload_date=datetime(2024, 2, 1, 8, 0),
        ),
        make_asset(
            "Holiday.mp4",
            id="holiday",
            mime_type="video/mp4",
            tags=["family", "car"],
            description="Road trip",
            ai_description="people singing in a red car",
            size=50_000_000,
            upload_date=datetime(2024, 4, 2, 18, 45),
            view_count=40,
        ),
        make_asset(
            "backup.zip",
            id="backup",
            mime_type="application/zip",
            tags=["work"],
            size=12_000_000,
            upload_date=datetime(2023, 12, 31, 23, 0),
        ),
    ]
