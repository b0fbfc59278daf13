"""Core shared models."""

from datetime import datetime
from typing import Optional, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
import uuid


class DateRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[datetime] = Field(default=None, alias="from")
    to: Optional[datetime] = None


class SizeRange(BaseModel):
    min: Optional[int] = None
    max: Optional[int] = None


class ExifData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date_taken: Optional[str] = Field(default=None, alias="dateTaken")
    camera_maker: Optional[str] = Field(default=None, alias="cameraMaker")
    camera_model: Optional[str] = Field(default=None, alias="cameraModel")
    f_number: Optional[float] = Field(default=None, alias="fNumber")
    iso: Optional[int] = None
    exposure_time: Optional[str] = Field(default=None, alias="exposureTime")
    aperture: Optional[str] = None
    flash_fired: Optional[bool] = Field(default=None, alias="flashFired")
    exif_version: Optional[str] = Field(default=None, alias="exifVersion")


class AssetMetadata(BaseModel):
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[float] = None
    format: str = ""
    extra: dict[str, Union[bool, int, float, str]] = Field(default_factory=dict)  # unparsed fields


class AssetRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    name: str
    mime_type: str = Field(default="", alias="mimeType")
    size: int = Field(default=0, ge=0, alias="sizeBytes")
    upload_date: datetime = Field(
        validation_alias=AliasChoices("upload_date", "uploadDate", "uploadTimestamp"),
        serialization_alias="uploadDate",
    )
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    ai_description: Optional[str] = Field(default=None, alias="aiDescription")
    ai_text_content: Optional[str] = Field(default=None, alias="aiTextContent")
    view_count: int = Field(default=0, ge=0, alias="viewCount")
    last_viewed: Optional[datetime] = Field(default=None, alias="lastViewed")
    metadata: AssetMetadata = Field(default_factory=AssetMetadata)
    exif_data: Optional[ExifData] = Field(default=None, alias="exifData")
