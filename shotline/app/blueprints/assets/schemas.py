from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

AssetType = Literal[
    "prompt",
    "txt",
    "json",
    "subtitles_en",
    "subtitles_es",
    "director_script",
    "audio_original",
    "audio_caricature_en",
    "audio_caricature_es",
]


class AssetCreateSchema(BaseModel):
    """Body for creating an asset in a project."""
    code: str = Field(..., min_length=1, max_length=80)
    name: str = Field(..., min_length=1, max_length=255)
    asset_type: AssetType = "txt"
    description: Optional[str] = None
    thumbnail_path: Optional[str] = Field(None, max_length=400)
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None


class AssetUpdateSchema(BaseModel):
    """Body for updating an asset. Only given fields are modified."""
    code: str = Field(None, min_length=1, max_length=80)
    name: str = Field(None, min_length=1, max_length=255)
    asset_type: AssetType = None
    description: Optional[str] = None
    thumbnail_path: Optional[str] = Field(None, max_length=400)
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None
    project_id: UUID = Field(None, description="Move asset to this project")
