from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

EntityType = Literal[
    "project", "episode", "sequence", "shot", "asset", "playlist"
]


class VersionCreateSchema(BaseModel):
    """Body for creating a version of a project entity."""
    entity_type: EntityType
    entity_id: UUID
    code: str = Field(..., min_length=1, max_length=80)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    file_path: Optional[str] = Field(None, max_length=400)
    thumbnail_path: Optional[str] = Field(None, max_length=400)
    artist: Optional[str] = Field(None, max_length=160)
    format: Optional[str] = Field(None, max_length=80)
    frame_range: Optional[str] = Field(None, max_length=80)
    duration: Optional[float] = Field(None, ge=0, description="In seconds")
    latest: bool = True
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None


class VersionUpdateSchema(BaseModel):
    """Body for updating a version. Its entity can't be changed."""
    code: str = Field(None, min_length=1, max_length=80)
    name: str = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    file_path: Optional[str] = Field(None, max_length=400)
    thumbnail_path: Optional[str] = Field(None, max_length=400)
    artist: Optional[str] = Field(None, max_length=160)
    format: Optional[str] = Field(None, max_length=80)
    frame_range: Optional[str] = Field(None, max_length=80)
    duration: Optional[float] = Field(None, ge=0, description="In seconds")
    latest: bool = None
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None
