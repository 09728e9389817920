from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class PlaylistCreateSchema(BaseModel):
    """Body for creating a playlist, empty or made of given versions."""
    code: str = Field(..., min_length=1, max_length=80)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    version_codes: List[str] = Field(default_factory=list)
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None


class PlaylistUpdateSchema(BaseModel):
    """Body for updating a playlist. Only given fields are modified."""
    code: str = Field(None, min_length=1, max_length=80)
    name: str = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    version_codes: List[str] = None
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None
    project_id: UUID = Field(None, description="Move playlist to this project")


class PlaylistVersionAddSchema(BaseModel):
    version_code: str = Field(..., min_length=1, max_length=80)
    position: Optional[int] = Field(None, ge=0)


class PlaylistVersionsOrderSchema(BaseModel):
    version_codes: List[str]
