"""
Pydantic schemas for request body validation in the shots blueprint.

Fields typed without Optional but defaulting to None can be omitted from the
body of an update, but can't be set to null.
"""
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class EpisodeCreateSchema(BaseModel):
    """Body for creating an episode in a project."""
    code: str = Field(..., min_length=1, max_length=80)
    name: str = Field(..., min_length=1, max_length=160)
    ep_number: Optional[int] = Field(None, ge=0)
    cut_order: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None


class EpisodeUpdateSchema(BaseModel):
    """Body for updating an episode. Only given fields are modified."""
    code: str = Field(None, min_length=1, max_length=80)
    name: str = Field(None, min_length=1, max_length=160)
    ep_number: Optional[int] = Field(None, ge=0)
    cut_order: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None
    project_id: UUID = Field(None, description="Move episode to this project")


class SequenceCreateSchema(BaseModel):
    """Body for creating a sequence in an episode."""
    code: str = Field(..., min_length=1, max_length=80)
    name: str = Field(..., min_length=1, max_length=160)
    description: Optional[str] = None
    cut_order: Optional[int] = Field(None, ge=0)
    duration: Optional[int] = Field(None, ge=0, description="In seconds")
    story_id: Optional[str] = Field(None, max_length=80)
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None


class SequenceUpdateSchema(BaseModel):
    """Body for updating a sequence. Only given fields are modified."""
    code: str = Field(None, min_length=1, max_length=80)
    name: str = Field(None, min_length=1, max_length=160)
    description: Optional[str] = None
    cut_order: Optional[int] = Field(None, ge=0)
    duration: Optional[int] = Field(None, ge=0, description="In seconds")
    story_id: Optional[str] = Field(None, max_length=80)
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None
    episode_id: UUID = Field(None, description="Move sequence to this episode")


ShotType = Literal["establishing", "medium", "closeup", "detail"]


class ShotCreateSchema(BaseModel):
    """Body for creating a shot in a sequence."""
    code: str = Field(..., min_length=1, max_length=80)
    name: str = Field(..., min_length=1, max_length=160)
    sequence_number: int = Field(..., ge=0)
    description: Optional[str] = None
    shot_type: Optional[ShotType] = None
    duration: Optional[int] = Field(None, ge=0, description="In frames")
    cut_order: Optional[int] = Field(None, ge=0)
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None


class ShotUpdateSchema(BaseModel):
    """Body for updating a shot. Only given fields are modified."""
    code: str = Field(None, min_length=1, max_length=80)
    name: str = Field(None, min_length=1, max_length=160)
    sequence_number: int = Field(None, ge=0)
    description: Optional[str] = None
    shot_type: Optional[ShotType] = None
    duration: Optional[int] = Field(None, ge=0, description="In frames")
    cut_order: Optional[int] = Field(None, ge=0)
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")
    assigned_to: Optional[UUID] = None
    sequence_id: UUID = Field(None, description="Move shot to this sequence")
