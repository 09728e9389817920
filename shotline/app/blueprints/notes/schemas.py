from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

LinkType = Literal[
    "project", "episode", "sequence", "shot", "asset", "version", "playlist"
]


class NoteCreateSchema(BaseModel):
    """Body for leaving a note on an entity."""
    link_type: LinkType
    link_id: UUID
    subject: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    is_read: bool = False
    attachments: List[str] = Field(
        default_factory=list, description="File paths or URLs"
    )
    assigned_to: Optional[UUID] = None


class NoteUpdateSchema(BaseModel):
    """Body for updating a note. Its linked entity can't be changed."""
    subject: str = Field(None, min_length=1, max_length=255)
    content: str = Field(None, min_length=1)
    is_read: bool = None
    attachments: Optional[List[str]] = None
    assigned_to: Optional[UUID] = None
