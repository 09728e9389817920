"""
Pydantic schemas for request validation in the statuses blueprint.
"""
from typing import Optional

from pydantic import BaseModel, Field

COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class StatusCreateSchema(BaseModel):
    """Body for creating a status."""
    code: str = Field(..., min_length=1, max_length=40)
    name: str = Field(..., min_length=1, max_length=80)
    description: Optional[str] = None
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    is_active: bool = True
    sort_order: int = 0


class StatusUpdateSchema(BaseModel):
    """Body for updating a status. Only given fields are modified."""
    code: Optional[str] = Field(None, min_length=1, max_length=40)
    name: Optional[str] = Field(None, min_length=1, max_length=80)
    description: Optional[str] = None
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None
