"""
Pydantic schemas for request body validation in the projects blueprint.

Fields typed without Optional but defaulting to None can be omitted from the
body of an update, but can't be set to null.
"""
from datetime import date
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

ProjectRole = Literal["viewer", "contributor", "owner"]


def _check_date_range(values):
    start_date = values.start_date
    end_date = values.end_date
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValueError("start_date must be before end_date")
    return values


class ProjectCreateSchema(BaseModel):
    """Body for creating a project."""
    code: str = Field(..., min_length=1, max_length=80)
    name: str = Field(..., min_length=1, max_length=80)
    description: Optional[str] = None
    client_name: Optional[str] = Field(None, max_length=120)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")

    @model_validator(mode="after")
    def check_dates(self):
        return _check_date_range(self)


class ProjectUpdateSchema(BaseModel):
    """Body for updating a project. Only given fields are modified."""
    code: str = Field(None, min_length=1, max_length=80)
    name: str = Field(None, min_length=1, max_length=80)
    description: Optional[str] = None
    client_name: Optional[str] = Field(None, max_length=120)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status_id: Optional[UUID] = None
    status: Optional[str] = Field(None, description="Status code")

    @model_validator(mode="after")
    def check_dates(self):
        return _check_date_range(self)


class PermissionCreateSchema(BaseModel):
    """Body for granting a person access to a project."""
    person_id: UUID = Field(..., description="Person unique identifier")
    role: ProjectRole = "viewer"


class PermissionUpdateSchema(BaseModel):
    """Body for changing the role of a person on a project."""
    role: ProjectRole = Field(..., description="New role")
