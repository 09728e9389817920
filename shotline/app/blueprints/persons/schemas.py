"""
Pydantic schemas for request validation in the persons blueprint.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from shotline.app.utils import auth


def _check_email(v):
    if v is None:
        return v
    try:
        return auth.validate_email(v)
    except auth.EmailNotValidException as e:
        raise ValueError(str(e))


class PersonCreateSchema(BaseModel):
    """Body for creating a person (admin only)."""
    email: str = Field(..., description="Email, used as login")
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1, max_length=80)
    last_name: str = Field(..., min_length=1, max_length=80)
    role: Literal["admin", "member"] = "member"
    active: bool = True

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return _check_email(v)


class PersonUpdateSchema(BaseModel):
    """Body for updating a person. Only given fields are modified."""
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, min_length=1, max_length=80)
    last_name: Optional[str] = Field(None, min_length=1, max_length=80)
    role: Optional[Literal["admin", "member"]] = None
    active: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return _check_email(v)
