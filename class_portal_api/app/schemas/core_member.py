"""
Pydantic schemas for core members.

Core members are the class officers shown on the home page: the
president, the secretary and the treasurer.  ``student_id`` is the
student number (NIM) and must be unique among core members.
"""

from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


CoreRole = Literal["president", "secretary", "treasurer"]


class CoreMemberBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Anaya Wijaya"])
    student_id: str = Field(..., min_length=1, examples=["19210720"])
    role: CoreRole = Field(..., examples=["president"])
    image_url: str = Field(..., min_length=1)
    description: Optional[str] = Field(None, description="Short introduction shown on the member card")


class CoreMemberCreate(CoreMemberBase):
    """Schema for creating a core member."""
    pass


class CoreMemberUpdate(CamelModel):
    """Schema for updating a core member; only provided fields change."""

    name: Optional[str] = Field(None, min_length=1)
    student_id: Optional[str] = Field(None, min_length=1)
    role: Optional[CoreRole] = None
    image_url: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None


class CoreMemberRead(CoreMemberBase):
    """Schema for reading a core member."""

    id: int
