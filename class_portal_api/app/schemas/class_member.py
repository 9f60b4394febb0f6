"""Pydantic schemas for regular class members."""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class ClassMemberBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Dewi Anggraini"])
    student_id: str = Field(..., min_length=1, examples=["19210723"])
    image_url: str = Field(..., min_length=1)


class ClassMemberCreate(ClassMemberBase):
    pass


class ClassMemberUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    student_id: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = Field(None, min_length=1)


class ClassMemberRead(ClassMemberBase):
    id: int
