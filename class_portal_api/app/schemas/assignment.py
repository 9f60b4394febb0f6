"""
Pydantic schemas for assignments.

``submitted`` and ``total`` count the submissions received and the
students expected to submit.  Both must be non‑negative; keeping
``submitted`` at or below ``total`` is left to the client.
"""

import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


AssignmentType = Literal["individual", "group"]


class AssignmentBase(CamelModel):
    title: str = Field(..., min_length=1, examples=["Cryptography Implementation"])
    due_date: datetime.date
    assigned_date: datetime.date
    description: str = Field(..., min_length=1)
    type: AssignmentType = Field(..., examples=["group"])
    submitted: int = Field(0, ge=0)
    total: int = Field(0, ge=0)
    status: str = Field(..., min_length=1, examples=["upcoming"])


class AssignmentCreate(AssignmentBase):
    pass


class AssignmentUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    due_date: Optional[datetime.date] = None
    assigned_date: Optional[datetime.date] = None
    description: Optional[str] = Field(None, min_length=1)
    type: Optional[AssignmentType] = None
    submitted: Optional[int] = Field(None, ge=0)
    total: Optional[int] = Field(None, ge=0)
    status: Optional[str] = Field(None, min_length=1)


class AssignmentRead(AssignmentBase):
    id: int
