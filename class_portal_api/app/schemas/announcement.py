"""
Pydantic schemas for announcements.

An announcement carries a free‑text ``category`` used by the web
client for its badge (``important``, ``new``, ``upcoming``...).  If no
``date`` is supplied on creation, today's date is used.
"""

import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class AnnouncementBase(CamelModel):
    title: str = Field(..., min_length=1, examples=["Mid-term Exam Schedule"])
    content: str = Field(..., min_length=1)
    date: datetime.date = Field(default_factory=datetime.date.today)
    category: str = Field(..., min_length=1, examples=["important"])
    posted_by: str = Field(..., min_length=1, examples=["Anaya Wijaya"])


class AnnouncementCreate(AnnouncementBase):
    """Schema for creating an announcement."""
    pass


class AnnouncementUpdate(CamelModel):
    """Schema for updating an announcement.

    All fields are optional; only provided values will be updated.
    """

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    date: Optional[datetime.date] = None
    category: Optional[str] = Field(None, min_length=1)
    posted_by: Optional[str] = Field(None, min_length=1)


class AnnouncementRead(AnnouncementBase):
    id: int
