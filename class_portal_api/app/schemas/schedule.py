"""
Pydantic schemas for the weekly class schedule.

Times are 24‑hour ``HH:MM`` strings.  Overlapping entries are allowed;
the schedule is a plain list of slots, not a calendar.
"""

from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ScheduleBase(CamelModel):
    day: Weekday = Field(..., examples=["Monday"])
    start_time: str = Field(..., pattern=TIME_PATTERN, examples=["08:00"])
    end_time: str = Field(..., pattern=TIME_PATTERN, examples=["10:00"])
    subject: str = Field(..., min_length=1, examples=["Cryptography Basics"])
    instructor: Optional[str] = None
    room: str = Field(..., min_length=1, examples=["Room 301"])
    color: str = Field("primary", description="Display colour of the slot: primary or accent")


class ScheduleCreate(ScheduleBase):
    """Schema for creating a schedule entry."""
    pass


class ScheduleUpdate(CamelModel):
    day: Optional[Weekday] = None
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    subject: Optional[str] = Field(None, min_length=1)
    instructor: Optional[str] = None
    room: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = None


class ScheduleRead(ScheduleBase):
    id: int
