"""
Pydantic schemas for contact form messages.

``created_at`` is assigned by the server when the message is stored
and is never taken from the request body.
"""

import datetime

from pydantic import EmailStr, Field

from .base import CamelModel


class ContactMessageCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Dewi Anggraini"])
    email: EmailStr = Field(..., examples=["dewi@example.com"])
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    urgent: bool = False


class ContactMessageRead(ContactMessageCreate):
    id: int
    created_at: datetime.datetime
