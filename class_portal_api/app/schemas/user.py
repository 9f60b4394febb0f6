"""
Pydantic models for user accounts.

The password is an opaque string: it is stored as given and never
returned through the API.
"""

from pydantic import Field

from .base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, examples=["admin"])
    password: str = Field(..., min_length=1)


class UserRead(CamelModel):
    """Schema for reading a user; the password is omitted."""

    id: int
    username: str
