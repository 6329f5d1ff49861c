"""
Pydantic models for user data.

Users are only looked up by id or username; there is no session or
authentication flow.  Passwords are stored as given.  In a real
application you would hash them and never return them through the
API.
"""

from pydantic import Field

from .common import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["pm_jane"])
    password: str = Field(..., examples=["strongpassword"])


class UserRead(UserCreate):
    """Schema for reading a user from the store."""

    id: str
