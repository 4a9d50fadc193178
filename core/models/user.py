# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# The users table exists in the schema but no endpoint reads or writes it.
# Passwords are stored exactly as given: there is no hashing or login flow,
# so nothing here should be treated as an authentication contract.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Input for creating a user record."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class User(BaseModel):
    """A stored user record."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    username: str
    password: str
