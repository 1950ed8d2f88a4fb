"""Auth Schemas — login request body and the internal user record."""

from uuid import UUID

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6, max_length=255)


class UserRecord(BaseModel):
    """Full users row. Contains the password hash: never returned by a route."""
    id: UUID
    name: str
    email: str
    password: str
