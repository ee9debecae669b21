"""Pydantic schemas for users and credentials."""
from pydantic import BaseModel, Field


class UserView(BaseModel):
    """Sanitized user: never carries the password."""

    id: int
    email: str
    name: str

    class Config:
        from_attributes = True


class TokenClaims(BaseModel):
    user_id: int = Field(alias="userId")
    iat: int
    exp: int


class AuthPayloadOut(BaseModel):
    token: str
    user: UserView
