"""Pydantic DTOs for admin authentication."""

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, examples=["admin@example.com"])
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    """An active admin session."""

    access_token: str
    token_type: str = "bearer"
    email: str
    expires_at: datetime

    model_config = {"from_attributes": True}
