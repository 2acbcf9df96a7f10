"""Pydantic schemas for staff authentication endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Username and password submitted to register or log in."""

    username: str = Field(..., min_length=1, max_length=128)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Result of a successful register or login call."""

    username: str
    message: str
