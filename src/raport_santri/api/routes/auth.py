"""Staff account routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from raport_santri.api.schemas.auth import AuthResponse, CredentialsRequest
from raport_santri.services.auth import authenticate_user, create_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(credentials: CredentialsRequest) -> AuthResponse:
    """Create a staff account."""
    ok, error = create_user(credentials.username, credentials.password)
    if not ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    return AuthResponse(username=credentials.username.strip(), message="Account created")


@router.post("/login", response_model=AuthResponse)
def login(credentials: CredentialsRequest) -> AuthResponse:
    """Check staff credentials."""
    ok, error = authenticate_user(credentials.username, credentials.password)
    if not ok:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=error)
    return AuthResponse(username=credentials.username.strip(), message="Login successful")
