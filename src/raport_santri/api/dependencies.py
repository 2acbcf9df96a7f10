"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, HTTPException, status

from raport_santri.models.errors import RecordStoreError
from raport_santri.services.auth import user_exists


def get_current_staff(
    x_username: Annotated[
        str | None,
        Header(
            description=(
                "Staff username. In production, this should be extracted "
                "from an authenticated session/JWT token."
            )
        ),
    ] = None,
) -> str:
    """Return the staff username for the request.

    Args:
        x_username: Username from the X-Username header.

    Returns:
        str: Username of an existing staff account.

    Raises:
        HTTPException: 401 if the header is missing, 403 if the account is unknown,
            502 if the account store cannot be reached.
    """
    if not x_username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication. Please provide X-Username header.",
        )
    try:
        known = user_exists(x_username)
    except RecordStoreError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    if not known:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unknown staff account '{x_username}'",
        )
    return x_username
