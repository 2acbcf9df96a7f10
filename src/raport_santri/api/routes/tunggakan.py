"""Tunggakan (outstanding fee) routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from raport_santri.api.dependencies import get_current_staff
from raport_santri.api.schemas.tunggakan import TunggakanCreateRequest, TunggakanResponse
from raport_santri.models.errors import ExternalServiceError
from raport_santri.services.tunggakan import add_tunggakan, delete_tunggakan, get_tunggakan

router = APIRouter(prefix="/tunggakan", tags=["tunggakan"])


@router.get("", response_model=list[TunggakanResponse])
def list_tunggakan(
    _staff: Annotated[str, Depends(get_current_staff)],
    q: Annotated[str, Query(description="Student name (case-insensitive substring)")] = "",
    kelas: Annotated[str | None, Query(description="Exact class filter")] = None,
) -> list[TunggakanResponse]:
    """List outstanding-fee entries ordered by student name."""
    try:
        entries = get_tunggakan(q, kelas)
    except ExternalServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return [TunggakanResponse(**entry) for entry in entries]


@router.post("", response_model=TunggakanResponse, status_code=status.HTTP_201_CREATED)
def create_tunggakan(
    data: TunggakanCreateRequest,
    _staff: Annotated[str, Depends(get_current_staff)],
) -> TunggakanResponse:
    """Record an outstanding fee; the student's report is hidden until it is removed."""
    try:
        entry = add_tunggakan(data.nama, data.jumlah, data.kelas)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ExternalServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return TunggakanResponse(**entry)


@router.delete("/{tunggakan_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_tunggakan(
    tunggakan_id: str,
    _staff: Annotated[str, Depends(get_current_staff)],
) -> None:
    """Delete an outstanding-fee entry."""
    try:
        deleted = delete_tunggakan(tunggakan_id)
    except ExternalServiceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tunggakan {tunggakan_id} not found",
        )
