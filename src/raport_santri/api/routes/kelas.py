"""Class catalogue route."""

from __future__ import annotations

from fastapi import APIRouter

from raport_santri.constants.kelas import KELAS_OPTIONS

router = APIRouter(prefix="/kelas", tags=["kelas"])


@router.get("")
def list_kelas() -> list[str]:
    """Return the classes staff can upload reports for."""
    return list(KELAS_OPTIONS)
