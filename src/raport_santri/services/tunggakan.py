"""Tunggakan service for managing outstanding-fee entries."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TypedDict

from sqlalchemy.exc import SQLAlchemyError

from raport_santri.data.db import get_session
from raport_santri.data.models import Tunggakan
from raport_santri.models.errors import RecordStoreError

logger = logging.getLogger(__name__)

__all__ = [
    "TunggakanData",
    "add_tunggakan",
    "delete_tunggakan",
    "get_tunggakan",
]


class TunggakanData(TypedDict):
    """Plain representation of a tunggakan row."""

    id: str
    nama: str
    kelas: str
    jumlah_tunggakan: int
    created_at: datetime


def _tunggakan_to_dict(entry: Tunggakan) -> TunggakanData:
    return {
        "id": entry.id,
        "nama": entry.nama,
        "kelas": entry.kelas,
        "jumlah_tunggakan": entry.jumlah_tunggakan,
        "created_at": entry.created_at,
    }


def get_tunggakan(query: str = "", kelas: str | None = None) -> list[TunggakanData]:
    """Return fee entries ordered by student name.

    Args:
        query: Case-insensitive substring matched against the student name.
        kelas: Exact class filter; empty or None means every class.

    Raises:
        RecordStoreError: If the query fails.
    """
    try:
        with get_session() as session:
            entries = session.query(Tunggakan).order_by(
                Tunggakan.nama.asc(), Tunggakan.created_at.asc()
            )
            if kelas:
                entries = entries.filter(Tunggakan.kelas == kelas)
            result = [_tunggakan_to_dict(entry) for entry in entries.all()]
    except SQLAlchemyError as exc:
        logger.exception("Failed to load tunggakan")
        raise RecordStoreError(f"Failed to load tunggakan: {exc}") from exc

    term = query.strip().lower()
    if not term:
        return result
    return [entry for entry in result if term in entry["nama"].lower()]


def add_tunggakan(nama: str, jumlah: int, kelas: str) -> TunggakanData:
    """Record an outstanding fee for a student.

    Args:
        nama: Student name; surrounding whitespace is removed.
        jumlah: Amount owed, must be positive.
        kelas: Class identifier.

    Returns:
        The saved entry.

    Raises:
        ValueError: If the name or class is empty or the amount is not positive.
        RecordStoreError: If the insert fails.
    """
    nama_clean = nama.strip()
    kelas_clean = kelas.strip()
    if not nama_clean:
        raise ValueError("nama cannot be empty")
    if not kelas_clean:
        raise ValueError("kelas cannot be empty")
    if jumlah <= 0:
        raise ValueError("jumlah_tunggakan must be positive")

    try:
        with get_session() as session:
            entry = Tunggakan(nama=nama_clean, kelas=kelas_clean, jumlah_tunggakan=jumlah)
            session.add(entry)
            session.flush()
            return _tunggakan_to_dict(entry)
    except SQLAlchemyError as exc:
        logger.exception("Failed to add tunggakan for %s (%s)", nama_clean, kelas_clean)
        raise RecordStoreError(f"Failed to add tunggakan: {exc}") from exc


def delete_tunggakan(tunggakan_id: str) -> bool:
    """Delete a fee entry.

    Returns:
        True if a row was deleted, False if no entry has that id.

    Raises:
        RecordStoreError: If the delete fails.
    """
    try:
        with get_session() as session:
            entry = session.get(Tunggakan, tunggakan_id)
            if entry is None:
                return False
            session.delete(entry)
        return True
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete tunggakan %s", tunggakan_id)
        raise RecordStoreError(f"Failed to delete tunggakan: {exc}") from exc
