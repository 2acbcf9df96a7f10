"""Pydantic schemas for tunggakan API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TunggakanResponse(BaseModel):
    """Response schema for an outstanding-fee entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    nama: str
    kelas: str
    jumlah_tunggakan: int
    created_at: datetime


class TunggakanCreateRequest(BaseModel):
    """Request schema for recording an outstanding fee."""

    nama: str = Field(..., min_length=1, description="Student name")
    jumlah: int = Field(..., gt=0, description="Amount owed")
    kelas: str = Field(..., min_length=1, description="Class identifier (e.g., 7A)")

    @field_validator("nama", "kelas")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped
