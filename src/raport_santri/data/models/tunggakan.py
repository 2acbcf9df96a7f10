"""ORM model for outstanding-fee ("tunggakan") entries.

There is no foreign key to ``report``; a fee entry hides every report whose
(nama, kelas) pair matches it case-insensitively, computed at query time.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from raport_santri.data.db import Base


class Tunggakan(Base):
    """Outstanding payment recorded for a student.

    Attributes:
        id: Opaque UUID primary key.
        nama: Student name as typed by staff.
        kelas: Class identifier.
        jumlah_tunggakan: Amount owed, a positive integer.
        created_at: UTC timestamp of when the entry was recorded.
    """

    __tablename__ = "tunggakan"
    __table_args__ = (
        CheckConstraint("jumlah_tunggakan > 0", name="ck_tunggakan_jumlah_positive"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    nama: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    kelas: Mapped[str] = mapped_column(String(32), nullable=False)
    jumlah_tunggakan: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    @validates("jumlah_tunggakan")
    def validate_jumlah(self, key: str, value: int) -> int:
        """Validate the owed amount is positive."""
        if value <= 0:
            raise ValueError("jumlah_tunggakan must be positive")
        return value
