from __future__ import annotations

from raport_santri.constants.kelas import KELAS_OPTIONS

__all__ = [
    "KELAS_OPTIONS",
]
