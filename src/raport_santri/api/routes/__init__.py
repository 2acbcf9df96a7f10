"""Route handlers for the API."""

from raport_santri.api.routes import auth, files, health, kelas, reports, tunggakan

__all__ = [
    "auth",
    "files",
    "health",
    "kelas",
    "reports",
    "tunggakan",
]
