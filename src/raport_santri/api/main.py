"""FastAPI application entry point for the Raport Santri API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from raport_santri.api.routes import auth, files, health, kelas, reports, tunggakan

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from raport_santri.data.db import init_db

    init_db()
    yield


app = FastAPI(
    title="Raport Santri API",
    description="Search and download report cards; staff upload reports and manage fees",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(files.router)
app.include_router(auth.router, prefix="/api")
app.include_router(kelas.router, prefix="/api")
app.include_router(reports.router, prefix="/api")
app.include_router(tunggakan.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "raport_santri.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
