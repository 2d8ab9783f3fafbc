"""
LegalConnect - Main Application Entry Point

Connects people who need legal help with lawyers and hosts their chat rooms.
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from legalconnect.core.config import get_settings
from legalconnect.core.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting LegalConnect in {settings.ENVIRONMENT} mode...")

    from legalconnect.infrastructure.local.database import dispose_engine, init_db

    await init_db()

    yield

    # Shutdown
    logger.info("Shutting down LegalConnect...")
    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="LegalConnect",
        description="Seeker/lawyer connection requests, chat rooms and legal assistant",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    from legalconnect.api import assistant, chat_rooms, connection_requests, lawyers

    app.include_router(connection_requests.router, prefix="/api/requests", tags=["requests"])
    app.include_router(chat_rooms.router, prefix="/api/rooms", tags=["rooms"])
    app.include_router(lawyers.router, prefix="/api/lawyers", tags=["lawyers"])
    app.include_router(assistant.router, prefix="/api/assistant", tags=["assistant"])

    # Mount storage for local development
    storage_path = settings.STORAGE_BASE_PATH
    if not os.path.isabs(storage_path):
        storage_path = os.path.join(os.getcwd(), storage_path)

    if os.path.exists(storage_path):
        app.mount("/storage", StaticFiles(directory=storage_path), name="storage")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "ok",
            "environment": settings.ENVIRONMENT,
            "version": "0.1.0",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
