"""FastAPI application for the dynasty trade calculator."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dynasty import __version__
from dynasty.api.routers import (
    market_router,
    results_router,
    settings_router,
    teams_router,
)
from dynasty.api.services import get_session

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup: restore the last settings snapshot
    session = get_session()
    logger.info(
        f"Dynasty API starting up (source={session.value_source.source.value}, "
        f"year={session.current_year})"
    )
    yield
    logger.info("Dynasty API shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Dynasty Trade Calculator API",
        description="Multi-team dynasty fantasy football trade valuation",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Vite dev server
            "http://localhost:5173",  # Alternative Vite port
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(settings_router, prefix="/api/v1")
    app.include_router(teams_router, prefix="/api/v1")
    app.include_router(market_router, prefix="/api/v1")
    app.include_router(results_router, prefix="/api/v1")

    return app


# Create app instance
app = create_app()


@app.get("/")
async def root() -> dict:
    """Root endpoint - API info."""
    return {
        "name": "Dynasty Trade Calculator API",
        "version": __version__,
        "docs": "/docs",
    }


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    session = get_session()
    return {
        "status": "healthy",
        "teams": len(session.board.teams),
        "market": session.catalog.summary(),
    }


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "dynasty.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)
