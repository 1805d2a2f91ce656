"""
Sleeper Dashboard API - Main Application

FastAPI application serving league data and heuristic analytics.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sleeper_dashboard import __version__
from sleeper_dashboard.api.dependencies import ClientManager
from sleeper_dashboard.api.routes import leagues, matchups, players, rosters, state, users
from sleeper_dashboard.clients.sleeper import SleeperAPIError
from sleeper_dashboard.config import configure_logging, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    configure_logging()
    logger.info("Starting Sleeper Dashboard API v%s", __version__)
    logger.info("Debug mode: %s, default season: %s", settings.debug, settings.default_season)

    yield

    logger.info("Shutting down Sleeper Dashboard API")
    await ClientManager.close_client()


def create_app() -> FastAPI:
    """Application factory to create the FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SleeperAPIError)
    async def sleeper_error_handler(request: Request, exc: SleeperAPIError) -> JSONResponse:
        logger.warning("Sleeper error on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code or 502, content={"detail": exc.message})

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "state": "/api/state",
                "users": "/api/users",
                "leagues": "/api/leagues",
                "players": "/api/players",
                "rosters": "/api/rosters",
                "matchups": "/api/matchups",
            },
        }

    # Register API routes
    app.include_router(state.router, prefix="/api/state", tags=["NFL State"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(leagues.router, prefix="/api/leagues", tags=["Leagues"])
    app.include_router(players.router, prefix="/api/players", tags=["Players"])
    app.include_router(rosters.router, prefix="/api/rosters", tags=["Rosters"])
    app.include_router(matchups.router, prefix="/api/matchups", tags=["Matchups"])

    return app


# Create the application instance
app = create_app()


def run():
    """Run the application (used by the CLI entry point)."""
    settings = get_settings()
    uvicorn.run(
        "sleeper_dashboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
