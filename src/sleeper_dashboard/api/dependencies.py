"""
API Dependencies

Shared dependencies for FastAPI route handlers including
client management and league context creation.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Path, Query

from sleeper_dashboard.analytics import ScoringTables, get_scoring_tables
from sleeper_dashboard.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient
from sleeper_dashboard.config import Settings, get_settings
from sleeper_dashboard.services.analytics import AnalyticsService
from sleeper_dashboard.services.player_cache import PlayerCache, get_player_cache


class ClientManager:
    """
    Manages SleeperClient lifecycle for the application.

    Creates a single client instance that can be reused across requests.
    """

    _client: SleeperClient | None = None

    @classmethod
    async def get_client(cls) -> SleeperClient:
        """Get or create the SleeperClient instance."""
        if cls._client is None:
            cls._client = SleeperClient()
            await cls._client.__aenter__()
        return cls._client

    @classmethod
    async def close_client(cls) -> None:
        """Close the SleeperClient instance."""
        if cls._client is not None:
            await cls._client.__aexit__(None, None, None)
            cls._client = None


async def get_sleeper_client() -> SleeperClient:
    """Dependency to get the SleeperClient."""
    return await ClientManager.get_client()


def get_cache() -> PlayerCache:
    """Dependency to get the shared player cache."""
    return get_player_cache()


def get_tables() -> ScoringTables:
    """Dependency to get the configured scoring tables."""
    return get_scoring_tables()


def get_analytics_service(
    client: Annotated[SleeperClient, Depends(get_sleeper_client)],
    cache: Annotated[PlayerCache, Depends(get_cache)],
    tables: Annotated[ScoringTables, Depends(get_tables)],
) -> AnalyticsService:
    """Dependency to get an AnalyticsService bound to the shared cache."""
    return AnalyticsService(client, cache=cache, tables=tables)


async def get_league_context(
    league_id: Annotated[str, Path(description="Sleeper league ID")],
    client: Annotated[SleeperClient, Depends(get_sleeper_client)],
) -> LeagueContext:
    """
    Dependency to create a LeagueContext for a given league.

    Raises HTTPException if league not found.
    """
    try:
        return await LeagueContext.create(client, league_id)
    except SleeperAPIError as e:
        raise HTTPException(status_code=404, detail=e.message) from e


# Type aliases for cleaner route signatures
SleeperClientDep = Annotated[SleeperClient, Depends(get_sleeper_client)]
AnalyticsDep = Annotated[AnalyticsService, Depends(get_analytics_service)]
LeagueContextDep = Annotated[LeagueContext, Depends(get_league_context)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Common query parameters
SeasonQuery = Annotated[
    int | None,
    Query(description="NFL season year (defaults to the configured season)", ge=2017, le=2100),
]

WeekPath = Annotated[int, Path(description="Week number", ge=1, le=18)]
