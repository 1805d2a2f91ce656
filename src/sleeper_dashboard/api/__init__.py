"""API package - FastAPI routes and dependencies."""

from sleeper_dashboard.api.dependencies import (
    AnalyticsDep,
    ClientManager,
    LeagueContextDep,
    SettingsDep,
    SleeperClientDep,
    get_analytics_service,
    get_cache,
    get_league_context,
    get_sleeper_client,
    get_tables,
)

__all__ = [
    "ClientManager",
    "get_sleeper_client",
    "get_analytics_service",
    "get_cache",
    "get_tables",
    "get_league_context",
    "SleeperClientDep",
    "AnalyticsDep",
    "LeagueContextDep",
    "SettingsDep",
]
