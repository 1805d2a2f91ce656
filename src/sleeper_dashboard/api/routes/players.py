"""
Player API Routes

Endpoints for per-player analytics and waiver trends.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, HTTPException, Path, Query

from sleeper_dashboard.api.dependencies import AnalyticsDep
from sleeper_dashboard.models import PlayerAnalytics, TrendingPlayerInfo

router = APIRouter()


@router.get(
    "/trending/{kind}",
    response_model=list[TrendingPlayerInfo],
    summary="Get trending players",
    description="Players most added or dropped across Sleeper recently.",
)
async def get_trending_players(
    kind: Annotated[Literal["add", "drop"], Path(description="add or drop")],
    service: AnalyticsDep,
    lookback_hours: Annotated[int, Query(ge=1, le=168)] = 24,
    limit: Annotated[int, Query(ge=1, le=200)] = 25,
) -> list[TrendingPlayerInfo]:
    return await service.get_trending_players(kind, lookback_hours, limit)


@router.get(
    "/{player_id}",
    response_model=PlayerAnalytics,
    summary="Get player analytics",
    description="Projection, consistency, injury risk, trend and value score for a player.",
)
async def get_player_analytics(
    player_id: Annotated[str, Path(description="Sleeper player ID")],
    service: AnalyticsDep,
) -> PlayerAnalytics:
    """Get analytics for a single player."""
    analytics = await service.analyze_player(player_id)
    if analytics is None:
        raise HTTPException(status_code=404, detail=f"Player not found: {player_id}")
    return analytics
