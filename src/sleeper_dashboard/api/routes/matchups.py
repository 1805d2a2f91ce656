"""
Matchup API Routes

Endpoints for weekly head-to-head matchup analysis.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path

from sleeper_dashboard.api.dependencies import AnalyticsDep, SleeperClientDep, WeekPath
from sleeper_dashboard.models import MatchupAnalytics

router = APIRouter()


@router.get(
    "/{league_id}/week/{week}",
    response_model=list[MatchupAnalytics],
    summary="Get matchup analytics for a week",
    description="Projected points, win probability, closeness and upset potential per matchup.",
)
async def get_weekly_matchup_analytics(
    league_id: Annotated[str, Path(description="Sleeper league ID")],
    week: WeekPath,
    client: SleeperClientDep,
    service: AnalyticsDep,
) -> list[MatchupAnalytics]:
    records = await client.get_matchups(league_id, week)
    return await service.analyze_matchup(records, week)


@router.get(
    "/{league_id}/current",
    response_model=list[MatchupAnalytics],
    summary="Get matchup analytics for the current week",
)
async def get_current_matchup_analytics(
    league_id: Annotated[str, Path(description="Sleeper league ID")],
    client: SleeperClientDep,
    service: AnalyticsDep,
) -> list[MatchupAnalytics]:
    await service.initialize_data()
    state = service.nfl_state
    if state is None:
        raise HTTPException(status_code=503, detail="NFL state unavailable")

    week = max(state.week, 1)
    records = await client.get_matchups(league_id, week)
    return await service.analyze_matchup(records, week)
