"""
Roster API Routes

Endpoints for roster strength, depth and lineup/trade suggestions.
"""

import asyncio
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path

from sleeper_dashboard.api.dependencies import AnalyticsDep, LeagueContextDep
from sleeper_dashboard.models import RosterAnalytics

router = APIRouter()


@router.get(
    "/{league_id}",
    response_model=list[RosterAnalytics],
    summary="Get analytics for every roster",
    description="Roster analytics for all teams, sorted by power ranking.",
)
async def get_league_roster_analytics(
    ctx: LeagueContextDep,
    service: AnalyticsDep,
) -> list[RosterAnalytics]:
    results = await asyncio.gather(
        *(
            service.analyze_roster(roster, ctx.league, ctx.get_owner_name(roster.roster_id))
            for roster in ctx.rosters
        )
    )
    return sorted(results, key=lambda r: r.power_ranking, reverse=True)


@router.get(
    "/{league_id}/{roster_id}",
    response_model=RosterAnalytics,
    summary="Get roster analytics",
)
async def get_roster_analytics(
    ctx: LeagueContextDep,
    service: AnalyticsDep,
    roster_id: Annotated[int, Path(description="Team roster ID")],
) -> RosterAnalytics:
    """Get analytics for a single roster."""
    roster = ctx.get_roster(roster_id)
    if roster is None:
        raise HTTPException(status_code=404, detail=f"Roster not found: {roster_id}")
    return await service.analyze_roster(roster, ctx.league, ctx.get_owner_name(roster_id))
