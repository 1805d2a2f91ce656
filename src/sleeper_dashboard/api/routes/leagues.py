"""
League API Routes

Endpoints for league information, transactions, picks, brackets and the
league-wide overview.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Path

from sleeper_dashboard.api.dependencies import (
    AnalyticsDep,
    LeagueContextDep,
    SeasonQuery,
    SettingsDep,
    SleeperClientDep,
    WeekPath,
)
from sleeper_dashboard.models import (
    DraftPick,
    League,
    LeagueAnalytics,
    PlayoffBracketMatch,
    Roster,
    Transaction,
    User,
)

router = APIRouter()


@router.get(
    "/user/{username}",
    response_model=list[League],
    summary="Get user's leagues",
    description="Get all leagues for a user in a given season.",
)
async def get_user_leagues(
    username: Annotated[str, Path(description="Sleeper username")],
    client: SleeperClientDep,
    settings: SettingsDep,
    season: SeasonQuery = None,
) -> list[League]:
    """Get all leagues for a user."""
    user = await client.get_user(username)
    if not user:
        return []

    return await client.get_user_leagues(user.user_id, season or settings.default_season)


@router.get(
    "/{league_id}",
    response_model=League,
    summary="Get league details",
    description="Get detailed information about a specific league.",
)
async def get_league(ctx: LeagueContextDep) -> League:
    """Get league information."""
    return ctx.league


@router.get(
    "/{league_id}/users",
    response_model=list[User],
    summary="Get league users",
)
async def get_league_users(ctx: LeagueContextDep) -> list[User]:
    """Get all users in the league."""
    return ctx.users


@router.get(
    "/{league_id}/rosters",
    response_model=list[Roster],
    summary="Get league rosters",
)
async def get_league_rosters(ctx: LeagueContextDep) -> list[Roster]:
    """Get all rosters in the league."""
    return ctx.rosters


@router.get(
    "/{league_id}/analytics",
    response_model=LeagueAnalytics,
    summary="Get league analytics",
    description="League-wide overview: competitiveness, parity, trade market.",
)
async def get_league_analytics(
    ctx: LeagueContextDep,
    service: AnalyticsDep,
) -> LeagueAnalytics:
    return await service.analyze_league(ctx.league)


@router.get(
    "/{league_id}/transactions/{week}",
    response_model=list[Transaction],
    summary="Get weekly transactions",
)
async def get_transactions(
    league_id: Annotated[str, Path(description="Sleeper league ID")],
    week: WeekPath,
    client: SleeperClientDep,
) -> list[Transaction]:
    return await client.get_transactions(league_id, week)


@router.get(
    "/{league_id}/traded-picks",
    response_model=list[DraftPick],
    summary="Get traded draft picks",
)
async def get_traded_picks(
    league_id: Annotated[str, Path(description="Sleeper league ID")],
    client: SleeperClientDep,
) -> list[DraftPick]:
    return await client.get_traded_picks(league_id)


@router.get(
    "/{league_id}/bracket/{kind}",
    response_model=list[PlayoffBracketMatch],
    summary="Get playoff bracket",
    description="Get the winners or losers playoff bracket.",
)
async def get_playoff_bracket(
    league_id: Annotated[str, Path(description="Sleeper league ID")],
    kind: Annotated[Literal["winners", "losers"], Path(description="Bracket type")],
    client: SleeperClientDep,
) -> list[PlayoffBracketMatch]:
    return await client.get_playoff_bracket(league_id, kind)
