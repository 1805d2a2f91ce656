"""
User API Routes

Dashboard sync: a user's leagues and rosters for a season.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path

from sleeper_dashboard.api.dependencies import SeasonQuery, SettingsDep, SleeperClientDep
from sleeper_dashboard.models import User, UserDashboard
from sleeper_dashboard.services.dashboard import DashboardService

router = APIRouter()


@router.get(
    "/{username}",
    response_model=User,
    summary="Get user",
)
async def get_user(
    username: Annotated[str, Path(description="Sleeper username or user ID")],
    client: SleeperClientDep,
) -> User:
    user = await client.get_user(username)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User not found: {username}")
    return user


@router.get(
    "/{username}/dashboard",
    response_model=UserDashboard,
    summary="Sync a user's leagues",
    description="The user, their leagues for the season, and every league's rosters.",
)
async def get_user_dashboard(
    username: Annotated[str, Path(description="Sleeper username or user ID")],
    client: SleeperClientDep,
    settings: SettingsDep,
    season: SeasonQuery = None,
) -> UserDashboard:
    service = DashboardService(client)
    dashboard = await service.sync_user(username, season or settings.default_season)
    if dashboard is None:
        raise HTTPException(status_code=404, detail=f"User not found: {username}")
    return dashboard
