"""
NFL State API Route
"""

from fastapi import APIRouter, HTTPException

from sleeper_dashboard.api.dependencies import SleeperClientDep
from sleeper_dashboard.models import NFLState

router = APIRouter()


@router.get(
    "",
    response_model=NFLState,
    summary="Get current NFL state",
    description="Current week, season and season type.",
)
async def get_nfl_state(client: SleeperClientDep) -> NFLState:
    state = await client.get_nfl_state()
    if state is None:
        raise HTTPException(status_code=503, detail="NFL state unavailable")
    return state
