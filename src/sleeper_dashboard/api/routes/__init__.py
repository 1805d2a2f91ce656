"""API route handlers."""

from sleeper_dashboard.api.routes import (
    leagues,
    matchups,
    players,
    rosters,
    state,
    users,
)

__all__ = [
    "leagues",
    "matchups",
    "players",
    "rosters",
    "state",
    "users",
]
