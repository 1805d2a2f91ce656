"""
Dashboard sync models.

The user -> leagues -> rosters view used to populate a dashboard.
"""

from pydantic import BaseModel, Field

from sleeper_dashboard.models.league import League, Roster, User


class LeagueSummary(BaseModel):
    """A league with its avatar URL and current rosters."""

    league: League
    avatar_url: str | None = None
    rosters: list[Roster] = Field(default_factory=list)


class UserDashboard(BaseModel):
    """Everything a user's dashboard needs for one season."""

    user: User
    avatar_url: str | None = None
    season: int
    leagues: list[LeagueSummary] = Field(default_factory=list)
