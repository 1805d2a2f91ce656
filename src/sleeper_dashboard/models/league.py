"""
League-related Pydantic models.
"""

from pydantic import BaseModel, Field


def _as_int(value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


class League(BaseModel):
    """Sleeper league information."""

    league_id: str
    name: str
    season: str
    status: str | None = None
    sport: str = "nfl"
    season_type: str | None = None
    total_rosters: int = 0
    roster_positions: list[str] = Field(default_factory=list)
    scoring_settings: dict = Field(default_factory=dict)
    settings: dict = Field(default_factory=dict)
    avatar: str | None = None
    draft_id: str | None = None
    previous_league_id: str | None = None


class User(BaseModel):
    """Sleeper user information."""

    user_id: str
    username: str | None = None
    display_name: str
    avatar: str | None = None
    metadata: dict | None = Field(default_factory=dict)
    is_owner: bool | None = False

    @property
    def team_name(self) -> str:
        """Get team name from metadata or display name."""
        if self.metadata and self.metadata.get("team_name"):
            return self.metadata["team_name"]
        return self.display_name


class Roster(BaseModel):
    """League roster information."""

    roster_id: int
    owner_id: str | None = None
    league_id: str | None = None
    players: list[str] | None = Field(default_factory=list)
    starters: list[str] | None = Field(default_factory=list)
    reserve: list[str] | None = None
    taxi: list[str] | None = None
    co_owners: list[str] | None = None
    settings: dict = Field(default_factory=dict)

    @property
    def player_ids(self) -> list[str]:
        return self.players or []

    @property
    def starter_ids(self) -> list[str]:
        return self.starters or []

    @property
    def wins(self) -> int:
        return _as_int(self.settings.get("wins"))

    @property
    def losses(self) -> int:
        return _as_int(self.settings.get("losses"))

    @property
    def ties(self) -> int:
        return _as_int(self.settings.get("ties"))


class NFLState(BaseModel):
    """Current NFL state from Sleeper."""

    week: int
    season: str
    season_type: str
    display_week: int | None = None
    leg: int | None = None
    season_start_date: str | None = None
    previous_season: str | None = None
    league_season: str | None = None
    league_create_season: str | None = None
