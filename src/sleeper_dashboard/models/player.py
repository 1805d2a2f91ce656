"""
Player-related Pydantic models.
"""

from pydantic import BaseModel


class Player(BaseModel):
    """NFL Player information from Sleeper."""

    player_id: str
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    position: str | None = None
    team: str | None = None
    age: int | None = None
    birth_date: str | None = None
    years_exp: int | None = None
    status: str | None = None
    injury_status: str | None = None
    injury_notes: str | None = None
    number: int | None = None
    depth_chart_order: int | None = None
    search_rank: int | None = None
    fantasy_positions: list[str] | None = None
    height: str | None = None
    weight: str | None = None
    college: str | None = None

    @property
    def display_name(self) -> str:
        """Get display name for the player."""
        if self.first_name or self.last_name:
            return f"{self.first_name or ''} {self.last_name or ''}".strip()
        if self.full_name:
            return self.full_name
        return self.player_id

    @property
    def is_injured(self) -> bool:
        """Any non-empty injury designation (Questionable, Out, IR, ...)."""
        return bool(self.injury_status)


class TrendingPlayer(BaseModel):
    """Trending add/drop entry from Sleeper."""

    player_id: str
    count: int = 0


class TrendingPlayerInfo(BaseModel):
    """Trending entry joined with the player directory."""

    player_id: str
    name: str
    position: str | None = None
    team: str | None = None
    count: int = 0
