"""
Matchup-related Pydantic models.
"""

from pydantic import BaseModel, Field


class MatchupRecord(BaseModel):
    """One roster's side of a weekly matchup, as returned by Sleeper."""

    roster_id: int
    matchup_id: int | None = None
    starters: list[str] | None = Field(default_factory=list)
    players: list[str] | None = Field(default_factory=list)
    points: float | None = 0.0
    custom_points: float | None = None
    players_points: dict[str, float] | None = None
    starters_points: list[float] | None = None

    @property
    def starter_ids(self) -> list[str]:
        return self.starters or []


class PlayoffBracketMatch(BaseModel):
    """A single game in a winners or losers bracket."""

    r: int = Field(description="Round")
    m: int = Field(description="Match id")
    t1: int | None = Field(default=None, description="Team 1 roster id")
    t2: int | None = Field(default=None, description="Team 2 roster id")
    w: int | None = Field(default=None, description="Winner roster id")
    l: int | None = Field(default=None, description="Loser roster id")  # noqa: E741
    t1_from: dict[str, int] | None = None
    t2_from: dict[str, int] | None = None
    p: int | None = Field(default=None, description="Placement game")
