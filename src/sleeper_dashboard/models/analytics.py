"""
Derived analytics models.

Computed per request from raw Sleeper records and the scoring tables.
Nothing here is persisted.
"""

from enum import Enum

from pydantic import BaseModel, Field


class InjuryRisk(str, Enum):
    """Injury risk category."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TrendingStatus(str, Enum):
    """Career trajectory category."""

    RISING = "Rising"
    FALLING = "Falling"
    STABLE = "Stable"


# ==================== Player ====================


class SeasonProjection(BaseModel):
    """Full-season projection for a player."""

    total_points: int
    games_played: int
    average_points: float


class PlayerAnalytics(BaseModel):
    """Heuristic metrics for a single player."""

    player_id: str
    name: str
    position: str | None = None
    team: str | None = None
    age: int
    experience: int
    projected_points: int
    consistency_score: float = Field(ge=0, le=1)
    injury_risk: InjuryRisk
    trending_status: TrendingStatus
    value_score: int = Field(ge=0, description="Composite value score")
    position_rank: int
    overall_rank: int
    strength_of_schedule: float
    bye_week: int
    recent_performance: list[float] = Field(default_factory=list)
    season_projection: SeasonProjection


# ==================== Roster ====================


class AgeAnalysis(BaseModel):
    """Age breakdown of a roster."""

    average_age: float
    young_players: int = Field(description="Players aged 25 or younger")
    veteran_players: int = Field(description="Players aged 30 or older")
    peak_age_players: int = Field(description="Players aged 26 to 29")


class StartSitRecommendations(BaseModel):
    """Lineup suggestions for a roster."""

    start: list[str] = Field(default_factory=list)
    sit: list[str] = Field(default_factory=list)
    flex: list[str] = Field(default_factory=list)


class RosterAnalytics(BaseModel):
    """Aggregate metrics for a single roster."""

    roster_id: int
    league_id: str | None = None
    owner_name: str
    total_value: int
    projected_points: int
    strength_by_position: dict[str, int] = Field(default_factory=dict)
    weaknesses: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    age_analysis: AgeAnalysis
    injury_risk: InjuryRisk
    depth_score: int = Field(ge=0, le=100)
    trade_targets: list[str] = Field(default_factory=list)
    drop_candidates: list[str] = Field(default_factory=list)
    start_sit_recommendations: StartSitRecommendations
    playoff_odds: int
    championship_odds: int
    power_ranking: int


# ==================== Matchup ====================


class MatchupTeamAnalytics(BaseModel):
    """One side of a matchup."""

    roster_id: int
    projected_points: int
    win_probability: int
    key_players: list[str] = Field(default_factory=list)
    advantages: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)


class KeyMatchup(BaseModel):
    """Position-level comparison between two lineups."""

    position: str
    team1_player: str
    team2_player: str
    advantage: str = Field(description="team1, team2, or even")


class MatchupAnalytics(BaseModel):
    """Comparison of two rosters meeting in a given week."""

    matchup_id: int
    week: int
    team1: MatchupTeamAnalytics
    team2: MatchupTeamAnalytics
    closeness_rating: int
    upset_potential: int
    key_matchups: list[KeyMatchup] = Field(default_factory=list)


# ==================== League ====================


class PowerRankingEntry(BaseModel):
    roster_id: int
    rank: int
    trend: str = Field(description="up, down, or stable")
    score: float


class PlayoffPicture(BaseModel):
    locked: list[int] = Field(default_factory=list)
    competing: list[int] = Field(default_factory=list)
    eliminated: list[int] = Field(default_factory=list)


class TradeMarket(BaseModel):
    hot_commodities: list[str] = Field(default_factory=list)
    buy_low_candidates: list[str] = Field(default_factory=list)
    sell_high_candidates: list[str] = Field(default_factory=list)


class LeagueAnalytics(BaseModel):
    """League-wide overview."""

    league_id: str
    competitiveness: int
    parity_score: int
    average_experience: float
    most_active_traders: list[str] = Field(default_factory=list)
    waivers_most_active: list[str] = Field(default_factory=list)
    power_rankings: list[PowerRankingEntry] = Field(default_factory=list)
    playoff_picture: PlayoffPicture = Field(default_factory=PlayoffPicture)
    trade_market: TradeMarket = Field(default_factory=TradeMarket)
    waivers_hotlist: list[str] = Field(default_factory=list)
