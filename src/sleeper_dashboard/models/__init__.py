"""Pydantic models and schemas."""

from sleeper_dashboard.models.analytics import (
    AgeAnalysis,
    InjuryRisk,
    KeyMatchup,
    LeagueAnalytics,
    MatchupAnalytics,
    MatchupTeamAnalytics,
    PlayerAnalytics,
    PlayoffPicture,
    PowerRankingEntry,
    RosterAnalytics,
    SeasonProjection,
    StartSitRecommendations,
    TradeMarket,
    TrendingStatus,
)
from sleeper_dashboard.models.dashboard import LeagueSummary, UserDashboard
from sleeper_dashboard.models.league import League, NFLState, Roster, User
from sleeper_dashboard.models.matchup import MatchupRecord, PlayoffBracketMatch
from sleeper_dashboard.models.player import Player, TrendingPlayer, TrendingPlayerInfo
from sleeper_dashboard.models.transaction import (
    DraftPick,
    Transaction,
    TransactionType,
    WaiverBudget,
)

__all__ = [
    # Analytics
    "AgeAnalysis",
    "InjuryRisk",
    "KeyMatchup",
    "LeagueAnalytics",
    "MatchupAnalytics",
    "MatchupTeamAnalytics",
    "PlayerAnalytics",
    "PlayoffPicture",
    "PowerRankingEntry",
    "RosterAnalytics",
    "SeasonProjection",
    "StartSitRecommendations",
    "TradeMarket",
    "TrendingStatus",
    # Dashboard
    "LeagueSummary",
    "UserDashboard",
    # League
    "League",
    "NFLState",
    "Roster",
    "User",
    # Matchup
    "MatchupRecord",
    "PlayoffBracketMatch",
    # Player
    "Player",
    "TrendingPlayer",
    "TrendingPlayerInfo",
    # Transaction
    "DraftPick",
    "Transaction",
    "TransactionType",
    "WaiverBudget",
]
