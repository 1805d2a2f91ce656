"""Heuristic scoring functions and their lookup tables."""

from sleeper_dashboard.analytics.league import build_league_analytics
from sleeper_dashboard.analytics.matchup import build_matchup_analytics, group_matchup_pairs
from sleeper_dashboard.analytics.player import score_player, score_players
from sleeper_dashboard.analytics.roster import build_roster_analytics, calculate_depth_score
from sleeper_dashboard.analytics.tables import (
    DEFAULT_TABLES,
    ScoringTables,
    get_scoring_tables,
    load_tables,
)

__all__ = [
    "DEFAULT_TABLES",
    "ScoringTables",
    "build_league_analytics",
    "build_matchup_analytics",
    "build_roster_analytics",
    "calculate_depth_score",
    "get_scoring_tables",
    "group_matchup_pairs",
    "load_tables",
    "score_player",
    "score_players",
]
