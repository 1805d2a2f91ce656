"""
Player Scoring

Derives heuristic metrics for a single player from the Sleeper player
record and the scoring tables. All functions are pure.
"""

import math
from collections.abc import Iterable, Mapping
from datetime import date

from sleeper_dashboard.analytics.tables import DEFAULT_TABLES, ScoringTables
from sleeper_dashboard.models import (
    InjuryRisk,
    Player,
    PlayerAnalytics,
    SeasonProjection,
    TrendingStatus,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def _experience(player: Player) -> int:
    return player.years_exp or 0


def calculate_age(
    player: Player, tables: ScoringTables = DEFAULT_TABLES, today: date | None = None
) -> int:
    """
    Player age in years.

    Uses the explicit age when present, otherwise the difference between the
    current year and the birth year (no month/day precision), otherwise the
    table default.
    """
    if player.age:
        return player.age
    if player.birth_date:
        try:
            birth_year = date.fromisoformat(player.birth_date[:10]).year
        except ValueError:
            return tables.default_age
        return (today or date.today()).year - birth_year
    return tables.default_age


def age_adjustment(age: int, position: str | None, tables: ScoringTables = DEFAULT_TABLES) -> float:
    """Multiplier penalizing distance from the position's peak age (floor 0.7)."""
    peak = tables.peak_ages.get(position or "", tables.default_peak_age)
    return max(0.7, 1 - abs(age - peak) * 0.03)


def injury_adjustment(player: Player) -> float:
    return 0.8 if player.is_injured else 1.0


def calculate_projected_points(
    player: Player, tables: ScoringTables = DEFAULT_TABLES, today: date | None = None
) -> int:
    """Season-long projection: positional baseline x age curve x injury discount."""
    base = tables.base_points.get(player.position or "", tables.default_base_points)
    age = calculate_age(player, tables, today)
    return round_half_up(base * age_adjustment(age, player.position, tables) * injury_adjustment(player))


def calculate_consistency_score(player: Player, tables: ScoringTables = DEFAULT_TABLES) -> float:
    """Positional base plus up to 0.15 for experience, capped at 1.0."""
    base = tables.position_consistency.get(player.position or "", tables.default_consistency)
    experience_bonus = min(_experience(player) * 0.02, 0.15)
    return min(base + experience_bonus, 1.0)


def calculate_injury_risk(
    player: Player, tables: ScoringTables = DEFAULT_TABLES, today: date | None = None
) -> InjuryRisk:
    """
    Injury risk category.

    Any reported injury status is High. Running backs are never Low: High
    past 28, Medium otherwise. Other positions are High past 32, Medium past
    28, else Low.
    """
    if player.is_injured:
        return InjuryRisk.HIGH

    age = calculate_age(player, tables, today)

    if player.position == "RB":
        if age > 28:
            return InjuryRisk.HIGH
        return InjuryRisk.MEDIUM

    if age > 32:
        return InjuryRisk.HIGH
    if age > 28:
        return InjuryRisk.MEDIUM
    return InjuryRisk.LOW


def calculate_trending_status(
    player: Player, tables: ScoringTables = DEFAULT_TABLES, today: date | None = None
) -> TrendingStatus:
    age = calculate_age(player, tables, today)
    experience = _experience(player)

    if age < 25 and experience < 3:
        return TrendingStatus.RISING
    if age > 30 and experience > 8:
        return TrendingStatus.FALLING
    return TrendingStatus.STABLE


def calculate_value_score(
    player: Player, tables: ScoringTables = DEFAULT_TABLES, today: date | None = None
) -> int:
    """
    Composite value score.

    ``round(100 * (projected / 300) * consistency * age_score * experience_score)``
    """
    projected_points = calculate_projected_points(player, tables, today)
    consistency = calculate_consistency_score(player, tables)
    age = calculate_age(player, tables, today)

    production_score = projected_points / 300
    if age < 25:
        age_score = 1.0
    elif age < 30:
        age_score = 0.8
    else:
        age_score = 0.6
    experience_score = 1.0 if _experience(player) > 2 else 0.8

    return max(0, round_half_up(production_score * consistency * age_score * experience_score * 100))


def calculate_position_rank(player: Player, tables: ScoringTables = DEFAULT_TABLES) -> int:
    return player.search_rank or tables.default_rank


def calculate_overall_rank(player: Player, tables: ScoringTables = DEFAULT_TABLES) -> int:
    # Same source as the position rank until positional ranks are computed
    return player.search_rank or tables.default_rank


def get_bye_week(team: str | None, tables: ScoringTables = DEFAULT_TABLES) -> int:
    if not team:
        return 0
    return tables.bye_weeks.get(team, 0)


def calculate_season_projection(
    player: Player, tables: ScoringTables = DEFAULT_TABLES, today: date | None = None
) -> SeasonProjection:
    total_points = calculate_projected_points(player, tables, today)
    games_played = tables.season_games
    return SeasonProjection(
        total_points=total_points,
        games_played=games_played,
        average_points=total_points / games_played,
    )


def score_player(
    player: Player, tables: ScoringTables = DEFAULT_TABLES, today: date | None = None
) -> PlayerAnalytics:
    """
    Compute every heuristic metric for a player.

    Args:
        player: Raw Sleeper player record
        tables: Scoring tables to use
        today: Reference date for birth-date ages (defaults to today)

    Returns:
        PlayerAnalytics for the player
    """
    today = today or date.today()

    return PlayerAnalytics(
        player_id=player.player_id,
        name=player.display_name,
        position=player.position,
        team=player.team,
        age=calculate_age(player, tables, today),
        experience=_experience(player),
        projected_points=calculate_projected_points(player, tables, today),
        consistency_score=calculate_consistency_score(player, tables),
        injury_risk=calculate_injury_risk(player, tables, today),
        trending_status=calculate_trending_status(player, tables, today),
        value_score=calculate_value_score(player, tables, today),
        position_rank=calculate_position_rank(player, tables),
        overall_rank=calculate_overall_rank(player, tables),
        strength_of_schedule=tables.strength_of_schedule,
        bye_week=get_bye_week(player.team, tables),
        recent_performance=list(tables.recent_performance),
        season_projection=calculate_season_projection(player, tables, today),
    )


def score_players(
    player_ids: Iterable[str],
    players: Mapping[str, Player],
    tables: ScoringTables = DEFAULT_TABLES,
    today: date | None = None,
) -> list[PlayerAnalytics]:
    """Score every id found in ``players``, silently skipping unknown ids."""
    return [
        score_player(players[player_id], tables, today)
        for player_id in player_ids
        if player_id in players
    ]
