"""
Roster Aggregation

Rolls scored players up into roster-level strengths, weaknesses, depth,
injury exposure and lineup/trade suggestions.
"""

from collections import Counter, defaultdict

from sleeper_dashboard.analytics.player import round_half_up
from sleeper_dashboard.analytics.tables import DEFAULT_TABLES, ScoringTables
from sleeper_dashboard.models import (
    AgeAnalysis,
    InjuryRisk,
    League,
    PlayerAnalytics,
    Roster,
    RosterAnalytics,
    StartSitRecommendations,
)

# Minimum players at a position before the roster is considered thin there
DEPTH_THRESHOLDS: dict[str, int] = {"RB": 4, "WR": 5, "TE": 2, "QB": 2}

SUGGESTION_LIMIT = 3
DROP_CANDIDATE_LIMIT = 5


def _mean(values: list[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def count_positions(players: list[PlayerAnalytics]) -> Counter:
    return Counter(p.position for p in players)


def calculate_strength_by_position(players: list[PlayerAnalytics]) -> dict[str, int]:
    """Average value score per position, rounded."""
    groups: dict[str, list[int]] = defaultdict(list)
    for player in players:
        groups[player.position or "Unknown"].append(player.value_score)

    return {
        position: round_half_up(_mean(values))
        for position, values in groups.items()
    }


def identify_weaknesses(players: list[PlayerAnalytics]) -> list[str]:
    weaknesses = []
    counts = count_positions(players)

    for position, minimum in DEPTH_THRESHOLDS.items():
        if counts.get(position, 0) < minimum:
            weaknesses.append(f"{position} depth")

    if players and _mean([p.age for p in players]) > 28:
        weaknesses.append("Aging roster")

    high_risk = sum(1 for p in players if p.injury_risk == InjuryRisk.HIGH)
    if high_risk > 3:
        weaknesses.append("High injury risk")

    return weaknesses


def identify_strengths(players: list[PlayerAnalytics]) -> list[str]:
    strengths = []

    if sum(1 for p in players if p.overall_rank <= 24) >= 3:
        strengths.append("Elite talent")
    if sum(1 for p in players if p.position_rank <= 36) >= 15:
        strengths.append("Excellent depth")
    if sum(1 for p in players if p.age <= 25) >= 8:
        strengths.append("Young core")
    if sum(1 for p in players if p.consistency_score >= 0.8) >= 6:
        strengths.append("Consistent performers")

    return strengths


def calculate_age_analysis(players: list[PlayerAnalytics]) -> AgeAnalysis:
    average_age = _mean([p.age for p in players])
    return AgeAnalysis(
        average_age=round_half_up(average_age * 10) / 10,
        young_players=sum(1 for p in players if p.age <= 25),
        veteran_players=sum(1 for p in players if p.age >= 30),
        peak_age_players=sum(1 for p in players if 26 <= p.age <= 29),
    )


def calculate_roster_injury_risk(players: list[PlayerAnalytics]) -> InjuryRisk:
    high = sum(1 for p in players if p.injury_risk == InjuryRisk.HIGH)
    medium = sum(1 for p in players if p.injury_risk == InjuryRisk.MEDIUM)

    if high >= 4:
        return InjuryRisk.HIGH
    if high >= 2 or medium >= 6:
        return InjuryRisk.MEDIUM
    return InjuryRisk.LOW


def calculate_depth_score(
    players: list[PlayerAnalytics], tables: ScoringTables = DEFAULT_TABLES
) -> int:
    """
    Percentage of required roster slots filled.

    Surplus at one position never offsets a shortfall at another, so the
    score is capped at 100.
    """
    counts = count_positions(players)
    required_total = sum(tables.required_depth.values())
    if required_total == 0:
        return 100

    filled = sum(
        min(counts.get(position, 0), required)
        for position, required in tables.required_depth.items()
    )
    return round_half_up(filled / required_total * 100)


def identify_trade_targets(
    weaknesses: list[str], tables: ScoringTables = DEFAULT_TABLES
) -> list[str]:
    targets = []
    for weakness in weaknesses:
        targets.extend(tables.trade_target_phrases.get(weakness, ()))
    return targets


def identify_drop_candidates(players: list[PlayerAnalytics]) -> list[str]:
    return [
        p.name for p in players
        if p.value_score < 30 and p.position_rank > 60
    ][:DROP_CANDIDATE_LIMIT]


def generate_start_sit_recommendations(
    players: list[PlayerAnalytics], roster: Roster
) -> StartSitRecommendations:
    """Start/sit starters on projected points; flex bench players that clear 10."""
    by_id = {p.player_id: p for p in players}
    starter_ids = set(roster.starter_ids)

    starters = [by_id[pid] for pid in roster.starter_ids if pid in by_id]
    bench = [
        by_id[pid] for pid in roster.player_ids
        if pid not in starter_ids and pid in by_id
    ]

    return StartSitRecommendations(
        start=[p.name for p in starters if p.projected_points >= 12][:SUGGESTION_LIMIT],
        sit=[p.name for p in starters if p.projected_points < 8][:SUGGESTION_LIMIT],
        flex=[p.name for p in bench if p.projected_points >= 10][:SUGGESTION_LIMIT],
    )


def calculate_playoff_odds(roster: Roster) -> int:
    """Win rate as a percentage, 50 before any games are played."""
    total_games = roster.wins + roster.losses
    if total_games == 0:
        return 50
    return round_half_up(roster.wins / total_games * 100)


def calculate_championship_odds(roster: Roster) -> int:
    return round_half_up(calculate_playoff_odds(roster) * 0.3)


def calculate_power_ranking(players: list[PlayerAnalytics]) -> int:
    avg_value = _mean([p.value_score for p in players])
    avg_projection = _mean([p.projected_points for p in players])
    return round_half_up((avg_value + avg_projection) / 2)


def build_roster_analytics(
    roster: Roster,
    league: League | None,
    owner_name: str,
    players: list[PlayerAnalytics],
    tables: ScoringTables = DEFAULT_TABLES,
) -> RosterAnalytics:
    """
    Aggregate scored players into roster analytics.

    Args:
        roster: Raw Sleeper roster (read only)
        league: League the roster belongs to
        owner_name: Display name for the roster's owner
        players: Analytics for the roster's players that exist in the directory
        tables: Scoring tables to use

    Returns:
        RosterAnalytics for the roster
    """
    weaknesses = identify_weaknesses(players)

    return RosterAnalytics(
        roster_id=roster.roster_id,
        league_id=league.league_id if league else roster.league_id,
        owner_name=owner_name,
        total_value=sum(p.value_score for p in players),
        projected_points=sum(p.projected_points for p in players),
        strength_by_position=calculate_strength_by_position(players),
        weaknesses=weaknesses,
        strengths=identify_strengths(players),
        age_analysis=calculate_age_analysis(players),
        injury_risk=calculate_roster_injury_risk(players),
        depth_score=calculate_depth_score(players, tables),
        trade_targets=identify_trade_targets(weaknesses, tables),
        drop_candidates=identify_drop_candidates(players),
        start_sit_recommendations=generate_start_sit_recommendations(players, roster),
        playoff_odds=calculate_playoff_odds(roster),
        championship_odds=calculate_championship_odds(roster),
        power_ranking=calculate_power_ranking(players),
    )
