"""
Matchup Aggregation

Pairs weekly matchup records and compares the two starting lineups.
"""

import logging

from sleeper_dashboard.analytics.player import round_half_up
from sleeper_dashboard.models import (
    InjuryRisk,
    KeyMatchup,
    MatchupAnalytics,
    MatchupRecord,
    MatchupTeamAnalytics,
    PlayerAnalytics,
    TrendingStatus,
)

logger = logging.getLogger(__name__)

KEY_PLAYER_COUNT = 3


def group_matchup_pairs(
    records: list[MatchupRecord],
) -> list[tuple[MatchupRecord, MatchupRecord]]:
    """
    Pair records that share a matchup id.

    Pairing is one-to-one in input order. Records without a partner (bye
    weeks, a missing opponent, a null matchup id) are dropped.
    """
    pairs = []
    processed: set[int] = set()

    for record in records:
        if record.roster_id in processed:
            continue
        if record.matchup_id is None:
            logger.debug("Dropping matchup record without matchup id (roster %s)", record.roster_id)
            continue

        opponent = next(
            (
                other for other in records
                if other.matchup_id == record.matchup_id
                and other.roster_id != record.roster_id
                and other.roster_id not in processed
            ),
            None,
        )
        if opponent is None:
            logger.debug(
                "Dropping unmatched record for roster %s (matchup %s)",
                record.roster_id,
                record.matchup_id,
            )
            continue

        pairs.append((record, opponent))
        processed.add(record.roster_id)
        processed.add(opponent.roster_id)

    return pairs


def identify_advantages(starters: list[PlayerAnalytics]) -> list[str]:
    advantages = []

    if sum(1 for p in starters if p.overall_rank <= 12) >= 2:
        advantages.append("Elite talent advantage")
    if sum(1 for p in starters if p.consistency_score >= 0.8) >= 4:
        advantages.append("High floor lineup")
    if sum(1 for p in starters if p.trending_status == TrendingStatus.RISING) >= 2:
        advantages.append("Trending up players")

    return advantages


def identify_concerns(starters: list[PlayerAnalytics]) -> list[str]:
    concerns = []

    if sum(1 for p in starters if p.injury_risk == InjuryRisk.HIGH) >= 2:
        concerns.append("Injury concerns")
    if sum(1 for p in starters if p.consistency_score < 0.6) >= 2:
        concerns.append("Inconsistent performers")
    if sum(1 for p in starters if p.trending_status == TrendingStatus.FALLING) >= 2:
        concerns.append("Declining production")

    return concerns


EVEN_ODDS = 50


def build_team_analytics(
    record: MatchupRecord, starters: list[PlayerAnalytics]
) -> MatchupTeamAnalytics:
    return MatchupTeamAnalytics(
        roster_id=record.roster_id,
        projected_points=sum(p.projected_points for p in starters),
        # No win model yet; both sides report even odds
        win_probability=EVEN_ODDS,
        key_players=[p.name for p in starters[:KEY_PLAYER_COUNT]],
        advantages=identify_advantages(starters),
        concerns=identify_concerns(starters),
    )


def calculate_closeness_rating(points1: float, points2: float) -> int:
    """``1 - |diff| / average`` as a percentage; identical projections rate 100."""
    avg_points = (points1 + points2) / 2
    if avg_points == 0:
        return 100
    closeness = 1 - abs(points1 - points2) / avg_points
    return round_half_up(closeness * 100)


def calculate_upset_potential(points1: float, points2: float) -> int:
    """Chance the underdog wins: ``max(0, 50 - 2 * diff)`` from the favorite's side."""
    favorite, underdog = (points1, points2) if points1 > points2 else (points2, points1)
    point_diff = favorite - underdog
    return round_half_up(max(0, 50 - point_diff * 2))


def identify_key_matchups() -> list[KeyMatchup]:
    # TODO: compare starters position by position once lineup slots are resolved
    return [
        KeyMatchup(
            position="QB",
            team1_player="Player A",
            team2_player="Player B",
            advantage="team1",
        )
    ]


def build_matchup_analytics(
    record1: MatchupRecord,
    starters1: list[PlayerAnalytics],
    record2: MatchupRecord,
    starters2: list[PlayerAnalytics],
    week: int,
) -> MatchupAnalytics:
    """Compare two paired records given their scored starters."""
    team1 = build_team_analytics(record1, starters1)
    team2 = build_team_analytics(record2, starters2)

    return MatchupAnalytics(
        matchup_id=record1.matchup_id,
        week=week,
        team1=team1,
        team2=team2,
        closeness_rating=calculate_closeness_rating(team1.projected_points, team2.projected_points),
        upset_potential=calculate_upset_potential(team1.projected_points, team2.projected_points),
        key_matchups=identify_key_matchups(),
    )
