"""Tests for matchup pairing and comparison."""

from sleeper_dashboard.analytics import build_matchup_analytics, group_matchup_pairs
from sleeper_dashboard.analytics.matchup import (
    calculate_closeness_rating,
    calculate_upset_potential,
    identify_advantages,
    identify_concerns,
)
from sleeper_dashboard.models import InjuryRisk, MatchupRecord, TrendingStatus

from conftest import make_analytics


def record(roster_id: int, matchup_id: int | None, starters=None) -> MatchupRecord:
    return MatchupRecord(roster_id=roster_id, matchup_id=matchup_id, starters=starters or [])


class TestPairing:
    def test_pairs_by_matchup_id(self):
        records = [record(1, 1), record(2, 2), record(3, 1), record(4, 2)]
        pairs = group_matchup_pairs(records)
        assert [(a.roster_id, b.roster_id) for a, b in pairs] == [(1, 3), (2, 4)]

    def test_each_roster_appears_once(self):
        records = [record(1, 1), record(2, 1), record(3, 1)]
        pairs = group_matchup_pairs(records)
        assert [(a.roster_id, b.roster_id) for a, b in pairs] == [(1, 2)]

    def test_unmatched_and_null_ids_dropped(self):
        records = [record(1, None), record(2, None), record(3, 7), record(4, 1), record(5, 1)]
        pairs = group_matchup_pairs(records)
        assert [(a.roster_id, b.roster_id) for a, b in pairs] == [(4, 5)]

    def test_empty(self):
        assert group_matchup_pairs([]) == []


class TestScores:
    def test_close_matchup(self):
        assert calculate_closeness_rating(120, 100) == 82
        assert calculate_upset_potential(120, 100) == 10

    def test_lopsided_matchup(self):
        assert calculate_upset_potential(100, 130) == 0

    def test_identical_projections(self):
        assert calculate_closeness_rating(100, 100) == 100
        assert calculate_upset_potential(100, 100) == 50

    def test_both_zero(self):
        assert calculate_closeness_rating(0, 0) == 100


def test_advantages_and_concerns():
    strong = [
        make_analytics(f"s{i}", rank=5, consistency_score=0.9, trending_status=TrendingStatus.RISING)
        for i in range(4)
    ]
    weak = [
        make_analytics(
            f"w{i}",
            consistency_score=0.5,
            injury_risk=InjuryRisk.HIGH,
            trending_status=TrendingStatus.FALLING,
        )
        for i in range(2)
    ]

    assert identify_advantages(strong) == [
        "Elite talent advantage",
        "High floor lineup",
        "Trending up players",
    ]
    assert identify_concerns(strong) == []
    assert identify_concerns(weak) == [
        "Injury concerns",
        "Inconsistent performers",
        "Declining production",
    ]


def test_build_matchup_analytics():
    starters1 = [make_analytics("te1", position="TE", projected_points=120)]
    starters2 = [make_analytics("k1", position="K", projected_points=100)]

    matchup = build_matchup_analytics(
        record(1, 3, ["te1"]), starters1, record(2, 3, ["k1"]), starters2, week=5
    )

    assert matchup.matchup_id == 3
    assert matchup.week == 5
    assert matchup.team1.roster_id == 1
    assert matchup.team1.projected_points == 120
    assert matchup.team2.projected_points == 100
    # Projections do not move the odds off even
    assert matchup.team1.win_probability == 50
    assert matchup.team2.win_probability == 50
    assert matchup.team1.key_players == ["Player te1"]
    assert matchup.closeness_rating == 82
    assert matchup.upset_potential == 10
    assert len(matchup.key_matchups) == 1


def test_build_matchup_analytics_empty_lineups():
    matchup = build_matchup_analytics(record(1, 1), [], record(2, 1), [], week=1)
    assert matchup.team1.projected_points == 0
    assert matchup.closeness_rating == 100
    assert matchup.upset_potential == 50
    assert (matchup.team1.win_probability, matchup.team2.win_probability) == (50, 50)
