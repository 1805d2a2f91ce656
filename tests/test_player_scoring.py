"""Tests for per-player heuristic scoring."""

import pytest

from sleeper_dashboard.analytics import DEFAULT_TABLES, score_player, score_players
from sleeper_dashboard.analytics.player import (
    age_adjustment,
    calculate_age,
    calculate_consistency_score,
    calculate_injury_risk,
    calculate_overall_rank,
    calculate_position_rank,
    calculate_projected_points,
    calculate_season_projection,
    calculate_trending_status,
    calculate_value_score,
    get_bye_week,
    injury_adjustment,
    round_half_up,
)
from sleeper_dashboard.models import InjuryRisk, TrendingStatus

from conftest import TODAY, make_player


class TestAge:
    def test_explicit_age_wins(self):
        player = make_player(age=31, birth_date="1990-01-01")
        assert calculate_age(player, today=TODAY) == 31

    def test_birth_year_only(self):
        # December birthday still counts the full year
        player = make_player(age=None, birth_date="1998-12-31")
        assert calculate_age(player, today=TODAY) == 27

    def test_default_age(self):
        assert calculate_age(make_player(age=None), today=TODAY) == 25

    def test_unparseable_birth_date_uses_default(self):
        player = make_player(age=None, birth_date="unknown")
        assert calculate_age(player, today=TODAY) == 25


class TestInjuryRisk:
    @pytest.mark.parametrize("position", ["QB", "RB", "WR", "TE", "K", "DEF"])
    @pytest.mark.parametrize("age", [21, 27, 35])
    def test_injury_status_is_always_high(self, position, age):
        player = make_player(position=position, age=age, injury_status="Questionable")
        assert calculate_injury_risk(player, today=TODAY) == InjuryRisk.HIGH

    def test_empty_injury_status_is_ignored(self):
        player = make_player(position="WR", age=24, injury_status="")
        assert calculate_injury_risk(player, today=TODAY) == InjuryRisk.LOW

    @pytest.mark.parametrize(
        ("age", "expected"),
        [
            (29, InjuryRisk.HIGH),
            (28, InjuryRisk.MEDIUM),
            (26, InjuryRisk.MEDIUM),
            # Running backs are never Low, even when young
            (24, InjuryRisk.MEDIUM),
            (21, InjuryRisk.MEDIUM),
        ],
    )
    def test_running_back_thresholds(self, age, expected):
        player = make_player(position="RB", age=age)
        assert calculate_injury_risk(player, today=TODAY) == expected

    @pytest.mark.parametrize(
        ("age", "expected"),
        [(33, InjuryRisk.HIGH), (32, InjuryRisk.MEDIUM), (29, InjuryRisk.MEDIUM), (28, InjuryRisk.LOW)],
    )
    def test_other_position_thresholds(self, age, expected):
        player = make_player(position="WR", age=age)
        assert calculate_injury_risk(player, today=TODAY) == expected


class TestProjectedPoints:
    def test_peak_age_gets_full_base(self):
        player = make_player(position="QB", age=28)
        assert calculate_projected_points(player, today=TODAY) == 280

    def test_age_curve(self):
        # RB peak 26: four years off -> 0.88
        player = make_player(position="RB", age=22)
        assert calculate_projected_points(player, today=TODAY) == 158

    def test_injury_discount(self):
        player = make_player(position="RB", age=22, injury_status="Out")
        assert calculate_projected_points(player, today=TODAY) == 127

    def test_age_adjustment_floor(self):
        assert age_adjustment(60, "K") == 0.7
        player = make_player(position="K", age=60)
        assert calculate_projected_points(player, today=TODAY) == 70

    def test_unknown_position_uses_defaults(self):
        player = make_player(position="LB", age=27)
        assert calculate_projected_points(player, today=TODAY) == 100


class TestConsistency:
    def test_rookie_running_back(self):
        player = make_player(position="RB", age=22, years_exp=0)
        assert calculate_consistency_score(player) == pytest.approx(0.65)

    def test_experience_bonus_capped(self):
        player = make_player(position="WR", years_exp=20)
        assert calculate_consistency_score(player) == pytest.approx(0.85)

    def test_never_above_one(self):
        player = make_player(position="QB", years_exp=12)
        score = calculate_consistency_score(player)
        assert score <= 1.0
        assert score == pytest.approx(1.0)

    def test_missing_experience(self):
        player = make_player(position="TE", years_exp=None)
        assert calculate_consistency_score(player) == pytest.approx(0.75)


class TestTrending:
    def test_rising(self):
        player = make_player(age=23, years_exp=1)
        assert calculate_trending_status(player, today=TODAY) == TrendingStatus.RISING

    def test_falling(self):
        player = make_player(age=32, years_exp=10)
        assert calculate_trending_status(player, today=TODAY) == TrendingStatus.FALLING

    def test_stable(self):
        player = make_player(age=27, years_exp=5)
        assert calculate_trending_status(player, today=TODAY) == TrendingStatus.STABLE


class TestValueScore:
    def test_veteran_quarterback(self):
        # 100 * 280/300 * 0.97 * 0.8 * 1.0 = 72.4
        player = make_player(position="QB", age=28, years_exp=6)
        assert calculate_value_score(player, today=TODAY) == 72

    def test_rookie_running_back(self):
        # 100 * 158/300 * 0.65 * 1.0 * 0.8 = 27.4
        player = make_player(position="RB", age=22, years_exp=0)
        assert calculate_value_score(player, today=TODAY) == 27

    @pytest.mark.parametrize("position", ["QB", "RB", "WR", "TE", "K", "DEF", None])
    @pytest.mark.parametrize("age", [19, 25, 29, 34, 45])
    def test_non_negative_integer(self, position, age):
        player = make_player(position=position, age=age, injury_status="Out")
        score = calculate_value_score(player, today=TODAY)
        assert isinstance(score, int)
        assert score >= 0


class TestLookups:
    def test_ranks_share_search_rank(self):
        player = make_player(search_rank=15)
        assert calculate_position_rank(player) == 15
        assert calculate_overall_rank(player) == 15

    def test_missing_rank_defaults(self):
        player = make_player(search_rank=None)
        assert calculate_position_rank(player) == 999
        assert calculate_overall_rank(player) == 999

    def test_bye_weeks(self):
        assert get_bye_week("DET") == 5
        assert get_bye_week("HOU") == 14
        assert get_bye_week("XYZ") == 0
        assert get_bye_week(None) == 0

    def test_season_projection(self):
        projection = calculate_season_projection(make_player(position="QB", age=28), today=TODAY)
        assert projection.total_points == 280
        assert projection.games_played == 17
        assert projection.average_points == pytest.approx(280 / 17)


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(81.8) == 82
    assert round_half_up(0.49) == 0


def test_rookie_running_back_end_to_end():
    player = make_player("rb", position="RB", age=22, years_exp=0, injury_status=None)
    analytics = score_player(player, today=TODAY)

    assert analytics.consistency_score == pytest.approx(0.65)
    assert analytics.injury_risk == InjuryRisk.MEDIUM
    assert analytics.trending_status == TrendingStatus.RISING
    assert analytics.experience == 0
    assert analytics.name == "Test Playerrb"
    assert analytics.recent_performance == list(DEFAULT_TABLES.recent_performance)
    assert analytics.strength_of_schedule == 0.5


def test_scoring_is_deterministic():
    player = make_player(position="WR", age=27, years_exp=3, search_rank=40)
    assert score_player(player, today=TODAY) == score_player(player, today=TODAY)


def test_score_players_skips_unknown_ids():
    players = {"a": make_player("a"), "b": make_player("b")}
    scored = score_players(["a", "missing", "b"], players, today=TODAY)
    assert [p.player_id for p in scored] == ["a", "b"]


def test_is_injured_drives_injury_rules():
    out = make_player(position="WR", age=24, injury_status="Out")
    healthy = make_player(position="WR", age=24, injury_status="")

    assert out.is_injured
    assert not healthy.is_injured
    assert not make_player().is_injured
    assert injury_adjustment(out) == 0.8
    assert injury_adjustment(healthy) == 1.0
