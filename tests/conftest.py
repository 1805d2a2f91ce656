"""Shared fixtures: fake Sleeper transport, player factories, fixed clock."""

from datetime import date
from typing import Any

import httpx
import pytest

from sleeper_dashboard.clients.sleeper import SleeperClient
from sleeper_dashboard.models import (
    InjuryRisk,
    NFLState,
    Player,
    PlayerAnalytics,
    SeasonProjection,
    TrendingPlayer,
    TrendingStatus,
)

TODAY = date(2025, 9, 1)

NFL_STATE = {
    "week": 5,
    "season": "2025",
    "season_type": "regular",
    "display_week": 5,
    "leg": 5,
}


def make_player(player_id: str = "1", **fields: Any) -> Player:
    """Build a Player with sensible defaults."""
    data = {
        "first_name": "Test",
        "last_name": f"Player{player_id}",
        "position": "WR",
        "team": "DET",
        "age": 26,
        "years_exp": 4,
    }
    data.update(fields)
    return Player(player_id=player_id, **data)


def make_analytics(
    player_id: str,
    position: str = "WR",
    age: int = 26,
    value_score: int = 50,
    projected_points: int = 100,
    consistency_score: float = 0.7,
    injury_risk: InjuryRisk = InjuryRisk.LOW,
    trending_status: TrendingStatus = TrendingStatus.STABLE,
    rank: int = 100,
) -> PlayerAnalytics:
    """Build PlayerAnalytics directly, bypassing the scoring functions."""
    return PlayerAnalytics(
        player_id=player_id,
        name=f"Player {player_id}",
        position=position,
        team="DET",
        age=age,
        experience=4,
        projected_points=projected_points,
        consistency_score=consistency_score,
        injury_risk=injury_risk,
        trending_status=trending_status,
        value_score=value_score,
        position_rank=rank,
        overall_rank=rank,
        strength_of_schedule=0.5,
        bye_week=5,
        recent_performance=[],
        season_projection=SeasonProjection(
            total_points=projected_points, games_played=17, average_points=projected_points / 17
        ),
    )


def make_transport(routes: dict[str, Any], calls: list[str] | None = None) -> httpx.MockTransport:
    """
    Fake Sleeper API.

    ``routes`` maps a path (without the ``/v1`` prefix) to a JSON payload, an
    int status code, an ``httpx.Response``, or an exception to raise.
    Unknown paths return 404. Requested paths are appended to ``calls``.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/v1")
        if calls is not None:
            calls.append(path)

        if path not in routes:
            return httpx.Response(404, json=None)

        route = routes[path]
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        if isinstance(route, int):
            return httpx.Response(route, json={"error": "failed"})
        return httpx.Response(200, json=route)

    return httpx.MockTransport(handler)


class FakeClock:
    """Controllable replacement for ``time.time``."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSleeper:
    """In-memory stand-in for SleeperClient's player and state endpoints."""

    def __init__(
        self,
        players: dict[str, Player] | None = None,
        nfl_state: NFLState | None = None,
        trending: list[TrendingPlayer] | None = None,
    ):
        self.players = players
        self.nfl_state = nfl_state or NFLState(**NFL_STATE)
        self.trending = trending or []
        self.player_fetches = 0
        self.state_fetches = 0

    async def get_all_players(self) -> dict[str, Player] | None:
        self.player_fetches += 1
        return self.players

    async def get_nfl_state(self) -> NFLState | None:
        self.state_fetches += 1
        return self.nfl_state

    async def get_trending_players(self, kind="add", lookback_hours=24, limit=25):
        return self.trending[:limit]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def calls() -> list[str]:
    return []


@pytest.fixture
def sleeper_routes() -> dict[str, Any]:
    """Default fake API payloads; tests mutate this before requesting the client."""
    return {
        "/state/nfl": dict(NFL_STATE),
        "/user/someuser": {
            "user_id": "u1",
            "username": "someuser",
            "display_name": "Some User",
            "avatar": "abc123",
        },
        "/user/u1/leagues/nfl/2025": [
            {
                "league_id": "L1",
                "name": "Test League",
                "season": "2025",
                "status": "in_season",
                "sport": "nfl",
                "season_type": "regular",
                "total_rosters": 2,
                "avatar": "league-av",
            }
        ],
        "/league/L1": {
            "league_id": "L1",
            "name": "Test League",
            "season": "2025",
            "status": "in_season",
            "sport": "nfl",
            "season_type": "regular",
            "total_rosters": 2,
        },
        "/league/L1/users": [
            {"user_id": "u1", "display_name": "Some User", "metadata": {"team_name": "Sluggers"}},
            {"user_id": "u2", "display_name": "Other User"},
        ],
        "/league/L1/rosters": [
            {
                "roster_id": 1,
                "owner_id": "u1",
                "league_id": "L1",
                "players": ["qb1", "rb1", "te1"],
                "starters": ["qb1", "te1"],
                "settings": {"wins": 3, "losses": 1},
            },
            {
                "roster_id": 2,
                "owner_id": "u2",
                "league_id": "L1",
                "players": ["k1", "rb2"],
                "starters": ["k1"],
                "settings": {"wins": 1, "losses": 3},
            },
        ],
        "/league/L1/matchups/5": [
            {"roster_id": 1, "matchup_id": 1, "starters": ["te1"], "players": ["te1"], "points": 0},
            {"roster_id": 2, "matchup_id": 1, "starters": ["k1"], "players": ["k1"], "points": 0},
        ],
    }


@pytest.fixture
async def sleeper_client(sleeper_routes, calls):
    async with SleeperClient(transport=make_transport(sleeper_routes, calls)) as client:
        yield client


@pytest.fixture
def directory() -> dict[str, Player]:
    """Small player directory used across service and API tests."""
    return {
        "qb1": make_player("qb1", position="QB", team="KC", age=28, years_exp=6, search_rank=10),
        "rb1": make_player("rb1", position="RB", team="ATL", age=22, years_exp=0, search_rank=30),
        "rb2": make_player("rb2", position="RB", team="SF", age=29, years_exp=7,
                           injury_status="Questionable", search_rank=50),
        "te1": make_player("te1", position="TE", team="DET", age=28, years_exp=5, search_rank=70),
        "k1": make_player("k1", position="K", team="BAL", age=30, years_exp=8, search_rank=200),
    }
