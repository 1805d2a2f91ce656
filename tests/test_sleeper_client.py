"""Tests for the async Sleeper client against a mocked transport."""

import logging

import httpx
import pytest

from sleeper_dashboard.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient

from conftest import make_transport


async def test_requires_context_manager():
    client = SleeperClient()
    with pytest.raises(RuntimeError):
        await client.get_nfl_state()


async def test_get_user(sleeper_client, calls):
    user = await sleeper_client.get_user("someuser")
    assert user.user_id == "u1"
    assert calls == ["/user/someuser"]


async def test_missing_user_is_none(sleeper_client):
    assert await sleeper_client.get_user("nobody") is None


async def test_user_leagues(sleeper_client):
    leagues = await sleeper_client.get_user_leagues("u1", 2025)
    assert [league.league_id for league in leagues] == ["L1"]


async def test_missing_list_is_empty(sleeper_client):
    assert await sleeper_client.get_league_rosters("nope") == []
    assert await sleeper_client.get_matchups("L1", 9) == []


async def test_server_error_is_empty(sleeper_client, sleeper_routes):
    sleeper_routes["/league/L1/rosters"] = 500
    sleeper_routes["/league/L1"] = 503
    assert await sleeper_client.get_league_rosters("L1") == []
    assert await sleeper_client.get_league("L1") is None


async def test_transport_error_is_none(sleeper_client, sleeper_routes):
    sleeper_routes["/state/nfl"] = httpx.ConnectError("boom")
    assert await sleeper_client.get_nfl_state() is None


async def test_non_json_body_is_none(sleeper_client, sleeper_routes):
    sleeper_routes["/state/nfl"] = httpx.Response(200, text="<html>oops</html>")
    assert await sleeper_client.get_nfl_state() is None


async def test_invalid_records_are_skipped(sleeper_client, sleeper_routes):
    sleeper_routes["/league/L1/rosters"].append({"owner_id": "u3"})
    rosters = await sleeper_client.get_league_rosters("L1")
    assert [r.roster_id for r in rosters] == [1, 2]


async def test_roster_record(sleeper_client):
    roster = (await sleeper_client.get_league_rosters("L1"))[0]
    assert roster.player_ids == ["qb1", "rb1", "te1"]
    assert roster.wins == 3
    assert roster.losses == 1
    assert roster.ties == 0


async def test_matchups(sleeper_client):
    records = await sleeper_client.get_matchups("L1", 5)
    assert [(r.roster_id, r.matchup_id) for r in records] == [(1, 1), (2, 1)]
    assert records[0].starter_ids == ["te1"]


async def test_transactions_are_tagged_with_week(sleeper_client, sleeper_routes):
    sleeper_routes["/league/L1/transactions/3"] = [
        {"transaction_id": "t1", "type": "trade", "status": "complete", "roster_ids": [1, 2]},
        {"transaction_id": "t2", "type": "waiver", "status": "failed"},
    ]
    transactions = await sleeper_client.get_transactions("L1", 3)
    assert [t.week for t in transactions] == [3, 3]
    assert transactions[0].is_trade
    assert transactions[1].is_waiver


async def test_playoff_bracket(sleeper_client, sleeper_routes):
    sleeper_routes["/league/L1/losers_bracket"] = [{"r": 1, "m": 1, "t1": 3, "t2": 4, "w": 3, "l": 4}]
    bracket = await sleeper_client.get_playoff_bracket("L1", "losers")
    assert bracket[0].w == 3
    assert await sleeper_client.get_playoff_bracket("L1", "winners") == []


async def test_all_players_keys_by_id(sleeper_client, sleeper_routes):
    sleeper_routes["/players/nfl"] = {
        "4046": {"first_name": "Patrick", "last_name": "Mahomes", "position": "QB", "team": "KC"},
        "bad": "not a record",
    }
    players = await sleeper_client.get_all_players()
    assert list(players) == ["4046"]
    assert players["4046"].player_id == "4046"
    assert players["4046"].display_name == "Patrick Mahomes"


async def test_all_players_failure_is_none(sleeper_client):
    assert await sleeper_client.get_all_players() is None


async def test_trending_sends_params():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"player_id": "4046", "count": 812}])

    async with SleeperClient(transport=httpx.MockTransport(handler)) as client:
        trending = await client.get_trending_players("drop", lookback_hours=48, limit=10)

    assert trending[0].count == 812
    assert seen[0].url.path == "/v1/players/nfl/trending/drop"
    assert seen[0].url.params["lookback_hours"] == "48"
    assert seen[0].url.params["limit"] == "10"


def test_avatar_url():
    client = SleeperClient()
    assert client.avatar_url("abc") == "https://sleepercdn.com/avatars/thumbs/abc"
    assert client.avatar_url("abc", thumbnail=False) == "https://sleepercdn.com/avatars/abc"
    assert client.avatar_url(None) is None


class TestLeagueContext:
    async def test_lookups(self, sleeper_client):
        ctx = await LeagueContext.create(sleeper_client, "L1")

        assert ctx.league_name == "Test League"
        assert ctx.roster_ids() == [1, 2]
        assert ctx.get_owner_name(1) == "Some User"
        assert ctx.get_team_name(1) == "Sluggers"
        assert ctx.get_team_name(2) == "Other User"
        assert ctx.get_owner_name(99) == "Team 99"
        assert ctx.get_roster(99) is None

    async def test_missing_league_raises(self, sleeper_client):
        with pytest.raises(SleeperAPIError) as exc_info:
            await LeagueContext.create(sleeper_client, "missing")
        assert exc_info.value.status_code == 404

    async def test_orphan_roster_falls_back(self, sleeper_routes, calls):
        sleeper_routes["/league/L1/rosters"][0]["owner_id"] = None
        async with SleeperClient(transport=make_transport(sleeper_routes, calls)) as client:
            ctx = await LeagueContext.create(client, "L1")
        assert ctx.get_owner_name(1) == "Team 1"


async def test_invalid_player_records_are_logged(sleeper_client, sleeper_routes, caplog):
    sleeper_routes["/players/nfl"] = {
        "4046": {"first_name": "Patrick", "last_name": "Mahomes"},
        "9999": {"age": "unknown"},
    }

    with caplog.at_level(logging.DEBUG, logger="sleeper_dashboard.clients.sleeper"):
        players = await sleeper_client.get_all_players()

    assert list(players) == ["4046"]
    assert "Skipping invalid player record 9999" in caplog.text
