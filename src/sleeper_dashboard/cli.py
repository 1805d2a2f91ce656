"""
Sleeper Dashboard CLI

Command-line interface for league data and player/roster/matchup analytics
without running the API server.
"""

import argparse
import asyncio
import json
import sys
from typing import Any

from pydantic import BaseModel

from sleeper_dashboard.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient
from sleeper_dashboard.config import configure_logging, get_settings
from sleeper_dashboard.models import (
    League,
    LeagueAnalytics,
    MatchupAnalytics,
    PlayerAnalytics,
    RosterAnalytics,
    TrendingPlayerInfo,
    UserDashboard,
)
from sleeper_dashboard.services.analytics import AnalyticsService
from sleeper_dashboard.services.dashboard import DashboardService


class SleeperDashboard:
    """
    Main class for Sleeper league analytics.

    Can be used as a library or via CLI.

    Example:
        async with SleeperDashboard() as dash:
            player = await dash.analyze_player("4046")
            rosters = await dash.analyze_rosters("1127116641403351040")
    """

    def __init__(self, season: int | None = None):
        self.season = season or get_settings().default_season
        self.client: SleeperClient | None = None
        self.analytics: AnalyticsService | None = None

    async def __aenter__(self):
        self.client = SleeperClient()
        await self.client.__aenter__()
        self.analytics = AnalyticsService(self.client)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.__aexit__(exc_type, exc_val, exc_tb)

    def _require_client(self) -> tuple[SleeperClient, AnalyticsService]:
        if not self.client or not self.analytics:
            raise RuntimeError("Client not initialized. Use 'async with' context.")
        return self.client, self.analytics

    async def sync_user(self, username: str) -> UserDashboard | None:
        """Get a user's leagues and rosters for the season."""
        client, _ = self._require_client()
        return await DashboardService(client).sync_user(username, self.season)

    async def analyze_player(self, player_id: str) -> PlayerAnalytics | None:
        _, analytics = self._require_client()
        return await analytics.analyze_player(player_id)

    async def analyze_rosters(
        self, league_id: str, roster_id: int | None = None
    ) -> list[RosterAnalytics]:
        """Analyze one roster, or every roster in the league by power ranking."""
        client, analytics = self._require_client()
        ctx = await LeagueContext.create(client, league_id)

        rosters = ctx.rosters
        if roster_id is not None:
            rosters = [r for r in rosters if r.roster_id == roster_id]
            if not rosters:
                raise SleeperAPIError(f"Roster not found: {roster_id}", status_code=404)

        results = [
            await analytics.analyze_roster(r, ctx.league, ctx.get_owner_name(r.roster_id))
            for r in rosters
        ]
        return sorted(results, key=lambda r: r.power_ranking, reverse=True)

    async def analyze_matchups(self, league_id: str, week: int) -> list[MatchupAnalytics]:
        client, analytics = self._require_client()
        records = await client.get_matchups(league_id, week)
        return await analytics.analyze_matchup(records, week)

    async def analyze_league(self, league_id: str) -> LeagueAnalytics:
        client, analytics = self._require_client()
        league = await client.get_league(league_id)
        if league is None:
            raise SleeperAPIError(f"League not found: {league_id}", status_code=404)
        return await analytics.analyze_league(league)

    async def get_trending(
        self, kind: str, lookback_hours: int = 24, limit: int = 25
    ) -> list[TrendingPlayerInfo]:
        _, analytics = self._require_client()
        return await analytics.get_trending_players(kind, lookback_hours, limit)  # type: ignore[arg-type]


def _dump(result: Any) -> str:
    """Serialize models (or lists of models) to JSON."""
    if isinstance(result, BaseModel):
        data = result.model_dump(mode="json")
    elif isinstance(result, list):
        data = [r.model_dump(mode="json") if isinstance(r, BaseModel) else r for r in result]
    else:
        data = result
    return json.dumps(data, indent=2)


def _print_leagues(leagues: list[League]) -> None:
    for i, league in enumerate(leagues, 1):
        print(f"  {i}. {league.name}")
        print(f"     ID: {league.league_id}")
        print(f"     Teams: {league.total_rosters}")
        print(f"     Status: {league.status}")
        print()


def _print_player(p: PlayerAnalytics) -> None:
    print(f"{p.name} ({p.position or '?'}, {p.team or 'FA'})")
    print(f"  Age / Exp:        {p.age} / {p.experience}")
    print(f"  Projected points: {p.projected_points}")
    print(f"  Consistency:      {p.consistency_score:.2f}")
    print(f"  Injury risk:      {p.injury_risk.value}")
    print(f"  Trend:            {p.trending_status.value}")
    print(f"  Value score:      {p.value_score}")
    print(f"  Rank:             {p.overall_rank}")
    print(f"  Bye week:         {p.bye_week or '-'}")


def _print_roster(r: RosterAnalytics) -> None:
    print(f"{r.owner_name} (roster {r.roster_id})")
    print(f"  Value {r.total_value}  Projected {r.projected_points}  "
          f"Depth {r.depth_score}%  Power {r.power_ranking}")
    print(f"  Playoff odds {r.playoff_odds}%  Championship odds {r.championship_odds}%  "
          f"Injury risk {r.injury_risk.value}")
    if r.strengths:
        print(f"  Strengths:  {', '.join(r.strengths)}")
    if r.weaknesses:
        print(f"  Weaknesses: {', '.join(r.weaknesses)}")
    if r.trade_targets:
        print(f"  Targets:    {', '.join(r.trade_targets)}")
    if r.drop_candidates:
        print(f"  Drop:       {', '.join(r.drop_candidates)}")
    print()


def _print_matchup(m: MatchupAnalytics) -> None:
    print(f"Matchup {m.matchup_id} (week {m.week})")
    print(f"  Roster {m.team1.roster_id:<4} {m.team1.projected_points:>5} pts  "
          f"{m.team1.win_probability:>3}%")
    print(f"  Roster {m.team2.roster_id:<4} {m.team2.projected_points:>5} pts  "
          f"{m.team2.win_probability:>3}%")
    print(f"  Closeness {m.closeness_rating}  Upset potential {m.upset_potential}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sleeper-dash",
        description="Sleeper Fantasy Football Dashboard CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List leagues (with rosters) for a user
  sleeper-dash --season 2024 leagues someuser

  # Analyze a player
  sleeper-dash player 4046

  # Analyze every roster in a league
  sleeper-dash roster 1127116641403351040

  # Matchup analytics for week 5
  sleeper-dash matchups 1127116641403351040 5

  # Trending waiver adds as JSON
  sleeper-dash --json trending add
        """,
    )

    parser.add_argument(
        "--season",
        type=int,
        default=None,
        help="NFL season year (default: SLEEPER_DEFAULT_SEASON or current year)",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    leagues_parser = subparsers.add_parser("leagues", help="List user's leagues")
    leagues_parser.add_argument("username", help="Sleeper username")

    player_parser = subparsers.add_parser("player", help="Analyze a player")
    player_parser.add_argument("player_id", help="Sleeper player ID")

    roster_parser = subparsers.add_parser("roster", help="Analyze rosters")
    roster_parser.add_argument("league_id", help="Sleeper league ID")
    roster_parser.add_argument("roster_id", nargs="?", type=int, help="Single roster ID")

    matchups_parser = subparsers.add_parser("matchups", help="Analyze weekly matchups")
    matchups_parser.add_argument("league_id", help="Sleeper league ID")
    matchups_parser.add_argument("week", type=int, help="Week number")

    league_parser = subparsers.add_parser("league", help="League overview")
    league_parser.add_argument("league_id", help="Sleeper league ID")

    trending_parser = subparsers.add_parser("trending", help="Trending waiver players")
    trending_parser.add_argument("kind", choices=["add", "drop"], help="Trend type")
    trending_parser.add_argument("--hours", type=int, default=24, help="Lookback hours")
    trending_parser.add_argument("--limit", type=int, default=25, help="Max players")

    return parser


async def cli_main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging("DEBUG" if args.verbose else "WARNING")

    async with SleeperDashboard(season=args.season) as dash:
        try:
            if args.command == "leagues":
                dashboard = await dash.sync_user(args.username)
                if dashboard is None:
                    print(f"User not found: {args.username}")
                    return 1
                if args.json:
                    print(_dump(dashboard))
                    return 0
                print(f"Leagues for {dashboard.user.display_name} ({dashboard.season}):\n")
                if not dashboard.leagues:
                    print("No leagues found.")
                _print_leagues([s.league for s in dashboard.leagues])

            elif args.command == "player":
                player = await dash.analyze_player(args.player_id)
                if player is None:
                    print(f"Player not found: {args.player_id}")
                    return 1
                if args.json:
                    print(_dump(player))
                else:
                    _print_player(player)

            elif args.command == "roster":
                rosters = await dash.analyze_rosters(args.league_id, args.roster_id)
                if args.json:
                    print(_dump(rosters))
                else:
                    for roster in rosters:
                        _print_roster(roster)

            elif args.command == "matchups":
                matchups = await dash.analyze_matchups(args.league_id, args.week)
                if args.json:
                    print(_dump(matchups))
                elif not matchups:
                    print(f"No matchups found for week {args.week}.")
                else:
                    for matchup in matchups:
                        _print_matchup(matchup)

            elif args.command == "league":
                overview = await dash.analyze_league(args.league_id)
                if args.json:
                    print(_dump(overview))
                else:
                    print(f"League {overview.league_id}")
                    print(f"  Competitiveness:    {overview.competitiveness}")
                    print(f"  Parity score:       {overview.parity_score}")
                    print(f"  Average experience: {overview.average_experience}")

            elif args.command == "trending":
                trending = await dash.get_trending(args.kind, args.hours, args.limit)
                if args.json:
                    print(_dump(trending))
                else:
                    print(f"{'Player':<28} {'Pos':<5} {'Team':<5} {'Count':>7}")
                    print("-" * 48)
                    for t in trending:
                        print(f"{t.name:<28} {t.position or '':<5} {t.team or '':<5} {t.count:>7}")

        except SleeperAPIError as e:
            print(f"Error: {e.message}")
            return 1

    return 0


def run_cli():
    """Entry point for CLI."""
    sys.exit(asyncio.run(cli_main()))


if __name__ == "__main__":
    run_cli()
