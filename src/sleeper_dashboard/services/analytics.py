"""
Analytics Service

Scoring engine facade: keeps the player cache fresh and runs the heuristic
scoring functions over Sleeper records.
"""

import logging
from datetime import date

from sleeper_dashboard.analytics import (
    ScoringTables,
    build_league_analytics,
    build_matchup_analytics,
    build_roster_analytics,
    get_scoring_tables,
    group_matchup_pairs,
    score_player,
    score_players,
)
from sleeper_dashboard.clients.sleeper import SleeperClient, TrendKind
from sleeper_dashboard.models import (
    League,
    LeagueAnalytics,
    MatchupAnalytics,
    MatchupRecord,
    NFLState,
    PlayerAnalytics,
    Roster,
    RosterAnalytics,
    TrendingPlayerInfo,
)
from sleeper_dashboard.services.player_cache import PlayerCache, PlayerSnapshot, get_player_cache

logger = logging.getLogger(__name__)


class AnalyticsService:
    """
    Service for player, roster, matchup and league analytics.

    Every analysis first makes sure the player cache is fresh (see
    ``PlayerCache.refresh``), then computes its result from the cached
    snapshot. Nothing derived is cached.

    Usage:
        async with SleeperClient() as client:
            service = AnalyticsService(client)
            player = await service.analyze_player("4046")
    """

    def __init__(
        self,
        client: SleeperClient,
        cache: PlayerCache | None = None,
        tables: ScoringTables | None = None,
        today: date | None = None,
    ):
        self.client = client
        self.cache = cache or get_player_cache()
        self.tables = tables or get_scoring_tables()
        self._today = today

    @property
    def today(self) -> date:
        return self._today or date.today()

    @property
    def nfl_state(self) -> NFLState | None:
        return self.cache.nfl_state

    async def initialize_data(self) -> PlayerSnapshot:
        """Refresh the player directory if stale and the NFL state always."""
        return await self.cache.refresh(self.client)

    async def analyze_player(self, player_id: str) -> PlayerAnalytics | None:
        """
        Analyze a single player.

        Args:
            player_id: Sleeper player ID

        Returns:
            PlayerAnalytics, or None if the player is not in the directory
        """
        async with self.cache.acquire(self.client) as snapshot:
            player = snapshot.get(player_id)
            if player is None:
                return None
            return score_player(player, self.tables, self.today)

    async def analyze_roster(
        self, roster: Roster, league: League | None, owner_name: str
    ) -> RosterAnalytics:
        """
        Analyze a roster.

        Players missing from the directory are skipped.

        Args:
            roster: Sleeper roster
            league: League the roster belongs to
            owner_name: Display name for the roster's owner

        Returns:
            RosterAnalytics for the roster
        """
        async with self.cache.acquire(self.client) as snapshot:
            players = score_players(roster.player_ids, snapshot.players, self.tables, self.today)

        if len(players) < len(roster.player_ids):
            logger.debug(
                "Roster %s: %d of %d players missing from directory",
                roster.roster_id,
                len(roster.player_ids) - len(players),
                len(roster.player_ids),
            )

        return build_roster_analytics(roster, league, owner_name, players, self.tables)

    async def analyze_matchup(
        self, matchups: list[MatchupRecord], week: int
    ) -> list[MatchupAnalytics]:
        """
        Analyze a week's matchups.

        Args:
            matchups: Raw matchup records for the week
            week: Week number

        Returns:
            One MatchupAnalytics per paired matchup id
        """
        async with self.cache.acquire(self.client) as snapshot:
            analytics = []
            for record1, record2 in group_matchup_pairs(matchups):
                starters1 = score_players(
                    record1.starter_ids, snapshot.players, self.tables, self.today
                )
                starters2 = score_players(
                    record2.starter_ids, snapshot.players, self.tables, self.today
                )
                analytics.append(
                    build_matchup_analytics(record1, starters1, record2, starters2, week)
                )

        return analytics

    async def analyze_league(self, league: League) -> LeagueAnalytics:
        """League overview (placeholder metrics)."""
        await self.initialize_data()
        return build_league_analytics(league)

    async def get_trending_players(
        self, kind: TrendKind = "add", lookback_hours: int = 24, limit: int = 25
    ) -> list[TrendingPlayerInfo]:
        """
        Get trending adds or drops joined with player names.

        Entries whose player is not in the directory keep the raw ID as name.
        """
        trending = await self.client.get_trending_players(kind, lookback_hours, limit)
        async with self.cache.acquire(self.client) as snapshot:
            result = []
            for entry in trending:
                player = snapshot.get(entry.player_id)
                result.append(
                    TrendingPlayerInfo(
                        player_id=entry.player_id,
                        name=player.display_name if player else entry.player_id,
                        position=player.position if player else None,
                        team=player.team if player else None,
                        count=entry.count,
                    )
                )
        return result
