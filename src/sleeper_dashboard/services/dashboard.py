"""
Dashboard Service

Builds the user -> leagues -> rosters view for a season.
"""

import asyncio
import logging

from sleeper_dashboard.clients.sleeper import SleeperClient
from sleeper_dashboard.models import LeagueSummary, UserDashboard

logger = logging.getLogger(__name__)


class DashboardService:
    """Service for syncing a user's leagues."""

    def __init__(self, client: SleeperClient):
        self.client = client

    async def sync_user(self, username: str, season: int) -> UserDashboard | None:
        """
        Look up a user and load every league they play in for a season.

        A league whose rosters fail to load is kept with an empty roster list.

        Args:
            username: Sleeper username or user ID
            season: Season year

        Returns:
            UserDashboard, or None if the user does not exist
        """
        user = await self.client.get_user(username)
        if user is None:
            return None

        leagues = await self.client.get_user_leagues(user.user_id, season)
        rosters_by_league = await asyncio.gather(
            *(self.client.get_league_rosters(league.league_id) for league in leagues)
        )
        logger.debug("Synced %d leagues for %s (%s)", len(leagues), username, season)

        return UserDashboard(
            user=user,
            avatar_url=self.client.avatar_url(user.avatar),
            season=season,
            leagues=[
                LeagueSummary(
                    league=league,
                    avatar_url=self.client.avatar_url(league.avatar),
                    rosters=rosters,
                )
                for league, rosters in zip(leagues, rosters_by_league)
            ],
        )
