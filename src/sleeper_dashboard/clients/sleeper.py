"""
Async Sleeper API Client

Handles all API interactions with the Sleeper Fantasy Football platform.
Uses httpx for async HTTP requests with connection pooling.

Every endpoint is read-only. A non-OK response or a transport failure is
logged and reduced to an empty value (``None`` or ``[]``); callers cannot
tell "not found" apart from "fetch failed".

API Documentation: https://docs.sleeper.com/
"""

import asyncio
import logging
from typing import Any, Literal, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from sleeper_dashboard.config import Settings, get_settings
from sleeper_dashboard.models import (
    DraftPick,
    League,
    MatchupRecord,
    NFLState,
    Player,
    PlayoffBracketMatch,
    Roster,
    Transaction,
    TrendingPlayer,
    User,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

BracketKind = Literal["winners", "losers"]
TrendKind = Literal["add", "drop"]


class SleeperAPIError(Exception):
    """Exception raised when a required Sleeper record is unavailable."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


def _parse_many(model: type[ModelT], data: Any, **extra: Any) -> list[ModelT]:
    """Validate a list payload, skipping records that don't fit the model."""
    if not data:
        return []

    items = []
    for raw in data:
        try:
            items.append(model(**{**raw, **extra}))
        except (TypeError, ValidationError) as e:
            logger.debug("Skipping invalid %s record: %s", model.__name__, e)
    return items


class SleeperClient:
    """
    Async client for the Sleeper Fantasy Football API.

    Usage:
        async with SleeperClient() as client:
            user = await client.get_user("username")
            leagues = await client.get_user_leagues(user.user_id, 2024)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "SleeperClient":
        """Create HTTP client on context entry."""
        self._client = httpx.AsyncClient(
            base_url=self.settings.sleeper_base_url,
            timeout=httpx.Timeout(self.settings.sleeper_timeout),
            headers={"Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close HTTP client on context exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise RuntimeError(
                "SleeperClient must be used as async context manager: "
                "async with SleeperClient() as client: ..."
            )
        return self._client

    async def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request to the Sleeper API. Returns None on any failure."""
        try:
            response = await self.client.get(endpoint, params=params)
        except httpx.HTTPError as e:
            logger.warning("Sleeper request failed: %s (%s)", endpoint, e)
            return None

        if response.status_code == 404:
            logger.debug("Sleeper returned 404 for %s", endpoint)
            return None

        if not response.is_success:
            logger.warning(
                "Sleeper request failed: %s (status %s)", endpoint, response.status_code
            )
            return None

        try:
            return response.json()
        except ValueError:
            logger.warning("Sleeper returned a non-JSON body for %s", endpoint)
            return None

    def avatar_url(self, avatar_id: str | None, thumbnail: bool = True) -> str | None:
        """Build the CDN URL for a user or league avatar."""
        if not avatar_id:
            return None
        base = self.settings.sleeper_cdn_url.rstrip("/")
        if thumbnail:
            return f"{base}/avatars/thumbs/{avatar_id}"
        return f"{base}/avatars/{avatar_id}"

    # ==================== User Endpoints ====================

    async def get_user(self, username: str) -> User | None:
        """
        Get user information by username or user_id.

        Args:
            username: Sleeper username or user ID

        Returns:
            User object or None if not found
        """
        data = await self._get(f"/user/{username}")
        if not data:
            return None
        try:
            return User(**data)
        except ValidationError as e:
            logger.warning("Invalid user record for %s: %s", username, e)
            return None

    async def get_user_leagues(
        self, user_id: str, season: int | str, sport: str = "nfl"
    ) -> list[League]:
        """
        Get all leagues for a user in a given season.

        Args:
            user_id: Sleeper user ID
            season: Season year (e.g., 2024)
            sport: Sport type (default: nfl)

        Returns:
            List of League objects
        """
        data = await self._get(f"/user/{user_id}/leagues/{sport}/{season}")
        return _parse_many(League, data)

    # ==================== League Endpoints ====================

    async def get_league(self, league_id: str) -> League | None:
        """
        Get league information.

        Args:
            league_id: Sleeper league ID

        Returns:
            League object or None if not found
        """
        data = await self._get(f"/league/{league_id}")
        if not data:
            return None
        try:
            return League(**data)
        except ValidationError as e:
            logger.warning("Invalid league record for %s: %s", league_id, e)
            return None

    async def get_league_rosters(self, league_id: str) -> list[Roster]:
        """Get all rosters in a league."""
        data = await self._get(f"/league/{league_id}/rosters")
        return _parse_many(Roster, data)

    async def get_league_users(self, league_id: str) -> list[User]:
        """Get all users in a league."""
        data = await self._get(f"/league/{league_id}/users")
        return _parse_many(User, data)

    async def get_matchups(self, league_id: str, week: int) -> list[MatchupRecord]:
        """
        Get matchup records for a specific week.

        Each roster gets one record; two records sharing a ``matchup_id``
        form a head-to-head pairing.
        """
        data = await self._get(f"/league/{league_id}/matchups/{week}")
        return _parse_many(MatchupRecord, data)

    async def get_transactions(self, league_id: str, week: int) -> list[Transaction]:
        """
        Get transactions for a specific week (round).

        Args:
            league_id: Sleeper league ID
            week: Week/round number

        Returns:
            List of Transaction objects tagged with the week
        """
        data = await self._get(f"/league/{league_id}/transactions/{week}")
        return _parse_many(Transaction, data, week=week)

    async def get_traded_picks(self, league_id: str) -> list[DraftPick]:
        """Get all traded draft picks in a league."""
        data = await self._get(f"/league/{league_id}/traded_picks")
        return _parse_many(DraftPick, data)

    async def get_playoff_bracket(
        self, league_id: str, kind: BracketKind = "winners"
    ) -> list[PlayoffBracketMatch]:
        """
        Get the winners or losers playoff bracket.

        Args:
            league_id: Sleeper league ID
            kind: "winners" or "losers"
        """
        data = await self._get(f"/league/{league_id}/{kind}_bracket")
        return _parse_many(PlayoffBracketMatch, data)

    # ==================== Player Endpoints ====================

    async def get_all_players(self) -> dict[str, Player] | None:
        """
        Get the full NFL player directory.

        This endpoint returns a large payload (~15MB); callers are expected
        to cache it (see ``PlayerCache``). Returns None if the fetch failed.
        """
        data = await self._get("/players/nfl")
        if not data:
            return None

        players: dict[str, Player] = {}
        for player_id, player_data in data.items():
            try:
                players[player_id] = Player(**{**player_data, "player_id": player_id})
            except (TypeError, ValidationError) as e:
                logger.debug("Skipping invalid player record %s: %s", player_id, e)

        return players

    async def get_trending_players(
        self, kind: TrendKind = "add", lookback_hours: int = 24, limit: int = 25
    ) -> list[TrendingPlayer]:
        """
        Get players trending on waivers.

        Args:
            kind: "add" or "drop"
            lookback_hours: Window to count adds/drops over
            limit: Maximum number of entries
        """
        data = await self._get(
            f"/players/nfl/trending/{kind}",
            params={"lookback_hours": lookback_hours, "limit": limit},
        )
        return _parse_many(TrendingPlayer, data)

    # ==================== NFL State Endpoint ====================

    async def get_nfl_state(self) -> NFLState | None:
        """
        Get current NFL state (week, season, etc.).

        Returns:
            NFLState object or None
        """
        data = await self._get("/state/nfl")
        if not data:
            return None
        try:
            return NFLState(**data)
        except ValidationError as e:
            logger.warning("Invalid NFL state record: %s", e)
            return None


class LeagueContext:
    """
    Helper class to hold league context and provide convenient lookups.

    Resolves roster IDs to owners and team names.
    """

    def __init__(self, league: League, users: list[User], rosters: list[Roster]):
        self.league = league
        self.users = users
        self.rosters = rosters

        self._user_map: dict[str, User] = {u.user_id: u for u in users}
        self._roster_map: dict[int, Roster] = {r.roster_id: r for r in rosters}

    @classmethod
    async def create(cls, client: SleeperClient, league_id: str) -> "LeagueContext":
        """
        Factory method to create a LeagueContext by fetching all required data.

        Raises:
            SleeperAPIError: if the league does not exist or could not be fetched
        """
        league, users, rosters = await asyncio.gather(
            client.get_league(league_id),
            client.get_league_users(league_id),
            client.get_league_rosters(league_id),
        )

        if league is None:
            raise SleeperAPIError(f"League not found: {league_id}", status_code=404)

        return cls(league=league, users=users, rosters=rosters)

    @property
    def league_id(self) -> str:
        return self.league.league_id

    @property
    def league_name(self) -> str:
        return self.league.name

    def get_roster(self, roster_id: int) -> Roster | None:
        """Get roster by ID."""
        return self._roster_map.get(roster_id)

    def get_owner(self, roster_id: int) -> User | None:
        roster = self._roster_map.get(roster_id)
        if roster and roster.owner_id:
            return self._user_map.get(roster.owner_id)
        return None

    def get_owner_name(self, roster_id: int) -> str:
        """Get the owner's display name from roster ID."""
        owner = self.get_owner(roster_id)
        if owner:
            return owner.display_name
        return f"Team {roster_id}"

    def get_team_name(self, roster_id: int) -> str:
        """Get team name from roster ID."""
        owner = self.get_owner(roster_id)
        if owner:
            return owner.team_name
        return f"Team {roster_id}"

    def roster_ids(self) -> list[int]:
        """Get all roster IDs in the league."""
        return list(self._roster_map.keys())
