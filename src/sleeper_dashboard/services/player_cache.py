"""
Player Cache

Holds the Sleeper player directory in memory with a time-based refresh,
plus the current NFL state.
"""

import logging
import time
from collections.abc import AsyncIterator, Callable, Iterator, Mapping
from contextlib import asynccontextmanager, contextmanager
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from sleeper_dashboard.config import get_settings
from sleeper_dashboard.models import NFLState, Player

logger = logging.getLogger(__name__)


class PlayerSource(Protocol):
    """Anything that can fetch the player directory and NFL state."""

    async def get_all_players(self) -> dict[str, Player] | None: ...

    async def get_nfl_state(self) -> NFLState | None: ...


@dataclass(frozen=True)
class PlayerSnapshot:
    """An immutable copy of the player directory at one point in time."""

    players: Mapping[str, Player] = field(default_factory=lambda: MappingProxyType({}))
    fetched_at: float | None = None

    @classmethod
    def of(cls, players: Mapping[str, Player], fetched_at: float) -> "PlayerSnapshot":
        return cls(players=MappingProxyType(dict(players)), fetched_at=fetched_at)

    def __len__(self) -> int:
        return len(self.players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self.players

    def get(self, player_id: str) -> Player | None:
        return self.players.get(player_id)

    @property
    def is_loaded(self) -> bool:
        return self.fetched_at is not None


class PlayerCache:
    """
    In-memory player directory with a TTL.

    Usage:
        cache = PlayerCache()
        async with cache.acquire(client) as snapshot:
            player = snapshot.get("4046")

    A refresh replaces the snapshot wholesale, so a snapshot obtained from
    ``acquire`` never changes underneath its holder. Overlapping refreshes
    are not coordinated; the last one to finish wins.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.time,
    ):
        if ttl_seconds is None:
            ttl_seconds = get_settings().players_cache_ttl
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._snapshot = PlayerSnapshot()
        self._nfl_state: NFLState | None = None
        self._pinned = False

    @classmethod
    def from_players(
        cls,
        players: Mapping[str, Player],
        nfl_state: NFLState | None = None,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> "PlayerCache":
        """Create a cache pre-populated with a fresh snapshot."""
        cache = cls(ttl_seconds=ttl_seconds, clock=clock)
        cache._snapshot = PlayerSnapshot.of(players, fetched_at=clock())
        cache._nfl_state = nfl_state
        return cache

    @property
    def snapshot(self) -> PlayerSnapshot:
        return self._snapshot

    @property
    def nfl_state(self) -> NFLState | None:
        return self._nfl_state

    @property
    def last_refresh(self) -> float | None:
        return self._snapshot.fetched_at

    @property
    def is_stale(self) -> bool:
        if not self._snapshot.is_loaded:
            return True
        return self._clock() - self._snapshot.fetched_at > self.ttl_seconds

    async def refresh(self, source: PlayerSource, force: bool = False) -> PlayerSnapshot:
        """
        Make sure the directory is loaded and fresh, and update the NFL state.

        The directory is refetched only when stale (or ``force``); a failed
        fetch leaves the previous snapshot in place. The NFL state is
        refetched on every call. Inside ``pin`` nothing is fetched.

        Returns:
            The current snapshot
        """
        if self._pinned:
            return self._snapshot

        if force or self.is_stale:
            started = self._clock()
            players = await source.get_all_players()
            if players:
                self._snapshot = PlayerSnapshot.of(players, fetched_at=self._clock())
                logger.info(
                    "Player directory refreshed: %d players in %.1fs",
                    len(players),
                    self._clock() - started,
                )
            elif self._snapshot.is_loaded:
                logger.warning("Player directory refresh failed; keeping stale snapshot")
            else:
                logger.warning("Player directory refresh failed; directory is empty")

        nfl_state = await source.get_nfl_state()
        if nfl_state is not None:
            self._nfl_state = nfl_state
        else:
            logger.warning("NFL state refresh failed; keeping previous state")

        return self._snapshot

    @asynccontextmanager
    async def acquire(self, source: PlayerSource) -> AsyncIterator[PlayerSnapshot]:
        """Refresh as needed, then hold the current snapshot for the block."""
        snapshot = await self.refresh(source)
        yield snapshot

    @contextmanager
    def pin(
        self, snapshot: PlayerSnapshot | Mapping[str, Player], nfl_state: NFLState | None = None
    ) -> Iterator[PlayerSnapshot]:
        """
        Install a fixed snapshot and suspend network refreshes for the block.

        The previous snapshot and NFL state are restored on exit.
        """
        if not isinstance(snapshot, PlayerSnapshot):
            snapshot = PlayerSnapshot.of(snapshot, fetched_at=self._clock())

        saved = (self._snapshot, self._nfl_state, self._pinned)
        self._snapshot = snapshot
        if nfl_state is not None:
            self._nfl_state = nfl_state
        self._pinned = True
        try:
            yield snapshot
        finally:
            self._snapshot, self._nfl_state, self._pinned = saved


_player_cache: PlayerCache | None = None


def get_player_cache() -> PlayerCache:
    """Get the process-wide player cache."""
    global _player_cache
    if _player_cache is None:
        _player_cache = PlayerCache()
    return _player_cache
