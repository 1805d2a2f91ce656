"""Business logic services."""

from sleeper_dashboard.services.analytics import AnalyticsService
from sleeper_dashboard.services.dashboard import DashboardService
from sleeper_dashboard.services.player_cache import (
    PlayerCache,
    PlayerSnapshot,
    get_player_cache,
)

__all__ = [
    # Analytics
    "AnalyticsService",
    # Dashboard
    "DashboardService",
    # Player cache
    "PlayerCache",
    "PlayerSnapshot",
    "get_player_cache",
]
