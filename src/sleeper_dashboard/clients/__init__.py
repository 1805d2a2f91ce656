"""External API clients."""

from sleeper_dashboard.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient

__all__ = ["SleeperClient", "SleeperAPIError", "LeagueContext"]
