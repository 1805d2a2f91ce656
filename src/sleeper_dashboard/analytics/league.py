"""
League Aggregation

League-wide overview. Values are fixed placeholders until league-level
metrics (parity, trade activity, playoff picture) are derived from rosters
and transactions.
"""

from sleeper_dashboard.models import League, LeagueAnalytics


def build_league_analytics(league: League) -> LeagueAnalytics:
    return LeagueAnalytics(
        league_id=league.league_id,
        competitiveness=75,
        parity_score=82,
        average_experience=4.2,
        most_active_traders=["User1", "User2"],
        waivers_most_active=["User3", "User4"],
    )
