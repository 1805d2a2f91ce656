"""
Heuristic lookup tables for the scoring engine.

The tables are plain configuration: they are passed into every scoring
function so a season's numbers can be swapped by loading a JSON file
instead of editing code.
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sleeper_dashboard.config import get_settings

# Team -> bye week, 2024 schedule.
BYE_WEEKS_2024: dict[str, int] = {
    "DET": 5, "LAC": 5, "PHI": 5, "TEN": 5,
    "MIA": 6, "KC": 6, "LAR": 6, "MIN": 6,
    "CHI": 7, "DAL": 7,
    "SF": 9, "PIT": 9,
    "LV": 10, "SEA": 10, "CLE": 10, "GB": 10,
    "CAR": 11, "NYG": 11, "ARI": 11, "TB": 11,
    "ATL": 12, "BUF": 12, "CIN": 12, "JAX": 12, "NO": 12, "NYJ": 12,
    "HOU": 14, "IND": 14, "NE": 14, "WAS": 14, "BAL": 14, "DEN": 14,
}


def _read_only(value: Any) -> Any:
    """Wrap mappings in read-only proxies and turn lists into tuples, recursively."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _read_only(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_read_only(item) for item in value)
    return value


class ScoringTables(BaseModel):
    """
    Immutable per-season heuristic configuration.

    Attributes cannot be reassigned and the lookup maps are read-only
    proxies, so a shared instance can be passed around safely.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    base_points: Mapping[str, int] = Field(
        default_factory=lambda: {"QB": 280, "RB": 180, "WR": 160, "TE": 120, "K": 100, "DEF": 90},
        description="Season-long baseline fantasy points by position",
    )
    default_base_points: int = 100

    peak_ages: Mapping[str, int] = Field(
        default_factory=lambda: {"QB": 28, "RB": 26, "WR": 27, "TE": 28, "K": 30, "DEF": 25},
    )
    default_peak_age: int = 27

    position_consistency: Mapping[str, float] = Field(
        default_factory=lambda: {
            "QB": 0.85, "RB": 0.65, "WR": 0.70, "TE": 0.75, "K": 0.60, "DEF": 0.55,
        },
    )
    default_consistency: float = 0.65

    bye_weeks: Mapping[str, int] = Field(default_factory=lambda: dict(BYE_WEEKS_2024))

    required_depth: Mapping[str, int] = Field(
        default_factory=lambda: {"QB": 2, "RB": 4, "WR": 5, "TE": 2, "K": 1, "DEF": 1},
        description="Roster slots a deep roster fills at each position",
    )

    trade_target_phrases: Mapping[str, tuple[str, ...]] = Field(
        default_factory=lambda: {
            "RB depth": ["Mid-tier RB2", "Handcuff RBs"],
            "WR depth": ["WR2/3 with upside", "Target share risers"],
            "TE depth": ["Streaming TE options", "TE with red zone usage"],
            "QB depth": ["Streaming QB options", "QB with rushing upside"],
        },
    )

    # Placeholders until real game data is wired in
    recent_performance: tuple[float, ...] = (15.2, 8.7, 22.1, 12.4, 18.9)
    strength_of_schedule: float = 0.5

    season_games: int = 17
    default_age: int = 25
    default_rank: int = 999

    @field_validator(
        "base_points",
        "peak_ages",
        "position_consistency",
        "bye_weeks",
        "required_depth",
        "trade_target_phrases",
    )
    @classmethod
    def _freeze_tables(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _read_only(value)


DEFAULT_TABLES = ScoringTables()


def load_tables(path: str | Path | None) -> ScoringTables:
    """
    Load scoring tables from a JSON file.

    Keys missing from the file keep their built-in defaults. Returns
    ``DEFAULT_TABLES`` when no path is given.
    """
    if path is None:
        return DEFAULT_TABLES
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return ScoringTables.model_validate(data)


@lru_cache
def get_scoring_tables() -> ScoringTables:
    """Get the tables configured by ``SLEEPER_HEURISTICS_FILE`` (cached)."""
    return load_tables(get_settings().heuristics_file)
