"""
Transaction records as returned by the weekly transactions endpoint.

Type and status are kept as plain strings; Sleeper adds values over time.
"""

from enum import Enum

from pydantic import BaseModel, Field


class TransactionType(str, Enum):
    """Known transaction types."""

    TRADE = "trade"
    WAIVER = "waiver"
    FREE_AGENT = "free_agent"
    COMMISSIONER = "commissioner"


class DraftPick(BaseModel):
    """A draft pick that changed hands (traded_picks or a trade leg)."""

    season: str
    round: int
    roster_id: int
    previous_owner_id: int | None = None
    owner_id: int


class WaiverBudget(BaseModel):
    """FAAB moved between rosters as part of a trade."""

    sender: int
    receiver: int
    amount: int


class Transaction(BaseModel):
    """
    One league transaction.

    ``week`` is not part of the payload; the client tags each record with the
    week it was requested for.
    """

    transaction_id: str
    type: str
    status: str
    week: int = Field(default=0, description="Week the transaction occurred")
    leg: int | None = None
    roster_ids: list[int] = Field(default_factory=list)
    adds: dict[str, int] | None = Field(
        default=None, description="Player ID -> Roster ID receiving"
    )
    drops: dict[str, int] | None = Field(
        default=None, description="Player ID -> Roster ID dropping"
    )
    draft_picks: list[DraftPick] | None = Field(default_factory=list)
    waiver_budget: list[WaiverBudget] | None = Field(default_factory=list)
    settings: dict | None = None
    metadata: dict | None = None
    created: int | None = Field(default=None, description="Unix timestamp")
    consenter_ids: list[int] | None = Field(default_factory=list)
    status_updated: int | None = None
    creator: str | None = None

    @property
    def is_trade(self) -> bool:
        return self.type == TransactionType.TRADE.value

    @property
    def is_waiver(self) -> bool:
        return self.type == TransactionType.WAIVER.value
