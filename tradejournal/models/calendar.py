"""Calendar cell model."""

from typing import Optional

from pydantic import BaseModel, Field

from tradejournal.models.stats import DayTier
from tradejournal.models.trade import Trade


class DayCell(BaseModel):
    """One cell of a month calendar. Leading blank cells have no day."""

    day: Optional[int] = Field(default=None, ge=1, le=31, description="Day of month")
    tier: DayTier = Field(default="no-trades", description="Severity tier")
    net_pl: float = Field(default=0.0, description="Net P&L of the day")
    trades: tuple[Trade, ...] = Field(default=(), description="Trades entered that day")

    model_config = {"frozen": True}

    @property
    def is_blank(self) -> bool:
        return self.day is None
