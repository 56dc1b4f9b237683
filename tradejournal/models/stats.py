"""Statistics and bucket result models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from tradejournal.models.trade import Trade

DayTier = Literal["profit-high", "profit-low", "loss-low", "loss-high", "no-trades"]


class Stats(BaseModel):
    """Summary statistics over a set of trades."""

    total_trades: int = Field(default=0, ge=0, description="Number of trades")
    total_pl: float = Field(default=0.0, description="Sum of net P&L")
    win_rate: int = Field(default=0, ge=0, le=100, description="Win rate percentage")
    best_trade: float = Field(default=0.0, ge=0, description="Best net P&L, clamped at 0")
    worst_trade: float = Field(default=0.0, le=0, description="Worst net P&L, clamped at 0")
    avg_rr: str = Field(default="1:0.00", description="Average risk:reward, e.g. '1:2.35'")

    model_config = {"frozen": True}


class TradeGroup(BaseModel):
    """Trades sharing the same grouping key, in input order."""

    key: str = Field(..., description="Exact grouping key")
    trades: tuple[Trade, ...] = Field(default=())

    model_config = {"frozen": True}

    @property
    def count(self) -> int:
        return len(self.trades)

    @property
    def net_pl(self) -> float:
        return sum(t.net_pl for t in self.trades)


class StrategyBucket(BaseModel):
    """Trade and win counts for one strategy."""

    count: int = Field(default=0, ge=0)
    wins: int = Field(default=0, ge=0)
    win_rate: int = Field(default=0, ge=0, le=100)

    model_config = {"frozen": True}


class PeriodBucket(BaseModel):
    """Trade count, wins and net P&L for a weekday, session or emotion."""

    count: int = Field(default=0, ge=0)
    wins: int = Field(default=0, ge=0)
    net_pl: float = Field(default=0.0)
    win_rate: int = Field(default=0, ge=0, le=100)

    model_config = {"frozen": True}


class DayBucket(BaseModel):
    """Trade count, net P&L and severity tier for one calendar day."""

    count: int = Field(default=0, ge=0)
    net_pl: float = Field(default=0.0)
    tier: DayTier = Field(default="no-trades")

    model_config = {"frozen": True}


class EquityPoint(BaseModel):
    """One point of the cumulative P&L curve."""

    entry_date: datetime
    symbol: str
    net_pl: float
    cumulative_pl: float

    model_config = {"frozen": True}
