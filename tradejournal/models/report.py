"""Report result models."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from tradejournal.models.stats import Stats


class PeriodReport(BaseModel):
    """Statistics for a time window, or a message when it has no trades."""

    period: str = Field(..., description="'weekly' or 'monthly'")
    stats: Optional[Stats] = Field(default=None, description="None when the window is empty")
    message: str = Field(default="", description="Empty-window message")

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return self.stats is None


class StrategyReportRow(BaseModel):
    """Statistics for one strategy."""

    strategy: str
    stats: Stats

    model_config = {"frozen": True}


class EmotionSummary(BaseModel):
    """Average net P&L per trade for one pre-trade emotion."""

    emotion: str
    average_pl: float
    trades: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class EmotionReport(BaseModel):
    """Most and least profitable pre-trade emotions."""

    most_profitable: EmotionSummary
    least_profitable: EmotionSummary

    model_config = {"frozen": True}


class RuleAdherence(BaseModel):
    """How often a rule was followed across all trades."""

    title: str
    followed: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    adherence: int = Field(default=0, ge=0, le=100, description="Percentage of all trades")

    model_config = {"frozen": True}


class ConfidenceSummary(BaseModel):
    """Average daily confidence and the date-ordered series."""

    days: int = Field(default=0, ge=0)
    average: Optional[float] = Field(default=None, description="None below two entries")
    series: tuple[tuple[date, int], ...] = Field(default=())

    model_config = {"frozen": True}
