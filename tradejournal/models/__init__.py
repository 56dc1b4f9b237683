"""Data models for the trading journal."""

from tradejournal.models.trade import Trade, compute_risk_reward, compute_trade_pl
from tradejournal.models.confidence import ConfidenceEntry
from tradejournal.models.note import Note
from tradejournal.models.rule import Rule
from tradejournal.models.stats import (
    DayBucket,
    EquityPoint,
    PeriodBucket,
    Stats,
    StrategyBucket,
    TradeGroup,
)
from tradejournal.models.calendar import DayCell
from tradejournal.models.insight import Finding, InsightItem
from tradejournal.models.report import (
    ConfidenceSummary,
    EmotionReport,
    EmotionSummary,
    PeriodReport,
    RuleAdherence,
    StrategyReportRow,
)

__all__ = [
    "Trade",
    "compute_trade_pl",
    "compute_risk_reward",
    "ConfidenceEntry",
    "Note",
    "Rule",
    "Stats",
    "TradeGroup",
    "StrategyBucket",
    "PeriodBucket",
    "DayBucket",
    "EquityPoint",
    "DayCell",
    "Finding",
    "InsightItem",
    "PeriodReport",
    "StrategyReportRow",
    "EmotionSummary",
    "EmotionReport",
    "RuleAdherence",
    "ConfidenceSummary",
]
