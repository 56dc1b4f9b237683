"""Trading journal analytics.

Pure functions over immutable snapshots of trades, confidence entries,
notes and rules. Nothing here performs I/O or mutates its inputs.
"""

from tradejournal.analytics.stats import aggregate, avg_rr_value, equity_curve, strategy_pl
from tradejournal.analytics.buckets import (
    by_calendar_day,
    by_day_of_week,
    by_market_session,
    by_risk_reward_band,
    classify_day,
    group_trades,
)
from tradejournal.analytics.buckets import by_emotion as emotion_buckets
from tradejournal.analytics.buckets import by_strategy as strategy_buckets
from tradejournal.analytics.patterns import detect_all
from tradejournal.analytics.calendar import build_month, month_label, shift_month
from tradejournal.analytics.reports import (
    by_emotion,
    by_strategy,
    confidence_summary,
    monthly,
    recent_trades,
    rule_adherence,
    weekly,
)
from tradejournal.analytics.insights import compose, compose_confidence, compose_feedback
from tradejournal.analytics.export import export_csv

__all__ = [
    "aggregate",
    "avg_rr_value",
    "equity_curve",
    "strategy_pl",
    "by_risk_reward_band",
    "strategy_buckets",
    "by_day_of_week",
    "by_calendar_day",
    "by_market_session",
    "emotion_buckets",
    "classify_day",
    "group_trades",
    "detect_all",
    "build_month",
    "month_label",
    "shift_month",
    "weekly",
    "monthly",
    "by_strategy",
    "by_emotion",
    "rule_adherence",
    "recent_trades",
    "confidence_summary",
    "compose",
    "compose_feedback",
    "compose_confidence",
    "export_csv",
]
