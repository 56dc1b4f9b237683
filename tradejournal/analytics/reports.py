"""Periodic, per-strategy, per-emotion and rulebook reports."""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from tradejournal.analytics.buckets import group_trades
from tradejournal.analytics.formatting import format_fixed
from tradejournal.analytics.stats import aggregate, percentage
from tradejournal.config import DEFAULT_CONFIG, AnalyticsConfig
from tradejournal.models import (
    ConfidenceEntry,
    ConfidenceSummary,
    EmotionReport,
    EmotionSummary,
    PeriodReport,
    Rule,
    RuleAdherence,
    StrategyReportRow,
    Trade,
)


def _naive(value: datetime) -> datetime:
    # Compare wall-clock times as written, without timezone conversion
    return value.replace(tzinfo=None)


def weekly(
    trades: Sequence[Trade],
    now: datetime,
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> PeriodReport:
    """Statistics for trades entered within the last week.

    Args:
        trades: All trades.
        now: Reference time; the window starts ``weekly_window_days`` before it.
        config: Supplies the window length.
    """
    since = _naive(now) - timedelta(days=config.weekly_window_days)
    window = [t for t in trades if _naive(t.entry_date) >= since]
    if not window:
        return PeriodReport(
            period="weekly",
            message=f"No trades in the last {config.weekly_window_days} days.",
        )
    return PeriodReport(period="weekly", stats=aggregate(window))


def monthly(trades: Sequence[Trade], now: datetime) -> PeriodReport:
    """Statistics for trades entered in the same calendar month as ``now``."""
    window = [
        t for t in trades
        if t.entry_date.year == now.year and t.entry_date.month == now.month
    ]
    if not window:
        return PeriodReport(period="monthly", message="No trades this month.")
    return PeriodReport(period="monthly", stats=aggregate(window))


def by_strategy(trades: Sequence[Trade]) -> list[StrategyReportRow]:
    """Statistics per strategy, rows in first-seen strategy order.

    Trades without a strategy are left out.
    """
    tagged = [t for t in trades if t.strategy]
    return [
        StrategyReportRow(strategy=group.key, stats=aggregate(group.trades))
        for group in group_trades(tagged, lambda t: t.strategy)
    ]


def by_emotion(trades: Sequence[Trade]) -> Optional[EmotionReport]:
    """Most and least profitable pre-trade emotions by average net P&L.

    Ties keep the first-encountered emotion.

    Returns:
        The report, or None when no trade records a pre-trade emotion.
    """
    tagged = [t for t in trades if t.pre_emotion]
    summaries = [
        EmotionSummary(
            emotion=group.key,
            average_pl=group.net_pl / group.count,
            trades=group.count,
        )
        for group in group_trades(tagged, lambda t: t.pre_emotion)
    ]
    if not summaries:
        return None

    most = least = summaries[0]
    for summary in summaries[1:]:
        if summary.average_pl > most.average_pl:
            most = summary
        if summary.average_pl < least.average_pl:
            least = summary
    return EmotionReport(most_profitable=most, least_profitable=least)


def rule_adherence(trades: Sequence[Trade], rules: Sequence[Rule]) -> list[RuleAdherence]:
    """How often each rule was followed, as a share of all trades.

    The denominator is every trade, not only trades that list rules. Rule
    titles are matched exactly; a repeated title is reported once.
    """
    total = len(trades)
    rows = []
    seen = set()
    for rule in rules:
        if rule.title in seen:
            continue
        seen.add(rule.title)
        followed = sum(1 for t in trades if rule.title in t.followed_rules)
        rows.append(
            RuleAdherence(
                title=rule.title,
                followed=followed,
                total=total,
                adherence=percentage(followed, total),
            )
        )
    return rows


def recent_trades(trades: Sequence[Trade], limit: int = 4) -> list[Trade]:
    """The latest ``limit`` trades by entry date, newest first."""
    return sorted(trades, key=lambda t: _naive(t.entry_date), reverse=True)[:limit]


def filter_trades(
    trades: Sequence[Trade],
    symbol: Optional[str] = None,
    strategy: Optional[str] = None,
) -> list[Trade]:
    """Trades matching the given symbol and strategy. None matches anything."""
    return [
        t for t in trades
        if (not symbol or t.symbol == symbol) and (not strategy or t.strategy == strategy)
    ]


def distinct_values(trades: Sequence[Trade], field: str) -> list[str]:
    """Distinct values of a trade attribute in first-seen order."""
    values: dict[str, None] = {}
    for trade in trades:
        values.setdefault(getattr(trade, field), None)
    return list(values)


def confidence_summary(entries: Sequence[ConfidenceEntry]) -> ConfidenceSummary:
    """Average daily confidence with the date-ordered series.

    The average is only reported from two entries onward.
    """
    series = tuple((e.date, e.level) for e in sorted(entries, key=lambda e: e.date))
    if len(entries) < 2:
        return ConfidenceSummary(days=len(entries), series=series)
    average = float(format_fixed(sum(e.level for e in entries) / len(entries), 1))
    return ConfidenceSummary(days=len(entries), average=average, series=series)
