"""Bucket classification of trades for distributional analysis.

Every classifier partitions its input: each trade lands in exactly one
bucket. String keys (strategy, session, emotion) are matched exactly, with
no case or whitespace normalization.
"""

import calendar as _calendar
from typing import Callable, Sequence

from tradejournal.analytics.stats import percentage
from tradejournal.models import (
    DayBucket,
    PeriodBucket,
    StrategyBucket,
    Trade,
    TradeGroup,
)
from tradejournal.models.stats import DayTier

RR_BANDS = ["<1:1", "1:1-1:2", "1:2-1:3", ">1:3"]

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

DEFAULT_HIGH_DAY_THRESHOLD = 1000.0


def group_trades(trades: Sequence[Trade], key: Callable[[Trade], str]) -> list[TradeGroup]:
    """Group trades by a string key, keeping first-seen group order.

    Args:
        trades: Trades to group.
        key: Function returning the grouping key of a trade.

    Returns:
        One TradeGroup per distinct key, each holding its trades in input order.
    """
    members: dict[str, list[Trade]] = {}
    for trade in trades:
        members.setdefault(key(trade), []).append(trade)
    return [TradeGroup(key=k, trades=tuple(v)) for k, v in members.items()]


def risk_reward_band(ratio: float) -> str:
    """Band label for a risk:reward ratio. Unset (0) falls in the lowest band."""
    if ratio < 1:
        return RR_BANDS[0]
    if ratio < 2:
        return RR_BANDS[1]
    if ratio < 3:
        return RR_BANDS[2]
    return RR_BANDS[3]


def by_risk_reward_band(trades: Sequence[Trade]) -> dict[str, int]:
    """Count trades per risk:reward band. All four bands are always present."""
    counts = {band: 0 for band in RR_BANDS}
    for trade in trades:
        counts[risk_reward_band(trade.risk_reward_ratio or 0)] += 1
    return counts


def by_strategy(trades: Sequence[Trade]) -> dict[str, StrategyBucket]:
    """Trade count, wins and win rate per strategy, in first-seen order."""
    result = {}
    for group in group_trades(trades, lambda t: t.strategy):
        wins = sum(1 for t in group.trades if t.is_win)
        result[group.key] = StrategyBucket(
            count=group.count,
            wins=wins,
            win_rate=percentage(wins, group.count),
        )
    return result


def _period_bucket(members: Sequence[Trade]) -> PeriodBucket:
    wins = sum(1 for t in members if t.is_win)
    return PeriodBucket(
        count=len(members),
        wins=wins,
        net_pl=sum(t.net_pl for t in members),
        win_rate=percentage(wins, len(members)),
    )


def weekday_name(trade: Trade) -> str:
    """Weekday of the trade's entry date as written, without timezone conversion."""
    # date.weekday() is Monday-based, the calendar is Sunday-based
    return WEEKDAYS[(trade.entry_date.date().weekday() + 1) % 7]


def by_day_of_week(trades: Sequence[Trade]) -> dict[str, PeriodBucket]:
    """Per-weekday statistics, Sunday first. Weekdays without trades are omitted."""
    members: dict[str, list[Trade]] = {day: [] for day in WEEKDAYS}
    for trade in trades:
        members[weekday_name(trade)].append(trade)
    return {day: _period_bucket(group) for day, group in members.items() if group}


def by_market_session(trades: Sequence[Trade]) -> dict[str, PeriodBucket]:
    """Per-session statistics. Trades without a session group under ""."""
    return {
        group.key: _period_bucket(group.trades)
        for group in group_trades(trades, lambda t: t.market_session)
    }


def by_emotion(trades: Sequence[Trade]) -> dict[str, PeriodBucket]:
    """Per pre-trade emotion statistics. Trades without one group under ""."""
    return {
        group.key: _period_bucket(group.trades)
        for group in group_trades(trades, lambda t: t.pre_emotion)
    }


def classify_day(
    net_pl: float,
    count: int,
    threshold: float = DEFAULT_HIGH_DAY_THRESHOLD,
) -> DayTier:
    """Severity tier of a calendar day.

    Args:
        net_pl: Net P&L of the day's trades.
        count: Number of trades entered that day.
        threshold: Magnitude beyond which a day is high severity.

    Returns:
        "no-trades" for an empty day, "profit-high" above the threshold,
        "profit-low" for a positive or flat day up to the threshold,
        "loss-high" at or below minus the threshold, else "loss-low".
    """
    if count == 0:
        return "no-trades"
    if net_pl > threshold:
        return "profit-high"
    if net_pl > 0:
        return "profit-low"
    if net_pl <= -threshold:
        return "loss-high"
    if net_pl < 0:
        return "loss-low"
    return "profit-low"


def by_calendar_day(
    trades: Sequence[Trade],
    year: int,
    month: int,
    threshold: float = DEFAULT_HIGH_DAY_THRESHOLD,
) -> dict[int, DayBucket]:
    """Count, net P&L and tier for every day of a month.

    Days without trades are present with tier "no-trades".
    """
    days_in_month = _calendar.monthrange(year, month)[1]
    members: dict[int, list[Trade]] = {day: [] for day in range(1, days_in_month + 1)}
    for trade in trades:
        if trade.entry_date.year == year and trade.entry_date.month == month:
            members[trade.entry_date.day].append(trade)

    result = {}
    for day, group in members.items():
        net = sum(t.net_pl for t in group)
        result[day] = DayBucket(
            count=len(group),
            net_pl=net,
            tier=classify_day(net, len(group), threshold),
        )
    return result
