"""Month calendars of daily P&L."""

import calendar as _calendar
from datetime import date
from typing import Sequence

from tradejournal.analytics.buckets import WEEKDAYS, classify_day
from tradejournal.config import DEFAULT_CONFIG, AnalyticsConfig
from tradejournal.models import DayCell, Trade

WEEKDAY_HEADERS = list(WEEKDAYS)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move a (year, month) pair by a signed number of months.

    Example:
        >>> shift_month(2025, 1, -1)
        (2024, 12)
    """
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_label(year: int, month: int) -> str:
    """Display label such as 'October 2026'."""
    return f"{_calendar.month_name[month]} {year}"


def leading_blanks(year: int, month: int) -> int:
    """Number of empty cells before day 1 in a Sunday-first week."""
    return (date(year, month, 1).weekday() + 1) % 7


def build_month(
    trades: Sequence[Trade],
    year: int,
    month: int,
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> list[DayCell]:
    """Build the cells of a Sunday-first month calendar.

    Args:
        trades: Trades to place on the calendar.
        year: Calendar year.
        month: Calendar month (1-12).
        config: Supplies the high-severity threshold.

    Returns:
        Leading blank cells, then one cell per day of the month carrying the
        day's trades, net P&L and severity tier.
    """
    cells = [DayCell() for _ in range(leading_blanks(year, month))]

    by_day: dict[int, list[Trade]] = {}
    for trade in trades:
        if trade.entry_date.year == year and trade.entry_date.month == month:
            by_day.setdefault(trade.entry_date.day, []).append(trade)

    for day in range(1, _calendar.monthrange(year, month)[1] + 1):
        members = by_day.get(day, [])
        net = sum(t.net_pl for t in members)
        cells.append(
            DayCell(
                day=day,
                tier=classify_day(net, len(members), config.high_day_threshold),
                net_pl=net,
                trades=tuple(members),
            )
        )
    return cells
