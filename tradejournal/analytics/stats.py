"""Summary statistics over trade subsets."""

from typing import Sequence

from tradejournal.analytics.formatting import format_fixed, round_half_up
from tradejournal.models import EquityPoint, Stats, Trade

# Strategy placeholder the entry form stores when none was chosen
UNSPECIFIED_STRATEGY = "N/A"


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage of ``part`` in ``whole``, 0 for an empty whole."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def aggregate(trades: Sequence[Trade]) -> Stats:
    """Calculate summary statistics for a set of trades.

    Best and worst trade are clamped at zero: a set with no winners reports
    a best trade of 0, and a set with no losers a worst trade of 0.

    Args:
        trades: Any sequence of trades, possibly empty.

    Returns:
        Stats with totals, win rate, best/worst trade and average R:R.
    """
    if not trades:
        return Stats()

    pnls = [t.net_pl or 0.0 for t in trades]
    wins = sum(1 for p in pnls if p > 0)

    rr_values = [t.risk_reward_ratio for t in trades if t.risk_reward_ratio > 0]
    avg_rr = sum(rr_values) / len(rr_values) if rr_values else 0.0

    return Stats(
        total_trades=len(trades),
        total_pl=sum(pnls),
        win_rate=percentage(wins, len(trades)),
        best_trade=max(0.0, max(pnls)),
        worst_trade=min(0.0, min(pnls)),
        avg_rr="1:" + format_fixed(avg_rr, 2),
    )


def avg_rr_value(stats: Stats) -> float:
    """Numeric part of the formatted average risk:reward."""
    return float(stats.avg_rr.split(":")[1])


def equity_curve(trades: Sequence[Trade]) -> list[EquityPoint]:
    """Cumulative net P&L in entry-date order.

    Returns an empty list for fewer than two trades, where a curve carries
    no information.
    """
    if len(trades) < 2:
        return []

    points = []
    running = 0.0
    for trade in sorted(trades, key=lambda t: t.entry_date.replace(tzinfo=None)):
        running += trade.net_pl
        points.append(
            EquityPoint(
                entry_date=trade.entry_date,
                symbol=trade.symbol,
                net_pl=trade.net_pl,
                cumulative_pl=running,
            )
        )
    return points


def strategy_pl(trades: Sequence[Trade], skip_unspecified: bool = False) -> dict[str, float]:
    """Net P&L summed per strategy, in first-seen order.

    Trades without a strategy are ignored. With ``skip_unspecified`` the
    "N/A" placeholder is ignored as well.
    """
    totals: dict[str, float] = {}
    for trade in trades:
        if not trade.strategy:
            continue
        if skip_unspecified and trade.strategy == UNSPECIFIED_STRATEGY:
            continue
        totals[trade.strategy] = totals.get(trade.strategy, 0.0) + trade.net_pl
    return totals
