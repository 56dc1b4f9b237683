"""Behavioral pattern detectors.

Each detector is an independent pure function over the full trade sequence
and returns a single Finding. Below its sample threshold a detector returns
an unsurfaced ``info`` finding instead of an opinion.
"""

from typing import Callable, Sequence

from tradejournal.analytics.buckets import group_trades
from tradejournal.analytics.formatting import format_currency
from tradejournal.analytics.stats import aggregate, avg_rr_value, strategy_pl
from tradejournal.config import DEFAULT_CONFIG, AnalyticsConfig
from tradejournal.models import Finding, Trade

EARLY_ENTRY = "No, entered early"
FRUSTRATED_EXIT = "Frustrated"
FEAR_EXIT = "Fear-based exit"


def best_strategy(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Strategy with the highest summed net P&L."""
    totals = strategy_pl(trades, skip_unspecified=True)
    if not totals:
        return Finding(
            detector="best_strategy",
            kind="info",
            message="Not enough strategy data to find your edge yet.",
            surfaced=False,
            subject="N/A",
        )

    # max() keeps the first-seen strategy on ties
    name = max(totals, key=lambda k: totals[k])
    return Finding(
        detector="best_strategy",
        kind="good",
        message=f"Your most profitable strategy is {name}. Focus on mastering it.",
        evidence=sum(1 for t in trades if t.strategy == name),
        subject=name,
        value=totals[name],
    )


def worst_strategy(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Strategy with the lowest summed net P&L, surfaced only when negative."""
    totals = strategy_pl(trades)
    if not totals:
        return Finding(
            detector="worst_strategy",
            kind="info",
            message="Not enough strategy data to compare strategies.",
            surfaced=False,
        )

    name = min(totals, key=lambda k: totals[k])
    if totals[name] >= 0:
        return Finding(
            detector="worst_strategy",
            kind="info",
            message="None of your strategies is losing money overall.",
            surfaced=False,
            subject=name,
            value=totals[name],
        )
    return Finding(
        detector="worst_strategy",
        kind="warning",
        message=f"Your least profitable strategy is {name}. Consider avoiding or re-evaluating it.",
        evidence=sum(1 for t in trades if t.strategy == name),
        subject=name,
        value=totals[name],
    )


def recurring_losses(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Most repeated losing (symbol, strategy) combination."""
    losers = [t for t in trades if t.is_loss and t.strategy]
    groups = group_trades(losers, lambda t: f"{t.symbol} on {t.strategy}")
    repeated = [g for g in groups if g.count > config.recurring_loss_min_count]

    if not repeated:
        return Finding(
            detector="recurring_losses",
            kind="info",
            message=(
                "No significant recurring losing patterns detected. "
                "Good job diversifying your approach."
            ),
            surfaced=False,
        )

    worst = max(repeated, key=lambda g: g.count)
    return Finding(
        detector="recurring_losses",
        kind="warning",
        message=(
            f"You have recurring losses with: {worst.key} ({worst.count} times). "
            "Analyze these trades to find the issue."
        ),
        evidence=worst.count,
        subject=worst.key,
        value=worst.net_pl,
    )


def _losing_count_finding(
    trades: Sequence[Trade],
    config: AnalyticsConfig,
    detector: str,
    predicate: Callable[[Trade], bool],
    message: str,
    quiet_message: str,
) -> Finding:
    matches = [t for t in trades if t.is_loss and predicate(t)]
    count = len(matches)
    if count > config.pattern_min_count:
        return Finding(
            detector=detector,
            kind="warning",
            message=message.format(count=count),
            evidence=count,
            value=sum(t.net_pl for t in matches),
        )
    return Finding(
        detector=detector,
        kind="info",
        message=quiet_message,
        evidence=count,
        surfaced=False,
    )


def fomo_losses(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Losing trades taken with a high fear of missing out."""
    return _losing_count_finding(
        trades,
        config,
        "fomo_losses",
        lambda t: t.fomo_level > config.fomo_level_threshold,
        "You've made {count} losing trades with high FOMO. "
        "Ensure you wait for your setup and avoid chasing the market.",
        "Not enough high-FOMO losing trades to call it a pattern.",
    )


def early_entry_losses(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Losing trades entered before the setup confirmed."""
    return _losing_count_finding(
        trades,
        config,
        "early_entry_losses",
        lambda t: t.waited_for_setup == EARLY_ENTRY,
        "You have {count} losing trades where you entered early. "
        "Practice patience and wait for confirmation.",
        "Not enough early-entry losing trades to call it a pattern.",
    )


def frustration_exits(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Losing trades exited while frustrated."""
    return _losing_count_finding(
        trades,
        config,
        "frustration_exits",
        lambda t: t.exit_emotion == FRUSTRATED_EXIT,
        "You've exited {count} losing trades feeling frustrated. "
        "This can lead to revenge trading. Take a break after a loss.",
        "Not enough frustrated exits to call it a pattern.",
    )


def forfeited_profit(trades: Sequence[Trade]) -> float:
    """Profit left before target on winning trades: (target - exit) * qty."""
    total = 0.0
    for trade in trades:
        if trade.is_win and trade.target_price and trade.target_price > trade.exit_price:
            total += (trade.target_price - trade.exit_price) * trade.quantity
    return total


def fear_exits(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Trades closed out of fear and the profit they left on the table."""
    exits = [t for t in trades if t.primary_exit_reason == FEAR_EXIT]
    count = len(exits)
    if count <= config.pattern_min_count:
        return Finding(
            detector="fear_exits",
            kind="info",
            message="Not enough fear-based exits to call it a pattern.",
            evidence=count,
            surfaced=False,
        )

    left = forfeited_profit(exits)
    return Finding(
        detector="fear_exits",
        kind="warning",
        message=(
            f"You've exited {count} trades due to fear, potentially leaving "
            f"{format_currency(left, config.currency_symbol)} on the table. Trust your plan."
        ),
        evidence=count,
        value=left,
    )


def setup_quality(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Performance of trades with several technical confluence factors."""
    quality = [t for t in trades if len(t.technical_confluence) >= config.setup_confluence_min]
    if not quality:
        return Finding(
            detector="setup_quality",
            kind="info",
            message="Not enough data on setup quality.",
            surfaced=False,
        )

    stats = aggregate(quality)
    return Finding(
        detector="setup_quality",
        kind="info",
        message=(
            f"For trades with {config.setup_confluence_min}+ confluence factors, your win rate is "
            f"{stats.win_rate}% with a P&L of "
            f"{format_currency(stats.total_pl, config.currency_symbol)}. "
            "Prioritize these high-quality setups."
        ),
        evidence=stats.total_trades,
        value=stats.total_pl,
    )


def session_performance(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Whether the configured market session is favorable."""
    session = [t for t in trades if t.market_session == config.session_name]
    if len(session) < config.session_min_trades:
        return Finding(
            detector="session_performance",
            kind="info",
            message="Not enough trades during market open to analyze.",
            evidence=len(session),
            surfaced=False,
            subject=config.session_name,
        )

    stats = aggregate(session)
    amount = format_currency(stats.total_pl, config.currency_symbol)
    if stats.total_pl > 0:
        return Finding(
            detector="session_performance",
            kind="good",
            message=(
                f"You perform well during the market open, with a P&L of {amount}. "
                "This might be your golden hour."
            ),
            evidence=stats.total_trades,
            subject=config.session_name,
            value=stats.total_pl,
        )
    return Finding(
        detector="session_performance",
        kind="warning",
        message=(
            f"You seem to struggle during the market open, with a P&L of {amount}. "
            "This period is volatile; consider trading smaller or waiting for the market to settle."
        ),
        evidence=stats.total_trades,
        subject=config.session_name,
        value=stats.total_pl,
    )


def win_rate_feedback(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Judge the overall win rate."""
    stats = aggregate(trades)
    if stats.win_rate < config.win_rate_warning:
        return Finding(
            detector="win_rate_feedback",
            kind="warning",
            message=(
                f"Your win rate is {stats.win_rate}%. "
                "Consider reviewing your entry criteria and risk management."
            ),
            evidence=stats.total_trades,
            value=stats.win_rate,
        )
    return Finding(
        detector="win_rate_feedback",
        kind="good",
        message=f"Your win rate of {stats.win_rate}% is solid. Keep refining what works!",
        evidence=stats.total_trades,
        value=stats.win_rate,
    )


def risk_reward_feedback(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> Finding:
    """Warn when the average planned risk:reward is low."""
    stats = aggregate(trades)
    ratio = avg_rr_value(stats)
    if ratio < config.avg_rr_warning:
        return Finding(
            detector="risk_reward_feedback",
            kind="warning",
            message=(
                f"Your average Risk:Reward is low ({stats.avg_rr}). "
                "Aim for setups with a higher potential reward."
            ),
            evidence=stats.total_trades,
            value=ratio,
        )
    return Finding(
        detector="risk_reward_feedback",
        kind="info",
        message=f"Your average Risk:Reward of {stats.avg_rr} is healthy.",
        evidence=stats.total_trades,
        surfaced=False,
        value=ratio,
    )


DETECTORS: dict[str, Callable[[Sequence[Trade], AnalyticsConfig], Finding]] = {
    "win_rate_feedback": win_rate_feedback,
    "risk_reward_feedback": risk_reward_feedback,
    "best_strategy": best_strategy,
    "worst_strategy": worst_strategy,
    "recurring_losses": recurring_losses,
    "fomo_losses": fomo_losses,
    "early_entry_losses": early_entry_losses,
    "frustration_exits": frustration_exits,
    "fear_exits": fear_exits,
    "setup_quality": setup_quality,
    "session_performance": session_performance,
}


def detect_all(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> dict[str, Finding]:
    """Run every detector over the same trades."""
    return {name: detector(trades, config) for name, detector in DETECTORS.items()}
