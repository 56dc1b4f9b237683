"""Compose detector findings into presentation-ready insight items.

No new numbers are computed here: the composer only picks findings, keeps
them in the fixed order the dashboard shows them, and renders each into a
(tone, title, body) item.
"""

from typing import Sequence

from tradejournal.analytics.formatting import format_currency
from tradejournal.analytics.patterns import detect_all
from tradejournal.analytics.reports import confidence_summary
from tradejournal.analytics.stats import aggregate
from tradejournal.config import DEFAULT_CONFIG, AnalyticsConfig
from tradejournal.models import ConfidenceEntry, Finding, InsightItem, Trade

SECTION_TITLES = {
    "headline": "Smart Insight",
    "feedback": "Feedback",
    "edge": "Trading Edge",
    "repeat": "Repeat Losing Trades",
    "entries": "Entry Analysis",
    "emotional": "Emotional Bias",
    "setup": "Setup Quality",
    "time": "Time-Based Performance",
    "confidence": "Confidence",
}


def _item(section: str, finding: Finding) -> InsightItem:
    return InsightItem(
        section=section,
        tone=finding.kind,
        title=SECTION_TITLES[section],
        body=finding.message,
    )


def _first_surfaced(findings: Sequence[Finding]) -> Finding | None:
    for finding in findings:
        if finding.surfaced:
            return finding
    return None


def headline(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> InsightItem:
    """One-line verdict on the overall net P&L."""
    stats = aggregate(trades)
    amount = format_currency(stats.total_pl, config.currency_symbol)
    if stats.total_pl >= 0:
        return InsightItem(
            section="headline",
            tone="good",
            title=SECTION_TITLES["headline"],
            body=f"Great job! You're net positive {amount} with a {stats.win_rate}% win rate.",
        )
    return InsightItem(
        section="headline",
        tone="warning",
        title=SECTION_TITLES["headline"],
        body=f"You're net negative {amount}. Focus on improving risk management and strategy selection.",
    )


def not_enough_trades(config: AnalyticsConfig = DEFAULT_CONFIG) -> InsightItem:
    return InsightItem(
        section="headline",
        tone="info",
        title="Not Enough Data",
        body=(
            f"Add at least {config.min_trades_for_insights} trades to start "
            "receiving suggestions and insights."
        ),
    )


def compose(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> list[InsightItem]:
    """Build the full list of insight items for the insights panel.

    Args:
        trades: All trades.
        config: Thresholds and currency used by the detectors.

    Returns:
        Items in the fixed section order, or a single "not enough data" item
        when there are fewer than ``min_trades_for_insights`` trades.
    """
    if len(trades) < config.min_trades_for_insights:
        return [not_enough_trades(config)]

    findings = detect_all(trades, config)
    items = [headline(trades, config)]

    items.append(_item("feedback", findings["win_rate_feedback"]))
    if findings["risk_reward_feedback"].surfaced:
        items.append(_item("feedback", findings["risk_reward_feedback"]))

    items.append(_item("edge", findings["best_strategy"]))
    if findings["worst_strategy"].surfaced:
        items.append(_item("edge", findings["worst_strategy"]))

    items.append(_item("repeat", findings["recurring_losses"]))

    entry = _first_surfaced([findings["fomo_losses"], findings["early_entry_losses"]])
    if entry is not None:
        items.append(_item("entries", entry))
    else:
        items.append(
            InsightItem(
                section="entries",
                tone="good",
                title=SECTION_TITLES["entries"],
                body="Your entries appear disciplined. Keep waiting for your A+ setups.",
            )
        )

    exit_ = _first_surfaced([findings["frustration_exits"], findings["fear_exits"]])
    if exit_ is not None:
        items.append(_item("emotional", exit_))
    else:
        items.append(
            InsightItem(
                section="emotional",
                tone="info",
                title=SECTION_TITLES["emotional"],
                body=(
                    "Your emotional responses to trades seem balanced. "
                    "Keep maintaining a neutral mindset."
                ),
            )
        )

    items.append(_item("setup", findings["setup_quality"]))
    items.append(_item("time", findings["session_performance"]))
    return items


def compose_feedback(trades: Sequence[Trade], config: AnalyticsConfig = DEFAULT_CONFIG) -> list[InsightItem]:
    """The short feedback list shown on the dashboard."""
    if len(trades) < config.min_trades_for_insights:
        return [
            InsightItem(
                section="feedback",
                tone="info",
                title="Not Enough Data",
                body="Add more trades for feedback.",
            )
        ]
    return [item for item in compose(trades, config) if item.section == "feedback"]


def compose_confidence(entries: Sequence[ConfidenceEntry]) -> InsightItem:
    """Summary item for the daily confidence log."""
    summary = confidence_summary(entries)
    if summary.average is None:
        return InsightItem(
            section="confidence",
            tone="info",
            title="Not Enough Data",
            body="Record daily confidence to see your trend.",
        )
    return InsightItem(
        section="confidence",
        tone="info",
        title="Avg Confidence",
        body=f"{summary.average:.1f}/10 over {summary.days} days",
    )
