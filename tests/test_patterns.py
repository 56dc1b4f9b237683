"""Property-based tests for the behavioral pattern detectors.

**Feature: trading-journal-analytics**
"""

from datetime import datetime

from hypothesis import given, settings
from hypothesis import strategies as st

from tradejournal.analytics.patterns import (
    DETECTORS,
    best_strategy,
    detect_all,
    early_entry_losses,
    fear_exits,
    fomo_losses,
    forfeited_profit,
    frustration_exits,
    recurring_losses,
    risk_reward_feedback,
    session_performance,
    setup_quality,
    win_rate_feedback,
    worst_strategy,
)
from tradejournal.config import AnalyticsConfig
from tradejournal.models import Trade


def make_trade(net_pl: float = 0.0, **overrides) -> Trade:
    """Build a trade with a stored net P&L."""
    data = {
        "symbol": "TEST",
        "direction": "Long",
        "quantity": 1,
        "entry_price": 100.0,
        "exit_price": 100.0,
        "entry_date": datetime(2025, 1, 6, 10, 0),
        "net_pl": net_pl,
    }
    data.update(overrides)
    return Trade.model_validate(data)


def trade_strategy():
    return st.builds(
        make_trade,
        net_pl=st.floats(min_value=-5000.0, max_value=5000.0, allow_nan=False, allow_infinity=False),
        symbol=st.sampled_from(["X", "Y", "Z"]),
        strategy=st.sampled_from(["", "Breakout", "Pullback", "N/A"]),
        fomo_level=st.integers(min_value=0, max_value=10),
        exit_emotion=st.sampled_from(["", "Frustrated", "Relieved"]),
        primary_exit_reason=st.sampled_from(["", "Fear-based exit", "Target hit"]),
        market_session=st.sampled_from(["", "Market Open (9:30-10:30)", "Close"]),
    )


class TestRecurringLosses:
    """
    **Feature: trading-journal-analytics, Property 8: Recurring Losses**

    *For any* trades, the detector reports the losing symbol/strategy
    combination seen most often, and only when it repeats.
    """

    def test_three_identical_losers(self):
        trades = [make_trade(-100, symbol="X", strategy="Breakout") for _ in range(3)]
        finding = recurring_losses(trades)

        assert finding.surfaced
        assert finding.kind == "warning"
        assert finding.subject == "X on Breakout"
        assert finding.evidence == 3
        assert finding.value == -300
        assert "X on Breakout (3 times)" in finding.message

    def test_single_loss_is_not_a_pattern(self):
        finding = recurring_losses([make_trade(-100, symbol="X", strategy="Breakout")])

        assert not finding.surfaced
        assert finding.kind == "info"

    def test_most_frequent_combination_wins(self):
        trades = [
            make_trade(-10, symbol="X", strategy="Breakout"),
            make_trade(-10, symbol="X", strategy="Breakout"),
            make_trade(-10, symbol="Y", strategy="Pullback"),
            make_trade(-10, symbol="Y", strategy="Pullback"),
            make_trade(-10, symbol="Y", strategy="Pullback"),
            make_trade(50, symbol="X", strategy="Breakout"),
        ]

        assert recurring_losses(trades).subject == "Y on Pullback"

    def test_trades_without_strategy_ignored(self):
        trades = [make_trade(-100, symbol="X", strategy="") for _ in range(3)]

        assert not recurring_losses(trades).surfaced


class TestBehavioralCounts:
    """
    **Feature: trading-journal-analytics, Property 9: Behavioral Thresholds**

    *For any* behavior, a pattern is only surfaced when more than
    ``pattern_min_count`` losing trades show it.
    """

    def test_fomo_needs_more_than_two(self):
        two = [make_trade(-10, fomo_level=8) for _ in range(2)]
        three = two + [make_trade(-10, fomo_level=6)]

        assert not fomo_losses(two).surfaced
        finding = fomo_losses(three)
        assert finding.surfaced
        assert finding.evidence == 3
        assert "3 losing trades with high FOMO" in finding.message

    def test_fomo_level_threshold_is_exclusive(self):
        trades = [make_trade(-10, fomo_level=5) for _ in range(5)]

        assert fomo_losses(trades).evidence == 0

    def test_winning_fomo_trades_ignored(self):
        trades = [make_trade(10, fomo_level=9) for _ in range(5)]

        assert not fomo_losses(trades).surfaced

    def test_early_entries(self):
        trades = [make_trade(-10, waited_for_setup="No, entered early") for _ in range(3)]

        assert early_entry_losses(trades).surfaced

    def test_frustrated_exits(self):
        trades = [make_trade(-10, exit_emotion="Frustrated") for _ in range(3)]
        finding = frustration_exits(trades)

        assert finding.surfaced
        assert "revenge trading" in finding.message

    def test_configurable_threshold(self):
        config = AnalyticsConfig(pattern_min_count=0)

        assert frustration_exits([make_trade(-10, exit_emotion="Frustrated")], config).surfaced

    @given(trades=st.lists(trade_strategy(), min_size=0, max_size=30))
    @settings(max_examples=100)
    def test_surfaced_only_above_threshold(self, trades: list[Trade]):
        for detector in (fomo_losses, frustration_exits, early_entry_losses):
            finding = detector(trades)
            assert finding.surfaced == (finding.evidence > 2)


class TestFearExits:
    def test_profit_left_on_table(self):
        trades = [
            make_trade(50, quantity=10, exit_price=110.0, target_price=120.0,
                       primary_exit_reason="Fear-based exit")
            for _ in range(3)
        ]
        finding = fear_exits(trades)

        assert finding.surfaced
        assert finding.value == 300
        assert "₹300.00" in finding.message

    def test_losers_leave_nothing(self):
        trades = [
            make_trade(-50, quantity=10, exit_price=110.0, target_price=120.0,
                       primary_exit_reason="Fear-based exit")
            for _ in range(3)
        ]

        assert forfeited_profit(trades) == 0

    def test_needs_more_than_two(self):
        trades = [make_trade(50, primary_exit_reason="Fear-based exit") for _ in range(2)]

        assert not fear_exits(trades).surfaced


class TestStrategyEdge:
    def test_best_skips_unspecified(self):
        trades = [
            make_trade(1000, strategy="N/A"),
            make_trade(100, strategy="Breakout"),
            make_trade(-300, strategy="Pullback"),
        ]

        finding = best_strategy(trades)
        assert finding.subject == "Breakout"
        assert finding.kind == "good"

    def test_best_without_strategies(self):
        finding = best_strategy([make_trade(100)])

        assert not finding.surfaced
        assert finding.subject == "N/A"

    def test_best_tie_keeps_first_seen(self):
        trades = [make_trade(100, strategy="A"), make_trade(100, strategy="B")]

        assert best_strategy(trades).subject == "A"

    def test_worst_only_when_losing(self):
        profitable = [make_trade(100, strategy="A"), make_trade(50, strategy="B")]
        losing = profitable + [make_trade(-200, strategy="B")]

        assert not worst_strategy(profitable).surfaced
        finding = worst_strategy(losing)
        assert finding.surfaced
        assert finding.subject == "B"
        assert finding.value == -150


class TestSetupAndSession:
    def test_setup_quality(self):
        tags = ["Trend", "Support", "Volume"]
        trades = [
            make_trade(200, technical_confluence=tags),
            make_trade(-50, technical_confluence=tags),
            make_trade(-500, technical_confluence=["Trend"]),
        ]
        finding = setup_quality(trades)

        assert finding.surfaced
        assert finding.evidence == 2
        assert "50%" in finding.message
        assert "₹150.00" in finding.message

    def test_setup_quality_without_data(self):
        assert not setup_quality([make_trade(10)]).surfaced

    def test_session_needs_three_trades(self):
        session = "Market Open (9:30-10:30)"
        two = [make_trade(100, market_session=session) for _ in range(2)]

        assert not session_performance(two).surfaced
        finding = session_performance(two + [make_trade(100, market_session=session)])
        assert finding.kind == "good"
        assert finding.value == 300

    def test_session_losing(self):
        session = "Market Open (9:30-10:30)"
        trades = [make_trade(-100, market_session=session) for _ in range(3)]

        assert session_performance(trades).kind == "warning"


class TestFeedback:
    def test_low_win_rate_warns(self):
        trades = [make_trade(10), make_trade(-10), make_trade(-10)]
        finding = win_rate_feedback(trades)

        assert finding.kind == "warning"
        assert "33%" in finding.message

    def test_solid_win_rate(self):
        trades = [make_trade(10), make_trade(10), make_trade(-10)]

        assert win_rate_feedback(trades).kind == "good"

    def test_low_risk_reward(self):
        trades = [make_trade(10, risk_reward_ratio=1.0) for _ in range(3)]
        finding = risk_reward_feedback(trades)

        assert finding.surfaced
        assert "1:1.00" in finding.message

    def test_healthy_risk_reward(self):
        trades = [make_trade(10, risk_reward_ratio=2.0) for _ in range(3)]

        assert not risk_reward_feedback(trades).surfaced


class TestDetectAll:
    @given(trades=st.lists(trade_strategy(), min_size=0, max_size=30))
    @settings(max_examples=50)
    def test_every_detector_runs(self, trades: list[Trade]):
        """*For any* trades, every detector reports exactly one finding."""
        findings = detect_all(trades)

        assert set(findings) == set(DETECTORS)
        for name, finding in findings.items():
            assert finding.detector == name
            assert finding.evidence >= 0
