"""Property-based tests for the journal data models.

**Feature: trading-journal-analytics**
"""

from datetime import date, datetime

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from tradejournal.models import ConfidenceEntry, Note, Rule, Trade, compute_risk_reward, compute_trade_pl


def raw_trade(**overrides) -> dict:
    """Build a store document for a trade, without derived P&L values."""
    data = {
        "id": "t1",
        "symbol": "RELIANCE",
        "direction": "Long",
        "quantity": 10,
        "entryPrice": 100.0,
        "exitPrice": 110.0,
        "entryDate": "2025-01-06T09:45:00",
    }
    data.update(overrides)
    return data


prices = st.floats(min_value=1.0, max_value=10000.0, allow_nan=False, allow_infinity=False)


class TestTradePLDerivation:
    """
    **Feature: trading-journal-analytics, Property 1: Net P&L Derivation**

    *For any* closed position, net P&L equals gross P&L minus the flat
    commission, and gross P&L follows the direction of the trade.
    """

    @given(
        direction=st.sampled_from(["Long", "Short"]),
        quantity=st.integers(min_value=1, max_value=10000),
        entry=prices,
        exit_=prices,
    )
    @settings(max_examples=100)
    def test_net_is_gross_minus_commission(self, direction, quantity, entry, exit_):
        """
        *For any* trade document without stored P&L, the derived net P&L
        should equal gross P&L minus the default commission of 40.
        """
        trade = Trade.model_validate(
            raw_trade(direction=direction, quantity=quantity, entryPrice=entry, exitPrice=exit_)
        )

        assert abs(trade.net_pl - (trade.gross_pl - 40.0)) < 1e-6
        expected_gross = (exit_ - entry) * quantity if direction == "Long" else (entry - exit_) * quantity
        assert abs(trade.gross_pl - expected_gross) < 1e-6

    def test_long_trade(self):
        """A long trade profits when the exit is above the entry."""
        trade = Trade.model_validate(raw_trade())

        assert trade.gross_pl == 100.0
        assert trade.net_pl == 60.0
        assert trade.is_win

    def test_short_trade(self):
        """A short trade profits when the exit is below the entry."""
        trade = Trade.model_validate(
            raw_trade(direction="Short", quantity=5, entryPrice=100.0, exitPrice=90.0)
        )

        assert trade.gross_pl == 50.0
        assert trade.net_pl == 10.0

    def test_commission_from_context(self):
        """The commission can be overridden when validating."""
        trade = Trade.model_validate(raw_trade(), context={"commission": 0.0})

        assert trade.net_pl == trade.gross_pl == 100.0

    def test_stored_values_are_kept(self):
        """Records that already carry P&L keep the stored values."""
        trade = Trade.model_validate(raw_trade(grossPL=90.0, netPL=50.0))

        assert trade.gross_pl == 90.0
        assert trade.net_pl == 50.0

    def test_compute_trade_pl(self):
        assert compute_trade_pl("Long", 2, 100.0, 105.0) == (10.0, -30.0)
        assert compute_trade_pl("Short", 2, 100.0, 105.0, commission=0.0) == (-10.0, -10.0)


class TestRiskReward:
    """
    **Feature: trading-journal-analytics, Property 2: Risk:Reward Derivation**

    *For any* trade, the risk:reward ratio is the reward distance divided by
    the risk distance, and 0 when either leg is missing.
    """

    def test_ratio_from_stop_and_target(self):
        trade = Trade.model_validate(raw_trade(stopLoss=95.0, targetPrice=110.0))

        assert trade.risk_reward_ratio == 2.0

    def test_zero_stop_is_unset(self):
        """A stop of 0 is stored by the entry form when the field was left empty."""
        trade = Trade.model_validate(raw_trade(stopLoss=0, targetPrice=110.0))

        assert trade.stop_loss is None
        assert trade.risk_reward_ratio == 0.0

    def test_missing_target(self):
        trade = Trade.model_validate(raw_trade(stopLoss=95.0))

        assert trade.target_price is None
        assert trade.risk_reward_ratio == 0.0

    def test_stop_at_entry(self):
        """Zero risk distance gives a ratio of 0 rather than dividing by zero."""
        assert compute_risk_reward(100.0, 100.0, 120.0) == 0.0

    @given(entry=prices, stop=prices, target=prices)
    @settings(max_examples=100)
    def test_ratio_never_negative(self, entry, stop, target):
        """*For any* prices, the ratio should be non-negative."""
        assert compute_risk_reward(entry, stop, target) >= 0


class TestTradeFields:
    """Field aliases, defaults and immutability of trades."""

    def test_camel_case_and_snake_case_names(self):
        camel = Trade.model_validate(raw_trade(preEmotion="Calm", followedRules=["Wait"]))
        snake = Trade.model_validate(raw_trade(pre_emotion="Calm", followed_rules=["Wait"]))

        assert camel.pre_emotion == snake.pre_emotion == "Calm"
        assert camel.followed_rules == snake.followed_rules == ("Wait",)

    def test_dump_uses_store_names(self):
        dumped = Trade.model_validate(raw_trade()).model_dump(by_alias=True)

        assert "netPL" in dumped
        assert "grossPL" in dumped
        assert "entryPrice" in dumped
        assert "riskRewardRatio" in dumped

    def test_tag_defaults(self):
        trade = Trade.model_validate(raw_trade())

        assert trade.strategy == ""
        assert trade.fomo_level == 0
        assert trade.technical_confluence == ()
        assert trade.exit_date is None

    def test_trade_is_frozen(self):
        trade = Trade.model_validate(raw_trade())

        with pytest.raises(ValidationError):
            trade.net_pl = 0.0

    def test_invalid_direction_rejected(self):
        with pytest.raises(ValidationError):
            Trade.model_validate(raw_trade(direction="Sideways"))

    def test_non_positive_quantity_rejected(self):
        with pytest.raises(ValidationError):
            Trade.model_validate(raw_trade(quantity=0))


class TestNullFields:
    """Optional fields stored as null fall back to their defaults."""

    def test_null_tags_use_defaults(self):
        trade = Trade.model_validate(raw_trade(
            followedRules=None,
            technical_confluence=None,
            strategy=None,
            confidenceLevel=None,
            exitDate=None,
        ))

        assert trade.followed_rules == ()
        assert trade.technical_confluence == ()
        assert trade.strategy == ""
        assert trade.confidence_level == 0
        assert trade.exit_date is None

    def test_null_derived_values_are_recomputed(self):
        trade = Trade.model_validate(raw_trade(
            grossPL=None, netPL=None, riskRewardRatio=None, stopLoss=95.0, targetPrice=110.0,
        ))

        assert trade.gross_pl == 100.0
        assert trade.net_pl == 60.0
        assert trade.risk_reward_ratio == 2.0

    def test_null_required_field_rejected(self):
        with pytest.raises(ValidationError):
            Trade.model_validate(raw_trade(symbol=None))


class TestJournalRecords:
    """Confidence entries, notes and rules."""

    @given(level=st.integers(min_value=1, max_value=10))
    @settings(max_examples=20)
    def test_confidence_level_in_range(self, level: int):
        entry = ConfidenceEntry(date=date(2025, 1, 6), level=level)

        assert entry.level == level

    @pytest.mark.parametrize("level", [0, 11])
    def test_confidence_level_out_of_range(self, level: int):
        with pytest.raises(ValidationError):
            ConfidenceEntry(date=date(2025, 1, 6), level=level)

    def test_note_preview(self):
        short = Note(date=date(2025, 1, 6), content="Stayed patient.")
        long = Note(date=date(2025, 1, 6), content="x" * 150)

        assert short.preview() == "Stayed patient."
        assert long.preview() == "x" * 100 + "..."

    def test_rule_from_store_document(self):
        rule = Rule.model_validate(
            {"id": "r1", "title": "Wait for confirmation", "createdAt": "2025-01-02T08:00:00"}
        )

        assert rule.title == "Wait for confirmation"
        assert rule.created_at == datetime(2025, 1, 2, 8, 0)

    def test_rule_requires_title(self):
        with pytest.raises(ValidationError):
            Rule(title="")
