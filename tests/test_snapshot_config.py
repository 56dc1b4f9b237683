"""Tests for snapshot loading and configuration.

**Feature: trading-journal-analytics**
"""

import json
import tempfile
from datetime import date, datetime
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from tradejournal.config import DEFAULT_CONFIG, AnalyticsConfig, load_config
from tradejournal.db import SnapshotError, build_snapshot, load_snapshot


def raw_trade(trade_id: str, entry_date: str, **overrides) -> dict:
    data = {
        "id": trade_id,
        "symbol": "INFY",
        "direction": "Long",
        "quantity": 10,
        "entryPrice": 1500.0,
        "exitPrice": 1510.0,
        "entryDate": entry_date,
    }
    data.update(overrides)
    return data


def sample_document() -> dict:
    return {
        "trades": [
            raw_trade("t1", "2025-01-06T09:45:00"),
            raw_trade("t2", "2025-01-08T10:15:00", netPL=-250.0, grossPL=-210.0),
            raw_trade("t3", "2025-01-07T11:00:00", strategy="Breakout"),
        ],
        "confidence": [
            {"id": "c1", "date": "2025-01-06", "level": 7},
            {"id": "c2", "date": "2025-01-07", "level": 4},
            {"id": "c3", "date": "2025-01-06", "level": 2},
        ],
        "notes": [
            {"id": "n1", "date": "2025-01-06", "content": "First draft"},
            {"id": "n2", "date": "2025-01-06", "content": "Rewritten"},
            {"id": "n3", "date": "2025-01-05", "content": "Sunday prep"},
        ],
        "rules": [
            {"id": "r1", "title": "Respect the stop", "createdAt": "2025-01-01T08:00:00"},
            {"id": "r2", "title": "No revenge trades"},
            {"id": "r3", "title": "Wait for confirmation", "createdAt": "2025-01-03T08:00:00"},
        ],
    }


class TestBuildSnapshot:
    """
    **Feature: trading-journal-analytics, Property 16: Snapshot Ordering**

    *For any* store export, the snapshot holds trades newest first, one
    confidence entry and one note per date, and rules newest first.
    """

    def test_ordering_and_dedup(self):
        snapshot = build_snapshot(**sample_document())

        assert [t.id for t in snapshot.trades] == ["t2", "t3", "t1"]
        assert [c.id for c in snapshot.confidence] == ["c2", "c1"]
        assert [n.id for n in snapshot.notes] == ["n2", "n3"]
        assert [r.id for r in snapshot.rules] == ["r3", "r1", "r2"]

    def test_lookups(self):
        snapshot = build_snapshot(**sample_document())

        assert snapshot.note_for(date(2025, 1, 6)).content == "Rewritten"
        assert snapshot.confidence_for(date(2025, 1, 6)).level == 7
        assert snapshot.note_for(date(2025, 2, 1)) is None
        assert snapshot.confidence_for(date(2025, 2, 1)) is None

    def test_commission_applied_to_derived_pl(self):
        doc = sample_document()
        snapshot = build_snapshot(trades=doc["trades"], commission=0.0)
        by_id = {t.id: t for t in snapshot.trades}

        assert by_id["t1"].net_pl == 100.0
        assert by_id["t2"].net_pl == -250.0

    def test_invalid_record(self):
        with pytest.raises(ValidationError):
            build_snapshot(trades=[raw_trade("bad", "2025-01-06T09:45:00", direction="Up")])

    def test_null_optional_fields(self):
        trade = raw_trade(
            "t1",
            "2025-01-06T09:45:00",
            followedRules=None,
            strategy=None,
            netPL=None,
            fomoLevel=None,
        )
        snapshot = build_snapshot(trades=[trade])

        assert snapshot.trades[0].followed_rules == ()
        assert snapshot.trades[0].strategy == ""
        assert snapshot.trades[0].net_pl == 60.0
        assert snapshot.trades[0].fomo_level == 0

    @given(
        days=st.lists(
            st.datetimes(min_value=datetime(2020, 1, 1), max_value=datetime(2030, 12, 31)),
            min_size=0,
            max_size=20,
        )
    )
    @settings(max_examples=50)
    def test_trades_sorted_newest_first(self, days: list[datetime]):
        trades = [raw_trade(f"t{i}", d.isoformat()) for i, d in enumerate(days)]
        snapshot = build_snapshot(trades=trades)
        dates = [t.entry_date for t in snapshot.trades]

        assert dates == sorted(dates, reverse=True)
        assert len(dates) == len(days)


class TestLoadSnapshot:
    def test_load_from_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "journal.json"
            path.write_text(json.dumps(sample_document()), encoding="utf-8")

            snapshot = load_snapshot(path)

            assert len(snapshot.trades) == 3
            assert len(snapshot.rules) == 3

    def test_missing_collections_are_empty(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "journal.json"
            path.write_text("{}", encoding="utf-8")

            snapshot = load_snapshot(path)

            assert snapshot.trades == ()
            assert snapshot.notes == ()

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SnapshotError, match="not found"):
                load_snapshot(Path(tmpdir) / "missing.json")

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "journal.json"
            path.write_text("{not json", encoding="utf-8")

            with pytest.raises(SnapshotError):
                load_snapshot(path)

    def test_non_object_document(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "journal.json"
            path.write_text("[]", encoding="utf-8")

            with pytest.raises(SnapshotError, match="JSON object"):
                load_snapshot(path)


class TestLoadConfig:
    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            assert load_config(Path(tmpdir) / "config.toml") == DEFAULT_CONFIG

    def test_defaults(self):
        config = AnalyticsConfig()

        assert config.commission == 40.0
        assert config.high_day_threshold == 1000.0
        assert config.pattern_min_count == 2
        assert config.min_trades_for_insights == 3
        assert config.currency_symbol == "₹"

    def test_overrides(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text(
                "[analytics]\n"
                "commission = 20.0\n"
                "high_day_threshold = 2500.0\n"
                'currency_symbol = "$"\n'
                "\n"
                "[journal]\n"
                'data_path = "/tmp/export.json"\n',
                encoding="utf-8",
            )

            config = load_config(path)

            assert config.commission == 20.0
            assert config.high_day_threshold == 2500.0
            assert config.currency_symbol == "$"
            assert config.data_path == Path("/tmp/export.json")
            assert config.pattern_min_count == 2

    def test_unparseable_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text("[analytics\ncommission = ", encoding="utf-8")

            assert load_config(path) == DEFAULT_CONFIG

    def test_invalid_value_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text("[analytics]\ncommission = -5.0\n", encoding="utf-8")

            assert load_config(path) == DEFAULT_CONFIG
