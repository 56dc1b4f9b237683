"""Immutable snapshots of the journal collections.

The document store exports a trader's journal as one JSON document::

    {
      "trades": [{"id": "t1", "symbol": "RELIANCE", "direction": "Long", ...}],
      "confidence": [{"id": "c1", "date": "2025-01-06", "level": 7}],
      "notes": [{"id": "n1", "date": "2025-01-06", "content": "..."}],
      "rules": [{"id": "r1", "title": "Wait for confirmation", ...}]
    }

A JournalSnapshot is the frozen view the analytics run over. Callers build a
new snapshot after every change instead of mutating an existing one.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from tradejournal.models import ConfidenceEntry, Note, Rule, Trade
from tradejournal.models.trade import DEFAULT_COMMISSION

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot file cannot be read."""


class JournalSnapshot(BaseModel):
    """The four journal collections at one point in time.

    Trades, confidence entries and notes are ordered newest first, rules by
    creation time newest first, matching the order the store returns them in.
    """

    trades: tuple[Trade, ...] = Field(default=())
    confidence: tuple[ConfidenceEntry, ...] = Field(default=())
    notes: tuple[Note, ...] = Field(default=())
    rules: tuple[Rule, ...] = Field(default=())

    model_config = {"frozen": True}

    def note_for(self, day) -> Optional[Note]:
        """The note written for ``day``, if any."""
        for note in self.notes:
            if note.date == day:
                return note
        return None

    def confidence_for(self, day) -> Optional[ConfidenceEntry]:
        """The confidence entry recorded for ``day``, if any."""
        for entry in self.confidence:
            if entry.date == day:
                return entry
        return None


def build_snapshot(
    trades: list[dict[str, Any]],
    confidence: Optional[list[dict[str, Any]]] = None,
    notes: Optional[list[dict[str, Any]]] = None,
    rules: Optional[list[dict[str, Any]]] = None,
    commission: float = DEFAULT_COMMISSION,
) -> JournalSnapshot:
    """Validate raw store records into a snapshot.

    Args:
        trades: Trade documents. Missing P&L values are derived using
            ``commission``.
        confidence: Confidence documents. Only the first entry per date is kept.
        notes: Note documents. A later note for the same date replaces an
            earlier one.
        rules: Rule documents.
        commission: Flat commission applied when deriving net P&L.

    Returns:
        The ordered, de-duplicated snapshot.

    Raises:
        pydantic.ValidationError: If a record is malformed.
    """
    parsed_trades = [
        Trade.model_validate(item, context={"commission": commission}) for item in trades
    ]
    parsed_trades.sort(key=lambda t: t.entry_date.replace(tzinfo=None), reverse=True)

    by_date: dict = {}
    for item in confidence or []:
        entry = ConfidenceEntry.model_validate(item)
        if entry.date in by_date:
            logger.debug("Ignoring second confidence entry for %s", entry.date)
            continue
        by_date[entry.date] = entry
    parsed_confidence = sorted(by_date.values(), key=lambda e: e.date, reverse=True)

    notes_by_date: dict = {}
    for item in notes or []:
        note = Note.model_validate(item)
        notes_by_date[note.date] = note
    parsed_notes = sorted(notes_by_date.values(), key=lambda n: n.date, reverse=True)

    parsed_rules = [Rule.model_validate(item) for item in rules or []]
    parsed_rules.sort(
        key=lambda r: r.created_at.replace(tzinfo=None) if r.created_at else datetime.min,
        reverse=True,
    )

    return JournalSnapshot(
        trades=tuple(parsed_trades),
        confidence=tuple(parsed_confidence),
        notes=tuple(parsed_notes),
        rules=tuple(parsed_rules),
    )


def load_snapshot(path: Path, commission: float = DEFAULT_COMMISSION) -> JournalSnapshot:
    """Load a snapshot from an exported JSON document.

    Args:
        path: Path to the JSON export.
        commission: Flat commission applied when deriving net P&L.

    Returns:
        The loaded snapshot.

    Raises:
        SnapshotError: If the file is missing or is not a JSON object.
        pydantic.ValidationError: If a record is malformed.
    """
    if not path.exists():
        raise SnapshotError(f"Journal file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SnapshotError(f"Could not read journal file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise SnapshotError(f"Journal file {path} must contain a JSON object")

    snapshot = build_snapshot(
        trades=raw.get("trades", []),
        confidence=raw.get("confidence", []),
        notes=raw.get("notes", []),
        rules=raw.get("rules", []),
        commission=commission,
    )
    logger.info(
        "Loaded %d trades, %d confidence entries, %d notes, %d rules from %s",
        len(snapshot.trades),
        len(snapshot.confidence),
        len(snapshot.notes),
        len(snapshot.rules),
        path,
    )
    return snapshot
