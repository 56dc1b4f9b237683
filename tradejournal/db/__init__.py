"""Journal snapshot loading."""

from tradejournal.db.snapshot import JournalSnapshot, SnapshotError, build_snapshot, load_snapshot

__all__ = ["JournalSnapshot", "SnapshotError", "build_snapshot", "load_snapshot"]
