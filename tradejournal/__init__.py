"""TradeJournal - analytics for a personal trading journal.

Computes summary statistics, bucket distributions, P&L calendars, periodic
reports and behavioral insights from an exported journal snapshot.
"""

__version__ = "0.1.0"
