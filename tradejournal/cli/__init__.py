"""CLI commands for the trading journal.

This package provides the command-line interface, rendering the analytics
engine's statistics, reports, calendars and insights in the terminal.
"""

from tradejournal.cli.main import cli, main

__all__ = ["cli", "main"]
