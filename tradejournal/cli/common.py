"""Helpers shared by the CLI command modules."""

from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from tradejournal.analytics.formatting import format_currency
from tradejournal.config import AnalyticsConfig, load_config
from tradejournal.db.snapshot import JournalSnapshot, SnapshotError, load_snapshot

console = Console()

TONE_STYLES = {
    "good": "green",
    "warning": "yellow",
    "info": "cyan",
}

TIER_STYLES = {
    "profit-high": "bold white on green",
    "profit-low": "green",
    "loss-low": "red",
    "loss-high": "bold white on red",
    "no-trades": "dim",
}


def get_config(ctx: click.Context) -> AnalyticsConfig:
    """Load configuration, honoring the --config option."""
    obj = ctx.obj or {}
    return load_config(obj.get("config_path"))


def get_snapshot(ctx: click.Context, config: AnalyticsConfig) -> JournalSnapshot:
    """Load the journal snapshot, exiting with an error panel on failure."""
    obj = ctx.obj or {}
    data_path = obj.get("data_path") or config.data_path

    try:
        return load_snapshot(data_path, commission=config.commission)
    except SnapshotError as e:
        error_panel(
            f"[red]{e}[/red]\n\n"
            "Export your journal to JSON and pass it with [cyan]--data[/cyan], "
            "or set [cyan]data_path[/cyan] under [cyan][journal][/cyan] in config.toml."
        )
        raise SystemExit(1)
    except ValidationError as e:
        error_panel(f"[red]Journal file contains invalid records:[/red]\n\n{e}")
        raise SystemExit(1)


def error_panel(message: str) -> None:
    console.print(Panel(
        message,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))


def pnl_markup(value: Optional[float], symbol: str) -> str:
    """Colored currency markup: green for gains and flat, red for losses."""
    value = value or 0.0
    color = "green" if value >= 0 else "red"
    return f"[{color}]{format_currency(value, symbol)}[/{color}]"
