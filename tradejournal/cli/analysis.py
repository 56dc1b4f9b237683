"""Analysis commands for the trading journal CLI.

Handles trade distributions and behavioral insights.
"""

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics.buckets import (
    by_day_of_week,
    by_market_session,
    by_risk_reward_band,
    by_strategy,
)
from tradejournal.analytics.insights import compose, compose_confidence
from tradejournal.cli.common import (
    TONE_STYLES,
    console,
    get_config,
    get_snapshot,
    pnl_markup,
)


@click.command()
@click.pass_context
def buckets(ctx: click.Context) -> None:
    """Display how trades distribute across categories.

    Shows trade counts by risk:reward band, win rate by strategy,
    and day-of-week and session performance.

    \b
    Examples:
      tradejournal buckets
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)
    trades = snapshot.trades
    currency = config.currency_symbol

    if not trades:
        console.print(Panel(
            "[dim]No trades recorded yet.[/dim]",
            title="[bold]Distributions[/bold]",
            border_style="dim",
        ))
        return

    rr_table = Table(title="Risk:Reward Bands", show_header=True, header_style="bold cyan")
    rr_table.add_column("Band", style="bold")
    rr_table.add_column("Trades", justify="right")
    for band, count in by_risk_reward_band(trades).items():
        rr_table.add_row(band, str(count))
    console.print(rr_table)

    strategy_table = Table(title="Strategy Win Rate", show_header=True, header_style="bold cyan")
    strategy_table.add_column("Strategy", style="bold")
    strategy_table.add_column("Trades", justify="right")
    strategy_table.add_column("Wins", justify="right")
    strategy_table.add_column("Win %", justify="right")
    for name, bucket in by_strategy(trades).items():
        strategy_table.add_row(escape(name) or "-", str(bucket.count), str(bucket.wins), f"{bucket.win_rate}%")
    console.print(strategy_table)

    for title, rows in (
        ("Day-of-Week Analysis", by_day_of_week(trades)),
        ("Market Session Analysis", by_market_session(trades)),
    ):
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Period", style="bold")
        table.add_column("Trades", justify="right")
        table.add_column("Win %", justify="right")
        table.add_column("Net P&L", justify="right")
        for period, bucket in rows.items():
            table.add_row(
                escape(period) or "-",
                str(bucket.count),
                f"{bucket.win_rate}%",
                pnl_markup(bucket.net_pl, currency),
            )
        console.print(table)


@click.command()
@click.pass_context
def insights(ctx: click.Context) -> None:
    """Display behavioral insights drawn from your trades.

    Looks for recurring losing patterns, FOMO and early entries,
    emotional exits, setup quality and time-of-day performance.

    \b
    Examples:
      tradejournal insights
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)

    for item in compose(snapshot.trades, config):
        style = TONE_STYLES[item.tone]
        console.print(Panel(
            escape(item.body),
            title=f"[bold {style}]{item.title}[/bold {style}]",
            border_style=style,
        ))

    confidence = compose_confidence(snapshot.confidence)
    console.print(Panel(
        confidence.body,
        title=f"[bold cyan]{confidence.title}[/bold cyan]",
        border_style="cyan",
    ))
