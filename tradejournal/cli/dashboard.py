"""Dashboard commands for the trading journal CLI.

Handles the summary statistics, trade history, notes and rulebook views.
"""

from datetime import date
from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics.formatting import format_currency, format_date
from tradejournal.analytics.insights import compose_confidence, compose_feedback
from tradejournal.analytics.reports import distinct_values, filter_trades, recent_trades
from tradejournal.analytics.stats import aggregate, equity_curve
from tradejournal.cli.common import (
    TONE_STYLES,
    console,
    get_config,
    get_snapshot,
    pnl_markup,
)


@click.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Display the dashboard summary.

    Shows total P&L, win rate, trade count and average risk:reward,
    the most recent trades and quick feedback.

    \b
    Examples:
      tradejournal stats
      tradejournal --data export.json stats
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)
    trades = snapshot.trades
    symbol = config.currency_symbol

    s = aggregate(trades)
    summary = (
        f"[bold]Total P&L:[/bold]    {pnl_markup(s.total_pl, symbol)}\n"
        f"[bold]Win Rate:[/bold]     {s.win_rate}%\n"
        f"[bold]Total Trades:[/bold] {s.total_trades}\n"
        f"[bold]Avg R:R:[/bold]      {s.avg_rr}\n"
        f"[bold]Best Trade:[/bold]   {pnl_markup(s.best_trade, symbol)}\n"
        f"[bold]Worst Trade:[/bold]  {pnl_markup(s.worst_trade, symbol)}"
    )

    curve = equity_curve(trades)
    if curve:
        peak = max(p.cumulative_pl for p in curve)
        summary += (
            f"\n\n[dim]Equity peak: {format_currency(peak, symbol)} | "
            f"Current: {format_currency(curve[-1].cumulative_pl, symbol)}[/dim]"
        )

    console.print(Panel(
        summary,
        title="[bold cyan]Dashboard[/bold cyan]",
        border_style="cyan",
    ))

    if not trades:
        console.print(Panel(
            "[dim]No trades yet. Record a trade to get started![/dim]",
            title="[bold]Recent Trades[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title="Recent Trades", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Symbol", style="bold")
    table.add_column("Direction", justify="center")
    table.add_column("P&L", justify="right")

    for trade in recent_trades(trades, config.recent_trades_limit):
        dir_color = "green" if trade.direction == "Long" else "red"
        table.add_row(
            format_date(trade.entry_date),
            escape(trade.symbol),
            f"[{dir_color}]{trade.direction}[/{dir_color}]",
            pnl_markup(trade.net_pl, symbol),
        )
    console.print(table)

    for item in compose_feedback(trades, config):
        style = TONE_STYLES[item.tone]
        console.print(f"[{style}]• {escape(item.body)}[/{style}]")

    confidence = compose_confidence(snapshot.confidence)
    console.print(f"\n[bold]{confidence.title}:[/bold] [dim]{confidence.body}[/dim]")


@click.command()
@click.option("--symbol", type=str, default=None, help="Only show this symbol.")
@click.option("--strategy", type=str, default=None, help="Only show this strategy.")
@click.pass_context
def history(ctx: click.Context, symbol: Optional[str], strategy: Optional[str]) -> None:
    """Display the trade history.

    \b
    Examples:
      tradejournal history
      tradejournal history --symbol RELIANCE
      tradejournal history --strategy Breakout
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)
    currency = config.currency_symbol

    if not snapshot.trades:
        console.print(Panel(
            "[dim]No trades recorded yet.[/dim]",
            title="[bold]Trade History[/bold]",
            border_style="dim",
        ))
        return

    rows = filter_trades(snapshot.trades, symbol=symbol, strategy=strategy)
    if not rows:
        symbols = escape(", ".join(distinct_values(snapshot.trades, "symbol")))
        strategies = escape(", ".join(s for s in distinct_values(snapshot.trades, "strategy") if s))
        console.print(Panel(
            "[dim]No trades match filter.[/dim]\n\n"
            f"[dim]Symbols: {symbols}[/dim]\n"
            f"[dim]Strategies: {strategies or '-'}[/dim]",
            title="[bold]Trade History[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title="Trade History", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Symbol", style="bold")
    table.add_column("Dir", justify="center")
    table.add_column("Qty", justify="right")
    table.add_column("Entry", justify="right")
    table.add_column("Exit", justify="right")
    table.add_column("P&L", justify="right")
    table.add_column("Strategy")

    for trade in rows:
        dir_color = "green" if trade.direction == "Long" else "red"
        table.add_row(
            format_date(trade.entry_date),
            escape(trade.symbol),
            f"[{dir_color}]{trade.direction}[/{dir_color}]",
            f"{trade.quantity:g}",
            format_currency(trade.entry_price, currency),
            format_currency(trade.exit_price, currency),
            pnl_markup(trade.net_pl, currency),
            escape(trade.strategy) or "-",
        )

    console.print(table)
    total = sum(t.net_pl for t in rows)
    console.print(f"\n[bold]Total Trades:[/bold] {len(rows)}")
    console.print(f"[bold]Total P&L:[/bold] {pnl_markup(total, currency)}")


@click.command()
@click.pass_context
def notes(ctx: click.Context) -> None:
    """Display today's note and the notes history.

    \b
    Examples:
      tradejournal notes
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)

    today = snapshot.note_for(date.today())
    console.print(Panel(
        escape(today.content) if today else "[dim]Nothing written for today yet.[/dim]",
        title="[bold cyan]Today's Note[/bold cyan]",
        border_style="cyan",
    ))

    if not snapshot.notes:
        console.print("[dim]You have not written any notes yet.[/dim]")
        return

    table = Table(title="Notes History", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="bold")
    table.add_column("Note")
    for note in snapshot.notes:
        table.add_row(note.date.strftime("%A, %d %B %Y"), escape(note.preview()))
    console.print(table)


@click.command()
@click.pass_context
def rules(ctx: click.Context) -> None:
    """Display the rulebook, newest rule first.

    \b
    Examples:
      tradejournal rules
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)

    if not snapshot.rules:
        console.print(Panel(
            "[dim]No rules defined in your rulebook.[/dim]",
            title="[bold]Rulebook[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title="Rulebook", show_header=True, header_style="bold cyan")
    table.add_column("Rule", style="bold")
    table.add_column("Description")
    for rule in snapshot.rules:
        table.add_row(escape(rule.title), escape(rule.description) or "-")
    console.print(table)
