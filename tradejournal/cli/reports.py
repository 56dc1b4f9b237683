"""Report commands for the trading journal CLI.

Handles the P&L calendar, periodic and breakdown reports, and CSV export.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics import reports as report_fns
from tradejournal.analytics.calendar import WEEKDAY_HEADERS, build_month, month_label, shift_month
from tradejournal.analytics.export import export_csv
from tradejournal.analytics.formatting import format_currency
from tradejournal.cli.common import (
    TIER_STYLES,
    console,
    get_config,
    get_snapshot,
    pnl_markup,
)

REPORT_KINDS = ["weekly", "monthly", "strategy", "emotion", "rules", "all"]


@click.command()
@click.option("--year", type=int, default=None, help="Calendar year (default: current).")
@click.option(
    "--month",
    type=click.IntRange(1, 12),
    default=None,
    help="Calendar month 1-12 (default: current).",
)
@click.option(
    "--offset",
    type=int,
    default=0,
    help="Months to move from the selected month (e.g. -1 for the previous month).",
)
@click.pass_context
def calendar(ctx: click.Context, year: Optional[int], month: Optional[int], offset: int) -> None:
    """Display a month calendar colored by daily net P&L.

    \b
    Examples:
      tradejournal calendar               # This month
      tradejournal calendar --offset -1   # Last month
      tradejournal calendar --year 2025 --month 3
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)

    today = date.today()
    year, month = shift_month(year or today.year, month or today.month, offset)
    cells = build_month(snapshot.trades, year, month, config)

    table = Table(
        title=month_label(year, month),
        show_header=True,
        header_style="bold cyan",
        show_lines=True,
    )
    for header in WEEKDAY_HEADERS:
        table.add_column(header, justify="center", min_width=7)

    week: list[str] = []
    for cell in cells:
        if cell.is_blank:
            week.append("")
        else:
            style = TIER_STYLES[cell.tier]
            text = str(cell.day)
            if cell.trades:
                text += f"\n{format_currency(cell.net_pl, config.currency_symbol)}"
            week.append(f"[{style}]{text}[/{style}]")
        if len(week) == 7:
            table.add_row(*week)
            week = []
    if week:
        table.add_row(*(week + [""] * (7 - len(week))))

    console.print(table)

    traded = [c for c in cells if c.trades]
    month_pl = sum(c.net_pl for c in traded)
    console.print(
        f"\n[bold]Trading days:[/bold] {len(traded)} | "
        f"[bold]Month P&L:[/bold] {pnl_markup(month_pl, config.currency_symbol)}"
    )


def _period_panel(report, currency: str, show_extremes: bool) -> Panel:
    title = f"[bold cyan]{report.period.capitalize()} Report[/bold cyan]"
    if report.is_empty:
        return Panel(f"[dim]{report.message}[/dim]", title=title, border_style="dim")

    s = report.stats
    text = (
        f"Trades:   {s.total_trades}\n"
        f"Win Rate: {s.win_rate}%\n"
        f"Net P&L:  {pnl_markup(s.total_pl, currency)}"
    )
    if show_extremes:
        text += (
            f"\nBest Trade:  [green]{format_currency(s.best_trade, currency)}[/green]"
            f"\nWorst Trade: [red]{format_currency(s.worst_trade, currency)}[/red]"
        )
    return Panel(text, title=title, border_style="cyan")


def _print_strategy_report(trades, currency: str) -> None:
    rows = report_fns.by_strategy(trades)
    if not rows:
        console.print("[dim]No strategies defined.[/dim]")
        return

    table = Table(title="Strategy Report", show_header=True, header_style="bold cyan")
    table.add_column("Strategy", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("Win %", justify="right")
    table.add_column("Net P&L", justify="right")
    for row in rows:
        table.add_row(
            escape(row.strategy),
            str(row.stats.total_trades),
            f"{row.stats.win_rate}%",
            pnl_markup(row.stats.total_pl, currency),
        )
    console.print(table)


def _print_emotion_report(trades, currency: str) -> None:
    result = report_fns.by_emotion(trades)
    if result is None:
        console.print("[dim]No emotional data recorded.[/dim]")
        return

    most, least = result.most_profitable, result.least_profitable
    console.print(Panel(
        f"Most Profitable Emotion:  {escape(most.emotion)} "
        f"({format_currency(most.average_pl, currency)}/trade)\n"
        f"Least Profitable Emotion: {escape(least.emotion)} "
        f"({format_currency(least.average_pl, currency)}/trade)",
        title="[bold cyan]Emotional Report[/bold cyan]",
        border_style="cyan",
    ))


def _print_rules_report(trades, rules) -> None:
    if not rules:
        console.print("[dim]No rules defined in your rulebook.[/dim]")
        return
    if not trades:
        console.print("[dim]No trades recorded to analyze rule adherence.[/dim]")
        return

    table = Table(title="Rulebook Adherence", show_header=True, header_style="bold cyan")
    table.add_column("Rule", style="bold")
    table.add_column("Followed", justify="right")
    table.add_column("Adherence", justify="right")
    for row in report_fns.rule_adherence(trades, rules):
        color = "green" if row.adherence >= 50 else "yellow"
        bar = "█" * (row.adherence // 10) + "░" * (10 - row.adherence // 10)
        table.add_row(
            escape(row.title),
            f"{row.followed} / {row.total}",
            f"[{color}]{bar} {row.adherence}%[/{color}]",
        )
    console.print(table)


@click.command()
@click.argument("kind", type=click.Choice(REPORT_KINDS), default="all")
@click.pass_context
def report(ctx: click.Context, kind: str) -> None:
    """Generate performance reports.

    \b
    KIND is one of:
      weekly    Trades entered in the last 7 days
      monthly   Trades entered this calendar month
      strategy  Statistics per strategy
      emotion   Most and least profitable pre-trade emotions
      rules     Rulebook adherence
      all       Everything above (default)

    \b
    Examples:
      tradejournal report
      tradejournal report weekly
      tradejournal report rules
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)
    trades = snapshot.trades
    currency = config.currency_symbol
    now = datetime.now()

    if kind in ("weekly", "all"):
        console.print(_period_panel(report_fns.weekly(trades, now, config), currency, False))
    if kind in ("monthly", "all"):
        console.print(_period_panel(report_fns.monthly(trades, now), currency, True))
    if kind in ("strategy", "all"):
        _print_strategy_report(trades, currency)
    if kind in ("emotion", "all"):
        _print_emotion_report(trades, currency)
    if kind in ("rules", "all"):
        _print_rules_report(trades, snapshot.rules)


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("trading_journal_data.csv"),
    show_default=True,
    help="Destination CSV file.",
)
@click.pass_context
def export(ctx: click.Context, output: Path) -> None:
    """Export all trades to a CSV file.

    \b
    Examples:
      tradejournal export
      tradejournal export -o trades.csv
    """
    config = get_config(ctx)
    snapshot = get_snapshot(ctx, config)

    if not snapshot.trades:
        console.print("[yellow]No trades to export[/yellow]")
        return

    output.write_text(export_csv(snapshot.trades), encoding="utf-8")
    console.print(f"[green]Exported {len(snapshot.trades)} trades to {output}[/green]")
