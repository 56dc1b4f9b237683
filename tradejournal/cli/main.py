"""Main CLI entry point for the trading journal.

This module provides the main click group. Commands are grouped by the
module that defines them and imported the first time they are looked up.
"""

import importlib
import logging
from pathlib import Path
from typing import Optional

import click


class LazyGroup(click.Group):
    """A click Group whose commands live in separate modules.

    Each lazy command is registered as ``"package.module:attribute"`` and
    imported on first lookup. ``--help`` lists the commands under one heading
    per module instead of a single flat list.
    """

    def __init__(
        self,
        *args,
        lazy_subcommands: dict[str, str] | None = None,
        section_titles: dict[str, str] | None = None,
        **kwargs,
    ):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to ``module:attribute``
                paths. The attribute defaults to the command name.
            section_titles: Help heading for each module path, in display order.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}
        self._section_titles = section_titles or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        return sorted(set(super().list_commands(ctx)) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, importing its module on first use."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]
        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)
        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        module_path, _, attr_name = self._lazy_subcommands[cmd_name].partition(":")
        module = importlib.import_module(module_path)

        cmd = getattr(module, attr_name or cmd_name, None)
        if not isinstance(cmd, click.Command):
            raise click.ClickException(
                f"{module_path} does not define a '{attr_name or cmd_name}' command"
            )
        self.add_command(cmd, cmd_name)
        return cmd

    def _section_of(self, cmd_name: str) -> str:
        module_path = self._lazy_subcommands.get(cmd_name, "").partition(":")[0]
        return self._section_titles.get(module_path, "Commands")

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Write the command list, one section per defining module."""
        commands = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            commands.append((name, cmd))
        if not commands:
            return

        limit = formatter.width - 6 - max(len(name) for name, _ in commands)
        sections: dict[str, list[tuple[str, str]]] = {
            title: [] for title in self._section_titles.values()
        }
        for name, cmd in commands:
            sections.setdefault(self._section_of(name), []).append(
                (name, cmd.get_short_help_str(limit))
            )
        for title, rows in sections.items():
            if rows:
                with formatter.section(title):
                    formatter.write_dl(rows)


LAZY_SUBCOMMANDS = {
    "stats": "tradejournal.cli.dashboard:stats",
    "history": "tradejournal.cli.dashboard:history",
    "notes": "tradejournal.cli.dashboard:notes",
    "rules": "tradejournal.cli.dashboard:rules",
    "buckets": "tradejournal.cli.analysis:buckets",
    "insights": "tradejournal.cli.analysis:insights",
    "calendar": "tradejournal.cli.reports:calendar",
    "report": "tradejournal.cli.reports:report",
    "export": "tradejournal.cli.reports:export",
}

COMMAND_SECTIONS = {
    "tradejournal.cli.dashboard": "Dashboard Commands",
    "tradejournal.cli.analysis": "Analysis Commands",
    "tradejournal.cli.reports": "Report Commands",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=LazyGroup,
    lazy_subcommands=LAZY_SUBCOMMANDS,
    section_titles=COMMAND_SECTIONS,
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Journal JSON export to analyze (overrides config).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/tradejournal/config.toml).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(package_name="tradejournal")
@click.pass_context
def cli(
    ctx: click.Context,
    data_path: Optional[Path],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """TradeJournal - analytics for your personal trading journal.
    
    Reads an export of your trades, daily confidence, notes and rulebook,
    and shows statistics, calendars, reports and behavioral insights.
    
    \b
    Quick Start:
      tradejournal stats            # Dashboard summary
      tradejournal insights         # Behavioral insights
      tradejournal calendar         # This month's P&L calendar
      tradejournal report all       # Weekly, monthly and breakdown reports
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Context object carries paths to the lazily loaded commands
    ctx.ensure_object(dict)
    ctx.obj["data_path"] = data_path
    ctx.obj["config_path"] = config_path


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
