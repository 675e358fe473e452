"""Configuration inspection commands."""
from __future__ import annotations

from dataclasses import asdict

import click
from rich.console import Console
from rich.table import Table

from studiobot.config import get_settings

console = Console()


@click.group(name="config")
def config_command():
    """
    Inspect studiobot configuration.

    Settings come from STUDIOBOT_* environment variables or a local .env file.
    """
    pass


@config_command.command(name="show")
def show_config():
    """Show the effective settings."""
    settings = get_settings()
    bot_config = settings.to_bot_config()

    run_table = Table(title="Workflow Settings", border_style="blue")
    run_table.add_column("Setting", style="cyan")
    run_table.add_column("Value", style="yellow")

    run_table.add_row("Mode", bot_config.mode.value)
    run_table.add_row("Visibility", bot_config.visibility.label)
    run_table.add_row("Made For Kids", str(bot_config.made_for_kids))
    run_table.add_row("Sort Order", settings.sort_order)
    run_table.add_row("Debug", str(bot_config.debug))
    console.print(run_table)
    console.print()

    timing_table = Table(title="Timings (ms)", border_style="magenta")
    timing_table.add_column("Setting", style="cyan")
    timing_table.add_column("Value", style="yellow")

    for name, value in asdict(bot_config.timings).items():
        timing_table.add_row(name, str(value))
    console.print(timing_table)
    console.print()

    browser_table = Table(title="Browser Settings", border_style="green")
    browser_table.add_column("Setting", style="cyan")
    browser_table.add_column("Value", style="yellow")

    browser_table.add_row("URL", settings.url or "[dim]Studio home[/dim]")
    browser_table.add_row("Profile Dir", settings.profile_dir or "[dim]Not set[/dim]")
    browser_table.add_row("CDP URL", settings.cdp_url or "[dim]Not set[/dim]")
    browser_table.add_row("Headless", str(settings.headless))
    browser_table.add_row("Slow Mo", f"{settings.slow_mo}ms")
    browser_table.add_row("Locale", settings.locale or "[dim]Browser default[/dim]")
    console.print(browser_table)
