#!/usr/bin/env python3
"""Main CLI entry point for studiobot."""
from __future__ import annotations

import sys

import click
from dotenv import load_dotenv
from rich.console import Console

from .commands import config, run

console = Console()


@click.group()
@click.version_option(version="0.1.0", prog_name="studiobot")
def cli():
    """
    studiobot - bulk YouTube Studio chores through the Studio web UI.

    Publish every draft in one go, or sort a playlist by title.
    """


cli.add_command(run.run_command)
cli.add_command(config.config_command)


def main():
    """Entry point for the CLI."""
    load_dotenv()
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
