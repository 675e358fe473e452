"""Run one Studio workflow in a browser."""
from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

from studiobot.browser.automation import BrowserAutomation, BrowserConfig
from studiobot.config import SORT_ORDERS, BotConfig, Mode, Visibility, get_settings
from studiobot.log import configure_logging
from studiobot.workflows import RunReport, run

console = Console()


@click.command(name="run")
@click.argument("mode", type=click.Choice(["publish-drafts", "sort-playlist"]))
@click.option("--url", help="Page to open before running (defaults to Studio home; an attached tab stays where it is)")
@click.option("--profile-dir", type=click.Path(file_okay=False), help="Persistent browser profile directory")
@click.option("--cdp-url", help="Attach to a running Chrome, e.g. http://127.0.0.1:9222")
@click.option("--headless/--headed", default=None, help="Run the launched browser headless")
@click.option("--slow-mo", type=int, help="Delay every Playwright operation by this many milliseconds")
@click.option("--locale", help="Browser locale for launched browsers, e.g. en-US")
@click.option("--visibility", type=click.Choice(["private", "unlisted", "public"], case_sensitive=False),
              help="Visibility given to published drafts")
@click.option("--made-for-kids/--not-made-for-kids", default=None, help="Audience answer for published drafts")
@click.option("--order", type=click.Choice(sorted(SORT_ORDERS)), help="Playlist sort direction")
@click.option("--debug/--no-debug", default=None, help="Trace every lookup and click")
@click.option("--settle-ms", type=int, help="Pause after each click, raise for slow connections")
@click.option("--wait/--no-wait", default=True, help="Ask before starting so the page can be prepared")
def run_command(
    mode: str,
    url: Optional[str],
    profile_dir: Optional[str],
    cdp_url: Optional[str],
    headless: Optional[bool],
    slow_mo: Optional[int],
    locale: Optional[str],
    visibility: Optional[str],
    made_for_kids: Optional[bool],
    order: Optional[str],
    debug: Optional[bool],
    settle_ms: Optional[int],
    wait: bool,
):
    """
    Run a bulk workflow against YouTube Studio.

    MODE: publish-drafts or sort-playlist.

    Examples:

      studiobot run publish-drafts --visibility public --profile-dir ~/.studiobot/profile

      studiobot run sort-playlist --cdp-url http://127.0.0.1:9222 --order desc
    """
    settings = get_settings()
    config = build_bot_config(
        settings.to_bot_config(),
        mode=mode,
        visibility=visibility,
        made_for_kids=made_for_kids,
        order=order,
        debug=debug,
        settle_ms=settle_ms,
    )
    browser_config = BrowserConfig(
        headless=settings.headless if headless is None else headless,
        user_data_dir=profile_dir or settings.profile_dir,
        cdp_url=cdp_url or settings.cdp_url,
        slow_mo=settings.slow_mo if slow_mo is None else slow_mo,
        locale=locale or settings.locale,
    )
    asyncio.run(_run_workflow(config, browser_config, url or settings.url, wait))


def build_bot_config(
    base: BotConfig,
    *,
    mode: str,
    visibility: Optional[str] = None,
    made_for_kids: Optional[bool] = None,
    order: Optional[str] = None,
    debug: Optional[bool] = None,
    settle_ms: Optional[int] = None,
) -> BotConfig:
    """Apply command line overrides on top of the environment settings."""
    return base.with_overrides(
        mode=Mode.parse(mode),
        visibility=Visibility.parse(visibility) if visibility else None,
        made_for_kids=made_for_kids,
        sort_compare=SORT_ORDERS[order] if order else None,
        debug=debug,
        timings=replace(base.timings, settle_ms=settle_ms) if settle_ms is not None else None,
    )


async def _run_workflow(config: BotConfig, browser_config: BrowserConfig, url: Optional[str], wait: bool):
    """Open the browser, optionally wait for the user, then run the workflow."""
    configure_logging(config.debug, console)
    console.print(Panel(
        f"[bold cyan]Starting {config.mode.value}[/bold cyan]\n\n"
        f"Visibility: [yellow]{config.visibility.label}[/yellow]\n"
        f"Made for kids: [yellow]{config.made_for_kids}[/yellow]\n"
        f"Settle: [yellow]{config.timings.settle_ms}ms[/yellow]",
        border_style="cyan"
    ))

    async with BrowserAutomation(browser_config) as automation:
        page = await automation.open_page(url)
        console.print(f"[green]✓[/green] Page ready: {page.url}")

        if wait:
            ready = await asyncio.to_thread(
                Confirm.ask, "[cyan]Open the drafts list or playlist, then start?[/cyan]", default=True
            )
            if not ready:
                console.print("[yellow]Cancelled[/yellow]")
                return

        report = RunReport(mode=config.mode)
        try:
            await run(page, config, report)
        except Exception:
            _display_report(report, failed=True)
            raise
        _display_report(report)


def _display_report(report: RunReport, failed: bool = False):
    """Display the run summary."""
    title = "[bold red]Run Stopped[/bold red]" if failed else "[bold cyan]Run Complete[/bold cyan]"
    console.print()
    console.print(Panel(title, border_style="red" if failed else "cyan"))

    results_table = Table(show_header=False, border_style="blue")
    results_table.add_column("Metric", style="cyan")
    results_table.add_column("Value", style="yellow")

    results_table.add_row("Mode", report.mode.value)
    results_table.add_row("Items Found", str(report.found))
    results_table.add_row("Eligible", str(report.eligible))
    results_table.add_row("Processed", str(len(report.processed)))
    results_table.add_row("Elapsed", f"{report.elapsed_seconds:.1f}s")
    results_table.add_row("Completed", "✓ Yes" if report.completed and not failed else "✗ No")
    console.print(results_table)

    if report.processed:
        history_table = Table(
            title="Processed Items",
            show_header=True,
            header_style="bold magenta",
            border_style="magenta"
        )
        history_table.add_column("#", width=4)
        history_table.add_column("Item", style="cyan")
        for i, item in enumerate(report.processed, 1):
            history_table.add_row(str(i), item[:60])
        console.print(history_table)
