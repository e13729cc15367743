"""Click CLI for fragcache — render the dashboard and inspect the fragment cache."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fragcache.config.hierarchy import load_config_hierarchy
from fragcache.errors.exceptions import ConfigError

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


@click.group()
@click.version_option(package_name="fragcache")
def cli() -> None:
    """fragcache — memoized fragment rendering for the task dashboard."""


@cli.command()
@click.option("-o", "--output", type=click.Path(), help="Write the page to this file.")
@click.option(
    "--tasks", "tasks_file", type=click.Path(exists=True), help="YAML file with a 'tasks' list."
)
@click.option("--has-prd", is_flag=True, default=False, help="Render as if a PRD exists.")
@click.option("--no-cache", is_flag=True, default=False, help="Bypass the fragment cache.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def render(
    output: str | None,
    tasks_file: str | None,
    has_prd: bool,
    no_cache: bool,
    verbose: int,
) -> None:
    """Render the dashboard HTML page."""
    from fragcache.config.loader import load_tasks_yaml
    from fragcache.core import Dashboard

    config = load_config_hierarchy(use_cache=False if no_cache else None)
    _setup_logging(verbose, str(config.get("log_level", "WARNING")))

    tasks = []
    if tasks_file:
        try:
            tasks = load_tasks_yaml(tasks_file)
        except ValueError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)

    try:
        dashboard = Dashboard.from_settings(config)
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    open_tasks = [t for t in tasks if t.is_open]
    html = dashboard.render(
        has_prd=has_prd or bool(tasks),
        next_task=open_tasks[0] if open_tasks else None,
        all_tasks=tasks,
        total_tasks=len(tasks),
    )

    if output:
        Path(output).write_text(html)
        console.print(f"[green]Written to {output}[/green]")
    else:
        click.echo(html)


@cli.command("fragment")
@click.argument("key")
def show_fragment(key: str) -> None:
    """Print a single static fragment."""
    from fragcache.cache.store import FragmentCache
    from fragcache.errors.exceptions import UnknownFragmentKeyError

    cache = FragmentCache()
    try:
        click.echo(cache.get(key))
    except UnknownFragmentKeyError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@cli.command("keys")
def list_keys() -> None:
    """List every fragment key with its rendered size."""
    from fragcache.cache.store import FragmentCache

    cache = FragmentCache()
    cache.prewarm()

    table = Table(title="Fragment Keys", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Size (bytes)", justify="right")

    for key in cache.keys():
        entry = cache.get_entry(key)
        table.add_row(key.value, f"{entry.size_bytes:,}" if entry else "-")

    console.print(table)


@cli.group()
def cache() -> None:
    """Fragment cache commands."""


@cache.command("stats")
@click.option("--renders", type=int, default=1, show_default=True, help="Pages to render first.")
@click.option("--prewarm", is_flag=True, default=False, help="Prewarm before rendering.")
def cache_stats(renders: int, prewarm: bool) -> None:
    """Render pages in-process and show fragment cache statistics."""
    from fragcache.core import Dashboard

    try:
        dashboard = Dashboard.from_config(prewarm=prewarm or None, use_cache=True)
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    for _ in range(max(renders, 0)):
        dashboard.render()

    stats = dashboard.stats()

    table = Table(title="Cache Statistics", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value")
    table.add_row("Entries", str(stats.entry_count))
    table.add_row("Size (bytes)", f"{stats.total_size_bytes:,}")
    table.add_row("Hits", str(stats.total_hits))
    table.add_row("Misses", str(stats.total_misses))
    table.add_row("Hit rate", f"{stats.hit_rate:.1f}%")
    console.print(table)

    if stats.entries_by_hits:
        ranking = Table(title="Entries by Hits", show_header=True)
        ranking.add_column("Key", style="cyan")
        ranking.add_column("Hits", justify="right")
        for item in stats.entries_by_hits:
            ranking.add_row(item.key.value, str(item.hit_count))
        console.print(ranking)


def main() -> None:
    """Entry point for the CLI."""
    cli()
