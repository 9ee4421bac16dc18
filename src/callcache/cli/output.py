"""
Rich terminal output helpers for the CLI.
"""

from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from callcache.core.models import CacheStats

# Console instance for all output
console = Console()


def get_usage_style(stats: CacheStats) -> str:
    """Get Rich style string for how full a cache is."""
    if stats.max_size == 0:
        return "dim"
    ratio = stats.size / stats.max_size
    if ratio >= 1:
        return "red"
    elif ratio >= 0.8:
        return "yellow"
    return "green"


def print_response(data: Any) -> None:
    """Print a backend response body as highlighted JSON."""
    console.print_json(data=data)


def print_stats_table(stats: dict[str, CacheStats]) -> None:
    """Print a table of cache statistics, one row per resource class.

    Args:
        stats: Mapping of resource name to its CacheStats.
    """
    table = Table(
        title="Cache Statistics",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Cache", style="cyan", no_wrap=True)
    table.add_column("Entries", justify="right")
    table.add_column("Valid", justify="right")
    table.add_column("Expired", justify="right")
    table.add_column("Memory", justify="right", style="dim")

    for name, cache_stats in stats.items():
        usage = Text(
            f"{cache_stats.size}/{cache_stats.max_size}",
            style=get_usage_style(cache_stats),
        )
        table.add_row(
            name,
            usage,
            str(cache_stats.valid_entries),
            str(cache_stats.expired_entries),
            cache_stats.memory_usage,
        )

    console.print(table)


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/] {message}")
