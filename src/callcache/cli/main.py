"""
Main CLI entry point for callcache.

Each command runs against a fresh set of caches that lives only for the
duration of the command.
"""

import asyncio
import sys
from typing import Any, Awaitable, Callable

import click

from callcache import __version__
from callcache.cache.resources import ResourceCaches
from callcache.cli.output import (
    print_error,
    print_response,
    print_stats_table,
    print_success,
    print_warning,
)
from callcache.clients.backend import CachingFetchClient
from callcache.core.exceptions import CallCacheError
from callcache.core.logging import DEFAULT_LOG_LEVEL, setup_logging
from callcache.core.models import ItemInclude


def run_async(coro: Awaitable[Any]) -> Any:
    """Run an async coroutine to completion."""
    return asyncio.run(coro)


async def _with_client(
    ctx: click.Context,
    action: Callable[[CachingFetchClient], Awaitable[Any]],
) -> tuple[Any, CachingFetchClient]:
    async with CachingFetchClient(
        ctx.obj["base_url"],
        caches=ResourceCaches.create(),
        timeout=ctx.obj["timeout"],
    ) as client:
        return await action(client), client


def _fetch_and_print(ctx: click.Context, action: Callable[[CachingFetchClient], Awaitable[Any]]) -> None:
    try:
        data, _ = run_async(_with_client(ctx, action))
    except CallCacheError as e:
        print_error(f"Request failed: {e}")
        sys.exit(1)

    print_response(data)
    if isinstance(data, dict) and not data.get("success"):
        print_warning("Backend reported failure; response was not cached.")


@click.group()
@click.version_option(version=__version__, prog_name="callcache")
@click.option(
    "--base-url",
    envvar="CALLCACHE_BASE_URL",
    default="http://localhost:3000/api",
    show_default=True,
    help="Backend root URL.",
)
@click.option(
    "--timeout",
    envvar="CALLCACHE_TIMEOUT",
    type=float,
    default=30.0,
    show_default=True,
    help="Request timeout in seconds.",
)
@click.option(
    "--log-level",
    envvar="CALLCACHE_LOG_LEVEL",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL.lower(),
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, base_url: str, timeout: float, log_level: str) -> None:
    """Call-recording backend client with response caching.

    Fetches recording listings, analyses and dashboard aggregates through
    bounded in-memory caches.
    """
    setup_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url.rstrip("/")
    ctx.obj["timeout"] = timeout


@cli.command()
@click.option("--page", "-p", type=int, default=1, show_default=True, help="Page number.")
@click.option("--limit", "-l", type=int, default=20, show_default=True, help="Entries per page.")
@click.option("--search", "-s", help="Search term.")
@click.pass_context
def listings(ctx: click.Context, page: int, limit: int, search: str | None) -> None:
    """Fetch a page of recordings.

    \b
    Examples:
        callcache listings                 # First page
        callcache listings -p 2 -l 50      # Second page of 50
        callcache listings -s "renewal"    # Search
    """
    _fetch_and_print(ctx, lambda client: client.get_listings(page, limit, search))


@cli.command()
@click.argument("identifier")
@click.option(
    "--include", "-i",
    type=click.Choice([i.value for i in ItemInclude]),
    default=ItemInclude.SUMMARY.value,
    show_default=True,
    help="Fields to load.",
)
@click.pass_context
def item(ctx: click.Context, identifier: str, include: str) -> None:
    """Fetch the analysis for recording IDENTIFIER."""
    _fetch_and_print(ctx, lambda client: client.get_item(identifier, include))


@cli.command()
@click.option("--activity", is_flag=True, help="Include recent activity.")
@click.pass_context
def aggregates(ctx: click.Context, activity: bool) -> None:
    """Fetch dashboard aggregates."""
    _fetch_and_print(ctx, lambda client: client.get_aggregates(activity))


@cli.command()
@click.argument("subject")
@click.pass_context
def preload(ctx: click.Context, subject: str) -> None:
    """Warm the caches for SUBJECT and show what was cached.

    Failures are logged, never fatal.
    """
    _, client = run_async(_with_client(ctx, lambda c: c.preload(subject)))

    print_stats_table(client.stats())
    print_success(f"Preload finished for {subject}")


if __name__ == "__main__":
    cli()
