# ABOUTME: CLI package for sparkshelf, built on Click.
# ABOUTME: Defines the root command group, its logging/HTTP options, and registers subcommands.

import click

from sparkshelf.cli.commands import (
    browse_cmd,
    covers_cmd,
    info_cmd,
    ls_cmd,
    reflect_cmd,
    resolve_cmd,
    search_cmd,
)
from sparkshelf.cli.logging_config import configure_logging
from sparkshelf.cli.options import HttpSettings


@click.group()
@click.version_option(package_name="sparkshelf")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0.0, min_open=True),
    default=30.0,
    show_default=True,
    help="HTTP timeout in seconds.",
)
@click.option(
    "--retries",
    type=click.IntRange(0, 10),
    default=0,
    show_default=True,
    help="Retries for rate-limited or 5xx responses.",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0.0),
    default=0.0,
    show_default=True,
    help="Minimum seconds between HTTP requests.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, timeout: float, retries: int, interval: float) -> None:
    """sparkshelf - find books, track covers, and reflect on what you read."""
    configure_logging(verbose)
    ctx.obj = HttpSettings(timeout=timeout, retries=retries, interval=interval)


cli.add_command(search_cmd.search)
cli.add_command(browse_cmd.trending)
cli.add_command(browse_cmd.category)
cli.add_command(resolve_cmd.resolve)
cli.add_command(info_cmd.info)
cli.add_command(ls_cmd.ls)
cli.add_command(covers_cmd.covers)
cli.add_command(reflect_cmd.question)
cli.add_command(reflect_cmd.prompts)
