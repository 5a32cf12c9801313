# ABOUTME: Shared Click options and per-invocation settings for sparkshelf CLI commands.
# ABOUTME: Provides the --db option and builds HTTP clients from root-group settings.

from dataclasses import dataclass
from pathlib import Path

import click

from sparkshelf.db.connection import DEFAULT_DB_PATH
from sparkshelf.metadata.http import SparkshelfHttpClient

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="SPARKSHELF_DB",
    help=f"Path to catalog database (default: {DEFAULT_DB_PATH}, env: SPARKSHELF_DB)",
)


@dataclass
class HttpSettings:
    """HTTP knobs collected by the root command group."""

    timeout: float = 30.0
    retries: int = 0
    interval: float = 0.0


def http_client_from_context(ctx: click.Context) -> SparkshelfHttpClient:
    settings = ctx.find_object(HttpSettings) or HttpSettings()
    return SparkshelfHttpClient(
        timeout=settings.timeout,
        max_retries=settings.retries,
        min_request_interval=settings.interval,
    )
