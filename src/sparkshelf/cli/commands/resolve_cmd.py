# ABOUTME: The `sparkshelf resolve` command: fetch a work from Open Library into the catalog.
# ABOUTME: Returns the cached row for a work resolved before; --preview skips the catalog write.

from contextlib import closing
from pathlib import Path

import click
from rich.console import Console

from sparkshelf.cli.display import book_table
from sparkshelf.cli.options import db_option, http_client_from_context
from sparkshelf.core.resolver import BookNotFoundError, BookResolver
from sparkshelf.db.catalog import BookCatalog
from sparkshelf.db.connection import DEFAULT_DB_PATH, open_catalog
from sparkshelf.metadata.openlibrary import OpenLibraryClient

console = Console()


def _create_client(ctx: click.Context) -> OpenLibraryClient:
    """Create the default Open Library client from the root group's HTTP settings."""
    return OpenLibraryClient(http_client=http_client_from_context(ctx))


@click.command("resolve")
@click.argument("work_key")
@click.option(
    "--preview",
    is_flag=True,
    default=False,
    help="Fetch and show the book without adding it to the catalog.",
)
@db_option
@click.pass_context
def resolve(ctx: click.Context, work_key: str, preview: bool, db_path: Path | None) -> None:
    """Resolve an Open Library work key (e.g. /works/OL45804W) to a cataloged book."""
    client = _create_client(ctx)

    with closing(open_catalog(db_path or DEFAULT_DB_PATH)) as conn:
        resolver = BookResolver(client, BookCatalog(conn))
        try:
            if preview:
                console.print(book_table(resolver.fetch_metadata(work_key)))
                return
            record = resolver.resolve(work_key)
        except BookNotFoundError as exc:
            console.print(f"[red]Not found:[/red] {exc}")
            raise SystemExit(1) from exc

    console.print(book_table(record.metadata, record))
