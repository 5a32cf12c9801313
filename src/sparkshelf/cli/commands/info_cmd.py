# ABOUTME: The `sparkshelf info` command for displaying a cataloged book.
# ABOUTME: Shows all fields for a single book by catalog ID.

from contextlib import closing
from pathlib import Path

import click
from rich.console import Console

from sparkshelf.cli.display import book_table
from sparkshelf.cli.options import db_option
from sparkshelf.db.catalog import BookCatalog
from sparkshelf.db.connection import DEFAULT_DB_PATH, open_catalog
from sparkshelf.metadata.covers import best_cover_candidates

console = Console()


@click.command("info")
@click.argument("book_id", type=int)
@db_option
def info(book_id: int, db_path: Path | None) -> None:
    """Show detailed metadata for a book by ID."""
    with closing(open_catalog(db_path or DEFAULT_DB_PATH)) as conn:
        record = BookCatalog(conn).get_by_id(book_id)

    if record is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    console.print(book_table(record.metadata, record))

    fallbacks = best_cover_candidates(record.metadata.isbns)
    if len(fallbacks) > 1:
        console.print("\n[dim]Cover fallbacks:[/dim]")
        for url in fallbacks:
            console.print(f"  {url}", soft_wrap=True)
