# ABOUTME: The `sparkshelf ls` command for listing cataloged books.
# ABOUTME: Lists everything, books tagged with a genre, or full-text matches.

import sqlite3
from contextlib import closing
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sparkshelf.cli.options import db_option
from sparkshelf.db.catalog import BookCatalog
from sparkshelf.db.connection import DEFAULT_DB_PATH, open_catalog

console = Console()


@click.command("ls")
@db_option
@click.option("--genre", "genre_filter", default=None, help="Only books tagged with this genre.")
@click.option(
    "--match",
    "match_query",
    default=None,
    help="Full-text search over title, author, description and subjects.",
)
def ls(db_path: Path | None, genre_filter: str | None, match_query: str | None) -> None:
    """List books in the catalog."""
    with closing(open_catalog(db_path or DEFAULT_DB_PATH)) as conn:
        catalog = BookCatalog(conn)
        if match_query:
            try:
                records = catalog.search(match_query)
            except sqlite3.OperationalError as exc:
                console.print(f"[red]Invalid search query:[/red] {exc}")
                raise SystemExit(1) from exc
        elif genre_filter:
            records = catalog.list_by_genre(genre_filter)
        else:
            records = catalog.list_all()

    if not records:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Pages", justify="right")
    table.add_column("Genres")

    for record in records:
        meta = record.metadata
        table.add_row(
            str(record.id),
            escape(meta.title),
            escape(meta.author) or "[dim]unknown[/dim]",
            str(meta.page_count) if meta.page_count else "",
            escape(", ".join(meta.genres[:2])),
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")
