# ABOUTME: The `sparkshelf search` command for online book discovery.
# ABOUTME: Searches Open Library (or Google Books) and shows results with cover fallbacks.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sparkshelf.cli.options import http_client_from_context
from sparkshelf.metadata.covers import best_cover_candidates
from sparkshelf.metadata.google_books import GoogleBooksClient
from sparkshelf.metadata.http import MetadataFetchError
from sparkshelf.metadata.openlibrary import OpenLibraryClient

console = Console()


def _create_client(ctx: click.Context) -> OpenLibraryClient:
    return OpenLibraryClient(http_client=http_client_from_context(ctx))


def _create_google_client(ctx: click.Context) -> GoogleBooksClient:
    return GoogleBooksClient(http_client=http_client_from_context(ctx))


def _show_open_library(client: OpenLibraryClient, query: str, limit: int, offset: int) -> None:
    page = client.search(query, limit=limit, offset=offset)
    if not page.results:
        console.print("[yellow]No results found.[/yellow]")
        return

    table = Table()
    table.add_column("Key", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Year", width=5)
    table.add_column("Covers", justify="right")

    for result in page.results:
        candidates = best_cover_candidates(result.isbns, result.cover_id)
        table.add_row(
            result.key,
            escape(result.title),
            escape(", ".join(result.author_names)) or "[dim]unknown[/dim]",
            str(result.first_publish_year or ""),
            str(len(candidates)),
        )

    console.print(table)
    console.print(f"\n[dim]{len(page.results)} of {page.total} result(s)[/dim]")


def _show_google(client: GoogleBooksClient, query: str, limit: int, offset: int) -> None:
    results, total = client.search(query, limit=limit, start_index=offset)
    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    table = Table()
    table.add_column("Volume", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Year", width=5)
    table.add_column("ISBN-13")

    for result in results:
        table.add_row(
            result.key,
            escape(result.title),
            escape(", ".join(result.authors)) or "[dim]unknown[/dim]",
            str(result.year or ""),
            result.isbn13 or "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(results)} of {total} result(s)[/dim]")


@click.command("search")
@click.argument("query")
@click.option("--limit", type=click.IntRange(1, 100), default=20, show_default=True)
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True)
@click.option(
    "--google",
    "use_google",
    is_flag=True,
    default=False,
    help="Search Google Books instead of Open Library.",
)
@click.pass_context
def search(ctx: click.Context, query: str, limit: int, offset: int, use_google: bool) -> None:
    """Search for books online by title, author or keyword."""
    try:
        if use_google:
            _show_google(_create_google_client(ctx), query, limit, offset)
        else:
            _show_open_library(_create_client(ctx), query, limit, offset)
    except MetadataFetchError as exc:
        console.print(f"[red]Search failed:[/red] {exc}")
        raise SystemExit(1) from exc
