# ABOUTME: The `sparkshelf trending` and `sparkshelf category` browsing commands.
# ABOUTME: Shows Open Library trending works and subject listings.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sparkshelf.cli.options import http_client_from_context
from sparkshelf.metadata.http import MetadataFetchError
from sparkshelf.metadata.openlibrary import OpenLibraryClient
from sparkshelf.metadata.subjects import POPULAR_SUBJECTS

console = Console()

_MAX_BROWSE_LIMIT = 100


def _create_client(ctx: click.Context) -> OpenLibraryClient:
    return OpenLibraryClient(http_client=http_client_from_context(ctx))


def _works_table() -> Table:
    table = Table()
    table.add_column("Key", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Year", width=5)
    table.add_column("Editions", justify="right")
    return table


@click.command("trending")
@click.option(
    "--period",
    type=click.Choice(["daily", "weekly", "monthly", "yearly"]),
    default="daily",
    show_default=True,
)
@click.option("--limit", type=click.IntRange(1, _MAX_BROWSE_LIMIT), default=20, show_default=True)
@click.pass_context
def trending(ctx: click.Context, period: str, limit: int) -> None:
    """Show works trending on Open Library."""
    try:
        works = _create_client(ctx).get_trending(period, limit)  # type: ignore[arg-type]
    except MetadataFetchError as exc:
        console.print(f"[red]Failed to fetch trending books:[/red] {exc}")
        raise SystemExit(1) from exc

    if not works:
        console.print("[yellow]Nothing trending right now.[/yellow]")
        return

    table = _works_table()
    for work in works:
        table.add_row(
            work.key,
            escape(work.title),
            escape(", ".join(work.author_names)) or "[dim]unknown[/dim]",
            str(work.first_publish_year or ""),
            str(work.edition_count),
        )
    console.print(table)


@click.command("category")
@click.argument("subject", required=False)
@click.option("--limit", type=click.IntRange(1, _MAX_BROWSE_LIMIT), default=20, show_default=True)
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True)
@click.option(
    "--sort",
    type=click.Choice(["editions", "old", "new", "rating"]),
    default="editions",
    show_default=True,
)
@click.pass_context
def category(
    ctx: click.Context, subject: str | None, limit: int, offset: int, sort: str
) -> None:
    """List works for SUBJECT, or the browseable subjects when none is given."""
    if not subject:
        table = Table()
        table.add_column("Subject", style="bold")
        table.add_column("Name")
        for entry in POPULAR_SUBJECTS:
            table.add_row(entry.id, entry.name)
        console.print(table)
        return

    try:
        page = _create_client(ctx).get_subject_books(
            subject, limit=limit, offset=offset, sort=sort  # type: ignore[arg-type]
        )
    except MetadataFetchError as exc:
        console.print(f"[red]Failed to fetch subject {subject}:[/red] {exc}")
        raise SystemExit(1) from exc

    if not page.works:
        console.print(f"[yellow]No books found for {escape(page.name)}.[/yellow]")
        return

    table = _works_table()
    table.title = escape(page.name)
    for work in page.works:
        table.add_row(
            work.key,
            escape(work.title),
            escape(", ".join(work.author_names)) or "[dim]unknown[/dim]",
            str(work.first_publish_year or ""),
            str(work.edition_count),
        )
    console.print(table)

    shown = offset + len(page.works)
    more = " (more available)" if shown < page.work_count else ""
    console.print(f"\n[dim]{shown} of {page.work_count} work(s){more}[/dim]")
