# ABOUTME: The `sparkshelf covers` command: ranked cover URLs for a set of identifiers.
# ABOUTME: Optionally probes each candidate with HEAD requests and reports the first real image.

import click
from rich.console import Console

from sparkshelf.cli.options import http_client_from_context
from sparkshelf.metadata.covers import CoverValidator, best_cover_candidates
from sparkshelf.metadata.http import SparkshelfHttpClient

console = Console()


def _create_http_client(ctx: click.Context) -> SparkshelfHttpClient:
    return http_client_from_context(ctx)


@click.command("covers")
@click.option("--isbn", "isbns", multiple=True, help="ISBN-10 or ISBN-13; repeatable.")
@click.option("--cover-id", type=click.IntRange(min=1), default=None, help="Open Library cover id.")
@click.option(
    "--size",
    type=click.Choice(["S", "M", "L"], case_sensitive=False),
    default="L",
    show_default=True,
)
@click.option(
    "--validate",
    is_flag=True,
    default=False,
    help="Probe candidates and print only the first one that serves a real image.",
)
@click.pass_context
def covers(
    ctx: click.Context,
    isbns: tuple[str, ...],
    cover_id: int | None,
    size: str,
    validate: bool,
) -> None:
    """List cover image URLs to try for a book, best first."""
    size_code = size.upper()
    candidates = best_cover_candidates(isbns, cover_id, size_code)  # type: ignore[arg-type]
    if not candidates:
        console.print("[yellow]No identifiers given, no cover candidates.[/yellow]")
        return

    if not validate:
        for index, url in enumerate(candidates, start=1):
            console.print(f"{index}. {url}", soft_wrap=True)
        return

    validator = CoverValidator(_create_http_client(ctx))
    url = validator.best_valid_cover_url(isbns, cover_id, size_code)  # type: ignore[arg-type]
    if url is None:
        console.print(f"[red]None of {len(candidates)} candidate(s) served a cover.[/red]")
        raise SystemExit(1)
    console.print(url, soft_wrap=True)
